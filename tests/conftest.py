"""Shared fixtures: a fake archive behind httpx.MockTransport."""

import json
from typing import Optional

import httpx
import pytest

from archive_lookup.crawler import FetchGateway

BASE_URL = "https://archive.test"


class FakeArchive:
    """Routes requests by path and counts them."""

    def __init__(self):
        self.routes: dict[str, object] = {}
        self.calls: list[httpx.Request] = []

    def set(self, path: str, body=None, status: int = 200, raw: Optional[str] = None):
        self.routes[path] = (status, body, raw)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        status, body, raw = self.routes.get(request.url.path, (404, {"ok": False}, None))
        if raw is not None:
            return httpx.Response(status, text=raw, headers={"Content-Type": "application/json"})
        return httpx.Response(status, content=json.dumps(body).encode("utf-8"),
                              headers={"Content-Type": "application/json"})


@pytest.fixture
def archive() -> FakeArchive:
    return FakeArchive()


@pytest.fixture
def gateway(archive) -> FetchGateway:
    return FetchGateway(timeout=2.0, transport=httpx.MockTransport(archive.handler))
