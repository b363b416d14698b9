"""Time-bounded JSON fetcher with failure classification."""

import asyncio
import logging
from typing import Any, Optional
from urllib.parse import urlparse

import httpx

from archive_lookup.config import settings
from archive_lookup.errors import BadJSONError, NetworkOrTimeoutError, UpstreamHTTPError

logger = logging.getLogger(__name__)


class FetchGateway:
    """Single GET against the archive, classified into typed failures.

    Nothing is cached and nothing is retried. Response bodies are never
    logged because they carry personal data.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        self.user_agent = user_agent or settings.user_agent
        self._transport = transport

    async def get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        """Fetch ``url`` and return the decoded JSON body."""
        path = urlparse(url).path or "/"

        try:
            # wait_for cancels the request on timeout, which closes the connection
            response = await asyncio.wait_for(
                self._do_fetch(url, params),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Timeout after {self.timeout}s fetching {path}")
            raise NetworkOrTimeoutError(f"timeout fetching {path}")
        except httpx.TransportError as e:
            logger.warning(f"Request error fetching {path}: {type(e).__name__}")
            raise NetworkOrTimeoutError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.warning(f"Upstream returned {response.status_code} for {path}")
            raise UpstreamHTTPError(response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Undecodable JSON body from {path}")
            raise BadJSONError(str(e)) from e

    async def _do_fetch(self, url: str, params: Optional[dict[str, Any]]) -> httpx.Response:
        """Perform the actual HTTP GET and read the body."""
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            return await client.get(
                url,
                params=params,
                headers={
                    "User-Agent": self.user_agent,
                    "Accept": "application/json",
                },
            )
