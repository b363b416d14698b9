"""Tests for the search entry point."""

import pytest

from archive_lookup.connectors import ArchiveProvider, ProviderRegistry
from archive_lookup.errors import BadPayloadError
from archive_lookup.search import run_search


def make_registry(gateway) -> ProviderRegistry:
    return ProviderRegistry([
        ArchiveProvider(
            id="persons",
            label="Persons",
            endpoint="persons",
            base_url="https://archive.test",
            gateway=gateway,
        ),
    ])


class TestRunSearch:
    """Tests for provider selection and demo fallback."""

    @pytest.mark.asyncio
    async def test_auto_uses_remote(self, archive, gateway):
        archive.set("/persons", {"items": [{"id": "1", "objectType": "Agent", "type": "Person", "caption": "Lind, Erik"}]})
        outcome = await run_search(make_registry(gateway), "Lind")
        assert outcome.provider_id == "persons"
        assert [c.id for c in outcome.candidates] == ["1"]
        assert not outcome.fallback_used
        assert outcome.error is None

    @pytest.mark.asyncio
    async def test_error_propagates_without_fallback(self, archive, gateway):
        archive.set("/persons", {"unexpected": []})
        with pytest.raises(BadPayloadError):
            await run_search(make_registry(gateway), "Karl")

    @pytest.mark.asyncio
    async def test_demo_fallback(self, archive, gateway):
        archive.set("/persons", {"ok": False}, status=503)
        outcome = await run_search(make_registry(gateway), "Karl", demo_fallback=True)
        assert outcome.provider_id == "demo"
        assert outcome.fallback_used
        assert outcome.error == "UPSTREAM_HTTP_503"
        assert [c.name for c in outcome.candidates] == ["Karl Johansson"]

    @pytest.mark.asyncio
    async def test_explicit_demo(self, archive, gateway):
        outcome = await run_search(make_registry(gateway), "Erik", provider="demo")
        assert outcome.provider_id == "demo"
        assert archive.calls == []
