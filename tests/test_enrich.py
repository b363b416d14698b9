"""Tests for the enrichment pipeline."""

import pytest

from archive_lookup.enrich import (
    EnrichmentPipeline,
    EnrichmentProvider,
    IIIFEnricher,
    OAIEnricher,
    RecordLinkEnricher,
    default_enrich_providers,
)
from archive_lookup.enrich.probes import ProbeEnricher
from archive_lookup.extract import make_candidate

BASE_URL = "https://archive.test"


def make_person(**kwargs):
    defaults = {
        "id": "SE/RA/1",
        "name": "Odhelius, Erich",
        "source": "Riksarkivet",
        "url": "https://sok.riksarkivet.se/agent/1",
    }
    defaults.update(kwargs)
    return make_candidate(**defaults)


class ExplodingEnricher(EnrichmentProvider):
    id = "boom"

    def supports(self, candidate):
        return True

    async def enrich(self, candidate):
        raise RuntimeError("boom")


class TestEnrichers:
    """Tests for individual enrichment providers."""

    @pytest.mark.asyncio
    async def test_record_link(self):
        (bit,) = await RecordLinkEnricher().enrich(make_person())
        assert bit.provider_id == "record_link"
        assert bit.url == "https://sok.riksarkivet.se/agent/1"
        assert 0.0 <= bit.confidence <= 1.0

    def test_record_link_needs_url(self):
        assert not RecordLinkEnricher().supports(make_person(url=""))

    def test_probes_need_upstream_id(self, gateway):
        tmp = make_person(id=None)
        assert not IIIFEnricher(BASE_URL, gateway).supports(tmp)
        assert not OAIEnricher(BASE_URL, gateway).supports(tmp)
        assert IIIFEnricher(BASE_URL, gateway).supports(make_person())

    @pytest.mark.asyncio
    async def test_iiif_manifest(self, archive, gateway):
        archive.set("/iiif", {"manifest": "https://iiif.test/SE-RA-1/manifest", "label": "Bouppteckning"})
        (bit,) = await IIIFEnricher(BASE_URL, gateway).enrich(make_person())
        assert bit.type == "iiif"
        assert bit.title == "Bouppteckning"
        assert bit.url == "https://iiif.test/SE-RA-1/manifest"
        assert bit.fields == {"recordId": "SE/RA/1"}
        assert archive.calls[0].url.params["recordId"] == "SE/RA/1"

    @pytest.mark.asyncio
    async def test_iiif_missing_manifest(self, archive, gateway):
        archive.set("/iiif", {"ok": True})
        assert await IIIFEnricher(BASE_URL, gateway).enrich(make_person()) == []

    @pytest.mark.asyncio
    async def test_iiif_relative_manifest_ignored(self, archive, gateway):
        archive.set("/iiif", {"manifest": "/manifest.json"})
        assert await IIIFEnricher(BASE_URL, gateway).enrich(make_person()) == []

    @pytest.mark.asyncio
    async def test_oai_identifier(self, archive, gateway):
        archive.set("/oai", {"identifier": "oai:ra.se:SE/RA/1", "datestamp": "2024-01-01"})
        (bit,) = await OAIEnricher(BASE_URL, gateway).enrich(make_person())
        assert bit.type == "oai"
        assert bit.fields["identifier"] == "oai:ra.se:SE/RA/1"
        assert bit.fields["datestamp"] == "2024-01-01"
        assert bit.url == ""

    @pytest.mark.asyncio
    async def test_probe_http_error_is_empty(self, archive, gateway):
        archive.set("/oai", {"error": "x"}, status=500)
        assert await OAIEnricher(BASE_URL, gateway).enrich(make_person()) == []

    @pytest.mark.asyncio
    async def test_probe_bad_json_is_empty(self, archive, gateway):
        archive.set("/iiif", raw="{broken")
        assert await IIIFEnricher(BASE_URL, gateway).enrich(make_person()) == []

    @pytest.mark.asyncio
    async def test_probe_non_object_is_empty(self, archive, gateway):
        archive.set("/iiif", ["https://iiif.test/x"])
        assert await IIIFEnricher(BASE_URL, gateway).enrich(make_person()) == []

    def test_enricher_without_parser_cannot_be_built(self, gateway):
        class HalfEnricher(ProbeEnricher):
            id = "half"
            endpoint = "half"

        with pytest.raises(TypeError):
            HalfEnricher(BASE_URL, gateway)


class TestEnrichmentPipeline:
    """Tests for running enrichment providers together."""

    @pytest.mark.asyncio
    async def test_collects_all_bits(self, archive, gateway):
        archive.set("/iiif", {"manifest": "https://iiif.test/m"})
        archive.set("/oai", {"identifier": "oai:1"})
        pipeline = EnrichmentPipeline(default_enrich_providers(BASE_URL, gateway))
        bits = await pipeline.enrich(make_person())
        assert sorted(b.provider_id for b in bits) == ["iiif", "oai", "record_link"]

    @pytest.mark.asyncio
    async def test_unusable_candidate_yields_nothing(self, archive, gateway):
        pipeline = EnrichmentPipeline(default_enrich_providers(BASE_URL, gateway))
        bits = await pipeline.enrich(make_person(id=None, url="/relative"))
        assert bits == []
        assert archive.calls == []

    @pytest.mark.asyncio
    async def test_failing_provider_is_absorbed(self):
        pipeline = EnrichmentPipeline([ExplodingEnricher(), RecordLinkEnricher()])
        bits = await pipeline.enrich(make_person())
        assert [b.provider_id for b in bits] == ["record_link"]

    @pytest.mark.asyncio
    async def test_enrich_many(self, archive, gateway):
        archive.set("/iiif", {"ok": True})
        archive.set("/oai", {"ok": True})
        pipeline = EnrichmentPipeline(default_enrich_providers(BASE_URL, gateway))
        result = await pipeline.enrich_many([make_person(), make_person(id="SE/RA/2", url="")])
        assert [b.provider_id for b in result["SE/RA/1"]] == ["record_link"]
        assert result["SE/RA/2"] == []

    @pytest.mark.asyncio
    async def test_does_not_mutate_candidate(self):
        candidate = make_person()
        before = candidate.model_dump()
        await EnrichmentPipeline([RecordLinkEnricher()]).enrich(candidate)
        assert candidate.model_dump() == before
