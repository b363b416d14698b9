"""Enrichment providers backed by the archive proxy."""

import logging
from abc import abstractmethod
from typing import Any, Optional

from archive_lookup.config import settings
from archive_lookup.crawler import FetchGateway
from archive_lookup.errors import ProviderError
from archive_lookup.extract import first_text, pick_text, safe_url
from archive_lookup.models import Candidate, EnrichmentBit
from .base import EnrichmentProvider

logger = logging.getLogger(__name__)


class RecordLinkEnricher(EnrichmentProvider):
    """Point at the candidate's own record page. No network."""

    id = "record_link"
    label = "Record link"

    def supports(self, candidate: Candidate) -> bool:
        return bool(safe_url(candidate.url))

    async def enrich(self, candidate: Candidate) -> list[EnrichmentBit]:
        url = safe_url(candidate.url)
        if not url:
            return []
        return [
            EnrichmentBit(
                provider_id=self.id,
                type="link",
                title="Record page",
                confidence=0.35,
                url=url,
                fields={"source": candidate.source},
            )
        ]


class ProbeEnricher(EnrichmentProvider):
    """Probe ``<base>/<endpoint>?recordId=<id>`` and map the JSON answer."""

    endpoint: str = ""

    def __init__(
        self,
        base_url: Optional[str] = None,
        gateway: Optional[FetchGateway] = None,
    ):
        self.base_url = (base_url or settings.proxy_base).rstrip("/")
        self.gateway = gateway or FetchGateway()

    def supports(self, candidate: Candidate) -> bool:
        return bool(self.upstream_id(candidate))

    async def enrich(self, candidate: Candidate) -> list[EnrichmentBit]:
        record_id = self.upstream_id(candidate)
        if not record_id:
            return []

        try:
            payload = await self.gateway.get_json(
                f"{self.base_url}/{self.endpoint}",
                params={"recordId": record_id},
            )
        except ProviderError as e:
            logger.warning(f"{self.id} probe failed: {e.code}")
            return []

        if not isinstance(payload, dict):
            return []
        return self._parse_payload(payload, record_id)

    @abstractmethod
    def _parse_payload(self, payload: dict[str, Any], record_id: str) -> list[EnrichmentBit]:
        """Map the probe's JSON answer to bits, or [] without the expected field."""
        pass


class IIIFEnricher(ProbeEnricher):
    """IIIF manifest lookup."""

    id = "iiif"
    label = "IIIF manifest"
    endpoint = "iiif"

    def _parse_payload(self, payload: dict[str, Any], record_id: str) -> list[EnrichmentBit]:
        manifest = safe_url(first_text(
            payload.get("manifest"),
            payload.get("manifestUrl"),
            payload.get("@id"),
        ))
        if not manifest:
            return []
        return [
            EnrichmentBit(
                provider_id=self.id,
                type="iiif",
                title=pick_text(payload.get("label")) or "IIIF manifest",
                confidence=0.6,
                url=manifest,
                fields={"recordId": record_id},
            )
        ]


class OAIEnricher(ProbeEnricher):
    """OAI-PMH identifier lookup."""

    id = "oai"
    label = "OAI-PMH record"
    endpoint = "oai"

    def _parse_payload(self, payload: dict[str, Any], record_id: str) -> list[EnrichmentBit]:
        identifier = first_text(payload.get("identifier"), payload.get("oaiIdentifier"))
        if not identifier:
            return []

        fields = {"recordId": record_id, "identifier": identifier}
        for key in ("datestamp", "setSpec"):
            value = pick_text(payload.get(key))
            if value:
                fields[key] = value

        return [
            EnrichmentBit(
                provider_id=self.id,
                type="oai",
                title="OAI-PMH record",
                confidence=0.5,
                url=safe_url(first_text(payload.get("url"), payload.get("recordUrl"))),
                fields=fields,
            )
        ]
