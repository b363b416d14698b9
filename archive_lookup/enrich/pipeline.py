"""Concurrent, fail-closed enrichment of candidates."""

import asyncio
import logging
from typing import Optional

from archive_lookup.crawler import FetchGateway
from archive_lookup.models import Candidate, EnrichmentBit
from .base import EnrichmentProvider
from .probes import IIIFEnricher, OAIEnricher, RecordLinkEnricher

logger = logging.getLogger(__name__)


def default_enrich_providers(
    base_url: Optional[str] = None,
    gateway: Optional[FetchGateway] = None,
) -> list[EnrichmentProvider]:
    """The standard enrichment providers sharing one gateway."""
    gateway = gateway or FetchGateway()
    return [
        RecordLinkEnricher(),
        IIIFEnricher(base_url=base_url, gateway=gateway),
        OAIEnricher(base_url=base_url, gateway=gateway),
    ]


class EnrichmentPipeline:
    """Run every supporting provider for a candidate concurrently."""

    def __init__(self, providers: Optional[list[EnrichmentProvider]] = None):
        self.providers = list(providers) if providers is not None else default_enrich_providers()

    async def enrich(self, candidate: Candidate) -> list[EnrichmentBit]:
        """Collect bits from all providers; failures contribute nothing."""
        active = [p for p in self.providers if self._supports(p, candidate)]
        if not active:
            return []

        results = await asyncio.gather(*(self._run(p, candidate) for p in active))

        bits: list[EnrichmentBit] = []
        for provider_bits in results:
            bits.extend(provider_bits)
        return bits

    async def enrich_many(self, candidates: list[Candidate]) -> dict[str, list[EnrichmentBit]]:
        """Enrich several candidates concurrently, keyed by candidate id."""
        results = await asyncio.gather(*(self.enrich(c) for c in candidates))
        return {c.id: bits for c, bits in zip(candidates, results)}

    @staticmethod
    def _supports(provider: EnrichmentProvider, candidate: Candidate) -> bool:
        try:
            return provider.supports(candidate)
        except Exception as e:
            logger.warning(f"Enricher {provider.id} supports() failed: {e}")
            return False

    @staticmethod
    async def _run(provider: EnrichmentProvider, candidate: Candidate) -> list[EnrichmentBit]:
        try:
            bits = await provider.enrich(candidate)
        except Exception as e:
            logger.warning(f"Enricher {provider.id} failed: {type(e).__name__}: {e}")
            return []
        return [b for b in (bits or []) if isinstance(b, EnrichmentBit)]
