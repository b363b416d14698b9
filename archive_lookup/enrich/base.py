"""Abstract base class for enrichment providers."""

from abc import ABC, abstractmethod

from archive_lookup.extract import is_tmp_id
from archive_lookup.models import Candidate, EnrichmentBit


class EnrichmentProvider(ABC):
    """Optional per-candidate metadata lookup."""

    id: str = "base"
    label: str = "Base enricher"

    @abstractmethod
    def supports(self, candidate: Candidate) -> bool:
        """Cheap synchronous check whether this provider can contribute."""
        pass

    @abstractmethod
    async def enrich(self, candidate: Candidate) -> list[EnrichmentBit]:
        """
        Look up supplementary metadata for a candidate.

        Must not raise: any failure yields an empty list.
        """
        pass

    @staticmethod
    def upstream_id(candidate: Candidate) -> str:
        """Candidate id usable against the upstream, or ''."""
        record_id = (candidate.id or "").strip()
        if not record_id or is_tmp_id(record_id):
            return ""
        return record_id
