"""Abstract base class for person search providers."""

from abc import ABC, abstractmethod
from typing import Optional

from archive_lookup.config import settings
from archive_lookup.models import Candidate, ProviderInfo, RefineParams


class SearchProvider(ABC):
    """Uniform search capability. Holds no state between calls."""

    id: str = "base"
    label: str = "Base provider"
    remote: bool = False

    def __init__(self, min_query_length: Optional[int] = None, max_results: Optional[int] = None):
        self.min_query_length = (
            min_query_length if min_query_length is not None else settings.min_query_length
        )
        self.max_results = max_results if max_results is not None else settings.max_results

    @abstractmethod
    async def search(self, query: str) -> list[Candidate]:
        """
        Search for person candidates by free-text name.

        Args:
            query: Name text as typed by the user

        Returns:
            Ordered list of candidates, at most ``max_results`` long
        """
        pass

    async def refine(self, params: RefineParams) -> list[Candidate]:
        """Search by name, then drop candidates contradicting the params.

        Candidates with unknown years or place are kept; only a known,
        conflicting value excludes a candidate.
        """
        candidates = await self.search(params.name)
        return [c for c in candidates if self._matches(c, params)]

    def info(self) -> ProviderInfo:
        return ProviderInfo(id=self.id, label=self.label)

    def accepts_query(self, query: str) -> bool:
        """Whether ``query`` passes the minimum length floor."""
        return len((query or "").strip()) >= self.min_query_length

    @staticmethod
    def _matches(candidate: Candidate, params: RefineParams) -> bool:
        tolerance = params.year_tolerance
        if params.birth_year is not None and candidate.birth_year is not None:
            if abs(candidate.birth_year - params.birth_year) > tolerance:
                return False
        if params.death_year is not None and candidate.death_year is not None:
            if abs(candidate.death_year - params.death_year) > tolerance:
                return False
        if params.place and candidate.place:
            if params.place.strip().lower() not in candidate.place.lower():
                return False
        return True
