"""Offline demo provider with a fixed dataset."""

from typing import Optional

from archive_lookup.extract import make_candidate
from archive_lookup.models import Candidate
from .base import SearchProvider

DEMO_DATA = [
    {"id": "d1", "name": "Karl Johansson", "birth_year": 1872, "death_year": 1939, "place": "Falun"},
    {"id": "d2", "name": "Anna Persdotter", "birth_year": 1878, "death_year": 1951, "place": "Leksand"},
    {"id": "d3", "name": "Erik Lind", "birth_year": 1901, "death_year": 1977, "place": "Gävle"},
    {"id": "d4", "name": "Maria Nilsdotter", "birth_year": 1822, "death_year": 1890, "place": "Uppsala"},
]


class DemoProvider(SearchProvider):
    """Deterministic provider that never touches the network."""

    id = "demo"
    label = "Demo (offline)"
    source = "Demo"

    def __init__(self, records: Optional[list[dict]] = None, **kwargs):
        super().__init__(**kwargs)
        self._records = records if records is not None else DEMO_DATA

    async def search(self, query: str) -> list[Candidate]:
        """Case-insensitive substring match on name and place."""
        if not self.accepts_query(query):
            return []
        q = query.strip().lower()

        return [
            make_candidate(**record, source=self.source, why=["Demo record"])
            for record in self._records
            if q in record["name"].lower() or q in (record.get("place") or "").lower()
        ][: self.max_results]
