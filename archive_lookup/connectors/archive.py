"""Riksarkivet search provider (via the CORS proxy)."""

import logging
from typing import Any, Optional

from archive_lookup.config import settings
from archive_lookup.crawler import FetchGateway, resolve_envelope
from archive_lookup.extract import (
    Classification,
    PersonClassifier,
    extract_url_from_links,
    first_text,
    make_candidate,
    parse_year_range,
    pick_text,
    safe_url,
)
from archive_lookup.models import Candidate
from .base import SearchProvider

logger = logging.getLogger(__name__)


class ArchiveProvider(SearchProvider):
    """Search an archive endpoint and keep only items that are persons.

    ``/persons`` pre-filters to agents upstream; ``/records`` returns every
    record type. Both go through the same classifier since the upstream
    filter is not trusted to be exact.
    """

    remote = True

    def __init__(
        self,
        id: str,
        label: str,
        endpoint: str,
        source: str = "Riksarkivet",
        base_url: Optional[str] = None,
        gateway: Optional[FetchGateway] = None,
        classifier: Optional[PersonClassifier] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.id = id
        self.label = label
        self.endpoint = "/" + endpoint.strip("/")
        self.source = source
        self.base_url = (base_url or settings.proxy_base).rstrip("/")
        self.gateway = gateway or FetchGateway()
        self.classifier = classifier or PersonClassifier()

    async def search(self, query: str) -> list[Candidate]:
        """Search the remote endpoint for persons matching ``query``.

        Raises:
            ProviderError: when the response as a whole is unusable
        """
        if not self.accepts_query(query):
            return []
        q = query.strip()

        payload = await self.gateway.get_json(
            f"{self.base_url}{self.endpoint}",
            params={"name": q, "limit": self.max_results},
        )
        items = resolve_envelope(payload).unwrap()

        candidates: list[Candidate] = []
        rejected = 0
        for item in items:
            if len(candidates) >= self.max_results:
                break
            result = self.classifier.classify(item)
            if not result.accepted:
                rejected += 1
                continue
            candidates.append(self._parse_item(item, result.outcome, result.reasons))

        logger.info(
            f"{self.id}: {len(items)} items, {len(candidates)} accepted, {rejected} rejected"
        )
        return candidates

    def _parse_item(
        self,
        item: dict[str, Any],
        outcome: Classification,
        reasons: list[str],
    ) -> Candidate:
        """Map one accepted raw item to a Candidate."""
        metadata = item.get("metadata")
        if not isinstance(metadata, dict):
            metadata = {}

        name = first_text(
            item.get("caption"),
            item.get("name"),
            item.get("title"),
            item.get("label"),
            metadata.get("title"),
        )

        # Years usually live in metadata.date, e.g. "1661 - 1704"
        date_text = first_text(metadata.get("date"), item.get("date"), item.get("dates"))
        birth_year, death_year = parse_year_range(date_text)

        place = first_text(
            item.get("place"),
            item.get("location"),
            metadata.get("place"),
            metadata.get("location"),
            metadata.get("ort"),
        )

        url = extract_url_from_links(item.get("_links") or item.get("links"))
        if not url:
            url = safe_url(pick_text(item.get("url") or item.get("href")))

        why = [f"Match via {self.endpoint}"]
        why.extend(reasons)
        if outcome is Classification.ACCEPT_FALLBACK:
            why.append("Low confidence")
        if date_text:
            why.append(f"Date: {date_text}")

        return make_candidate(
            id=first_text(item.get("id"), item.get("identifier")),
            name=name,
            birth_year=birth_year,
            death_year=death_year,
            place=place,
            source=self.source,
            url=url,
            why=why,
        )
