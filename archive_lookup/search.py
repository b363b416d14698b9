"""Search entry point with optional offline fallback."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from archive_lookup.connectors import AUTO, ProviderRegistry
from archive_lookup.errors import ProviderError
from archive_lookup.models import Candidate

logger = logging.getLogger(__name__)


@dataclass
class SearchOutcome:
    """Result of one search call."""

    provider_id: str
    candidates: list[Candidate] = field(default_factory=list)
    fallback_used: bool = False
    error: Optional[str] = None


async def run_search(
    registry: ProviderRegistry,
    query: str,
    provider: Optional[str] = AUTO,
    demo_fallback: bool = False,
) -> SearchOutcome:
    """Pick a provider from ``registry`` and search it.

    Typed provider errors propagate unless ``demo_fallback`` is set, in
    which case the demo provider answers and the error code is kept on
    the outcome.
    """
    selected = registry.pick(provider)
    try:
        candidates = await selected.search(query)
    except ProviderError as e:
        if not demo_fallback or selected is registry.demo:
            raise
        logger.warning(f"{selected.id} failed with {e.code}; falling back to demo")
        candidates = await registry.demo.search(query)
        return SearchOutcome(
            provider_id=registry.demo.id,
            candidates=candidates,
            fallback_used=True,
            error=e.code,
        )

    return SearchOutcome(provider_id=selected.id, candidates=candidates)
