"""CLI entry point for archive person lookup."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from archive_lookup.config import settings
from archive_lookup.connectors import AUTO, ProviderRegistry, build_registry
from archive_lookup.crawler import FetchGateway
from archive_lookup.enrich import EnrichmentPipeline, default_enrich_providers
from archive_lookup.errors import ProviderError
from archive_lookup.models import Candidate, EnrichmentBit
from archive_lookup.search import SearchOutcome, run_search

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


async def run_lookup(
    registry: ProviderRegistry,
    query: str,
    provider: str = AUTO,
    demo_fallback: bool = False,
    pipeline: Optional[EnrichmentPipeline] = None,
) -> tuple[SearchOutcome, dict[str, list[EnrichmentBit]]]:
    """Search, then optionally enrich every candidate."""
    outcome = await run_search(registry, query, provider=provider, demo_fallback=demo_fallback)
    logger.info(f"{outcome.provider_id}: {len(outcome.candidates)} candidates")

    enrichment: dict[str, list[EnrichmentBit]] = {}
    if pipeline is not None and outcome.candidates:
        enrichment = await pipeline.enrich_many(outcome.candidates)
    return outcome, enrichment


def print_summary(outcome: SearchOutcome, enrichment: dict[str, list[EnrichmentBit]]):
    """Print a summary of results to console."""
    print("\n" + "=" * 60)
    print(f"PERSON SEARCH - {outcome.provider_id}")
    print("=" * 60)
    if outcome.fallback_used:
        print(f"Remote failed ({outcome.error}); showing demo results")

    print(f"\nCandidates: {len(outcome.candidates)}")
    for c in outcome.candidates:
        print(f"\n{c.name} ({_lifespan(c)})")
        if c.place:
            print(f"   Place: {c.place}")
        print(f"   Source: {c.source} | id {c.id}")
        if c.url:
            print(f"   URL: {c.url}")
        if c.why:
            print(f"   Why: {'; '.join(c.why)}")
        for bit in enrichment.get(c.id, []):
            print(f"   + {bit.title} [{bit.confidence:.2f}] {bit.url}")

    print("\n" + "=" * 60)


def to_json(outcome: SearchOutcome, enrichment: dict[str, list[EnrichmentBit]]) -> str:
    """Serialize results in the caller-facing shape."""
    data = {
        "provider": outcome.provider_id,
        "fallbackUsed": outcome.fallback_used,
        "error": outcome.error,
        "candidates": [c.to_public() for c in outcome.candidates],
    }
    if enrichment:
        data["enrichment"] = {
            cid: [b.model_dump(by_alias=True) for b in bits]
            for cid, bits in enrichment.items()
        }
    return json.dumps(data, ensure_ascii=False, indent=2)


def _lifespan(c: Candidate) -> str:
    birth = str(c.birth_year) if c.birth_year is not None else "?"
    death = str(c.death_year) if c.death_year is not None else "?"
    return f"{birth}-{death}"


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Archive person lookup - search historical-person records"
    )
    parser.add_argument("query", nargs="?", help="Name to search for")
    parser.add_argument(
        "--provider", "-p",
        default=AUTO,
        help="Provider id, or 'auto' for the best available (default: auto)",
    )
    parser.add_argument(
        "--fallback",
        action="store_true",
        help="Answer from the demo provider if the remote provider fails",
    )
    parser.add_argument(
        "--enrich", "-e",
        action="store_true",
        help="Look up supplementary metadata for each candidate",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--list-providers",
        action="store_true",
        help="List registered providers and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    gateway = FetchGateway()
    registry = build_registry(settings, gateway=gateway)

    if args.list_providers:
        for info in registry.list_providers():
            print(f"{info.id}\t{info.label}")
        return

    if not args.query:
        parser.error("a query is required")

    pipeline = None
    if args.enrich:
        pipeline = EnrichmentPipeline(default_enrich_providers(settings.proxy_base, gateway=gateway))

    try:
        outcome, enrichment = asyncio.run(run_lookup(
            registry,
            args.query,
            provider=args.provider,
            demo_fallback=args.fallback,
            pipeline=pipeline,
        ))
    except ProviderError as e:
        logger.error(f"Search failed: {e.code}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)

    if args.json:
        print(to_json(outcome, enrichment))
    else:
        print_summary(outcome, enrichment)


if __name__ == "__main__":
    main()
