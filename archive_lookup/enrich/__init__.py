"""Post-search enrichment of candidates."""

from .base import EnrichmentProvider
from .probes import RecordLinkEnricher, IIIFEnricher, OAIEnricher
from .pipeline import EnrichmentPipeline, default_enrich_providers

__all__ = [
    "EnrichmentProvider",
    "RecordLinkEnricher",
    "IIIFEnricher",
    "OAIEnricher",
    "EnrichmentPipeline",
    "default_enrich_providers",
]
