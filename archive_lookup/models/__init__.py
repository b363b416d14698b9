"""Data models for archive person lookup."""

from .candidate import (
    Candidate,
    EnrichmentBit,
    ProviderInfo,
    RefineParams,
    NAME_MISSING,
)

__all__ = [
    "Candidate",
    "EnrichmentBit",
    "ProviderInfo",
    "RefineParams",
    "NAME_MISSING",
]
