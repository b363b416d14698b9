"""Candidate and enrichment models."""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NAME_MISSING = "(name missing)"
MIN_YEAR = 1000
MAX_YEAR = 2099

_HTTP_URL = re.compile(r"^https?://", re.I)


class Candidate(BaseModel):
    """One person match in the locked output shape.

    Build instances with ``archive_lookup.extract.make_candidate``; the
    validators here only guard the invariants, they do not repair values.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1, description="Record id, synthesized when upstream omits it")
    name: str = Field(min_length=1, description="Display name")
    birth_year: Optional[int] = Field(default=None, alias="birthYear")
    death_year: Optional[int] = Field(default=None, alias="deathYear")
    place: str = Field(default="", description="Free text place, not geocoded")
    source: str = Field(description="Provider that produced the record")
    url: str = Field(default="", description="Empty or absolute http(s) URL")
    why: tuple[str, ...] = Field(
        default=(),
        description="Human-readable bullets explaining why this matched",
    )

    @field_validator("birth_year", "death_year")
    @classmethod
    def _plausible_year(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not MIN_YEAR <= v <= MAX_YEAR:
            raise ValueError(f"implausible year: {v}")
        return v

    @field_validator("url")
    @classmethod
    def _http_url(cls, v: str) -> str:
        if v and not _HTTP_URL.match(v):
            raise ValueError("url must be empty or absolute http(s)")
        return v

    def to_public(self) -> dict[str, Any]:
        """Caller-facing dict with camelCase keys."""
        data = self.model_dump(by_alias=True)
        data["why"] = list(self.why)
        return data


class EnrichmentBit(BaseModel):
    """Supplementary, non-authoritative metadata about a candidate."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    provider_id: str = Field(alias="providerId")
    type: str
    title: str
    confidence: float = Field(ge=0.0, le=1.0)
    url: str = ""
    fields: dict[str, Any] = Field(default_factory=dict)


class ProviderInfo(BaseModel):
    """Public identity of a registered provider."""

    id: str
    label: str


class RefineParams(BaseModel):
    """Structured search input for ``SearchProvider.refine``."""

    name: str
    birth_year: Optional[int] = None
    death_year: Optional[int] = None
    place: Optional[str] = None
    year_tolerance: int = Field(default=2, ge=0)
