"""API routes for archive person lookup."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel, ConfigDict, Field

from archive_lookup.connectors import AUTO, ProviderRegistry
from archive_lookup.enrich import EnrichmentPipeline
from archive_lookup.errors import ProviderError
from archive_lookup.models import Candidate, EnrichmentBit, ProviderInfo
from archive_lookup.search import run_search

logger = logging.getLogger(__name__)

router = APIRouter()


class SearchResponse(BaseModel):
    """Response for a person search."""
    model_config = ConfigDict(populate_by_name=True)

    provider: str
    fallback_used: bool = Field(alias="fallbackUsed")
    error: Optional[str] = None
    candidates: list[Candidate]


def get_registry(request: Request) -> ProviderRegistry:
    return request.app.state.registry


def get_enrich_pipeline(request: Request) -> EnrichmentPipeline:
    return request.app.state.enrich_pipeline


@router.get("/providers", response_model=list[ProviderInfo])
async def list_providers(request: Request):
    """List registered search providers."""
    return get_registry(request).list_providers()


@router.get("/search", response_model=SearchResponse)
async def search(
    request: Request,
    q: str = Query(default="", description="Name to search for"),
    provider: str = Query(default=AUTO),
    fallback: bool = Query(default=False, description="Answer from demo if the remote fails"),
):
    """Search for person candidates."""
    try:
        outcome = await run_search(
            get_registry(request),
            q,
            provider=provider,
            demo_fallback=fallback,
        )
    except ProviderError as e:
        raise HTTPException(status_code=502, detail={"error": e.code})

    return SearchResponse(
        provider=outcome.provider_id,
        fallback_used=outcome.fallback_used,
        error=outcome.error,
        candidates=outcome.candidates,
    )


@router.post("/enrich", response_model=list[EnrichmentBit])
async def enrich(request: Request, candidate: Candidate):
    """Supplementary metadata for one candidate."""
    return await get_enrich_pipeline(request).enrich(candidate)
