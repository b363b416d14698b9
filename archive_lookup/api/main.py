"""FastAPI application setup."""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from archive_lookup import __version__
from archive_lookup.config import settings
from archive_lookup.connectors import ProviderRegistry, build_registry
from archive_lookup.crawler import FetchGateway
from archive_lookup.enrich import EnrichmentPipeline, default_enrich_providers
from .routes import router


def create_app(
    registry: Optional[ProviderRegistry] = None,
    enrich_pipeline: Optional[EnrichmentPipeline] = None,
) -> FastAPI:
    """Build the app around an explicitly constructed registry."""
    app = FastAPI(
        title="Archive Person Lookup",
        description="Search historical-person records through a uniform provider layer",
        version=__version__,
    )

    if registry is None or enrich_pipeline is None:
        gateway = FetchGateway()
        registry = registry or build_registry(settings, gateway=gateway)
        enrich_pipeline = enrich_pipeline or EnrichmentPipeline(
            default_enrich_providers(settings.proxy_base, gateway=gateway)
        )
    app.state.registry = registry
    app.state.enrich_pipeline = enrich_pipeline

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    app.include_router(router, prefix="/api")
    return app


app = create_app()
