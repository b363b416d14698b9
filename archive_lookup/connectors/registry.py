"""Provider registry and selection policy."""

import logging
from typing import Iterable, Optional

from archive_lookup.config import Settings, settings as default_settings
from archive_lookup.crawler import FetchGateway
from archive_lookup.models import ProviderInfo
from .archive import ArchiveProvider
from .base import SearchProvider
from .demo import DemoProvider

logger = logging.getLogger(__name__)

AUTO = "auto"
DEMO_ID = DemoProvider.id


class ProviderRegistry:
    """Mapping of provider id to provider, fixed at construction.

    A demo provider is always present. Remote providers are preferred by
    ``pick("auto")`` in registration order.
    """

    def __init__(self, providers: Optional[Iterable[SearchProvider]] = None):
        self._providers: dict[str, SearchProvider] = {}
        for provider in providers or []:
            self._register(provider)
        if DEMO_ID not in self._providers:
            self._register(DemoProvider())

    def _register(self, provider: SearchProvider) -> None:
        """Add a provider. Existing ids are never replaced."""
        if provider.id in self._providers:
            raise ValueError(f"Provider already registered: {provider.id}")
        self._providers[provider.id] = provider

    def get(self, provider_id: str) -> Optional[SearchProvider]:
        return self._providers.get(provider_id)

    def __contains__(self, provider_id: str) -> bool:
        return provider_id in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    @property
    def demo(self) -> SearchProvider:
        return self._providers[DEMO_ID]

    def list_providers(self) -> list[ProviderInfo]:
        """Public id/label pairs in registration order."""
        return [p.info() for p in self._providers.values()]

    def pick(self, preferred: Optional[str] = AUTO) -> SearchProvider:
        """Select a provider, degrading to demo when unavailable.

        An explicit id selects that provider if registered. ``"auto"``
        selects the first remote provider, or demo if none is registered.
        """
        preferred = (preferred or AUTO).strip()

        if preferred == AUTO:
            for provider in self._providers.values():
                if provider.remote:
                    return provider
            return self.demo

        provider = self._providers.get(preferred)
        if provider is None:
            logger.info(f"Unknown provider '{preferred}', using {DEMO_ID}")
            return self.demo
        return provider


def build_registry(
    config: Optional[Settings] = None,
    gateway: Optional[FetchGateway] = None,
) -> ProviderRegistry:
    """Create the process-wide registry: demo plus configured remotes."""
    config = config or default_settings
    limits = {
        "min_query_length": config.min_query_length,
        "max_results": config.max_results,
    }
    providers: list[SearchProvider] = [DemoProvider(**limits)]

    if config.remote_enabled and config.proxy_base:
        gateway = gateway or FetchGateway(
            timeout=config.fetch_timeout,
            user_agent=config.user_agent,
        )
        # persons first so "auto" avoids buildings and drawings
        providers.append(ArchiveProvider(
            id="persons",
            label="Riksarkivet persons (via proxy)",
            endpoint="persons",
            base_url=config.proxy_base,
            gateway=gateway,
            **limits,
        ))
        providers.append(ArchiveProvider(
            id="records",
            label="Riksarkivet all records (via proxy)",
            endpoint="records",
            source="Riksarkivet (records)",
            base_url=config.proxy_base,
            gateway=gateway,
            **limits,
        ))
    else:
        logger.info("Remote providers disabled; only demo is available")

    return ProviderRegistry(providers)
