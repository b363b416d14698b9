"""Person search providers."""

from .base import SearchProvider
from .demo import DemoProvider, DEMO_DATA
from .archive import ArchiveProvider
from .registry import ProviderRegistry, build_registry, AUTO

__all__ = [
    "SearchProvider",
    "DemoProvider",
    "DEMO_DATA",
    "ArchiveProvider",
    "ProviderRegistry",
    "build_registry",
    "AUTO",
]
