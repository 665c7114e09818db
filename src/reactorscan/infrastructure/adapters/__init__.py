"""Infrastructure adapters for external interfaces."""

from reactorscan.infrastructure.adapters.cached_provider import CachedDescriptorProvider
from reactorscan.infrastructure.adapters.pom_reader import POM_XML, PomDescriptorProvider

__all__ = [
    "POM_XML",
    "CachedDescriptorProvider",
    "PomDescriptorProvider",
]
