"""Cached descriptor provider adapter.

Decorator pattern: wraps DescriptorProviderPort with per-directory memoization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from reactorscan.domain.model.descriptor import Descriptor
from reactorscan.domain.ports.descriptor_provider import DescriptorProviderPort


@dataclass
class CachedDescriptorProvider(DescriptorProviderPort):
    """Provider memoizing descriptors per directory.

    Decorator pattern: wraps another DescriptorProviderPort.
    Root discovery and module expansion read the same descriptors,
    each directory is read once per instance. "Not found" is cached too.

    Cache is in-memory only: one instance per discovery session,
    never shared between sessions. Not thread-safe.

    Attributes:
        _inner: Wrapped provider implementation
        _cache: Directory → Descriptor (None if absent) mapping
    """

    _inner: DescriptorProviderPort
    _cache: dict[Path, Descriptor | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self._inner is None:
            raise TypeError("_inner provider must not be None")

    @property
    def descriptor_name(self) -> str:
        return self._inner.descriptor_name

    def read_descriptor(self, directory: Path) -> Descriptor | None:
        """Read with cache lookup.

        Errors are not cached: a malformed descriptor raises on every call.

        Args:
            directory: Project directory

        Returns:
            Descriptor (cached or fresh), None if absent
        """
        if directory in self._cache:
            return self._cache[directory]

        descriptor = self._inner.read_descriptor(directory)
        self._cache[directory] = descriptor
        return descriptor

    def has_descriptor(self, directory: Path) -> bool:
        """Presence check, answered from cache when the directory was read."""
        if directory in self._cache:
            return self._cache[directory] is not None
        return self._inner.has_descriptor(directory)

    def clear(self) -> None:
        """Clear entire cache."""
        self._cache.clear()

    @property
    def cache_size(self) -> int:
        """Number of cached directories."""
        return len(self._cache)
