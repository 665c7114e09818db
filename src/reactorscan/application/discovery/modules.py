"""Declared module tree expansion."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from reactorscan.domain.exceptions import DiscoveryError, MalformedDescriptorError
from reactorscan.domain.model.descriptor import Descriptor

logger = logging.getLogger(__name__)


def expand_modules(
    root_dir: Path,
    read: Callable[[Path], Descriptor | None],
    *,
    skip_malformed: bool = False,
    visited: set[Path] | None = None,
) -> Iterator[tuple[Path, Descriptor]]:
    """Walk the declared module tree from root_dir.

    Depth-first pre-order, modules in declaration order. Only declarations
    are followed, the physical tree is not scanned. A directory is yielded
    at most once per visited set.

    Args:
        root_dir: Directory of the tree root
        read: Descriptor reader for a directory (None if absent)
        skip_malformed: Log and drop malformed module branches instead of raising
        visited: Directories already walked, shared between calls of one session

    Yields:
        (directory, descriptor) for root_dir and every module below it

    Raises:
        DiscoveryError: If root_dir or a declared module holds no descriptor
        MalformedDescriptorError: If a descriptor is malformed (unless skip_malformed)
    """
    seen = visited if visited is not None else set()
    root = Path(os.path.normpath(root_dir))
    stack: list[Path] = [root]

    while stack:
        directory = stack.pop()
        if directory in seen:
            continue
        seen.add(directory)

        try:
            descriptor = read(directory)
        except MalformedDescriptorError as e:
            if not skip_malformed or directory == root:
                raise
            logger.warning("skipping module %s: %s", directory, e.reason)
            continue

        if descriptor is None:
            raise DiscoveryError(directory, "declared module has no project descriptor")

        yield directory, descriptor

        # Reversed: first declared module is popped first
        for module in reversed(descriptor.modules):
            stack.append(_module_dir(directory, module))


def _module_dir(directory: Path, module: str) -> Path:
    """Resolve a declared module path, a path naming a file means its directory."""
    candidate = Path(os.path.normpath(directory / module))
    if candidate.is_file():
        candidate = candidate.parent
    return candidate
