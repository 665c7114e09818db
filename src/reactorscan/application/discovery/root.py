"""Workspace root discovery over the physical directory tree."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)


def find_root_candidate(
    project_dir: Path,
    has_descriptor: Callable[[Path], bool],
    explicit_parent: Callable[[Path], Path | None] | None = None,
) -> Path:
    """Find the topmost ancestor holding a descriptor.

    Climbs one parent directory at a time and stops at the first level
    without a descriptor. Declared parents are not consulted for default
    or empty relative paths: physical adjacency decides what belongs to
    the same workspace. An explicit relative path is the one declared link
    that is followed, it names a directory the author placed on purpose.

    Args:
        project_dir: Project directory to start from
        has_descriptor: Descriptor presence check for a directory
        explicit_parent: Directory named by an explicit parent relative path
            of the descriptor in a directory, None to climb physically

    Returns:
        Highest candidate found, project_dir itself if nothing above has a descriptor

    Example:
        >>> find_root_candidate(Path("/ws/root/module1"), has_pom)
        PosixPath('/ws/root')  # /ws/root has a pom, /ws has none
    """
    root = project_dir
    seen = {project_dir}
    while True:
        candidate = explicit_parent(root) if explicit_parent is not None else None
        if candidate is None:
            candidate = root.parent
        if candidate == root or candidate in seen or not has_descriptor(candidate):
            break
        seen.add(candidate)
        root = candidate

    logger.debug("workspace root for %s is %s", project_dir, root)
    return root
