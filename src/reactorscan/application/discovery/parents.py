"""Local parent lookup for a single descriptor."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from reactorscan.domain.model.descriptor import (
    DefaultRelativePath,
    ExplicitRelativePath,
    ParentRef,
    SuppressedRelativePath,
)


def parent_candidate_dir(descriptor_dir: Path, parent: ParentRef | None, descriptor_name: str) -> Path | None:
    """Directory a parent declaration points at, existence not checked.

    Default: the directory above. Explicit: the declared path, a path naming
    the descriptor file means its directory. Suppressed or no parent: None.
    """
    if parent is None:
        return None

    match parent.relative_path:
        case SuppressedRelativePath():
            return None
        case DefaultRelativePath():
            candidate = descriptor_dir.parent
        case ExplicitRelativePath(path=path):
            candidate = descriptor_dir / path
            if candidate.name == descriptor_name or candidate.is_file():
                candidate = candidate.parent

    return Path(os.path.normpath(candidate))


def resolve_parent_dir(
    descriptor_dir: Path,
    parent: ParentRef | None,
    has_descriptor: Callable[[Path], bool],
    descriptor_name: str,
) -> Path | None:
    """Directory of the parent descriptor if the parent is present locally.

    An empty relative path is never resolved via the default lookup.

    Args:
        descriptor_dir: Directory of the child descriptor
        parent: Declared parent, None if absent
        has_descriptor: Descriptor presence check for a directory
        descriptor_name: Descriptor file name, for explicit paths naming the file

    Returns:
        Normalized parent directory, None if there is no local parent
    """
    candidate = parent_candidate_dir(descriptor_dir, parent, descriptor_name)
    if candidate is None or not has_descriptor(candidate):
        return None
    return candidate


def explicit_parent_dir(descriptor_dir: Path, parent: ParentRef | None, descriptor_name: str) -> Path | None:
    """Directory named by an explicit relative path, None for default or suppressed."""
    if parent is None or not isinstance(parent.relative_path, ExplicitRelativePath):
        return None
    return parent_candidate_dir(descriptor_dir, parent, descriptor_name)
