"""Current project lookup from an arbitrary directory."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from reactorscan.domain.exceptions import ProjectNotFoundError

logger = logging.getLogger(__name__)


def locate_project_dir(start: Path, has_descriptor: Callable[[Path], bool]) -> Path:
    """Find the nearest directory holding a descriptor, start included.

    Callers may point at a build output directory (e.g. target/classes)
    nested under the real project directory.

    Args:
        start: Directory to start from
        has_descriptor: Descriptor presence check for a directory

    Returns:
        Absolute project directory

    Raises:
        ProjectNotFoundError: If no directory up to the filesystem root holds a descriptor
    """
    start = Path(os.path.normpath(start.absolute()))
    for candidate in (start, *start.parents):
        if has_descriptor(candidate):
            if candidate != start:
                logger.debug("project for %s located at %s", start, candidate)
            return candidate
    raise ProjectNotFoundError(start)
