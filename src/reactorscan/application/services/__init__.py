"""Application services: version resolution and workspace loading."""

from reactorscan.application.services.loader import WorkspaceLoader
from reactorscan.application.services.versions import (
    ResolvedVersion,
    VersionResolver,
    interpolate_project_expressions,
)

__all__ = [
    "ResolvedVersion",
    "VersionResolver",
    "WorkspaceLoader",
    "interpolate_project_expressions",
]
