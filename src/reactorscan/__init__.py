"""reactorscan - local multi-module workspace discovery and build order."""

__version__ = "0.1.0"

from reactorscan.domain.exceptions import (
    CyclicLocalDependencyError,
    DiscoveryError,
    DuplicateModuleConflictError,
    MalformedDescriptorError,
    ProjectNotFoundError,
    ReactorScanError,
)
from reactorscan.domain.model import DiscoveryConfig, LocalProject, ModuleIdentity, Workspace
from reactorscan.presentation.api import create_loader, load, load_workspace

__all__ = [
    "CyclicLocalDependencyError",
    "DiscoveryConfig",
    "DiscoveryError",
    "DuplicateModuleConflictError",
    "LocalProject",
    "MalformedDescriptorError",
    "ModuleIdentity",
    "ProjectNotFoundError",
    "ReactorScanError",
    "Workspace",
    "__version__",
    "create_loader",
    "load",
    "load_workspace",
]
