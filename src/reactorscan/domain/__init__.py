"""reactorscan domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, collections.abc, re, os
"""

from reactorscan.domain.exceptions import (
    CyclicLocalDependencyError,
    DiscoveryError,
    DuplicateModuleConflictError,
    MalformedDescriptorError,
    ProjectNotFoundError,
    ReactorScanError,
)
from reactorscan.domain.model import (
    Descriptor,
    DiscoveryConfig,
    LocalProject,
    ModuleIdentity,
    Workspace,
)
from reactorscan.domain.ports import DescriptorProviderPort

__all__ = [
    # Exceptions
    "ReactorScanError",
    "ProjectNotFoundError",
    "MalformedDescriptorError",
    "DuplicateModuleConflictError",
    "CyclicLocalDependencyError",
    "DiscoveryError",
    # Model
    "ModuleIdentity",
    "Descriptor",
    "DiscoveryConfig",
    "LocalProject",
    "Workspace",
    # Ports
    "DescriptorProviderPort",
]
