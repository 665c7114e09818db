"""Domain model: value objects and entities of a local workspace."""

from reactorscan.domain.model.configuration import (
    CI_FRIENDLY_PROPERTIES,
    DiscoveryConfig,
    MalformedPolicy,
)
from reactorscan.domain.model.descriptor import (
    DefaultRelativePath,
    DependencyDecl,
    Descriptor,
    ExplicitRelativePath,
    ParentRef,
    RelativePath,
    SuppressedRelativePath,
)
from reactorscan.domain.model.identity import ModuleIdentity
from reactorscan.domain.model.project import LocalProject
from reactorscan.domain.model.workspace import Workspace

__all__ = [
    # Configuration
    "CI_FRIENDLY_PROPERTIES",
    "DiscoveryConfig",
    "MalformedPolicy",
    # Value objects
    "ModuleIdentity",
    "DefaultRelativePath",
    "SuppressedRelativePath",
    "ExplicitRelativePath",
    "RelativePath",
    "ParentRef",
    "DependencyDecl",
    "Descriptor",
    # Entities
    "LocalProject",
    "Workspace",
]
