"""Public API: load a project or a workspace from a directory.

Composition root: wires the default POM provider and the environment
overrides into WorkspaceLoader.

Example:
    project = load_workspace(Path("services/orders/target/classes"))
    for member in project.self_with_local_deps():
        print(member.identity, member.directory)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reactorscan.application.services.loader import WorkspaceLoader
from reactorscan.domain.model.configuration import DiscoveryConfig
from reactorscan.infrastructure.adapters.pom_reader import PomDescriptorProvider

if TYPE_CHECKING:
    from pathlib import Path

    from reactorscan.domain.model.project import LocalProject
    from reactorscan.domain.ports.descriptor_provider import DescriptorProviderPort


def create_loader(
    config: DiscoveryConfig | None = None,
    provider: DescriptorProviderPort | None = None,
) -> WorkspaceLoader:
    """Create a loader with defaults.

    Args:
        config: Discovery configuration (default: overrides from environment)
        provider: Descriptor provider (default: PomDescriptorProvider)

    Returns:
        Configured WorkspaceLoader
    """
    return WorkspaceLoader(
        provider if provider is not None else PomDescriptorProvider(),
        config if config is not None else DiscoveryConfig.from_environ(),
    )


def load(path: Path, config: DiscoveryConfig | None = None) -> LocalProject:
    """Load the project enclosing path, see WorkspaceLoader.load."""
    return create_loader(config).load(path)


def load_workspace(path: Path, config: DiscoveryConfig | None = None) -> LocalProject:
    """Load the project enclosing path with its workspace, see WorkspaceLoader.load_workspace."""
    return create_loader(config).load_workspace(path)
