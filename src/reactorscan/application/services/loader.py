"""Workspace loader: projects and workspaces from a directory.

Composes the discovery functions:
1. locate the current project (climb from any directory)
2. find the workspace root (physical climb)
3. expand declared modules from the root
4. union in the entry project if the declaration walk missed it
5. register locally present parents not yet registered

FAIL-FIRST: errors propagate, nothing is retried.
"""

from __future__ import annotations

import dataclasses
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from reactorscan.application.discovery import (
    expand_modules,
    explicit_parent_dir,
    find_root_candidate,
    locate_project_dir,
    resolve_parent_dir,
)
from reactorscan.application.services.versions import (
    VersionResolver,
    interpolate_project_expressions,
)
from reactorscan.domain.exceptions import DiscoveryError
from reactorscan.domain.model.configuration import DiscoveryConfig, MalformedPolicy
from reactorscan.domain.model.project import LocalProject
from reactorscan.domain.model.workspace import Workspace
from reactorscan.infrastructure.adapters.cached_provider import CachedDescriptorProvider

if TYPE_CHECKING:
    from pathlib import Path

    from reactorscan.domain.model.descriptor import DependencyDecl, Descriptor
    from reactorscan.domain.ports.descriptor_provider import DescriptorProviderPort

logger = logging.getLogger(__name__)


class WorkspaceLoader:
    """Loads local projects, with or without their workspace.

    Every call is an independent discovery session: its own descriptor
    cache, its own Workspace. Workspaces are never shared between calls.
    """

    def __init__(self, provider: DescriptorProviderPort, config: DiscoveryConfig | None = None) -> None:
        """Initialize loader.

        Args:
            provider: Descriptor provider
            config: Discovery configuration (default: DiscoveryConfig())
        """
        if provider is None:
            raise TypeError("provider must not be None")

        self._provider = provider
        self._config = config or DiscoveryConfig()
        self._versions = VersionResolver(self._config.overrides, self._config.ci_properties)

    @property
    def config(self) -> DiscoveryConfig:
        return self._config

    def load(self, path: Path) -> LocalProject:
        """Load the project enclosing path.

        The workspace is only discovered when the project version needs
        workspace properties (a placeholder without override).

        Args:
            path: Project directory or any directory below it

        Returns:
            Standalone LocalProject, or the workspace's node if the version needed it

        Raises:
            ProjectNotFoundError: If no descriptor is found climbing from path
            MalformedDescriptorError: If a descriptor cannot be parsed
        """
        provider = CachedDescriptorProvider(self._provider)
        project_dir, descriptor = self._entry(provider, path)

        resolved = self._versions.resolve(descriptor.raw_version)
        if resolved.value is None:
            logger.debug("version %r of %s needs workspace properties", descriptor.raw_version, project_dir)
            return self._discover(provider, project_dir, descriptor)

        return self._new_project(provider, descriptor, resolved.value, workspace=None)

    def load_workspace(self, path: Path) -> LocalProject:
        """Load the project enclosing path together with its workspace.

        Args:
            path: Project directory or any directory below it

        Returns:
            Entry LocalProject, registered in a populated Workspace

        Raises:
            ProjectNotFoundError: If no descriptor is found climbing from path
            MalformedDescriptorError: If a descriptor cannot be parsed (policy FAIL)
            DuplicateModuleConflictError: If two directories declare the same identity
            DiscoveryError: If a declared module or descriptor cannot be read
        """
        provider = CachedDescriptorProvider(self._provider)
        project_dir, descriptor = self._entry(provider, path)
        return self._discover(provider, project_dir, descriptor)

    # =========================================================================
    # Discovery session
    # =========================================================================

    def _entry(self, provider: CachedDescriptorProvider, path: Path) -> tuple[Path, Descriptor]:
        project_dir = locate_project_dir(path, provider.has_descriptor)
        descriptor = provider.read_descriptor(project_dir)
        if descriptor is None:
            raise DiscoveryError(project_dir, "project descriptor disappeared while loading")
        return project_dir, descriptor

    def _discover(
        self,
        provider: CachedDescriptorProvider,
        project_dir: Path,
        descriptor: Descriptor,
    ) -> LocalProject:
        def explicit_parent(directory: Path) -> Path | None:
            current = provider.read_descriptor(directory)
            if current is None:
                return None
            return explicit_parent_dir(directory, current.parent, provider.descriptor_name)

        root_dir = find_root_candidate(project_dir, provider.has_descriptor, explicit_parent)
        root_descriptor = descriptor if root_dir == project_dir else provider.read_descriptor(root_dir)
        if root_descriptor is None:
            raise DiscoveryError(root_dir, "workspace root descriptor disappeared while loading")

        workspace = Workspace(
            root_dir=root_dir,
            properties=MappingProxyType(dict(root_descriptor.properties)),
        )
        visited: set[Path] = set()

        # Phase 1: graph structure. Closures are computed on request only, after this returns.
        self._expand(provider, workspace, root_dir, visited)
        if project_dir not in visited:
            logger.debug("%s is not a declared module of %s, adding it", project_dir, root_dir)
            self._expand(provider, workspace, project_dir, visited)
        self._register_parents(provider, workspace, visited)

        entry = workspace.get_project(descriptor.identity)
        if entry is None or entry.directory != project_dir:
            raise DiscoveryError(project_dir, f"entry project {descriptor.identity} missing from workspace")

        logger.debug("workspace %s: %d projects", root_dir, len(workspace.projects))
        return entry

    def _expand(
        self,
        provider: CachedDescriptorProvider,
        workspace: Workspace,
        start_dir: Path,
        visited: set[Path],
    ) -> None:
        for directory, descriptor in expand_modules(
            start_dir,
            provider.read_descriptor,
            skip_malformed=self._config.malformed_policy is MalformedPolicy.SKIP,
            visited=visited,
        ):
            logger.debug("registering %s from %s", descriptor.identity, directory)
            self._register(provider, workspace, descriptor)

    def _register_parents(
        self,
        provider: CachedDescriptorProvider,
        workspace: Workspace,
        visited: set[Path],
    ) -> None:
        pending = list(workspace.projects.values())
        while pending:
            project = pending.pop()
            if project.parent_dir is None or project.parent_identity is None:
                continue
            if workspace.get_project(project.parent_identity) is not None:
                continue
            if project.parent_dir in visited:
                logger.debug(
                    "parent %s of %s not found at %s", project.parent_identity, project.identity, project.parent_dir
                )
                continue

            visited.add(project.parent_dir)
            descriptor = provider.read_descriptor(project.parent_dir)
            if descriptor is None:
                continue
            if descriptor.identity != project.parent_identity:
                logger.debug(
                    "%s holds %s, not parent %s", project.parent_dir, descriptor.identity, project.parent_identity
                )
                continue
            pending.append(self._register(provider, workspace, descriptor))

    def _register(
        self,
        provider: CachedDescriptorProvider,
        workspace: Workspace,
        descriptor: Descriptor,
    ) -> LocalProject:
        resolved = self._versions.resolve(descriptor.raw_version, workspace.properties)
        # properties given: value is always resolved
        assert resolved.value is not None

        project = self._new_project(provider, descriptor, resolved.value, workspace=workspace)
        registered = workspace.add_project(project, _modified(descriptor.path))

        if self._versions.placeholders(descriptor.raw_version) and workspace.resolved_version is None:
            workspace.resolved_version = resolved.value
        return registered

    def _new_project(
        self,
        provider: DescriptorProviderPort,
        descriptor: Descriptor,
        version: str,
        workspace: Workspace | None,
    ) -> LocalProject:
        directory = descriptor.directory
        parent = descriptor.parent
        return LocalProject(
            identity=descriptor.identity,
            version=version,
            directory=directory,
            descriptor_path=descriptor.path,
            dependencies=tuple(self._interpolate(d, descriptor, version) for d in descriptor.dependencies),
            parent_identity=parent.identity if parent is not None else None,
            parent_dir=resolve_parent_dir(directory, parent, provider.has_descriptor, provider.descriptor_name),
            modules=descriptor.modules,
            packaging=descriptor.packaging,
            build_dir=self._config.build_dir,
            workspace=workspace,
        )

    @staticmethod
    def _interpolate(dependency: DependencyDecl, descriptor: Descriptor, version: str) -> DependencyDecl:
        def expand(value: str | None) -> str | None:
            return interpolate_project_expressions(
                value,
                group=descriptor.effective_group,
                artifact=descriptor.artifact,
                version=version,
                parent=descriptor.parent,
            )

        group = expand(dependency.group)
        dependency_version = expand(dependency.version)
        if group == dependency.group and dependency_version == dependency.version:
            return dependency
        assert group is not None
        return dataclasses.replace(dependency, group=group, version=dependency_version)


def _modified(path: Path) -> float:
    try:
        return path.stat().st_mtime
    except OSError as e:
        raise DiscoveryError(path, f"cannot stat descriptor: {e.strerror or e}") from e
