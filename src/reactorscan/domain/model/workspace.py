"""Workspace aggregate root: the project registry of one discovery session."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from reactorscan.domain.exceptions import DuplicateModuleConflictError
from reactorscan.domain.model.identity import ModuleIdentity

if TYPE_CHECKING:
    from reactorscan.domain.model.project import LocalProject

POM_TYPE = "pom"
TESTS_CLASSIFIER = "tests"

_PLACEHOLDER = re.compile(r"\$\{[^}]*\}")


@dataclass(slots=True)
class Workspace:
    """Aggregate root for a discovered workspace.

    The only mutable entity in domain model. Owns all LocalProject nodes.
    Mutated only while discovery runs, read-only afterwards.

    Attributes:
        root_dir: Physically topmost project directory
        properties: Root-level declared properties
        resolved_version: CI-friendly version resolved in this session, if any
    """

    root_dir: Path
    properties: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    resolved_version: str | None = None
    _projects: dict[ModuleIdentity, LocalProject] = field(default_factory=dict, repr=False)
    _last_modified: float = field(default=0.0, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.root_dir.is_absolute():
            raise ValueError(f"root_dir must be absolute, got {self.root_dir}")

    @property
    def projects(self) -> Mapping[ModuleIdentity, LocalProject]:
        """Identity → project, in discovery order (read-only view)."""
        return MappingProxyType(self._projects)

    @property
    def last_modified(self) -> float:
        """Newest descriptor modification time seen, 0.0 if none recorded."""
        return self._last_modified

    def get_project(
        self,
        identity_or_group: ModuleIdentity | str,
        artifact: str | None = None,
    ) -> LocalProject | None:
        """Get project by identity or by group and artifact. Returns None if absent."""
        if isinstance(identity_or_group, ModuleIdentity):
            return self._projects.get(identity_or_group)
        if not artifact:
            raise ValueError("artifact must be given together with group")
        return self._projects.get(ModuleIdentity(identity_or_group, artifact))

    def add_project(self, project: LocalProject, modified: float = 0.0) -> LocalProject:
        """Register project, reusing the node already registered from the same directory.

        Args:
            project: Node to register, must be attached to this workspace
            modified: Descriptor modification time

        Returns:
            The registered node for project.identity

        Raises:
            ValueError: If project is attached to another workspace
            DuplicateModuleConflictError: If another directory holds the same identity
        """
        if project.workspace is not self:
            raise ValueError(f"project {project.identity} is not attached to this workspace")

        existing = self._projects.get(project.identity)
        if existing is not None:
            if existing.directory != project.directory:
                raise DuplicateModuleConflictError(
                    project.identity, existing.directory, project.directory
                )
            return existing

        self._projects[project.identity] = project
        self._last_modified = max(self._last_modified, modified)
        return project

    def build_order(self) -> tuple[LocalProject, ...]:
        """All projects, every project after its local dependencies.

        Merges project closures in discovery order.

        Raises:
            CyclicLocalDependencyError: If local modules depend on each other in a cycle
        """
        ordered: dict[ModuleIdentity, LocalProject] = {}
        for project in self._projects.values():
            for member in project.self_with_local_deps():
                ordered.setdefault(member.identity, member)
        return tuple(ordered.values())

    def find_versions(self, group: str, artifact: str) -> tuple[str, ...]:
        """Versions of group:artifact available in this workspace."""
        project = self.get_project(group, artifact)
        if project is None:
            return ()
        return (project.version,)

    def find_artifact(
        self,
        group: str,
        artifact: str,
        classifier: str | None = None,
        type: str = "jar",  # noqa: A002
        version: str | None = None,
    ) -> Path | None:
        """Local file standing in for an artifact coordinate.

        Version with unresolved placeholders (or None) matches on identity alone.
        Returns None when the workspace cannot provide it: callers fall back
        to external resolution.

        Args:
            group: Group id
            artifact: Artifact id
            classifier: Classifier, None or empty for main artifact
            type: Artifact type ("pom" returns the descriptor)
            version: Requested version

        Returns:
            Descriptor file, packaged file or classes directory; None if not local
        """
        project = self.get_project(group, artifact)
        if project is None:
            return None

        if version and not _PLACEHOLDER.search(version) and version != project.version:
            return None

        if type == POM_TYPE:
            return project.descriptor_path if project.descriptor_path.exists() else None

        suffix = f"-{classifier}" if classifier else ""
        packaged = project.output_dir / f"{artifact}-{project.version}{suffix}.{type}"
        if packaged.exists():
            return packaged

        classes = project.test_classes_dir if classifier == TESTS_CLASSIFIER else project.classes_dir
        return classes if classes.is_dir() else None
