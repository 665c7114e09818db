"""Local project node and its local dependency closure."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from reactorscan.domain.exceptions import CyclicLocalDependencyError
from reactorscan.domain.model.configuration import DEFAULT_BUILD_DIR
from reactorscan.domain.model.descriptor import DEFAULT_TYPE

if TYPE_CHECKING:
    from reactorscan.domain.model.descriptor import DependencyDecl
    from reactorscan.domain.model.identity import ModuleIdentity
    from reactorscan.domain.model.workspace import Workspace


@dataclass(eq=False, slots=True)
class LocalProject:
    """One module of a local workspace.

    Immutable after discovery except for the memoized closure.
    Equality is object identity: a workspace holds exactly one node per identity.

    The parent is kept as a lookup key resolved against the workspace on
    demand, the workspace owns every node.

    Attributes:
        identity: Module identity
        version: Resolved version
        directory: Absolute project directory
        descriptor_path: Descriptor file
        dependencies: Dependency declarations, project expressions interpolated
        parent_identity: Declared parent identity, None if no parent
        parent_dir: Directory of the parent descriptor if present locally
        modules: Declared module relative paths
        packaging: Packaging type
        build_dir: Build output directory name
        workspace: Workspace this node belongs to, None when loaded standalone
    """

    identity: ModuleIdentity
    version: str
    directory: Path
    descriptor_path: Path
    dependencies: tuple[DependencyDecl, ...] = ()
    parent_identity: ModuleIdentity | None = None
    parent_dir: Path | None = None
    modules: tuple[str, ...] = ()
    packaging: str = DEFAULT_TYPE
    build_dir: str = DEFAULT_BUILD_DIR
    workspace: Workspace | None = field(default=None, repr=False)
    _local_deps: tuple[LocalProject, ...] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.directory.is_absolute():
            raise ValueError(f"directory must be absolute, got {self.directory}")
        if self.parent_dir is not None and self.parent_identity is None:
            raise ValueError("parent_dir requires parent_identity")

    @property
    def group(self) -> str:
        """Group id."""
        return self.identity.group

    @property
    def artifact(self) -> str:
        """Artifact id."""
        return self.identity.artifact

    @property
    def parent(self) -> LocalProject | None:
        """Parent node from the workspace, None if absent or not local."""
        if self.parent_identity is None or self.workspace is None:
            return None
        return self.workspace.get_project(self.parent_identity)

    @property
    def output_dir(self) -> Path:
        return self.directory / self.build_dir

    @property
    def classes_dir(self) -> Path:
        return self.output_dir / "classes"

    @property
    def test_classes_dir(self) -> Path:
        return self.output_dir / "test-classes"

    @property
    def sources_dir(self) -> Path:
        return self.directory / "src" / "main" / "java"

    @property
    def test_sources_dir(self) -> Path:
        return self.directory / "src" / "test" / "java"

    @property
    def resources_dir(self) -> Path:
        return self.directory / "src" / "main" / "resources"

    def self_with_local_deps(self) -> tuple[LocalProject, ...]:
        """Local dependency closure followed by this project.

        Declaration order, depth first, dependencies before dependents.
        Only dependencies registered in the same workspace are included,
        each once. Standalone projects return just themselves.

        Returns:
            Tuple usable directly as a local build order

        Raises:
            CyclicLocalDependencyError: If local modules depend on each other in a cycle
        """
        return self._closure(())

    def _closure(self, visiting: tuple[ModuleIdentity, ...]) -> tuple[LocalProject, ...]:
        if self._local_deps is not None:
            return self._local_deps

        if self.workspace is None:
            self._local_deps = (self,)
            return self._local_deps

        if self.identity in visiting:
            start = visiting.index(self.identity)
            raise CyclicLocalDependencyError((*visiting[start:], self.identity))

        path = (*visiting, self.identity)
        collected: dict[ModuleIdentity, LocalProject] = {}
        for dependency in self.dependencies:
            local = self.workspace.get_project(dependency.identity)
            if local is None:
                continue
            for project in local._closure(path):
                collected.setdefault(project.identity, project)
        collected[self.identity] = self

        self._local_deps = tuple(collected.values())
        return self._local_deps
