"""Parsed project descriptor and its parts.

Produced by a DescriptorProviderPort implementation, consumed by discovery.
Raw values are kept as written: versions may still contain placeholders.
"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from reactorscan.domain.model.identity import ModuleIdentity

DEFAULT_TYPE = "jar"


@dataclass(frozen=True, slots=True)
class DefaultRelativePath:
    """Relative path attribute absent: conventional ``../<descriptor>`` lookup."""


@dataclass(frozen=True, slots=True)
class SuppressedRelativePath:
    """Relative path attribute present but empty: parent is never looked up locally."""


@dataclass(frozen=True, slots=True)
class ExplicitRelativePath:
    """Relative path attribute set to a non-empty value.

    Attributes:
        path: Path relative to the child's directory (directory or descriptor file)
    """

    path: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("explicit relative path must not be empty, use SuppressedRelativePath")


RelativePath: TypeAlias = DefaultRelativePath | SuppressedRelativePath | ExplicitRelativePath


@dataclass(frozen=True, slots=True)
class ParentRef:
    """Declared parent of a descriptor.

    Attributes:
        group: Parent group id
        artifact: Parent artifact id
        version: Raw parent version (may contain placeholders)
        relative_path: Where to look for the parent locally
    """

    group: str
    artifact: str
    version: str | None = None
    relative_path: RelativePath = field(default_factory=DefaultRelativePath)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.group:
            raise ValueError("parent group must not be empty")
        if not self.artifact:
            raise ValueError("parent artifact must not be empty")

    @property
    def identity(self) -> ModuleIdentity:
        """Identity the parent is registered under."""
        return ModuleIdentity(self.group, self.artifact)


@dataclass(frozen=True, slots=True)
class DependencyDecl:
    """Raw dependency declaration.

    Attributes:
        group: Group id (may be a ${project.*} expression)
        artifact: Artifact id
        version: Raw version, None when managed elsewhere
        type: Artifact type
        classifier: Optional classifier
        scope: Optional scope
    """

    group: str
    artifact: str
    version: str | None = None
    type: str = DEFAULT_TYPE
    classifier: str | None = None
    scope: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.group:
            raise ValueError("dependency group must not be empty")
        if not self.artifact:
            raise ValueError("dependency artifact must not be empty")

    @property
    def identity(self) -> ModuleIdentity:
        """Identity used to match a local module."""
        return ModuleIdentity(self.group, self.artifact)


@dataclass(frozen=True, slots=True)
class Descriptor:
    """Structured record of one project descriptor file.

    Attributes:
        path: Descriptor file path
        artifact: Artifact id (must not be empty)
        group: Own group id, None when inherited from parent
        version: Own raw version, None when inherited from parent
        packaging: Packaging type
        parent: Declared parent, None if absent
        dependencies: Dependency declarations in declaration order
        modules: Declared module relative paths in declaration order
        properties: Declared properties
    """

    path: Path
    artifact: str
    group: str | None = None
    version: str | None = None
    packaging: str = DEFAULT_TYPE
    parent: ParentRef | None = None
    dependencies: tuple[DependencyDecl, ...] = ()
    modules: tuple[str, ...] = ()
    properties: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.artifact:
            raise ValueError("artifact must not be empty")
        if not self.group and self.parent is None:
            raise ValueError(f"'{self.artifact}' has no group and no parent to inherit it from")

    @property
    def directory(self) -> Path:
        """Directory holding the descriptor file."""
        return self.path.parent

    @property
    def effective_group(self) -> str:
        """Own group id or the parent's."""
        if self.group:
            return self.group
        # __post_init__ guarantees parent is set here
        assert self.parent is not None
        return self.parent.group

    @property
    def raw_version(self) -> str | None:
        """Own raw version or the parent's."""
        if self.version:
            return self.version
        if self.parent is not None:
            return self.parent.version
        return None

    @property
    def identity(self) -> ModuleIdentity:
        """Identity of the described module."""
        return ModuleIdentity(self.effective_group, self.artifact)
