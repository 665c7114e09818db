"""Domain exceptions: all public errors of reactorscan.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application raise these, not define their own public exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from reactorscan.domain.model.identity import ModuleIdentity


class ReactorScanError(Exception):
    """Base for all reactorscan error exceptions.

    Allows: except ReactorScanError to catch all library errors.
    """


class ProjectNotFoundError(ReactorScanError, LookupError):
    """No project descriptor found climbing from a directory.

    Attributes:
        start: Directory the climb started from.
    """

    def __init__(self, start: Path) -> None:
        """Initialize with start directory."""
        self.start = start
        super().__init__(f"no project descriptor found in {start} or any of its parents")


class MalformedDescriptorError(ReactorScanError, ValueError):
    """Descriptor exists but cannot be turned into a Descriptor.

    Attributes:
        path: Descriptor file.
        reason: Why it is malformed.
    """

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize with descriptor path and reason."""
        if not reason:
            raise ValueError("reason must be non-empty string")
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed descriptor {path}: {reason}")


class DuplicateModuleConflictError(ReactorScanError, ValueError):
    """Two distinct directories declare the same module identity.

    Attributes:
        identity: Conflicting identity.
        first_dir: Directory registered first.
        second_dir: Directory that tried to register the same identity.
    """

    def __init__(self, identity: ModuleIdentity, first_dir: Path, second_dir: Path) -> None:
        """Initialize with identity and both directories."""
        self.identity = identity
        self.first_dir = first_dir
        self.second_dir = second_dir
        super().__init__(f"module {identity} declared by both {first_dir} and {second_dir}")


class CyclicLocalDependencyError(ReactorScanError, RuntimeError):
    """Local modules depend on each other in a cycle.

    Attributes:
        cycle: Identity path, first element repeated at the end.
    """

    def __init__(self, cycle: Sequence[ModuleIdentity]) -> None:
        """Initialize with identity cycle."""
        if not cycle:
            raise ValueError("cycle must not be empty")
        self.cycle = tuple(cycle)
        super().__init__(f"Cyclic local dependency: {' → '.join(str(i) for i in self.cycle)}")


class DiscoveryError(ReactorScanError, RuntimeError):
    """Filesystem or structural failure during workspace discovery.

    Original OSError (if any) is preserved as __cause__.

    Attributes:
        path: Offending path.
        reason: Error description.
    """

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize with path and reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
