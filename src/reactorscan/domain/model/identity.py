"""Module identity value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class ModuleIdentity:
    """Key of a module within a workspace.

    Version is not part of identity: one module occupies one directory
    whatever version its placeholders currently resolve to.

    Attributes:
        group: Group id (must not be empty)
        artifact: Artifact id (must not be empty)
    """

    group: str
    artifact: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.group:
            raise ValueError("group must not be empty")
        if not self.artifact:
            raise ValueError("artifact must not be empty")

    def __str__(self) -> str:
        """Format as group:artifact."""
        return f"{self.group}:{self.artifact}"
