"""Reporter protocol: contract for string reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from reactorscan.domain.model.workspace import Workspace


class ReporterProtocol(Protocol):
    """Protocol for workspace reporters returning text.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, workspace: Workspace) -> str:
        """Format workspace as string.

        Args:
            workspace: Discovered workspace.

        Returns:
            Formatted string representation.
        """
        ...
