"""Base reporter class for stream output.

Concrete stream reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reactorscan.domain.model.workspace import Workspace


class BaseReporter(ABC):
    """Base class for reporters writing to a destination of their choice.

    Example:
        class CountReporter(BaseReporter):
            def report(self, workspace: Workspace) -> None:
                print(f"Projects: {len(workspace.projects)}")
    """

    @abstractmethod
    def report(self, workspace: Workspace) -> None:
        """Report discovered workspace.

        Implementation decides output format and destination.

        Args:
            workspace: Discovered workspace
        """
