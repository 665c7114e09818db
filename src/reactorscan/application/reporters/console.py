"""Console reporter: Workspace → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from reactorscan.domain.model.workspace import Workspace


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_properties: Show root-level properties section.
        show_build_order: Show merged local build order.
        width: Console width in characters.
    """

    show_properties: bool = True
    show_build_order: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, workspace: Workspace) -> str:
        """Format workspace as rich formatted string.

        Args:
            workspace: Discovered workspace.

        Returns:
            Formatted string with colors and tables.

        Raises:
            CyclicLocalDependencyError: If build order is shown and modules form a cycle
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, workspace)
        self._render_projects(console, workspace)

        if self._config.show_properties and workspace.properties:
            self._render_properties(console, workspace)

        if self._config.show_build_order:
            self._render_build_order(console, workspace)

        return output.getvalue()

    def _render_header(self, console: Console, workspace: Workspace) -> None:
        console.print()
        console.rule("[bold]WORKSPACE[/bold]")
        console.print()
        console.print(f"[bold]Root:[/bold] {workspace.root_dir}")
        console.print(f"[bold]Projects:[/bold] {len(workspace.projects)}")
        if workspace.resolved_version is not None:
            console.print(f"[bold]Resolved version:[/bold] {workspace.resolved_version}")
        console.print()

    def _render_projects(self, console: Console, workspace: Workspace) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Module")
        table.add_column("Version")
        table.add_column("Path")
        table.add_column("Parent")

        for project in workspace.projects.values():
            parent = str(project.parent_identity) if project.parent_identity else "-"
            if project.parent_identity is not None and project.parent is None:
                parent = f"[dim]{parent}[/dim]"
            table.add_row(
                f"[cyan]{project.identity}[/cyan]",
                project.version,
                _relative(project.directory, workspace.root_dir),
                parent,
            )

        console.print(table)
        console.print()

    def _render_properties(self, console: Console, workspace: Workspace) -> None:
        console.print("[bold]PROPERTIES[/bold]")
        for name, value in sorted(workspace.properties.items()):
            console.print(f"  {name} = {value}")
        console.print()

    def _render_build_order(self, console: Console, workspace: Workspace) -> None:
        console.print("[bold]BUILD ORDER[/bold]")
        for index, project in enumerate(workspace.build_order(), start=1):
            console.print(f"  {index:>3}. {project.identity}")
        console.print()


def _relative(directory: Path, root: Path) -> str:
    try:
        relative = directory.relative_to(root)
    except ValueError:
        return str(directory)
    return "." if relative == Path() else relative.as_posix()
