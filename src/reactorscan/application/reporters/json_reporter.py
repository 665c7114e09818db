"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from reactorscan.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from reactorscan.domain.model.project import LocalProject
    from reactorscan.domain.model.workspace import Workspace


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs the discovered workspace as JSON for build orchestration
    or parsing by other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, workspace: Workspace) -> None:
        """Report workspace as JSON.

        Args:
            workspace: Discovered workspace
        """
        data = self._workspace_to_dict(workspace)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _workspace_to_dict(self, workspace: Workspace) -> dict[str, object]:
        """Convert Workspace to JSON-serializable dict."""
        return {
            "root": str(workspace.root_dir),
            "resolved_version": workspace.resolved_version,
            "properties": dict(workspace.properties),
            "projects": [self._project_to_dict(p) for p in workspace.projects.values()],
            "build_order": [str(p.identity) for p in workspace.build_order()],
        }

    def _project_to_dict(self, project: LocalProject) -> dict[str, object]:
        """Convert LocalProject to JSON-serializable dict."""
        return {
            "group": project.group,
            "artifact": project.artifact,
            "version": project.version,
            "packaging": project.packaging,
            "directory": str(project.directory),
            "parent": str(project.parent_identity) if project.parent_identity else None,
            "local_dependencies": [str(p.identity) for p in project.self_with_local_deps()[:-1]],
        }
