"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- ConsoleReporter report() output sections
"""

import re
from pathlib import Path

import pytest

from reactorscan.application.reporters.console import ConsoleConfig, ConsoleReporter
from reactorscan.domain.model.project import LocalProject
from tests.factories import make_identity, make_project, make_workspace

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(text: str) -> str:
    return _ANSI.sub("", text)


def _workspace_with_modules():
    workspace = make_workspace(Path("/ws"), properties={"revision": "1.2.3"})
    make_project("root", workspace=workspace, directory=Path("/ws"))
    make_project("core", workspace=workspace, directory=Path("/ws/core"))
    make_project("app", workspace=workspace, directory=Path("/ws/app"), depends_on=("core",))
    return workspace


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ConsoleConfig()
        assert config.show_properties is True
        assert config.show_build_order is True
        assert config.width == 120

    def test_narrow_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 40"):
            ConsoleConfig(width=20)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_returns_string(self) -> None:
        """Output is str, not printed."""
        assert isinstance(ConsoleReporter().report(make_workspace()), str)

    def test_report_contains_header(self) -> None:
        output = _plain(ConsoleReporter().report(_workspace_with_modules()))
        assert "WORKSPACE" in output
        assert "Root: /ws" in output
        assert "Projects: 3" in output

    def test_report_lists_projects_relative_to_root(self) -> None:
        output = _plain(ConsoleReporter().report(_workspace_with_modules()))
        assert "org.acme:core" in output
        assert "org.acme:app" in output
        assert "core" in output

    def test_report_shows_local_parent(self) -> None:
        workspace = make_workspace()
        root = make_project("root", workspace=workspace, directory=Path("/ws"))
        child = LocalProject(
            identity=make_identity("child"),
            version="1.0",
            directory=Path("/ws/child"),
            descriptor_path=Path("/ws/child/pom.xml"),
            parent_identity=root.identity,
            workspace=workspace,
        )
        workspace.add_project(child)

        output = _plain(ConsoleReporter().report(workspace))

        assert "org.acme:root" in output

    def test_report_properties(self) -> None:
        output = _plain(ConsoleReporter().report(_workspace_with_modules()))
        assert "PROPERTIES" in output
        assert "revision = 1.2.3" in output

    def test_hide_properties(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(show_properties=False))
        assert "PROPERTIES" not in _plain(reporter.report(_workspace_with_modules()))

    def test_report_build_order(self) -> None:
        output = _plain(ConsoleReporter().report(_workspace_with_modules()))
        assert "BUILD ORDER" in output
        assert output.index("1. org.acme:root") < output.index("2. org.acme:core")
        assert output.index("2. org.acme:core") < output.index("3. org.acme:app")

    def test_hide_build_order(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(show_build_order=False))
        assert "BUILD ORDER" not in _plain(reporter.report(_workspace_with_modules()))

    def test_resolved_version_shown(self) -> None:
        workspace = _workspace_with_modules()
        workspace.resolved_version = "1.2.3"
        assert "Resolved version: 1.2.3" in _plain(ConsoleReporter().report(workspace))
