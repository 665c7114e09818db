"""End-to-end discovery over real pom.xml trees.

Reference layout (see tests.factories.build_reference_workspace):
declared modules, an undeclared child with its own modules, an
independent project, a parent reached through an explicit relative path
and a parent suppressed by an empty relative path.
"""

import io
import json
import re
from pathlib import Path

import pytest

from reactorscan import DiscoveryConfig, load, load_workspace
from reactorscan.application.reporters import ConsoleReporter, JSONReporter
from reactorscan.domain.model.project import LocalProject
from tests.factories import DEFAULT_GROUP, build_ci_friendly_workspace, build_reference_workspace

_NO_OVERRIDES = DiscoveryConfig()


@pytest.fixture
def reference_root(tmp_path: Path) -> Path:
    """Reference workspace root directory."""
    return build_reference_workspace(tmp_path)


def _closure(project: LocalProject) -> list[str]:
    return [p.artifact for p in project.self_with_local_deps()]


def _project_count(project: LocalProject) -> int:
    assert project.workspace is not None
    return len(project.workspace.projects)


class TestReferenceWorkspace:
    """Workspace discovery from each entry point of the reference tree."""

    def test_from_build_output_of_module(self, reference_root: Path) -> None:
        project = load_workspace(reference_root / "module2" / "target" / "classes", _NO_OVERRIDES)

        assert project.artifact == "root-module-with-parent"
        assert _project_count(project) == 5
        assert _closure(project) == [
            "root-module-not-direct-child",
            "root-no-parent-module",
            "root-module-with-parent",
        ]

    def test_module_without_parent(self, reference_root: Path) -> None:
        project = load_workspace(reference_root / "module1", _NO_OVERRIDES)

        assert _project_count(project) == 5
        assert _closure(project) == ["root-module-not-direct-child", "root-no-parent-module"]

    def test_module_with_explicit_parent_path(self, reference_root: Path) -> None:
        """other/module3 has no descriptor in other/, its parent path leads to the root."""
        project = load_workspace(reference_root / "other" / "module3", _NO_OVERRIDES)

        assert project.workspace is not None
        assert project.workspace.root_dir == reference_root
        assert _project_count(project) == 5
        assert _closure(project) == ["root-module-not-direct-child"]
        assert project.parent is not None
        assert project.parent.directory == reference_root

    def test_module_with_empty_parent_path(self, reference_root: Path) -> None:
        project = load_workspace(reference_root / "module4", _NO_OVERRIDES)

        assert _project_count(project) == 5
        assert _closure(project) == ["empty-parent-relative-path-module"]
        assert project.parent_dir is None
        assert project.parent is None

    def test_undeclared_child_with_modules(self, reference_root: Path) -> None:
        project = load_workspace(reference_root / "non-module-child", _NO_OVERRIDES)

        assert _project_count(project) == 7
        assert _closure(project) == ["another-child", "non-module-child"]

    def test_independent_project(self, reference_root: Path) -> None:
        project = load_workspace(reference_root / "independent", _NO_OVERRIDES)

        assert _project_count(project) == 6
        assert _closure(project) == [
            "root-module-not-direct-child",
            "root-no-parent-module",
            "root-module-with-parent",
            "independent",
        ]

    def test_inherited_coordinates(self, reference_root: Path) -> None:
        project = load_workspace(reference_root / "module2", _NO_OVERRIDES)

        assert project.group == DEFAULT_GROUP
        assert project.version == "1.0"
        assert project.parent is not None
        assert project.parent.artifact == "root"

    def test_nodes_shared_within_workspace(self, reference_root: Path) -> None:
        project = load_workspace(reference_root / "module2", _NO_OVERRIDES)
        assert project.workspace is not None

        module1 = project.workspace.get_project(DEFAULT_GROUP, "root-no-parent-module")

        assert module1 is not None
        assert project.self_with_local_deps()[1] is module1

    @pytest.mark.parametrize("module", ["module1", "module2"])
    def test_plain_load_is_standalone(self, reference_root: Path, module: str) -> None:
        project = load(reference_root / module, _NO_OVERRIDES)

        assert project.workspace is None
        assert project.self_with_local_deps() == (project,)


class TestCiFriendlyVersions:
    """Placeholder versions resolved from root properties or overrides."""

    def test_revision_from_root_property(self, tmp_path: Path) -> None:
        module1 = build_ci_friendly_workspace(tmp_path, "${revision}", {"revision": "1.2.3"})

        project = load(module1, _NO_OVERRIDES)

        assert project.version == "1.2.3"
        assert project.workspace is not None
        assert project.workspace.resolved_version == "1.2.3"

    def test_revision_override(self, tmp_path: Path) -> None:
        module1 = build_ci_friendly_workspace(tmp_path, "${revision}", {"revision": "1.2.3"})

        project = load(module1, DiscoveryConfig(overrides={"revision": "2.0.0"}))

        assert project.version == "2.0.0"
        assert project.workspace is None

    def test_all_placeholders_from_properties(self, tmp_path: Path) -> None:
        module1 = build_ci_friendly_workspace(
            tmp_path,
            "${revision}${sha1}${changelist}",
            {"revision": "1.2.3", "sha1": "", "changelist": ""},
        )

        assert load(module1, _NO_OVERRIDES).version == "1.2.3"

    def test_all_placeholders_overridden(self, tmp_path: Path) -> None:
        module1 = build_ci_friendly_workspace(
            tmp_path,
            "${revision}${sha1}${changelist}",
            {"revision": "1.2.3", "sha1": "", "changelist": ""},
        )
        config = DiscoveryConfig(overrides={"revision": "build", "sha1": "12", "changelist": "3"})

        project = load(module1, config)

        assert project.version == "build123"
        assert project.workspace is None

    def test_root_descriptor_found_by_placeholder_version(self, tmp_path: Path) -> None:
        module1 = build_ci_friendly_workspace(tmp_path, "${revision}", {"revision": "1.2.3"})

        project = load(module1, _NO_OVERRIDES)
        assert project.workspace is not None

        found = project.workspace.find_artifact(DEFAULT_GROUP, "root", None, "pom", "${revision}")

        assert found == tmp_path / "root" / "pom.xml"

    def test_override_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        module1 = build_ci_friendly_workspace(tmp_path, "${revision}", {"revision": "1.2.3"})
        monkeypatch.setenv("REACTORSCAN_REVISION", "7.0")

        project = load(module1)

        assert project.version == "7.0"
        assert project.workspace is None


class TestReports:
    """Reporters over a discovered workspace."""

    def test_json_report(self, reference_root: Path) -> None:
        project = load_workspace(reference_root / "non-module-child", _NO_OVERRIDES)
        assert project.workspace is not None
        output = io.StringIO()

        JSONReporter(output).report(project.workspace)

        data = json.loads(output.getvalue())
        assert data["root"] == str(reference_root)
        assert len(data["projects"]) == 7
        assert data["build_order"].index("org.acme:another-child") < data["build_order"].index(
            "org.acme:non-module-child"
        )

    def test_console_report(self, reference_root: Path) -> None:
        project = load_workspace(reference_root / "module2", _NO_OVERRIDES)
        assert project.workspace is not None

        output = re.sub(r"\x1b\[[0-9;]*m", "", ConsoleReporter().report(project.workspace))

        assert "root-module-with-parent" in output
        assert "BUILD ORDER" in output
