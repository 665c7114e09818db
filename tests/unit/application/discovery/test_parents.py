"""Tests for discovery/parents.py."""

from pathlib import Path

import pytest

from reactorscan.application.discovery.parents import (
    explicit_parent_dir,
    parent_candidate_dir,
    resolve_parent_dir,
)
from reactorscan.domain.model.descriptor import (
    DefaultRelativePath,
    ExplicitRelativePath,
    ParentRef,
    SuppressedRelativePath,
)

_CHILD = Path("/ws/root/module")


def _parent(relative_path=DefaultRelativePath()) -> ParentRef:
    return ParentRef(group="org.acme", artifact="root", version="1.0", relative_path=relative_path)


class TestParentCandidateDir:
    """Tests for parent_candidate_dir function."""

    def test_no_parent(self) -> None:
        assert parent_candidate_dir(_CHILD, None, "pom.xml") is None

    def test_default_is_directory_above(self) -> None:
        assert parent_candidate_dir(_CHILD, _parent(), "pom.xml") == Path("/ws/root")

    def test_suppressed_never_resolved(self) -> None:
        """Empty relative path is not the same as an absent one."""
        assert parent_candidate_dir(_CHILD, _parent(SuppressedRelativePath()), "pom.xml") is None

    @pytest.mark.parametrize(
        ("declared", "expected"),
        [
            ("../../pom.xml", "/ws"),
            ("../..", "/ws"),
            ("../sibling", "/ws/root/sibling"),
            ("../sibling/pom.xml", "/ws/root/sibling"),
        ],
    )
    def test_explicit_normalized(self, declared: str, expected: str) -> None:
        found = parent_candidate_dir(_CHILD, _parent(ExplicitRelativePath(declared)), "pom.xml")
        assert found == Path(expected)

    def test_explicit_existing_file_means_its_directory(self, tmp_path: Path) -> None:
        (tmp_path / "parent").mkdir()
        (tmp_path / "parent" / "parent-pom.xml").write_text("<project/>")
        child = tmp_path / "child"
        child.mkdir()

        found = parent_candidate_dir(child, _parent(ExplicitRelativePath("../parent/parent-pom.xml")), "pom.xml")

        assert found == tmp_path / "parent"


class TestResolveParentDir:
    """Tests for resolve_parent_dir function."""

    def test_present(self) -> None:
        found = resolve_parent_dir(_CHILD, _parent(), lambda d: d == Path("/ws/root"), "pom.xml")
        assert found == Path("/ws/root")

    def test_absent(self) -> None:
        assert resolve_parent_dir(_CHILD, _parent(), lambda d: False, "pom.xml") is None

    def test_suppressed_not_checked(self) -> None:
        """Presence check is skipped entirely for an empty relative path."""
        checked: list[Path] = []

        def has(directory: Path) -> bool:
            checked.append(directory)
            return True

        assert resolve_parent_dir(_CHILD, _parent(SuppressedRelativePath()), has, "pom.xml") is None
        assert checked == []


class TestExplicitParentDir:
    """Tests for explicit_parent_dir function."""

    def test_only_explicit_paths(self) -> None:
        assert explicit_parent_dir(_CHILD, _parent(), "pom.xml") is None
        assert explicit_parent_dir(_CHILD, _parent(SuppressedRelativePath()), "pom.xml") is None
        assert explicit_parent_dir(_CHILD, None, "pom.xml") is None

    def test_explicit(self) -> None:
        found = explicit_parent_dir(_CHILD, _parent(ExplicitRelativePath("../../pom.xml")), "pom.xml")
        assert found == Path("/ws")
