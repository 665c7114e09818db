"""POM descriptor provider adapter.

Implements DescriptorProviderPort for pom.xml files using ElementTree.
Namespace-agnostic: works with and without the POM 4.0.0 namespace.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from types import MappingProxyType

from reactorscan.domain.exceptions import DiscoveryError, MalformedDescriptorError
from reactorscan.domain.model.descriptor import (
    DEFAULT_TYPE,
    DefaultRelativePath,
    DependencyDecl,
    Descriptor,
    ExplicitRelativePath,
    ParentRef,
    RelativePath,
    SuppressedRelativePath,
)
from reactorscan.domain.ports.descriptor_provider import DescriptorProviderPort

POM_XML = "pom.xml"


class PomDescriptorProvider(DescriptorProviderPort):
    """Reads pom.xml into Descriptor.

    Stateless: every call reads the file again.

    FAIL-FIRST: raises MalformedDescriptorError on any parsing issue.
    """

    def __init__(self, file_name: str = POM_XML) -> None:
        """Initialize provider.

        Args:
            file_name: Descriptor file name inside a project directory
        """
        if not file_name:
            raise ValueError("file_name must not be empty")
        self._file_name = file_name

    @property
    def descriptor_name(self) -> str:
        return self._file_name

    def read_descriptor(self, directory: Path) -> Descriptor | None:
        """Parse the pom.xml of directory.

        Args:
            directory: Project directory

        Returns:
            Descriptor, None if directory has no pom.xml

        Raises:
            MalformedDescriptorError: If XML is invalid or required elements are missing
            DiscoveryError: If the file exists but cannot be read
        """
        path = directory / self._file_name
        if not path.is_file():
            return None

        # Read file - FAIL-FIRST on file errors
        try:
            content = path.read_bytes()
        except OSError as e:
            raise DiscoveryError(path, f"cannot read descriptor: {e.strerror or e}") from e

        try:
            project = ET.fromstring(content)
        except ET.ParseError as e:
            raise MalformedDescriptorError(path, f"invalid XML: {e}") from e

        if _local_name(project.tag) != "project":
            raise MalformedDescriptorError(path, f"root element must be <project>, got <{_local_name(project.tag)}>")

        artifact = _text(project, "artifactId")
        if not artifact:
            raise MalformedDescriptorError(path, "missing <artifactId>")

        parent = _parse_parent(path, _child(project, "parent"))
        group = _text(project, "groupId")
        if not group and parent is None:
            raise MalformedDescriptorError(path, "missing <groupId> and no <parent> to inherit it from")

        version = _text(project, "version")
        if not version and (parent is None or not parent.version):
            raise MalformedDescriptorError(path, "missing <version> and no parent version to inherit")

        try:
            return Descriptor(
                path=path,
                artifact=artifact,
                group=group,
                version=version,
                packaging=_text(project, "packaging") or DEFAULT_TYPE,
                parent=parent,
                dependencies=_parse_dependencies(path, project),
                modules=tuple(
                    text for text in (_strip(m.text) for m in _children(project, "modules", "module")) if text
                ),
                properties=MappingProxyType(_parse_properties(project)),
            )
        except ValueError as e:
            raise MalformedDescriptorError(path, str(e)) from e


def _parse_parent(path: Path, element: ET.Element | None) -> ParentRef | None:
    if element is None:
        return None

    group = _text(element, "groupId")
    artifact = _text(element, "artifactId")
    if not group or not artifact:
        raise MalformedDescriptorError(path, "<parent> requires <groupId> and <artifactId>")

    return ParentRef(
        group=group,
        artifact=artifact,
        version=_text(element, "version"),
        relative_path=_relative_path(_child(element, "relativePath")),
    )


def _relative_path(element: ET.Element | None) -> RelativePath:
    """Absent element, empty element and non-empty element are three different things."""
    if element is None:
        return DefaultRelativePath()
    text = _strip(element.text)
    if not text:
        return SuppressedRelativePath()
    return ExplicitRelativePath(text)


def _parse_dependencies(path: Path, project: ET.Element) -> tuple[DependencyDecl, ...]:
    """Direct <dependencies>, dependencyManagement is not a dependency list."""
    dependencies: list[DependencyDecl] = []
    for element in _children(project, "dependencies", "dependency"):
        group = _text(element, "groupId")
        artifact = _text(element, "artifactId")
        if not group or not artifact:
            raise MalformedDescriptorError(path, "<dependency> requires <groupId> and <artifactId>")
        dependencies.append(
            DependencyDecl(
                group=group,
                artifact=artifact,
                version=_text(element, "version"),
                type=_text(element, "type") or DEFAULT_TYPE,
                classifier=_text(element, "classifier"),
                scope=_text(element, "scope"),
            )
        )
    return tuple(dependencies)


def _parse_properties(project: ET.Element) -> dict[str, str]:
    properties = _child(project, "properties")
    if properties is None:
        return {}
    return {_local_name(p.tag): _strip(p.text) or "" for p in properties if isinstance(p.tag, str)}


def _local_name(tag: str) -> str:
    """Tag without {namespace} prefix."""
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if isinstance(child.tag, str) and _local_name(child.tag) == name:
            return child
    return None


def _children(element: ET.Element, container: str, name: str) -> list[ET.Element]:
    parent = _child(element, container)
    if parent is None:
        return []
    return [c for c in parent if isinstance(c.tag, str) and _local_name(c.tag) == name]


def _text(element: ET.Element, name: str) -> str | None:
    child = _child(element, name)
    if child is None:
        return None
    return _strip(child.text)


def _strip(text: str | None) -> str | None:
    if text is None:
        return None
    return text.strip() or None
