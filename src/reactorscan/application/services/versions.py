"""Version resolution for CI-friendly placeholders.

Precedence per placeholder: process-wide override, then workspace root property.
Unresolvable placeholders become empty strings (warning logged, not fatal).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from reactorscan.domain.model.configuration import CI_FRIENDLY_PROPERTIES

if TYPE_CHECKING:
    from reactorscan.domain.model.descriptor import ParentRef

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


@dataclass(frozen=True, slots=True)
class ResolvedVersion:
    """Outcome of resolving a raw version.

    Attributes:
        value: Resolved version, None when workspace properties were needed but not given
        needs_workspace: At least one placeholder had no process-wide override
    """

    value: str | None
    needs_workspace: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.value is None and not self.needs_workspace:
            raise ValueError("value may only be None when workspace is needed")


class VersionResolver:
    """Resolves CI-friendly placeholders in raw versions.

    Overrides are queried read-only. Placeholders other than the
    recognized names are left as written.
    """

    def __init__(
        self,
        overrides: Mapping[str, str] | None = None,
        names: frozenset[str] = CI_FRIENDLY_PROPERTIES,
    ) -> None:
        """Initialize resolver.

        Args:
            overrides: Process-wide placeholder values (always win)
            names: Recognized placeholder names
        """
        if not names:
            raise ValueError("names must not be empty")
        self._overrides = MappingProxyType(dict(overrides or {}))
        self._names = names

    def placeholders(self, raw: str | None) -> tuple[str, ...]:
        """Recognized placeholder names referenced by raw, in order of appearance."""
        if not raw:
            return ()
        return tuple(name for name in _PLACEHOLDER.findall(raw) if name in self._names)

    def requires_workspace(self, raw: str | None) -> bool:
        """Check if resolving raw needs workspace properties.

        True iff at least one referenced placeholder has no override.
        """
        return any(name not in self._overrides for name in self.placeholders(raw))

    def resolve(self, raw: str | None, properties: Mapping[str, str] | None = None) -> ResolvedVersion:
        """Resolve recognized placeholders in raw.

        Args:
            raw: Raw version, may contain placeholders
            properties: Workspace root properties, None if no workspace loaded yet

        Returns:
            ResolvedVersion; value is None if properties are needed but missing
        """
        needs_workspace = self.requires_workspace(raw)
        if raw is None:
            return ResolvedVersion(value="", needs_workspace=False)
        if needs_workspace and properties is None:
            return ResolvedVersion(value=None, needs_workspace=True)

        scope = properties or {}

        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in self._names:
                return match.group(0)
            if name in self._overrides:
                return self._overrides[name]
            if name in scope:
                return scope[name]
            logger.warning("placeholder ${%s} in version %r has no value, using empty string", name, raw)
            return ""

        return ResolvedVersion(value=_PLACEHOLDER.sub(substitute, raw), needs_workspace=needs_workspace)


def interpolate_project_expressions(
    value: str | None,
    *,
    group: str,
    artifact: str,
    version: str,
    parent: ParentRef | None = None,
) -> str | None:
    """Replace ${project.*} (and legacy ${pom.*}) coordinate expressions.

    Used on dependency coordinates, e.g. ``${project.groupId}``.
    Unknown expressions are left as written.
    """
    if not value or "${" not in value:
        return value

    known = {
        "groupId": group,
        "artifactId": artifact,
        "version": version,
    }
    if parent is not None:
        known["parent.groupId"] = parent.group
        known["parent.artifactId"] = parent.artifact
        if parent.version is not None:
            known["parent.version"] = parent.version

    def substitute(match: re.Match[str]) -> str:
        expression = match.group(1)
        for prefix in ("project.", "pom."):
            if expression.startswith(prefix):
                key = expression.removeprefix(prefix)
                if key in known:
                    return known[key]
        return match.group(0)

    return _PLACEHOLDER.sub(substitute, value)
