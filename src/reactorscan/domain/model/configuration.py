"""Discovery configuration.

User-provided configuration for a discovery session.
Process-wide placeholder overrides are captured once and queried read-only.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType

CI_FRIENDLY_PROPERTIES = frozenset({"revision", "sha1", "changelist"})
DEFAULT_BUILD_DIR = "target"
ENVIRON_PREFIX = "REACTORSCAN_"


class MalformedPolicy(Enum):
    """What module expansion does with a malformed module descriptor."""

    FAIL = auto()
    SKIP = auto()


@dataclass(frozen=True, slots=True)
class DiscoveryConfig:
    """Discovery session configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        overrides: Placeholder name → value, always wins over workspace properties.
        ci_properties: Placeholder names substituted in versions.
        build_dir: Build output directory name relative to a project directory.
        malformed_policy: FAIL aborts discovery, SKIP drops the failing module branch.
    """

    overrides: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    ci_properties: frozenset[str] = CI_FRIENDLY_PROPERTIES
    build_dir: str = DEFAULT_BUILD_DIR
    malformed_policy: MalformedPolicy = MalformedPolicy.FAIL

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.ci_properties:
            raise ValueError("ci_properties must not be empty")
        if not self.build_dir:
            raise ValueError("build_dir must not be empty")
        for name, value in self.overrides.items():
            if not isinstance(value, str):
                raise TypeError(f"override '{name}' must be str, got {type(value).__name__}")

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        prefix: str = ENVIRON_PREFIX,
        ci_properties: frozenset[str] = CI_FRIENDLY_PROPERTIES,
        **kwargs: object,
    ) -> DiscoveryConfig:
        """Build config with overrides taken from environment variables.

        A placeholder ``revision`` is overridden by ``<prefix>REVISION``.

        Args:
            environ: Variables to read (default: os.environ)
            prefix: Variable name prefix
            ci_properties: Placeholder names to look up
            **kwargs: Remaining DiscoveryConfig fields

        Returns:
            DiscoveryConfig with overrides for every variable present
        """
        source = os.environ if environ is None else environ
        overrides = {
            name: source[f"{prefix}{name.upper()}"]
            for name in sorted(ci_properties)
            if f"{prefix}{name.upper()}" in source
        }
        return cls(
            overrides=MappingProxyType(overrides),
            ci_properties=ci_properties,
            **kwargs,  # type: ignore[arg-type]
        )
