"""Descriptor provider port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from reactorscan.domain.model.descriptor import Descriptor


class DescriptorProviderPort(ABC):
    """Port for reading project descriptors.

    Infrastructure layer must provide implementation.
    """

    @property
    @abstractmethod
    def descriptor_name(self) -> str:
        """File name of a descriptor inside a project directory."""
        ...

    @abstractmethod
    def read_descriptor(self, directory: Path) -> Descriptor | None:
        """Read the descriptor of a project directory.

        Args:
            directory: Project directory

        Returns:
            Parsed Descriptor, None if directory holds no descriptor

        Raises:
            MalformedDescriptorError: If descriptor cannot be parsed
            DiscoveryError: If descriptor cannot be read
        """
        ...

    def has_descriptor(self, directory: Path) -> bool:
        """Check if directory holds a descriptor file, without parsing it."""
        return (directory / self.descriptor_name).is_file()
