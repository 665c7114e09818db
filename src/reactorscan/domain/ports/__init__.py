"""Domain ports (interfaces)."""

from reactorscan.domain.ports.descriptor_provider import DescriptorProviderPort

__all__ = [
    "DescriptorProviderPort",
]
