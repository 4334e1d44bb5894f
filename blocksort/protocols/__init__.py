"""
Protocols (interfaces) for blocksort components.

This module defines abstract contracts that implementations must follow.
"""

from abc import ABC, abstractmethod

__all__ = [
    'TransformProtocol',
]


class TransformProtocol(ABC):
    """Protocol for a reversible byte-stream transform stage."""

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        """
        Apply the forward transform.

        Args:
            data: Raw input bytes

        Returns:
            Transformed bytes
        """
        pass

    @abstractmethod
    def decode(self, data: bytes) -> bytes:
        """
        Apply the inverse transform.

        Args:
            data: Bytes previously produced by encode()

        Returns:
            Original bytes
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return stage name for progress output."""
        pass
