"""
Exceptions raised by blocksort.

All errors derive from ValueError so callers that already guard
encoder calls with ``except ValueError`` keep working.
"""


class BlockSortError(ValueError):
    """Base class for all blocksort input errors."""


class InvalidArgumentError(BlockSortError):
    """Input is absent, not bytes-like, or an index is out of range."""


class MalformedTransformError(BlockSortError):
    """A BWT record or stream cannot be inverted (bad first index or header)."""


def require_bytes(data, name: str = 'data') -> bytes:
    """
    Validate a byte-sequence argument and return it as immutable bytes

    Args:
        data: bytes, bytearray or memoryview
        name: Argument name used in the error message

    Raises:
        InvalidArgumentError: if data is None or not bytes-like
    """
    if data is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(
            f"{name} must be bytes-like, got {type(data).__name__}"
        )
    return bytes(data)
