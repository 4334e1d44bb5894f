"""
Move-to-front (MTF) byte recoding

Keeps an ordered list of all 256 byte values. Each byte is replaced by its
current position in the list and then moved to the front, so recently seen
bytes get small positions. After a BWT, runs of equal bytes become runs of
zeros, which entropy coders handle very well.

Encoder and decoder start from the same list ([0, 1, ..., 255]) and apply
the same promotions, which is what makes decoding exact.
"""

from typing import Iterator, List

from blocksort.errors import InvalidArgumentError, require_bytes
from blocksort.protocols import TransformProtocol

ALPHABET_SIZE = 256


class MoveToFrontList:
    """
    Ordered list holding every byte value exactly once

    Owned by a single encode or decode pass; create a new one (or reset())
    for every stream.
    """

    def __init__(self):
        self._symbols: List[int] = []
        self.reset()

    def reset(self) -> None:
        """Restore ascending order"""
        self._symbols = list(range(ALPHABET_SIZE))

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[int]:
        return iter(self._symbols)

    def __getitem__(self, position: int) -> int:
        return self._symbols[position]

    def position_of(self, byte: int) -> int:
        """Return the current position of a byte value"""
        if not 0 <= byte < ALPHABET_SIZE:
            raise InvalidArgumentError(f"byte value {byte} out of range [0, {ALPHABET_SIZE})")
        return self._symbols.index(byte)

    def promote(self, position: int) -> int:
        """
        Move the value at position to the front

        Values previously at [0, position) shift right by one.

        Returns:
            The promoted byte value
        """
        if not 0 <= position < ALPHABET_SIZE:
            raise InvalidArgumentError(f"position {position} out of range [0, {ALPHABET_SIZE})")
        symbol = self._symbols.pop(position)
        self._symbols.insert(0, symbol)
        return symbol


def mtf_encode(data) -> bytes:
    """
    Replace every byte by its position in the move-to-front list

    Args:
        data: Input bytes

    Returns:
        One position byte per input byte

    Examples:
        >>> list(mtf_encode(b"CAAABCCCACCF"))
        [67, 66, 0, 0, 67, 2, 0, 0, 2, 1, 0, 70]
    """
    block = require_bytes(data)
    symbols = MoveToFrontList()
    result = bytearray(len(block))

    for k, byte in enumerate(block):
        position = symbols.position_of(byte)
        symbols.promote(position)
        result[k] = position

    return bytes(result)


def mtf_decode(data) -> bytes:
    """
    Map every position back to its byte value

    Args:
        data: Position bytes produced by mtf_encode()

    Returns:
        Original bytes
    """
    block = require_bytes(data)
    symbols = MoveToFrontList()
    result = bytearray(len(block))

    for k, position in enumerate(block):
        result[k] = symbols.promote(position)

    return bytes(result)


class MoveToFrontCodec(TransformProtocol):
    """MTF stage."""

    @property
    def name(self) -> str:
        return 'mtf'

    def encode(self, data: bytes) -> bytes:
        return mtf_encode(data)

    def decode(self, data: bytes) -> bytes:
        return mtf_decode(data)
