"""
Burrows-Wheeler Transform (BWT)

The BWT is a block-sorting algorithm that rearranges data to improve
compression ratios. It groups similar characters together without losing
information, making the output far more compressible by move-to-front
and entropy coders.

Algorithm:
1. Block-sort: Order all circular rotations of the input lexicographically
2. Extract last column: This becomes the BWT output
3. Store: Row of the unrotated input (``first``) for reconstruction

The rotations are never built; the circular suffix array orders their
start positions directly. The inverse runs in O(n) using a successor
mapping built with a counting sort over the 256 byte values.

Stream format:
    [first: 4 bytes, big-endian unsigned][t: n bytes]
"""

import struct
from typing import List, Tuple

from blocksort.context.encoding.suffix_array import CircularSuffixArray
from blocksort.errors import MalformedTransformError, InvalidArgumentError, require_bytes
from blocksort.models import TransformRecord
from blocksort.protocols import TransformProtocol

R = 256
HEADER = struct.Struct('>I')


def bwt_encode(data) -> TransformRecord:
    """
    Apply the forward Burrows-Wheeler Transform

    Args:
        data: Input bytes

    Returns:
        TransformRecord(first, t)

    Examples:
        >>> bwt_encode(b"ABRACADABRA!")
        TransformRecord(first=3, t=b'ARD!RCAAAABB')
    """
    block = require_bytes(data)
    n = len(block)
    if n == 0:
        return TransformRecord(first=0, t=b'')

    csa = CircularSuffixArray(block)

    # For rotation starting at position i, the last char is at (i-1) mod n
    last_column = bytearray(n)
    first = -1
    for row, start in enumerate(csa.indices):
        last_column[row] = block[(start - 1 + n) % n]
        if start == 0:
            first = row

    assert first >= 0, "Failed to find original row"
    return TransformRecord(first=first, t=bytes(last_column))


def _successor_map(last_column: bytes) -> Tuple[bytes, List[int]]:
    """
    Stable counting sort of the last column

    Returns:
        (first_column, successor) where first_column is last_column sorted
        and successor[j] is the row whose last byte became first_column[j].
        Ties keep ascending row order.
    """
    n = len(last_column)

    # count[b + 1] holds occurrences of b, prefix sums turn it into offsets
    count = [0] * (R + 1)
    for b in last_column:
        count[b + 1] += 1
    for r in range(R):
        count[r + 1] += count[r]

    first_column = bytearray(n)
    successor = [0] * n
    for i, b in enumerate(last_column):
        j = count[b]
        count[b] += 1
        first_column[j] = b
        successor[j] = i

    return bytes(first_column), successor


def bwt_decode(first: int, t) -> bytes:
    """
    Reverse the Burrows-Wheeler Transform

    Args:
        first: Row of the original input in the sorted rotation matrix
        t: Last column produced by bwt_encode()

    Returns:
        Original bytes

    Raises:
        MalformedTransformError: if first is not in [0, n)
        InvalidArgumentError: if t is not bytes-like

    Content of t is not validated: bytes that are not a real BWT output
    decode to some other byte sequence of the same length.
    """
    last_column = require_bytes(t, 't')
    n = len(last_column)

    if isinstance(first, bool) or not isinstance(first, int):
        raise MalformedTransformError(f"first must be an int, got {type(first).__name__}")
    if n == 0:
        if first != 0:
            raise MalformedTransformError(f"first index {first} given for an empty block")
        return b''
    if not 0 <= first < n:
        raise MalformedTransformError(f"first index {first} out of range [0, {n})")

    first_column, successor = _successor_map(last_column)

    # Walk the rows in original order: the first byte of the current row is
    # the next byte of the input, its successor starts one position later
    result = bytearray(n)
    cursor = first
    for i in range(n):
        result[i] = first_column[cursor]
        cursor = successor[cursor]

    return bytes(result)


def bwt_transform(data) -> bytes:
    """
    Apply the forward transform and serialize it

    Returns:
        4-byte big-endian first index followed by the last column
    """
    record = bwt_encode(data)
    if len(record) > 0xFFFFFFFF:
        raise InvalidArgumentError(f"block of {len(record)} bytes exceeds 32-bit first index")
    return HEADER.pack(record.first) + record.t


def bwt_inverse(stream) -> bytes:
    """
    Parse a serialized transform and reverse it

    Args:
        stream: Bytes produced by bwt_transform()

    Returns:
        Original bytes

    Raises:
        MalformedTransformError: if the header is truncated or first is out of range
    """
    payload = require_bytes(stream, 'stream')
    if len(payload) < HEADER.size:
        raise MalformedTransformError(
            f"expected at least {HEADER.size} header bytes, got {len(payload)}"
        )

    (first,) = HEADER.unpack_from(payload)
    return bwt_decode(first, payload[HEADER.size:])


class BurrowsWheelerCodec(TransformProtocol):
    """BWT stage operating on the serialized stream format."""

    @property
    def name(self) -> str:
        return 'bwt'

    def encode(self, data: bytes) -> bytes:
        return bwt_transform(data)

    def decode(self, data: bytes) -> bytes:
        return bwt_inverse(data)
