"""
Circular suffix array for block-sorting transforms

Sorts the n circular rotations of a byte sequence without materializing
them. Each rotation is identified by its start position, and positions are
ordered with a 3-way radix quicksort that compares one character at a time.

Example (s = b"ABRA"):

    i   rotation   sorted     index[i]
    0   ABRA       AABR       3
    1   BRAA       ABRA       0
    2   RAAB       BRAA       1
    3   AABR       RAAB       2

Algorithm:
1. Partition the active range on the character at depth d of the pivot
2. Continue the <v and >v ranges at depth d
3. Continue the =v range at depth d+1, unless a whole period has been
   compared, in which case those rotations are identical

The period is the length of the shortest word u with s == u * k. It is n
for most inputs; for periodic inputs such as b"AAAA" or b"ABAB" it stops
the =v chains after p characters instead of n, since rotations i and j
are then equal exactly when i == j (mod p).

Ranges are kept on an explicit work stack, so inputs with long shared
prefixes (depth close to n) do not run into the interpreter recursion limit.
"""

from typing import List

from blocksort.errors import InvalidArgumentError, require_bytes


def _char_at(data: bytes, position: int, depth: int) -> int:
    """Return the depth-th byte of the circular suffix starting at position"""
    return data[(position + depth) % len(data)]


def _swap(index: List[int], i: int, j: int) -> None:
    index[i], index[j] = index[j], index[i]


def _period(data: bytes) -> int:
    """
    Length of the shortest word whose repetition gives data

    Uses the KMP prefix function: the longest proper border b of data gives
    the candidate period n - b, which is a true period only if it divides n.
    """
    n = len(data)
    if n == 0:
        return 0

    border = [0] * n
    for i in range(1, n):
        k = border[i - 1]
        while k > 0 and data[i] != data[k]:
            k = border[k - 1]
        if data[i] == data[k]:
            k += 1
        border[i] = k

    p = n - border[-1]
    return p if n % p == 0 else n


def _sort(data: bytes, index: List[int]) -> None:
    """Sort index in place so that it lists rotations in lexicographic order"""
    n = len(index)
    period = _period(data)
    pending = [(0, n - 1, 0)]

    while pending:
        lo, hi, depth = pending.pop()
        if hi <= lo:
            continue

        lt, gt = lo, hi
        pivot = _char_at(data, index[lo], depth)
        i = lo + 1
        while i <= gt:
            c = _char_at(data, index[i], depth)
            if c < pivot:
                _swap(index, lt, i)
                lt += 1
                i += 1
            elif c > pivot:
                _swap(index, i, gt)
                gt -= 1
            else:
                i += 1

        # index[lo:lt] < pivot, index[lt:gt+1] == pivot, index[gt+1:hi+1] > pivot
        pending.append((gt + 1, hi, depth))
        if depth + 1 < period:
            pending.append((lt, gt, depth + 1))
        pending.append((lo, lt - 1, depth))


class CircularSuffixArray:
    """
    Sorted array of the n circular suffixes of a byte sequence

    Args:
        data: Input bytes (bytes, bytearray or memoryview)

    Raises:
        InvalidArgumentError: if data is None or not bytes-like
    """

    def __init__(self, data):
        block = require_bytes(data)
        self._index = list(range(len(block)))
        _sort(block, self._index)

    def __len__(self) -> int:
        return len(self._index)

    def index(self, i: int) -> int:
        """
        Return the start position of the i-th smallest circular suffix

        Raises:
            InvalidArgumentError: if i is not in [0, n)
        """
        if not isinstance(i, int) or not 0 <= i < len(self._index):
            raise InvalidArgumentError(
                f"row {i!r} out of range [0, {len(self._index)})"
            )
        return self._index[i]

    @property
    def indices(self) -> List[int]:
        """Copy of the full permutation"""
        return list(self._index)


def rank(data) -> List[int]:
    """
    Return the permutation of positions that sorts the circular suffixes

    Args:
        data: Input bytes

    Returns:
        List of start positions, smallest rotation first

    Examples:
        >>> rank(b"ABRA")
        [3, 0, 1, 2]
        >>> rank(b"")
        []
    """
    return CircularSuffixArray(data).indices
