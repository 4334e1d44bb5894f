"""
Context layer - domain-specific implementations.
"""

from blocksort.context.encoding import (
    CircularSuffixArray,
    BurrowsWheelerCodec,
    MoveToFrontCodec,
)

__all__ = [
    'CircularSuffixArray',
    'BurrowsWheelerCodec',
    'MoveToFrontCodec',
]
