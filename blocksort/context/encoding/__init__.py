"""
Encoding context for block-sorting transforms.
"""

from blocksort.context.encoding.suffix_array import CircularSuffixArray, rank
from blocksort.context.encoding.bwt import (
    bwt_encode, bwt_decode, bwt_transform, bwt_inverse, BurrowsWheelerCodec
)
from blocksort.context.encoding.mtf import (
    MoveToFrontList, mtf_encode, mtf_decode, MoveToFrontCodec
)

__all__ = [
    'CircularSuffixArray',
    'rank',
    'bwt_encode',
    'bwt_decode',
    'bwt_transform',
    'bwt_inverse',
    'BurrowsWheelerCodec',
    'MoveToFrontList',
    'mtf_encode',
    'mtf_decode',
    'MoveToFrontCodec',
]
