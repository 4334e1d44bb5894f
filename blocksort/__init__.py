"""
blocksort - Reversible block-sorting front end for compression

Three reversible stages, each usable on its own:
- Suffix ranking: circular suffix array via 3-way radix quicksort
- Burrows-Wheeler transform: last column + first index, O(n) inverse
- Move-to-front: recode bytes as positions in a 256-entry list

Layers:
- Models: Pure data structures (TransformRecord, PipelineStats)
- Protocols: Interface contracts (TransformProtocol)
- Context: Transform implementations (suffix array, BWT, MTF)
- Services: Application orchestration (BlockSortPipeline, metrics)
- CLI: User interface (bwt, mtf, compress, expand, stats commands)
"""

__version__ = "1.0.0"
__license__ = "MIT"

from blocksort import models, protocols
from blocksort.errors import BlockSortError, InvalidArgumentError, MalformedTransformError
from blocksort.context.encoding import (
    CircularSuffixArray,
    rank,
    bwt_encode,
    bwt_decode,
    bwt_transform,
    bwt_inverse,
    mtf_encode,
    mtf_decode,
)
from blocksort.services import BlockSortPipeline, Pipeline

__all__ = [
    'models',
    'protocols',
    'BlockSortError',
    'InvalidArgumentError',
    'MalformedTransformError',
    'CircularSuffixArray',
    'rank',
    'bwt_encode',
    'bwt_decode',
    'bwt_transform',
    'bwt_inverse',
    'mtf_encode',
    'mtf_decode',
    'BlockSortPipeline',
    'Pipeline',
]
