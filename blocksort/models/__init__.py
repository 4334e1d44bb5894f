"""
Data models for blocksort.

This module contains pure data structures with no business logic.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import List

__all__ = [
    'TransformRecord',
    'PipelineSettings',
    'PipelineStats',
    'StageMetrics',
]


@dataclass
class TransformRecord:
    """Output of the forward Burrows-Wheeler transform."""
    first: int  # row of the unrotated input in the sorted rotation matrix
    t: bytes    # last column of the sorted rotation matrix

    def __len__(self) -> int:
        return len(self.t)


@dataclass
class PipelineSettings:
    """Which stages a BlockSortPipeline applies, in order BWT then MTF."""
    apply_bwt: bool = True
    apply_mtf: bool = True


@dataclass
class PipelineStats:
    """Sizes and timing of one pipeline pass."""
    original_size: int
    output_size: int
    stages: List[str] = dataclass_field(default_factory=list)
    elapsed: float = 0.0

    @property
    def ratio(self) -> float:
        return self.original_size / self.output_size if self.output_size > 0 else 0.0


@dataclass
class StageMetrics:
    """Compressibility measurements of the stream after one stage."""
    stage: str
    size: int
    entropy: float  # bits per byte
    zstd_size: int
