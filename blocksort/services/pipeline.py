"""
Pipeline: BWT + MTF front end for general-purpose compression

Compression runs the stages in order:
- BWT: block-sort the input, emit [first][last column]
- MTF: recode every byte of that stream as a list position

Decompression runs the inverse stages in reverse order. Both directions
read the whole input into memory; there is no streaming mode.
"""

import time
from typing import List, Optional, Tuple

from blocksort.context.encoding.bwt import BurrowsWheelerCodec
from blocksort.context.encoding.mtf import MoveToFrontCodec
from blocksort.errors import require_bytes
from blocksort.models import PipelineSettings, PipelineStats
from blocksort.protocols import TransformProtocol


class BlockSortPipeline:
    """
    Reversible block-sorting pipeline

    Args:
        settings: Which stages to apply (default: BWT then MTF)
    """

    def __init__(self, settings: Optional[PipelineSettings] = None):
        self.settings = settings or PipelineSettings()
        self.stages: List[TransformProtocol] = []
        if self.settings.apply_bwt:
            self.stages.append(BurrowsWheelerCodec())
        if self.settings.apply_mtf:
            self.stages.append(MoveToFrontCodec())

    @property
    def stage_names(self) -> List[str]:
        return [stage.name for stage in self.stages]

    def compress(self, data, verbose: bool = False) -> Tuple[bytes, PipelineStats]:
        """
        Apply all configured stages

        Args:
            data: Raw input bytes
            verbose: Print progress information

        Returns:
            (transformed bytes, PipelineStats)
        """
        payload = require_bytes(data)
        original_size = len(payload)
        start = time.time()

        if verbose:
            print(f"🗜️  Starting block-sort of {original_size} bytes...")

        total = len(self.stages)
        for step, stage in enumerate(self.stages, 1):
            if verbose:
                print(f"  [{step}/{total}] Applying {stage.name}...")
            before = len(payload)
            payload = stage.encode(payload)
            if verbose:
                print(f"     {stage.name}: {before} → {len(payload)} bytes")

        stats = PipelineStats(
            original_size=original_size,
            output_size=len(payload),
            stages=self.stage_names,
            elapsed=time.time() - start,
        )

        if verbose:
            print(f"  ✓ Done in {stats.elapsed:.3f}s")

        return payload, stats

    def decompress(self, data, verbose: bool = False) -> bytes:
        """
        Undo all configured stages, last stage first

        Args:
            data: Bytes produced by compress() with the same settings
            verbose: Print progress information

        Returns:
            Original bytes
        """
        payload = require_bytes(data)

        if verbose:
            print(f"📂 Expanding {len(payload)} bytes...")

        total = len(self.stages)
        for step, stage in enumerate(reversed(self.stages), 1):
            if verbose:
                print(f"  [{step}/{total}] Reversing {stage.name}...")
            payload = stage.decode(payload)

        if verbose:
            print(f"  ✓ Restored {len(payload)} bytes")

        return payload
