"""
Services layer - application orchestration.
"""

from blocksort.services.pipeline import BlockSortPipeline
from blocksort.services.metrics import shannon_entropy, zstd_size, measure_stages

# Provide consistent naming
Pipeline = BlockSortPipeline

__all__ = [
    'BlockSortPipeline',
    'shannon_entropy',
    'zstd_size',
    'measure_stages',
    # Aliases
    'Pipeline',
]
