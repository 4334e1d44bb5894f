"""
Compressibility metrics for the block-sort stages.

These measure how much an entropy coder would gain from each stage:
1. Order-0 Shannon entropy in bits per byte
2. Size after zstd, as a practical stand-in for a real entropy coder

Nothing here changes the pipeline output.
"""

import math
from collections import Counter
from typing import List

import zstandard as zstd

from blocksort.context.encoding.bwt import bwt_transform
from blocksort.context.encoding.mtf import mtf_encode
from blocksort.errors import require_bytes
from blocksort.models import StageMetrics

DEFAULT_ZSTD_LEVEL = 19


def shannon_entropy(data) -> float:
    """
    Order-0 entropy of a byte sequence

    Returns:
        Bits per byte in [0.0, 8.0]; 0.0 for empty input
    """
    block = require_bytes(data)
    if not block:
        return 0.0

    total = len(block)
    entropy = 0.0
    for count in Counter(block).values():
        p = count / total
        entropy -= p * math.log2(p)
    return entropy


def zstd_size(data, level: int = DEFAULT_ZSTD_LEVEL) -> int:
    """Size of the data after zstd compression at the given level"""
    block = require_bytes(data)
    return len(zstd.ZstdCompressor(level=level).compress(block))


def measure_stages(data, level: int = DEFAULT_ZSTD_LEVEL) -> List[StageMetrics]:
    """
    Measure the raw input, the BWT stream and the BWT+MTF stream

    Args:
        data: Raw input bytes
        level: zstd compression level used for the size estimate

    Returns:
        One StageMetrics per stage, in pipeline order
    """
    raw = require_bytes(data)
    transformed = bwt_transform(raw)
    recoded = mtf_encode(transformed)

    return [
        StageMetrics(
            stage=stage,
            size=len(payload),
            entropy=shannon_entropy(payload),
            zstd_size=zstd_size(payload, level),
        )
        for stage, payload in (('raw', raw), ('bwt', transformed), ('bwt+mtf', recoded))
    ]
