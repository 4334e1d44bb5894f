"""
Command-line interface for blocksort.
"""

from blocksort.cli.commands import bwt, mtf, compress, expand, stats

__all__ = ['bwt', 'mtf', 'compress', 'expand', 'stats']
