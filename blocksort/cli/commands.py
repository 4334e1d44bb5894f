"""
CLI commands for blocksort.
"""

import click
import sys
from pathlib import Path

from blocksort.context.encoding.bwt import bwt_transform, bwt_inverse
from blocksort.context.encoding.mtf import mtf_encode, mtf_decode
from blocksort.errors import BlockSortError
from blocksort.models import PipelineSettings
from blocksort.services import BlockSortPipeline


def _fail(message):
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.command()
@click.option('--transform', 'mode', flag_value='transform', help='Apply the forward transform')
@click.option('--inverse', 'mode', flag_value='inverse', help='Apply the inverse transform')
@click.option('--input', '-i', 'source', type=click.File('rb'), default='-', help='Input file (default: stdin)')
@click.option('--output', '-o', 'target', type=click.File('wb'), default='-', help='Output file (default: stdout)')
def bwt(mode, source, target):
    """
    Burrows-Wheeler transform of a whole byte stream.

    Example:
        blocksort bwt --transform < abra.txt | blocksort bwt --inverse
    """
    if mode is None:
        _fail("Specify --transform or --inverse")

    data = source.read()
    try:
        result = bwt_transform(data) if mode == 'transform' else bwt_inverse(data)
    except BlockSortError as e:
        _fail(e)
    target.write(result)


@click.command()
@click.option('--encode', 'mode', flag_value='encode', help='Recode bytes as list positions')
@click.option('--decode', 'mode', flag_value='decode', help='Map list positions back to bytes')
@click.option('--input', '-i', 'source', type=click.File('rb'), default='-', help='Input file (default: stdin)')
@click.option('--output', '-o', 'target', type=click.File('wb'), default='-', help='Output file (default: stdout)')
def mtf(mode, source, target):
    """
    Move-to-front recoding of a whole byte stream.

    Example:
        blocksort bwt --transform < abra.txt | blocksort mtf --encode > abra.mtf
    """
    if mode is None:
        _fail("Specify --encode or --decode")

    data = source.read()
    result = mtf_encode(data) if mode == 'encode' else mtf_decode(data)
    target.write(result)


@click.command()
@click.option('--input', '-i', required=True, help='Input file path')
@click.option('--output', '-o', required=True, help='Output file path')
@click.option('--measure', '-m', is_flag=True, help='Display sizes and timing')
@click.option('--no-bwt', is_flag=True, help='Skip the Burrows-Wheeler stage')
@click.option('--no-mtf', is_flag=True, help='Skip the move-to-front stage')
@click.option('--verbose', '-v', is_flag=True, help='Print progress for each stage')
def compress(input, output, measure, no_bwt, no_mtf, verbose):
    """
    Run a file through the BWT + MTF pipeline.

    Example:
        blocksort compress -i book.txt -o book.bs -m
    """
    input_path = Path(input)
    output_path = Path(output)

    if not input_path.exists():
        _fail(f"Input file not found: {input}")

    # Create output directory if needed
    output_path.parent.mkdir(parents=True, exist_ok=True)

    pipeline = BlockSortPipeline(PipelineSettings(apply_bwt=not no_bwt, apply_mtf=not no_mtf))
    data = input_path.read_bytes()

    click.echo(f"Transforming {input_path.name}...")
    try:
        result, stats = pipeline.compress(data, verbose=verbose)
    except BlockSortError as e:
        _fail(e)
    output_path.write_bytes(result)

    if measure:
        click.echo("\n=== Pipeline Results ===")
        click.echo(f"Stages: {' → '.join(stats.stages) or 'none'}")
        click.echo(f"Original size: {stats.original_size} bytes")
        click.echo(f"Output size: {stats.output_size} bytes")
        click.echo(f"Processing time: {stats.elapsed:.2f}s")

    click.echo(f"\n✓ Transformed to {output_path}")


@click.command()
@click.option('--input', '-i', required=True, help='Transformed file path')
@click.option('--output', '-o', required=True, help='Restored file path')
@click.option('--no-bwt', is_flag=True, help='Input was produced with --no-bwt')
@click.option('--no-mtf', is_flag=True, help='Input was produced with --no-mtf')
@click.option('--verbose', '-v', is_flag=True, help='Print progress for each stage')
def expand(input, output, no_bwt, no_mtf, verbose):
    """
    Restore a file produced by `blocksort compress`.

    Example:
        blocksort expand -i book.bs -o book.txt
    """
    input_path = Path(input)
    output_path = Path(output)

    if not input_path.exists():
        _fail(f"Input file not found: {input}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    pipeline = BlockSortPipeline(PipelineSettings(apply_bwt=not no_bwt, apply_mtf=not no_mtf))
    try:
        result = pipeline.decompress(input_path.read_bytes(), verbose=verbose)
    except BlockSortError as e:
        _fail(e)
    output_path.write_bytes(result)

    click.echo(f"✓ Restored {len(result)} bytes to {output_path}")


@click.command()
@click.option('--input', '-i', required=True, help='Input file path')
@click.option('--level', type=int, default=19, help='zstd level for the size estimate (default: 19)')
def stats(input, level):
    """
    Show entropy and zstd size after each pipeline stage.

    Example:
        blocksort stats -i book.txt
    """
    from rich.console import Console
    from rich.table import Table
    from blocksort.services import measure_stages

    input_path = Path(input)
    if not input_path.exists():
        _fail(f"Input file not found: {input}")

    rows = measure_stages(input_path.read_bytes(), level=level)

    table = Table(title=f"Stage metrics: {input_path.name}")
    table.add_column("Stage")
    table.add_column("Bytes", justify="right")
    table.add_column("Entropy (bits/byte)", justify="right")
    table.add_column("zstd bytes", justify="right")
    for row in rows:
        table.add_row(row.stage, str(row.size), f"{row.entropy:.3f}", str(row.zstd_size))

    Console().print(table)


if __name__ == '__main__':
    compress()
