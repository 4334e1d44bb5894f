"""
Entry point for python -m blocksort
"""

import click
from blocksort import __version__
from blocksort.cli import bwt, mtf, compress, expand, stats

@click.group()
@click.version_option(version=__version__)
def cli():
    """blocksort - Burrows-Wheeler + move-to-front transform pipeline"""
    pass

cli.add_command(bwt)
cli.add_command(mtf)
cli.add_command(compress)
cli.add_command(expand)
cli.add_command(stats)

if __name__ == '__main__':
    cli()
