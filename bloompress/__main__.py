"""
Entry point for python -m bloompress
"""

import click
from bloompress import __version__
from bloompress.cli import compress, decompress, stats

@click.group()
@click.version_option(version=__version__)
def cli():
    """bloompress - Golomb-Rice compression for Bloom filter bitmaps"""
    pass

cli.add_command(compress)
cli.add_command(decompress)
cli.add_command(stats)

if __name__ == '__main__':
    cli()
