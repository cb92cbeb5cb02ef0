"""
Command line interface for bloompress.
"""

from bloompress.cli.commands import compress, decompress, stats

__all__ = ['compress', 'decompress', 'stats']
