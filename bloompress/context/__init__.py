"""
Context layer - domain-specific implementations.
"""

from bloompress.context.encoding import compress, decompress, estimate_div, extract_gaps

__all__ = [
    'compress',
    'decompress',
    'estimate_div',
    'extract_gaps',
]
