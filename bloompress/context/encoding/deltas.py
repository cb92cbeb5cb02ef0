"""
Delta extraction: gaps between consecutive set bits of a bitmap.

The bitmap is scanned one 64-bit word at a time. Inside a word the lowest
set bit is located with ctz and then cleared, so the cost is proportional to
the number of set bits plus the number of words, never to the bit length.
"""

from typing import Iterator, List

from bloompress.models import Bitmap
from bloompress.context.encoding.bitops import WORD_BYTES, WORD_SIZE, ctz, clear_lowest


def iter_set_positions(bitmap: Bitmap) -> Iterator[int]:
    """
    Yield set-bit positions in ascending order

    Args:
        bitmap: Bitmap to scan

    Yields:
        Position of each set bit, exactly once
    """
    data = bitmap.data
    for word_idx, start in enumerate(range(0, len(data), WORD_BYTES)):
        word = int.from_bytes(data[start:start + WORD_BYTES], 'little')
        base = word_idx * WORD_SIZE
        while word:
            yield base + ctz(word)
            word = clear_lowest(word)


def iter_gaps(bitmap: Bitmap) -> Iterator[int]:
    """
    Yield gaps between successive set bits

    The first gap is the position of the first set bit; every later gap is
    the distance from the previous set bit. Gaps add up to the position of
    the last set bit.

    Examples:
        >>> list(iter_gaps(Bitmap.from_positions([0, 3, 9], 10)))
        [0, 3, 6]
    """
    prev = 0
    for pos in iter_set_positions(bitmap):
        yield pos - prev
        prev = pos


def extract_gaps(bitmap: Bitmap) -> List[int]:
    """Materialized gap list (the generator can only be walked once)"""
    return list(iter_gaps(bitmap))
