"""
Bit-scan primitives and bit cursor helpers.

Python ints stand in for machine words: ``word & -word`` isolates the lowest
set bit, so trailing zeros and clearing the lowest bit are single integer
operations instead of a loop over every bit.
"""

CHAR_SIZE = 8
WORD_SIZE = 64
WORD_BYTES = WORD_SIZE // CHAR_SIZE


def ctz(word: int) -> int:
    """
    Count trailing zero bits of a non-zero word

    Examples:
        >>> ctz(0b1000)
        3
        >>> ctz(1)
        0
    """
    if word == 0:
        raise ValueError("ctz is undefined for zero")
    return (word & -word).bit_length() - 1


def clear_lowest(word: int) -> int:
    """
    Clear the lowest set bit

    Examples:
        >>> clear_lowest(0b1010)
        8
    """
    return word & (word - 1)


def div_ceil(a: int, b: int) -> int:
    return -(-a // b)


def split_cursor(bit_index: int):
    """Split a bit index into (byte_index, bit_offset)"""
    return bit_index >> 3, bit_index & 7
