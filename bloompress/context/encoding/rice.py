"""
Golomb-Rice bitstream encoder and decoder.

Each gap d is written as a codeword for parameter p:

    q = d >> p              (q zero bits, then a one bit)
    r = d & ((1 << p) - 1)  (p bits, least significant first)

Codewords are packed back to back into a single LSB-first bitstream with no
header, count or terminator. The decoder therefore needs the division
parameter and the bit length of the original bitmap from the caller.
"""

from typing import Sequence

from bloompress.models import Bitmap
from bloompress.context.encoding.bitops import CHAR_SIZE, ctz, div_ceil, split_cursor


class MalformedPayloadError(ValueError):
    """Payload does not decode to a bitmap of the requested length"""


def codeword_length(gap: int, div: int) -> int:
    """
    Bits taken by one codeword

    Examples:
        >>> codeword_length(6, 0)
        7
        >>> codeword_length(6, 2)
        4
    """
    return (gap >> div) + 1 + div


def encoded_bit_length(gaps: Sequence[int], div: int) -> int:
    """Total bits of the bitstream for ``gaps``"""
    return sum(codeword_length(gap, div) for gap in gaps)


def rice_encode(gaps: Sequence[int], div: int) -> bytes:
    """
    Pack gaps into a Golomb-Rice bitstream

    Args:
        gaps: Non-negative gap sequence
        div: Division parameter (remainder width in bits)

    Returns:
        Bitstream bytes, zero padded to a whole byte
    """
    mask = (1 << div) - 1
    out = bytearray(div_ceil(encoded_bit_length(gaps, div), CHAR_SIZE))
    cursor = 0

    for gap in gaps:
        quotient = gap >> div
        remainder = gap & mask

        # Unary prefix: the zeros are already there, only the terminator is set
        cursor += quotient
        byte_idx, offset = split_cursor(cursor)
        out[byte_idx] |= 1 << offset
        cursor += 1

        # Remainder, split wherever it crosses a byte boundary
        written = 0
        while written < div:
            byte_idx, offset = split_cursor(cursor)
            span = min(CHAR_SIZE - offset, div - written)
            out[byte_idx] |= ((remainder >> written) & ((1 << span) - 1)) << offset
            written += span
            cursor += span

    return bytes(out)


def rice_decode(data: bytes, div: int, bit_length: int, strict: bool = False) -> Bitmap:
    """
    Rebuild a bitmap from a Golomb-Rice bitstream

    Decoding alternates between scanning a unary prefix and reading a
    ``div``-bit remainder, and finishes when a prefix scan runs off the end
    of the stream. Zero padding in the last byte never contains a
    terminator, so it ends the stream cleanly.

    Args:
        data: Bitstream bytes
        div: Division parameter used by the encoder
        bit_length: Length of the output bitmap in bits
        strict: Raise MalformedPayloadError on a truncated remainder or a
                position outside the bitmap instead of stopping

    Returns:
        Bitmap of ``bit_length`` bits
    """
    bitmap = Bitmap.zeros(bit_length)
    if not data:
        return bitmap

    out = bitmap.data
    size = len(data)
    total_bits = size * CHAR_SIZE
    byte_idx, offset = 0, 0
    prefix_sum = 0

    while True:
        # Scanning unary: skip whole zero bytes, then ctz inside the byte
        quotient = 0
        while byte_idx < size and (data[byte_idx] >> offset) == 0:
            quotient += CHAR_SIZE - offset
            offset = 0
            byte_idx += 1
        if byte_idx == size:
            break

        zeros = ctz(data[byte_idx] >> offset)
        quotient += zeros
        cursor = byte_idx * CHAR_SIZE + offset + zeros + 1

        # Reading remainder
        if cursor + div > total_bits:
            if strict:
                raise MalformedPayloadError(
                    f"Remainder at bit {cursor} runs past end of {total_bits}-bit stream"
                )
            break
        remainder = 0
        read = 0
        while read < div:
            byte_idx, offset = split_cursor(cursor)
            span = min(CHAR_SIZE - offset, div - read)
            remainder |= ((data[byte_idx] >> offset) & ((1 << span) - 1)) << read
            read += span
            cursor += span
        byte_idx, offset = split_cursor(cursor)

        prefix_sum += (quotient << div) | remainder
        if prefix_sum >= bit_length:
            if strict:
                raise MalformedPayloadError(
                    f"Decoded position {prefix_sum} outside {bit_length}-bit bitmap"
                )
            break
        out[prefix_sum >> 3] |= 1 << (prefix_sum & 7)

    return bitmap
