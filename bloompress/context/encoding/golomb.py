"""
Golomb-Rice compression of sparse bitmaps.

Typical use is shipping a Bloom filter to a peer:

    result = compress(bitmap)
    # send result.div, result.compressed and len(bitmap)
    bitmap = decompress(result.compressed, result.div, bit_length)

The payload carries no framing, so ``div`` and the bit length must travel
alongside it.
"""

from typing import Optional, Union

from bloompress.models import Bitmap, GolombCompressed, check_bit_length
from bloompress.context.encoding.deltas import extract_gaps
from bloompress.context.encoding.estimator import check_div, estimate_div
from bloompress.context.encoding.rice import rice_encode, rice_decode

BitmapLike = Union[Bitmap, bytes, bytearray, memoryview]


def _as_bitmap(bitmap: BitmapLike) -> Bitmap:
    if isinstance(bitmap, Bitmap):
        return bitmap
    return Bitmap.from_bytes(bitmap)


def compress(bitmap: BitmapLike, div: Optional[int] = None) -> GolombCompressed:
    """
    Golomb-Rice compress a bitmap

    Args:
        bitmap: Bitmap, or raw LSB-first bytes (every bit counts)
        div: Division parameter; estimated from the gaps when None

    Returns:
        GolombCompressed with the parameter used. A bitmap with no set bits
        gives ``div=0`` and an empty payload.
    """
    gaps = extract_gaps(_as_bitmap(bitmap))
    estimate = estimate_div(gaps, override=div)
    if not estimate.has_data:
        return GolombCompressed(div=0, compressed=b'')
    return GolombCompressed(div=estimate.div, compressed=rice_encode(gaps, estimate.div))


def decompress(compressed: bytes, div: int, bit_length: int, strict: bool = False) -> Bitmap:
    """
    Inverse of :func:`compress`

    Args:
        compressed: Payload bytes
        div: Division parameter returned by compress
        bit_length: Length of the original bitmap in bits
        strict: Raise on payloads that do not fit ``bit_length``

    Returns:
        Bitmap of ``bit_length`` bits
    """
    check_div(div)
    check_bit_length(bit_length)
    return rice_decode(bytes(compressed), div, bit_length, strict=strict)
