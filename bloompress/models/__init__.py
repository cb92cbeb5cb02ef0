"""
Data models for bloompress.

This module contains pure data structures with no codec logic.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

__all__ = [
    'Bitmap',
    'GolombCompressed',
    'CompressionStats',
    'CodecSettings',
    'MAX_DIV',
    'MAX_BIT_LENGTH',
    'check_bit_length',
]

# 64-bit accumulator: quotient << div and every position must fit in it
MAX_DIV = 63
MAX_BIT_LENGTH = (1 << 64) - 1


def check_bit_length(bit_length: int) -> int:
    if bit_length < 0:
        raise ValueError(f"Bit length must be non-negative, got {bit_length}")
    if bit_length > MAX_BIT_LENGTH:
        raise ValueError(f"Bit length {bit_length} exceeds 64-bit limit")
    return bit_length


class Bitmap:
    """
    Fixed-length sequence of bits, stored LSB-first.

    Bit ``i`` lives in byte ``i // 8`` under mask ``1 << (i % 8)``, which is
    the layout Bloom filters use for their membership array. Padding bits
    past the bit length are kept at zero.
    """

    __slots__ = ('data', 'bit_length')

    def __init__(self, data: Union[bytes, bytearray], bit_length: int):
        check_bit_length(bit_length)
        if len(data) != (bit_length + 7) // 8:
            raise ValueError(
                f"Buffer of {len(data)} bytes does not hold exactly {bit_length} bits"
            )
        self.data = bytearray(data)
        self.bit_length = bit_length
        tail = bit_length % 8
        if tail:
            self.data[-1] &= (1 << tail) - 1

    @classmethod
    def zeros(cls, bit_length: int) -> 'Bitmap':
        """All-zero bitmap of ``bit_length`` bits"""
        check_bit_length(bit_length)
        return cls(bytearray((bit_length + 7) // 8), bit_length)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview],
                   bit_length: Optional[int] = None) -> 'Bitmap':
        """
        Wrap raw bitmap bytes.

        Args:
            data: LSB-first bitmap bytes
            bit_length: Number of meaningful bits (default: ``8 * len(data)``)

        Returns:
            Bitmap over a copy of ``data``
        """
        data = bytes(data)
        if bit_length is None:
            bit_length = len(data) * 8
        return cls(data, bit_length)

    @classmethod
    def from_positions(cls, positions: Iterable[int], bit_length: int) -> 'Bitmap':
        """Build a bitmap with the given positions switched on"""
        bitmap = cls.zeros(bit_length)
        for pos in positions:
            bitmap.set(pos)
        return bitmap

    def set(self, index: int):
        if not 0 <= index < self.bit_length:
            raise IndexError(f"Bit {index} out of range for {self.bit_length}-bit bitmap")
        self.data[index >> 3] |= 1 << (index & 7)

    def __getitem__(self, index: int) -> bool:
        if not 0 <= index < self.bit_length:
            raise IndexError(f"Bit {index} out of range for {self.bit_length}-bit bitmap")
        return bool(self.data[index >> 3] & (1 << (index & 7)))

    def __len__(self) -> int:
        return self.bit_length

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self.bit_length == other.bit_length and self.data == other.data

    def __repr__(self):
        return f"Bitmap(bits={self.bit_length}, set={self.count()})"

    def positions(self) -> Iterator[int]:
        """Set-bit positions in ascending order"""
        from bloompress.context.encoding.deltas import iter_set_positions
        return iter_set_positions(self)

    def count(self) -> int:
        """Number of set bits"""
        return sum(bin(byte).count('1') for byte in self.data)

    def to_bytes(self) -> bytes:
        return bytes(self.data)


@dataclass(frozen=True)
class GolombCompressed:
    """Golomb-Rice payload and the division parameter it was coded with"""
    div: int
    compressed: bytes

    def __repr__(self):
        return f"GolombCompressed(div={self.div}, bytes={len(self.compressed)})"


@dataclass
class CompressionStats:
    """Statistics about a single bitmap compression"""
    bit_length: int
    set_bits: int
    div: int
    original_size: int
    compressed_size: int
    zstd_size: int
    compression_time: float

    @property
    def compression_ratio(self) -> float:
        return self.original_size / self.compressed_size if self.compressed_size else 0.0

    @property
    def bits_per_element(self) -> float:
        """Encoded bits spent per set bit"""
        return self.compressed_size * 8 / self.set_bits if self.set_bits else 0.0

    def __repr__(self):
        return (f"CompressionStats(ratio={self.compression_ratio:.2f}x, "
                f"div={self.div}, set={self.set_bits}/{self.bit_length})")


@dataclass
class CodecSettings:
    """Runtime settings for the codec service"""
    div: Optional[int] = None  # None = estimate from the bitmap
    strict: bool = False
    zstd_level: int = 19
    verbose: bool = False
    sweep_radius: int = 3
