"""
Protocols (interfaces) for bloompress components.

This module defines abstract contracts that implementations must follow.
"""

from abc import ABC, abstractmethod
from typing import Optional
from bloompress.models import Bitmap, GolombCompressed

__all__ = [
    'BitmapCodecProtocol',
]


class BitmapCodecProtocol(ABC):
    """Protocol for bitmap compression/decompression."""

    @abstractmethod
    def compress(self, bitmap: Bitmap, div: Optional[int] = None) -> GolombCompressed:
        """
        Compress a bitmap.

        Args:
            bitmap: Bitmap to compress
            div: Division parameter override (None = estimate)

        Returns:
            Payload plus the division parameter used
        """
        pass

    @abstractmethod
    def decompress(self, compressed: bytes, div: int, bit_length: int) -> Bitmap:
        """
        Rebuild a bitmap from its compressed payload.

        Args:
            compressed: Payload bytes
            div: Division parameter the payload was coded with
            bit_length: Length of the original bitmap in bits

        Returns:
            Bitmap of ``bit_length`` bits
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return codec name for reporting."""
        pass
