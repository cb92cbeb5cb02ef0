"""
Compression evaluation for bitmaps.

Measures Golomb-Rice output against the raw bitmap and a zstd baseline, and
sweeps division parameters around the estimate to show how close the
closed-form choice is to the best one.
"""

import time
from typing import List, Optional, Tuple

import zstandard as zstd

from bloompress.models import Bitmap, CompressionStats, MAX_DIV
from bloompress.context.encoding import compress, extract_gaps, encoded_bit_length, estimate_div
from bloompress.context.encoding.bitops import CHAR_SIZE, div_ceil


class CodecEvaluator:
    """Collect compression statistics for bitmaps"""

    def __init__(self, zstd_level: int = 19):
        self.zstd_level = zstd_level
        self._cctx = zstd.ZstdCompressor(level=zstd_level)

    def zstd_size(self, bitmap: Bitmap) -> int:
        return len(self._cctx.compress(bitmap.to_bytes()))

    def evaluate(self, bitmap: Bitmap, div: Optional[int] = None) -> CompressionStats:
        """
        Compress ``bitmap`` and measure the result

        Args:
            bitmap: Bitmap to measure
            div: Division parameter override

        Returns:
            CompressionStats for the Golomb-Rice payload
        """
        start = time.time()
        result = compress(bitmap, div)
        elapsed = time.time() - start
        return CompressionStats(
            bit_length=len(bitmap),
            set_bits=bitmap.count(),
            div=result.div,
            original_size=len(bitmap.data),
            compressed_size=len(result.compressed),
            zstd_size=self.zstd_size(bitmap),
            compression_time=elapsed,
        )

    def sweep(self, bitmap: Bitmap, radius: int = 3) -> List[Tuple[int, int]]:
        """
        Payload size for each div within ``radius`` of the estimate

        Sizes come from codeword lengths, no bitstream is built.

        Returns:
            List of (div, payload_bytes), ascending by div
        """
        gaps = extract_gaps(bitmap)
        if not gaps:
            return [(0, 0)]
        center = estimate_div(gaps).div
        low = max(0, center - radius)
        high = min(MAX_DIV, center + radius)
        return [
            (div, div_ceil(encoded_bit_length(gaps, div), CHAR_SIZE))
            for div in range(low, high + 1)
        ]

    def best_div(self, bitmap: Bitmap, radius: int = 3) -> int:
        """Division parameter with the smallest payload in the sweep"""
        return min(self.sweep(bitmap, radius), key=lambda item: (item[1], item[0]))[0]
