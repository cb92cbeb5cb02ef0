"""
Performance benchmarks for compression and decompression
"""

import pytest
import time
from bloompress import Bitmap, compress, decompress

@pytest.mark.benchmark
class TestPerformanceBenchmarks:
    """Benchmark codec throughput"""

    def test_compression_throughput(self, sparse_bitmap, benchmark):
        """Benchmark compression of a lightly loaded filter"""
        result = benchmark(compress, sparse_bitmap)
        assert result.compressed

    def test_decompression_throughput(self, sparse_bitmap, benchmark):
        """Benchmark decompression of the same filter"""
        result = compress(sparse_bitmap)
        bitmap = benchmark(decompress, result.compressed, result.div, len(sparse_bitmap))
        assert bitmap == sparse_bitmap

    @pytest.mark.parametrize("bit_length", [1 << 12, 1 << 16, 1 << 20])
    def test_sparse_scan_scales_with_set_bits(self, bit_length):
        """A large, almost empty bitmap is scanned word by word, not bit by bit"""
        sparse = Bitmap.from_positions([0, bit_length // 2, bit_length - 1], bit_length)

        start = time.time()
        result = compress(sparse)
        elapsed = time.time() - start

        assert decompress(result.compressed, result.div, bit_length) == sparse
        # Should stay well under a second even at a million bits
        assert elapsed < 2.0, f"Compressing {bit_length} bits took {elapsed:.2f}s"
