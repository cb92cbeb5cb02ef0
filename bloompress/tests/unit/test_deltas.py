"""
Unit tests for set-bit scanning and gap extraction
"""

import pytest
from bloompress.models import Bitmap
from bloompress.context.encoding.bitops import ctz, clear_lowest
from bloompress.context.encoding.deltas import iter_set_positions, iter_gaps, extract_gaps


class TestBitPrimitives:
    """Test ctz and clear-lowest-set-bit"""

    @pytest.mark.parametrize("word,expected", [(1, 0), (0b1000, 3), (0b1010, 1), (1 << 63, 63)])
    def test_ctz(self, word, expected):
        assert ctz(word) == expected

    def test_ctz_zero_rejected(self):
        with pytest.raises(ValueError):
            ctz(0)

    def test_clear_lowest(self):
        assert clear_lowest(0b1011) == 0b1010
        assert clear_lowest(1 << 63) == 0


class TestDeltaExtraction:
    """Test gap extraction from bitmaps"""

    def test_vector_gaps(self, vector_bitmap):
        assert extract_gaps(vector_bitmap) == [0, 3, 6]

    def test_empty_bitmap_has_no_gaps(self, empty_bitmap):
        assert extract_gaps(empty_bitmap) == []

    def test_positions_ascending_and_complete(self, sparse_bitmap):
        positions = list(iter_set_positions(sparse_bitmap))
        assert positions == sorted(set(positions))
        assert len(positions) == sparse_bitmap.count()
        assert all(sparse_bitmap[p] for p in positions)

    def test_gaps_sum_to_last_position(self, sparse_bitmap):
        gaps = extract_gaps(sparse_bitmap)
        positions = list(iter_set_positions(sparse_bitmap))
        assert all(g >= 0 for g in gaps)
        assert sum(gaps) == positions[-1]

    def test_word_boundaries(self):
        """Positions either side of 64-bit word edges are all found"""
        positions = [0, 63, 64, 127, 128, 200]
        bitmap = Bitmap.from_positions(positions, 201)
        assert list(iter_set_positions(bitmap)) == positions

    def test_gap_generator_is_single_pass(self, vector_bitmap):
        gaps = iter_gaps(vector_bitmap)
        assert list(gaps) == [0, 3, 6]
        assert list(gaps) == []
