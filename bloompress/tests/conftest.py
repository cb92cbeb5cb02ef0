"""
Pytest configuration and shared fixtures for bloompress tests
"""

import pytest
import random
from typing import List

from bloompress.models import Bitmap


def random_bitmap(bit_length: int, density: float, seed: int = 0) -> Bitmap:
    """Bloom-filter-like bitmap with roughly ``density`` of its bits set"""
    rng = random.Random(seed)
    return Bitmap.from_positions(
        (i for i in range(bit_length) if rng.random() < density), bit_length
    )


@pytest.fixture
def vector_bitmap() -> Bitmap:
    """10-bit bitmap with positions {0, 3, 9}"""
    return Bitmap(bytes([0b00001001, 0b00000010]), 10)


@pytest.fixture
def empty_bitmap() -> Bitmap:
    return Bitmap.zeros(1000)


@pytest.fixture
def sparse_bitmap() -> Bitmap:
    """About 5% density, the shape of a lightly loaded Bloom filter"""
    return random_bitmap(8192, 0.05, seed=42)


@pytest.fixture
def sample_bitmaps() -> List[Bitmap]:
    """Bitmaps of assorted lengths and densities, including odd bit lengths"""
    bitmaps = [
        random_bitmap(n, density, seed=n)
        for n in (1, 7, 8, 9, 63, 64, 65, 200, 1023, 4096)
        for density in (0.01, 0.1, 0.5, 0.9)
    ]
    bitmaps.append(Bitmap.from_positions(range(100), 100))
    bitmaps.append(Bitmap.from_positions([0], 1))
    bitmaps.append(Bitmap.from_positions([99999], 100000))
    return bitmaps


@pytest.fixture
def bitmap_file(tmp_path, sparse_bitmap):
    """Raw bitmap written to disk"""
    path = tmp_path / "filter.bin"
    path.write_bytes(sparse_bitmap.to_bytes())
    return path
