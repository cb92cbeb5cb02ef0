#!/usr/bin/env python3
"""
Demo: Shipping a Bloom filter between two parties

Builds a Bloom filter over a client's item set, compresses the membership
bitmap with Golomb-Rice coding, and rebuilds it on the "server" side from
the payload plus the out-of-band (div, bit length) pair.

Usage:
    python demo_bloom_exchange.py [--items N] [--fp-rate RATE]

Examples:
    python demo_bloom_exchange.py --items 1000 --fp-rate 0.001
"""

import argparse
import struct
from hashlib import blake2b
from math import ceil, log

from bloompress import Bitmap, GolombCodec, CodecEvaluator


def build_bloom(items, fp_rate: float) -> Bitmap:
    """Plain double-hashing Bloom filter over ``items``"""
    n = max(1, len(items))
    m = ceil(-(n * log(fp_rate)) / (log(2) ** 2))
    k = ceil((m / n) * log(2))
    bitmap = Bitmap.zeros(m)
    for item in items:
        h1, h2 = struct.unpack("<QQ", blake2b(item, digest_size=16).digest())
        for i in range(k):
            bitmap.set((h1 + i * h2) % m)
    return bitmap


def main():
    parser = argparse.ArgumentParser(description="Bloom filter compression demo")
    parser.add_argument("--items", type=int, default=1000, help="Items in the client set")
    parser.add_argument("--fp-rate", type=float, default=0.001, help="Bloom false positive rate")
    args = parser.parse_args()

    items = [f"user-{i}@example.com".encode() for i in range(args.items)]
    bloom = build_bloom(items, args.fp_rate)
    print(f"Bloom filter: {len(bloom):,} bits, {bloom.count():,} set")

    # Client side
    codec = GolombCodec()
    result = codec.compress(bloom)
    message = (result.div, len(bloom), result.compressed)
    print(f"Payload: {len(result.compressed):,} bytes (div={result.div}) "
          f"vs {len(bloom.data):,} bytes raw")

    # Server side
    div, bit_length, payload = message
    received = codec.decompress(payload, div, bit_length)
    assert received == bloom, "Round-trip failed!"
    print("✓ Server rebuilt the identical filter")

    stats = CodecEvaluator().evaluate(bloom)
    print(f"\n{'─'*60}")
    print(f"Golomb-Rice: {stats.compressed_size:,} bytes ({stats.compression_ratio:.2f}x, "
          f"{stats.bits_per_element:.2f} bits/element)")
    print(f"zstd:        {stats.zstd_size:,} bytes")


if __name__ == "__main__":
    main()
