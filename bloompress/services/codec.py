"""
GolombCodec: bitmap compression service

Wraps the Golomb-Rice codec for callers that want progress output and a
file container. The container is a msgpack map holding the payload together
with the out-of-band values the payload needs (div and bit length):

    {version, div, bit_length, set_bits, compressed}
"""

import time
from pathlib import Path
from typing import Dict, Any, Optional, Tuple

import msgpack

from bloompress.models import Bitmap, GolombCompressed, CodecSettings
from bloompress.protocols import BitmapCodecProtocol
from bloompress.context.encoding import compress, decompress

CONTAINER_VERSION = 1
CONTAINER_FIELDS = ('version', 'div', 'bit_length', 'compressed')


class GolombCodec(BitmapCodecProtocol):
    """
    Golomb-Rice bitmap codec

    Settings supply the default division parameter, strict decoding and
    verbosity; per-call arguments override them.
    """

    def __init__(self, settings: Optional[CodecSettings] = None):
        self.settings = settings or CodecSettings()

    @property
    def name(self) -> str:
        return "golomb-rice"

    def compress(self, bitmap: Bitmap, div: Optional[int] = None) -> GolombCompressed:
        if div is None:
            div = self.settings.div
        start = time.time()
        result = compress(bitmap, div)
        if self.settings.verbose:
            elapsed = time.time() - start
            print(f"🗜️  Compressed {len(bitmap):,} bits ({bitmap.count():,} set) "
                  f"→ {len(result.compressed):,} bytes, div={result.div} ({elapsed:.3f}s)")
        return result

    def decompress(self, compressed: bytes, div: int, bit_length: int) -> Bitmap:
        start = time.time()
        bitmap = decompress(compressed, div, bit_length, strict=self.settings.strict)
        if self.settings.verbose:
            elapsed = time.time() - start
            print(f"📂 Decompressed {len(compressed):,} bytes → {bit_length:,} bits "
                  f"({bitmap.count():,} set, {elapsed:.3f}s)")
        return bitmap

    def pack(self, bitmap: Bitmap, div: Optional[int] = None) -> Tuple[bytes, GolombCompressed]:
        """
        Compress a bitmap into a self-contained container

        Returns:
            Tuple of (container_bytes, compressed_result)
        """
        result = self.compress(bitmap, div)
        container = {
            'version': CONTAINER_VERSION,
            'div': result.div,
            'bit_length': len(bitmap),
            'set_bits': bitmap.count(),
            'compressed': result.compressed,
        }
        return msgpack.packb(container, use_bin_type=True), result

    def unpack(self, data: bytes) -> Bitmap:
        """Decode a container produced by :meth:`pack`"""
        container = self.read_container(data)
        bitmap = self.decompress(container['compressed'], container['div'], container['bit_length'])
        expected = container.get('set_bits')
        if expected is not None and bitmap.count() != expected:
            raise ValueError(
                f"Container expects {expected} set bits, payload decoded to {bitmap.count()}"
            )
        return bitmap

    @staticmethod
    def read_container(data: bytes) -> Dict[str, Any]:
        """Parse and validate container bytes"""
        container = msgpack.unpackb(data, raw=False)
        if not isinstance(container, dict):
            raise ValueError("Container is not a msgpack map")
        missing = [name for name in CONTAINER_FIELDS if name not in container]
        if missing:
            raise ValueError(f"Container missing fields: {', '.join(missing)}")
        if container['version'] != CONTAINER_VERSION:
            raise ValueError(f"Unsupported container version {container['version']}")
        return container

    def save(self, bitmap: Bitmap, filepath: Path, div: Optional[int] = None) -> GolombCompressed:
        """Compress ``bitmap`` and write the container to ``filepath``"""
        data, result = self.pack(bitmap, div)
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, 'wb') as f:
            f.write(data)
        if self.settings.verbose:
            print(f"💾 Saved container to {filepath} ({len(data):,} bytes)")
        return result

    def load(self, filepath: Path) -> Bitmap:
        """Read a container file and decompress it"""
        with open(filepath, 'rb') as f:
            data = f.read()
        return self.unpack(data)
