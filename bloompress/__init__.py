"""
bloompress - Golomb-Rice compression for sparse bitmaps

Shrinks Bloom-filter membership arrays before they are sent to a peer in a
private set intersection exchange. Gaps between set bits are coded with a
Golomb-Rice code whose parameter is estimated from the gap statistics.

Architecture:
- Models: Pure data structures (Bitmap, GolombCompressed, CompressionStats)
- Protocols: Interface contracts (BitmapCodecProtocol)
- Context: Codec implementation (delta extraction, estimation, Rice coding)
- Services: Application orchestration (GolombCodec, CodecEvaluator)
- CLI: User interface (compress, decompress, stats commands)
"""

__version__ = "1.0.0"
__license__ = "Apache-2.0"

from bloompress import models, protocols
from bloompress.models import Bitmap, GolombCompressed, CompressionStats, CodecSettings
from bloompress.context.encoding import compress, decompress, estimate_div, MalformedPayloadError
from bloompress.services import GolombCodec, Codec, CodecEvaluator, Evaluator

__all__ = [
    'models',
    'protocols',
    'Bitmap',
    'GolombCompressed',
    'CompressionStats',
    'CodecSettings',
    'compress',
    'decompress',
    'estimate_div',
    'MalformedPayloadError',
    'GolombCodec',
    'Codec',
    'CodecEvaluator',
    'Evaluator',
]
