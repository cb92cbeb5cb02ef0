"""
Services layer - application orchestration.
"""

from bloompress.services.codec import GolombCodec, CONTAINER_VERSION
from bloompress.services.evaluator import CodecEvaluator

# Provide consistent naming
Codec = GolombCodec
Evaluator = CodecEvaluator

__all__ = [
    'GolombCodec',
    'CodecEvaluator',
    'CONTAINER_VERSION',
    # Aliases
    'Codec',
    'Evaluator',
]
