"""
Encoding context: bit scanning, parameter estimation and Golomb-Rice coding.
"""

from bloompress.context.encoding.bitops import ctz, clear_lowest
from bloompress.context.encoding.deltas import iter_set_positions, iter_gaps, extract_gaps
from bloompress.context.encoding.estimator import DivisionEstimate, estimate_div, optimal_div, check_div
from bloompress.context.encoding.rice import (
    MalformedPayloadError, codeword_length, encoded_bit_length, rice_encode, rice_decode
)
from bloompress.context.encoding.golomb import compress, decompress

__all__ = [
    'ctz',
    'clear_lowest',
    'iter_set_positions',
    'iter_gaps',
    'extract_gaps',
    'DivisionEstimate',
    'estimate_div',
    'optimal_div',
    'check_div',
    'MalformedPayloadError',
    'codeword_length',
    'encoded_bit_length',
    'rice_encode',
    'rice_decode',
    'compress',
    'decompress',
]
