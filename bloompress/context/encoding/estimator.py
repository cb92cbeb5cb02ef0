"""
Division parameter estimation for Golomb-Rice coding.

Gaps between set bits of a sparse random bitmap are roughly geometric. For a
geometric source with success probability p the optimal Rice parameter is

    div = round(-log2(-log2(1 - p)))

with p estimated as 1 / mean(gap). Rounding is half away from zero so that
estimates match payloads produced by C/C++ peers bit for bit.
"""

import math
from typing import NamedTuple, Optional, Sequence

from bloompress.models import MAX_DIV


class DivisionEstimate(NamedTuple):
    """Chosen division parameter and whether there was anything to encode"""
    div: int
    has_data: bool


def check_div(div: int) -> int:
    """Validate a division parameter against the 64-bit accumulator"""
    if div < 0:
        raise ValueError(f"Division parameter must be non-negative, got {div}")
    if div > MAX_DIV:
        raise ValueError(f"Division parameter {div} exceeds maximum of {MAX_DIV}")
    return div


def _round_half_away(x: float) -> float:
    return math.floor(x + 0.5) if x >= 0 else math.ceil(x - 0.5)


def optimal_div(mean_gap: float) -> int:
    """
    Closed-form Rice parameter for a geometric source

    Args:
        mean_gap: Arithmetic mean of the gaps

    Returns:
        Non-negative division parameter

    Examples:
        >>> optimal_div(1.0)
        0
        >>> optimal_div(3.0)
        1
        >>> optimal_div(100.0)
        6
    """
    # mean <= 1 puts p at or beyond 1, where the formula has no finite value
    if not mean_gap > 1.0:
        return 0
    p = 1.0 / mean_gap
    inner = -math.log2(1.0 - p)
    # 1 - p rounds to 1.0 for huge means; fall back to the widest remainder
    if inner <= 0.0:
        return MAX_DIV
    div = _round_half_away(-math.log2(inner))
    return min(max(0, int(div)), MAX_DIV)


def estimate_div(gaps: Sequence[int], override: Optional[int] = None) -> DivisionEstimate:
    """
    Pick the division parameter for a gap sequence

    Args:
        gaps: Gap sequence of the bitmap
        override: Caller-supplied parameter, used verbatim when given

    Returns:
        DivisionEstimate; ``has_data`` is False when there are no gaps
    """
    if override is not None:
        check_div(override)
    if not gaps:
        return DivisionEstimate(0, False)
    if override is not None:
        return DivisionEstimate(override, True)
    mean = sum(gaps) / len(gaps)
    return DivisionEstimate(optimal_div(mean), True)
