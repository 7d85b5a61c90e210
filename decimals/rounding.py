"""Rounding policy for decimal coefficients.

When an exact result has more fractional digits than requested, the low
digits are discarded and the retained coefficient is either kept or
incremented by one unit in the last place. The decision depends only on
the mode, the sign, the parity of the retained coefficient and how the
discarded part compares to one half unit.
"""

from __future__ import annotations

from enum import Enum

from decimals.digits import DigitBuffer

__all__ = [
    "RoundingMode",
    "should_increment",
    "round_coefficient",
]


class RoundingMode(Enum):
    """How to resolve a result that does not fit the requested scale."""

    HALF_UP = "half_up"  # ties away from zero
    HALF_EVEN = "half_even"  # ties to the even neighbour (banker's rounding)
    TRUNCATE = "truncate"  # toward zero
    CEILING = "ceiling"  # toward positive infinity
    FLOOR = "floor"  # toward negative infinity


def should_increment(
    mode: RoundingMode,
    *,
    negative: bool,
    odd: bool,
    half: int,
    inexact: bool,
) -> bool:
    """Decide whether the retained magnitude gets one unit added.

    Args:
        mode: Rounding mode to apply
        negative: Sign of the value being rounded
        odd: Whether the last retained digit is odd
        half: -1, 0 or 1 as the discarded part is below, at or above one half unit
        inexact: Whether any non-zero digit was discarded

    Returns:
        True if the magnitude must be incremented
    """
    if not isinstance(mode, RoundingMode):
        raise TypeError(f"mode must be RoundingMode, got {type(mode).__name__}")
    if not inexact or mode is RoundingMode.TRUNCATE:
        return False
    if mode is RoundingMode.CEILING:
        return not negative
    if mode is RoundingMode.FLOOR:
        return negative
    if half != 0:
        return half > 0
    if mode is RoundingMode.HALF_UP:
        return True
    return odd


def round_coefficient(
    coefficient: DigitBuffer,
    drop: int,
    mode: RoundingMode,
    *,
    negative: bool,
    sticky: bool = False,
) -> DigitBuffer:
    """Discard the low `drop` digits of a magnitude and round.

    Args:
        coefficient: Exact magnitude
        drop: Number of low decimal digits to discard
        mode: Rounding mode
        negative: Sign of the value the magnitude belongs to
        sticky: True if non-zero digits were already discarded below the
            ones in `coefficient` (turns an apparent tie into "above half")

    Returns:
        The rounded magnitude, 10^drop times smaller
    """
    if drop < 0:
        raise ValueError(f"Cannot drop a negative number of digits: {drop}")
    if drop == 0:
        return coefficient

    retained, discarded = coefficient.split_digits(drop)
    inexact = sticky or not discarded.is_zero
    if discarded.digit_count() < drop:
        # discarded < 10^(drop - 1), so it is below half without building 10^drop
        half = -1
    else:
        half = discarded.mul_small(2).compare(DigitBuffer.pow10(drop))
        if half == 0 and sticky:
            half = 1

    if should_increment(mode, negative=negative, odd=retained.is_odd, half=half, inexact=inexact):
        return retained.add(DigitBuffer.one())
    return retained
