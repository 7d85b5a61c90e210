"""Scale alignment and digit-limit checks.

These helpers work on (coefficient, scale) pairs so that both the value
type and the engine can use them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from decimals.digits import DigitBuffer
from decimals.errors import Overflow

if TYPE_CHECKING:
    from decimals.value import DecimalNumber

__all__ = [
    "align",
    "check_digit_count",
    "check_digits",
    "padded_digit_count",
    "rescale",
    "strip_trailing_zeros",
]


def check_digit_count(digits: int, max_digits: int | None, operation: str) -> None:
    """Raise Overflow if a coefficient of `digits` digits would exceed max_digits.

    Lets callers reject a result before building its coefficient.
    """
    if max_digits is not None and digits > max_digits:
        raise Overflow(digits, max_digits, operation)


def padded_digit_count(coefficient: DigitBuffer, count: int) -> int:
    """Digit count of coefficient * 10^count without building it."""
    if coefficient.is_zero:
        return 1
    return coefficient.digit_count() + count


def check_digits(coefficient: DigitBuffer, max_digits: int | None, operation: str) -> DigitBuffer:
    """Return coefficient unchanged if it fits in max_digits.

    Raises:
        Overflow: If the coefficient has more than max_digits digits
    """
    if max_digits is not None:
        check_digit_count(coefficient.digit_count(), max_digits, operation)
    return coefficient


def rescale(coefficient: DigitBuffer, scale: int, new_scale: int) -> DigitBuffer:
    """Pad a coefficient with zeros so it represents the same value at new_scale.

    Raises:
        ValueError: If new_scale is below scale (that needs rounding)
    """
    if new_scale < scale:
        raise ValueError(f"Cannot rescale from {scale} down to {new_scale} without rounding")
    return coefficient.shift_digits(new_scale - scale)


def align(
    a: DecimalNumber,
    b: DecimalNumber,
    max_digits: int | None = None,
    operation: str = "align",
) -> tuple[DigitBuffer, DigitBuffer, int]:
    """Bring two values to their common (larger) scale.

    Returns:
        (coefficient_a, coefficient_b, common_scale)

    Raises:
        Overflow: If a re-scaled coefficient exceeds max_digits
    """
    scale = max(a.scale, b.scale)
    # Checked before padding: a large scale gap would otherwise be materialized
    for value in (a, b):
        check_digit_count(
            padded_digit_count(value.coefficient, scale - value.scale), max_digits, operation
        )
    coefficient_a = rescale(a.coefficient, a.scale, scale)
    coefficient_b = rescale(b.coefficient, b.scale, scale)
    return coefficient_a, coefficient_b, scale


def strip_trailing_zeros(
    coefficient: DigitBuffer,
    scale: int,
    min_scale: int | None = None,
) -> tuple[DigitBuffer, int]:
    """Remove trailing zeros, lowering the scale accordingly.

    Zero strips to scale 0 (or min_scale). With min_scale set, the scale
    never drops below it.
    """
    if coefficient.is_zero:
        return coefficient, 0 if min_scale is None else max(0, min_scale)
    zeros = coefficient.trailing_zeros()
    if min_scale is not None:
        zeros = min(zeros, max(0, scale - min_scale))
    if zeros == 0:
        return coefficient, scale
    stripped, _ = coefficient.split_digits(zeros)
    return stripped, scale - zeros
