"""Canonical fixed-point rendering of decimal values."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimals.value import DecimalNumber

__all__ = ["format_decimal"]


def format_decimal(value: DecimalNumber) -> str:
    """Render a value as a fixed-point string, never with an exponent.

    - scale > 0: exactly `scale` digits after the decimal point ("0.050")
    - scale <= 0: the coefficient followed by -scale zeros, no point ("1200")
    - zero is unsigned ("0", "0.00")

    Examples:
        (POSITIVE, 12345, 2) -> "123.45"
        (NEGATIVE, 5, 3) -> "-0.005"
        (POSITIVE, 12, -2) -> "1200"
    """
    scale = value.scale
    if value.is_zero:
        return "0." + "0" * scale if scale > 0 else "0"

    digits = value.coefficient.to_digits()
    if scale <= 0:
        body = digits + "0" * -scale
    else:
        if len(digits) <= scale:
            digits = "0" * (scale - len(digits) + 1) + digits
        body = f"{digits[:-scale]}.{digits[-scale:]}"
    return "-" + body if value.is_negative else body
