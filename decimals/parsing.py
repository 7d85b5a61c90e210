"""Strict parser for decimal strings.

Accepted grammar:

    [+-] digits [ "." digits ] [ ("e" | "E") [+-] digits ]

The mantissa needs at least one digit on either side of the point, so
"5.", ".5" and "5" are valid but "." is not. Only ASCII digits are
accepted. Errors report the index of the first offending character in the
original string.
"""

from __future__ import annotations

import structlog

from decimals.digits import DigitBuffer
from decimals.errors import MalformedInput
from decimals.value import DecimalNumber, Sign

logger = structlog.get_logger()

__all__ = ["parse", "MAX_EXPONENT_DIGITS"]

# Exponents longer than this are rejected rather than building huge scales
MAX_EXPONENT_DIGITS = 18

_DIGITS = frozenset("0123456789")


def _malformed(text: str, position: int, reason: str) -> MalformedInput:
    logger.debug("malformed_decimal", text=text, position=position, reason=reason)
    return MalformedInput(text, position, reason)


def _reason_for(char: str) -> str:
    if char == ".":
        return "multiple decimal points"
    if char.isspace():
        return "unexpected whitespace"
    if char in "+-":
        return "misplaced sign"
    return f"unexpected character {char!r}"


def _scan_digits(source: str, pos: int) -> int:
    """Return the index just past the run of digits starting at pos."""
    while pos < len(source) and source[pos] in _DIGITS:
        pos += 1
    return pos


def parse(text: str, *, trim_whitespace: bool = False) -> DecimalNumber:
    """Parse a decimal string.

    Args:
        text: String such as "-123.4500" or "1.5E-3"
        trim_whitespace: If True, surrounding whitespace is ignored

    Returns:
        DecimalNumber with scale = (digits after the point) - exponent

    Raises:
        TypeError: If text is not a str
        MalformedInput: If text is not a valid decimal string
    """
    if not isinstance(text, str):
        raise TypeError(f"parse requires str, got {type(text).__name__}")

    source = text
    offset = 0
    if trim_whitespace:
        stripped = text.lstrip()
        offset = len(text) - len(stripped)
        source = stripped.rstrip()

    if not source:
        raise _malformed(text, offset, "empty string")

    pos = 0
    negative = False
    if source[pos] in "+-":
        negative = source[pos] == "-"
        pos += 1

    int_end = _scan_digits(source, pos)
    int_digits = source[pos:int_end]
    pos = int_end

    frac_digits = ""
    if pos < len(source) and source[pos] == ".":
        frac_end = _scan_digits(source, pos + 1)
        frac_digits = source[pos + 1 : frac_end]
        pos = frac_end

    if not int_digits and not frac_digits:
        if pos < len(source) and source[pos] != ".":
            raise _malformed(text, offset + pos, _reason_for(source[pos]))
        raise _malformed(text, offset + pos, "expected digits")

    exponent = 0
    if pos < len(source) and source[pos] in "eE":
        pos += 1
        exponent_negative = False
        if pos < len(source) and source[pos] in "+-":
            exponent_negative = source[pos] == "-"
            pos += 1
        exponent_end = _scan_digits(source, pos)
        if exponent_end == pos:
            raise _malformed(text, offset + pos, "exponent without digits")
        exponent_text = source[pos:exponent_end].lstrip("0") or "0"
        if len(exponent_text) > MAX_EXPONENT_DIGITS:
            raise _malformed(text, offset + pos, "exponent out of range")
        exponent = -int(exponent_text) if exponent_negative else int(exponent_text)
        pos = exponent_end

    if pos < len(source):
        raise _malformed(text, offset + pos, _reason_for(source[pos]))

    coefficient = DigitBuffer.from_digits((int_digits + frac_digits).lstrip("0") or "0")
    sign = Sign.NEGATIVE if negative else Sign.POSITIVE
    return DecimalNumber(sign, coefficient, len(frac_digits) - exponent)
