"""Decimal arithmetic error classes.

Every error carries the data needed to report it without re-parsing the
message: the offending text and position for parse errors, the requested
and allowed digit counts for overflow.
"""

from __future__ import annotations


class DecimalError(ArithmeticError):
    """Base error for decimal operations."""

    pass


class MalformedInput(DecimalError, ValueError):
    """Text is not a valid decimal number."""

    def __init__(self, text: str, position: int, reason: str = "invalid character") -> None:
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"Malformed decimal {text!r} at position {position}: {reason}")

    @property
    def offending(self) -> str:
        """The substring starting at the offending position."""
        return self.text[self.position :]


class DivisionByZero(DecimalError, ZeroDivisionError):
    """Divisor is zero (for any dividend, including zero)."""

    def __init__(self, dividend: str) -> None:
        self.dividend = dividend
        super().__init__(f"Division by zero: {dividend} / 0")


class Overflow(DecimalError):
    """Result coefficient exceeds the configured maximum digit count."""

    def __init__(self, requested_digits: int, max_digits: int, operation: str) -> None:
        self.requested_digits = requested_digits
        self.max_digits = max_digits
        self.operation = operation
        super().__init__(
            f"Overflow in {operation}: {requested_digits} digits exceeds maximum of {max_digits}"
        )


class InvalidExponent(DecimalError, ValueError):
    """Power exponent must be a non-negative integer."""

    def __init__(self, exponent: object) -> None:
        self.exponent = exponent
        super().__init__(f"Exponent must be a non-negative integer, got {exponent!r}")
