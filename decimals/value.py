"""Immutable decimal value type.

A DecimalNumber is the triple (sign, coefficient, scale) and represents
sign * coefficient * 10^(-scale). Values are never mutated; every
operation yields a new value.

Equality, ordering and hashing are numeric: 1.0 and 1.00 are equal and
hash alike even though their scales differ. Use same_repr() for the
structural comparison.
"""

from __future__ import annotations

from enum import Enum

from decimals.digits import DigitBuffer
from decimals.formatting import format_decimal
from decimals.normalize import align, strip_trailing_zeros

__all__ = ["Sign", "DecimalNumber"]


class Sign(Enum):
    """Sign of a decimal value. Zero has its own sign."""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


class DecimalNumber:
    """Arbitrary-precision base-10 number.

    Attributes:
        sign: Sign.POSITIVE, Sign.NEGATIVE or Sign.ZERO
        coefficient: Magnitude digits as a DigitBuffer
        scale: Number of digits after the decimal point (may be negative)
    """

    __slots__ = ("_sign", "_coefficient", "_scale")
    _sign: Sign
    _coefficient: DigitBuffer
    _scale: int

    def __init__(self, sign: Sign, coefficient: DigitBuffer, scale: int = 0) -> None:
        """Create a value from its parts.

        A zero coefficient always yields Sign.ZERO whatever sign is passed.

        Raises:
            TypeError: If a part has the wrong type
            ValueError: If a non-zero coefficient is given Sign.ZERO
        """
        if not isinstance(sign, Sign):
            raise TypeError(f"sign must be Sign, got {type(sign).__name__}")
        if not isinstance(coefficient, DigitBuffer):
            raise TypeError(f"coefficient must be DigitBuffer, got {type(coefficient).__name__}")
        if isinstance(scale, bool) or not isinstance(scale, int):
            raise TypeError(f"scale must be int, got {type(scale).__name__}")
        if coefficient.is_zero:
            sign = Sign.ZERO
        elif sign is Sign.ZERO:
            raise ValueError(f"Non-zero coefficient {coefficient} cannot have Sign.ZERO")
        self._sign = sign
        self._coefficient = coefficient
        self._scale = scale

    # --- Construction ---

    @classmethod
    def from_int(cls, value: int, scale: int = 0) -> DecimalNumber:
        """Create from an int, optionally padded to a non-negative scale.

        from_int(5, scale=2) is 5.00.

        Raises:
            TypeError: If value is not an int
            ValueError: If scale is negative
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"DecimalNumber.from_int requires int, got {type(value).__name__}")
        if scale < 0:
            raise ValueError(f"from_int scale must be non-negative, got {scale}")
        coefficient = DigitBuffer.from_int(abs(value)).shift_digits(scale)
        sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
        return cls(sign, coefficient, scale)

    @classmethod
    def zero(cls, scale: int = 0) -> DecimalNumber:
        return cls(Sign.ZERO, DigitBuffer.zero(), scale)

    # --- Properties ---

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def coefficient(self) -> DigitBuffer:
        return self._coefficient

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def is_zero(self) -> bool:
        return self._sign is Sign.ZERO

    @property
    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    @property
    def digits(self) -> int:
        """Number of digits in the coefficient."""
        return self._coefficient.digit_count()

    # --- Sign operations ---

    def negate(self) -> DecimalNumber:
        if self.is_zero:
            return self
        sign = Sign.POSITIVE if self.is_negative else Sign.NEGATIVE
        return DecimalNumber(sign, self._coefficient, self._scale)

    def copy_abs(self) -> DecimalNumber:
        if self.is_negative:
            return DecimalNumber(Sign.POSITIVE, self._coefficient, self._scale)
        return self

    # --- Conversion ---

    def to_int(self) -> int:
        """Integer part, truncated toward zero."""
        if self._scale <= 0:
            magnitude = self._coefficient.shift_digits(-self._scale).to_int()
        else:
            magnitude = self._coefficient.split_digits(self._scale)[0].to_int()
        return -magnitude if self.is_negative else magnitude

    # --- Comparison ---

    def compare(self, other: DecimalNumber) -> int:
        """Return -1, 0 or 1 comparing numeric values.

        Signs are compared first, then the position of the most significant
        digit, and only then the scale-aligned coefficients.
        """
        if self._sign is not other._sign:
            return -1 if self._sign.value < other._sign.value else 1
        if self.is_zero:
            return 0

        magnitude_order = _compare_magnitudes(self, other)
        return -magnitude_order if self.is_negative else magnitude_order

    def same_repr(self, other: DecimalNumber) -> bool:
        """True if sign, coefficient and scale are all identical."""
        return (
            self._sign is other._sign
            and self._scale == other._scale
            and self._coefficient == other._coefficient
        )

    def _normal_key(self) -> tuple[Sign, DigitBuffer, int]:
        coefficient, scale = strip_trailing_zeros(self._coefficient, self._scale)
        return self._sign, coefficient, scale

    def __eq__(self, other: object) -> bool:
        other_value = _coerce_int(other)
        if other_value is None:
            return NotImplemented
        return self.compare(other_value) == 0

    def __lt__(self, other: object) -> bool:
        other_value = _coerce_int(other)
        if other_value is None:
            return NotImplemented
        return self.compare(other_value) < 0

    def __le__(self, other: object) -> bool:
        other_value = _coerce_int(other)
        if other_value is None:
            return NotImplemented
        return self.compare(other_value) <= 0

    def __gt__(self, other: object) -> bool:
        other_value = _coerce_int(other)
        if other_value is None:
            return NotImplemented
        return self.compare(other_value) > 0

    def __ge__(self, other: object) -> bool:
        other_value = _coerce_int(other)
        if other_value is None:
            return NotImplemented
        return self.compare(other_value) >= 0

    def __hash__(self) -> int:
        sign, coefficient, scale = self._normal_key()
        if scale <= 0:
            # Integral values hash like the equal int
            return hash(self.to_int())
        return hash((sign, coefficient, scale))

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self.is_zero

    def __repr__(self) -> str:
        return f"DecimalNumber('{format_decimal(self)}')"

    def __str__(self) -> str:
        return format_decimal(self)


def _compare_magnitudes(a: DecimalNumber, b: DecimalNumber) -> int:
    # Adjusted exponent: a non-zero magnitude lies in [10^(adj-1), 10^adj)
    adjusted_a = a.digits - a.scale
    adjusted_b = b.digits - b.scale
    if adjusted_a != adjusted_b:
        return -1 if adjusted_a < adjusted_b else 1
    coefficient_a, coefficient_b, _ = align(a, b)
    return coefficient_a.compare(coefficient_b)


def _coerce_int(other: object) -> DecimalNumber | None:
    if isinstance(other, DecimalNumber):
        return other
    if isinstance(other, int) and not isinstance(other, bool):
        return DecimalNumber.from_int(other)
    return None
