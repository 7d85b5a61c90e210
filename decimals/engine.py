"""Decimal arithmetic engine.

DecimalEngine implements exact add, subtract and multiply, rounded divide,
integer power and comparison over DecimalNumber values. An engine is bound
to a DecimalConfig once (maximum digit count, default rounding mode,
default division scale); there is no process-wide mutable state.

Usage pattern:
    from decimals import DecimalConfig, DecimalEngine, RoundingMode

    engine = DecimalEngine(DecimalConfig(max_digits=38))
    total = engine.add("19.99", "0.01")                       # 20.00
    share = engine.divide(total, 3, scale=2, mode=RoundingMode.HALF_EVEN)

Operands may be DecimalNumber, int, or a decimal string. Module-level
functions (add, divide, ...) use an engine with DEFAULT_CONFIG.
"""

from __future__ import annotations

import structlog

from decimals.config import DEFAULT_CONFIG, DecimalConfig
from decimals.digits import DigitBuffer
from decimals.errors import DivisionByZero, InvalidExponent, Overflow
from decimals.formatting import format_decimal
from decimals.normalize import (
    align,
    check_digit_count,
    padded_digit_count,
    rescale,
    strip_trailing_zeros,
)
from decimals.parsing import parse as parse_decimal
from decimals.rounding import RoundingMode, round_coefficient
from decimals.value import DecimalNumber, Sign

logger = structlog.get_logger()

Operand = DecimalNumber | int | str

__all__ = [
    "DecimalEngine",
    "Operand",
    "get_default_engine",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "compare",
    "round_to_scale",
    "from_int",
]


def _check_scale(scale: int) -> int:
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise TypeError(f"scale must be int, got {type(scale).__name__}")
    return scale


class DecimalEngine:
    """Arithmetic over DecimalNumber values under one configuration.

    Add, subtract and multiply are exact and only fail with Overflow when
    max_digits is set. Divide rounds to a requested scale. All operations
    are pure and deterministic.

    Attributes:
        config: Engine configuration
    """

    def __init__(self, config: DecimalConfig | None = None) -> None:
        """Initialize with optional configuration.

        Args:
            config: Engine configuration. Uses DEFAULT_CONFIG if not provided.
        """
        self.config = config or DEFAULT_CONFIG

    # --- Construction and conversion ---

    def parse(self, text: str) -> DecimalNumber:
        """Parse a decimal string, honouring trim_whitespace and max_digits.

        Raises:
            MalformedInput: If text is not a valid decimal string
            Overflow: If the coefficient exceeds max_digits
        """
        value = parse_decimal(text, trim_whitespace=self.config.trim_whitespace)
        self._check(value.coefficient, "parse")
        return value

    def format(self, value: DecimalNumber) -> str:
        return format_decimal(value)

    def from_int(self, value: int, scale: int = 0) -> DecimalNumber:
        result = DecimalNumber.from_int(value, scale)
        self._check(result.coefficient, "from_int")
        return result

    def coerce(self, operand: Operand) -> DecimalNumber:
        """Convert an int or decimal string operand to a DecimalNumber.

        Raises:
            TypeError: If operand is not a DecimalNumber, int or str
        """
        if isinstance(operand, DecimalNumber):
            return operand
        if isinstance(operand, str):
            return self.parse(operand)
        if isinstance(operand, int) and not isinstance(operand, bool):
            return self.from_int(operand)
        raise TypeError(f"Expected DecimalNumber, int or str, got {type(operand).__name__}")

    # --- Arithmetic ---

    def add(self, a: Operand, b: Operand) -> DecimalNumber:
        """Exact sum at the larger of the two scales."""
        a, b = self.coerce(a), self.coerce(b)
        coefficient_a, coefficient_b, scale = self._align(a, b, "add")
        return self._combine(a.is_negative, coefficient_a, b.is_negative, coefficient_b, scale, "add")

    def subtract(self, a: Operand, b: Operand) -> DecimalNumber:
        """Exact difference at the larger of the two scales."""
        a, b = self.coerce(a), self.coerce(b)
        coefficient_a, coefficient_b, scale = self._align(a, b, "subtract")
        b_negative = b.sign is Sign.POSITIVE
        return self._combine(
            a.is_negative, coefficient_a, b_negative, coefficient_b, scale, "subtract"
        )

    def multiply(self, a: Operand, b: Operand) -> DecimalNumber:
        """Exact product; the scale is the sum of the operand scales."""
        a, b = self.coerce(a), self.coerce(b)
        coefficient = a.coefficient.mul(b.coefficient)
        return self._finish(
            a.is_negative != b.is_negative, coefficient, a.scale + b.scale, "multiply"
        )

    def divide(
        self,
        a: Operand,
        b: Operand,
        scale: int | None = None,
        mode: RoundingMode | None = None,
    ) -> DecimalNumber:
        """Quotient rounded to `scale` fractional digits.

        The quotient is computed by long division to one digit beyond the
        requested scale; whether anything remains after that digit is kept
        as a sticky flag so ties are only ties when they are exact.

        Args:
            a: Dividend
            b: Divisor
            scale: Result scale (default: config.default_scale). May be
                negative to round to tens, hundreds, ...
            mode: Rounding mode (default: config.default_rounding)

        Raises:
            DivisionByZero: If b is zero, whatever a is
            Overflow: If the rounded quotient exceeds max_digits
            TypeError: If scale is not an int or mode is not a RoundingMode
        """
        a, b = self.coerce(a), self.coerce(b)
        scale = _check_scale(self.config.default_scale if scale is None else scale)
        mode = self._rounding(mode)

        if b.is_zero:
            logger.debug("division_by_zero", dividend=format_decimal(a))
            raise DivisionByZero(format_decimal(a))

        # a / b = (ca / cb) * 10^(b.scale - a.scale); we want it at scale + 1
        shift = scale + 1 + b.scale - a.scale
        numerator, denominator = a.coefficient, b.coefficient
        if shift < 0 and denominator.digit_count() - shift > numerator.digit_count():
            # Shifted divisor has more digits than the dividend
            quotient, remainder = DigitBuffer.zero(), numerator
        else:
            if shift >= 0:
                # Lower bound on the rounded quotient's digit count
                self._check_count(
                    padded_digit_count(numerator, shift) - denominator.digit_count() - 1,
                    "divide",
                )
                numerator = numerator.shift_digits(shift)
            else:
                denominator = denominator.shift_digits(-shift)
            quotient, remainder = numerator.divmod(denominator)

        negative = a.is_negative != b.is_negative
        coefficient = round_coefficient(
            quotient, 1, mode, negative=negative, sticky=not remainder.is_zero
        )
        return self._finish(negative, coefficient, scale, "divide")

    def power(self, a: Operand, exponent: int) -> DecimalNumber:
        """Raise to a non-negative integer power by repeated squaring.

        x**0 is 1 at scale 0 (including 0**0); otherwise the result scale is
        a.scale * exponent.

        Raises:
            InvalidExponent: If exponent is not a non-negative int
            Overflow: If an intermediate or final coefficient exceeds max_digits
        """
        a = self.coerce(a)
        if isinstance(exponent, bool) or not isinstance(exponent, int) or exponent < 0:
            raise InvalidExponent(exponent)

        result = DigitBuffer.one()
        base = a.coefficient
        remaining = exponent
        # Squares never exceed the final coefficient, so checking them is exact
        while remaining:
            if remaining & 1:
                result = self._check(result.mul(base), "power")
            remaining >>= 1
            if remaining:
                base = self._check(base.mul(base), "power")

        negative = a.is_negative and exponent % 2 == 1
        return self._finish(negative, result, a.scale * exponent, "power")

    def compare(self, a: Operand, b: Operand) -> int:
        """Return -1, 0 or 1 comparing numeric values. Never overflows."""
        return self.coerce(a).compare(self.coerce(b))

    # --- Rounding and sign ---

    def round(self, a: Operand, scale: int, mode: RoundingMode | None = None) -> DecimalNumber:
        """Quantize to `scale` fractional digits.

        Raising the scale pads with zeros (exact); lowering it rounds with
        `mode` (default: config.default_rounding).

        Raises:
            TypeError: If scale is not an int or mode is not a RoundingMode
            Overflow: If the padded coefficient would exceed max_digits
        """
        a = self.coerce(a)
        scale = _check_scale(scale)
        mode = self._rounding(mode)
        if scale >= a.scale:
            self._check_count(padded_digit_count(a.coefficient, scale - a.scale), "round")
            coefficient = rescale(a.coefficient, a.scale, scale)
        else:
            coefficient = round_coefficient(
                a.coefficient, a.scale - scale, mode, negative=a.is_negative
            )
        return self._finish(a.is_negative, coefficient, scale, "round")

    def normalize(self, a: Operand) -> DecimalNumber:
        """Strip trailing fractional zeros (the scale never drops below 0)."""
        a = self.coerce(a)
        if a.scale < 0:
            self._check_count(padded_digit_count(a.coefficient, -a.scale), "normalize")
            return self._finish(a.is_negative, rescale(a.coefficient, a.scale, 0), 0, "normalize")
        coefficient, scale = strip_trailing_zeros(a.coefficient, a.scale, min_scale=0)
        return DecimalNumber(a.sign, coefficient, scale)

    def negate(self, a: Operand) -> DecimalNumber:
        return self.coerce(a).negate()

    def abs(self, a: Operand) -> DecimalNumber:
        return self.coerce(a).copy_abs()

    # --- Internals ---

    def _rounding(self, mode: RoundingMode | None) -> RoundingMode:
        if mode is None:
            return self.config.default_rounding
        if not isinstance(mode, RoundingMode):
            raise TypeError(f"mode must be RoundingMode, got {type(mode).__name__}")
        return mode

    def _check(self, coefficient: DigitBuffer, operation: str) -> DigitBuffer:
        if self.config.max_digits is not None:
            self._check_count(coefficient.digit_count(), operation)
        return coefficient

    def _check_count(self, digits: int, operation: str) -> None:
        try:
            check_digit_count(digits, self.config.max_digits, operation)
        except Overflow as err:
            logger.debug(
                "digit_overflow",
                operation=operation,
                requested_digits=err.requested_digits,
                max_digits=err.max_digits,
            )
            raise

    def _align(
        self, a: DecimalNumber, b: DecimalNumber, operation: str
    ) -> tuple[DigitBuffer, DigitBuffer, int]:
        try:
            return align(a, b, self.config.max_digits, operation)
        except Overflow as err:
            logger.debug(
                "digit_overflow",
                operation=operation,
                requested_digits=err.requested_digits,
                max_digits=err.max_digits,
            )
            raise

    def _combine(
        self,
        a_negative: bool,
        coefficient_a: DigitBuffer,
        b_negative: bool,
        coefficient_b: DigitBuffer,
        scale: int,
        operation: str,
    ) -> DecimalNumber:
        """Add two signed magnitudes that share a scale."""
        if a_negative == b_negative:
            return self._finish(a_negative, coefficient_a.add(coefficient_b), scale, operation)
        order = coefficient_a.compare(coefficient_b)
        if order == 0:
            return DecimalNumber.zero(scale)
        if order > 0:
            return self._finish(a_negative, coefficient_a.sub(coefficient_b), scale, operation)
        return self._finish(b_negative, coefficient_b.sub(coefficient_a), scale, operation)

    def _finish(
        self, negative: bool, coefficient: DigitBuffer, scale: int, operation: str
    ) -> DecimalNumber:
        self._check(coefficient, operation)
        sign = Sign.NEGATIVE if negative else Sign.POSITIVE
        return DecimalNumber(sign, coefficient, scale)


# Engine with DEFAULT_CONFIG backing the module-level functions
_default_engine = DecimalEngine()


def get_default_engine() -> DecimalEngine:
    """Return the engine used by the module-level functions."""
    return _default_engine


def add(a: Operand, b: Operand) -> DecimalNumber:
    return _default_engine.add(a, b)


def subtract(a: Operand, b: Operand) -> DecimalNumber:
    return _default_engine.subtract(a, b)


def multiply(a: Operand, b: Operand) -> DecimalNumber:
    return _default_engine.multiply(a, b)


def divide(
    a: Operand,
    b: Operand,
    scale: int | None = None,
    mode: RoundingMode | None = None,
) -> DecimalNumber:
    return _default_engine.divide(a, b, scale, mode)


def power(a: Operand, exponent: int) -> DecimalNumber:
    return _default_engine.power(a, exponent)


def compare(a: Operand, b: Operand) -> int:
    return _default_engine.compare(a, b)


def round_to_scale(a: Operand, scale: int, mode: RoundingMode | None = None) -> DecimalNumber:
    return _default_engine.round(a, scale, mode)


def from_int(value: int, scale: int = 0) -> DecimalNumber:
    return _default_engine.from_int(value, scale)
