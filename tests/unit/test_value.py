"""Tests for the DecimalNumber value type."""

import pytest

from decimals import DecimalNumber, DigitBuffer, Sign
from tests.helpers import d


class TestDecimalNumberConstruction:
    """Tests for DecimalNumber construction."""

    def test_from_parts(self):
        """A value is built from sign, coefficient and scale."""
        value = DecimalNumber(Sign.NEGATIVE, DigitBuffer.from_int(125), 2)
        assert value.sign is Sign.NEGATIVE
        assert value.coefficient.to_int() == 125
        assert value.scale == 2
        assert value.digits == 3

    def test_zero_coefficient_forces_zero_sign(self):
        """A zero coefficient always has Sign.ZERO."""
        value = DecimalNumber(Sign.NEGATIVE, DigitBuffer.zero(), 3)
        assert value.sign is Sign.ZERO
        assert value.scale == 3

    def test_zero_sign_with_nonzero_coefficient_raises(self):
        """Sign.ZERO requires a zero coefficient."""
        with pytest.raises(ValueError):
            DecimalNumber(Sign.ZERO, DigitBuffer.one(), 0)

    def test_invalid_types_raise(self):
        """Parts must have the right types."""
        with pytest.raises(TypeError):
            DecimalNumber(1, DigitBuffer.one(), 0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            DecimalNumber(Sign.POSITIVE, 1, 0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            DecimalNumber(Sign.POSITIVE, DigitBuffer.one(), 1.0)  # type: ignore[arg-type]

    def test_from_int(self):
        """from_int handles sign and optional scale."""
        assert DecimalNumber.from_int(-42).same_repr(d("-42"))
        assert DecimalNumber.from_int(0).sign is Sign.ZERO
        assert DecimalNumber.from_int(7, scale=3).same_repr(d("7.000"))
        assert DecimalNumber.from_int(2**64).coefficient.to_int() == 2**64

    def test_from_int_rejects_non_int(self):
        """Floats, strings and bools are rejected."""
        for bad in (1.5, "1", True):
            with pytest.raises(TypeError):
                DecimalNumber.from_int(bad)  # type: ignore[arg-type]

    def test_from_int_negative_scale_raises(self):
        """from_int cannot express a negative scale exactly."""
        with pytest.raises(ValueError):
            DecimalNumber.from_int(5, scale=-1)

    def test_zero(self):
        """zero() keeps the requested scale."""
        assert DecimalNumber.zero(2).same_repr(d("0.00"))

    def test_immutable(self):
        """Attributes cannot be reassigned."""
        value = d("1.5")
        with pytest.raises(AttributeError):
            value.scale = 3  # type: ignore[misc]


class TestDecimalNumberEquality:
    """Tests for numeric equality and hashing."""

    def test_equal_across_scales(self):
        """Equality normalizes scales instead of comparing triples."""
        assert d("1.0") == d("1.00")
        assert d("1200") == d("12e2")
        assert d("0") == d("-0.000")
        assert d("1.0") != d("1.01")

    def test_same_repr_is_structural(self):
        """same_repr distinguishes scales."""
        assert not d("1.0").same_repr(d("1.00"))
        assert d("1.0").same_repr(d("1.0"))

    def test_hash_consistent_with_equality(self):
        """Numerically equal values hash alike."""
        assert hash(d("1.0")) == hash(d("1.000"))
        assert hash(d("0.00")) == hash(d("0"))
        assert len({d("2.50"), d("2.5"), d("2.500")}) == 1

    def test_compare_with_int(self):
        """Values compare with plain ints."""
        assert d("5.00") == 5
        assert hash(d("5.00")) == hash(5)
        assert d("4.99") < 5
        assert d("-1") < 0

    def test_not_equal_to_other_types(self):
        """Floats and strings are never equal to a value."""
        assert d("1.5") != 1.5
        assert d("1.5") != "1.5"

    def test_ordering_with_float_raises(self):
        """Ordering against floats is not supported."""
        with pytest.raises(TypeError):
            d("1.5") < 2.0  # type: ignore[operator]

    def test_ordering(self):
        """Ordering dunders follow compare."""
        values = [d(text) for text in ("3", "-1.5", "0.001", "-20", "0", "2.9999")]
        assert [str(v) for v in sorted(values)] == ["-20", "-1.5", "0", "0.001", "2.9999", "3"]
        assert d("1.10") <= d("1.1")
        assert d("1.10") >= d("1.1")
        assert d("-0.1") > d("-0.2")

    def test_compare_different_magnitudes(self):
        """Far-apart magnitudes compare without aligning."""
        assert d("1e-100").compare(d("1")) == -1
        assert d("-1e100").compare(d("-1")) == -1


class TestDecimalNumberHelpers:
    """Tests for sign helpers and conversions."""

    def test_negate(self):
        """negate flips the sign and keeps the scale."""
        assert d("1.50").negate().same_repr(d("-1.50"))
        assert d("-1.50").negate().same_repr(d("1.50"))
        assert d("0.0").negate().same_repr(d("0.0"))

    def test_copy_abs(self):
        """copy_abs drops a negative sign."""
        assert d("-3.2").copy_abs().same_repr(d("3.2"))
        assert d("3.2").copy_abs().same_repr(d("3.2"))

    @pytest.mark.parametrize(
        "text,expected",
        [("12.99", 12), ("-12.99", -12), ("0.5", 0), ("12e3", 12000), ("7", 7), ("-0.0", 0)],
    )
    def test_to_int_truncates(self, text, expected):
        """to_int truncates toward zero."""
        assert d(text).to_int() == expected

    def test_bool(self):
        """Zero is falsy, everything else truthy."""
        assert not d("0.00")
        assert d("0.01")

    def test_repr(self):
        """repr shows the canonical string."""
        assert repr(d("-1.50")) == "DecimalNumber('-1.50')"
