"""Tests for the rounding policy."""

import pytest

from decimals.digits import DigitBuffer
from decimals.rounding import RoundingMode, round_coefficient, should_increment
from tests.helpers import digits_of

HALF_UP = RoundingMode.HALF_UP
HALF_EVEN = RoundingMode.HALF_EVEN
TRUNCATE = RoundingMode.TRUNCATE
CEILING = RoundingMode.CEILING
FLOOR = RoundingMode.FLOOR


class TestShouldIncrement:
    """Tests for the increment decision."""

    @pytest.mark.parametrize("mode", list(RoundingMode))
    def test_exact_never_increments(self, mode):
        """Nothing discarded means nothing to round."""
        assert not should_increment(mode, negative=False, odd=True, half=-1, inexact=False)
        assert not should_increment(mode, negative=True, odd=True, half=-1, inexact=False)

    def test_truncate_never_increments(self):
        """Truncate discards without adjustment."""
        assert not should_increment(TRUNCATE, negative=False, odd=True, half=1, inexact=True)
        assert not should_increment(TRUNCATE, negative=True, odd=True, half=1, inexact=True)

    def test_ceiling_is_sign_aware(self):
        """Ceiling grows positive magnitudes only."""
        assert should_increment(CEILING, negative=False, odd=False, half=-1, inexact=True)
        assert not should_increment(CEILING, negative=True, odd=False, half=1, inexact=True)

    def test_floor_is_sign_aware(self):
        """Floor grows negative magnitudes only."""
        assert should_increment(FLOOR, negative=True, odd=False, half=-1, inexact=True)
        assert not should_increment(FLOOR, negative=False, odd=False, half=1, inexact=True)

    @pytest.mark.parametrize("mode", [HALF_UP, HALF_EVEN])
    def test_half_modes_away_from_tie(self, mode):
        """Below half rounds down, above half rounds up."""
        assert not should_increment(mode, negative=False, odd=True, half=-1, inexact=True)
        assert should_increment(mode, negative=False, odd=False, half=1, inexact=True)

    def test_half_up_tie(self):
        """Half-up rounds ties away from zero for either sign."""
        assert should_increment(HALF_UP, negative=False, odd=False, half=0, inexact=True)
        assert should_increment(HALF_UP, negative=True, odd=False, half=0, inexact=True)

    def test_half_even_tie(self):
        """Half-even rounds ties to the even neighbour."""
        assert not should_increment(HALF_EVEN, negative=False, odd=False, half=0, inexact=True)
        assert should_increment(HALF_EVEN, negative=False, odd=True, half=0, inexact=True)

    def test_mode_must_be_rounding_mode(self):
        """String modes are rejected instead of falling through to half-even."""
        with pytest.raises(TypeError):
            should_increment("half_up", negative=False, odd=False, half=0, inexact=True)  # type: ignore[arg-type]


class TestRoundCoefficient:
    """Tests for rounding a coefficient by dropping digits."""

    @pytest.mark.parametrize(
        "value,drop,mode,negative,expected",
        [
            (1234, 2, HALF_UP, False, 12),
            (1250, 2, HALF_UP, False, 13),
            (1250, 2, HALF_EVEN, False, 12),
            (1350, 2, HALF_EVEN, False, 14),
            (1251, 2, HALF_EVEN, False, 13),
            (1299, 2, TRUNCATE, False, 12),
            (1201, 2, CEILING, False, 13),
            (1201, 2, CEILING, True, 12),
            (1201, 2, FLOOR, True, 13),
            (1299, 2, FLOOR, False, 12),
            (1200, 2, CEILING, False, 12),
        ],
    )
    def test_modes(self, value, drop, mode, negative, expected):
        """Each mode rounds the retained digits as documented."""
        result = round_coefficient(digits_of(value), drop, mode, negative=negative)
        assert result.to_int() == expected

    def test_carry_propagates(self):
        """Rounding 999.5 up carries into a new digit."""
        result = round_coefficient(digits_of(9995), 1, HALF_UP, negative=False)
        assert result.to_int() == 1000

    def test_carry_across_limbs(self):
        """Carry crosses a limb boundary."""
        result = round_coefficient(digits_of(10**19 - 1), 1, HALF_UP, negative=False)
        assert result.to_int() == 10**18

    def test_sticky_breaks_tie(self):
        """A tie with non-zero digits further down rounds up even under half-even."""
        result = round_coefficient(digits_of(125), 1, HALF_EVEN, negative=False, sticky=True)
        assert result.to_int() == 13

    def test_sticky_makes_exact_inexact(self):
        """Sticky alone is enough for directed modes to round away."""
        result = round_coefficient(digits_of(120), 1, CEILING, negative=False, sticky=True)
        assert result.to_int() == 13

    def test_drop_more_digits_than_present(self):
        """Dropping more digits than the coefficient has leaves zero or one unit."""
        assert round_coefficient(digits_of(999), 10, HALF_UP, negative=False).is_zero
        assert round_coefficient(digits_of(999), 10, CEILING, negative=False).to_int() == 1

    def test_drop_zero_is_identity(self):
        """Dropping no digits returns the coefficient unchanged."""
        buffer = digits_of(12345)
        assert round_coefficient(buffer, 0, HALF_UP, negative=False) is buffer

    def test_drop_negative_raises(self):
        """Negative drop counts are rejected."""
        with pytest.raises(ValueError):
            round_coefficient(DigitBuffer.one(), -1, HALF_UP, negative=False)
