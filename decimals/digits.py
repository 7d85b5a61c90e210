"""Digit buffer for decimal coefficients.

A DigitBuffer holds a non-negative integer as an immutable tuple of limbs in
base 10^9, least-significant limb first. Base 10^9 keeps every limb product
below 10^18 and makes decimal digit operations (shifts by powers of ten,
digit counts, splitting off trailing digits) cheap.

All arithmetic is done limb by limb:
- add/sub: carry and borrow propagation
- mul: schoolbook long multiplication
- divmod: short division for single-limb divisors, Knuth's algorithm D
  (TAOCP Vol. 2, 4.3.1) for multi-limb divisors

Every operation returns a new buffer.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "BASE",
    "BASE_DIGITS",
    "DigitBuffer",
]

BASE = 10**9
BASE_DIGITS = 9

_ASCII_DIGITS = frozenset("0123456789")


def _trim(limbs: list[int]) -> list[int]:
    """Drop high zero limbs, keeping at least one limb."""
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    return limbs


def _mul_small_limbs(limbs: Iterable[int], m: int) -> list[int]:
    """Multiply limbs by 0 <= m < BASE. Result always has one extra limb."""
    result = []
    carry = 0
    for limb in limbs:
        carry, low = divmod(limb * m + carry, BASE)
        result.append(low)
    result.append(carry)
    return result


def _divmod_small_limbs(limbs: list[int] | tuple[int, ...], d: int) -> tuple[list[int], int]:
    """Short division of limbs by 0 < d < BASE."""
    quotient = [0] * len(limbs)
    remainder = 0
    for i in range(len(limbs) - 1, -1, -1):
        quotient[i], remainder = divmod(remainder * BASE + limbs[i], d)
    return quotient, remainder


def _divmod_knuth(u: tuple[int, ...], v: tuple[int, ...]) -> tuple[list[int], list[int]]:
    """Long division of u by v where len(v) >= 2 and len(u) >= len(v).

    Returns (quotient, remainder) limb lists, untrimmed.
    """
    n = len(v)
    m = len(u) - n

    # Normalize so the divisor's top limb is large enough for the
    # two-limb quotient estimate to be off by at most two.
    d = BASE // (v[-1] + 1)
    un = _mul_small_limbs(u, d)
    vn = _mul_small_limbs(v, d)[:n]
    v_top = vn[-1]
    v_second = vn[-2]

    quotient = [0] * (m + 1)
    for j in range(m, -1, -1):
        qhat, rhat = divmod(un[j + n] * BASE + un[j + n - 1], v_top)
        while qhat >= BASE or qhat * v_second > rhat * BASE + un[j + n - 2]:
            qhat -= 1
            rhat += v_top
            if rhat >= BASE:
                break

        # Multiply and subtract qhat * vn from un[j : j + n + 1]
        carry = 0
        borrow = 0
        for i in range(n):
            carry, low = divmod(qhat * vn[i] + carry, BASE)
            diff = un[i + j] - low - borrow
            if diff < 0:
                diff += BASE
                borrow = 1
            else:
                borrow = 0
            un[i + j] = diff
        top = un[j + n] - carry - borrow

        if top < 0:
            # qhat was one too large: add the divisor back
            qhat -= 1
            carry = 0
            for i in range(n):
                carry, un[i + j] = divmod(un[i + j] + vn[i] + carry, BASE)
            top += carry
        un[j + n] = top
        quotient[j] = qhat

    remainder, _ = _divmod_small_limbs(un[:n], d)
    return quotient, remainder


class DigitBuffer:
    """Arbitrary-precision non-negative integer stored as base 10^9 limbs.

    Limbs are little-endian (least-significant first) and never carry high
    zero limbs; zero is the single limb (0,).

    Attributes:
        limbs: The limb tuple (read-only)
    """

    __slots__ = ("_limbs",)
    _limbs: tuple[int, ...]

    def __init__(self, limbs: Iterable[int] = (0,)) -> None:
        """Create a buffer from little-endian limbs.

        Raises:
            ValueError: If a limb is outside [0, BASE)
        """
        values = list(limbs)
        for limb in values:
            if isinstance(limb, bool) or not isinstance(limb, int) or not 0 <= limb < BASE:
                raise ValueError(f"Limb must be an int in [0, {BASE}), got {limb!r}")
        self._limbs = tuple(_trim(values or [0]))

    @classmethod
    def _from_limbs(cls, limbs: list[int]) -> DigitBuffer:
        """Wrap limbs already known to be in range."""
        buffer = cls.__new__(cls)
        buffer._limbs = tuple(_trim(limbs or [0]))
        return buffer

    # --- Construction ---

    @classmethod
    def zero(cls) -> DigitBuffer:
        return cls._from_limbs([0])

    @classmethod
    def one(cls) -> DigitBuffer:
        return cls._from_limbs([1])

    @classmethod
    def from_int(cls, value: int) -> DigitBuffer:
        """Create from a non-negative int.

        Raises:
            TypeError: If value is not an int
            ValueError: If value is negative
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"DigitBuffer requires int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"DigitBuffer cannot hold negative value: {value}")
        limbs = []
        while True:
            value, low = divmod(value, BASE)
            limbs.append(low)
            if not value:
                return cls._from_limbs(limbs)

    @classmethod
    def from_digits(cls, text: str) -> DigitBuffer:
        """Create from a string of ASCII decimal digits.

        Chunks the string into 9-digit groups from the right, so inputs of
        any length are accepted.

        Raises:
            ValueError: If text is empty or contains a non-digit character
        """
        if not text or not _ASCII_DIGITS.issuperset(text):
            raise ValueError(f"Not a digit string: {text!r}")
        limbs = []
        end = len(text)
        while end > 0:
            start = max(0, end - BASE_DIGITS)
            limbs.append(int(text[start:end]))
            end = start
        return cls._from_limbs(limbs)

    @classmethod
    def pow10(cls, exponent: int) -> DigitBuffer:
        """Create 10^exponent for exponent >= 0."""
        if exponent < 0:
            raise ValueError(f"pow10 requires non-negative exponent, got {exponent}")
        whole, part = divmod(exponent, BASE_DIGITS)
        return cls._from_limbs([0] * whole + [10**part])

    # --- Queries ---

    @property
    def limbs(self) -> tuple[int, ...]:
        return self._limbs

    @property
    def is_zero(self) -> bool:
        return self._limbs == (0,)

    @property
    def is_odd(self) -> bool:
        return bool(self._limbs[0] & 1)

    def digit_count(self) -> int:
        """Number of decimal digits (zero has one digit)."""
        return len(str(self._limbs[-1])) + BASE_DIGITS * (len(self._limbs) - 1)

    def trailing_zeros(self) -> int:
        """Number of trailing decimal zeros (zero has none)."""
        if self.is_zero:
            return 0
        count = 0
        for limb in self._limbs:
            if limb == 0:
                count += BASE_DIGITS
                continue
            while limb % 10 == 0:
                limb //= 10
                count += 1
            break
        return count

    def to_int(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * BASE + limb
        return value

    def to_digits(self) -> str:
        """Decimal digit string without leading zeros."""
        head = str(self._limbs[-1])
        return head + "".join(f"{limb:09d}" for limb in reversed(self._limbs[:-1]))

    def compare(self, other: DigitBuffer) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        a, b = self._limbs, other._limbs
        if len(a) != len(b):
            return -1 if len(a) < len(b) else 1
        for x, y in zip(reversed(a), reversed(b)):
            if x != y:
                return -1 if x < y else 1
        return 0

    # --- Arithmetic ---

    def add(self, other: DigitBuffer) -> DigitBuffer:
        a, b = self._limbs, other._limbs
        if len(a) < len(b):
            a, b = b, a
        result = []
        carry = 0
        for i, limb in enumerate(a):
            total = limb + carry + (b[i] if i < len(b) else 0)
            if total >= BASE:
                total -= BASE
                carry = 1
            else:
                carry = 0
            result.append(total)
        if carry:
            result.append(carry)
        return DigitBuffer._from_limbs(result)

    def sub(self, other: DigitBuffer) -> DigitBuffer:
        """Subtract other from self.

        Raises:
            ValueError: If other > self (the result would be negative)
        """
        if self.compare(other) < 0:
            raise ValueError(f"Subtraction underflow: {self.to_digits()} - {other.to_digits()}")
        b = other._limbs
        result = []
        borrow = 0
        for i, limb in enumerate(self._limbs):
            diff = limb - borrow - (b[i] if i < len(b) else 0)
            if diff < 0:
                diff += BASE
                borrow = 1
            else:
                borrow = 0
            result.append(diff)
        return DigitBuffer._from_limbs(result)

    def mul(self, other: DigitBuffer) -> DigitBuffer:
        """Schoolbook long multiplication."""
        if self.is_zero or other.is_zero:
            return DigitBuffer.zero()
        a, b = self._limbs, other._limbs
        result = [0] * (len(a) + len(b))
        for i, x in enumerate(a):
            if x == 0:
                continue
            carry = 0
            for j, y in enumerate(b):
                carry, result[i + j] = divmod(result[i + j] + x * y + carry, BASE)
            result[i + len(b)] = carry
        return DigitBuffer._from_limbs(result)

    def mul_small(self, m: int) -> DigitBuffer:
        """Multiply by a single limb 0 <= m < BASE."""
        if not 0 <= m < BASE:
            raise ValueError(f"mul_small factor must be in [0, {BASE}), got {m}")
        return DigitBuffer._from_limbs(_mul_small_limbs(self._limbs, m))

    def divmod_small(self, d: int) -> tuple[DigitBuffer, int]:
        """Short division by a single limb 0 < d < BASE."""
        if d == 0:
            raise ZeroDivisionError("DigitBuffer division by zero")
        if not 0 < d < BASE:
            raise ValueError(f"divmod_small divisor must be in (0, {BASE}), got {d}")
        quotient, remainder = _divmod_small_limbs(self._limbs, d)
        return DigitBuffer._from_limbs(quotient), remainder

    def divmod(self, other: DigitBuffer) -> tuple[DigitBuffer, DigitBuffer]:
        """Long division returning (quotient, remainder).

        Raises:
            ZeroDivisionError: If other is zero
        """
        if other.is_zero:
            raise ZeroDivisionError("DigitBuffer division by zero")
        if self.compare(other) < 0:
            return DigitBuffer.zero(), self
        if len(other._limbs) == 1:
            quotient, remainder = self.divmod_small(other._limbs[0])
            return quotient, DigitBuffer._from_limbs([remainder])
        quotient_limbs, remainder_limbs = _divmod_knuth(self._limbs, other._limbs)
        return DigitBuffer._from_limbs(quotient_limbs), DigitBuffer._from_limbs(remainder_limbs)

    def shift_digits(self, count: int) -> DigitBuffer:
        """Multiply by 10^count (count >= 0)."""
        if count < 0:
            raise ValueError(f"shift_digits requires non-negative count, got {count}")
        if count == 0 or self.is_zero:
            return self
        whole, part = divmod(count, BASE_DIGITS)
        limbs = _mul_small_limbs(self._limbs, 10**part) if part else list(self._limbs)
        return DigitBuffer._from_limbs([0] * whole + limbs)

    def split_digits(self, count: int) -> tuple[DigitBuffer, DigitBuffer]:
        """Split off the low `count` decimal digits.

        Returns (quotient, remainder) with self == quotient * 10^count + remainder.
        """
        if count < 0:
            raise ValueError(f"split_digits requires non-negative count, got {count}")
        if count == 0:
            return self, DigitBuffer.zero()
        whole, part = divmod(count, BASE_DIGITS)
        low = list(self._limbs[:whole])
        high = list(self._limbs[whole:]) or [0]
        if part:
            high, rem = _divmod_small_limbs(high, 10**part)
            low.append(rem)
        return DigitBuffer._from_limbs(high), DigitBuffer._from_limbs(low)

    # --- Dunder methods ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitBuffer):
            return NotImplemented
        return self._limbs == other._limbs

    def __hash__(self) -> int:
        return hash(self._limbs)

    def __repr__(self) -> str:
        return f"DigitBuffer({self.to_digits()})"

    def __str__(self) -> str:
        return self.to_digits()
