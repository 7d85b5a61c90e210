"""Explicit result values for fallible decimal operations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from decimals.errors import (
    DecimalError,
    DivisionByZero,
    InvalidExponent,
    MalformedInput,
    Overflow,
)
from decimals.value import DecimalNumber


class ErrorKind(Enum):
    """Types of decimal operation errors."""

    MALFORMED_INPUT = "malformed_input"
    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"
    INVALID_EXPONENT = "invalid_exponent"


_ERROR_KINDS: tuple[tuple[type[DecimalError], ErrorKind], ...] = (
    (MalformedInput, ErrorKind.MALFORMED_INPUT),
    (DivisionByZero, ErrorKind.DIVISION_BY_ZERO),
    (Overflow, ErrorKind.OVERFLOW),
    (InvalidExponent, ErrorKind.INVALID_EXPONENT),
)


def error_kind(err: DecimalError) -> ErrorKind:
    """Map a decimal exception to its ErrorKind.

    Raises:
        TypeError: If err is not one of the known decimal errors
    """
    for error_type, kind in _ERROR_KINDS:
        if isinstance(err, error_type):
            return kind
    raise TypeError(f"Unclassified decimal error: {type(err).__name__}")


@dataclass(frozen=True)
class DecimalResult:
    """Result of a decimal operation.

    Gives callers explicit success/failure handling instead of exceptions
    when they prefer to branch on the outcome.

    Attributes:
        value: The result on success, None on error
        error: If the operation failed, the type of error that occurred
        error_detail: Optional human-readable detail about the error
        exception: The original exception, re-raised by unwrap()

    Examples:
        result = DecimalResult.capture(engine.divide, "1", "0", scale=2)
        assert result.error is ErrorKind.DIVISION_BY_ZERO

        result = DecimalResult.capture(parse, "1.25")
        assert result.is_valid
        assert str(result.unwrap()) == "1.25"
    """

    value: DecimalNumber | None
    error: ErrorKind | None = None
    error_detail: str | None = None
    exception: DecimalError | None = field(default=None, repr=False, compare=False)

    @property
    def is_valid(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if the operation failed with an error."""
        return self.error is not None

    def unwrap(self) -> DecimalNumber:
        """Return the value, or raise the error the operation failed with."""
        if self.exception is not None:
            raise self.exception
        if self.value is None:
            raise DecimalError(self.error_detail or f"Operation failed: {self.error}")
        return self.value

    @classmethod
    def ok(cls, value: DecimalNumber) -> DecimalResult:
        """Create a successful result."""
        return cls(value=value)

    @classmethod
    def with_error(
        cls,
        error: ErrorKind,
        detail: str | None = None,
        exception: DecimalError | None = None,
    ) -> DecimalResult:
        """Create an error result."""
        return cls(value=None, error=error, error_detail=detail, exception=exception)

    @classmethod
    def capture(
        cls, operation: Callable[..., DecimalNumber], *args: Any, **kwargs: Any
    ) -> DecimalResult:
        """Run an operation, turning a raised DecimalError into an error result.

        Errors that are not DecimalError (e.g. TypeError from misuse)
        propagate unchanged.
        """
        try:
            return cls.ok(operation(*args, **kwargs))
        except DecimalError as err:
            return cls.with_error(error_kind(err), str(err), err)
