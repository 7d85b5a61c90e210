"""Arbitrary-precision base-10 decimal arithmetic.

Exact add/subtract/multiply, correctly rounded divide, integer power and
comparison for financial calculations where binary floating point is not
acceptable:
- DecimalNumber: immutable (sign, coefficient, scale) value
- DecimalEngine: arithmetic bound to a DecimalConfig
- parse / format_decimal: strict canonical string conversion
"""

from decimals.config import DEFAULT_CONFIG, DecimalConfig
from decimals.digits import DigitBuffer
from decimals.engine import (
    DecimalEngine,
    add,
    compare,
    divide,
    from_int,
    get_default_engine,
    multiply,
    power,
    round_to_scale,
    subtract,
)
from decimals.errors import (
    DecimalError,
    DivisionByZero,
    InvalidExponent,
    MalformedInput,
    Overflow,
)
from decimals.formatting import format_decimal
from decimals.parsing import parse
from decimals.result import DecimalResult, ErrorKind
from decimals.rounding import RoundingMode
from decimals.types import DecimalField, DecimalString
from decimals.value import DecimalNumber, Sign

__version__ = "0.1.0"
__all__ = [
    # Values
    "DecimalNumber",
    "Sign",
    "DigitBuffer",
    "RoundingMode",
    # Engine
    "DecimalConfig",
    "DEFAULT_CONFIG",
    "DecimalEngine",
    "get_default_engine",
    # Functions
    "parse",
    "format_decimal",
    "from_int",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "compare",
    "round_to_scale",
    # Errors
    "DecimalError",
    "MalformedInput",
    "DivisionByZero",
    "Overflow",
    "InvalidExponent",
    "DecimalResult",
    "ErrorKind",
    # Model integration
    "DecimalString",
    "DecimalField",
    "__version__",
]
