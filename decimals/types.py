"""Pydantic field types for exact decimals.

Two annotated types let host models carry decimals over JSON without ever
passing through a float:

- DecimalString: a str field normalized to the canonical fixed-point form
- DecimalField: a DecimalNumber field that validates from str/int and
  serializes back to the canonical string

Example:
    class Invoice(BaseModel):
        total: DecimalField
        tax_rate: DecimalString

    Invoice.model_validate({"total": "19.990", "tax_rate": "2E-1"})
    # total=DecimalNumber('19.990'), tax_rate='0.2'
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from decimals.formatting import format_decimal
from decimals.parsing import parse
from decimals.value import DecimalNumber

# Same grammar the parser accepts
DECIMAL_PATTERN = r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$"


def validate_decimal(value: Any) -> DecimalNumber:
    """Validate a decimal given as DecimalNumber, int or string.

    Args:
        value: Value to validate

    Returns:
        Parsed DecimalNumber

    Raises:
        ValueError: If value is not a valid decimal (MalformedInput is a ValueError)
    """
    if isinstance(value, DecimalNumber):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return DecimalNumber.from_int(value)
    if not isinstance(value, str):
        raise ValueError(f"Decimal must be string or int, got {type(value).__name__}")
    return parse(value)


def canonicalize_decimal(value: Any) -> str:
    """Validate a decimal and return its canonical string."""
    return format_decimal(validate_decimal(value))


# Decimal as canonical fixed-point string (validated)
DecimalString = Annotated[
    str,
    BeforeValidator(canonicalize_decimal),
    Field(description="Exact decimal number as canonical fixed-point string"),
]


class _DecimalNumberAnnotation:
    """Pydantic schema for DecimalNumber fields.

    Validation goes through validate_decimal; serialization always produces
    the canonical string, in both python and JSON mode.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            validate_decimal,
            serialization=core_schema.plain_serializer_function_ser_schema(
                format_decimal, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": DECIMAL_PATTERN}


DecimalField = Annotated[DecimalNumber, _DecimalNumberAnnotation]
