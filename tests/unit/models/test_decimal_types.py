"""Tests for the pydantic decimal field types."""

import pytest
from pydantic import BaseModel, ValidationError

from decimals import DecimalField, DecimalNumber, DecimalString
from tests.helpers import d


class Invoice(BaseModel):
    total: DecimalField
    tax_rate: DecimalString


class TestDecimalString:
    """Tests for DecimalString."""

    def test_canonicalizes(self):
        """Strings are normalized to the canonical fixed-point form."""
        invoice = Invoice(total="1", tax_rate="2E-1")
        assert invoice.tax_rate == "0.2"

    def test_accepts_int(self):
        """Ints are accepted and stringified."""
        invoice = Invoice(total="1", tax_rate=5)
        assert invoice.tax_rate == "5"

    @pytest.mark.parametrize("bad", ["1.2.3", "", "abc", 1.5, None])
    def test_rejects_invalid(self, bad):
        """Malformed strings and non-string types fail validation."""
        with pytest.raises(ValidationError):
            Invoice(total="1", tax_rate=bad)


class TestDecimalField:
    """Tests for DecimalField."""

    def test_validates_to_decimal_number(self):
        """Strings become DecimalNumber values with their scale kept."""
        invoice = Invoice(total="19.990", tax_rate="0")
        assert isinstance(invoice.total, DecimalNumber)
        assert invoice.total.same_repr(d("19.990"))

    def test_accepts_instance(self):
        """DecimalNumber instances pass through unchanged."""
        value = d("-3.5")
        invoice = Invoice(total=value, tax_rate="0")
        assert invoice.total is value

    def test_rejects_float(self):
        """Floats are never accepted."""
        with pytest.raises(ValidationError):
            Invoice(total=1.5, tax_rate="0")

    def test_serializes_to_canonical_string(self):
        """Dumps produce the canonical string in python and JSON mode."""
        invoice = Invoice(total="1.5e1", tax_rate="0.10")
        assert invoice.model_dump() == {"total": "15", "tax_rate": "0.10"}
        assert invoice.model_dump_json() == '{"total":"15","tax_rate":"0.10"}'

    def test_json_round_trip(self):
        """A dumped model validates back to an equal model."""
        invoice = Invoice(total="-0.005", tax_rate="0.25")
        restored = Invoice.model_validate_json(invoice.model_dump_json())
        assert restored.total.same_repr(invoice.total)
        assert restored.tax_rate == invoice.tax_rate

    def test_json_schema_is_string(self):
        """The JSON schema describes a patterned string."""
        schema = Invoice.model_json_schema()
        assert schema["properties"]["total"]["type"] == "string"
        assert "pattern" in schema["properties"]["total"]
