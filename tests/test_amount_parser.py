"""Tests for amount parser."""

import pytest
from decimal import Decimal

from invoicekit.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "value,expected",
    [
        ("123.45", Decimal("123.45")),
        ("7", Decimal("7")),
        ("-123.45", Decimal("-123.45")),
        (10, Decimal("10")),
        (0.1, Decimal("0.1")),
        (Decimal("3.300"), Decimal("3.300")),
    ],
)
def test_parse_amount(value, expected):
    """Test parsing supported amount representations."""
    assert parse_amount(value) == expected


def test_parse_float_uses_shortest_repr():
    """Test that floats do not carry binary rounding noise."""
    assert str(parse_amount(49.99)) == "49.99"


def test_parse_amount_keeps_scale():
    """Test that trailing zeros from strings are preserved."""
    assert str(parse_amount("12.50")) == "12.50"


@pytest.mark.parametrize(
    "value",
    [
        "", "   ", "abc", "12.3.4", ".5", "5.", "+5", "1e3", "NaN",
        "$123.45", "€1,234.56", "1,,2", "¥1,0,0", " $ 5 ", "  7.10  ", "١٢",
        True, False, None, [1], {"v": 1},
    ],
)
def test_parse_amount_invalid(value):
    """Test values that are not amounts."""
    with pytest.raises(ValueError):
        parse_amount(value)


def test_parse_amount_does_not_range_check():
    """Test that non-finite values are parsed and left to the caller."""
    assert parse_amount(Decimal("NaN")).is_nan()
    assert parse_amount(float("inf")).is_infinite()
