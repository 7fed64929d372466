"""Amount parsing utilities."""

from decimal import Decimal
import re

# Plain decimal text only: no currency symbols, separators, exponents or padding
AMOUNT_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def parse_amount(value: object) -> Decimal:
    """Parse a wire amount into a Decimal.

    Handles:
    - Decimal values, returned unchanged
    - ints
    - floats, converted through their shortest repr (49.99 -> Decimal("49.99"))
    - plain decimal strings: "123.45", "-123.45", "7"

    Booleans are not amounts even though bool subclasses int. Strings with
    currency symbols, thousands separators, exponents or surrounding
    whitespace are rejected.

    Args:
        value: Amount as received from a payload

    Returns:
        Decimal amount (may be negative, NaN or infinite for non-string
        input; range checks are the caller's job)

    Raises:
        ValueError: If value cannot be read as a number
    """
    if isinstance(value, bool):
        raise ValueError(f"Boolean is not an amount: {value!r}")

    if isinstance(value, Decimal):
        return value

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        return Decimal(repr(value))

    if not isinstance(value, str):
        raise ValueError(f"Unsupported amount type: {type(value).__name__}")

    if not AMOUNT_PATTERN.fullmatch(value):
        raise ValueError(f"Could not parse amount '{value}'")

    return Decimal(value)
