"""Per-field invoice checks.

Each check takes one field value, returns it in normalized form, or raises
ValidationError naming the wire field. The Invoice entity runs them on
construction, so no Invoice can hold a value that fails one.
"""

from decimal import Decimal

from invoicekit.domain.errors import (
    ValidationError,
    ValidationReason,
    amount_too_precise,
    blank_description,
    invalid_amount,
    invalid_card_suffix,
    invalid_timestamp,
    unknown_status,
)
from invoicekit.domain.invoice_status import InvoiceStatus, is_invoice_status
from invoicekit.utils.amount_parser import parse_amount
from invoicekit.utils.date_parser import parse_timestamp

# Wire keys, in canonical output order
AMOUNT = "amount"
DESCRIPTION = "description"
STATUS = "status"
CARD_LAST4_DIGITS = "cardLast4Digits"
CREATED_AT = "createdAt"

FIELDS = (AMOUNT, DESCRIPTION, STATUS, CARD_LAST4_DIGITS, CREATED_AT)

# Amounts travel as JSON numbers; beyond this a double can't hold them exactly
MAX_SIGNIFICANT_DIGITS = 15

_ASCII_DIGITS = frozenset("0123456789")


def check_amount(value: object) -> Decimal:
    """Return value as a finite, non-negative Decimal."""
    try:
        amount = parse_amount(value)
    except ValueError as e:
        raise ValidationError(
            ValidationReason.INVALID_AMOUNT, AMOUNT, invalid_amount(value)
        ) from e

    if not amount.is_finite() or amount < 0:
        raise ValidationError(
            ValidationReason.INVALID_AMOUNT, AMOUNT, invalid_amount(value)
        )

    if len(amount.normalize().as_tuple().digits) > MAX_SIGNIFICANT_DIGITS:
        raise ValidationError(
            ValidationReason.INVALID_AMOUNT,
            AMOUNT,
            amount_too_precise(value, MAX_SIGNIFICANT_DIGITS),
        )

    # -0 and 0 are the same charge
    if amount.is_zero():
        amount = abs(amount)
    return amount


def check_description(value: object) -> str:
    """Return value if it is text with at least one visible character."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            ValidationReason.INVALID_DESCRIPTION, DESCRIPTION, blank_description()
        )
    return value


def check_status(value: object) -> InvoiceStatus:
    """Return value as an InvoiceStatus member."""
    if not is_invoice_status(value):
        raise ValidationError(
            ValidationReason.INVALID_STATUS,
            STATUS,
            unknown_status(value, InvoiceStatus.values()),
        )
    return InvoiceStatus(value)


def check_card_last4_digits(value: object) -> str:
    """Return value if it is exactly four ASCII digits."""
    if not isinstance(value, str) or len(value) != 4 or not set(value) <= _ASCII_DIGITS:
        raise ValidationError(
            ValidationReason.INVALID_CARD_SUFFIX,
            CARD_LAST4_DIGITS,
            invalid_card_suffix(value),
        )
    return value


def check_created_at(value: object) -> str:
    """Return value, minus surrounding whitespace, if it is ISO-8601."""
    try:
        parse_timestamp(value)
    except ValueError as e:
        raise ValidationError(
            ValidationReason.INVALID_TIMESTAMP, CREATED_AT, invalid_timestamp(value)
        ) from e
    return value.strip()
