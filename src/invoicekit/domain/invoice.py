"""Invoice construction and serialization at the system boundary.

Raw invoice records arrive from payment processor callbacks, storage reads
or API responses as loosely-typed mappings. ``construct`` checks them in a
fixed order (amount, description, status, card suffix, creation time) and
stops at the first violation. ``collect_validation_errors`` runs every check
independently for callers that need to report all problems at once.
"""

import logging
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any

from invoicekit.domain import validators
from invoicekit.domain.entities import Invoice
from invoicekit.domain.errors import ValidationError, ValidationReason, missing_field
from invoicekit.domain.invoice_status import InvoiceStatus
from invoicekit.domain.validators import (
    AMOUNT,
    CARD_LAST4_DIGITS,
    CREATED_AT,
    DESCRIPTION,
    FIELDS,
    STATUS,
)

logger = logging.getLogger(__name__)


def _require(raw: Mapping[str, Any], field: str, reason: ValidationReason) -> Any:
    value = raw.get(field)
    if value is None:
        raise ValidationError(reason, field, missing_field(field))
    return value


def validate_amount(raw: Mapping[str, Any]) -> Decimal:
    """Return the amount as a finite, non-negative Decimal.

    Raises:
        ValidationError: InvalidAmount
    """
    return validators.check_amount(
        _require(raw, AMOUNT, ValidationReason.INVALID_AMOUNT)
    )


def validate_description(raw: Mapping[str, Any]) -> str:
    """Return the description if it has visible text.

    Raises:
        ValidationError: InvalidDescription
    """
    return validators.check_description(
        _require(raw, DESCRIPTION, ValidationReason.INVALID_DESCRIPTION)
    )


def validate_status(raw: Mapping[str, Any]) -> InvoiceStatus:
    """Return the status as an InvoiceStatus member.

    Raises:
        ValidationError: InvalidStatus
    """
    return validators.check_status(
        _require(raw, STATUS, ValidationReason.INVALID_STATUS)
    )


def validate_card_last4_digits(raw: Mapping[str, Any]) -> str:
    """Return the card suffix if it is exactly four ASCII digits.

    Raises:
        ValidationError: InvalidCardSuffix
    """
    return validators.check_card_last4_digits(
        _require(raw, CARD_LAST4_DIGITS, ValidationReason.INVALID_CARD_SUFFIX)
    )


def validate_created_at(raw: Mapping[str, Any]) -> str:
    """Return the creation time string if it is ISO-8601.

    Surrounding whitespace is dropped; the text is otherwise kept as sent.

    Raises:
        ValidationError: InvalidTimestamp
    """
    return validators.check_created_at(
        _require(raw, CREATED_AT, ValidationReason.INVALID_TIMESTAMP)
    )


_VALIDATORS: tuple[Callable[[Mapping[str, Any]], Any], ...] = (
    validate_amount,
    validate_description,
    validate_status,
    validate_card_last4_digits,
    validate_created_at,
)


def _ensure_mapping(raw: Any) -> None:
    if not isinstance(raw, Mapping):
        raise TypeError(f"Invoice record must be a mapping, got {type(raw).__name__}")


def construct(raw: Mapping[str, Any]) -> Invoice:
    """Build a validated Invoice from a raw record.

    Keys other than the five invoice fields are ignored.

    Args:
        raw: Record with amount, description, status, cardLast4Digits and
            createdAt keys

    Returns:
        Invoice entity

    Raises:
        TypeError: If raw is not a mapping
        ValidationError: On the first field that fails validation
    """
    _ensure_mapping(raw)
    try:
        amount = validate_amount(raw)
        description = validate_description(raw)
        status = validate_status(raw)
        card_last4_digits = validate_card_last4_digits(raw)
        created_at = validate_created_at(raw)
    except ValidationError as e:
        logger.debug("Rejected invoice record: %s (field %s)", e.reason.value, e.field)
        raise

    return Invoice(
        amount=amount,
        description=description,
        status=status,
        card_last4_digits=card_last4_digits,
        created_at=created_at,
    )


def collect_validation_errors(raw: Mapping[str, Any]) -> list[ValidationError]:
    """Run every field check and return all failures.

    An empty list means construct(raw) will succeed.

    Raises:
        TypeError: If raw is not a mapping
    """
    _ensure_mapping(raw)
    errors = []
    for validate in _VALIDATORS:
        try:
            validate(raw)
        except ValidationError as e:
            errors.append(e)
    return errors


def _amount_to_wire(amount: Decimal) -> int | float:
    if amount.as_tuple().exponent >= 0:
        return int(amount)
    # At most 15 significant digits, so repr() of the float reads back equal
    return float(amount)


def serialize(invoice: Invoice) -> dict[str, Any]:
    """Convert an Invoice to its canonical plain record.

    The amount is written as a JSON number: an int for whole amounts without
    a fractional part, a float otherwise. Keys are always in the same order.
    """
    return {
        AMOUNT: _amount_to_wire(invoice.amount),
        DESCRIPTION: invoice.description,
        STATUS: invoice.status.value,
        CARD_LAST4_DIGITS: invoice.card_last4_digits,
        CREATED_AT: invoice.created_at,
    }
