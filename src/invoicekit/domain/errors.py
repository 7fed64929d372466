"""Shared domain error messages and error types."""

from enum import Enum


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationReason(str, Enum):
    """Why a raw invoice record was rejected."""

    INVALID_AMOUNT = "InvalidAmount"
    INVALID_DESCRIPTION = "InvalidDescription"
    INVALID_STATUS = "InvalidStatus"
    INVALID_CARD_SUFFIX = "InvalidCardSuffix"
    INVALID_TIMESTAMP = "InvalidTimestamp"


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""

    def __init__(self, reason: ValidationReason, field: str, message: str):
        self.reason = reason
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.reason.value}: {self.args[0]}"


def missing_field(field: str) -> str:
    """Return message for a required field that is absent."""
    return f"'{field}' is required"


def invalid_amount(value: object) -> str:
    """Return message for an amount that is not a finite, non-negative number."""
    return f"Amount must be a finite, non-negative number, got {value!r}"


def amount_too_precise(value: object, max_digits: int) -> str:
    """Return message for an amount with more significant digits than allowed."""
    return f"Amount must have at most {max_digits} significant digits, got {value!r}"


def blank_description() -> str:
    """Return message for an empty or whitespace-only description."""
    return "Description must not be empty or whitespace"


def unknown_status(value: object, allowed: list[str]) -> str:
    """Return message for a status outside the closed enumeration."""
    return f"Unknown invoice status {value!r}. Allowed: {', '.join(allowed)}"


def invalid_card_suffix(value: object) -> str:
    """Return message for a malformed card suffix.

    Only the length is reported so a mistakenly supplied full card number
    never ends up in logs or terminal output.
    """
    if isinstance(value, str):
        return f"Card suffix must be exactly 4 digits, got {len(value)} character(s)"
    return f"Card suffix must be a string of 4 digits, got {type(value).__name__}"


def invalid_timestamp(value: object) -> str:
    """Return message for a creation time that is not ISO-8601."""
    return f"createdAt must be an ISO-8601 date-time, got {value!r}"
