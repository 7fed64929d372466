"""Domain layer for invoicekit."""

from invoicekit.domain.entities import Invoice
from invoicekit.domain.errors import DomainError, ValidationError, ValidationReason
from invoicekit.domain.invoice import collect_validation_errors, construct, serialize
from invoicekit.domain.invoice_status import InvoiceStatus

__all__ = [
    "Invoice",
    "InvoiceStatus",
    "DomainError",
    "ValidationError",
    "ValidationReason",
    "construct",
    "serialize",
    "collect_validation_errors",
]
