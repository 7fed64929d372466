"""Invoice lifecycle states."""

from enum import Enum


class InvoiceStatus(str, Enum):
    """Closed set of invoice lifecycle states.

    The payment lifecycle owner decides which state an invoice is in; this
    module only names the states.
    """

    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"
    CANCELLED = "CANCELLED"

    @classmethod
    def values(cls) -> list[str]:
        """Return the wire values in declaration order."""
        return [member.value for member in cls]


def is_invoice_status(value: object) -> bool:
    """Check whether value is a member (or exact wire value) of InvoiceStatus."""
    if isinstance(value, InvoiceStatus):
        return True
    return isinstance(value, str) and value in InvoiceStatus.values()
