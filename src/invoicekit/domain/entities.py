"""Domain model entities for invoicekit.

These are pure data classes representing business concepts, independent of
how payment processors or storage layers encode them. Every field is checked
when an Invoice is created, whether directly or through
invoicekit.domain.invoice.construct.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from invoicekit.domain import validators
from invoicekit.domain.invoice_status import InvoiceStatus
from invoicekit.utils.date_parser import parse_timestamp


@dataclass(frozen=True)
class Invoice:
    """Immutable snapshot of a single billing charge.

    Raises:
        ValidationError: On the first field (in declaration order) that
            fails its check
    """

    amount: Decimal
    description: str
    status: InvoiceStatus
    card_last4_digits: str
    created_at: str

    def __post_init__(self):
        # Frozen, so normalized values go in through object.__setattr__
        object.__setattr__(self, "amount", validators.check_amount(self.amount))
        object.__setattr__(
            self, "description", validators.check_description(self.description)
        )
        object.__setattr__(self, "status", validators.check_status(self.status))
        object.__setattr__(
            self,
            "card_last4_digits",
            validators.check_card_last4_digits(self.card_last4_digits),
        )
        object.__setattr__(
            self, "created_at", validators.check_created_at(self.created_at)
        )

    @property
    def created_at_datetime(self) -> datetime:
        """Creation time as a datetime."""
        return parse_timestamp(self.created_at)

    def with_status(self, status: InvoiceStatus | str) -> "Invoice":
        """Return a new snapshot carrying a different status.

        Raises:
            ValidationError: If status is not an InvoiceStatus value
        """
        return replace(self, status=status)
