"""Utility functions for invoicekit."""

from invoicekit.utils.date_parser import parse_timestamp
from invoicekit.utils.amount_parser import parse_amount

__all__ = ["parse_timestamp", "parse_amount"]
