"""Timestamp parsing utilities."""

from datetime import datetime
import re
from dateutil import parser as date_parser

# Year, month and day must all be present ("2024" and "2024-03" are too coarse)
FULL_DATE_PATTERN = re.compile(r"[0-9]{4}-?[0-9]{2}-?[0-9]{2}(?![0-9])")


def parse_timestamp(value: object) -> datetime:
    """Parse an ISO-8601 date-time string.

    Uses dateutil's strict ISO parser, so free-form strings such as
    "March 1st" or "yesterday" are rejected. A trailing "Z" is read as UTC.
    Date-only strings ("2024-03-01") are accepted and read as midnight;
    reduced-precision dates ("2024", "2024-03") and week dates are not.

    Args:
        value: Timestamp as received from a payload

    Returns:
        Parsed datetime (timezone-aware when the string carries an offset)

    Raises:
        ValueError: If value is not a string or is not ISO-8601
    """
    if not isinstance(value, str):
        raise ValueError(f"Timestamp must be a string, got {type(value).__name__}")

    timestamp_str = value.strip()
    if not timestamp_str:
        raise ValueError("Empty timestamp string")

    if not FULL_DATE_PATTERN.match(timestamp_str):
        raise ValueError(f"Timestamp '{timestamp_str}' must start with a full date")

    try:
        return date_parser.isoparse(timestamp_str)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse timestamp '{timestamp_str}': {e}") from e
