"""Timestamp helpers.

Timestamps are stored as ISO-8601 UTC strings with millisecond precision and
a ``Z`` suffix, so lexical order matches chronological order.
"""

from datetime import UTC, datetime


def format_timestamp(moment: datetime) -> str:
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now() -> str:
    """Current time in the stored timestamp format."""
    return format_timestamp(datetime.now(UTC))
