"""Date helpers for report timestamps and artifact names."""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


def get_date_string(when: Optional[datetime] = None) -> str:
    """
    Format a date for use in output artifact names.

    Args:
        when: Datetime to format (default: current UTC time)

    Returns:
        Date string in 'YYYY-MM-DD' format

    Examples:
        >>> get_date_string(datetime(2021, 3, 4, 12, 0, tzinfo=timezone.utc))
        '2021-03-04'
    """
    when = when or utc_now()
    return when.strftime('%Y-%m-%d')


def format_timestamp(when: datetime) -> str:
    """
    Serialize a datetime as an ISO-8601 UTC timestamp with millisecond precision.

    Naive datetimes are treated as UTC.

    Examples:
        >>> format_timestamp(datetime(2021, 3, 4, 12, 0, tzinfo=timezone.utc))
        '2021-03-04T12:00:00.000Z'
    """
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    when = when.astimezone(timezone.utc)
    return when.strftime('%Y-%m-%dT%H:%M:%S.') + f"{when.microsecond // 1000:03d}Z"
