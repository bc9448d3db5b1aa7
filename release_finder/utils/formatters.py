"""Formatting utilities for the report columns."""

from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
ELLIPSIS = "..."


def format_timestamp(moment: datetime) -> str:
    """Format a timestamp for display.

    - datetime(2024, 3, 1, 9, 5, 0) -> '2024-03-01 09:05:00'
    """
    return moment.strftime(TIMESTAMP_FORMAT)


def truncate_name(name: str, max_len: int) -> str:
    """Shorten a name to max_len characters.

    Longer names keep their first max_len - 3 characters followed by '...':
    - truncate_name('abcdefgh', 6) -> 'abc...'
    - truncate_name('abc', 6) -> 'abc'

    Args:
        name: Text to shorten
        max_len: Maximum length of the result

    Returns:
        The name itself or its shortened form
    """
    if len(name) <= max_len:
        return name
    return name[:max_len - len(ELLIPSIS)] + ELLIPSIS
