"""Timestamp formatting for timeline labels."""

from datetime import datetime

from gallery_catalog.constants import FULL_DATE_FORMAT


def format_timestamp(timestamp: int, date_format: str = FULL_DATE_FORMAT) -> str:
    """Format a timestamp as a local date string.

    Args:
        timestamp: Seconds since the epoch
        date_format: strftime pattern

    Returns:
        Formatted date
    """
    return datetime.fromtimestamp(timestamp).strftime(date_format)
