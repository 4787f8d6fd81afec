"""Utility functions for Gallery Catalog."""

from .file_utils import get_extension, get_last_modified, get_mime_type, locator_to_path
from .time_utils import format_timestamp

__all__ = [
    "format_timestamp",
    "get_extension",
    "get_last_modified",
    "get_mime_type",
    "locator_to_path",
]
