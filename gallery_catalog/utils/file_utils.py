"""File utilities for Gallery Catalog."""

import logging
import mimetypes
import os
from typing import Optional
from urllib.parse import unquote, urlparse

from gallery_catalog.constants import UNKNOWN_MIME_TYPE

logger = logging.getLogger(__name__)


def locator_to_path(locator: str) -> Optional[str]:
    """Resolve the filesystem path a media locator points at.

    Only ``file://`` locators and bare paths resolve to a path; other schemes
    such as ``content://`` are opaque to the filesystem.

    Args:
        locator: Media locator (URI string or plain path)

    Returns:
        Filesystem path, or None if the locator has no path component
    """
    if not locator:
        return None

    parsed = urlparse(locator)
    if parsed.scheme == "file":
        path = unquote(parsed.path)
    elif parsed.scheme == "":
        path = locator
    else:
        return None

    return path or None


def get_extension(locator: str) -> str:
    """Get everything after the last dot of a locator.

    Args:
        locator: Media locator

    Returns:
        Extension without the dot, or an empty string if there is none
    """
    _, dot, extension = locator.rpartition(".")
    return extension if dot else ""


def get_mime_type(extension: str) -> str:
    """Look up the MIME type registered for a file extension.

    Args:
        extension: Extension without the leading dot, e.g. "mp4"

    Returns:
        MIME type, or UNKNOWN_MIME_TYPE if the extension is empty or unknown
    """
    if not extension:
        return UNKNOWN_MIME_TYPE

    mime_type, _ = mimetypes.guess_type(f"media.{extension.lower()}")
    return mime_type or UNKNOWN_MIME_TYPE


def get_last_modified(path: str) -> int:
    """Get the modification time of a regular file.

    Args:
        path: Path to file

    Returns:
        Modification time in whole seconds since the epoch, or 0 if the path is
        not a readable regular file
    """
    try:
        if not os.path.isfile(path):
            return 0
        return int(os.path.getmtime(path))
    except (OSError, ValueError) as e:
        logger.debug("Failed to get modification time for %s: %s", path, str(e))
        return 0
