"""Timeline entries: section headers and the media they group."""

from dataclasses import dataclass
from typing import Any, Tuple

from gallery_catalog.constants import HEADER_KEY_PREFIX
from gallery_catalog.models.media import Media


@dataclass(frozen=True)
class MediaItem:
    """Base class for timeline entries. Subclassed only by Header and MediaViewItem."""
    key: str


@dataclass(frozen=True)
class Header(MediaItem):
    """Section header with the records it groups."""
    text: str
    data: Tuple[Media, ...]


@dataclass(frozen=True)
class MediaViewItem(MediaItem):
    """Timeline entry showing a single record."""
    media: Media


@dataclass(frozen=True)
class LoadedMediaItem(MediaViewItem):
    """A record that has been loaded from the catalog."""


def is_header_key(key: Any) -> bool:
    """Check whether a raw key belongs to a Header.

    Args:
        key: Key as stored or passed around outside of MediaItem

    Returns:
        True if the key is a string starting with the header prefix
    """
    return isinstance(key, str) and key.startswith(HEADER_KEY_PREFIX)
