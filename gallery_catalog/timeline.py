"""Timeline grouping of media records into dated sections."""

import logging
from typing import Iterable, List, Set

from gallery_catalog.constants import HEADER_KEY_PREFIX, MEDIA_KEY_PREFIX
from gallery_catalog.models.media import Media
from gallery_catalog.models.media_item import Header, LoadedMediaItem, MediaItem, MediaViewItem

logger = logging.getLogger(__name__)


def _header_key(full_date: str, ordinal: int) -> str:
    return f"{HEADER_KEY_PREFIX}_{full_date}_{ordinal}"


def _media_key(media: Media, seen: Set[str]) -> str:
    # External records all have id 0, so the path is part of the key
    key = base = f"{MEDIA_KEY_PREFIX}_{media.id}_{media.path}"
    suffix = 1
    while key in seen:
        key = f"{base}_{suffix}"
        suffix += 1
    seen.add(key)
    return key


def group_by_date(media: Iterable[Media]) -> List[MediaItem]:
    """Group records into dated timeline sections.

    Records must already be sorted newest first. Each run of adjacent records
    sharing a full date becomes a Header followed by one entry per record.
    A date that shows up again after a different date starts a new section.

    Args:
        media: Records sorted by descending timestamp

    Returns:
        Headers interleaved with their entries, in input order
    """
    runs: List[List[Media]] = []
    for item in media:
        if runs and runs[-1][0].full_date == item.full_date:
            runs[-1].append(item)
        else:
            runs.append([item])

    items: List[MediaItem] = []
    seen: Set[str] = set()
    for ordinal, run in enumerate(runs):
        full_date = run[0].full_date
        items.append(Header(key=_header_key(full_date, ordinal), text=full_date, data=tuple(run)))
        for record in run:
            items.append(LoadedMediaItem(key=_media_key(record, seen), media=record))

    logger.debug("Grouped %d records into %d sections", len(items) - len(runs), len(runs))
    return items


def flatten_media(items: Iterable[MediaItem]) -> List[Media]:
    """Collect the records shown by the entries of a timeline, in order."""
    return [item.media for item in items if isinstance(item, MediaViewItem)]
