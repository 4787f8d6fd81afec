"""Album summaries derived from media records."""

import logging
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional

from gallery_catalog.models.media import Media
from gallery_catalog.pins import PinRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Album:
    """Snapshot of one album."""
    id: int
    label: str
    path_to_thumbnail: str
    timestamp: int
    count: int = 0
    selected: bool = False
    is_pinned: bool = False

    def with_selected(self, selected: bool) -> "Album":
        """Return a copy with the selection flag set."""
        return replace(self, selected=selected)


class AlbumBuilder:
    """Running aggregate for a single album.

    Tracks member records so the count and thumbnail can be updated one
    record at a time. The thumbnail is the newest member; among members with
    the same timestamp the one added first wins.
    """

    def __init__(self, album_id: int, label: str):
        self.album_id = album_id
        self.label = label
        self._members: List[Media] = []
        self._thumbnail: Optional[Media] = None

    @property
    def count(self) -> int:
        return len(self._members)

    @property
    def thumbnail(self) -> Optional[Media]:
        return self._thumbnail

    @property
    def timestamp(self) -> int:
        return self._thumbnail.timestamp if self._thumbnail else 0

    def add(self, media: Media) -> None:
        """Add a member, taking it as thumbnail if strictly newer."""
        self._members.append(media)
        if self._thumbnail is None or media.timestamp > self._thumbnail.timestamp:
            self._thumbnail = media

    def remove(self, media: Media) -> None:
        """Remove a member, recomputing the thumbnail if it was the source.

        Raises:
            ValueError: If the record is not a member of this album
        """
        self._members.remove(media)
        if media == self._thumbnail:
            self._thumbnail = self._newest()

    def _newest(self) -> Optional[Media]:
        newest = None
        for member in self._members:
            if newest is None or member.timestamp > newest.timestamp:
                newest = member
        return newest

    def snapshot(self, pins: PinRegistry) -> Album:
        """Freeze the current state into an Album."""
        return Album(
            id=self.album_id,
            label=self.label,
            path_to_thumbnail=self._thumbnail.path if self._thumbnail else "",
            timestamp=self.timestamp,
            count=self.count,
            is_pinned=pins.contains(self.album_id),
        )


class AlbumIndex:
    """Album builders keyed by album id, in first-seen order."""

    def __init__(self, media: Iterable[Media] = ()):
        self._builders: Dict[int, AlbumBuilder] = {}
        for item in media:
            self.add(item)

    def __len__(self) -> int:
        return sum(1 for builder in self._builders.values() if builder.count > 0)

    def get(self, album_id: int) -> Optional[AlbumBuilder]:
        return self._builders.get(album_id)

    def add(self, media: Media) -> None:
        """Add a record to its album. External media belongs to no album."""
        if media.is_degraded():
            return
        builder = self._builders.get(media.album_id)
        if builder is None:
            builder = AlbumBuilder(media.album_id, media.album_label)
            self._builders[media.album_id] = builder
        builder.add(media)

    def remove(self, media: Media) -> None:
        """Remove a record from its album.

        Raises:
            ValueError: If the record was never added
        """
        if media.is_degraded():
            return
        builder = self._builders.get(media.album_id)
        if builder is None:
            raise ValueError(f"Unknown album {media.album_id} for {media}")
        builder.remove(media)
        if builder.count == 0:
            logger.debug("Album %s is empty, dropping it", media.album_id)
            del self._builders[media.album_id]

    def albums(self, pins: PinRegistry) -> List[Album]:
        """Snapshot every non-empty album."""
        return [
            builder.snapshot(pins)
            for builder in self._builders.values()
            if builder.count > 0
        ]


def build_albums(media: Iterable[Media], pins: PinRegistry) -> List[Album]:
    """Aggregate media into one Album per catalog album id.

    Args:
        media: Records in catalog order
        pins: Registry consulted for the pinned flag

    Returns:
        Albums in order of first appearance
    """
    return AlbumIndex(media).albums(pins)


def order_albums(albums: Iterable[Album]) -> List[Album]:
    """Order albums for display: pinned first, then newest first, then by label."""
    return sorted(albums, key=lambda album: (not album.is_pinned, -album.timestamp, album.label))
