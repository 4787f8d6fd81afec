"""Media records as supplied by the catalog or opened from a bare locator."""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

from gallery_catalog.constants import (
    EXTERNAL_ALBUM_ID,
    EXTERNAL_ALBUM_LABEL,
    FULL_DATE_FORMAT,
    UNKNOWN_MIME_TYPE,
)
from gallery_catalog.models import InvalidMediaError
from gallery_catalog.utils.file_utils import (
    get_extension,
    get_last_modified,
    get_mime_type,
    locator_to_path,
)
from gallery_catalog.utils.time_utils import format_timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cataloged:
    """Provenance of a record indexed by the media catalog."""
    album_id: int
    album_label: str
    favorite: int = 0
    trashed: int = 0

    def __post_init__(self):
        if self.album_id == EXTERNAL_ALBUM_ID and self.album_label == EXTERNAL_ALBUM_LABEL:
            raise InvalidMediaError(
                f"Album id {EXTERNAL_ALBUM_ID} with an empty label is reserved for external media"
            )


@dataclass(frozen=True)
class ExternalOnly:
    """Provenance of a record only reachable through its locator."""


Origin = Union[Cataloged, ExternalOnly]


@dataclass(frozen=True)
class Media:
    """A single photo or video."""
    id: int
    label: str
    uri: str
    path: str
    timestamp: int
    full_date: str
    mime_type: str
    orientation: int
    origin: Origin
    duration: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.id}, {self.path}, {self.full_date}, {self.mime_type}, favorite={self.favorite}"

    @property
    def album_id(self) -> int:
        if isinstance(self.origin, Cataloged):
            return self.origin.album_id
        return EXTERNAL_ALBUM_ID

    @property
    def album_label(self) -> str:
        if isinstance(self.origin, Cataloged):
            return self.origin.album_label
        return EXTERNAL_ALBUM_LABEL

    @property
    def favorite(self) -> int:
        if isinstance(self.origin, Cataloged):
            return self.origin.favorite
        return 0

    @property
    def trashed(self) -> int:
        if isinstance(self.origin, Cataloged):
            return self.origin.trashed
        return 0

    @property
    def is_favorite(self) -> bool:
        return self.favorite == 1

    @property
    def is_trashed(self) -> bool:
        return self.trashed == 1

    @property
    def is_video(self) -> bool:
        return self.mime_type.startswith("video/")

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    def is_degraded(self) -> bool:
        """Check whether this record lacks catalog semantics.

        Degraded records come from locators the catalog could not resolve,
        typically files private to another app. They have no favorite, trash
        or reliable timestamp state and must not be written back as such.

        Returns:
            True if the record carries the external album id/label pair
        """
        return self.album_id == EXTERNAL_ALBUM_ID and self.album_label == EXTERNAL_ALBUM_LABEL

    def _refuse_if_degraded(self, operation: str) -> bool:
        if self.is_degraded():
            logger.warning("Ignoring %s on external media %s", operation, self.uri)
            return True
        return False

    def with_favorite(self, favorite: bool) -> "Media":
        """Return a copy with the favorite flag set; external media is returned unchanged."""
        if self._refuse_if_degraded("favorite change"):
            return self
        return replace(self, origin=replace(self.origin, favorite=int(favorite)))

    def with_trashed(self, trashed: bool) -> "Media":
        """Return a copy with the trashed flag set; external media is returned unchanged."""
        if self._refuse_if_degraded("trash change"):
            return self
        return replace(self, origin=replace(self.origin, trashed=int(trashed)))

    def with_orientation(self, degrees: int) -> "Media":
        """Return a copy rotated to `degrees`; external media is returned unchanged."""
        if self._refuse_if_degraded("orientation change"):
            return self
        return replace(self, orientation=degrees % 360)

    @classmethod
    def from_catalog(
        cls,
        id: int,
        label: str,
        uri: str,
        path: str,
        album_id: int,
        album_label: str,
        timestamp: int,
        mime_type: str,
        orientation: int = 0,
        favorite: int = 0,
        trashed: int = 0,
        duration: Optional[str] = None,
        full_date: Optional[str] = None,
        date_format: str = FULL_DATE_FORMAT,
        time_formatter: Callable[[int, str], str] = format_timestamp,
    ) -> "Media":
        """Build a record from a catalog entry.

        Catalog fields are trusted as given. When `full_date` is omitted it is
        derived from `timestamp`.

        Raises:
            InvalidMediaError: If the album id/label pair is the external one
        """
        if full_date is None:
            full_date = time_formatter(timestamp, date_format) if timestamp != 0 else ""

        return cls(
            id=id,
            label=label,
            uri=uri,
            path=path,
            timestamp=timestamp,
            full_date=full_date,
            mime_type=mime_type,
            orientation=orientation,
            origin=Cataloged(
                album_id=album_id,
                album_label=album_label,
                favorite=favorite,
                trashed=trashed,
            ),
            duration=duration,
        )

    @classmethod
    def from_locator(
        cls,
        locator: str,
        mime_lookup: Callable[[str], str] = get_mime_type,
        last_modified: Callable[[str], int] = get_last_modified,
        time_formatter: Callable[[int, str], str] = format_timestamp,
        date_format: str = FULL_DATE_FORMAT,
    ) -> "Media":
        """Build a degraded record for a locator the catalog cannot resolve.

        Timestamp and MIME type are best effort: any failure while looking
        them up falls back to 0 and UNKNOWN_MIME_TYPE.

        Args:
            locator: Media locator, e.g. "file:///sdcard/app/clip.mp4"
            mime_lookup: Maps an extension to a MIME type
            last_modified: Maps a path to its modification time
            time_formatter: Formats a timestamp with a strftime pattern
            date_format: Pattern for the derived date label

        Returns:
            External media record

        Raises:
            InvalidMediaError: If the locator has no filesystem path
        """
        path = locator_to_path(locator)
        if path is None:
            raise InvalidMediaError(f"Locator has no path: {locator!r}")

        try:
            timestamp = int(last_modified(path))
        except Exception as e:
            logger.debug("No modification time for %s: %s", path, str(e))
            timestamp = 0

        full_date = ""
        if timestamp != 0:
            try:
                full_date = time_formatter(timestamp, date_format)
            except Exception as e:
                logger.debug("Cannot format timestamp %s: %s", timestamp, str(e))

        try:
            mime_type = mime_lookup(get_extension(locator)) or UNKNOWN_MIME_TYPE
        except Exception as e:
            logger.debug("No MIME type for %s: %s", locator, str(e))
            mime_type = UNKNOWN_MIME_TYPE

        return cls(
            id=0,
            label=locator.rpartition("/")[2],
            uri=locator,
            path=path,
            timestamp=timestamp,
            full_date=full_date,
            mime_type=mime_type,
            orientation=0,
            origin=ExternalOnly(),
        )
