"""Gallery Catalog: media records, albums and timeline grouping."""

from gallery_catalog.models import CatalogError, InvalidMediaError
from gallery_catalog.models.album import Album, AlbumBuilder, AlbumIndex, build_albums, order_albums
from gallery_catalog.models.media import Cataloged, ExternalOnly, Media
from gallery_catalog.models.media_item import (
    Header,
    LoadedMediaItem,
    MediaItem,
    MediaViewItem,
    is_header_key,
)
from gallery_catalog.pins import PinnedAlbums, PinRegistry
from gallery_catalog.timeline import flatten_media, group_by_date

__all__ = [
    "Album",
    "AlbumBuilder",
    "AlbumIndex",
    "CatalogError",
    "Cataloged",
    "ExternalOnly",
    "Header",
    "InvalidMediaError",
    "LoadedMediaItem",
    "Media",
    "MediaItem",
    "MediaViewItem",
    "PinRegistry",
    "PinnedAlbums",
    "build_albums",
    "flatten_media",
    "group_by_date",
    "is_header_key",
    "order_albums",
]
