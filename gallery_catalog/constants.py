"""Constants for Gallery Catalog."""

# Album id/label pair carried by media that is not indexed by the catalog.
EXTERNAL_ALBUM_ID = -99
EXTERNAL_ALBUM_LABEL = ""

UNKNOWN_MIME_TYPE = "application/octet-stream"

# strftime pattern used for timeline section labels, e.g. "Mon, Jan 01, 2024"
FULL_DATE_FORMAT = "%a, %b %d, %Y"

HEADER_KEY_PREFIX = "header"
MEDIA_KEY_PREFIX = "media"

DEFAULT_DB_PATH = "pinned_albums.db"
