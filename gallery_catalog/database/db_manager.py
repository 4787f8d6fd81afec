"""Database operations for pinned albums."""

import logging
import sqlite3
from typing import Any, List, Set, Tuple

from gallery_catalog.constants import DEFAULT_DB_PATH
from gallery_catalog.database.models import PinnedAlbum
from gallery_catalog.models import CatalogError

logger = logging.getLogger(__name__)


class DatabaseError(CatalogError):
    """Database error exception."""


class PinnedAlbumStore:
    """Stores pinned album ids in SQLite, one row per album."""

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        """Initialize the store.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path
        self.conn = None
        self.cursor = None

    def _execute(self, sql: str, params: Tuple[Any, ...] = ()) -> None:
        if not self.conn or not self.cursor:
            self.connect()
        self.cursor.execute(sql, params)

    def connect(self) -> None:
        """Connect to the database."""
        try:
            self.conn = sqlite3.connect(self.db_path)
            self.cursor = self.conn.cursor()
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to connect to database: {e}") from e

    def close(self) -> None:
        """Close the connection if open."""
        if self.conn:
            self.conn.close()
        self.conn = None
        self.cursor = None

    def init_database(self) -> None:
        """Create the pinned albums table if it does not exist."""
        try:
            self._execute(
                """
                CREATE TABLE IF NOT EXISTS pinned_table (
                    id INTEGER PRIMARY KEY
                )
            """
            )
            self.conn.commit()
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to initialize database: {e}") from e

    def pin(self, album_id: int) -> None:
        """Mark an album as pinned. Pinning twice is a no-op.

        Args:
            album_id: Album ID
        """
        try:
            self._execute("INSERT OR IGNORE INTO pinned_table (id) VALUES (?)", (album_id,))
            self.conn.commit()
            logger.info("Pinned album %s", album_id)
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to pin album {album_id}: {e}") from e

    def unpin(self, album_id: int) -> None:
        """Remove the pin from an album. Unpinning an unpinned album is a no-op.

        Args:
            album_id: Album ID
        """
        try:
            self._execute("DELETE FROM pinned_table WHERE id = ?", (album_id,))
            self.conn.commit()
            logger.info("Unpinned album %s", album_id)
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to unpin album {album_id}: {e}") from e

    def contains(self, album_id: int) -> bool:
        """Check whether an album is pinned."""
        try:
            self._execute("SELECT 1 FROM pinned_table WHERE id = ?", (album_id,))
            return self.cursor.fetchone() is not None
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to look up album {album_id}: {e}") from e

    def list_pinned(self) -> List[PinnedAlbum]:
        """Get all pinned albums ordered by id."""
        try:
            self._execute("SELECT id FROM pinned_table ORDER BY id")
            return [PinnedAlbum(id=row[0]) for row in self.cursor.fetchall()]
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to list pinned albums: {e}") from e

    def list_all(self) -> Set[int]:
        """Get the ids of all pinned albums."""
        return {pinned.id for pinned in self.list_pinned()}
