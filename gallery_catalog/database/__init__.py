"""Persistence for pinned albums."""

from .db_manager import DatabaseError, PinnedAlbumStore
from .models import PinnedAlbum

__all__ = ["DatabaseError", "PinnedAlbum", "PinnedAlbumStore"]
