"""Data models for database operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PinnedAlbum:
    """Data class for a pinned album row."""
    id: int
