"""Pinned album lookups."""

from typing import AbstractSet, Iterable, Protocol, Set


class PinRegistry(Protocol):
    """Read access to the set of pinned album ids."""

    def contains(self, album_id: int) -> bool:
        ...

    def list_all(self) -> Set[int]:
        ...


class PinnedAlbums:
    """Immutable in-memory pin registry."""

    def __init__(self, album_ids: Iterable[int] = ()):
        self._album_ids: AbstractSet[int] = frozenset(album_ids)

    def __repr__(self) -> str:
        return f"PinnedAlbums({sorted(self._album_ids)!r})"

    def contains(self, album_id: int) -> bool:
        return album_id in self._album_ids

    def list_all(self) -> Set[int]:
        return set(self._album_ids)
