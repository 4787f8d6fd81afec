"""Test configuration for pytest."""

import sys
from pathlib import Path
from typing import Callable, Generator

import pytest

# Add the project root directory to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gallery_catalog.database.db_manager import PinnedAlbumStore  # noqa: E402
from gallery_catalog.models.media import Media  # noqa: E402


@pytest.fixture(scope="function")
def pin_store(tmp_path: Path) -> Generator[PinnedAlbumStore, None, None]:
    """Create a pinned album store backed by a temporary database."""
    db_path = tmp_path / "test.db"
    store = PinnedAlbumStore(str(db_path))
    store.init_database()
    yield store
    store.close()


@pytest.fixture
def make_media() -> Callable[..., Media]:
    """Factory for catalog records with sensible defaults."""

    def _make(
        id: int = 1,
        path: str = "/sdcard/DCIM/Camera/1.jpg",
        album_id: int = 10,
        album_label: str = "Camera",
        timestamp: int = 1704067200,
        full_date: str = "2024-01-01",
        mime_type: str = "image/jpeg",
        **kwargs,
    ) -> Media:
        return Media.from_catalog(
            id=id,
            label=path.rpartition("/")[2],
            uri=f"content://media/external/images/media/{id}",
            path=path,
            album_id=album_id,
            album_label=album_label,
            timestamp=timestamp,
            mime_type=mime_type,
            full_date=full_date,
            **kwargs,
        )

    return _make
