"""Unit tests for file utilities."""

import os
from unittest.mock import patch

import pytest

from gallery_catalog.constants import UNKNOWN_MIME_TYPE
from gallery_catalog.utils.file_utils import (
    get_extension,
    get_last_modified,
    get_mime_type,
    locator_to_path,
)


def test_locator_to_path():
    """Test resolving filesystem paths from locators."""
    test_cases = [
        ("file:///sdcard/app/x.mp4", "/sdcard/app/x.mp4"),
        ("file:///sdcard/My%20Photos/a.jpg", "/sdcard/My Photos/a.jpg"),
        ("/storage/emulated/0/DCIM/b.png", "/storage/emulated/0/DCIM/b.png"),
        ("relative/c.gif", "relative/c.gif"),
        ("content://media/9999", None),
        ("https://example.com/d.jpg", None),
        ("file://", None),
        ("", None),
    ]

    for locator, expected in test_cases:
        assert locator_to_path(locator) == expected


def test_get_extension():
    """Test extension extraction."""
    test_cases = [
        ("file:///sdcard/app/x.mp4", "mp4"),
        ("file:///sdcard/archive.tar.gz", "gz"),
        ("file:///sdcard/IMG.JPG", "JPG"),
        ("file:///sdcard/noext", ""),
        ("file:///sdcard/trailing.", ""),
    ]

    for locator, expected in test_cases:
        assert get_extension(locator) == expected


def test_get_mime_type():
    """Test MIME lookup by extension."""
    assert get_mime_type("mp4") == "video/mp4"
    assert get_mime_type("jpg") == "image/jpeg"
    assert get_mime_type("JPG") == "image/jpeg"
    assert get_mime_type("png") == "image/png"


@pytest.mark.parametrize("extension", ["", "notarealextension", "sdcard/noext"])
def test_get_mime_type_unknown(extension):
    """Test that unknown or empty extensions map to the unknown MIME type."""
    assert get_mime_type(extension) == UNKNOWN_MIME_TYPE


def test_get_last_modified(tmp_path):
    """Test reading the modification time of a file."""
    media_file = tmp_path / "clip.mp4"
    media_file.write_bytes(b"\x00\x00")
    os.utime(media_file, (1700000000, 1700000000))

    assert get_last_modified(str(media_file)) == 1700000000


def test_get_last_modified_missing_or_directory(tmp_path):
    """Test that missing files and directories give 0."""
    assert get_last_modified(str(tmp_path / "missing.jpg")) == 0
    assert get_last_modified(str(tmp_path)) == 0


@patch("os.path.isfile")
def test_get_last_modified_error(mock_isfile):
    """Test get_last_modified with a path that raises OSError."""
    mock_isfile.side_effect = OSError("Test error")
    assert get_last_modified("error.jpg") == 0
