"""Configuration for unit tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def catalog_logs(caplog):
    """Capture gallery_catalog records down to DEBUG."""
    caplog.set_level(logging.DEBUG, logger="gallery_catalog")
    yield caplog
