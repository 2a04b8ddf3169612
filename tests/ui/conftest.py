"""Pytest fixtures for UI tests."""

import pytest
from pathlib import Path
from unittest.mock import MagicMock

from src.core.models import BrowserEntry, Catalog


@pytest.fixture
def sample_catalog() -> Catalog:
    """Create a Catalog with two browsers."""
    catalog = Catalog()
    catalog.add(
        BrowserEntry(
            id="firefox",
            display_name="Firefox",
            description="Mozilla Firefox web browser",
            exec_template="firefox %u",
            source_path=Path("/usr/share/applications/firefox.desktop"),
            desktop_name="Firefox Web Browser",
        )
    )
    catalog.add(
        BrowserEntry(
            id="chromium",
            display_name="Chromium",
            description="Open-source web browser",
            exec_template="chromium %U",
            source_path=Path("/usr/share/applications/chromium.desktop"),
        )
    )
    return catalog


@pytest.fixture
def mock_notifier():
    """Create a mock Notifier."""
    return MagicMock()


@pytest.fixture
def mock_index(sample_catalog):
    """Create a mock DesktopEntryIndex returning the sample catalog."""
    mock = MagicMock()
    mock.discover.return_value = sample_catalog
    mock.search_paths = (Path("/usr/share/applications"),)
    return mock
