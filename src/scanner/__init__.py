"""Installed browser discovery package."""

from src.scanner.known_browsers import BrowserInfo, KNOWN_BROWSERS, DEFAULT_SEARCH_PATHS
from src.scanner.desktop_entry import DesktopEntry, DesktopEntryError, parse_desktop_entry
from src.scanner.desktop_index import DesktopEntryIndex, NoBrowsersFoundError

__all__ = [
    # Allow-list
    "BrowserInfo",
    "KNOWN_BROWSERS",
    "DEFAULT_SEARCH_PATHS",
    # Descriptor parsing
    "DesktopEntry",
    "DesktopEntryError",
    "parse_desktop_entry",
    # Catalog
    "DesktopEntryIndex",
    "NoBrowsersFoundError",
]
