"""Installed browser discovery from .desktop search directories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Mapping

from src.core.constants import DESKTOP_ENTRY_EXTENSION
from src.core.models import BrowserEntry, Catalog
from src.scanner.desktop_entry import DesktopEntryError, parse_desktop_entry
from src.scanner.known_browsers import DEFAULT_SEARCH_PATHS, KNOWN_BROWSERS, BrowserInfo

logger = logging.getLogger(__name__)


class NoBrowsersFoundError(Exception):
    """Raised when no allow-listed browser is installed."""

    def __init__(self, search_paths: Iterable[Path]) -> None:
        self.search_paths = list(search_paths)
        super().__init__(
            "No supported browsers found in: "
            + ", ".join(str(p) for p in self.search_paths)
        )


class DesktopEntryIndex:
    """Builds a Catalog of allow-listed browsers from .desktop files.

    Directories are scanned in the order given; when an id appears in more
    than one directory, the first one scanned wins.
    """

    def __init__(
        self,
        search_paths: Iterable[Path] | None = None,
        known_ids: Mapping[str, BrowserInfo] | None = None,
    ) -> None:
        self.search_paths = tuple(search_paths) if search_paths is not None else DEFAULT_SEARCH_PATHS
        self.known_ids = known_ids if known_ids is not None else KNOWN_BROWSERS

    def discover(self) -> Catalog:
        """Build the catalog from the configured paths and allow-list."""
        return self.build(self.search_paths, self.known_ids)

    def build(
        self,
        search_paths: Iterable[Path],
        known_ids: Mapping[str, BrowserInfo],
    ) -> Catalog:
        """
        Scan ``search_paths`` and return the deduplicated catalog.

        Args:
            search_paths: Directories in precedence order
            known_ids: Allow-list of desktop ids to display info

        Returns:
            Catalog in discovery order; may be empty
        """
        catalog = Catalog()
        for path in self.iter_candidate_files(search_paths, known_ids):
            browser_id = path.stem
            if browser_id in catalog:
                logger.debug(
                    "Skipping %s: %s already found at %s",
                    path,
                    browser_id,
                    catalog.get(browser_id).source_path,
                )
                continue

            try:
                entry = parse_desktop_entry(path)
            except DesktopEntryError as e:
                logger.warning("Skipping invalid desktop entry %s", e)
                continue

            info = known_ids[browser_id]
            catalog.add(
                BrowserEntry(
                    id=browser_id,
                    display_name=info.display_name,
                    description=info.description,
                    exec_template=entry.exec_line,
                    source_path=path,
                    desktop_name=entry.name,
                )
            )
            logger.debug("Found browser %s at %s", browser_id, path)

        logger.info("Discovered %d browser(s): %s", len(catalog), ", ".join(catalog.ids()))
        return catalog

    def iter_candidate_files(
        self,
        search_paths: Iterable[Path],
        known_ids: Mapping[str, BrowserInfo],
    ) -> Iterator[Path]:
        """Yield allow-listed .desktop files, directory by directory."""
        for directory in search_paths:
            if not directory.is_dir():
                logger.debug("Search path not found: %s", directory)
                continue

            try:
                children = sorted(directory.iterdir())
            except OSError as e:
                logger.warning("Cannot read search path %s: %s", directory, e)
                continue

            for path in children:
                if path.suffix != DESKTOP_ENTRY_EXTENSION:
                    continue
                if path.stem not in known_ids:
                    continue
                if not path.is_file():
                    continue
                yield path
