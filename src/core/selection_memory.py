"""Remembers the last browser chosen so it can be preselected next time."""

from __future__ import annotations

import logging

from .config import ConfigManager
from .models import Catalog

logger = logging.getLogger(__name__)


class SelectionMemory:
    """Reads and writes ``last_browser`` through the config store."""

    def __init__(self, config_manager: ConfigManager) -> None:
        self._config_manager = config_manager

    @property
    def last_browser_id(self) -> str:
        return self._config_manager.last_browser

    def preselect(self, catalog: Catalog) -> str | None:
        """
        Pick the id to preselect in the prompt.

        The last chosen browser if it is still installed, otherwise the first
        catalog entry, otherwise None.
        """
        last = self.last_browser_id
        if last and last in catalog:
            return last
        if last:
            logger.debug("Last browser %s no longer in catalog", last)
        first = catalog.first()
        return first.id if first else None

    def remember(self, browser_id: str) -> None:
        """Persist ``browser_id`` as the last choice."""
        if browser_id == self.last_browser_id:
            return
        self._config_manager.set_last_browser(browser_id)
        self._config_manager.save()
        logger.info("Remembered last browser: %s", browser_id)
