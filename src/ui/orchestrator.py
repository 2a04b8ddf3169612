"""Single-pass flow from an incoming link to a launched browser."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from src.core.config import ConfigError, ConfigManager
from src.core.logging_config import log_launch
from src.core.models import Catalog, Selection
from src.core.selection_memory import SelectionMemory
from src.core.url_analysis import (
    UrlAnalysis,
    analyze_url,
    extract_domain,
    strip_tracking_params,
)
from src.execution.launch_resolver import LaunchError, LaunchResolver
from src.execution.launcher import Launcher
from src.scanner.desktop_index import DesktopEntryIndex, NoBrowsersFoundError
from src.ui.notifier import Notifier
from src.ui.state_machine import RunState, StateManager

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

PromptFn = Callable[[Catalog, Optional[str], UrlAnalysis], Optional[Selection]]
ShowErrorFn = Callable[[str, str, Optional[str]], object]


class Orchestrator:
    """
    Runs one link through config, discovery, choice, and launch.

    The prompt and error display are injected so the flow itself does not
    depend on how dialogs are drawn.
    """

    def __init__(
        self,
        prompt: PromptFn,
        show_error: ShowErrorFn,
        show_usage: Callable[[], object] | None = None,
        notifier: Notifier | None = None,
        index: DesktopEntryIndex | None = None,
        resolver: LaunchResolver | None = None,
        launcher: Launcher | None = None,
        config_factory: Callable[[], ConfigManager] = ConfigManager,
    ) -> None:
        self._prompt = prompt
        self._show_error = show_error
        self._show_usage = show_usage
        self._notifier = notifier or Notifier()
        self._index = index or DesktopEntryIndex()
        self._resolver = resolver
        self._launcher = launcher or Launcher()
        self._config_factory = config_factory
        self.state_manager = StateManager()

    @property
    def state(self) -> RunState:
        return self.state_manager.state

    def run(self, url: str | None) -> int:
        """
        Handle one link.

        Args:
            url: Link to open; None or empty shows usage information

        Returns:
            Process exit code
        """
        if not url:
            logger.info("No URL provided, showing usage")
            if self._show_usage is not None:
                self._show_usage()
            return EXIT_OK

        config = self._config_factory()
        self.state_manager.transition_to(RunState.CONFIG_LOADED)

        catalog = self._index.discover()
        self.state_manager.transition_to(RunState.CATALOG_BUILT)
        if not catalog:
            error = NoBrowsersFoundError(self._index.search_paths)
            logger.error("%s", error)
            self.state_manager.fail(str(error))
            self._show_error(
                "No supported browsers found!",
                "Please install a web browser first.",
                "\n".join(str(p) for p in error.search_paths),
            )
            return EXIT_FAILURE

        analysis = analyze_url(url, config.tracking_params, config.display)
        self.state_manager.transition_to(RunState.URL_ANALYZED)
        logger.debug(
            "URL %s: %d params, %d tracking",
            analysis.domain,
            len(analysis.params),
            len(analysis.tracking_params),
        )

        memory = SelectionMemory(config)
        preselected = memory.preselect(catalog)

        self.state_manager.transition_to(RunState.AWAITING_CHOICE)
        selection = self._prompt(catalog, preselected, analysis)
        if selection is None:
            self.state_manager.transition_to(RunState.CANCELLED)
            self._notifier.notify("Cancelled by user")
            return EXIT_OK

        self.state_manager.transition_to(RunState.RESOLVED)
        return self._launch(catalog, selection, url, config, memory)

    def _launch(
        self,
        catalog: Catalog,
        selection: Selection,
        url: str,
        config: ConfigManager,
        memory: SelectionMemory,
    ) -> int:
        entry = catalog.get(selection.browser_id)
        if entry is None:
            message = f"Could not find desktop file for {selection.browser_id}"
            logger.error(message)
            self.state_manager.fail(message)
            self._show_error("Launch failed", message, None)
            return EXIT_FAILURE

        removed = 0
        if selection.strip_tracking:
            url, removed = strip_tracking_params(url, config.tracking_params)
            logger.info("Removed %d tracking parameter(s)", removed)

        if self._resolver is None:
            self._resolver = LaunchResolver()

        try:
            action = self._resolver.resolve(entry, url)
            self._notifier.notify(f"Opening link in {entry.label}...", icon="web-browser")
            self._launcher.launch(action)
        except LaunchError as e:
            logger.error("%s (command: %s)", e, e.command)
            self.state_manager.fail(str(e))
            self._show_error(
                "Launch failed",
                f"Could not open the link in {entry.display_name}.",
                f"Browser: {e.browser_id}\n"
                f"Strategy: {e.strategy.value}\n"
                f"Command: {e.command or '-'}\n"
                f"Reason: {e.reason}",
            )
            return EXIT_FAILURE

        self.state_manager.transition_to(RunState.LAUNCHED)
        log_launch(entry.id, action.strategy.value, extract_domain(url), removed)

        try:
            memory.remember(entry.id)
        except ConfigError as e:
            logger.warning("Could not remember last browser: %s", e)

        self._notifier.notify("Browser launched successfully!", expire_ms=2000)
        return EXIT_OK
