"""Turns a chosen browser and a URL into a concrete launch command.

Three strategies, in preference order:
    1. DESKTOP_LAUNCHER   gtk-launch <desktop-id> <url>
    2. DESCRIPTOR_OPENER  gio launch <desktop-file> <url>
    3. DIRECT_EXEC        the entry's Exec line with field codes expanded

The first two let the desktop environment handle Flatpak/Snap wrappers.
Which helpers exist is probed once, when the resolver is created.
"""

from __future__ import annotations

import logging
import re
import shlex
import shutil
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from src.core.constants import GIO, GTK_LAUNCH
from src.core.models import BrowserEntry

logger = logging.getLogger(__name__)

# Field codes that stand for a single URL or file argument
URL_FIELD_CODES = frozenset("uUfF")

_FIELD_CODE_RE = re.compile(r"%([a-zA-Z%])")


class LaunchStrategy(Enum):
    """Ranked ways of starting a browser."""

    DESKTOP_LAUNCHER = "desktop_launcher"
    DESCRIPTOR_OPENER = "descriptor_opener"
    DIRECT_EXEC = "direct_exec"


# Preference order; DIRECT_EXEC needs no helper and is always available
STRATEGY_ORDER = (
    LaunchStrategy.DESKTOP_LAUNCHER,
    LaunchStrategy.DESCRIPTOR_OPENER,
    LaunchStrategy.DIRECT_EXEC,
)

STRATEGY_HELPERS = {
    LaunchStrategy.DESKTOP_LAUNCHER: GTK_LAUNCH,
    LaunchStrategy.DESCRIPTOR_OPENER: GIO,
}


class LaunchError(Exception):
    """Raised when a browser launch cannot be prepared or started."""

    def __init__(
        self,
        browser_id: str,
        strategy: LaunchStrategy,
        reason: str,
        command: str = "",
    ) -> None:
        self.browser_id = browser_id
        self.strategy = strategy
        self.reason = reason
        self.command = command
        super().__init__(f"Failed to launch {browser_id} via {strategy.value}: {reason}")


@dataclass(frozen=True)
class LaunchAction:
    """A ready-to-run launch command."""

    strategy: LaunchStrategy
    browser_id: str
    argv: tuple[str, ...]

    @property
    def command_line(self) -> str:
        """Shell-quoted rendering, for logs and error messages only."""
        return shlex.join(self.argv)


def detect_available_strategies(
    which: Callable[[str], Optional[str]] = shutil.which,
) -> frozenset[LaunchStrategy]:
    """Return the strategies whose helper program is on PATH."""
    available = {LaunchStrategy.DIRECT_EXEC}
    for strategy, helper in STRATEGY_HELPERS.items():
        if which(helper):
            available.add(strategy)
        else:
            logger.debug("Launch helper %s not found", helper)
    return frozenset(available)


def expand_exec(exec_template: str, url: str) -> list[str]:
    """
    Expand an Exec line into an argument vector.

    A token that is exactly a URL field code becomes the URL as its own
    argument. URL codes embedded in a longer token are replaced in place,
    ``%%`` becomes ``%``, and every other field code is removed. Tokens left
    empty by removal are dropped.

    Raises:
        ValueError: If the Exec line has unbalanced quotes
    """
    argv = []
    for token in shlex.split(exec_template):
        if len(token) == 2 and token[0] == "%" and token[1] in URL_FIELD_CODES:
            argv.append(url)
            continue

        expanded = _FIELD_CODE_RE.sub(lambda m: _expand_code(m.group(1), url), token)
        if expanded or not token:
            argv.append(expanded)
    return argv


def _expand_code(code: str, url: str) -> str:
    if code in URL_FIELD_CODES:
        return url
    if code == "%":
        return "%"
    return ""


class LaunchResolver:
    """Selects the best available strategy and builds the launch command."""

    def __init__(self, available: Iterable[LaunchStrategy] | None = None) -> None:
        if available is None:
            available = detect_available_strategies()
        self.available = frozenset(available) | {LaunchStrategy.DIRECT_EXEC}
        logger.debug(
            "Available launch strategies: %s",
            ", ".join(s.value for s in STRATEGY_ORDER if s in self.available),
        )

    def select_strategy(self) -> LaunchStrategy:
        """Return the highest-ranked available strategy."""
        return next(s for s in STRATEGY_ORDER if s in self.available)

    def resolve(self, entry: BrowserEntry, url: str) -> LaunchAction:
        """
        Build the launch command for ``entry`` opening ``url``.

        Raises:
            LaunchError: Only for DIRECT_EXEC, if the Exec line cannot be used
        """
        strategy = self.select_strategy()

        if strategy is LaunchStrategy.DESKTOP_LAUNCHER:
            argv = (GTK_LAUNCH, entry.id, url)
        elif strategy is LaunchStrategy.DESCRIPTOR_OPENER:
            argv = (GIO, "launch", str(entry.source_path), url)
        else:
            argv = self._direct_exec_argv(entry, url)

        action = LaunchAction(strategy=strategy, browser_id=entry.id, argv=argv)
        logger.info("Resolved %s via %s: %s", entry.id, strategy.value, action.command_line)
        return action

    def _direct_exec_argv(self, entry: BrowserEntry, url: str) -> tuple[str, ...]:
        try:
            argv = expand_exec(entry.exec_template, url)
        except ValueError as e:
            raise LaunchError(
                entry.id,
                LaunchStrategy.DIRECT_EXEC,
                f"cannot parse Exec line: {e}",
                command=entry.exec_template,
            ) from e

        if not argv:
            raise LaunchError(
                entry.id,
                LaunchStrategy.DIRECT_EXEC,
                "Exec line has no command",
                command=entry.exec_template,
            )
        return tuple(argv)
