"""Freedesktop .desktop file parsing."""

from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass
from pathlib import Path

from src.core.constants import DESKTOP_ENTRY_GROUP

logger = logging.getLogger(__name__)


class DesktopEntryError(Exception):
    """Raised when a .desktop file cannot be used as a launch descriptor."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


@dataclass(frozen=True)
class DesktopEntry:
    """The parts of a .desktop file the selector relies on."""

    path: Path
    exec_line: str
    name: str = ""

    @property
    def desktop_id(self) -> str:
        """File name without the .desktop extension."""
        return self.path.stem


def _make_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        interpolation=None,  # Exec lines contain % field codes
        strict=False,
        delimiters=("=",),
        comment_prefixes=("#",),
        inline_comment_prefixes=None,
    )
    parser.optionxform = str  # Keys are case-sensitive (Name vs Name[de])
    return parser


def _first_value(text: str, group: str, key: str) -> str:
    """Return the value of the first ``key=`` line in ``group``, or an empty string."""
    current = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            current = line[1:-1]
            continue
        if current != group or "=" not in line:
            continue
        name, _, value = line.partition("=")
        if name.strip() == key:
            return value.strip()
    return ""


def parse_desktop_entry(path: Path) -> DesktopEntry:
    """
    Parse the [Desktop Entry] group of a .desktop file.

    Args:
        path: Path to the .desktop file

    Returns:
        DesktopEntry with the first Exec and Name values of the group

    Raises:
        DesktopEntryError: If the file is unreadable, malformed, or has no Exec
    """
    parser = _make_parser()
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        raise DesktopEntryError(path, f"unreadable: {e}") from e
    try:
        parser.read_string(text, source=str(path))
    except configparser.Error as e:
        raise DesktopEntryError(path, f"malformed: {e}") from e

    if not parser.has_section(DESKTOP_ENTRY_GROUP):
        raise DesktopEntryError(path, f"missing [{DESKTOP_ENTRY_GROUP}] group")

    exec_line = _first_value(text, DESKTOP_ENTRY_GROUP, "Exec")
    if not exec_line:
        raise DesktopEntryError(path, "no Exec key")

    name = _first_value(text, DESKTOP_ENTRY_GROUP, "Name")
    return DesktopEntry(path=path, exec_line=exec_line, name=name)
