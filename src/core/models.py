"""Core data models for Browser Selector."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Iterator, Optional


@dataclass(frozen=True)
class BrowserEntry:
    """A discovered browser, backed by one .desktop file."""

    id: str  # Desktop file stem, e.g. "firefox", "org.mozilla.firefox"
    display_name: str  # From the allow-list, e.g. "Firefox"
    description: str
    exec_template: str  # Raw Exec= value, field codes included
    source_path: Path
    desktop_name: str = ""  # Name= from the descriptor itself

    @property
    def label(self) -> str:
        """Best human-readable name for notifications."""
        return self.desktop_name or self.display_name or self.id

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "display_name": self.display_name,
            "description": self.description,
            "exec_template": self.exec_template,
            "source_path": str(self.source_path),
            "desktop_name": self.desktop_name,
        }


class Catalog:
    """
    Ordered, deduplicated set of browser entries for one run.

    Insertion order is discovery order. The first entry added for an id
    is kept; later entries with the same id are rejected.
    """

    def __init__(self) -> None:
        self._entries: dict[str, BrowserEntry] = {}

    def add(self, entry: BrowserEntry) -> bool:
        """Add an entry unless its id is already present. Returns True if added."""
        if entry.id in self._entries:
            return False
        self._entries[entry.id] = entry
        return True

    def get(self, browser_id: str) -> Optional[BrowserEntry]:
        return self._entries.get(browser_id)

    def ids(self) -> list[str]:
        return list(self._entries)

    def first(self) -> Optional[BrowserEntry]:
        return next(iter(self._entries.values()), None)

    def __contains__(self, browser_id: object) -> bool:
        return browser_id in self._entries

    def __iter__(self) -> Iterator[BrowserEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({self.ids()!r})"


@dataclass(frozen=True)
class QueryParam:
    """A single query-string parameter prepared for display."""

    name: str  # Raw, undecoded name
    value: str  # Decoded and length-capped value
    is_tracking: bool


@dataclass(frozen=True)
class DisplaySettings:
    """Length and count limits for the URL summary."""

    max_domain_length: int = 50
    max_url_length: int = 80
    max_param_value_length: int = 50
    max_normal_params: int = 10
    max_blacklisted_params: int = 5

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> DisplaySettings:
        """Create instance from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass(frozen=True)
class Selection:
    """The user's answer from the selection prompt."""

    browser_id: str
    strip_tracking: bool = False
