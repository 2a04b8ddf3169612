"""Tests for browser catalog discovery."""

import os
import pytest
from pathlib import Path

from src.scanner.desktop_index import DesktopEntryIndex, NoBrowsersFoundError
from src.scanner.known_browsers import DEFAULT_SEARCH_PATHS, KNOWN_BROWSERS


class TestDesktopEntryIndex:
    """Tests for DesktopEntryIndex.build()."""

    def test_discovers_allow_listed_browsers(
        self, system_dir: Path, known_ids, write_desktop_file
    ) -> None:
        """Only allow-listed ids are included, with allow-list display info."""
        write_desktop_file(system_dir, "firefox", "firefox %u", name="Firefox Web Browser")
        write_desktop_file(system_dir, "chromium", "chromium %U")
        write_desktop_file(system_dir, "gimp", "gimp %U")

        catalog = DesktopEntryIndex().build([system_dir], known_ids)

        assert catalog.ids() == ["chromium", "firefox"]
        firefox = catalog.get("firefox")
        assert firefox.display_name == "Firefox"
        assert firefox.description == "Mozilla Firefox web browser"
        assert firefox.desktop_name == "Firefox Web Browser"
        assert firefox.exec_template == "firefox %u"
        assert firefox.source_path == system_dir / "firefox.desktop"

    def test_first_search_path_wins(
        self, system_dir: Path, user_dir: Path, known_ids, write_desktop_file
    ) -> None:
        """The same id in two directories yields the entry scanned first."""
        write_desktop_file(system_dir, "firefox", "/usr/bin/firefox %u")
        write_desktop_file(user_dir, "firefox", "/home/me/firefox %u")

        catalog = DesktopEntryIndex().build([system_dir, user_dir], known_ids)
        assert len(catalog) == 1
        assert catalog.get("firefox").source_path == system_dir / "firefox.desktop"

        reversed_catalog = DesktopEntryIndex().build([user_dir, system_dir], known_ids)
        assert len(reversed_catalog) == 1
        assert reversed_catalog.get("firefox").source_path == user_dir / "firefox.desktop"

    def test_order_follows_search_paths(
        self, system_dir: Path, user_dir: Path, known_ids, write_desktop_file
    ) -> None:
        """Entries from earlier directories come first."""
        write_desktop_file(user_dir, "chromium")
        write_desktop_file(system_dir, "vivaldi")

        catalog = DesktopEntryIndex().build([system_dir, user_dir], known_ids)
        assert catalog.ids() == ["vivaldi", "chromium"]

    def test_invalid_entry_skipped(
        self, system_dir: Path, user_dir: Path, known_ids, write_desktop_file
    ) -> None:
        """A descriptor without Exec is skipped and a later valid one is used."""
        write_desktop_file(system_dir, "firefox", exec_line=None)
        write_desktop_file(user_dir, "firefox", "firefox %u")

        catalog = DesktopEntryIndex().build([system_dir, user_dir], known_ids)
        assert catalog.get("firefox").source_path == user_dir / "firefox.desktop"

    def test_missing_directory_skipped(
        self, tmp_path: Path, system_dir: Path, known_ids, write_desktop_file
    ) -> None:
        write_desktop_file(system_dir, "firefox")

        catalog = DesktopEntryIndex().build([tmp_path / "nope", system_dir], known_ids)
        assert catalog.ids() == ["firefox"]

    @pytest.mark.skipif(os.geteuid() == 0, reason="root ignores directory permissions")
    def test_unreadable_directory_skipped(
        self, system_dir: Path, user_dir: Path, known_ids, write_desktop_file
    ) -> None:
        write_desktop_file(system_dir, "firefox")
        write_desktop_file(user_dir, "chromium")
        system_dir.chmod(0o000)
        try:
            catalog = DesktopEntryIndex().build([system_dir, user_dir], known_ids)
        finally:
            system_dir.chmod(0o755)

        assert catalog.ids() == ["chromium"]

    def test_non_desktop_files_ignored(self, system_dir: Path, known_ids) -> None:
        (system_dir / "firefox.txt").write_text("[Desktop Entry]\nExec=firefox\n")
        (system_dir / "firefox.desktop.bak").write_text("[Desktop Entry]\nExec=firefox\n")

        assert len(DesktopEntryIndex().build([system_dir], known_ids)) == 0

    def test_no_matches_is_empty_not_error(self, system_dir: Path, known_ids, write_desktop_file) -> None:
        """An empty catalog is a valid result."""
        write_desktop_file(system_dir, "gimp")

        catalog = DesktopEntryIndex().build([system_dir], known_ids)
        assert len(catalog) == 0

    def test_dotted_ids(self, user_dir: Path, known_ids, write_desktop_file) -> None:
        """Reverse-DNS ids keep their dots."""
        write_desktop_file(user_dir, "org.mozilla.firefox", "flatpak run org.mozilla.firefox @@u %u @@")

        catalog = DesktopEntryIndex().build([user_dir], known_ids)
        assert catalog.ids() == ["org.mozilla.firefox"]

    def test_discover_uses_constructor_arguments(
        self, system_dir: Path, known_ids, write_desktop_file
    ) -> None:
        write_desktop_file(system_dir, "vivaldi")

        index = DesktopEntryIndex(search_paths=[system_dir], known_ids=known_ids)
        assert index.discover().ids() == ["vivaldi"]

    def test_defaults(self) -> None:
        index = DesktopEntryIndex()
        assert index.search_paths == DEFAULT_SEARCH_PATHS
        assert index.known_ids is KNOWN_BROWSERS


class TestNoBrowsersFoundError:
    def test_message_lists_search_paths(self) -> None:
        error = NoBrowsersFoundError([Path("/a"), Path("/b")])
        assert "/a" in str(error)
        assert error.search_paths == [Path("/a"), Path("/b")]
