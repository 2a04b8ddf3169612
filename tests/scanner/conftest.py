"""Test fixtures for scanner module."""

import pytest
from pathlib import Path

from src.scanner.known_browsers import BrowserInfo


@pytest.fixture
def known_ids() -> dict[str, BrowserInfo]:
    """A small allow-list."""
    return {
        "firefox": BrowserInfo("Firefox", "Mozilla Firefox web browser"),
        "org.mozilla.firefox": BrowserInfo("Firefox", "Mozilla Firefox web browser (Flatpak)"),
        "chromium": BrowserInfo("Chromium", "Open-source web browser"),
        "vivaldi": BrowserInfo("Vivaldi", "Fast, customizable browser"),
    }


@pytest.fixture
def system_dir(tmp_path: Path) -> Path:
    path = tmp_path / "usr" / "share" / "applications"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def user_dir(tmp_path: Path) -> Path:
    path = tmp_path / "home" / ".local" / "share" / "applications"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def flatpak_desktop_file(tmp_path: Path) -> Path:
    """A realistic Flatpak-exported Firefox descriptor."""
    path = tmp_path / "flatpak" / "org.mozilla.firefox.desktop"
    path.parent.mkdir(parents=True)
    path.write_text(
        "[Desktop Entry]\n"
        "Version=1.0\n"
        "Name=Firefox Web Browser\n"
        "Name[de]=Firefox-Webbrowser\n"
        "Comment=Browse the Web\n"
        "Exec=/usr/bin/flatpak run --branch=stable --arch=x86_64 "
        "--command=firefox --file-forwarding org.mozilla.firefox @@u %u @@\n"
        "Icon=org.mozilla.firefox\n"
        "Terminal=false\n"
        "Type=Application\n"
        "MimeType=text/html;text/xml;x-scheme-handler/http;x-scheme-handler/https;\n"
        "Categories=Network;WebBrowser;\n"
        "Actions=new-window;new-private-window;\n"
        "\n"
        "[Desktop Action new-window]\n"
        "Name=Open a New Window\n"
        "Exec=/usr/bin/flatpak run org.mozilla.firefox --new-window %u\n",
        encoding="utf-8",
    )
    return path
