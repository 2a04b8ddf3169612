"""Known browser desktop ids and .desktop search locations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType


@dataclass(frozen=True)
class BrowserInfo:
    """Display information for an allow-listed browser id."""

    display_name: str
    description: str


# Environment paths
_HOME = Path.home()

# Search order is precedence order: an id found in an earlier directory
# shadows the same id in later ones.
DEFAULT_SEARCH_PATHS = (
    Path("/usr/share/applications"),
    Path("/usr/local/share/applications"),
    _HOME / ".local" / "share" / "applications",
    Path("/var/lib/flatpak/exports/share/applications"),
    _HOME / ".local" / "share" / "flatpak" / "exports" / "share" / "applications",
)

_FLATPAK = " (Flatpak)"

KNOWN_BROWSERS = MappingProxyType({
    "firefox": BrowserInfo("Firefox", "Mozilla Firefox web browser"),
    "firefox-esr": BrowserInfo("Firefox ESR", "Mozilla Firefox Extended Support Release"),
    "org.mozilla.firefox": BrowserInfo("Firefox", "Mozilla Firefox web browser" + _FLATPAK),
    "google-chrome": BrowserInfo("Chrome", "Google Chrome web browser"),
    "com.google.Chrome": BrowserInfo("Chrome", "Google Chrome web browser" + _FLATPAK),
    "chromium-browser": BrowserInfo("Chromium", "Open-source web browser"),
    "chromium": BrowserInfo("Chromium", "Open-source web browser"),
    "org.chromium.Chromium": BrowserInfo("Chromium", "Open-source web browser" + _FLATPAK),
    "vivaldi-stable": BrowserInfo("Vivaldi", "Fast, customizable browser"),
    "vivaldi": BrowserInfo("Vivaldi", "Fast, customizable browser"),
    "com.vivaldi.Vivaldi": BrowserInfo("Vivaldi", "Fast, customizable browser" + _FLATPAK),
    "opera": BrowserInfo("Opera", "Feature-rich web browser"),
    "com.opera.Opera": BrowserInfo("Opera", "Feature-rich web browser" + _FLATPAK),
    "brave-browser": BrowserInfo("Brave", "Privacy-focused web browser"),
    "com.brave.Browser": BrowserInfo("Brave", "Privacy-focused web browser" + _FLATPAK),
    "microsoft-edge": BrowserInfo("Edge", "Microsoft Edge web browser"),
    "com.microsoft.Edge": BrowserInfo("Edge", "Microsoft Edge web browser" + _FLATPAK),
    "app.zen_browser.zen": BrowserInfo("Zen", "Minimal Firefox-based browser"),
    "librewolf": BrowserInfo("LibreWolf", "Privacy-focused Firefox fork"),
    "io.gitlab.librewolf-community": BrowserInfo("LibreWolf", "Privacy-focused Firefox fork" + _FLATPAK),
    "waterfox-g4": BrowserInfo("Waterfox", "Privacy-focused Firefox fork"),
    "epiphany": BrowserInfo("Web", "GNOME Web browser"),
    "org.gnome.Epiphany": BrowserInfo("Web", "GNOME Web browser" + _FLATPAK),
    "konqueror": BrowserInfo("Konqueror", "KDE web browser"),
    "org.kde.konqueror": BrowserInfo("Konqueror", "KDE web browser" + _FLATPAK),
    "falkon": BrowserInfo("Falkon", "Lightweight Qt web browser"),
    "org.kde.falkon": BrowserInfo("Falkon", "Lightweight Qt web browser" + _FLATPAK),
    "qutebrowser": BrowserInfo("qutebrowser", "Keyboard-driven web browser"),
    "org.qutebrowser.qutebrowser": BrowserInfo("qutebrowser", "Keyboard-driven web browser" + _FLATPAK),
    "surf": BrowserInfo("Surf", "Simple web browser"),
    "midori": BrowserInfo("Midori", "Lightweight web browser"),
    "org.midori_browser.Midori": BrowserInfo("Midori", "Lightweight web browser" + _FLATPAK),
    "dillo": BrowserInfo("Dillo", "Very lightweight web browser"),
    "netsurf-gtk": BrowserInfo("NetSurf", "Lightweight web browser"),
    "org.netsurf.NetSurf": BrowserInfo("NetSurf", "Lightweight web browser" + _FLATPAK),
})
