"""Registers Browser Selector with the desktop as a web browser."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Callable, Optional, Sequence

from src.core.constants import (
    SELECTOR_DESKTOP_FILE,
    USER_APPLICATIONS_DIR,
    XDG_MIME,
    XDG_SETTINGS,
)

logger = logging.getLogger(__name__)

# Characters that force an Exec argument to be quoted
_RESERVED_CHARS = set(' \t\n"\'\\><~|&;$*?#()`')
# Characters escaped with a backslash inside a quoted Exec argument
_ESCAPED_CHARS = set('"`$\\')

HANDLED_SCHEMES = ("http", "https")

MIME_TYPES = (
    "text/html",
    "text/xml",
    "application/xhtml+xml",
    "application/xml",
    "application/rss+xml",
    "application/rdf+xml",
    "x-scheme-handler/http",
    "x-scheme-handler/https",
    "x-scheme-handler/ftp",
    "x-scheme-handler/chrome",
    "video/webm",
    "application/x-xpinstall",
)


class DesktopIntegrationError(Exception):
    """Raised when the selector cannot be registered with the desktop."""
    pass


def quote_exec_arg(arg: str) -> str:
    """Quote one argument following the .desktop Exec quoting rules."""
    if arg and not any(c in _RESERVED_CHARS for c in arg):
        return arg
    escaped = "".join("\\" + c if c in _ESCAPED_CHARS else c for c in arg)
    return f'"{escaped}"'


def render_desktop_file(command: Sequence[str]) -> str:
    """Return the contents of the selector's own .desktop file."""
    exec_line = " ".join(quote_exec_arg(a) for a in command) + " %u"
    return (
        "[Desktop Entry]\n"
        "Type=Application\n"
        "Name=Browser Selector\n"
        "GenericName=Web Browser\n"
        "Comment=Choose a browser for each link you open\n"
        f"Exec={exec_line}\n"
        "Icon=web-browser\n"
        "Terminal=false\n"
        "StartupNotify=true\n"
        "Categories=Network;WebBrowser;\n"
        f"MimeType={';'.join(MIME_TYPES)};\n"
        "Actions=new-window;new-private-window;\n"
        "\n"
        "[Desktop Action new-window]\n"
        "Name=New Window\n"
        f"Exec={exec_line}\n"
        "\n"
        "[Desktop Action new-private-window]\n"
        "Name=New Private Window\n"
        f"Exec={exec_line}\n"
    )


def install_desktop_file(
    command: Sequence[str],
    applications_dir: Path | None = None,
) -> Path:
    """
    Write the selector's .desktop file to the user applications directory.

    Args:
        command: Argument vector that starts Browser Selector
        applications_dir: Target directory; defaults to ~/.local/share/applications

    Returns:
        Path of the written file

    Raises:
        DesktopIntegrationError: If the file cannot be written
    """
    target_dir = applications_dir or USER_APPLICATIONS_DIR
    desktop_file = target_dir / SELECTOR_DESKTOP_FILE
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        desktop_file.write_text(render_desktop_file(command), encoding="utf-8")
        desktop_file.chmod(0o755)
    except OSError as e:
        raise DesktopIntegrationError(f"Cannot write {desktop_file}: {e}") from e

    logger.info("Desktop file created at %s", desktop_file)
    return desktop_file


def set_default_browser(
    run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    which: Callable[[str], Optional[str]] = shutil.which,
) -> list[str]:
    """
    Register the installed .desktop file as the default web browser.

    Returns:
        Human-readable list of registrations that failed (empty on full success)

    Raises:
        DesktopIntegrationError: If xdg-settings is not installed
    """
    if not which(XDG_SETTINGS):
        raise DesktopIntegrationError(
            f"{XDG_SETTINGS} not found. Please set Browser Selector as default browser manually."
        )

    commands = [[XDG_SETTINGS, "set", "default-web-browser", SELECTOR_DESKTOP_FILE]]
    if which(XDG_MIME):
        commands += [
            [XDG_MIME, "default", SELECTOR_DESKTOP_FILE, f"x-scheme-handler/{scheme}"]
            for scheme in HANDLED_SCHEMES
        ]
    else:
        logger.warning("%s not found, skipping scheme handler registration", XDG_MIME)

    failures = []
    for cmd in commands:
        try:
            result = run(cmd, capture_output=True, text=True, check=False)
        except OSError as e:
            logger.warning("Could not run %s: %s", cmd[0], e)
            failures.append(" ".join(cmd))
            continue
        if result.returncode != 0:
            logger.warning("%s failed (%d): %s", " ".join(cmd), result.returncode, result.stderr.strip())
            failures.append(" ".join(cmd))
        else:
            logger.info("Registered: %s", " ".join(cmd))
    return failures
