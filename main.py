"""Application entry point for Browser Selector.

Parses the command line, initializes logging, and either registers the
selector with the desktop or opens the given link in a chosen browser.
"""

import argparse
import logging
import shutil
import sys
from pathlib import Path

from src.core.constants import APP_ID, APP_VERSION, CONFIG_FILE
from src.core.logging_config import setup_logging
from src.execution.desktop_integration import (
    DesktopIntegrationError,
    install_desktop_file,
    set_default_browser,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_ID,
        description="Browser Selector - Choose which browser to use for each link",
        epilog=f"Configuration: {CONFIG_FILE}",
    )
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--install",
        action="store_true",
        help="Create desktop file to set as default browser",
    )
    action.add_argument(
        "--set-default",
        action="store_true",
        help="Create desktop file AND set as default browser",
    )
    parser.add_argument("--debug", action="store_true", help="Also log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("url", nargs="?", help="URL to open in the selected browser")
    return parser


def _self_command() -> list[str]:
    """Return the argument vector that starts this program."""
    installed = shutil.which(APP_ID)
    if installed:
        return [installed]
    return [sys.executable, str(Path(__file__).resolve())]


def _install(set_default: bool) -> int:
    """Write the desktop file and optionally register as default browser."""
    try:
        desktop_file = install_desktop_file(_self_command())
        print(f"Desktop file created at: {desktop_file}", file=sys.stderr)

        if not set_default:
            print(
                "You can now set Browser Selector as your default browser in system settings.",
                file=sys.stderr,
            )
            return 0

        failures = set_default_browser()
    except DesktopIntegrationError as e:
        logger.error("%s", e)
        print(e, file=sys.stderr)
        return 1

    for command in failures:
        print(f"Failed: {command}", file=sys.stderr)
    if failures:
        print("You may need to manually set it in your system settings.", file=sys.stderr)
    else:
        print("Successfully set as default browser.", file=sys.stderr)
    return 0


def _open(url: str | None) -> int:
    """Show the chooser for ``url`` and launch the selected browser."""
    from src.ui.app import create_application
    from src.ui.dialogs.chooser import BrowserChooserDialog
    from src.ui.dialogs.error_dialog import ErrorDialog
    from src.ui.dialogs.usage_dialog import show_usage
    from src.ui.orchestrator import Orchestrator

    create_application(sys.argv[:1])

    orchestrator = Orchestrator(
        prompt=BrowserChooserDialog.ask,
        show_error=ErrorDialog.show_error,
        show_usage=show_usage,
    )
    return orchestrator.run(url)


def main(argv: list[str] | None = None) -> int:
    """
    Application entry point.

    Returns:
        Exit code (0 for success)
    """
    args = _build_parser().parse_args(argv)

    # Initialize logging
    setup_logging(debug_mode=args.debug)
    logger.debug("Started with arguments: %s", args)

    if args.install or args.set_default:
        return _install(set_default=args.set_default)

    return _open(args.url)


if __name__ == "__main__":
    sys.exit(main())
