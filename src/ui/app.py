"""Application initialization for Browser Selector.

Creates the QApplication instance used by the dialogs.
"""

from __future__ import annotations

import sys
from typing import Sequence

from PyQt6.QtWidgets import QApplication

from src.core.constants import APP_ID, APP_NAME, APP_VERSION


def create_application(argv: Sequence[str] | None = None) -> QApplication:
    """
    Return the QApplication instance, creating it on first use.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        Configured QApplication instance
    """
    existing = QApplication.instance()
    if existing is not None:
        return existing

    if argv is None:
        argv = sys.argv

    app = QApplication(list(argv))
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setDesktopFileName(APP_ID)
    app.setQuitOnLastWindowClosed(False)
    return app
