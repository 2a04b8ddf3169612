"""Dialog windows package for Browser Selector."""

from src.ui.dialogs.chooser import BrowserChooserDialog
from src.ui.dialogs.error_dialog import ErrorDialog
from src.ui.dialogs.usage_dialog import show_usage

__all__ = [
    "BrowserChooserDialog",
    "ErrorDialog",
    "show_usage",
]
