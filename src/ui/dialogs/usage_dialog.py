"""Usage information shown when Browser Selector is started without a URL."""

from __future__ import annotations

from PyQt6.QtWidgets import QMessageBox, QWidget

USAGE_HTML = (
    "<b>Browser Selector</b><br><br>"
    "<i>No URL provided.</i><br><br>"
    "To install as a default browser option:<br>"
    "<tt>browser-selector --install</tt><br><br>"
    "To set as default browser:<br>"
    "<tt>browser-selector --set-default</tt><br><br>"
    "To use directly:<br>"
    "<tt>browser-selector https://example.com</tt>"
)


def show_usage(parent: QWidget | None = None) -> None:
    """Show the usage information box."""
    box = QMessageBox(parent)
    box.setWindowTitle("Browser Selector")
    box.setIcon(QMessageBox.Icon.Information)
    box.setText(USAGE_HTML)
    box.setMinimumWidth(400)
    box.exec()
