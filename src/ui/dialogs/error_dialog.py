"""Error dialog for Browser Selector.

Shows why a link could not be opened. The details pane holds the command
that was attempted, or the directories that were searched, and can be copied
for a bug report.
"""

from __future__ import annotations

from PyQt6.QtGui import QFontDatabase, QGuiApplication
from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QWidget,
    QPlainTextEdit,
)


class ErrorDialog(QDialog):
    """Modal error report with an optional copyable details pane."""

    def __init__(
        self,
        title: str,
        message: str,
        details: str | None = None,
        parent: QWidget | None = None,
    ) -> None:
        """
        Initialize the error dialog.

        Args:
            title: Short headline, e.g. "Launch failed"
            message: Sentence explaining the failure to the user
            details: Diagnostic text shown in a fixed-width pane
            parent: Parent widget
        """
        super().__init__(parent)
        self._title = title
        self._message = message
        self._details = details
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the dialog UI."""
        self.setWindowTitle("Browser Selector")
        self.setMinimumWidth(480)
        self.setModal(True)

        layout = QVBoxLayout(self)

        headline = QLabel(f"⚠  {self._title}")
        headline.setStyleSheet("font-size: 14px; font-weight: bold; color: #d32f2f;")
        layout.addWidget(headline)

        message_label = QLabel(self._message)
        message_label.setWordWrap(True)
        layout.addWidget(message_label)

        button_layout = QHBoxLayout()

        if self._details:
            self._details_view = QPlainTextEdit(self._details)
            self._details_view.setReadOnly(True)
            self._details_view.setFont(
                QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
            )
            self._details_view.setMaximumHeight(140)
            layout.addWidget(self._details_view)

            copy_btn = QPushButton("Copy details")
            copy_btn.clicked.connect(self._copy_details)
            button_layout.addWidget(copy_btn)

        button_layout.addStretch()

        close_btn = QPushButton("Close")
        close_btn.setDefault(True)
        close_btn.clicked.connect(self.accept)
        button_layout.addWidget(close_btn)

        layout.addLayout(button_layout)

    def _copy_details(self) -> None:
        clipboard = QGuiApplication.clipboard()
        if clipboard is not None:
            clipboard.setText(self._details or "")

    @staticmethod
    def show_error(
        title: str,
        message: str,
        details: str | None = None,
        parent: QWidget | None = None,
    ) -> int:
        """Show the dialog and block until it is closed."""
        return ErrorDialog(title, message, details, parent).exec()
