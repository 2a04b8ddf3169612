"""Browser chooser dialog for Browser Selector.

Shows the link being opened, its query parameters (tracking ones struck
through) and the list of installed browsers.
"""

from __future__ import annotations

import html

from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QWidget,
    QListWidget,
    QListWidgetItem,
    QCheckBox,
)
from PyQt6.QtCore import Qt

from src.core.models import Catalog, Selection
from src.core.url_analysis import UrlAnalysis


def format_summary_html(analysis: UrlAnalysis) -> str:
    """Render the URL summary shown above the browser list."""
    parts = [
        "<big><b>Choose your browser</b></big>",
        f"<b>URL:</b> <i>{html.escape(analysis.display_domain)}</i>",
        f"<small>{html.escape(analysis.display_url)}</small>",
    ]

    if analysis.params:
        normal = len(analysis.normal_params)
        tracking = len(analysis.tracking_params)
        if tracking:
            header = f"<b>Parameters</b> <small>({normal} active, {tracking} tracking)</small>:"
        else:
            header = f"<b>Parameters</b> <small>({normal})</small>:"
        lines = [header]

        for param in analysis.visible_params:
            text = f"{html.escape(param.name)} = {html.escape(param.value)}"
            if param.is_tracking:
                text = f"<s><font color='gray'>{text}</font></s>"
            lines.append(f"<small>&bull; {text}</small>")

        if analysis.hidden_count:
            lines.append(f"<small>... and {analysis.hidden_count} more parameters</small>")
        parts.append("<br>".join(lines))

    return "<br>".join(parts)


class BrowserChooserDialog(QDialog):
    """
    Dialog to pick the browser for one link.

    The preselected browser is highlighted; double-clicking a browser opens
    the link right away.
    """

    def __init__(
        self,
        catalog: Catalog,
        preselected_id: str | None,
        analysis: UrlAnalysis,
        parent: QWidget | None = None,
    ) -> None:
        """
        Initialize the chooser dialog.

        Args:
            catalog: Browsers to offer, in display order
            preselected_id: Id to highlight initially
            analysis: URL summary to display
            parent: Parent widget
        """
        super().__init__(parent)
        self._catalog = catalog
        self._preselected_id = preselected_id
        self._analysis = analysis
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the dialog UI."""
        self.setWindowTitle("Browser Selector")
        self.setMinimumSize(700, 500)
        self.setModal(True)

        layout = QVBoxLayout(self)

        summary_label = QLabel(format_summary_html(self._analysis))
        summary_label.setTextFormat(Qt.TextFormat.RichText)
        summary_label.setWordWrap(True)
        layout.addWidget(summary_label)

        self._list_widget = QListWidget()
        for entry in self._catalog:
            item = QListWidgetItem(f"{entry.display_name} - {entry.description}")
            item.setData(Qt.ItemDataRole.UserRole, entry.id)
            item.setToolTip(str(entry.source_path))
            self._list_widget.addItem(item)
            if entry.id == self._preselected_id:
                self._list_widget.setCurrentItem(item)
        if self._list_widget.currentItem() is None and self._list_widget.count():
            self._list_widget.setCurrentRow(0)
        self._list_widget.itemDoubleClicked.connect(lambda _item: self.accept())
        layout.addWidget(self._list_widget)

        self._strip_checkbox = QCheckBox("Remove tracking parameters")
        self._strip_checkbox.setEnabled(self._analysis.has_tracking)
        layout.addWidget(self._strip_checkbox)

        # Buttons
        button_layout = QHBoxLayout()
        button_layout.addStretch()

        cancel_btn = QPushButton("Cancel")
        cancel_btn.clicked.connect(self.reject)
        button_layout.addWidget(cancel_btn)

        self._open_btn = QPushButton("Open")
        self._open_btn.setDefault(True)
        self._open_btn.clicked.connect(self.accept)
        button_layout.addWidget(self._open_btn)

        layout.addLayout(button_layout)

    def selected_id(self) -> str | None:
        """Return the id of the highlighted browser."""
        item = self._list_widget.currentItem()
        return item.data(Qt.ItemDataRole.UserRole) if item else None

    def selection(self) -> Selection | None:
        """Return the current choice, or None if nothing is highlighted."""
        browser_id = self.selected_id()
        if browser_id is None:
            return None
        return Selection(
            browser_id=browser_id,
            strip_tracking=self._strip_checkbox.isEnabled() and self._strip_checkbox.isChecked(),
        )

    @staticmethod
    def ask(
        catalog: Catalog,
        preselected_id: str | None,
        analysis: UrlAnalysis,
        parent: QWidget | None = None,
    ) -> Selection | None:
        """
        Show the dialog and block until the user answers.

        Returns:
            The Selection, or None if the dialog was cancelled
        """
        dialog = BrowserChooserDialog(catalog, preselected_id, analysis, parent)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return None
        return dialog.selection()
