"""
Key/value grids showing an extraction result.
"""

from typing import Dict, Optional

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QLabel, QGroupBox
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from models.ExtractionResult import ExtractionResult


class MetadataGrid(QGroupBox):
    """Two-column grid of labels; entries without a value are skipped."""

    def __init__(self, title: str, parent=None):
        super().__init__(title, parent)
        self.grid = QGridLayout(self)
        self.grid.setColumnStretch(1, 1)
        self.grid.setHorizontalSpacing(16)
        self.rows: Dict[str, str] = {}

    def set_data(self, data: Dict[str, Optional[str]]):
        """Replace the grid contents."""
        self.clear()
        key_font = QFont()
        key_font.setBold(True)
        for key, value in data.items():
            if not value:
                continue
            row = len(self.rows)
            key_label = QLabel(f"{key}:")
            key_label.setFont(key_font)
            key_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
            value_label = QLabel(value)
            value_label.setWordWrap(True)
            value_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            self.grid.addWidget(key_label, row, 0)
            self.grid.addWidget(value_label, row, 1)
            self.rows[key] = value

    def clear(self):
        while self.grid.count():
            item = self.grid.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self.rows = {}


class MetadataPanel(QWidget):
    """Basic file attributes followed by the PDF information dictionary."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.basic_grid = MetadataGrid("Basic Information")
        self.info_grid = MetadataGrid("PDF Information Dictionary")
        layout.addWidget(self.basic_grid)
        layout.addWidget(self.info_grid)
        layout.addStretch()
        self.show_result(None)

    def show_result(self, result: Optional[ExtractionResult]):
        """Render ``result``, or hide both grids when there is none."""
        if result is None:
            self.basic_grid.clear()
            self.info_grid.clear()
            self.basic_grid.setVisible(False)
            self.info_grid.setVisible(False)
            return
        self.basic_grid.set_data(result.basic_information())
        self.basic_grid.setVisible(True)
        self.info_grid.set_data(result.info)
        self.info_grid.setVisible(bool(result.info))
