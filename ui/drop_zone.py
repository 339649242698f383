"""
Drag-and-drop / click-to-select file input.
"""

import logging
from typing import List, Optional

from PyQt6.QtWidgets import QFrame, QVBoxLayout, QLabel, QFileDialog
from PyQt6.QtCore import Qt, pyqtSignal, QUrl
from PyQt6.QtGui import QFont

from core.config import Config


class DropZone(QFrame):
    """Dashed drop target that also opens a file picker when clicked."""

    file_selected = pyqtSignal(str)  # local file path

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAcceptDrops(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumHeight(160)
        self._setup_ui()
        self._set_active(False)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 30, 20, 30)
        layout.addStretch()

        self.title_label = QLabel(Config.DROP_ZONE_TEXT)
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        font = QFont()
        font.setPointSize(12)
        self.title_label.setFont(font)
        layout.addWidget(self.title_label)

        self.hint_label = QLabel(Config.DROP_ZONE_HINT)
        self.hint_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.hint_label.setStyleSheet("QLabel { color: #6B7280; border: none; }")
        layout.addWidget(self.hint_label)

        layout.addStretch()

    def _set_active(self, active: bool):
        color = Config.DROP_ZONE_ACTIVE_COLOR if active else Config.DROP_ZONE_BORDER_COLOR
        self.setStyleSheet(
            f"DropZone {{ border: 2px dashed {color}; border-radius: 8px; background: white; }}"
        )

    @staticmethod
    def first_local_file(urls: List[QUrl]) -> Optional[str]:
        """Only the first dropped file is used."""
        for url in urls:
            if url.isLocalFile():
                return url.toLocalFile()
        return None

    def select_file(self):
        """Open the file picker and emit the chosen path."""
        path, _ = QFileDialog.getOpenFileName(
            self, "Open PDF Document", "", Config.PDF_FILE_FILTER)
        if path:
            self.file_selected.emit(path)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.select_file()
        super().mousePressEvent(event)

    def dragEnterEvent(self, event):
        if self.first_local_file(event.mimeData().urls()):
            self._set_active(True)
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event):
        event.acceptProposedAction()

    def dragLeaveEvent(self, event):
        self._set_active(False)
        super().dragLeaveEvent(event)

    def dropEvent(self, event):
        self._set_active(False)
        path = self.first_local_file(event.mimeData().urls())
        if not path:
            event.ignore()
            return
        event.acceptProposedAction()
        logging.debug(f"DropZone.dropEvent: file dropped {path}")
        self.file_selected.emit(path)
