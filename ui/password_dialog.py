"""
Password prompt for encrypted PDFs.
"""

from typing import Optional

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel,
    QLineEdit, QPushButton
)
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont

from core.config import Config


class PasswordDialog(QDialog):
    """Collects a password and reports it back; never keeps it."""

    # Signals
    password_submitted = pyqtSignal(str)
    cancelled = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.is_submitting = False
        self._setup_ui()
        self._setup_connections()
        self._update_buttons()

    def _setup_ui(self):
        """Set up the user interface."""
        self.setWindowTitle("Protected PDF")
        self.setModal(True)
        self.setMinimumWidth(420)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)

        title = QLabel("Protected PDF")
        font = QFont()
        font.setPointSize(14)
        font.setBold(True)
        title.setFont(font)
        layout.addWidget(title)

        description = QLabel(
            "This PDF is password protected. Please enter the password to view its metadata."
        )
        description.setWordWrap(True)
        layout.addWidget(description)

        field_layout = QHBoxLayout()
        self.password_input = QLineEdit()
        self.password_input.setPlaceholderText("Enter PDF password")
        self.password_input.setEchoMode(QLineEdit.EchoMode.Password)
        field_layout.addWidget(self.password_input)
        self.toggle_button = QPushButton("Show")
        self.toggle_button.setCheckable(True)
        self.toggle_button.setAutoDefault(False)
        field_layout.addWidget(self.toggle_button)
        layout.addLayout(field_layout)

        self.error_label = QLabel()
        self.error_label.setStyleSheet(f"QLabel {{ color: {Config.ERROR_TEXT_COLOR}; }}")
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        button_layout = QHBoxLayout()
        button_layout.addStretch()
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.setAutoDefault(False)
        button_layout.addWidget(self.cancel_button)
        self.submit_button = QPushButton("Submit")
        self.submit_button.setDefault(True)
        button_layout.addWidget(self.submit_button)
        layout.addLayout(button_layout)

    def _setup_connections(self):
        """Set up signal connections."""
        self.password_input.textChanged.connect(self._update_buttons)
        self.password_input.returnPressed.connect(self.submit)
        self.toggle_button.toggled.connect(self._on_toggle_visibility)
        self.submit_button.clicked.connect(self.submit)
        self.cancel_button.clicked.connect(self.reject)

    def submit(self):
        """Send the entered password unless empty or already submitting."""
        password = self.password_input.text()
        if not password or self.is_submitting:
            return
        self.set_submitting(True)
        self.password_submitted.emit(password)

    def set_submitting(self, submitting: bool):
        """
        Toggle the in-flight state. Finishing a submission clears the field.
        """
        self.is_submitting = submitting
        if not submitting:
            self.password_input.clear()
        self.password_input.setEnabled(not submitting)
        self._update_buttons()

    def set_error(self, message: Optional[str]):
        """Show or hide the error line under the password field."""
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))

    def reset(self):
        """Return to a blank, idle prompt."""
        self.set_submitting(False)
        self.set_error(None)
        self.toggle_button.setChecked(False)

    def reject(self):
        """Cancel, close button and Escape all end here."""
        if self.is_submitting:
            return
        super().reject()
        self.cancelled.emit()

    def _on_toggle_visibility(self, visible: bool):
        self.password_input.setEchoMode(
            QLineEdit.EchoMode.Normal if visible else QLineEdit.EchoMode.Password
        )
        self.toggle_button.setText("Hide" if visible else "Show")

    def _update_buttons(self):
        self.submit_button.setEnabled(bool(self.password_input.text()) and not self.is_submitting)
        self.submit_button.setText("Verifying..." if self.is_submitting else "Submit")
        self.cancel_button.setEnabled(not self.is_submitting)
