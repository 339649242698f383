"""
Main window for the PDF Metadata Viewer.
"""

import logging
from typing import Dict, Optional, Set

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel,
    QStatusBar, QMessageBox, QProgressBar,
    QScrollArea, QFrame
)
from PyQt6.QtCore import Qt, QTimer, pyqtSlot
from PyQt6.QtGui import QAction, QKeySequence

from core.config import Config
from core.metadata_extractor import AttemptOutcome, ExtractionState, MetadataExtractor
from services.PDFMetadataService import PDFMetadataService
from ui.drop_zone import DropZone
from ui.extraction_worker import ExtractionWorker
from ui.metadata_panel import MetadataPanel
from ui.password_dialog import PasswordDialog


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, service: PDFMetadataService):
        super().__init__()
        self.extractor = MetadataExtractor(service)
        self._workers: Set[ExtractionWorker] = set()
        self._timers: Dict[int, QTimer] = {}

        # UI components
        self.drop_zone: Optional[DropZone] = None
        self.loading_label: Optional[QLabel] = None
        self.error_panel: Optional[QFrame] = None
        self.error_label: Optional[QLabel] = None
        self.metadata_panel: Optional[MetadataPanel] = None
        self.password_dialog: Optional[PasswordDialog] = None
        self.status_bar: Optional[QStatusBar] = None
        self.progress_bar: Optional[QProgressBar] = None

        self._setup_ui()
        self._setup_connections()
        self._refresh()

        self.setWindowTitle(Config.APP_NAME)
        self.setMinimumSize(Config.MIN_WINDOW_WIDTH, Config.MIN_WINDOW_HEIGHT)
        self.resize(Config.DEFAULT_WINDOW_WIDTH, Config.DEFAULT_WINDOW_HEIGHT)

    def _setup_ui(self):
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameStyle(QFrame.Shape.NoFrame)
        self.setCentralWidget(scroll)

        central_widget = QWidget()
        central_widget.setStyleSheet(f"background-color: {Config.BACKGROUND_COLOR};")
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(20, 20, 20, 20)
        main_layout.setSpacing(16)

        self.drop_zone = DropZone()
        main_layout.addWidget(self.drop_zone)

        self.loading_label = QLabel(Config.LOADING_MESSAGE)
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        main_layout.addWidget(self.loading_label)

        self.error_panel = QFrame()
        self.error_panel.setStyleSheet(
            f"QFrame {{ background-color: {Config.ERROR_BACKGROUND_COLOR};"
            f" border: 1px solid {Config.ERROR_BORDER_COLOR}; border-radius: 8px; }}"
            f" QLabel {{ color: {Config.ERROR_TEXT_COLOR}; border: none; }}"
        )
        error_layout = QVBoxLayout(self.error_panel)
        error_title = QLabel("<b>Error</b>")
        error_layout.addWidget(error_title)
        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        error_layout.addWidget(self.error_label)
        main_layout.addWidget(self.error_panel)

        self.metadata_panel = MetadataPanel()
        main_layout.addWidget(self.metadata_panel)
        main_layout.addStretch()

        scroll.setWidget(central_widget)

        self.password_dialog = PasswordDialog(self)

        self._create_menu_bar()
        self._create_status_bar()

    def _create_menu_bar(self):
        menubar = self.menuBar()
        file_menu = menubar.addMenu("&File")
        open_action = QAction("&Open PDF...", self)
        open_action.setShortcut(QKeySequence.StandardKey.Open)
        open_action.triggered.connect(self.open_pdf)
        file_menu.addAction(open_action)
        file_menu.addSeparator()
        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)
        help_menu = menubar.addMenu("&Help")
        about_action = QAction("&About", self, triggered=self.show_about)
        help_menu.addAction(about_action)

    def _create_status_bar(self):
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 0)
        self.progress_bar.setVisible(False)
        self.status_bar.addPermanentWidget(self.progress_bar)
        self.status_bar.showMessage("Ready - Drop a PDF document to view its metadata")

    def _setup_connections(self):
        self.drop_zone.file_selected.connect(self.load_file)
        self.password_dialog.password_submitted.connect(self._on_password_submitted)
        self.password_dialog.cancelled.connect(self._on_password_cancelled)

    def open_pdf(self):
        self.drop_zone.select_file()

    def load_file(self, file_path: str):
        """Start extracting ``file_path``; supersedes any attempt in flight."""
        logging.debug(f"MainWindow.load_file: start extracting {file_path}")
        token = self.extractor.begin()
        self.extractor.mark_reading()
        self.status_bar.showMessage(f"Reading {file_path}...")
        self._start_worker(ExtractionWorker(self.extractor, token, path=file_path))

    @pyqtSlot(str)
    def _on_password_submitted(self, password: str):
        sample = self.extractor.retry.pending_file
        if sample is None:
            self.password_dialog.set_submitting(False)
            return
        logging.debug(f"MainWindow._on_password_submitted: retrying {sample.name}")
        token = self.extractor.begin()
        self.extractor.mark_parsing()
        self.status_bar.showMessage(f"Verifying password for {sample.name}...")
        self._start_worker(
            ExtractionWorker(self.extractor, token, sample=sample, password=password))

    @pyqtSlot()
    def _on_password_cancelled(self):
        # Any attempt still in flight for the pending file is dropped too
        self.extractor.begin()
        self.extractor.cancel_prompt()
        self.status_bar.showMessage("Password entry cancelled")
        self._refresh()

    def _start_worker(self, worker: ExtractionWorker):
        worker.outcome_ready.connect(self._on_outcome_ready)
        worker.finished.connect(lambda: self._workers.discard(worker))
        worker.finished.connect(worker.deleteLater)
        self._workers.add(worker)

        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._on_timeout(worker.token))
        self._timers[worker.token] = timer
        timer.start(Config.EXTRACTION_TIMEOUT_MS)

        self._refresh()
        worker.start()

    def _stop_timer(self, token: int):
        timer = self._timers.pop(token, None)
        if timer is not None:
            timer.stop()
            timer.deleteLater()

    @pyqtSlot(int, object)
    def _on_outcome_ready(self, token: int, outcome: AttemptOutcome):
        self._stop_timer(token)
        if not self.extractor.is_current(token):
            logging.debug(f"MainWindow._on_outcome_ready: ignoring superseded attempt {token}")
            return
        state = self.extractor.apply(token, outcome)
        if state == ExtractionState.DONE:
            self.status_bar.showMessage(f"Loaded metadata: {self.extractor.result.file_name}")
        elif state == ExtractionState.AWAITING_PASSWORD:
            self.status_bar.showMessage("Password required")
        elif state == ExtractionState.FAILED:
            logging.error(f"MainWindow._on_outcome_ready: {self.extractor.error}")
            self.status_bar.showMessage("Failed to extract metadata")
        self._refresh()

    def _on_timeout(self, token: int):
        self._stop_timer(token)
        if self.extractor.time_out(token):
            logging.error(f"MainWindow._on_timeout: attempt {token} timed out")
            self.status_bar.showMessage("Timed out")
            self._refresh()

    def _refresh(self):
        """Render the extractor's observable state."""
        extractor = self.extractor
        busy = extractor.state in (ExtractionState.READING, ExtractionState.PARSING)
        retry = extractor.retry

        # Password retries report progress in the dialog instead
        self.loading_label.setVisible(busy and not retry.prompt_visible)
        self.progress_bar.setVisible(busy)
        self.drop_zone.setEnabled(not retry.prompt_visible)

        self.error_panel.setVisible(extractor.error is not None)
        self.error_label.setText(extractor.error or "")

        self.metadata_panel.show_result(extractor.result)

        if retry.prompt_visible:
            if not busy:
                self.password_dialog.set_submitting(False)
            self.password_dialog.set_error(retry.error)
            if not self.password_dialog.isVisible():
                self.password_dialog.open()
        elif self.password_dialog.isVisible():
            self.password_dialog.reset()
            self.password_dialog.hide()

        if extractor.result is not None:
            self.setWindowTitle(f"{Config.APP_NAME} - {extractor.result.file_name}")
        else:
            self.setWindowTitle(Config.APP_NAME)

    def show_about(self):
        QMessageBox.about(
            self,
            f"About {Config.APP_NAME}",
            f"""
            <h3>{Config.APP_NAME}</h3>
            <p>Version {Config.APP_VERSION}</p>
            <ul>
                <li>Drag-and-drop PDF metadata inspection</li>
                <li>Password prompt for encrypted documents</li>
                <li>Encryption and accessibility status</li>
            </ul>
            """
        )

    def closeEvent(self, event):
        self.extractor.begin()
        for worker in list(self._workers):
            worker.wait(Config.EXTRACTION_TIMEOUT_MS)
        event.accept()
