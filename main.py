#!/usr/bin/env python3
"""
PDF Metadata Viewer
Main entry point for the PDF metadata viewer application.
"""

import logging
import sys
import os
# allow imports from project root
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))
from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import Qt, qInstallMessageHandler, QtMsgType, QMessageLogContext
from core.config import Config
from services.PDFMetadataService import PDFMetadataService
from ui.main_window import MainWindow


def excepthook(exc_type, exc_value, exc_traceback):
    logging.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))
    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def qt_message_handler(msg_type: QtMsgType, context: QMessageLogContext, message: str):
    logging.getLogger("qt").error("%s: %s (%s:%s)", msg_type.name, message, context.file, context.line)


def setup_logging():
    """Route application, uncaught and Qt messages through one root logger."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )
    # PyMuPDF is chatty at DEBUG
    logging.getLogger("fitz").setLevel(logging.WARNING)
    sys.excepthook = excepthook
    qInstallMessageHandler(qt_message_handler)


def main():
    """Initialize and run the PDF metadata viewer."""
    setup_logging()
    logging.debug("main: Starting application initialization")
    QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.PassThrough)

    app = QApplication(sys.argv)
    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    app.setOrganizationName(Config.ORGANIZATION_NAME)

    # Set application style
    app.setStyle('Fusion')

    # PyMuPDF's process-wide settings are applied exactly once, here
    service = PDFMetadataService(display_errors=Config.DISPLAY_LIBRARY_ERRORS)

    window = MainWindow(service)
    window.show()

    # A path on the command line is loaded straight away
    if len(sys.argv) > 1:
        window.load_file(sys.argv[1])

    # Start event loop
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
