"""
Configuration management for the PDF metadata viewer.
"""

from typing import Dict


class Config:
    """Application configuration settings."""

    # UI Settings
    APP_NAME = "PDF Metadata Viewer"
    APP_VERSION = "1.0.0"
    ORGANIZATION_NAME = "PDF Metadata Viewer"
    DEFAULT_WINDOW_WIDTH = 900
    DEFAULT_WINDOW_HEIGHT = 700
    MIN_WINDOW_WIDTH = 600
    MIN_WINDOW_HEIGHT = 500

    # File input
    PDF_FILE_FILTER = "PDF Files (*.pdf);;All Files (*)"
    DROP_ZONE_TEXT = "Drag and drop your PDF file here"
    DROP_ZONE_HINT = "or click to select a file"

    # Extraction
    EXTRACTION_TIMEOUT_MS = 30000
    # Forwarded to PyMuPDF once at startup
    DISPLAY_LIBRARY_ERRORS = False

    # Messages
    LOADING_MESSAGE = "Extracting metadata..."
    INVALID_PASSWORD_MESSAGE = "Invalid password. Please try again."
    UNKNOWN_ERROR = "Unknown error"

    # InfoDictionary labels
    LAST_MODIFIED_SUFFIX = "(last time the file was saved or moved on your computer)"
    DATE_FIELD_SUFFIXES: Dict[str, str] = {
        "CreationDate": "(when the PDF was first created)",
        "ModDate": "(when the PDF content was last modified)",
    }
    SECURITY_ENCRYPTED = "Encrypted (this PDF has security restrictions)"
    SECURITY_NOT_ENCRYPTED = "Not Encrypted (this PDF has no security restrictions)"
    ACCESSIBILITY_TAGGED = "Tagged PDF (accessible for screen readers)"
    ACCESSIBILITY_NOT_TAGGED = "Not Tagged (limited accessibility support)"
    PDF_VERSION_SUFFIX = "(PDF specification version)"
    NOT_A_PDF = "Not a PDF"

    # UI Colors
    ERROR_TEXT_COLOR = "#B91C1C"
    ERROR_BACKGROUND_COLOR = "#FEF2F2"
    ERROR_BORDER_COLOR = "#FECACA"
    DROP_ZONE_BORDER_COLOR = "#9CA3AF"
    DROP_ZONE_ACTIVE_COLOR = "#3B82F6"
    BACKGROUND_COLOR = "#F3F4F6"

    @classmethod
    def get_timeout_seconds(cls) -> int:
        """Get the extraction timeout in whole seconds."""
        return cls.EXTRACTION_TIMEOUT_MS // 1000

    @classmethod
    def get_date_suffix(cls, key: str) -> str:
        """Get the explanatory suffix for a date field, or an empty string."""
        return cls.DATE_FIELD_SUFFIXES.get(key, "")
