import logging
from typing import Dict, Optional

import fitz
from PyQt6.QtCore import QMutex, QMutexLocker

from models.DocumentMetadata import DocumentMetadata

logger = logging.getLogger(__name__)

# PyMuPDF metadata keys -> PDF /Info dictionary names
INFO_KEYS: Dict[str, str] = {
    "title": "Title",
    "author": "Author",
    "subject": "Subject",
    "keywords": "Keywords",
    "creator": "Creator",
    "producer": "Producer",
    "creationDate": "CreationDate",
    "modDate": "ModDate",
    "trapped": "Trapped",
    "format": "PDFFormatVersion",
    "encryption": "Encryption",
}


class PasswordError(Exception):
    """The document needs a password, or the supplied one was rejected."""


class DocumentLoadError(Exception):
    """PyMuPDF could not open the document."""


class PDFMetadataService:
    """Service delegating document loading and metadata reads to PyMuPDF."""

    # MuPDF is not thread-safe; every call into it goes through this lock
    _mutex = QMutex()

    def __init__(self, display_errors: bool = False):
        """
        Apply PyMuPDF's process-wide settings. Construct once per process
        and share the instance.
        """
        self.display_errors = display_errors
        fitz.TOOLS.mupdf_display_errors(display_errors)
        logger.debug(
            "PDFMetadataService.__init__: PyMuPDF %s, display_errors=%s",
            fitz.VersionBind, display_errors,
        )

    def load_document(self, data: bytes, password: Optional[str] = None) -> DocumentMetadata:
        """
        Open a PDF from memory and read its page count and /Info fields.

        Raises:
            PasswordError: the document is encrypted and ``password`` is
                missing or wrong.
            DocumentLoadError: the bytes could not be opened as a PDF.
        """
        with QMutexLocker(self._mutex):
            try:
                document = fitz.open(stream=data, filetype="pdf")
            except Exception as e:
                logger.debug("PDFMetadataService.load_document: open failed: %s", e)
                raise DocumentLoadError(str(e)) from e

            with document:
                if document.needs_pass:
                    if not password:
                        raise PasswordError("No password given")
                    if not document.authenticate(password):
                        raise PasswordError("Incorrect password")
                try:
                    page_count = document.page_count
                    info = self._read_info(document.metadata or {})
                except Exception as e:
                    raise DocumentLoadError(str(e)) from e

        logger.debug(
            "PDFMetadataService.load_document: %d pages, %d info fields",
            page_count, len(info),
        )
        return DocumentMetadata(page_count=page_count, info=info)

    @staticmethod
    def _read_info(metadata: Dict[str, Optional[str]]) -> Dict[str, str]:
        """Rename PyMuPDF metadata to /Info names, dropping empty values."""
        info: Dict[str, str] = {}
        for key, value in metadata.items():
            if not isinstance(value, str) or not value:
                continue
            name = INFO_KEYS.get(key, key)
            if name == "PDFFormatVersion":
                value = value.replace("PDF", "").strip()
            info[name] = value
        return info
