"""
Background thread running a single extraction attempt.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QThread, pyqtSignal

from core.config import Config
from core.errors import ErrorKind, ExtractionError
from core.metadata_extractor import AttemptOutcome, MetadataExtractor
from models.FileSample import FileSample


class ExtractionWorker(QThread):
    """Runs one attempt off the GUI thread and reports it with its token."""
    outcome_ready = pyqtSignal(int, object)  # token, AttemptOutcome

    def __init__(self, extractor: MetadataExtractor, token: int,
                 path: Optional[str] = None,
                 sample: Optional[FileSample] = None,
                 password: Optional[str] = None,
                 parent=None):
        super().__init__(parent)
        if (path is None) == (sample is None):
            raise ValueError("ExtractionWorker needs exactly one of path or sample")
        self.extractor = extractor
        self.token = token
        self.path = path
        self.sample = sample
        self._password = password

    def run(self) -> None:
        try:
            if self.path is not None:
                outcome = self.extractor.run_file(self.path)
            else:
                outcome = self.extractor.run(self.sample, self._password)
        except Exception as e:
            # Exceptions escaping QThread.run abort the process under PyQt6
            logging.exception("ExtractionWorker.run: attempt %d crashed", self.token)
            outcome = AttemptOutcome(
                sample=self.sample,
                error=ExtractionError(
                    ErrorKind.PARSE_FAILURE,
                    f"Error processing PDF: {str(e) or Config.UNKNOWN_ERROR}",
                ),
            )
        finally:
            self._password = None
        self.outcome_ready.emit(self.token, outcome)
