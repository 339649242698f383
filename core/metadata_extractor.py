"""
Metadata extraction orchestrator.

Sequences byte probing, the PyMuPDF load and the password retry loop, and
holds the observable state the UI renders. An attempt is split in two:
``run``/``run_file`` do the slow work and touch no shared state, so they
may execute on a worker thread; ``apply`` folds a finished attempt back
into the observable state and must run on the owning (GUI) thread.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from core.config import Config
from core.errors import ErrorKind, ExtractionError
from core.formatting import format_pdf_date, format_size, format_timestamp
from core.probe import decode_for_probe, detect_pdf_header, is_encrypted, is_tagged
from models.ExtractionResult import ExtractionResult
from models.FileSample import FileSample
from models.RetryState import RetryState
from services.PDFMetadataService import DocumentLoadError, PDFMetadataService, PasswordError

logger = logging.getLogger(__name__)


class ExtractionState(Enum):
    IDLE = "idle"
    READING = "reading"
    AWAITING_PASSWORD = "awaiting_password"
    PARSING = "parsing"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class AttemptOutcome:
    """What a single extraction attempt produced."""
    sample: Optional[FileSample]
    result: Optional[ExtractionResult] = None
    error: Optional[ExtractionError] = None


class MetadataExtractor:
    """Extracts display metadata from files and tracks the password prompt."""

    def __init__(self, service: PDFMetadataService):
        self.service = service
        self.state = ExtractionState.IDLE
        self.result: Optional[ExtractionResult] = None
        self.error: Optional[str] = None
        self.retry = RetryState()
        self._token = 0

    # Attempt bookkeeping

    def begin(self) -> int:
        """Start a new attempt; outcomes of earlier attempts become stale."""
        self._token += 1
        logger.debug("MetadataExtractor.begin: attempt %d", self._token)
        return self._token

    def is_current(self, token: int) -> bool:
        return token == self._token

    def mark_reading(self) -> None:
        """A new file is being read; it replaces any result or pending file."""
        self.state = ExtractionState.READING
        self.result = None
        self.error = None
        self.retry = RetryState()

    def mark_parsing(self) -> None:
        self.state = ExtractionState.PARSING
        self.result = None
        self.error = None

    # Stateless work

    def read(self, path: str) -> FileSample:
        """Read a file into a FileSample, raising a ReadFailure on I/O errors."""
        try:
            return FileSample.from_path(path)
        except OSError as e:
            raise ExtractionError(
                ErrorKind.READ_FAILURE,
                f"Error processing file: {e.strerror or e}",
            ) from e

    def run_file(self, path: str) -> AttemptOutcome:
        """Read ``path`` and extract it without a password."""
        try:
            sample = self.read(path)
        except ExtractionError as e:
            logger.error("MetadataExtractor.run_file: %s", e.message)
            return AttemptOutcome(sample=None, error=e)
        return self.run(sample)

    def run(self, sample: FileSample, password: Optional[str] = None) -> AttemptOutcome:
        """Probe ``sample`` and load it through the PDF library."""
        text = decode_for_probe(sample.data)
        encrypted = is_encrypted(text)

        if encrypted and not password:
            logger.debug("MetadataExtractor.run: %s looks encrypted, need password", sample.name)
            return AttemptOutcome(
                sample=sample,
                error=ExtractionError(ErrorKind.ENCRYPTED_NEEDS_PASSWORD),
            )

        try:
            document = self.service.load_document(sample.data, password or None)
        except PasswordError:
            if password:
                logger.info("MetadataExtractor.run: password rejected for %s", sample.name)
                return AttemptOutcome(
                    sample=sample,
                    error=ExtractionError(ErrorKind.INVALID_PASSWORD, Config.INVALID_PASSWORD_MESSAGE),
                )
            logger.debug("MetadataExtractor.run: library asked for a password for %s", sample.name)
            return AttemptOutcome(
                sample=sample,
                error=ExtractionError(ErrorKind.ENCRYPTED_NEEDS_PASSWORD),
            )
        except DocumentLoadError as e:
            message = f"Error processing PDF: {str(e) or Config.UNKNOWN_ERROR}"
            logger.error("MetadataExtractor.run: %s: %s", sample.name, message)
            return AttemptOutcome(
                sample=sample,
                error=ExtractionError(ErrorKind.PARSE_FAILURE, message),
            )

        is_pdf, version = detect_pdf_header(sample.data)
        info: Dict[str, str] = {
            "Last Modified": f"{format_timestamp(sample.last_modified)} {Config.LAST_MODIFIED_SUFFIX}",
        }
        for key, value in document.info.items():
            suffix = Config.get_date_suffix(key)
            info[key] = f"{format_pdf_date(value)} {suffix}" if suffix else value
        info["Page Count"] = f"{document.page_count} pages"
        info["Security Status"] = (
            Config.SECURITY_ENCRYPTED if encrypted else Config.SECURITY_NOT_ENCRYPTED
        )
        info["Accessibility"] = (
            Config.ACCESSIBILITY_TAGGED if is_tagged(text) else Config.ACCESSIBILITY_NOT_TAGGED
        )

        result = ExtractionResult(
            file_name=sample.name,
            file_size=format_size(sample.size),
            file_type=sample.mime_type,
            is_pdf=is_pdf,
            pdf_version=version,
            info=info,
        )
        return AttemptOutcome(sample=sample, result=result)

    # State transitions

    def apply(self, token: int, outcome: AttemptOutcome) -> ExtractionState:
        """Fold a finished attempt into the observable state if still current."""
        if not self.is_current(token):
            logger.debug("MetadataExtractor.apply: discarding stale attempt %d", token)
            return self.state

        error = outcome.error
        if error is None:
            self.result = outcome.result
            self.error = None
            self.retry = RetryState()
            self.state = ExtractionState.DONE
        elif error.recoverable:
            # Only a rejected password counts as a spent attempt
            rejected = error.kind == ErrorKind.INVALID_PASSWORD
            self.result = None
            self.error = None
            self.retry = RetryState.awaiting(
                outcome.sample,
                error=error.message if rejected else None,
                attempts=self.retry.attempts + 1 if rejected else self.retry.attempts,
            )
            self.state = ExtractionState.AWAITING_PASSWORD
        else:
            self._fail(error)

        logger.debug("MetadataExtractor.apply: attempt %d -> %s", token, self.state.value)
        return self.state

    def load(self, path: str) -> ExtractionState:
        """Read and extract a file synchronously."""
        token = self.begin()
        self.mark_reading()
        return self.apply(token, self.run_file(path))

    def extract(self, sample: FileSample, password: Optional[str] = None) -> ExtractionState:
        """Extract an already-read file synchronously."""
        token = self.begin()
        self.mark_parsing()
        return self.apply(token, self.run(sample, password))

    def cancel_prompt(self) -> None:
        """Discard the pending file and every piece of prompt state."""
        logger.debug("MetadataExtractor.cancel_prompt: clearing retry state")
        self.retry = RetryState()
        if self.state == ExtractionState.AWAITING_PASSWORD:
            self.state = ExtractionState.IDLE

    def time_out(self, token: int) -> bool:
        """Fail attempt ``token`` with a timeout if it is still running."""
        if not self.is_current(token) or self.state not in (
            ExtractionState.READING, ExtractionState.PARSING
        ):
            return False
        self.begin()
        self._fail(ExtractionError(
            ErrorKind.PARSE_TIMEOUT,
            f"Timed out processing PDF after {Config.get_timeout_seconds()} seconds",
        ))
        return True

    def _fail(self, error: ExtractionError) -> None:
        self.result = None
        self.error = error.message
        self.retry = RetryState()
        self.state = ExtractionState.FAILED
