"""
Error kinds raised and reported during metadata extraction.
"""

from enum import Enum


class ErrorKind(Enum):
    """Classification of an extraction failure."""

    ENCRYPTED_NEEDS_PASSWORD = "EncryptedNeedsPassword"
    INVALID_PASSWORD = "InvalidPassword"
    PARSE_FAILURE = "ParseFailure"
    READ_FAILURE = "ReadFailure"
    PARSE_TIMEOUT = "ParseTimeout"


_RECOVERABLE = {ErrorKind.ENCRYPTED_NEEDS_PASSWORD, ErrorKind.INVALID_PASSWORD}


class ExtractionError(Exception):
    """A classified extraction failure carrying its user-facing message."""

    def __init__(self, kind: ErrorKind, message: str = ""):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def recoverable(self) -> bool:
        """Whether the failure re-prompts instead of ending the attempt."""
        return self.kind in _RECOVERABLE

    def __repr__(self) -> str:
        return f"ExtractionError({self.kind.value}, {self.message!r})"
