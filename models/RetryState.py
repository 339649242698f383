from dataclasses import dataclass
from typing import Optional

from models.FileSample import FileSample


@dataclass(frozen=True)
class RetryState:
    """
    Password prompt state. Replaced wholesale on every transition so the
    pending file and the prompt flag always change together.
    """
    pending_file: Optional[FileSample] = None   # File awaiting a correct password
    prompt_visible: bool = False                # Whether the password prompt is shown
    error: Optional[str] = None                 # Message shown inside the prompt
    attempts: int = 0                           # Wrong passwords submitted so far

    @classmethod
    def awaiting(cls, sample: FileSample, error: Optional[str] = None,
                 attempts: int = 0) -> "RetryState":
        """State for a file waiting on a password."""
        return cls(pending_file=sample, prompt_visible=True, error=error, attempts=attempts)

    @property
    def is_empty(self) -> bool:
        return self == RetryState()
