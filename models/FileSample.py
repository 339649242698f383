from dataclasses import dataclass, field
import mimetypes
import os


@dataclass(frozen=True)
class FileSample:
    """
    Raw bytes of a user-selected file plus its file-system attributes.
    """
    name: str              # Base name of the file
    size: int              # Size in bytes
    mime_type: str         # Guessed MIME type, empty when unknown
    last_modified: float   # POSIX timestamp of the last modification
    data: bytes = field(repr=False)

    @classmethod
    def from_path(cls, path: str) -> "FileSample":
        """Read a file fully into memory. Raises OSError on failure."""
        with open(path, "rb") as handle:
            data = handle.read()
        stat = os.stat(path)
        mime_type, _ = mimetypes.guess_type(path)
        return cls(
            name=os.path.basename(path),
            size=len(data),
            mime_type=mime_type or "",
            last_modified=stat.st_mtime,
            data=data,
        )
