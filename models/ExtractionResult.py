from dataclasses import dataclass, field
from typing import Dict, Optional

from core.config import Config


@dataclass(frozen=True)
class ExtractionResult:
    """
    Everything displayed for a successfully extracted file.
    """
    file_name: str                 # Base name of the file
    file_size: str                 # Human-readable size, e.g. "1.5 KB"
    file_type: str                 # MIME type, empty when unknown
    is_pdf: bool                   # Whether the header carries %PDF
    pdf_version: Optional[str]     # Version from the header, e.g. "1.7"
    info: Dict[str, str] = field(default_factory=dict)
    # InfoDictionary in display order

    def basic_information(self) -> Dict[str, str]:
        """Rows of the "Basic Information" grid."""
        if self.is_pdf:
            version = f"{self.pdf_version or 'Unknown'} {Config.PDF_VERSION_SUFFIX}"
        else:
            version = Config.NOT_A_PDF
        return {
            "File Name": self.file_name,
            "File Size": self.file_size,
            "File Type": self.file_type,
            "PDF Version": version,
        }
