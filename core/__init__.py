"""
Core modules for the PDF Metadata Viewer.
"""

from .config import Config
from .errors import ErrorKind, ExtractionError
from .formatting import format_pdf_date, format_size

__all__ = [
    'Config',
    'ErrorKind',
    'ExtractionError',
    'format_pdf_date',
    'format_size'
]
