"""
Byte-level probes classifying a file before it is handed to PyMuPDF.

These scan raw bytes for marker strings rather than walking the object
graph, so they are best-effort: a literal ``/Encrypt`` inside an
uncompressed content stream reads as encrypted, and markers hidden in
compressed object streams are missed.
"""

import re
from typing import Optional, Tuple

ENCRYPT_MARKER = "/Encrypt"
MARK_INFO_MARKER = "/MarkInfo"
HEADER_MARKER = "%PDF"
HEADER_LENGTH = 8
VERSION_PATTERN = re.compile(r"%PDF-(\d+\.\d+)")


def decode_for_probe(data: bytes) -> str:
    """Decode bytes for substring probing; undecodable bytes are replaced."""
    return data.decode("utf-8", errors="replace")


def is_encrypted(text: str) -> bool:
    """True if the file text mentions an /Encrypt dictionary."""
    return ENCRYPT_MARKER in text


def is_tagged(text: str) -> bool:
    """True if the file text mentions a /MarkInfo dictionary."""
    return MARK_INFO_MARKER in text


def detect_pdf_header(data: bytes) -> Tuple[bool, Optional[str]]:
    """Return ``(is_pdf, version)`` from the first bytes of the file."""
    header = decode_for_probe(data[:HEADER_LENGTH])
    is_pdf = HEADER_MARKER in header
    if not is_pdf:
        return False, None
    match = VERSION_PATTERN.search(header)
    return True, match.group(1) if match else None
