import sys
import os
# Ensure project root is on sys.path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir)))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import fitz
import pytest

from models.DocumentMetadata import DocumentMetadata
from models.FileSample import FileSample
from services.PDFMetadataService import DocumentLoadError, PasswordError

CREATION_DATE = "D:20230115103000-05'00'"
MOD_DATE = "D:20240220080910Z"


class FakeService:
    """Stands in for PDFMetadataService with scripted answers."""

    def __init__(self, page_count=3, info=None, password=None, load_error=None):
        self.page_count = page_count
        self.info = info if info is not None else {"Title": "Report", "CreationDate": CREATION_DATE}
        self.password = password
        self.load_error = load_error
        self.calls = []

    def load_document(self, data, password=None):
        self.calls.append(password)
        if self.load_error is not None:
            raise DocumentLoadError(self.load_error)
        if self.password is not None and password != self.password:
            raise PasswordError("Incorrect password" if password else "No password given")
        return DocumentMetadata(page_count=self.page_count, info=dict(self.info))


def make_sample(data=b"%PDF-1.7\n1 0 obj << >> endobj\n%%EOF", name="report.pdf"):
    return FileSample(
        name=name,
        size=len(data),
        mime_type="application/pdf",
        last_modified=1700000000.0,
        data=data,
    )


@pytest.fixture
def make_pdf(tmp_path):
    """Write a small PDF built with PyMuPDF and return its path."""
    def _make(name="sample.pdf", pages=1, metadata=None, user_pw=None, tagged=False):
        doc = fitz.open()
        for _ in range(pages):
            doc.new_page()
        if metadata:
            doc.set_metadata(metadata)
        if tagged:
            doc.xref_set_key(doc.pdf_catalog(), "MarkInfo", "<</Marked true>>")
        path = tmp_path / name
        if user_pw:
            doc.save(
                str(path),
                encryption=fitz.PDF_ENCRYPT_AES_256,
                user_pw=user_pw,
                owner_pw=user_pw + "-owner",
            )
        else:
            doc.save(str(path))
        doc.close()
        return path
    return _make


@pytest.fixture
def fake_service():
    return FakeService()


@pytest.fixture
def service_factory():
    return FakeService


@pytest.fixture
def sample_factory():
    return make_sample
