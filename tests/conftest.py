import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from lockbox.files.models import UploadedFile

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a three-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.showPage()
    c.drawString(72, 720, "Page three content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """PNG signature followed by filler; enough for signature checks."""
    return PNG_SIGNATURE + b"\x00" * 64


@pytest.fixture()
def csv_bytes() -> bytes:
    return b"name,score\nalice,10\nbob,7\n"


@pytest.fixture()
def pdf_upload(sample_pdf_bytes: bytes) -> UploadedFile:
    return UploadedFile(
        content=sample_pdf_bytes,
        filename="report.pdf",
        mime_type="application/pdf",
    )


@pytest.fixture()
def csv_upload(csv_bytes: bytes) -> UploadedFile:
    return UploadedFile(content=csv_bytes, filename="scores.csv", mime_type="text/csv")
