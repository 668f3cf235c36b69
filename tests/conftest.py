import io

import docx
import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docanalysis.config.settings import Settings


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
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a Word document with two paragraphs and a one-row table."""
    document = docx.Document()
    document.add_paragraph("Service Agreement")
    document.add_paragraph("The parties hereby agree to the terms below.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Fee"
    table.rows[0].cells[1].text = "$500.00"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def sample_png_bytes() -> bytes:
    """Generate a small blank RGBA PNG image."""
    buf = io.BytesIO()
    Image.new("RGBA", (40, 20), (255, 255, 255, 255)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def placeholder_settings() -> Settings:
    """Settings that avoid real PDF/DOCX parsers and the extraction thread."""
    return Settings(
        pdf_engine="placeholder",
        docx_engine="placeholder",
        extraction_timeout_seconds=0,
    )
