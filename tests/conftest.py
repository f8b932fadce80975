import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _render_pdf(pages: list[list[str]]) -> bytes:
    """Render each page's lines top-down with reportlab."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        for offset, line in enumerate(lines):
            c.drawString(72, 720 - offset * 18, line)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single-page lab printout."""
    return _render_pdf([["Blood Panel", "Glucose: 110 mg/dL", "Cholesterol: 180 mg/dL"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return _render_pdf([["Hemoglobin: 14.2 g/dL"], ["Sodium 150 mmol/L (135-145)"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """A valid PDF with one blank page."""
    return _render_pdf([[]])
