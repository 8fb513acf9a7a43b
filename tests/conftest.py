import io

import pytest
from PIL import Image, ImageDraw, ImageFont
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def two_line_pdf_bytes() -> bytes:
    """Generate a single-page PDF with text on two baselines."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "First line")
    c.drawString(72, 700, "Second line")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def rotated_pdf_bytes() -> bytes:
    """Generate a page with one word drawn rotated by 90 degrees."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.translate(300, 300)
    c.rotate(90)
    c.drawString(0, 0, "Hello")
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
def blank_png_bytes() -> bytes:
    """A plain white PNG with nothing to recognize."""
    buf = io.BytesIO()
    Image.new("RGB", (200, 60), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def text_png_bytes() -> bytes:
    """A PNG with large black text on white, readable by Tesseract."""
    image = Image.new("RGB", (900, 200), "white")
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default(size=72)
    draw.text((40, 50), "HELLO WORLD", fill="black", font=font)
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
