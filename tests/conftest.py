import io

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _image_bytes(fmt: str, mode: str = "RGB", size: tuple[int, int] = (64, 48)) -> bytes:
    color = (200, 30, 30, 128) if mode == "RGBA" else (200, 30, 30)
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page lab report PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Total cholesterol: 242 mg/dL")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """Semi-transparent 64x48 PNG."""
    return _image_bytes("PNG", mode="RGBA")


@pytest.fixture()
def jpeg_bytes() -> bytes:
    return _image_bytes("JPEG")


@pytest.fixture()
def webp_bytes() -> bytes:
    return _image_bytes("WEBP")


@pytest.fixture()
def audio_bytes() -> bytes:
    """Opaque bytes standing in for an MP3 frame stream."""
    return b"ID3\x04\x00\x00\x00\x00\x00\x00" + bytes(range(256))
