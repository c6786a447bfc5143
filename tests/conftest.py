import io

import pytest
from PIL import Image, ImageDraw


@pytest.fixture()
def sample_png_bytes() -> bytes:
    """Generate a small PNG with a line of dark text-like marks."""
    image = Image.new("RGB", (200, 60), "white")
    draw = ImageDraw.Draw(image)
    draw.text((10, 20), "SMITH, JOHN", fill="black")
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def blank_jpeg_bytes() -> bytes:
    """Generate a blank JPEG with no content."""
    buf = io.BytesIO()
    Image.new("RGB", (32, 32), "white").save(buf, format="JPEG")
    return buf.getvalue()
