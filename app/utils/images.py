"""
Image downscaling before upload: photos travel and are stored as base64 data URLs,
so they are shrunk to fit MAX_WIDTH x MAX_HEIGHT and re-encoded as JPEG first.
"""

import base64
import io

from PIL import Image

MAX_WIDTH = 1200
MAX_HEIGHT = 1200
QUALITY = 80


def compress_image(data: bytes, max_width: int = MAX_WIDTH, max_height: int = MAX_HEIGHT, quality: int = QUALITY) -> bytes:
    """Resize keeping the aspect ratio (never upscaling) and encode as JPEG."""
    img = Image.open(io.BytesIO(data))
    img = img.convert("RGB")

    w, h = img.size
    if w > max_width:
        h = int(h * max_width / w)
        w = max_width
    if h > max_height:
        w = int(w * max_height / h)
        h = max_height
    if (w, h) != img.size:
        img = img.resize((max(w, 1), max(h, 1)), Image.LANCZOS)

    buffer = io.BytesIO()
    img.save(buffer, format="JPEG", quality=quality, optimize=True)
    return buffer.getvalue()


def to_data_url(jpeg: bytes) -> str:
    return "data:image/jpeg;base64," + base64.b64encode(jpeg).decode("ascii")
