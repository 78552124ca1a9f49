"""
Image downscaling used by the bulk photo import.
"""

import base64
import io

from PIL import Image

from app.utils.images import compress_image, to_data_url


def _png(width: int, height: int) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGBA", (width, height), (200, 30, 30, 255)).save(buffer, format="PNG")
    return buffer.getvalue()


def test_large_image_fits_bounds_keeping_ratio():
    out = Image.open(io.BytesIO(compress_image(_png(2400, 1200))))
    assert out.format == "JPEG"
    assert out.size == (1200, 600)


def test_tall_image_limited_by_height():
    out = Image.open(io.BytesIO(compress_image(_png(600, 2400))))
    assert out.size == (300, 1200)


def test_small_image_not_upscaled():
    out = Image.open(io.BytesIO(compress_image(_png(320, 200))))
    assert out.size == (320, 200)


def test_data_url_round_trip():
    jpeg = compress_image(_png(10, 10))
    url = to_data_url(jpeg)
    assert url.startswith("data:image/jpeg;base64,")
    assert base64.b64decode(url.split(",", 1)[1]) == jpeg
