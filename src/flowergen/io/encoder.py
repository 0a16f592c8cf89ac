"""
PNG encoder for finished flowers.

Encodes with fixed settings and no metadata chunks, so the same surface
always yields the same bytes.
"""

import base64
import binascii
import io

from PIL import Image

from flowergen.errors import EncodingError

DATA_URL_PREFIX = "data:image/png;base64,"

# Fixed zlib level; changing it changes every encoded byte stream
PNG_COMPRESS_LEVEL = 6


def encode_png(image: Image.Image) -> bytes:
    """
    Serialize an image to PNG bytes.

    Args:
        image: Rendered surface (RGBA).

    Returns:
        PNG byte stream.

    Raises:
        EncodingError: If Pillow fails to encode the surface.
    """
    buffer = io.BytesIO()
    try:
        image.save(buffer, format="PNG", optimize=False, compress_level=PNG_COMPRESS_LEVEL)
    except (OSError, ValueError, KeyError) as exc:
        raise EncodingError(
            f"Failed to encode {image.mode} image of size {image.size} as PNG: {exc}"
        ) from exc
    return buffer.getvalue()


def to_data_url(png_bytes: bytes) -> str:
    """Wrap PNG bytes as a base64 ``data:`` URL."""
    return DATA_URL_PREFIX + base64.b64encode(png_bytes).decode("ascii")


def decode_data_url(data_url: str) -> bytes:
    """Inverse of :func:`to_data_url`."""
    if not data_url.startswith(DATA_URL_PREFIX):
        raise EncodingError(f"Not a PNG data URL: {data_url[:40]!r}")
    try:
        return base64.b64decode(data_url[len(DATA_URL_PREFIX):], validate=True)
    except binascii.Error as exc:
        raise EncodingError(f"Malformed base64 payload in data URL: {exc}") from exc
