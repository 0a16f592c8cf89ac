"""
Public generation API.

Seed in, PNG bytes out. No file system, network or UI access happens
here; storing the image is up to the caller.
"""

from flowergen.core.composer import FlowerComposer, validate_size
from flowergen.io.encoder import encode_png, to_data_url
from flowergen.seeds import parse_seed


def generate_flower_image(size: int, seed) -> bytes:
    """
    Generate a flower as PNG bytes.

    Args:
        size: Width and height in pixels, > 0.
        seed: Integer seed or numeric string.

    Returns:
        PNG byte stream of a ``size x size`` RGBA image.

    Raises:
        InvalidSizeError: ``size`` is not a positive integer.
        InvalidSeedError: ``seed`` is not an integer, or its magnitude exceeds 2**53.
        EncodingError: PNG encoding failed.
    """
    size = validate_size(size)
    seed = parse_seed(seed)

    surface = FlowerComposer(size, seed).compose()
    return encode_png(surface)


def generate_flower_data_url(size: int, seed) -> str:
    """Generate a flower as a ``data:image/png;base64,...`` URL."""
    return to_data_url(generate_flower_image(size, seed))
