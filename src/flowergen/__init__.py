"""Deterministic procedural flower image generator."""

from flowergen.core.composer import FlowerComposer, compose_flower
from flowergen.core.params import FlowerParams, generate_params
from flowergen.errors import (
    EncodingError,
    FlowerError,
    InvalidSeedError,
    InvalidSizeError,
    SettingsError,
)
from flowergen.pipeline import generate_flower_data_url, generate_flower_image

__version__ = "0.1.0"
__all__ = [
    "EncodingError",
    "FlowerComposer",
    "FlowerError",
    "FlowerParams",
    "InvalidSeedError",
    "InvalidSizeError",
    "SettingsError",
    "compose_flower",
    "generate_flower_data_url",
    "generate_flower_image",
    "generate_params",
]
