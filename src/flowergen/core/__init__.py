"""Core flower synthesis modules."""

from flowergen.core.composer import FlowerComposer, compose_flower
from flowergen.core.noise_field import NoiseField
from flowergen.core.params import FlowerParams, generate_params

__all__ = [
    "FlowerComposer",
    "FlowerParams",
    "NoiseField",
    "compose_flower",
    "generate_params",
]
