"""
Ring renderer.

Turns one ring into a noise-deformed closed polygon and paints it onto
the surface: fill first, stroke on top, blended over whatever the
earlier rings left behind.
"""

import math
from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageDraw

from flowergen.core.noise_field import NoiseField
from flowergen.core.params import FlowerParams

STROKE_WIDTH = 1


@dataclass
class Ring:
    """Centre and current radius of the ring being drawn."""

    x: float
    y: float
    radius: float


def sample_count(radius: float) -> int:
    """Number of outline vertices; grows with the radius, 10 at radius 0."""
    return int(math.floor(4 * radius + 10))


def ring_polygon(
    ring: Ring,
    noise: NoiseField,
    params: FlowerParams,
    ring_seed: float,
) -> np.ndarray:
    """
    Compute the deformed outline of a ring.

    Each vertex sits on the ray at ``angle`` from the centre, pushed out by
    ``radius * (1 + magnitude * (noise + 1))``. The ``+ 1`` biases the
    deformation outwards.

    Args:
        ring: Ring centre and radius.
        noise: Flower noise field.
        params: Flower parameters (frequency and magnitude are used).
        ring_seed: Noise slice for this ring.

    Returns:
        (samples, 2) float64 array of (x, y) vertices in drawing order.
    """
    samples = sample_count(ring.radius)
    angles = 2 * np.pi * np.arange(samples) / samples

    ux = np.cos(angles)
    uy = np.sin(angles)

    deformation = noise.sample_ring(ux * params.frequency, uy * params.frequency, ring_seed) + 1
    radii = ring.radius * (1 + params.magnitude * deformation)

    return np.column_stack((ring.x + radii * ux, ring.y + radii * uy))


def render_ring(
    surface: Image.Image,
    ring: Ring,
    noise: NoiseField,
    params: FlowerParams,
    ring_seed: float,
) -> None:
    """
    Paint one filled and stroked ring onto ``surface`` in place.

    The ring is drawn into a transparent layer and alpha-composited, so a
    translucent fill blends with the rings underneath.

    Args:
        surface: RGBA image owned by the composer.
        ring: Ring centre and radius.
        noise: Flower noise field.
        params: Flower parameters.
        ring_seed: Noise slice for this ring.
    """
    points = ring_polygon(ring, noise, params, ring_seed)

    layer = Image.new("RGBA", surface.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)
    draw.polygon(
        [tuple(p) for p in points.tolist()],
        fill=params.fill_color.rgba,
        outline=params.stroke_color.rgba,
        width=STROKE_WIDTH,
    )

    surface.alpha_composite(layer)
