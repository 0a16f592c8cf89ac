"""
Flower composer.

Draws the rings of one flower from the outside in. Rings must be drawn
in order: each ring's radius depends on the previous one, and later
rings are stacked on top of earlier ones.
"""

import logging
import numbers
from dataclasses import replace
from typing import Callable, Iterator

from PIL import Image

from flowergen.core.noise_field import NoiseField
from flowergen.core.params import FlowerParams, generate_params
from flowergen.core.renderer import Ring, render_ring
from flowergen.core.rng import check_seed_range, draw
from flowergen.errors import InvalidSizeError

logger = logging.getLogger(__name__)

# Outer ring radius as a fraction of the image size, before the magnitude correction
BASE_RADIUS_FRACTION = 1 / 3


def validate_size(size) -> int:
    """Return ``size`` as an int, or raise :class:`InvalidSizeError`."""
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise InvalidSizeError(size)
    if size <= 0:
        raise InvalidSizeError(size)
    return int(size)


class FlowerComposer:
    """
    Composes a single flower image from a seed.

    Each composer owns its parameters, noise field and surface, so
    separate composers can run side by side.
    """

    def __init__(self, size: int, seed: int):
        self.size = validate_size(size)
        self.seed = check_seed_range(seed)
        self.params: FlowerParams = generate_params(seed)
        self.noise = NoiseField(seed)

    def initial_ring(self) -> Ring:
        """Outer ring, shrunk so the deformation stays mostly inside the image."""
        centre = self.size / 2
        radius = self.size * BASE_RADIUS_FRACTION
        return Ring(x=centre, y=centre, radius=radius / (self.params.magnitude + 1))

    def ring_seed(self, index: int) -> float:
        """Noise slice for ring ``index``, drawn from its own stream."""
        return draw(self.seed + index * self.params.independence)

    def rings(self) -> Iterator[tuple[Ring, float]]:
        """
        Yield ``(ring, ring_seed)`` for every ring, outermost first.

        Each yielded ring is a snapshot; the radius shrinks by
        ``1 - spacing`` between consecutive rings.
        """
        ring = self.initial_ring()
        retention = 1 - self.params.spacing

        for i in range(self.params.count):
            yield replace(ring), self.ring_seed(i)
            ring.radius *= retention

    def compose(
        self,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> Image.Image:
        """
        Render every ring onto a fresh transparent surface.

        Args:
            progress_callback: Optional callback(current_ring, total_rings).

        Returns:
            ``size x size`` RGBA image.
        """
        surface = Image.new("RGBA", (self.size, self.size), (0, 0, 0, 0))
        total = self.params.count

        for i, (ring, ring_seed) in enumerate(self.rings(), start=1):
            render_ring(surface, ring, self.noise, self.params, ring_seed)
            if progress_callback:
                progress_callback(i, total)

        logger.info("New flower was created with seed:%s and size:%s", self.seed, self.size)
        return surface


def compose_flower(size: int, seed: int) -> Image.Image:
    """Render the flower for ``(size, seed)``."""
    return FlowerComposer(size, seed).compose()
