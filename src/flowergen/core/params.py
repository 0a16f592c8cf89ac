"""
Parameter generation for one flower.

All fields come from a single seeded stream, so the order of the draws
is part of the output: ``PARAMETER_DRAWS`` lists it explicitly and
``generate_params`` walks that list front to back.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from flowergen.core.palette import Color, random_color
from flowergen.core.rng import make_rng

logger = logging.getLogger(__name__)

MAX_FREQUENCY = 10.0
MAX_SPACING = 0.5
MAX_RINGS = 200


@dataclass(frozen=True)
class FlowerParams:
    """Geometry and colour settings for one flower."""

    frequency: float  # [0, 10], 2 decimals
    magnitude: float  # [0, 1], 3 decimals
    independence: float  # [0, 1], 3 decimals
    spacing: float  # [0, 0.5], 4 decimals
    count: int  # [1, 200]
    stroke_color: Color
    fill_color: Color

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready record of the parameters."""
        return {
            "frequency": self.frequency,
            "magnitude": self.magnitude,
            "independence": self.independence,
            "spacing": self.spacing,
            "count": self.count,
            "stroke_color": self.stroke_color.css(),
            "fill_color": self.fill_color.css(),
        }


def _draw_frequency(rng: np.random.Generator, drawn: dict[str, Any]) -> float:
    return round(float(rng.random()) * MAX_FREQUENCY, 2)


def _draw_magnitude(rng: np.random.Generator, drawn: dict[str, Any]) -> float:
    return round(float(rng.random()), 3)


def _draw_independence(rng: np.random.Generator, drawn: dict[str, Any]) -> float:
    return round(float(rng.random()), 3)


def _draw_spacing(rng: np.random.Generator, drawn: dict[str, Any]) -> float:
    return round(float(rng.random()) * MAX_SPACING, 4)


def _draw_count(rng: np.random.Generator, drawn: dict[str, Any]) -> int:
    count = int(math.floor(float(rng.random()) * MAX_RINGS + 1))
    return min(max(count, 1), MAX_RINGS)


def _draw_stroke_color(rng: np.random.Generator, drawn: dict[str, Any]) -> Color:
    return random_color(rng)


def _draw_fill_alpha(rng: np.random.Generator, drawn: dict[str, Any]) -> float:
    return round(float(rng.random()), 2)


def _draw_fill_color(rng: np.random.Generator, drawn: dict[str, Any]) -> Color:
    return random_color(rng, alpha=drawn["fill_alpha"])


# Ordered draw steps: (name, step). Reordering changes every later value.
PARAMETER_DRAWS: list[tuple[str, Callable[[np.random.Generator, dict[str, Any]], Any]]] = [
    ("frequency", _draw_frequency),
    ("magnitude", _draw_magnitude),
    ("independence", _draw_independence),
    ("spacing", _draw_spacing),
    ("count", _draw_count),
    ("stroke_color", _draw_stroke_color),
    # The alpha is an argument to the fill colour pick, so it is drawn first
    ("fill_alpha", _draw_fill_alpha),
    ("fill_color", _draw_fill_color),
]


def generate_params(seed) -> FlowerParams:
    """
    Generate the parameter record for a flower.

    Args:
        seed: Flower seed. A fresh stream is created for it, so calls
            are independent of each other and of any global state.

    Returns:
        Immutable :class:`FlowerParams`.
    """
    rng = make_rng(seed)

    drawn: dict[str, Any] = {}
    for name, step in PARAMETER_DRAWS:
        drawn[name] = step(rng, drawn)

    params = FlowerParams(
        frequency=drawn["frequency"],
        magnitude=drawn["magnitude"],
        independence=drawn["independence"],
        spacing=drawn["spacing"],
        count=drawn["count"],
        stroke_color=drawn["stroke_color"],
        fill_color=drawn["fill_color"],
    )
    logger.debug("Params for seed %s: %s", seed, params.to_dict())
    return params
