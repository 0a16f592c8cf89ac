"""
Seeded random colour picker.

Picks visually distinct colours: a hue is drawn first, then a saturation
and a brightness constrained by the hue band the colour falls into, so
muddy dark or washed-out combinations are avoided. All draws come from
the caller's stream, three per colour, in the order hue, saturation,
brightness.
"""

import colorsys
import math
from dataclasses import dataclass

import numpy as np


# name -> (hue range in degrees, brightness lower bounds as (saturation, min brightness))
HUE_BANDS: dict[str, tuple[tuple[int, int], list[tuple[int, int]]]] = {
    "red": ((-26, 18), [
        (20, 100), (30, 92), (40, 89), (50, 85), (60, 78),
        (70, 70), (80, 60), (90, 55), (100, 50),
    ]),
    "orange": ((18, 46), [
        (20, 100), (30, 93), (40, 88), (50, 86), (60, 85), (70, 70), (100, 70),
    ]),
    "yellow": ((46, 62), [
        (25, 100), (40, 85), (50, 81), (60, 74), (70, 66), (80, 58), (90, 52), (100, 50),
    ]),
    "green": ((62, 178), [
        (30, 100), (40, 90), (50, 85), (60, 81), (70, 74), (80, 64), (90, 50), (100, 40),
    ]),
    "blue": ((178, 257), [
        (20, 100), (30, 86), (40, 80), (50, 74), (60, 60), (70, 52), (80, 44), (90, 39), (100, 35),
    ]),
    "purple": ((257, 282), [
        (20, 100), (30, 87), (40, 79), (50, 70), (60, 65), (70, 59), (80, 52), (90, 48), (100, 42),
    ]),
    "pink": ((282, 334), [
        (20, 100), (30, 90), (40, 86), (60, 84), (80, 80), (90, 75), (100, 73),
    ]),
}


@dataclass(frozen=True)
class Color:
    """8-bit RGB colour with a float alpha in [0, 1]."""

    r: int
    g: int
    b: int
    alpha: float = 1.0

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        """Pillow fill tuple."""
        return (self.r, self.g, self.b, int(round(self.alpha * 255)))

    def css(self) -> str:
        if self.alpha >= 1.0:
            return f"rgb({self.r}, {self.g}, {self.b})"
        return f"rgba({self.r}, {self.g}, {self.b}, {self.alpha:g})"


def _random_within(rng: np.random.Generator, low: float, high: int) -> int:
    """Integer drawn from [low, high]; a fractional low bound is floored only after scaling."""
    return int(math.floor(low + rng.random() * (high + 1 - low)))


def hue_band(hue: int) -> str:
    """Name of the band containing ``hue`` (degrees, 0-360)."""
    if 334 <= hue <= 360:
        hue -= 360
    for name, ((low, high), _) in HUE_BANDS.items():
        if low <= hue <= high:
            return name
    raise ValueError(f"Hue {hue} is outside [0, 360]")


def minimum_brightness(hue: int, saturation: int) -> float:
    """Lowest brightness allowed for a hue at the given saturation."""
    bounds = HUE_BANDS[hue_band(hue)][1]
    for (s1, v1), (s2, v2) in zip(bounds, bounds[1:]):
        if s1 <= saturation <= s2:
            slope = (v2 - v1) / (s2 - s1)
            return slope * saturation + (v1 - slope * s1)
    return 0.0


def hsv_to_color(hue: int, saturation: int, brightness: int, alpha: float = 1.0) -> Color:
    """Convert degrees/percent HSV into an 8-bit :class:`Color`."""
    # Keep the pure-red endpoints off the wrap seam
    hue = min(max(hue, 1), 359)
    r, g, b = colorsys.hsv_to_rgb(hue / 360.0, saturation / 100.0, brightness / 100.0)
    return Color(int(r * 255), int(g * 255), int(b * 255), alpha)


def random_color(rng: np.random.Generator, alpha: float = 1.0) -> Color:
    """
    Pick a colour using three draws from ``rng``.

    Args:
        rng: Shared parameter stream.
        alpha: Opacity stored on the returned colour.

    Returns:
        The picked :class:`Color`.
    """
    hue = _random_within(rng, 0, 360)

    band_bounds = HUE_BANDS[hue_band(hue)][1]
    saturation = _random_within(rng, band_bounds[0][0], 100)

    brightness = _random_within(rng, minimum_brightness(hue, saturation), 100)

    return hsv_to_color(hue, saturation, brightness, alpha)
