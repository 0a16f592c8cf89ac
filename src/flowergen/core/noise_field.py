"""
Coherent 3D noise used to deform ring outlines.

A thin wrapper around OpenSimplex noise. The field is built once per
flower from the flower seed and is read-only afterwards, so it can be
shared by every ring of that flower.
"""

import numpy as np
from opensimplex import OpenSimplex

from flowergen.core.rng import seed_key

# OpenSimplex seeds are signed 64-bit integers
_SEED_MASK = (1 << 63) - 1


class NoiseField:
    """
    Deterministic smooth function of (x, y, z) with values in about [-1, 1].

    Rings sample it at ``(cos(a) * f, sin(a) * f, ring_seed)``: the third
    coordinate picks a 2D slice per ring, and sampling on a circle keeps
    each outline closed.
    """

    def __init__(self, seed):
        self.seed = seed
        self._simplex = OpenSimplex(seed=seed_key(seed) & _SEED_MASK)

    def sample(self, x: float, y: float, z: float) -> float:
        return float(self._simplex.noise3(x, y, z))

    __call__ = sample

    def sample_ring(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        z: float,
    ) -> np.ndarray:
        """
        Sample the field at paired (x, y) points on a single z slice.

        Args:
            xs: 1D array of x coordinates.
            ys: 1D array of y coordinates, same length as ``xs``.
            z: Slice coordinate shared by all points.

        Returns:
            1D float64 array of noise values.
        """
        out = np.empty(len(xs), dtype=np.float64)
        for i in range(len(xs)):
            out[i] = self._simplex.noise3(float(xs[i]), float(ys[i]), z)
        return out
