"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from flowergen.core.palette import Color
from flowergen.core.params import FlowerParams, generate_params

# Canonical regression seed
TEST_SEED = 42


class ConstantNoise:
    """Noise field stand-in that returns the same value everywhere."""

    def __init__(self, value: float = 0.0):
        self.value = value

    def sample(self, x: float, y: float, z: float) -> float:
        return self.value

    __call__ = sample

    def sample_ring(self, xs: np.ndarray, ys: np.ndarray, z: float) -> np.ndarray:
        return np.full(len(xs), self.value, dtype=np.float64)


@pytest.fixture
def seed() -> int:
    """Default seed for tests."""
    return TEST_SEED


@pytest.fixture
def params(seed: int) -> FlowerParams:
    """Generated parameters for the default seed."""
    return generate_params(seed)


@pytest.fixture
def make_params():
    """
    Factory for hand-built parameters.

    Returns:
        Callable accepting FlowerParams field overrides.
    """
    def _make(**overrides) -> FlowerParams:
        values = dict(
            frequency=2.0,
            magnitude=0.5,
            independence=0.3,
            spacing=0.1,
            count=5,
            stroke_color=Color(200, 0, 0),
            fill_color=Color(10, 20, 30, 1.0),
        )
        values.update(overrides)
        return FlowerParams(**values)

    return _make


@pytest.fixture
def constant_noise():
    """Factory for constant noise fields."""
    return ConstantNoise
