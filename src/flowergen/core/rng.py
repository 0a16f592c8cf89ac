"""
Seeded random streams.

Every stream is keyed by the seed value alone, so re-seeding with the
same value always replays the same draws. Streams are plain
``numpy.random.Generator`` objects owned by the caller; nothing here
touches process-wide random state.
"""

import hashlib
import math
import numbers

import numpy as np

from flowergen.errors import InvalidSeedError

# Largest seed magnitude; beyond it ring seeds (seed + i * independence) lose float precision
MAX_SEED = 2**53


def check_seed_range(seed):
    """Return ``seed`` unchanged, or raise :class:`InvalidSeedError` if |seed| > ``MAX_SEED``."""
    if isinstance(seed, numbers.Real) and not isinstance(seed, bool) and abs(seed) > MAX_SEED:
        raise InvalidSeedError(seed, f"magnitude must not exceed 2**53 ({MAX_SEED})")
    return seed


def _seed_material(seed_value) -> str:
    """Canonical text for a seed, shared by ints and integral floats."""
    if isinstance(seed_value, bool) or not isinstance(seed_value, numbers.Real):
        raise InvalidSeedError(seed_value, "expected an int or float")

    if isinstance(seed_value, numbers.Integral):
        return str(int(seed_value))

    value = float(seed_value)
    if not math.isfinite(value):
        raise InvalidSeedError(seed_value, "must be finite")
    if value.is_integer():
        return str(int(value))
    return repr(value)


def seed_key(seed_value) -> int:
    """
    Derive a 64-bit integer key from any numeric seed.

    Integral floats map to the same key as the equal int, so
    ``seed_key(42.0) == seed_key(42)``.

    Args:
        seed_value: Int or float seed, possibly a composite such as
            ``seed + i * independence``.

    Returns:
        Unsigned 64-bit integer.
    """
    digest = hashlib.sha256(_seed_material(seed_value).encode("utf-8")).digest()
    return int.from_bytes(digest[:8], byteorder="big", signed=False)


def make_rng(seed_value) -> np.random.Generator:
    """Create a fresh, reproducible stream for ``seed_value``."""
    return np.random.default_rng(seed_key(seed_value))


def draw(seed_value) -> float:
    """Single scalar in [0, 1) from a fresh stream seeded with ``seed_value``."""
    return float(make_rng(seed_value).random())
