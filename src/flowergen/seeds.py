"""
Seed parsing and seed sources.

A flower seed can come from an explicit value, from a note title via a
regex, from a ``seed<delimiter>size`` selection, or from a random draw.
``resolve_seed`` applies these sources in a fixed precedence.
"""

import logging
import math
import numbers
import re
from dataclasses import dataclass
from typing import Optional

import numpy as np

from flowergen.config import FlowerSettings
from flowergen.core.rng import MAX_SEED, check_seed_range
from flowergen.errors import InvalidSeedError, SettingsError

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?\d+")

UNTITLED = "Untitled"
RANDOM_SEED_LIMIT = 1e9


@dataclass(frozen=True)
class SelectionSeed:
    """Seed and/or size parsed from a selection; either may be missing."""

    seed: Optional[str]
    size: Optional[int]


@dataclass(frozen=True)
class SeedChoice:
    """Outcome of :func:`resolve_seed`."""

    seed: str
    size: int
    source: str  # "title", "selection", "random" or "fallback"
    consume_selection: bool = False


def parse_seed(value) -> int:
    """
    Convert a seed given as an int or a numeric string to an int.

    The magnitude is limited to ``MAX_SEED`` (2**53).

    Raises:
        InvalidSeedError: For anything else (floats, bools, non-numeric
            text, out-of-range values).
    """
    if isinstance(value, bool):
        raise InvalidSeedError(value, "booleans are not seeds")
    if isinstance(value, numbers.Integral):
        return check_seed_range(int(value))
    if isinstance(value, str):
        text = value.strip()
        if not _INTEGER_RE.fullmatch(text):
            raise InvalidSeedError(value, "not an integer string")
        # Length first, so oversized text never reaches int()
        if len(text.lstrip("+-").lstrip("0")) > len(str(MAX_SEED)) or abs(int(text)) > MAX_SEED:
            raise InvalidSeedError(value, f"magnitude must not exceed 2**53 ({MAX_SEED})")
        return int(text)
    raise InvalidSeedError(value, f"unsupported type {type(value).__name__}")


def is_title_valid(title: Optional[str]) -> bool:
    return title is not None and title != UNTITLED


def seed_from_title(title: Optional[str], pattern: str) -> Optional[str]:
    """
    Extract a seed from a note title with ``pattern``.

    Returns:
        The first match if it is an integer string, else None.
    """
    if not is_title_valid(title) or not pattern:
        return None

    try:
        match = re.search(pattern, title)
    except re.error as exc:
        raise SettingsError(f"Invalid title regex {pattern!r}: {exc}") from exc

    if match and match.group(0) and _INTEGER_RE.fullmatch(match.group(0)):
        return match.group(0)
    return None


def parse_selection(text: str, delimiter: str) -> Optional[SelectionSeed]:
    """
    Parse ``<seed><delimiter><size>`` where both sides are optional.

    The seed is 1-15 digits; the size is 10-999 or 1000.
    """
    regex = rf"(\d{{1,15}})?{re.escape(delimiter)}([1-9][0-9]{{1,2}}|1000)?"
    match = re.fullmatch(regex, text)
    if not match:
        return None
    seed, size = match.groups()
    return SelectionSeed(seed=seed, size=int(size) if size is not None else None)


def random_seed(rng: np.random.Generator | None = None) -> str:
    """Random integer seed in [0, 1e9) as a string."""
    rng = rng or np.random.default_rng()
    return str(int(math.floor(float(rng.random()) * RANDOM_SEED_LIMIT)))


def resolve_seed(
    settings: FlowerSettings,
    title: Optional[str] = None,
    selection: Optional[str] = None,
    rng: np.random.Generator | None = None,
) -> SeedChoice:
    """
    Choose the seed and size for the next flower.

    Precedence: title regex, then selection (which may also set the
    size), then the random-seed setting, then a random fallback.

    Args:
        settings: Active settings.
        title: Note title, if any.
        selection: Selected text, if any.
        rng: Stream for random seeds; a fresh unseeded one by default.

    Returns:
        :class:`SeedChoice`.
    """
    size = settings.size
    seed: Optional[str] = None
    source = "fallback"
    consume = False

    if settings.seed_from_title and settings.title_regex and is_title_valid(title):
        seed = seed_from_title(title, settings.title_regex)
        if seed is not None:
            source = "title"
            logger.info("Seed was found inside title:%s using regex", seed)
        else:
            logger.warning(
                "Seed was not found: make sure regex was specified correctly to find number for seed in title"
            )

    delimiter = settings.selection_delimiter
    if settings.seed_from_selection and selection and delimiter in selection:
        parsed = parse_selection(selection, delimiter)
        if parsed is None:
            logger.warning("Selection is in incorrect form")
        else:
            if parsed.seed is not None:
                seed = parsed.seed
                source = "selection"
                consume = True
                logger.info("Seed was extracted from selection:%s", seed)
            else:
                logger.warning("Seed was not provided in selection")

            if parsed.size is not None:
                size = parsed.size
                consume = True
                logger.info("Size was extracted from selection:%s", size)
            else:
                logger.warning("Size was not provided in selection")
    elif selection and delimiter not in selection:
        logger.warning("Selection could not be read: make sure the configured delimiter %r was used", delimiter)
    elif settings.seed_from_selection and not selection:
        logger.warning("Selection is empty")

    if settings.random_seed:
        seed = random_seed(rng)
        source = "random"
        logger.info("Random seed setting is enabled: seed:%s", seed)

    if not seed:
        seed = random_seed(rng)
        source = "fallback"
        logger.warning("Seed was not found: random seed:%s was selected", seed)

    return SeedChoice(seed=seed, size=size, source=source, consume_selection=consume)
