"""
Error taxonomy for flower generation.

Every error carries the offending value so a failure can be diagnosed
without re-running the generation.
"""

from typing import Any


class FlowerError(Exception):
    """Base class for all flowergen errors."""


class InvalidSizeError(FlowerError, ValueError):
    """Raised when the requested image size is not a positive integer."""

    def __init__(self, size: Any):
        self.size = size
        super().__init__(f"Size must be a positive integer, got {size!r}")


class InvalidSeedError(FlowerError, ValueError):
    """Raised when a seed cannot be turned into a number, or is out of range."""

    def __init__(self, seed: Any, reason: str = "not an integer"):
        self.seed = seed
        super().__init__(f"Invalid seed {_describe(seed)}: {reason}")


def _describe(value: Any) -> str:
    # Huge ints and digit strings may exceed the interpreter's int-to-str limit
    if isinstance(value, int) and value.bit_length() > 64:
        return f"<{value.bit_length()}-bit integer>"
    if isinstance(value, str) and len(value) > 40:
        return repr(value[:20] + "..." + value[-8:])
    return repr(value)


class EncodingError(FlowerError):
    """Raised when the rendered surface cannot be serialized."""


class SettingsError(FlowerError):
    """Raised for unreadable or malformed settings files."""
