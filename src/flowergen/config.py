"""
Persisted settings.

Settings are a JSON object merged over the defaults; unknown keys are
ignored so older and newer files keep loading.
"""

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Union

from flowergen.errors import SettingsError

SETTINGS_ENV_VAR = "FLOWERGEN_SETTINGS"

SELECTION_DELIMITERS = (":", "@", "-", "#")
MIN_SETTINGS_SIZE = 10
MAX_SETTINGS_SIZE = 1000
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass
class FlowerSettings:
    """User settings for generating and storing flowers."""

    size: int = 300
    images_folder: str = "flowers"

    # Seed sources
    seed_from_title: bool = False
    title_regex: str = r"\d+"
    seed_from_selection: bool = False
    selection_delimiter: str = ":"  # one of SELECTION_DELIMITERS
    random_seed: bool = False

    log_level: str = "warning"

    def validate(self) -> "FlowerSettings":
        """Check value ranges; returns self for chaining."""
        if not MIN_SETTINGS_SIZE <= self.size <= MAX_SETTINGS_SIZE:
            raise SettingsError(
                f"size must be within [{MIN_SETTINGS_SIZE}, {MAX_SETTINGS_SIZE}], got {self.size}"
            )
        if self.selection_delimiter not in SELECTION_DELIMITERS:
            raise SettingsError(
                f"selection_delimiter must be one of {SELECTION_DELIMITERS}, got {self.selection_delimiter!r}"
            )
        if self.log_level.lower() not in LOG_LEVELS:
            raise SettingsError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        return self

    def to_dict(self) -> dict:
        return asdict(self)


def default_settings_path() -> Path:
    """Settings file location, overridable via ``FLOWERGEN_SETTINGS``."""
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "flowergen" / "settings.json"


def _check_type(name: str, value, default) -> None:
    expected = type(default)
    if expected is bool:
        ok = isinstance(value, bool)
    elif expected is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        ok = isinstance(value, expected)
    if not ok:
        raise SettingsError(
            f"Setting {name!r} must be {expected.__name__}, got {type(value).__name__}"
        )


def settings_from_dict(data: dict) -> FlowerSettings:
    """Merge ``data`` over the defaults and validate the result."""
    defaults = FlowerSettings()
    merged = {}
    for f in fields(FlowerSettings):
        if f.name in data:
            _check_type(f.name, data[f.name], getattr(defaults, f.name))
            merged[f.name] = data[f.name]
    return FlowerSettings(**merged).validate()


def load_settings(path: Union[str, Path, None] = None) -> FlowerSettings:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file; ``default_settings_path()`` if omitted.

    Returns:
        Settings with defaults filled in. A missing file yields the defaults.
    """
    path = Path(path) if path is not None else default_settings_path()
    if not path.exists():
        return FlowerSettings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise SettingsError(f"Settings file {path} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a JSON object")

    return settings_from_dict(data)


def save_settings(settings: FlowerSettings, path: Union[str, Path, None] = None) -> Path:
    """Write settings as JSON and return the path."""
    path = Path(path) if path is not None else default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings.to_dict(), f, indent=2)

    return path
