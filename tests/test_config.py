"""Tests for persisted settings."""

import json

import pytest

from flowergen.config import (
    SETTINGS_ENV_VAR,
    FlowerSettings,
    default_settings_path,
    load_settings,
    save_settings,
    settings_from_dict,
)
from flowergen.errors import SettingsError


class TestFlowerSettings:
    def test_defaults(self):
        settings = FlowerSettings()
        assert settings.size == 300
        assert settings.images_folder == "flowers"
        assert settings.title_regex == r"\d+"
        assert settings.selection_delimiter == ":"
        assert not settings.seed_from_title
        assert not settings.seed_from_selection
        assert not settings.random_seed

    def test_validate_returns_self(self):
        settings = FlowerSettings()
        assert settings.validate() is settings

    @pytest.mark.parametrize(
        "overrides",
        [{"size": 5}, {"size": 1001}, {"selection_delimiter": ";"}, {"log_level": "loud"}],
    )
    def test_validate_rejects(self, overrides):
        with pytest.raises(SettingsError):
            FlowerSettings(**overrides).validate()


class TestSettingsFromDict:
    def test_merges_over_defaults(self):
        settings = settings_from_dict({"size": 500, "random_seed": True})
        assert settings.size == 500
        assert settings.random_seed
        assert settings.images_folder == "flowers"

    def test_ignores_unknown_keys(self):
        assert settings_from_dict({"theme": "dark"}) == FlowerSettings()

    @pytest.mark.parametrize(
        "data",
        [{"size": "300"}, {"size": True}, {"random_seed": 1}, {"images_folder": 3}],
    )
    def test_rejects_wrong_types(self, data):
        with pytest.raises(SettingsError):
            settings_from_dict(data)


class TestLoadSave:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "absent.json") == FlowerSettings()

    def test_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "settings.json"
        original = FlowerSettings(size=640, seed_from_title=True, title_regex=r"#(\d+)")
        assert save_settings(original, path) == path
        assert load_settings(path) == original

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SettingsError):
            load_settings(path)

    def test_non_object(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps([1, 2]), encoding="utf-8")
        with pytest.raises(SettingsError):
            load_settings(path)

    def test_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / "env.json"
        path.write_text(json.dumps({"size": 120}), encoding="utf-8")
        monkeypatch.setenv(SETTINGS_ENV_VAR, str(path))

        assert default_settings_path() == path
        assert load_settings().size == 120
