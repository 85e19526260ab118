"""Tests for config loading and dotted-key lookup."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from wxlookup.config.loader import get_config_value, load_config
from wxlookup.config.schema import GEOCODING_BASE_URL, AppConfig
from wxlookup.models.common import UnitSystem


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.ui.units == UnitSystem.IMPERIAL
        assert config.geocoding.base_url == "https://test-geo.example.com"
        assert config.geolocation.has_fixed_location

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "nope.yaml")
        assert config == AppConfig()

    def test_none_uses_defaults(self):
        assert load_config(None).geocoding.base_url == GEOCODING_BASE_URL

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.ui.units == UnitSystem.METRIC
        assert config.ui.debounce_ms == 300

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"ui": {"theme": "dark"}}, f)
        with pytest.raises(ValidationError):
            load_config(path)


class TestGetConfigValue:
    def test_nested(self):
        config = AppConfig()
        assert get_config_value(config, "geolocation.timeout_s") == 10.0
        assert get_config_value(config, "ui.units") == UnitSystem.METRIC

    def test_missing_key(self):
        with pytest.raises(KeyError):
            get_config_value(AppConfig(), "ui.theme")

    def test_model_attribute_is_not_a_key(self):
        with pytest.raises(KeyError):
            get_config_value(AppConfig(), "model_dump")
        with pytest.raises(KeyError):
            get_config_value(AppConfig(), "ui.model_fields")
