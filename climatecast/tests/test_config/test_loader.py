"""Tests for config loading and dotted-key lookup."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from climatecast.config.loader import get_config_value, load_config


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.archive.years_of_data == 5
        assert config.archive.max_workers == 2
        assert config.forecast.random_seed == 7

    def test_unspecified_sections_default(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.archive.window_half_width_days == 3
        assert config.forecast.max_lead_years == 2

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.archive.years_of_data == 10

    def test_invalid_value_raises(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("archive:\n  years_of_data: -3\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_fixtures_config(self, fixtures_dir: Path):
        config = load_config(fixtures_dir / "config_default.yaml")
        assert config.archive.community == "RE"
        assert config.forecast.random_seed is None


class TestGetConfigValue:
    def test_dotted_key(self, default_config):
        assert get_config_value(default_config, "archive.timeout") == 30.0

    def test_top_level(self, default_config):
        section = get_config_value(default_config, "forecast")
        assert section.max_lead_years == 2

    def test_invalid_key(self, default_config):
        with pytest.raises(KeyError):
            get_config_value(default_config, "nonexistent.key")
