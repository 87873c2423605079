"""Tests for config loading, env overrides and schema validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tidecast.config.defaults import DEFAULT_WEATHER_URL
from tidecast.config.loader import ConfigError, config_to_json, load_config
from tidecast.config.schema import SourceConfig, TideOffsetConfig, TidecastConfig

ENV = {"LOW_TIDE_OFFSET": "144", "HIGH_TIDE_OFFSET": "46"}


class TestLoadConfig:
    def test_env_only(self):
        config = load_config(env=ENV)
        assert config.offsets.low_tide_offset_minutes == 144
        assert config.offsets.high_tide_offset_minutes == 46
        assert config.sources.weather_url == DEFAULT_WEATHER_URL

    def test_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path, env={})
        assert config.offsets.low_tide_offset_minutes == 144
        assert config.sources.timeout_seconds == 10.0

    def test_env_overrides_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path, env={"HIGH_TIDE_OFFSET": "-5"})
        assert config.offsets.high_tide_offset_minutes == -5
        assert config.offsets.low_tide_offset_minutes == 144

    def test_missing_offset(self):
        with pytest.raises(ConfigError, match="HIGH_TIDE_OFFSET"):
            load_config(env={"LOW_TIDE_OFFSET": "144"})

    def test_blank_env_counts_as_missing(self):
        with pytest.raises(ConfigError):
            load_config(env={"LOW_TIDE_OFFSET": "144", "HIGH_TIDE_OFFSET": " "})

    def test_non_numeric_offset(self):
        with pytest.raises(ConfigError, match="LOW_TIDE_OFFSET"):
            load_config(env={"LOW_TIDE_OFFSET": "two hours", "HIGH_TIDE_OFFSET": "46"})

    def test_yaml_string_offset_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text(
            "offsets:\n  low_tide_offset_minutes: '144'\n  high_tide_offset_minutes: 46\n"
        )
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path, env={})

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("retries: 3\n")
        with pytest.raises(ConfigError):
            load_config(path, env=ENV)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Could not read"):
            load_config(tmp_path / "nope.yaml", env=ENV)

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path, env=ENV)
        assert config.sources == SourceConfig()

    def test_to_json(self):
        assert '"low_tide_offset_minutes": 144' in config_to_json(load_config(env=ENV))


class TestSchema:
    def test_offsets_required(self):
        with pytest.raises(ValidationError):
            TidecastConfig()

    def test_offsets_strict_int(self):
        with pytest.raises(ValidationError):
            TideOffsetConfig(low_tide_offset_minutes="10", high_tide_offset_minutes=5)

    def test_timeout_positive(self):
        with pytest.raises(ValidationError):
            SourceConfig(timeout_seconds=0)

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            SourceConfig(retries=3)
