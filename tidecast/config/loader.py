"""YAML config loader with environment overrides for the tide offsets."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tidecast.config.defaults import HIGH_TIDE_OFFSET_ENV, LOW_TIDE_OFFSET_ENV
from tidecast.config.schema import TidecastConfig

_ENV_OFFSETS = {
    "low_tide_offset_minutes": LOW_TIDE_OFFSET_ENV,
    "high_tide_offset_minutes": HIGH_TIDE_OFFSET_ENV,
}


class ConfigError(Exception):
    """Raised when the configuration is missing required values or is invalid."""

    pass


def load_config(
    path: str | Path | None = None, env: Mapping[str, str] | None = None
) -> TidecastConfig:
    """Load and validate config from an optional YAML file plus environment.

    LOW_TIDE_OFFSET / HIGH_TIDE_OFFSET take precedence over the YAML
    ``offsets`` section. Both offsets are required.
    """
    if env is None:
        env = os.environ

    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        try:
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config file {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

    offsets = dict(raw.get("offsets") or {})
    for field_name, env_name in _ENV_OFFSETS.items():
        value = env.get(env_name)
        if value is None or value.strip() == "":
            continue
        offsets[field_name] = _parse_offset(env_name, value)

    missing = [name for name in _ENV_OFFSETS if name not in offsets]
    if missing:
        raise ConfigError(
            "Missing tide offsets: "
            + ", ".join(f"{name} (env {_ENV_OFFSETS[name]})" for name in missing)
        )
    raw["offsets"] = offsets

    try:
        return TidecastConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def config_to_json(config: TidecastConfig) -> str:
    return config.model_dump_json(indent=2)


def _parse_offset(env_name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise ConfigError(f"{env_name} must be an integer, got {value!r}") from e
