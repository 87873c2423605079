"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, StrictInt

from tidecast.config.defaults import (
    DEFAULT_GAUGE_ID,
    DEFAULT_TIDE_TABLE_ID,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    DEFAULT_WEATHER_URL,
    PLA_BASE_URL,
)


class TideOffsetConfig(BaseModel):
    """Minutes added to gauge times to get times at the secondary location."""

    model_config = {"extra": "forbid"}

    low_tide_offset_minutes: StrictInt
    high_tide_offset_minutes: StrictInt


class SourceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    tide_base_url: str = PLA_BASE_URL
    tide_gauge_id: str = DEFAULT_GAUGE_ID
    tide_table_id: str = DEFAULT_TIDE_TABLE_ID
    weather_url: str = DEFAULT_WEATHER_URL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class TidecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    offsets: TideOffsetConfig
    sources: SourceConfig = SourceConfig()
