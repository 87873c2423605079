"""wttr.in hourly forecast client (``format=j1``)."""

import logging

from tidecast.config.defaults import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    DEFAULT_WEATHER_URL,
)
from tidecast.config.schema import SourceConfig
from tidecast.ingest.fetch import fetch_model
from tidecast.models.raw import WeatherResponse

logger = logging.getLogger(__name__)


class WeatherClient:
    def __init__(
        self,
        url: str = DEFAULT_WEATHER_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.url = url
        self.user_agent = user_agent
        self.timeout = timeout

    @classmethod
    def from_config(cls, sources: SourceConfig) -> "WeatherClient":
        return cls(
            url=sources.weather_url,
            user_agent=sources.user_agent,
            timeout=sources.timeout_seconds,
        )

    def get_forecast(self) -> WeatherResponse:
        logger.debug("Fetching weather forecast %s", self.url)
        return fetch_model(
            self.url, WeatherResponse, user_agent=self.user_agent, timeout=self.timeout
        )
