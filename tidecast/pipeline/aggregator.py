"""Aggregator: one tide + weather run, producing a ForecastRecord."""

import logging
from datetime import datetime

from tidecast.config.schema import TidecastConfig
from tidecast.extract.parsing import MissingDataError, ParserError
from tidecast.extract.tides import extract_tides, select_extremes
from tidecast.extract.time_window import resolve_time_window
from tidecast.extract.weather import current_wind, extract_weather, select_hourly
from tidecast.ingest.fetch import FetchError
from tidecast.ingest.tide_client import TideClient
from tidecast.ingest.weather_client import WeatherClient
from tidecast.models.common import utc_now
from tidecast.models.forecast import ForecastRecord

logger = logging.getLogger(__name__)

MSG_TIDE_FETCH = "could not fetch tide data"
MSG_WEATHER_FETCH = "could not fetch weather data"
MSG_PARSER = "parser failure"
MSG_TIDE_MISSING = "incomplete tide data"
MSG_WEATHER_MISSING = "incomplete weather data"


class ForecastAggregator:
    def __init__(
        self,
        config: TidecastConfig,
        tide_client: TideClient | None = None,
        weather_client: WeatherClient | None = None,
    ):
        self.config = config
        self.tides = tide_client or TideClient.from_config(config.sources)
        self.weather = weather_client or WeatherClient.from_config(config.sources)

    def run(self, now: datetime | None = None) -> ForecastRecord:
        """Execute one aggregation. Failures come back as a message-only record."""
        if now is None:
            now = utc_now()

        # 1. TIME WINDOW
        window = resolve_time_window(now)
        logger.info(
            "Forecast for %s (tide day key %s, weather block %d, clock %04d)",
            window.forecast_date_iso, window.tide_day_key,
            window.weather_index, window.clock,
        )

        # 2. FETCH
        try:
            tide_data = self.tides.get_tide_table(window.forecast_date)
        except FetchError as e:
            logger.warning("Tide fetch failed: %s", e)
            return ForecastRecord.failure(MSG_TIDE_FETCH)
        logger.info("Tide response fetched successfully")

        try:
            weather_data = self.weather.get_forecast()
        except FetchError as e:
            logger.warning("Weather fetch failed: %s", e)
            return ForecastRecord.failure(MSG_WEATHER_FETCH)
        logger.info("Weather response fetched successfully")

        # 3. EXTRACT
        try:
            extremes = select_extremes(
                tide_data, self.config.sources.tide_table_id, window.tide_day_key
            )
            tides = extract_tides(extremes, window.forecast_date, self.config.offsets)
        except MissingDataError as e:
            logger.warning("Tide data incomplete: %s", e)
            return ForecastRecord.failure(MSG_TIDE_MISSING)
        except ParserError as e:
            logger.warning("Could not parse tide data: %s", e)
            return ForecastRecord.failure(MSG_PARSER)

        try:
            hourly = select_hourly(weather_data, window.weather_index)
            extract = extract_weather(hourly, window.clock)
            wind = current_wind(extract.current)
        except MissingDataError as e:
            logger.warning("Weather data incomplete: %s", e)
            return ForecastRecord.failure(MSG_WEATHER_MISSING)
        except ParserError as e:
            logger.warning("Could not parse weather data: %s", e)
            return ForecastRecord.failure(MSG_PARSER)

        if extract.current is None:
            logger.info("No hourly entry at or before %04d, wind left empty", window.clock)

        # 4. ASSEMBLE
        return ForecastRecord(
            date=window.forecast_date_iso,
            weather_periods=extract.periods,
            tides=tides,
            wind=wind,
        )
