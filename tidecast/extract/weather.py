"""Hourly weather extraction and current-hour lookup."""

from dataclasses import dataclass

from tidecast.extract.parsing import MissingDataError, parse_int
from tidecast.extract.wind import classify_wind
from tidecast.models.forecast import WeatherPeriod, WindReading
from tidecast.models.raw import RawHourlyWeather, WeatherResponse


@dataclass(frozen=True)
class WeatherExtract:
    periods: list[WeatherPeriod]
    current: RawHourlyWeather | None


def select_hourly(response: WeatherResponse, index: int) -> list[RawHourlyWeather]:
    """Return the hourly series of the weather block at ``index``."""
    if index >= len(response.weather):
        raise MissingDataError(
            f"weather block {index} requested, response has {len(response.weather)}"
        )
    hourly = response.weather[index].hourly
    if not hourly:
        raise MissingDataError(f"weather block {index} has no hourly entries")
    return hourly


def extract_weather(hourly: list[RawHourlyWeather], clock: int) -> WeatherExtract:
    """Build one period per hour and find the hour that represents ``clock``.

    The current record is the last one whose time is not after ``clock``;
    it is None when the clock precedes every hour in the series.
    """
    if not hourly:
        raise MissingDataError("empty hourly weather series")

    periods: list[WeatherPeriod] = []
    current: RawHourlyWeather | None = None
    for hour in hourly:
        hour_time = parse_int(hour.time, "time")
        if clock >= hour_time:
            current = hour
        periods.append(
            WeatherPeriod(
                weather_type=parse_int(hour.weather_code, "weatherCode"),
                temperature=parse_int(hour.temp_c, "tempC"),
            )
        )
    return WeatherExtract(periods=periods, current=current)


def current_wind(current: RawHourlyWeather | None) -> WindReading:
    if current is None:
        return WindReading()
    speed = parse_int(current.wind_speed_kmph, "windspeedKmph")
    return WindReading(
        direction=current.wind_dir_16_point,
        strength=classify_wind(speed),
    )
