"""Response shapes of the tide and weather sources.

Values are kept as the strings the sources send; numeric parsing happens
in the extractors so that a bad value becomes a parser failure rather
than a decode failure.
"""

from pydantic import AliasChoices, BaseModel, Field


class RawHourlyWeather(BaseModel):
    time: str
    temp_c: str = Field(validation_alias=AliasChoices("tempC", "temp_c"))
    weather_code: str = Field(
        validation_alias=AliasChoices("weatherCode", "weather_code")
    )
    wind_dir_16_point: str = Field(
        validation_alias=AliasChoices("winddir16Point", "wind_dir_16_point")
    )
    wind_speed_kmph: str = Field(
        validation_alias=AliasChoices("windspeedKmph", "wind_speed_kmph")
    )


class RawWeatherDay(BaseModel):
    date: str = ""
    avg_temp_c: str = Field(
        default="", validation_alias=AliasChoices("avgtempC", "avg_temp_c")
    )
    max_temp_c: str = Field(
        default="", validation_alias=AliasChoices("maxtempC", "max_temp_c")
    )
    min_temp_c: str = Field(
        default="", validation_alias=AliasChoices("mintempC", "min_temp_c")
    )
    hourly: list[RawHourlyWeather]


class WeatherResponse(BaseModel):
    weather: list[RawWeatherDay]


class RawTideExtreme(BaseModel):
    time: str = Field(validation_alias=AliasChoices("Time", "time"))
    type: int = Field(validation_alias=AliasChoices("Type", "type"), ge=0)


class TideTable(BaseModel):
    name: str = ""
    rows: dict[str, list[RawTideExtreme]]


class TideResponse(BaseModel):
    month: str = ""
    table: dict[str, TideTable]
