"""Aggregated forecast record returned by a single run."""

from dataclasses import asdict, dataclass, field
from enum import IntEnum
from typing import Any

TIDE_SLOTS = 4


class TideType(IntEnum):
    LOW = 0
    HIGH = 1


@dataclass(frozen=True)
class WeatherPeriod:
    weather_type: int
    temperature: int


@dataclass(frozen=True)
class TideSummary:
    first_tide: int = 0
    times: list[str] = field(default_factory=lambda: [""] * TIDE_SLOTS)


@dataclass(frozen=True)
class WindReading:
    direction: str = ""
    strength: str = ""


@dataclass(frozen=True)
class ForecastRecord:
    """One run's output. A failed run only carries ``message``."""

    date: str = ""
    weather_periods: list[WeatherPeriod] = field(default_factory=list)
    tides: TideSummary = field(default_factory=TideSummary)
    wind: WindReading = field(default_factory=WindReading)
    message: str = ""

    @classmethod
    def failure(cls, message: str) -> "ForecastRecord":
        return cls(message=message)

    @property
    def ok(self) -> bool:
        return not self.message

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
