"""Pick the forecast date, tide day key and weather block for a run."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from tidecast.models.common import as_utc

ROLLOVER_HOUR = 12


@dataclass(frozen=True)
class TimeWindow:
    forecast_date: date
    tide_day_key: str
    weather_index: int
    clock: int  # HHMM as an integer, e.g. 730 for 07:30

    @property
    def forecast_date_iso(self) -> str:
        return self.forecast_date.isoformat()


def resolve_time_window(now: datetime) -> TimeWindow:
    """Resolve the window for ``now`` (UTC).

    From noon onwards the run describes tomorrow: the second weather
    block is used and the reference clock moves to the start of
    tomorrow, keeping only the minutes. The tide table key is the
    forecast day-of-month minus one, which is yesterday's day before
    noon and today's after it.
    """
    now = as_utc(now)
    if now.hour >= ROLLOVER_HOUR:
        reference = (now + timedelta(days=1)).replace(hour=0)
        weather_index = 1
    else:
        reference = now
        weather_index = 0

    forecast_date = reference.date()
    return TimeWindow(
        forecast_date=forecast_date,
        tide_day_key=str(forecast_date.day - 1),
        weather_index=weather_index,
        clock=reference.hour * 100 + reference.minute,
    )
