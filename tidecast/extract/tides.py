"""Tide extreme extraction and offset correction."""

from datetime import date, timedelta

from tidecast.config.schema import TideOffsetConfig
from tidecast.extract.parsing import MissingDataError, parse_hhmm
from tidecast.models.forecast import TIDE_SLOTS, TideSummary, TideType
from tidecast.models.raw import RawTideExtreme, TideResponse


def select_extremes(
    response: TideResponse, table_id: str, day_key: str
) -> list[RawTideExtreme]:
    """Look up one day's extremes in a decoded tide response."""
    table = response.table.get(table_id)
    if table is None:
        raise MissingDataError(f"tide table {table_id!r} not in response")
    extremes = table.rows.get(day_key)
    if not extremes:
        raise MissingDataError(f"no tide extremes for day key {day_key!r}")
    return extremes


def correct_time(
    extreme: RawTideExtreme, on: date, offsets: TideOffsetConfig
) -> str:
    """Shift a gauge time by the low or high offset and format it as HH:MM."""
    parsed = parse_hhmm(extreme.time, on)
    if extreme.type == TideType.LOW:
        minutes = offsets.low_tide_offset_minutes
    else:
        minutes = offsets.high_tide_offset_minutes
    return (parsed + timedelta(minutes=minutes)).strftime("%H:%M")


def extract_tides(
    extremes: list[RawTideExtreme], on: date, offsets: TideOffsetConfig
) -> TideSummary:
    """Correct up to four extremes, keeping their order.

    Unused slots stay empty. ``first_tide`` is the raw type of the first
    extreme of the day.
    """
    if not extremes:
        raise MissingDataError("empty tide extreme list")

    times = [""] * TIDE_SLOTS
    for i, extreme in enumerate(extremes[:TIDE_SLOTS]):
        times[i] = correct_time(extreme, on, offsets)

    return TideSummary(first_tide=extremes[0].type, times=times)
