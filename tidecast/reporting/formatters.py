"""Output formatters for forecast records."""

import json

from tidecast.models.forecast import ForecastRecord, TideType


def format_record_json(record: ForecastRecord) -> str:
    """JSON payload for programmatic consumption."""
    return json.dumps(record.to_dict(), indent=2)


def format_record_text(record: ForecastRecord) -> str:
    """Plain text digest for notifications."""
    if not record.ok:
        return f"Forecast unavailable: {record.message}"

    first = "low" if record.tides.first_tide == TideType.LOW else "high"
    tide_times = [t for t in record.tides.times if t]
    lines = [f"=== Forecast for {record.date} ==="]
    if tide_times:
        lines.append(f"Tides (first {first}): {', '.join(tide_times)}")
    if record.wind.strength:
        lines.append(f"Wind: {record.wind.strength} from {record.wind.direction}")
    else:
        lines.append("Wind: no current reading")
    if record.weather_periods:
        temps = [p.temperature for p in record.weather_periods]
        lines.append(
            f"Temperature: {min(temps)} to {max(temps)} C over "
            f"{len(record.weather_periods)} periods"
        )
    return "\n".join(lines)
