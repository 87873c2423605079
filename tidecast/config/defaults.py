"""Default source endpoints for the London Bridge gauge and Mortlake weather."""

PLA_BASE_URL = "https://tidepredictions.pla.co.uk"
DEFAULT_GAUGE_ID = "0113"  # London Bridge
DEFAULT_TIDE_TABLE_ID = "0"
DEFAULT_WEATHER_URL = "https://wttr.in/Mortlake?format=j1"
DEFAULT_USER_AGENT = "tidecast/0.1.0"
DEFAULT_TIMEOUT_SECONDS = 30.0

LOW_TIDE_OFFSET_ENV = "LOW_TIDE_OFFSET"
HIGH_TIDE_OFFSET_ENV = "HIGH_TIDE_OFFSET"
