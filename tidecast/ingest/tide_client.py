"""Port of London Authority tide prediction client."""

import logging
from datetime import date

from tidecast.config.defaults import (
    DEFAULT_GAUGE_ID,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    PLA_BASE_URL,
)
from tidecast.config.schema import SourceConfig
from tidecast.ingest.fetch import fetch_model
from tidecast.models.raw import TideResponse

logger = logging.getLogger(__name__)


class TideClient:
    def __init__(
        self,
        base_url: str = PLA_BASE_URL,
        gauge_id: str = DEFAULT_GAUGE_ID,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.gauge_id = gauge_id
        self.user_agent = user_agent
        self.timeout = timeout

    @classmethod
    def from_config(cls, sources: SourceConfig) -> "TideClient":
        return cls(
            base_url=sources.tide_base_url,
            gauge_id=sources.tide_gauge_id,
            user_agent=sources.user_agent,
            timeout=sources.timeout_seconds,
        )

    def table_url(self, day: date) -> str:
        return (
            f"{self.base_url}/gauge_data/{self.gauge_id}/"
            f"{day:%Y}/{day:%m}/{day:%d}/0/1/"
        )

    def get_tide_table(self, day: date) -> TideResponse:
        """Fetch the gauge's prediction table for the month containing ``day``."""
        url = self.table_url(day)
        logger.debug("Fetching tide table %s", url)
        return fetch_model(
            url, TideResponse, user_agent=self.user_agent, timeout=self.timeout
        )
