"""Point-climate daily archive client with retry and rate limit handling."""

import logging
import time
from datetime import date

import httpx

from climatecast.config.schema import ArchiveConfig
from climatecast.models.series import PARAMETER_FIELDS

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y%m%d"


class PowerClient:
    def __init__(self, config: ArchiveConfig | None = None):
        config = config or ArchiveConfig()
        self.base_url = config.base_url
        self.community = config.community
        self.user_agent = config.user_agent
        self.timeout = config.timeout
        self.max_retries = config.max_retries
        self.retry_base_delay = config.retry_base_delay

    def build_params(
        self, latitude: float, longitude: float, start: date, end: date
    ) -> dict[str, str]:
        return {
            "parameters": ",".join(PARAMETER_FIELDS),
            "community": self.community,
            "longitude": f"{longitude:.6f}",
            "latitude": f"{latitude:.6f}",
            "start": start.strftime(DATE_FORMAT),
            "end": end.strftime(DATE_FORMAT),
            "format": "JSON",
        }

    def get_daily_point(
        self, latitude: float, longitude: float, start: date, end: date
    ) -> dict:
        """Fetch daily parameter values for one coordinate and date range.

        Retries on 503/429 and transport errors with exponential backoff.
        """
        params = self.build_params(latitude, longitude, start, end)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        last_error: Exception | None = None
        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(
                    self.base_url, params=params, headers=headers, timeout=self.timeout
                )
                if resp.status_code in (503, 429) and attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "Archive returned %d for %s..%s, retrying in %.1fs (attempt %d/%d)",
                        resp.status_code, params["start"], params["end"],
                        delay, attempt + 1, self.max_retries,
                    )
                    time.sleep(delay)
                    continue
                resp.raise_for_status()
                return resp.json()
            except httpx.RequestError as e:
                last_error = e
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "Archive request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                raise

        assert last_error is not None
        raise last_error
