"""Forecast pipeline: validate, fetch history, aggregate, synthesize, check."""

import logging
from datetime import date, datetime

import numpy as np

from climatecast.config.schema import EngineConfig
from climatecast.forecast.synthesizer import ForecastSynthesizer
from climatecast.ingest.history_fetcher import HistoryFetcher
from climatecast.ingest.power_client import PowerClient
from climatecast.models.forecast import ForecastResult
from climatecast.models.request import ForecastRequest
from climatecast.stats.aggregator import aggregate
from climatecast.validation.request_checks import InvalidRequestError, validate_request
from climatecast.validation.response_checks import validate_response

logger = logging.getLogger(__name__)


class ForecastPipeline:
    def __init__(
        self,
        config: EngineConfig | None = None,
        fetcher: HistoryFetcher | None = None,
    ):
        self.config = config or EngineConfig()
        self.fetcher = fetcher or HistoryFetcher(
            PowerClient(self.config.archive), self.config.archive
        )
        self.synthesizer = ForecastSynthesizer(
            years_of_data=self.config.archive.years_of_data,
            data_source=self.config.forecast.data_source_label,
        )

    def run(
        self,
        request: ForecastRequest,
        today: date | None = None,
        rng: np.random.Generator | None = None,
        now: datetime | None = None,
    ) -> ForecastResult:
        """Generate a forecast for one location and target date.

        Raises InvalidRequestError before any upstream call if the request
        is invalid. A failed response check is only logged.
        """
        if today is None:
            today = date.today()
        if rng is None:
            rng = np.random.default_rng(self.config.forecast.random_seed)

        logger.info(
            "Generating forecast for %s at %s, %s",
            request.name, request.latitude, request.longitude,
        )

        verdict = validate_request(
            request, today=today, max_lead_years=self.config.forecast.max_lead_years
        )
        if not verdict.valid:
            error = InvalidRequestError(verdict.errors)
            logger.warning("%s", error)
            raise error

        target_date = request.target_date_resolved()
        day_of_year = target_date.timetuple().tm_yday

        series = self.fetcher.fetch_for_day_of_year(
            request.latitude, request.longitude, day_of_year, today, rng
        )
        if series.synthetic:
            logger.warning("Forecast for %s is based on synthetic history", request.name)
        stats = aggregate(series)

        result = self.synthesizer.synthesize(stats, request, target_date, rng, now=now)

        check = validate_response(result)
        if not check.valid:
            logger.warning("Generated response validation failed: %s", check.errors)

        logger.info("Forecast generated for %s on %s", request.name, target_date.isoformat())
        return result
