"""History fetcher: pools a day-of-year window across past years."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import date, timedelta

import httpx
import numpy as np

from climatecast.config.schema import ArchiveConfig
from climatecast.ingest.fallback import synthesize_series
from climatecast.ingest.power_client import PowerClient
from climatecast.models.series import PARAMETER_FIELDS, DailySeries

logger = logging.getLogger(__name__)

LOW_QUALITY_PERCENT = 50.0
MODERATE_QUALITY_PERCENT = 80.0


class HistoryFetcher:
    def __init__(self, client: PowerClient, config: ArchiveConfig | None = None):
        self.client = client
        self.config = config or ArchiveConfig()

    def fetch_for_day_of_year(
        self,
        latitude: float,
        longitude: float,
        day_of_year: int,
        today: date,
        rng: np.random.Generator,
    ) -> DailySeries:
        """Fetch the window around ``day_of_year`` for each of the last N years."""
        first_year = today.year - self.config.years_of_data
        last_year = today.year - 1
        windows = [
            year_window(year, day_of_year, self.config.window_half_width_days)
            for year in range(first_year, last_year + 1)
        ]
        return self.fetch_windows(latitude, longitude, windows, rng)

    def fetch_windows(
        self,
        latitude: float,
        longitude: float,
        windows: list[tuple[date, date]],
        rng: np.random.Generator,
    ) -> DailySeries:
        """Fetch every window with bounded concurrency and merge the results.

        A failed or empty window is omitted. If no window yields data the
        fallback synthesizer generates each window instead.
        """
        logger.info(
            "Fetching %d yearly windows for %.4f, %.4f (%s..%s)",
            len(windows), latitude, longitude,
            windows[0][0].isoformat() if windows else "-",
            windows[-1][1].isoformat() if windows else "-",
        )

        per_window: dict[int, DailySeries] = {}
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = {
                executor.submit(self._fetch_window, latitude, longitude, start, end): i
                for i, (start, end) in enumerate(windows)
            }
            for future in as_completed(futures):
                i = futures[future]
                try:
                    series = future.result()
                except Exception:
                    logger.exception(
                        "Unexpected error fetching window starting %s",
                        windows[i][0].isoformat(),
                    )
                    continue
                if series is not None and not series.is_empty():
                    per_window[i] = series

        if not per_window:
            logger.warning(
                "No archive data for %.4f, %.4f; using fallback synthesizer",
                latitude, longitude,
            )
            combined = DailySeries(synthetic=True)
            for start, end in windows:
                combined.extend(synthesize_series(latitude, longitude, start, end, rng))
            return combined

        combined = DailySeries(years_fetched=len(per_window))
        for i in sorted(per_window):
            combined.extend(per_window[i])
        return combined

    def _fetch_window(
        self, latitude: float, longitude: float, start: date, end: date
    ) -> DailySeries | None:
        try:
            raw = self.client.get_daily_point(latitude, longitude, start, end)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(
                "Failed to fetch archive data for year %d: %s", start.year, e
            )
            return None

        series = parse_daily_point(raw, self.config.missing_value_sentinel)
        if series.is_empty():
            logger.warning("Archive response for year %d had no usable values", start.year)
            return series
        log_data_quality(series, start.year)
        return series


def year_window(year: int, day_of_year: int, half_width: int) -> tuple[date, date]:
    """Window of +-half_width days around day_of_year, clamped to the year."""
    year_length = (date(year, 12, 31) - date(year, 1, 1)).days + 1
    centre = min(max(1, day_of_year), year_length)
    first = max(1, centre - half_width)
    last = min(year_length, centre + half_width)
    jan1 = date(year, 1, 1)
    return jan1 + timedelta(days=first - 1), jan1 + timedelta(days=last - 1)


def parse_daily_point(raw: object, sentinel: float = -999.0) -> DailySeries:
    """Extract the six daily series from ``properties.parameter.<CODE>.<date>``.

    Anything that does not match the expected nesting yields empty series.
    Values at or below ``sentinel + 99`` are treated as missing.
    """
    series = DailySeries()
    if not isinstance(raw, dict):
        return series
    properties = raw.get("properties")
    if not isinstance(properties, dict):
        return series
    parameter = properties.get("parameter")
    if not isinstance(parameter, dict):
        return series

    missing_at_or_below = sentinel + 99.0
    for code, field_name in PARAMETER_FIELDS.items():
        by_date = parameter.get(code)
        if not isinstance(by_date, dict):
            continue
        values = getattr(series, field_name)
        for key in sorted(by_date):
            value = by_date[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                continue
            if value > missing_at_or_below:
                values.append(float(value))
    return series


def data_quality_percent(series: DailySeries) -> float:
    """Share of plausible data points, as a percentage. 0 for an empty series."""
    total = 0
    valid = 0

    for t_min, t_max in zip(series.temperature_min, series.temperature_max):
        total += 1
        if t_min <= t_max and -60 < t_min < 60 and -60 < t_max < 60:
            valid += 1

    for precip in series.precipitation:
        total += 1
        if 0 <= precip < 1000:
            valid += 1

    for wind in series.wind_speed:
        total += 1
        if 0 <= wind < 200:
            valid += 1

    return valid / total * 100 if total else 0.0


def log_data_quality(series: DailySeries, year: int) -> float:
    quality = data_quality_percent(series)
    if quality < LOW_QUALITY_PERCENT:
        logger.warning("Low archive data quality for %d: %.2f%%", year, quality)
    elif quality < MODERATE_QUALITY_PERCENT:
        logger.info("Moderate archive data quality for %d: %.2f%%", year, quality)
    else:
        logger.debug("Good archive data quality for %d: %.2f%%", year, quality)
    return quality
