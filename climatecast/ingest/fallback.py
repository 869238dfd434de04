"""Synthetic daily series used when the archive is unavailable."""

import logging
from datetime import date, timedelta

import numpy as np

from climatecast.models.series import DailySeries

logger = logging.getLogger(__name__)

SEASONAL_AMPLITUDE_C = 10.0
SEASONAL_PERIOD_DAYS = 365.0
# Day of year of the northern-hemisphere temperature peak (mid July)
WARMEST_DAY_OF_YEAR = 196


def base_temperature(latitude: float) -> float:
    return 25.0 - 0.6 * abs(latitude)


def seasonal_offset(day_of_year: np.ndarray, latitude: float) -> np.ndarray:
    """Yearly sinusoid; inverted for the southern hemisphere."""
    phase = 2 * np.pi * (day_of_year - WARMEST_DAY_OF_YEAR) / SEASONAL_PERIOD_DAYS
    sign = -1.0 if latitude < 0 else 1.0
    return sign * SEASONAL_AMPLITUDE_C * np.cos(phase)


def synthesize_series(
    latitude: float,
    longitude: float,
    start: date,
    end: date,
    rng: np.random.Generator,
) -> DailySeries:
    """Generate one plausible value per day in [start, end] for every parameter.

    Never fails and never returns an empty series: an inverted range is
    treated as the single day ``start``. Max >= min is not enforced here.
    """
    days = max(1, (end - start).days + 1)
    logger.info(
        "Generating fallback data for %.4f, %.4f: %s (+%d days)",
        latitude, longitude, start.isoformat(), days - 1,
    )

    doy = np.array(
        [(start + timedelta(days=i)).timetuple().tm_yday for i in range(days)],
        dtype=float,
    )
    centre = base_temperature(latitude) + seasonal_offset(doy, latitude)

    t_min = centre - 5.0 + rng.normal(0.0, 3.0, days)
    t_max = centre + 5.0 + rng.normal(0.0, 3.0, days)
    precip = np.maximum(0.0, rng.normal(2.0, 5.0, days))
    wind = np.maximum(0.0, rng.normal(5.0, 3.0, days))
    humidity = np.clip(rng.normal(60.0, 15.0, days), 0.0, 100.0)
    pressure = rng.normal(1013.25, 20.0, days)

    return DailySeries(
        temperature_min=t_min.tolist(),
        temperature_max=t_max.tolist(),
        precipitation=precip.tolist(),
        wind_speed=wind.tolist(),
        humidity=humidity.tolist(),
        pressure=pressure.tolist(),
        synthetic=True,
    )
