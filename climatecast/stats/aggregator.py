"""Reduce a daily series into summary statistics."""

from collections.abc import Sequence

import numpy as np

from climatecast.models.series import DailySeries
from climatecast.models.statistics import WeatherStatistics

EXTREME_HEAT_C = 35.0
EXTREME_COLD_C = 0.0
HEAVY_RAIN_MM = 25.0
HIGH_WIND_MS = 15.0


def exceedance_probability(
    values: Sequence[float], threshold: float, below: bool = False
) -> float:
    """Percentage of values strictly beyond ``threshold``.

    Counts ``values > threshold``, or ``values < threshold`` when ``below``.
    An empty sequence yields 0.0.
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return 0.0
    hits = arr < threshold if below else arr > threshold
    return float(np.count_nonzero(hits) / arr.size * 100.0)


def _mean(values: Sequence[float]) -> float | None:
    return float(np.mean(values)) if len(values) else None


def _max(values: Sequence[float]) -> float | None:
    return float(np.max(values)) if len(values) else None


def aggregate(series: DailySeries) -> WeatherStatistics:
    avg_min = _mean(series.temperature_min)
    avg_max = _mean(series.temperature_max)
    avg_temp = (avg_min + avg_max) / 2 if avg_min is not None and avg_max is not None else None

    return WeatherStatistics(
        avg_temperature=avg_temp,
        avg_temperature_min=avg_min,
        avg_temperature_max=avg_max,
        avg_precipitation=_mean(series.precipitation),
        max_precipitation=_max(series.precipitation),
        avg_wind_speed=_mean(series.wind_speed),
        max_wind_speed=_max(series.wind_speed),
        avg_humidity=_mean(series.humidity),
        avg_pressure=_mean(series.pressure),
        extreme_heat_probability=exceedance_probability(series.temperature_max, EXTREME_HEAT_C),
        extreme_cold_probability=exceedance_probability(
            series.temperature_min, EXTREME_COLD_C, below=True
        ),
        heavy_rain_probability=exceedance_probability(series.precipitation, HEAVY_RAIN_MM),
        high_wind_probability=exceedance_probability(series.wind_speed, HIGH_WIND_MS),
    )
