"""Summary statistics derived from a daily series."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherStatistics:
    """Means are None when the underlying sub-series had no valid days.

    Exceedance probabilities are percentages in [0, 100].
    """

    avg_temperature: float | None = None
    avg_temperature_min: float | None = None
    avg_temperature_max: float | None = None
    avg_precipitation: float | None = None
    max_precipitation: float | None = None
    avg_wind_speed: float | None = None
    max_wind_speed: float | None = None
    avg_humidity: float | None = None
    avg_pressure: float | None = None
    extreme_heat_probability: float = 0.0
    extreme_cold_probability: float = 0.0
    heavy_rain_probability: float = 0.0
    high_wind_probability: float = 0.0
