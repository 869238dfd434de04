"""Forecast result models."""

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any


@dataclass(frozen=True)
class Forecast:
    temperature_min: float  # Celsius
    temperature_max: float
    temperature_avg: float
    humidity: float | None  # percent
    precipitation: float  # mm
    wind_speed: float  # m/s
    wind_direction: float  # degrees, [0, 360)
    pressure: float  # hPa
    sky_condition: str
    description: str


@dataclass(frozen=True)
class Probabilities:
    extreme_heat: float  # >35C
    extreme_cold: float  # <0C
    heavy_rain: float  # >25mm
    high_wind: float  # >15 m/s
    storm: float
    comfortable_weather: float


@dataclass(frozen=True)
class HistoricalContext:
    years_of_data: int
    historical_avg_temperature: float | None
    historical_avg_precipitation: float | None
    climate_trend: str  # warming, cooling, stable, unknown
    seasonal_pattern: str


@dataclass(frozen=True)
class ForecastResult:
    location_name: str | None
    latitude: float
    longitude: float
    country: str | None
    state: str | None
    city: str | None
    target_date: date
    forecast: Forecast
    probabilities: Probabilities
    historical_context: HistoricalContext
    generated_at: datetime
    data_source: str
    confidence_level: str

    def to_record(self) -> dict[str, Any]:
        """Flatten into a single-level dict. Nested blocks are prefixed."""
        record: dict[str, Any] = {}
        for key, value in asdict(self).items():
            if isinstance(value, dict):
                prefix = {
                    "forecast": "forecast",
                    "probabilities": "probability",
                    "historical_context": "history",
                }[key]
                for inner_key, inner_value in value.items():
                    record[f"{prefix}_{inner_key}"] = inner_value
            elif isinstance(value, (date, datetime)):
                record[key] = value.isoformat()
            else:
                record[key] = value
        return record
