"""Forecast synthesizer: turns historical statistics into a single-day forecast."""

import logging
from datetime import date, datetime

import numpy as np

from climatecast.forecast.calibration import calibrate_probabilities
from climatecast.forecast.pressure import (
    adjust_for_weather,
    correct_pressure_units,
    realistic_base_pressure,
    tighten_to_weather_band,
)
from climatecast.forecast.seasons import season_for, seasonal_baseline, seasonal_pattern
from climatecast.models.common import round1, utc_now
from climatecast.models.forecast import Forecast, ForecastResult, HistoricalContext
from climatecast.models.request import ForecastRequest
from climatecast.models.statistics import WeatherStatistics

logger = logging.getLogger(__name__)

TEMPERATURE_SPREAD_C = 3.0
TEMPERATURE_EDGE_SPREAD_C = 1.5
TEMPERATURE_SWAP_MARGIN_C = 2.0
AVERAGE_JITTER_C = 0.5
MISSING_TEMPERATURE_HALF_RANGE_C = 5.0
PRECIP_FACTOR_SPREAD = 2.0
WIND_SPREAD_MS = 2.0
HUMIDITY_SPREAD = 10.0
PRESSURE_SPREAD_HPA = 8.0

DEFAULT_DATA_SOURCE = "historical-archive + statistical analysis"


def perturb_temperatures(
    avg_min: float, avg_max: float, rng: np.random.Generator
) -> tuple[float, float, float]:
    """Return (min, avg, max) with min < max and min <= avg <= max."""
    shift = rng.normal(0.0, TEMPERATURE_SPREAD_C)
    t_min = avg_min + shift - abs(rng.normal(0.0, TEMPERATURE_EDGE_SPREAD_C))
    t_max = avg_max + shift + abs(rng.normal(0.0, TEMPERATURE_EDGE_SPREAD_C))

    if t_min >= t_max:
        t_min, t_max = t_max - TEMPERATURE_SWAP_MARGIN_C, t_min + TEMPERATURE_SWAP_MARGIN_C

    t_avg = (t_min + t_max) / 2 + rng.normal(0.0, AVERAGE_JITTER_C)
    t_avg = min(max(t_avg, t_min), t_max)
    return float(t_min), float(t_avg), float(t_max)


def sky_condition(precipitation: float) -> str:
    if precipitation > 20:
        return "Overcast"
    if precipitation > 5:
        return "Cloudy"
    if precipitation > 1:
        return "Partly Cloudy"
    return "Clear"


def wind_description(wind_speed: float) -> str:
    if wind_speed < 3.0:
        return "light winds"
    if wind_speed < 7.0:
        return "moderate winds"
    if wind_speed < 12.0:
        return "breezy conditions"
    if wind_speed < 18.0:
        return "strong winds"
    return "very strong winds"


def weather_description(
    avg_temperature: float,
    precipitation: float,
    wind_speed: float,
    target_date: date,
    latitude: float,
) -> str:
    """Describe the day relative to the typical temperature for the season."""
    baseline = seasonal_baseline(target_date, latitude)
    diff = avg_temperature - baseline

    if diff > 5:
        text = "Unusually warm"
    elif diff > 2:
        text = "Warm"
    elif diff > -2:
        text = "Pleasant"
    elif diff > -5:
        text = "Cool"
    else:
        text = "Cold"

    if abs(diff) > 5:
        text += f" for {season_for(target_date, latitude).value.lower()}"

    if precipitation > 20:
        text += " with heavy rain"
    elif precipitation > 5:
        text += " with light rain"
    elif precipitation > 1:
        text += " with possible showers"
    else:
        text += " and dry"

    return f"{text}, {wind_description(wind_speed)}"


def climate_trend(avg_temperature: float | None) -> str:
    if avg_temperature is None:
        return "unknown"
    if avg_temperature > 25:
        return "warming"
    if avg_temperature < 10:
        return "cooling"
    return "stable"


def confidence_level(stats: WeatherStatistics) -> str:
    has_temp = stats.avg_temperature is not None
    has_precip = stats.avg_precipitation is not None
    if has_temp and has_precip and stats.avg_wind_speed is not None and stats.avg_humidity is not None:
        return "High (85-90%)"
    if has_temp and has_precip:
        return "Medium (70-80%)"
    return "Low (50-65%)"


class ForecastSynthesizer:
    def __init__(self, years_of_data: int, data_source: str = DEFAULT_DATA_SOURCE):
        self.years_of_data = years_of_data
        self.data_source = data_source

    def synthesize(
        self,
        stats: WeatherStatistics,
        request: ForecastRequest,
        target_date: date,
        rng: np.random.Generator,
        now: datetime | None = None,
    ) -> ForecastResult:
        latitude = float(request.latitude)
        longitude = float(request.longitude)

        baseline = seasonal_baseline(target_date, latitude)
        reference_temp = stats.avg_temperature if stats.avg_temperature is not None else baseline

        forecast = self.build_forecast(stats, target_date, latitude, rng, baseline)
        probabilities = calibrate_probabilities(stats, target_date, latitude, reference_temp)
        context = HistoricalContext(
            years_of_data=self.years_of_data,
            historical_avg_temperature=_maybe_round(stats.avg_temperature),
            historical_avg_precipitation=_maybe_round(stats.avg_precipitation),
            climate_trend=climate_trend(stats.avg_temperature),
            seasonal_pattern=seasonal_pattern(target_date, latitude),
        )

        return ForecastResult(
            location_name=request.name,
            latitude=latitude,
            longitude=longitude,
            country=request.country,
            state=request.state,
            city=request.city,
            target_date=target_date,
            forecast=forecast,
            probabilities=probabilities,
            historical_context=context,
            generated_at=now or utc_now(),
            data_source=self.data_source,
            confidence_level=confidence_level(stats),
        )

    def build_forecast(
        self,
        stats: WeatherStatistics,
        target_date: date,
        latitude: float,
        rng: np.random.Generator,
        baseline: float,
    ) -> Forecast:
        if stats.avg_temperature_min is None or stats.avg_temperature_max is None:
            logger.info("No temperature history, using %.1fC seasonal baseline", baseline)
            avg_min = baseline - MISSING_TEMPERATURE_HALF_RANGE_C
            avg_max = baseline + MISSING_TEMPERATURE_HALF_RANGE_C
        else:
            avg_min, avg_max = stats.avg_temperature_min, stats.avg_temperature_max

        t_min, t_avg, t_max = perturb_temperatures(avg_min, avg_max, rng)

        precip_factor = max(0.0, rng.normal(1.0, PRECIP_FACTOR_SPREAD))
        precipitation = round1((stats.avg_precipitation or 0.0) * precip_factor)
        wind_speed = round1(
            (stats.avg_wind_speed or 0.0) + max(0.0, rng.normal(0.0, WIND_SPREAD_MS))
        )

        humidity = None
        if stats.avg_humidity is not None:
            humidity = min(100.0, max(0.0, round1(
                stats.avg_humidity + rng.normal(0.0, HUMIDITY_SPREAD)
            )))

        base_pressure = realistic_base_pressure(stats.avg_pressure, rng)
        pressure = adjust_for_weather(
            base_pressure + rng.normal(0.0, PRESSURE_SPREAD_HPA), precipitation, wind_speed
        )
        pressure = tighten_to_weather_band(correct_pressure_units(pressure), rng)

        wind_direction = round1(rng.uniform(0.0, 360.0)) % 360.0

        return Forecast(
            temperature_min=round1(t_min),
            temperature_max=round1(t_max),
            temperature_avg=round1(t_avg),
            humidity=humidity,
            precipitation=precipitation,
            wind_speed=wind_speed,
            wind_direction=wind_direction,
            pressure=round1(pressure),
            sky_condition=sky_condition(precipitation),
            description=weather_description(t_avg, precipitation, wind_speed, target_date, latitude),
        )


def _maybe_round(value: float | None) -> float | None:
    return None if value is None else round1(value)
