"""Surface pressure unit repair and weather coupling."""

import logging

import numpy as np

logger = logging.getLogger(__name__)

STANDARD_PRESSURE_HPA = 1013.25
PHYSICAL_MIN_HPA = 300.0
PHYSICAL_MAX_HPA = 1100.0
WEATHER_BAND_MIN_HPA = 980.0
WEATHER_BAND_MAX_HPA = 1050.0
BAND_RESAMPLE_SPREAD_HPA = 5.0
BAND_RESAMPLE_LIMIT_HPA = 10.0


def correct_pressure_units(pressure: float) -> float:
    """Map a pressure in a wrong unit or with a dropped digit back to hPa.

    Values already in [300, 1100] are returned unchanged. Anything that is
    still outside that range after rescaling becomes the standard atmosphere.
    """
    if _is_physical(pressure):
        return pressure

    corrected = pressure
    if 30 <= pressure <= 110:
        logger.debug("Converting pressure from kPa to hPa: %s", pressure)
        corrected = pressure * 10
    elif 10 <= pressure < 30:
        logger.debug("Fixing low pressure value (likely missing digit): %s", pressure)
        corrected = pressure * 10
    elif pressure > 10000:
        logger.debug("Converting pressure from Pa to hPa: %s", pressure)
        corrected = pressure / 100

    if _is_physical(corrected):
        return corrected
    logger.warning(
        "Pressure value %s outside reasonable range, defaulting to %.2f hPa",
        pressure, STANDARD_PRESSURE_HPA,
    )
    return STANDARD_PRESSURE_HPA


def _is_physical(pressure: float) -> bool:
    return PHYSICAL_MIN_HPA <= pressure <= PHYSICAL_MAX_HPA


def tighten_to_weather_band(pressure: float, rng: np.random.Generator) -> float:
    """Resample a pressure outside [980, 1050] to just inside the nearer edge."""
    if WEATHER_BAND_MIN_HPA <= pressure <= WEATHER_BAND_MAX_HPA:
        return pressure
    step = min(abs(rng.normal(0.0, BAND_RESAMPLE_SPREAD_HPA)), BAND_RESAMPLE_LIMIT_HPA)
    if pressure < WEATHER_BAND_MIN_HPA:
        adjusted = WEATHER_BAND_MIN_HPA + step
    else:
        adjusted = WEATHER_BAND_MAX_HPA - step
    logger.debug("Tightening pressure %.1f into weather band: %.1f", pressure, adjusted)
    return adjusted


def realistic_base_pressure(
    avg_pressure: float | None, rng: np.random.Generator
) -> float:
    if avg_pressure is None:
        return STANDARD_PRESSURE_HPA
    return tighten_to_weather_band(correct_pressure_units(avg_pressure), rng)


def adjust_for_weather(pressure: float, precipitation: float, wind_speed: float) -> float:
    """Lower pressure for wet or windy conditions, raise it for dry calm ones."""
    adjustment = 0.0

    if precipitation > 10:
        adjustment -= 15
    elif precipitation > 5:
        adjustment -= 8
    elif precipitation > 1:
        adjustment -= 3
    else:
        adjustment += 5

    if wind_speed > 12:
        adjustment -= 8
    elif wind_speed > 7:
        adjustment -= 3

    return pressure + adjustment
