"""Response validation: a monitoring signal over synthesized forecasts."""

import logging

from climatecast.models.forecast import Forecast, ForecastResult, HistoricalContext, Probabilities
from climatecast.models.validation import ValidationResult

logger = logging.getLogger(__name__)

MIN_TEMPERATURE_C = -50.0
MAX_TEMPERATURE_C = 60.0
MAX_PRECIPITATION_MM = 500.0
MAX_WIND_SPEED_MS = 100.0
MIN_PRESSURE_HPA = 870.0
MAX_PRESSURE_HPA = 1085.0


def validate_response(result: ForecastResult | None) -> ValidationResult:
    """Check a forecast for internal consistency and realistic values."""
    errors: list[str] = []
    if result is None:
        return ValidationResult.from_errors(["Response cannot be null"])

    if result.forecast is not None:
        _check_temperatures(result.forecast, errors)
        _check_precipitation(result.forecast, errors)
        _check_wind(result.forecast, errors)
        _check_humidity(result.forecast, errors)
        _check_pressure(result.forecast, errors)
    else:
        errors.append("Forecast data is missing")

    if result.probabilities is not None:
        _check_probabilities(result.probabilities, errors)
    else:
        errors.append("Probability data is missing")

    if result.historical_context is not None:
        _check_historical_context(result.historical_context, errors)

    logger.info("Response validation completed. Found %d errors", len(errors))
    return ValidationResult.from_errors(errors)


def _realistic_temperature(value: float) -> bool:
    return MIN_TEMPERATURE_C <= value <= MAX_TEMPERATURE_C


def _check_temperatures(forecast: Forecast, errors: list[str]) -> None:
    t_min, t_avg, t_max = (
        forecast.temperature_min, forecast.temperature_avg, forecast.temperature_max
    )
    if t_min > t_max:
        errors.append("Minimum temperature cannot be higher than maximum temperature")
    if not t_min <= t_avg <= t_max:
        errors.append("Average temperature should be between minimum and maximum temperatures")
    for label, value in (("Minimum", t_min), ("Average", t_avg), ("Maximum", t_max)):
        if not _realistic_temperature(value):
            errors.append(f"{label} temperature is outside realistic range (-50C to 60C)")


def _check_precipitation(forecast: Forecast, errors: list[str]) -> None:
    if forecast.precipitation < 0:
        errors.append("Precipitation cannot be negative")
    if forecast.precipitation > MAX_PRECIPITATION_MM:
        errors.append("Precipitation value seems unrealistic (>500mm)")


def _check_wind(forecast: Forecast, errors: list[str]) -> None:
    if forecast.wind_speed < 0:
        errors.append("Wind speed cannot be negative")
    if forecast.wind_speed > MAX_WIND_SPEED_MS:
        errors.append("Wind speed seems unrealistic (>100 m/s)")
    if not 0 <= forecast.wind_direction < 360:
        errors.append("Wind direction must be in [0, 360) degrees")


def _check_humidity(forecast: Forecast, errors: list[str]) -> None:
    if forecast.humidity is not None and not 0 <= forecast.humidity <= 100:
        errors.append("Humidity must be between 0 and 100 percent")


def _check_pressure(forecast: Forecast, errors: list[str]) -> None:
    if not MIN_PRESSURE_HPA <= forecast.pressure <= MAX_PRESSURE_HPA:
        errors.append("Atmospheric pressure is outside realistic range (870-1085 hPa)")


def _check_probabilities(probabilities: Probabilities, errors: list[str]) -> None:
    fields = {
        "Extreme heat probability": probabilities.extreme_heat,
        "Extreme cold probability": probabilities.extreme_cold,
        "Heavy rain probability": probabilities.heavy_rain,
        "High wind probability": probabilities.high_wind,
        "Storm probability": probabilities.storm,
        "Comfortable weather probability": probabilities.comfortable_weather,
    }
    for label, value in fields.items():
        if not 0 <= value <= 100:
            errors.append(f"{label} must be between 0 and 100 percent")


def _check_historical_context(context: HistoricalContext, errors: list[str]) -> None:
    if context.years_of_data <= 0:
        errors.append("Years of data must be positive")
    avg_temp = context.historical_avg_temperature
    if avg_temp is not None and not _realistic_temperature(avg_temp):
        errors.append("Historical average temperature is outside realistic range")
    avg_precip = context.historical_avg_precipitation
    if avg_precip is not None and avg_precip < 0:
        errors.append("Historical average precipitation cannot be negative")
