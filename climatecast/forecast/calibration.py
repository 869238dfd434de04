"""Season-aware calibration of historical exceedance probabilities."""

from datetime import date

from climatecast.forecast.seasons import season_for, seasonal_comfort_bonus
from climatecast.models.common import Season, round1
from climatecast.models.forecast import Probabilities
from climatecast.models.statistics import WeatherStatistics

MAX_STORM_PROBABILITY = 50.0
MIN_COMFORT_PROBABILITY = 5.0
MAX_COMFORT_PROBABILITY = 95.0


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def calibrate_heat(probability: float, season: Season) -> float:
    if season == Season.SUMMER:
        return min(25.0, probability * 1.2)
    if season == Season.WINTER:
        return max(0.5, probability * 0.2)
    return probability * 0.8


def calibrate_cold(probability: float, season: Season) -> float:
    if season == Season.WINTER:
        return min(50.0, probability * 1.8)
    if season == Season.SUMMER:
        return max(0.1, probability * 0.05)
    return max(1.0, probability * 0.5)


def boost_rain(probability: float, avg_precipitation: float) -> float:
    if avg_precipitation > 15:
        probability += 25
    elif avg_precipitation > 5:
        probability += 15
    return _clamp_percent(probability)


def boost_wind(probability: float, avg_wind_speed: float) -> float:
    if avg_wind_speed > 15:
        probability += 20
    elif avg_wind_speed > 10:
        probability += 10
    return _clamp_percent(probability)


def storm_probability(high_wind_probability: float, heavy_rain_probability: float) -> float:
    """Joint wind-and-rain likelihood, capped at 50%."""
    joint = (high_wind_probability / 100.0) * (heavy_rain_probability / 100.0) * 100.0
    return min(MAX_STORM_PROBABILITY, joint)


def temperature_comfort_score(avg_temperature: float) -> float:
    """100 across 18-25C, linear falloff to 40 at 15/28C, then floor scores."""
    if 18 <= avg_temperature <= 25:
        return 100.0
    if 15 <= avg_temperature < 18:
        return 40.0 + (avg_temperature - 15) * 20.0
    if 25 < avg_temperature <= 28:
        return 100.0 - (avg_temperature - 25) * 20.0
    if 10 <= avg_temperature <= 32:
        return 20.0
    return 5.0


def comfortable_weather_probability(
    avg_temperature: float,
    avg_wind_speed: float,
    avg_precipitation: float,
    bonus: float,
) -> float:
    temp_score = temperature_comfort_score(avg_temperature)
    wind_score = max(10.0, 100.0 - avg_wind_speed * 8.0)
    precip_score = max(20.0, 100.0 - avg_precipitation * 15.0)
    combined = temp_score * 0.5 + wind_score * 0.3 + precip_score * 0.2 + bonus
    return max(MIN_COMFORT_PROBABILITY, min(MAX_COMFORT_PROBABILITY, combined))


def calibrate_probabilities(
    stats: WeatherStatistics,
    target_date: date,
    latitude: float,
    avg_temperature: float,
) -> Probabilities:
    """Build the rounded probability block.

    ``avg_temperature`` is the historical mean or, when that is missing,
    the climatological baseline chosen by the caller.
    """
    season = season_for(target_date, latitude)
    avg_precip = stats.avg_precipitation or 0.0
    avg_wind = stats.avg_wind_speed or 0.0

    comfort = comfortable_weather_probability(
        avg_temperature, avg_wind, avg_precip,
        seasonal_comfort_bonus(target_date, latitude),
    )

    return Probabilities(
        extreme_heat=round1(calibrate_heat(stats.extreme_heat_probability, season)),
        extreme_cold=round1(calibrate_cold(stats.extreme_cold_probability, season)),
        heavy_rain=round1(boost_rain(stats.heavy_rain_probability, avg_precip)),
        high_wind=round1(boost_wind(stats.high_wind_probability, avg_wind)),
        storm=round1(
            storm_probability(stats.high_wind_probability, stats.heavy_rain_probability)
        ),
        comfortable_weather=round1(comfort),
    )
