"""Season, hemisphere and climate-zone lookups used for narration."""

from datetime import date

from climatecast.models.common import ClimateZone, Hemisphere, Season

_NORTHERN_SEASON_BY_MONTH: dict[int, Season] = {
    12: Season.WINTER, 1: Season.WINTER, 2: Season.WINTER,
    3: Season.SPRING, 4: Season.SPRING, 5: Season.SPRING,
    6: Season.SUMMER, 7: Season.SUMMER, 8: Season.SUMMER,
    9: Season.AUTUMN, 10: Season.AUTUMN, 11: Season.AUTUMN,
}

_OPPOSITE_SEASON: dict[Season, Season] = {
    Season.WINTER: Season.SUMMER,
    Season.SPRING: Season.AUTUMN,
    Season.SUMMER: Season.WINTER,
    Season.AUTUMN: Season.SPRING,
}

_WARMING = "warming temperatures, increasing daylight, variable precipitation"
_COOLING = "cooling temperatures, decreasing daylight, increased precipitation"
_GROWING = "warm temperatures, thunderstorm activity, peak growing season"

SEASONAL_TEMPLATES: dict[tuple[ClimateZone, Season], str] = {
    (ClimateZone.SUBTROPICAL, Season.WINTER): "mild temperatures, dry conditions, pleasant weather",
    (ClimateZone.MEDITERRANEAN, Season.WINTER): "mild temperatures, moderate precipitation, comfortable conditions",
    (ClimateZone.TEMPERATE, Season.WINTER): "cold temperatures, variable precipitation, possible snow",
    (ClimateZone.POLAR, Season.WINTER): "very cold, limited daylight, frozen precipitation",
    (ClimateZone.SUBTROPICAL, Season.SPRING): "warming temperatures, dry conditions, increasing heat",
    (ClimateZone.MEDITERRANEAN, Season.SPRING): _WARMING,
    (ClimateZone.TEMPERATE, Season.SPRING): _WARMING,
    (ClimateZone.POLAR, Season.SPRING): _WARMING,
    (ClimateZone.SUBTROPICAL, Season.SUMMER): "very hot temperatures, dry conditions, intense sun",
    (ClimateZone.MEDITERRANEAN, Season.SUMMER): "hot temperatures, dry conditions, clear skies",
    (ClimateZone.TEMPERATE, Season.SUMMER): _GROWING,
    (ClimateZone.POLAR, Season.SUMMER): _GROWING,
    (ClimateZone.SUBTROPICAL, Season.AUTUMN): "cooling temperatures, still dry, pleasant weather returns",
    (ClimateZone.MEDITERRANEAN, Season.AUTUMN): _COOLING,
    (ClimateZone.TEMPERATE, Season.AUTUMN): _COOLING,
    (ClimateZone.POLAR, Season.AUTUMN): _COOLING,
}

# Monthly mean temperature (C), northern-hemisphere calendar, by |latitude| band
_BASELINE_BANDS: list[tuple[float, tuple[float, ...]]] = [
    (30.0, (17, 19.5, 23, 28, 32, 35, 37, 37, 33, 28, 22, 18)),
    (50.0, (7, 9, 13, 18, 23, 28, 31, 30, 26, 20, 14, 9)),
    (91.0, (1.5, 3.5, 8.5, 13.5, 18.5, 23.5, 26.5, 25.5, 21, 15, 9, 4)),
]

TROPICAL_LATITUDE = 23.5
POLAR_COMFORT_LATITUDE = 60.0


def hemisphere_for(latitude: float) -> Hemisphere:
    return Hemisphere.SOUTHERN if latitude < 0 else Hemisphere.NORTHERN


def season_for(target_date: date, latitude: float) -> Season:
    season = _NORTHERN_SEASON_BY_MONTH[target_date.month]
    if hemisphere_for(latitude) == Hemisphere.SOUTHERN:
        return _OPPOSITE_SEASON[season]
    return season


def climate_zone_for(latitude: float) -> ClimateZone:
    abs_lat = abs(latitude)
    if abs_lat < 30:
        return ClimateZone.SUBTROPICAL
    if abs_lat < 50:
        return ClimateZone.MEDITERRANEAN
    if abs_lat < 65:
        return ClimateZone.TEMPERATE
    return ClimateZone.POLAR


def seasonal_pattern(target_date: date, latitude: float) -> str:
    """E.g. 'Northern Hemisphere Winter (Mediterranean zone) - mild temperatures, ...'."""
    season = season_for(target_date, latitude)
    zone = climate_zone_for(latitude)
    hemisphere = hemisphere_for(latitude)
    return (
        f"{hemisphere.value} Hemisphere {season.value} ({zone.value} zone)"
        f" - {SEASONAL_TEMPLATES[(zone, season)]}"
    )


def seasonal_baseline(target_date: date, latitude: float) -> float:
    """Typical daily mean temperature for the month at this latitude band."""
    month = target_date.month
    if hemisphere_for(latitude) == Hemisphere.SOUTHERN:
        month = (month + 5) % 12 + 1
    abs_lat = abs(latitude)
    for upper, monthly in _BASELINE_BANDS:
        if abs_lat < upper:
            return float(monthly[month - 1])
    return float(_BASELINE_BANDS[-1][1][month - 1])


def seasonal_comfort_bonus(target_date: date, latitude: float) -> float:
    abs_lat = abs(latitude)
    if abs_lat < TROPICAL_LATITUDE:
        return 10.0
    if abs_lat < POLAR_COMFORT_LATITUDE:
        if season_for(target_date, latitude) in (Season.SPRING, Season.AUTUMN):
            return 15.0
        return 5.0
    return -5.0
