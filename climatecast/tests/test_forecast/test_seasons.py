"""Tests for season, hemisphere and climate-zone lookups."""

from datetime import date

import pytest

from climatecast.forecast.seasons import (
    SEASONAL_TEMPLATES,
    climate_zone_for,
    hemisphere_for,
    season_for,
    seasonal_baseline,
    seasonal_comfort_bonus,
    seasonal_pattern,
)
from climatecast.models.common import ClimateZone, Hemisphere, Season


class TestSeasonFor:
    def test_january_north_is_winter(self):
        assert season_for(date(2026, 1, 15), 40.0) == Season.WINTER

    def test_january_south_is_summer(self):
        assert season_for(date(2026, 1, 15), -40.0) == Season.SUMMER

    @pytest.mark.parametrize(
        "month,north,south",
        [
            (3, Season.SPRING, Season.AUTUMN),
            (7, Season.SUMMER, Season.WINTER),
            (10, Season.AUTUMN, Season.SPRING),
            (12, Season.WINTER, Season.SUMMER),
        ],
    )
    def test_hemispheres_rotated(self, month, north, south):
        assert season_for(date(2026, month, 1), 10.0) == north
        assert season_for(date(2026, month, 1), -10.0) == south

    def test_equator_counts_as_northern(self):
        assert hemisphere_for(0.0) == Hemisphere.NORTHERN
        assert season_for(date(2026, 7, 1), 0.0) == Season.SUMMER


class TestClimateZone:
    @pytest.mark.parametrize(
        "latitude,zone",
        [
            (0.0, ClimateZone.SUBTROPICAL),
            (-29.9, ClimateZone.SUBTROPICAL),
            (30.0, ClimateZone.MEDITERRANEAN),
            (49.9, ClimateZone.MEDITERRANEAN),
            (-50.0, ClimateZone.TEMPERATE),
            (64.9, ClimateZone.TEMPERATE),
            (65.0, ClimateZone.POLAR),
            (-90.0, ClimateZone.POLAR),
        ],
    )
    def test_bands(self, latitude, zone):
        assert climate_zone_for(latitude) == zone


class TestSeasonalPattern:
    def test_every_zone_and_season_has_template(self):
        for zone in ClimateZone:
            for season in Season:
                assert (zone, season) in SEASONAL_TEMPLATES

    def test_northern_subtropical_winter(self):
        text = seasonal_pattern(date(2025, 12, 25), 25.0)
        assert text.startswith("Northern Hemisphere Winter (Subtropical zone) - ")
        assert "mild temperatures, dry conditions" in text

    def test_southern_temperate_summer(self):
        text = seasonal_pattern(date(2026, 1, 10), -55.0)
        assert text.startswith("Southern Hemisphere Summer (Temperate zone)")
        assert "peak growing season" in text


class TestSeasonalBaseline:
    def test_northern_mid_latitude_july(self):
        assert seasonal_baseline(date(2026, 7, 1), 40.0) == 31.0

    def test_southern_months_shifted(self):
        assert seasonal_baseline(date(2026, 1, 1), -40.0) == seasonal_baseline(date(2026, 7, 1), 40.0)

    def test_polar_uses_last_band(self):
        assert seasonal_baseline(date(2026, 1, 1), 89.0) == 1.5


class TestComfortBonus:
    def test_tropical(self):
        assert seasonal_comfort_bonus(date(2026, 1, 1), 10.0) == 10.0

    def test_temperate_shoulder(self):
        assert seasonal_comfort_bonus(date(2026, 4, 1), 45.0) == 15.0

    def test_temperate_peak(self):
        assert seasonal_comfort_bonus(date(2026, 7, 1), 45.0) == 5.0

    def test_polar(self):
        assert seasonal_comfort_bonus(date(2026, 7, 1), 70.0) == -5.0
