"""Tests for the statistics aggregator."""

import pytest

from climatecast.models.series import DailySeries
from climatecast.stats.aggregator import aggregate, exceedance_probability


class TestExceedanceProbability:
    def test_strictly_above(self):
        assert exceedance_probability([34.0, 35.0, 36.0, 40.0], 35.0) == pytest.approx(50.0)

    def test_strictly_below(self):
        assert exceedance_probability([-1.0, 0.0, 2.0, -4.0], 0.0, below=True) == pytest.approx(50.0)

    def test_empty_is_zero(self):
        assert exceedance_probability([], 25.0) == 0.0
        assert exceedance_probability([], 0.0, below=True) == 0.0

    def test_all_exceed(self):
        assert exceedance_probability([16.0, 20.0], 15.0) == pytest.approx(100.0)

    def test_appending_exceeding_values_never_decreases(self):
        values = [3.0, 30.0, 10.0, 26.0, 0.0]
        previous = exceedance_probability(values, 25.0)
        for extra in (25.1, 40.0, 100.0, 26.0):
            values.append(extra)
            current = exceedance_probability(values, 25.0)
            assert current >= previous
            previous = current


class TestAggregate:
    def test_means_and_maxima(self):
        series = DailySeries(
            temperature_min=[18.0, 20.0, 22.0],
            temperature_max=[28.0, 30.0, 32.0],
            precipitation=[0.0, 5.0, 30.0],
            wind_speed=[4.0, 8.0, 18.0],
            humidity=[50.0, 70.0],
            pressure=[98.0, 99.0],
        )
        stats = aggregate(series)

        assert stats.avg_temperature_min == pytest.approx(20.0)
        assert stats.avg_temperature_max == pytest.approx(30.0)
        assert stats.avg_temperature == pytest.approx(25.0)
        assert stats.avg_precipitation == pytest.approx(35.0 / 3)
        assert stats.max_precipitation == pytest.approx(30.0)
        assert stats.avg_wind_speed == pytest.approx(10.0)
        assert stats.max_wind_speed == pytest.approx(18.0)
        assert stats.avg_humidity == pytest.approx(60.0)
        assert stats.avg_pressure == pytest.approx(98.5)

    def test_thresholds(self):
        series = DailySeries(
            temperature_min=[-2.0, 1.0, 3.0, -0.5],
            temperature_max=[36.0, 34.0, 35.0, 37.5],
            precipitation=[26.0, 25.0, 0.0, 1.0],
            wind_speed=[15.0, 15.5, 3.0, 2.0],
        )
        stats = aggregate(series)

        assert stats.extreme_heat_probability == pytest.approx(50.0)
        assert stats.extreme_cold_probability == pytest.approx(50.0)
        assert stats.heavy_rain_probability == pytest.approx(25.0)
        assert stats.high_wind_probability == pytest.approx(25.0)

    def test_missing_parameter_mean_is_none(self):
        stats = aggregate(DailySeries(temperature_min=[1.0], temperature_max=[5.0]))
        assert stats.avg_precipitation is None
        assert stats.max_precipitation is None
        assert stats.avg_wind_speed is None
        assert stats.avg_humidity is None
        assert stats.avg_pressure is None
        assert stats.heavy_rain_probability == 0.0

    def test_average_temperature_needs_both_extremes(self):
        stats = aggregate(DailySeries(temperature_max=[30.0, 32.0]))
        assert stats.avg_temperature_max == pytest.approx(31.0)
        assert stats.avg_temperature is None

    def test_empty_series(self):
        stats = aggregate(DailySeries())
        assert stats.avg_temperature is None
        assert stats.extreme_heat_probability == 0.0
        assert stats.extreme_cold_probability == 0.0
        assert stats.high_wind_probability == 0.0
