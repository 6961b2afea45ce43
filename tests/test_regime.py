"""
Unit tests for the regime model and base weather evolution.

Tests step_regime transitions and step_base_weather from
src/weather_simulation/regime.py.
"""

import pytest

from src.weather_simulation import (
    Season,
    Sky,
    Temperature,
    WindDirection,
    WindForce,
    Precipitation,
    WeatherRegime,
    WeatherState,
    ConfigurationError,
    create_base_from_climate,
    step_regime,
    step_base_weather,
)
from src.weather_simulation.regime import coerce_regime, regime_temperature_target


class TestStepRegime:
    """Tests for regime transitions."""

    @pytest.mark.parametrize("prev,r,expected", [
        (WeatherRegime.FAIR, 0.5, WeatherRegime.FAIR),
        (WeatherRegime.FAIR, 0.9, WeatherRegime.UNSETTLED),
        (WeatherRegime.FAIR, 0.92, WeatherRegime.UNSETTLED),
        (WeatherRegime.FAIR, 0.95, WeatherRegime.HEATWAVE),
        (WeatherRegime.FAIR, 0.97, WeatherRegime.COLD_SNAP),
        (WeatherRegime.FAIR, 0.999, WeatherRegime.STORMY),
        (WeatherRegime.UNSETTLED, 0.5, WeatherRegime.UNSETTLED),
        (WeatherRegime.UNSETTLED, 0.92, WeatherRegime.FAIR),
        (WeatherRegime.UNSETTLED, 0.96, WeatherRegime.STORMY),
        (WeatherRegime.STORMY, 0.5, WeatherRegime.STORMY),
        (WeatherRegime.STORMY, 0.95, WeatherRegime.UNSETTLED),
        (WeatherRegime.STORMY, 0.99, WeatherRegime.FAIR),
        (WeatherRegime.HEATWAVE, 0.97, WeatherRegime.HEATWAVE),
        (WeatherRegime.HEATWAVE, 0.99, WeatherRegime.FAIR),
        (WeatherRegime.COLD_SNAP, 0.5, WeatherRegime.COLD_SNAP),
        (WeatherRegime.COLD_SNAP, 0.98, WeatherRegime.FAIR),
    ])
    def test_transition_thresholds(self, scripted_rng, prev, r, expected):
        """Test the cumulative transition thresholds of every regime."""
        rng = scripted_rng([r])
        assert step_regime(prev, rng) == expected
        assert rng.calls == 1

    def test_accepts_raw_integers(self, scripted_rng):
        """Test that integer regime values are accepted."""
        assert step_regime(3, scripted_rng([0.99])) == WeatherRegime.FAIR


class TestCoerceRegime:
    """Tests for regime coercion."""

    def test_names_and_values(self):
        """Test coercion from names and integers."""
        assert coerce_regime("stormy") == WeatherRegime.STORMY
        assert coerce_regime(4) == WeatherRegime.COLD_SNAP

    @pytest.mark.parametrize("bad", ["monsoon", 9])
    def test_unknown_regime_raises(self, bad):
        """Test that unknown regimes are rejected."""
        with pytest.raises(ConfigurationError):
            coerce_regime(bad)


class TestRegimeTemperatureTarget:
    """Tests for the regime nudge on the temperature target."""

    def test_heatwave_raises_target(self):
        """Test that a heatwave raises the target one band."""
        target = regime_temperature_target(45, Season.SUMMER, WeatherRegime.HEATWAVE)
        assert target == Temperature.HOT

    def test_heatwave_capped_at_furnace(self):
        """Test that a heatwave cannot push the target past FURNACE."""
        assert regime_temperature_target(0, Season.SUMMER, WeatherRegime.HEATWAVE) == Temperature.FURNACE
        assert regime_temperature_target(-5, Season.SUMMER, WeatherRegime.HEATWAVE) == Temperature.FURNACE

    def test_cold_snap_floored_at_frigid(self):
        """Test that a cold snap cannot push the target below FRIGID."""
        assert regime_temperature_target(80, Season.WINTER, WeatherRegime.COLD_SNAP) == Temperature.FRIGID

    def test_other_regimes_leave_baseline(self):
        """Test that fair weather uses the climatic baseline."""
        assert regime_temperature_target(45, Season.WINTER, WeatherRegime.FAIR) == Temperature.COLD


class TestStepBaseWeather:
    """Tests for the global base weather evolution."""

    def test_sticky_draws_hold_everything(self, constant_rng):
        """Test that mid-range draws leave the base unchanged with five draws."""
        prev = create_base_from_climate(45, Season.WINTER)
        rng = constant_rng(0.5)
        new = step_base_weather(prev, 45, Season.WINTER, WeatherRegime.FAIR, rng)
        assert new == prev
        assert new is not prev
        assert rng.calls == 5

    def test_bursts_move_toward_fair_targets(self, constant_rng):
        """Test that high draws move each band toward the FAIR targets."""
        prev = create_base_from_climate(45, Season.WINTER)
        new = step_base_weather(prev, 45, Season.WINTER, WeatherRegime.FAIR, constant_rng(0.95))
        assert new.temp == Temperature.COLD
        assert new.sky == Sky.MOSTLY_CLEAR
        assert new.precip == Precipitation.NONE
        assert new.wind_force == WindForce.LIGHT_BREEZE
        assert new.wind_dir == WindDirection.NORTHWEST

    def test_stormy_targets(self, constant_rng):
        """Test that stormy weather pushes clouds, rain and wind up."""
        prev = WeatherState(sky=Sky.CLEAR, temp=Temperature.COOL, wind_dir=WindDirection.NORTH,
                            wind_force=WindForce.CALM, precip=Precipitation.NONE)
        new = step_base_weather(prev, 45, Season.SPRING, WeatherRegime.STORMY, constant_rng(0.95))
        assert new.sky == Sky.MOSTLY_CLEAR
        assert new.precip == Precipitation.MIST
        assert new.wind_force == WindForce.LIGHT_AIR
        assert new.wind_dir == WindDirection.NORTHEAST

    def test_heatwave_warms_toward_nudged_target(self, constant_rng):
        """Test that a heatwave steps temperature toward baseline + 1."""
        prev = WeatherState(sky=Sky.CLEAR, temp=Temperature.WARM, wind_dir=WindDirection.WEST,
                            wind_force=WindForce.LIGHT_AIR, precip=Precipitation.NONE)
        new = step_base_weather(prev, 45, Season.SUMMER, WeatherRegime.HEATWAVE, constant_rng(0.95))
        assert new.temp == Temperature.HOT
        assert new.sky == Sky.CLEAR

    def test_does_not_mutate_previous(self, constant_rng):
        """Test that the previous state is left untouched."""
        prev = create_base_from_climate(45, Season.WINTER)
        snapshot = prev.copy()
        step_base_weather(prev, 45, Season.WINTER, WeatherRegime.STORMY, constant_rng(0.95))
        assert prev == snapshot
