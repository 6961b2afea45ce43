"""
Unit tests for the solar geometry, diurnal offset and planetary clock.

Tests src/weather_simulation/planetary.py.
"""

import math

import pytest

from src.weather_simulation import (
    Biome,
    BiomeWeatherProfile,
    ConfigurationError,
    DEFAULT_BIOME_WEATHER_PROFILES,
    PlanetaryClock,
    Season,
    compute_diurnal_temp_offset,
    compute_sunrise_sunset_hours,
)
from src.weather_simulation.planetary import solar_declination


class TestSolarDeclination:
    """Tests for the declination cycle."""

    def test_equinox_and_solstices(self):
        """Test declination at the quarter points of the year."""
        tilt = math.radians(23.44)
        assert solar_declination(0) == pytest.approx(0.0, abs=1e-12)
        assert solar_declination(90) == pytest.approx(tilt)
        assert solar_declination(180) == pytest.approx(0.0, abs=1e-12)
        assert solar_declination(270) == pytest.approx(-tilt)

    def test_wraps_over_the_year(self):
        """Test that day 450 matches day 90."""
        assert solar_declination(450) == pytest.approx(solar_declination(90))


class TestSunriseSunset:
    """Tests for sunrise, sunset and day length."""

    def test_equator_at_equinox(self):
        """Test a twelve hour day centred on noon."""
        sun = compute_sunrise_sunset_hours(0, 0)
        assert sun["day_length"] == pytest.approx(12.0)
        assert sun["sunrise"] == pytest.approx(6.0)
        assert sun["sunset"] == pytest.approx(18.0)

    def test_midnight_sun(self):
        """Test that a high-latitude summer solstice never gets dark."""
        sun = compute_sunrise_sunset_hours(80, 90)
        assert sun == {"sunrise": 0.0, "sunset": 24.0, "day_length": 24.0}

    def test_polar_night(self):
        """Test that a high-latitude winter solstice never gets light."""
        sun = compute_sunrise_sunset_hours(80, 270)
        assert sun["day_length"] == 0.0
        assert math.isnan(sun["sunrise"])
        assert math.isnan(sun["sunset"])

    def test_southern_hemisphere_is_reversed(self):
        """Test that the northern summer solstice is polar night in the far south."""
        assert compute_sunrise_sunset_hours(-80, 90)["day_length"] == 0.0

    @pytest.mark.parametrize("day", [0, 180])
    def test_high_latitude_equinox_is_not_polar(self, day):
        """Test that equinoxes give a normal day even at 80 degrees."""
        sun = compute_sunrise_sunset_hours(80, day)
        assert sun["day_length"] == pytest.approx(12.0, abs=1e-6)

    def test_polar_threshold(self):
        """Test the transition into midnight sun at the solstice."""
        assert compute_sunrise_sunset_hours(60, 90)["day_length"] < 24.0
        assert compute_sunrise_sunset_hours(66, 90)["day_length"] < 24.0
        assert compute_sunrise_sunset_hours(67, 90)["day_length"] == 24.0

    def test_summer_days_are_longer(self):
        """Test that temperate summer days exceed twelve hours."""
        sun = compute_sunrise_sunset_hours(45, 90)
        assert 12.0 < sun["day_length"] < 24.0
        assert sun["sunrise"] + sun["sunset"] == pytest.approx(24.0)

    def test_custom_solar_noon(self):
        """Test that sunrise and sunset are centred on the solar noon."""
        sun = compute_sunrise_sunset_hours(0, 0, solar_noon_hour=20)
        assert sun["sunrise"] == pytest.approx(14.0)
        assert sun["sunset"] == pytest.approx(2.0)


class TestDiurnalTempOffset:
    """Tests for the diurnal temperature band offset."""

    def test_afternoon_peak(self):
        """Test the warm offset two hours after solar noon."""
        assert compute_diurnal_temp_offset(0, 0, 14.0) == 1

    def test_night_minimum(self):
        """Test the cold offset twelve hours from the peak."""
        assert compute_diurnal_temp_offset(0, 0, 2.0) == -1

    def test_morning_is_neutral(self):
        """Test that the cosine crosses zero six hours before the peak."""
        assert compute_diurnal_temp_offset(0, 0, 8.0) == 0

    def test_desert_amplitude(self):
        """Test that a desert swings further than the default."""
        desert = DEFAULT_BIOME_WEATHER_PROFILES[Biome.DESERT_DUNES]
        assert compute_diurnal_temp_offset(0, 0, 14.0, desert) == 2

    def test_pre_dawn_cooling(self):
        """Test that a night bias deepens the cold just before sunrise."""
        without_bias = BiomeWeatherProfile(diurnal_temp_amplitude=3.0)
        with_bias = BiomeWeatherProfile(diurnal_temp_amplitude=3.0, diurnal_night_bias=1.5)
        assert compute_diurnal_temp_offset(0, 0, 5.0, without_bias) == -2
        assert compute_diurnal_temp_offset(0, 0, 5.0, with_bias) == -3

    def test_no_pre_dawn_cooling_outside_window(self):
        """Test that the night bias does not apply during the day."""
        without_bias = BiomeWeatherProfile(diurnal_temp_amplitude=3.0)
        with_bias = BiomeWeatherProfile(diurnal_temp_amplitude=3.0, diurnal_night_bias=1.5)
        for hour in (10.0, 14.0, 19.0):
            assert (compute_diurnal_temp_offset(0, 0, hour, without_bias)
                    == compute_diurnal_temp_offset(0, 0, hour, with_bias))

    def test_polar_night_ignores_night_bias(self):
        """Test that there is no pre-dawn shaping without a day/night cycle."""
        desert = BiomeWeatherProfile(diurnal_temp_amplitude=3.0, diurnal_night_bias=1.5)
        assert compute_diurnal_temp_offset(80, 270, 5.0, desert) == -1

    def test_profile_without_diurnal_fields_uses_default(self):
        """Test that a profile with only offsets behaves like no profile."""
        profile = BiomeWeatherProfile(temp_offset=2)
        for hour in (2.0, 8.0, 14.0):
            assert compute_diurnal_temp_offset(0, 0, hour, profile) == compute_diurnal_temp_offset(0, 0, hour)


class TestPlanetaryClock:
    """Tests for the planetary clock."""

    def test_start_state(self):
        """Test the initial date."""
        clock = PlanetaryClock(start_day=10, start_hour=6.5)
        assert clock.get_current_date() == (10, 6.5)

    def test_day_and_year_rollover(self):
        """Test advancing past midnight on the last day of the year."""
        clock = PlanetaryClock(start_day=359, start_hour=23.0)
        clock.advance_time(2.0)
        assert clock.get_current_date() == (0, 1.0)

    def test_start_hour_past_midnight_rolls_day(self):
        """Test that a start hour beyond the day length rolls over."""
        clock = PlanetaryClock(start_day=0, start_hour=30.0)
        assert clock.get_current_date() == (1, 6.0)

    def test_negative_advance_raises(self):
        """Test that time cannot run backwards."""
        with pytest.raises(ValueError):
            PlanetaryClock().advance_time(-1)

    @pytest.mark.parametrize("kwargs", [{"year_length_days": 0}, {"day_length_hours": 0}])
    def test_invalid_lengths_raise(self, kwargs):
        """Test that non-positive year or day lengths are rejected."""
        with pytest.raises(ConfigurationError):
            PlanetaryClock(**kwargs)

    @pytest.mark.parametrize("day,season", [
        (0, Season.SPRING), (100, Season.SUMMER), (200, Season.AUTUMN), (300, Season.WINTER),
    ])
    def test_season(self, day, season):
        """Test the season reported by the clock."""
        assert PlanetaryClock(start_day=day).get_season() == season

    def test_formatted_date(self):
        """Test the human readable date."""
        assert PlanetaryClock(start_day=90, start_hour=14.5).get_formatted_date() == "Day 91, 14:30"

    def test_day_length(self):
        """Test day length lookups through the clock."""
        assert PlanetaryClock(start_day=0).get_day_length(0) == pytest.approx(12.0)
        assert PlanetaryClock(start_day=90).get_day_length(80) == 24.0
