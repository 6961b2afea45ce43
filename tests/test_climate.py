"""
Unit tests for the climate baseline.

Tests latitude zoning, the baseline temperature table and the helpers in
src/weather_simulation/climate.py.
"""

import pytest

from src.weather_simulation import (
    Season,
    Sky,
    Temperature,
    WindDirection,
    WindForce,
    Precipitation,
    ConfigurationError,
    baseline_temp_band,
    create_base_from_climate,
    season_from_day_of_year,
)
from src.weather_simulation.climate import latitude_zone


ZONE_LATITUDES = {
    "equatorial": 0.0,
    "tropical": 20.0,
    "temperate": 40.0,
    "subpolar": 60.0,
    "polar": 80.0,
}


class TestLatitudeZone:
    """Tests for latitude zone classification."""

    @pytest.mark.parametrize("lat,zone", [
        (0.0, "equatorial"),
        (14.99, "equatorial"),
        (15.0, "tropical"),
        (30.0, "temperate"),
        (50.0, "subpolar"),
        (66.0, "polar"),
        (90.0, "polar"),
    ])
    def test_boundaries_belong_to_poleward_zone(self, lat, zone):
        """Test that boundary latitudes fall into the next zone poleward."""
        assert latitude_zone(lat) == zone

    @pytest.mark.parametrize("lat", [15.0, 30.0, 50.0, 66.0])
    def test_southern_hemisphere_is_symmetric(self, lat):
        """Test that negative latitudes classify like their absolute value."""
        assert latitude_zone(-lat) == latitude_zone(lat)


class TestBaselineTempBand:
    """Tests for the baseline temperature table."""

    @pytest.mark.parametrize("zone", list(ZONE_LATITUDES))
    @pytest.mark.parametrize("season", list(Season))
    def test_every_zone_and_season_is_defined(self, zone, season):
        """Test that all zone/season combinations yield a band."""
        band = baseline_temp_band(ZONE_LATITUDES[zone], season)
        assert isinstance(band, Temperature)

    def test_known_values(self):
        """Test a few table entries."""
        assert baseline_temp_band(0, Season.SUMMER) == Temperature.HOT
        assert baseline_temp_band(20, Season.WINTER) == Temperature.COOL
        assert baseline_temp_band(45, Season.WINTER) == Temperature.COLD
        assert baseline_temp_band(60, Season.WINTER) == Temperature.FRIGID
        assert baseline_temp_band(80, Season.SUMMER) == Temperature.COLD

    @pytest.mark.parametrize("lat,season,expected", [
        (-15, Season.WINTER, Temperature.COOL),
        (-30, Season.WINTER, Temperature.COLD),
        (-50, Season.WINTER, Temperature.FRIGID),
        (-66, Season.SPRING, Temperature.FRIGID),
    ])
    def test_negative_boundaries_resolve_poleward(self, lat, season, expected):
        """Test boundary latitudes in the southern hemisphere."""
        assert baseline_temp_band(lat, season) == expected

    @pytest.mark.parametrize("season", list(Season))
    def test_colder_toward_poles(self, season):
        """Test that the band never warms when moving poleward."""
        bands = [baseline_temp_band(lat, season) for lat in ZONE_LATITUDES.values()]
        assert bands == sorted(bands, reverse=True)

    def test_summer_is_warmest_season(self):
        """Test that summer is at least as warm as any other season everywhere."""
        for lat in ZONE_LATITUDES.values():
            summer = baseline_temp_band(lat, Season.SUMMER)
            for season in Season:
                assert baseline_temp_band(lat, season) <= summer

    def test_accepts_season_strings(self):
        """Test that plain season strings are accepted."""
        assert baseline_temp_band(45, "winter") == baseline_temp_band(45, Season.WINTER)

    def test_unknown_season_raises(self):
        """Test that an unknown season is rejected."""
        with pytest.raises(ConfigurationError):
            baseline_temp_band(45, "monsoon")


class TestCreateBaseFromClimate:
    """Tests for the neutral starting weather."""

    def test_neutral_defaults(self):
        """Test the starting weather for a temperate winter."""
        base = create_base_from_climate(45, Season.WINTER)
        assert base.sky == Sky.PARTLY_CLOUDY
        assert base.temp == Temperature.COLD
        assert base.wind_dir == WindDirection.WEST
        assert base.wind_force == WindForce.LIGHT_BREEZE
        assert base.precip == Precipitation.NONE


class TestSeasonFromDayOfYear:
    """Tests for deriving the season from the day of year."""

    @pytest.mark.parametrize("day,season", [
        (0, Season.SPRING),
        (89, Season.SPRING),
        (90, Season.SUMMER),
        (179, Season.SUMMER),
        (180, Season.AUTUMN),
        (270, Season.WINTER),
        (359, Season.WINTER),
        (360, Season.SPRING),
        (-1, Season.WINTER),
    ])
    def test_quarters(self, day, season):
        """Test the four quarters of a 360-day year."""
        assert season_from_day_of_year(day) == season

    def test_custom_year_length(self):
        """Test quarters of a shorter year."""
        assert season_from_day_of_year(50, year_length_days=100) == Season.AUTUMN
