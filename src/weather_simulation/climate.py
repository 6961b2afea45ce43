"""Climate baseline module for the weather simulation.

Derives the climatic temperature band of a grid from its latitude and the
season, and builds the neutral starting weather a new grid begins from.
"""

from typing import Union

from .constants import (
    Season,
    Sky,
    Temperature,
    WindDirection,
    WindForce,
    Precipitation,
    LATITUDE_ZONES,
    BASELINE_TEMPERATURE_TABLE,
    DEFAULT_YEAR_LENGTH_DAYS,
)
from .models import WeatherState, coerce_season


def latitude_zone(lat_deg: float) -> str:
    """Classify a latitude into its climate zone.

    Boundaries are strict upper bounds on |lat_deg|, so a latitude lying exactly
    on a boundary (15, 30, 50, 66) belongs to the poleward zone.

    Args:
        lat_deg: Latitude in degrees (-90 to 90)

    Returns:
        One of 'equatorial', 'tropical', 'temperate', 'subpolar', 'polar'
    """
    lat = abs(lat_deg)
    for zone, upper in LATITUDE_ZONES:
        if lat < upper:
            return zone
    return LATITUDE_ZONES[-1][0]


def baseline_temp_band(lat_deg: float, season: Union[Season, str]) -> Temperature:
    """Return the climatic temperature band for a latitude and season.

    Warmer towards the equator and in summer; every zone/season pair is defined.
    """
    return BASELINE_TEMPERATURE_TABLE[latitude_zone(lat_deg)][coerce_season(season)]


def create_base_from_climate(lat_deg: float, season: Union[Season, str]) -> WeatherState:
    """Build neutral starting weather for a grid at the given latitude and season."""
    return WeatherState(
        sky=Sky.PARTLY_CLOUDY,
        temp=baseline_temp_band(lat_deg, season),
        wind_dir=WindDirection.WEST,
        wind_force=WindForce.LIGHT_BREEZE,
        precip=Precipitation.NONE,
    )


def season_from_day_of_year(day: float, year_length_days: int = DEFAULT_YEAR_LENGTH_DAYS) -> Season:
    """Get the season for a day of the year.

    Day 0 is the spring equinox and the year is split into four equal quarters.
    Days outside the year wrap around.
    """
    quarter = year_length_days / 4
    d = day % year_length_days
    if d < quarter:
        return Season.SPRING
    elif d < 2 * quarter:
        return Season.SUMMER
    elif d < 3 * quarter:
        return Season.AUTUMN
    else:
        return Season.WINTER
