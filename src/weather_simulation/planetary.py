"""Planetary module for the weather simulation.

Provides the day/night geometry that shapes the diurnal temperature cycle:
solar declination over the year, sunrise/sunset hours for a latitude, the
resulting temperature band offset for an hour of the day, and a simple clock
that tracks the current day of year and hour of day.
"""

import math
from typing import Dict, Optional, Tuple

import numpy as np

from .climate import season_from_day_of_year
from .config import Configuration, DEFAULT_CONFIGURATION
from .constants import EARTHLIKE_OBLIQUITY_DEGREES, DEFAULT_YEAR_LENGTH_DAYS, Season
from .exceptions import ConfigurationError
from .models import BiomeWeatherProfile


def solar_declination(
        day_of_year: float,
        axial_tilt_degrees: float = EARTHLIKE_OBLIQUITY_DEGREES,
        year_length_days: int = DEFAULT_YEAR_LENGTH_DAYS
) -> float:
    """Solar declination in radians, with day 0 at the spring equinox."""
    tilt = np.radians(axial_tilt_degrees)
    solar_longitude = 2 * np.pi * (day_of_year % year_length_days) / year_length_days
    return float(np.arcsin(np.sin(tilt) * np.sin(solar_longitude)))


def compute_sunrise_sunset_hours(
        lat_deg: float,
        day_of_year: float,
        solar_noon_hour: float = 12.0,
        axial_tilt_degrees: float = EARTHLIKE_OBLIQUITY_DEGREES,
        year_length_days: int = DEFAULT_YEAR_LENGTH_DAYS
) -> Dict[str, float]:
    """Calculate sunrise, sunset and day length for a latitude on a given day.

    Args:
        lat_deg: Latitude in degrees (-90 to 90)
        day_of_year: Day of the year, 0 being the spring equinox
        solar_noon_hour: Local hour of solar noon
        axial_tilt_degrees: Planetary obliquity in degrees
        year_length_days: Days in the declination cycle

    Returns:
        Dictionary with 'sunrise', 'sunset' (hours in [0, 24)) and 'day_length'.
        During polar night sunrise and sunset are NaN and day_length is 0;
        during midnight sun they are 0 and 24 and day_length is 24.
    """
    phi = np.radians(lat_deg)
    delta = solar_declination(day_of_year, axial_tilt_degrees, year_length_days)

    cos_h0 = -np.tan(phi) * np.tan(delta)

    if cos_h0 >= 1:
        # Sun never rises
        return {"sunrise": math.nan, "sunset": math.nan, "day_length": 0.0}
    elif cos_h0 <= -1:
        # Sun never sets
        return {"sunrise": 0.0, "sunset": 24.0, "day_length": 24.0}

    h0 = np.arccos(cos_h0)
    day_length = float(24 * h0 / np.pi)
    half = day_length / 2

    return {
        "sunrise": (solar_noon_hour - half) % 24,
        "sunset": (solar_noon_hour + half) % 24,
        "day_length": day_length,
    }


def compute_diurnal_temp_offset(
        lat_deg: float,
        day_of_year: float,
        hour_of_day: float,
        profile: Optional[BiomeWeatherProfile] = None,
        config: Optional[Configuration] = None
) -> int:
    """Calculate the temperature band delta for the hour of the day.

    The swing follows a cosine peaking a couple of hours after solar noon. Its
    amplitude is the biome's diurnal amplitude (1 band by default), damped to
    half on days without daylight. Biomes with a night bias get extra cooling
    ramping up over the last hours before sunrise, which pulls the daily minimum
    toward dawn. Only applies when there is a real day/night cycle.

    Args:
        lat_deg: Latitude in degrees
        day_of_year: Current day of the year
        hour_of_day: Current hour of the day (0-24)
        profile: Biome profile supplying amplitude and night bias
        config: Simulation parameters

    Returns:
        Integer number of temperature bands to add
    """
    config = config or DEFAULT_CONFIGURATION
    sun = compute_sunrise_sunset_hours(
        lat_deg,
        day_of_year,
        solar_noon_hour=config.solar_noon_hour,
        axial_tilt_degrees=config.axial_tilt_degrees,
        year_length_days=config.year_length_days,
    )
    sunrise, sunset, day_length = sun["sunrise"], sun["sunset"], sun["day_length"]

    base_amplitude = 1.0
    night_bias = 0.0
    if profile is not None:
        if profile.diurnal_temp_amplitude is not None:
            base_amplitude = profile.diurnal_temp_amplitude
        if profile.diurnal_night_bias is not None:
            night_bias = profile.diurnal_night_bias

    amplitude = base_amplitude * (0.5 + 0.5 * day_length / 24)

    solar_noon = config.solar_noon_hour
    if not (math.isnan(sunrise) or math.isnan(sunset)):
        solar_noon = (sunrise + sunset) / 2
    thermal_peak_hour = solar_noon + config.thermal_lag_hours

    phase = (hour_of_day - thermal_peak_hour) / 24 * 2 * np.pi
    offset = amplitude * np.cos(phase)

    if night_bias > 0 and 0 < day_length < 24:
        if hour_of_day < sunrise or hour_of_day >= sunset:
            if hour_of_day < sunrise:
                hours_to_sunrise = sunrise - hour_of_day
            else:
                hours_to_sunrise = sunrise + 24 - hour_of_day
            window = config.pre_dawn_window_hours
            if hours_to_sunrise <= window:
                offset -= night_bias * (1 - hours_to_sunrise / window)

    return int(math.floor(offset + 0.5))


class PlanetaryClock:
    """Tracks the current day of year and hour of day of the simulated world.

    Serves as the time provider a WeatherGrid reads when shaping the diurnal
    temperature cycle.
    """

    def __init__(
            self,
            year_length_days: int = DEFAULT_YEAR_LENGTH_DAYS,
            day_length_hours: float = 24.0,
            start_day: int = 0,
            start_hour: float = 0.0,
            axial_tilt_degrees: float = EARTHLIKE_OBLIQUITY_DEGREES
    ):
        """Initialize the clock.

        Args:
            year_length_days: Length of a year in days
            day_length_hours: Length of a day in hours
            start_day: Starting day of the year (0 = spring equinox)
            start_hour: Starting hour of the day
            axial_tilt_degrees: Axial tilt used for day length calculations
        """
        if year_length_days <= 0:
            raise ConfigurationError("year_length_days must be positive")
        if day_length_hours <= 0:
            raise ConfigurationError("day_length_hours must be positive")

        self.year_length_days = year_length_days
        self.day_length_hours = day_length_hours
        self.axial_tilt_degrees = axial_tilt_degrees
        self.current_day = start_day % year_length_days
        self.current_hour = 0.0
        self.advance_time(start_hour)

    def advance_time(self, hours: float = 1.0) -> None:
        """Advance the clock by a number of hours.

        Args:
            hours: Number of hours to advance the clock
        """
        if hours < 0:
            raise ValueError("Cannot advance time by a negative number of hours")

        self.current_hour += hours

        # Handle day rollover
        while self.current_hour >= self.day_length_hours:
            self.current_hour -= self.day_length_hours
            self.current_day += 1

            # Handle year rollover
            if self.current_day >= self.year_length_days:
                self.current_day = 0

    def get_current_date(self) -> Tuple[int, float]:
        """Get the current date.

        Returns:
            Tuple of (day_of_year, hour_of_day)
        """
        return self.current_day, self.current_hour

    def get_formatted_date(self) -> str:
        """Get a formatted string of the current date, e.g. 'Day 91, 14:30'."""
        hour = int(self.current_hour)
        minute = int((self.current_hour - hour) * 60)
        return f"Day {int(self.current_day) + 1}, {hour:02d}:{minute:02d}"

    def get_season(self) -> Season:
        """Get the current season based on day of year."""
        return season_from_day_of_year(self.current_day, self.year_length_days)

    def get_day_length(self, lat_deg: float) -> float:
        """Calculate day length in hours for a latitude on the current day."""
        sun = compute_sunrise_sunset_hours(
            lat_deg,
            self.current_day,
            axial_tilt_degrees=self.axial_tilt_degrees,
            year_length_days=self.year_length_days,
        )
        return sun["day_length"] * (self.day_length_hours / 24.0)
