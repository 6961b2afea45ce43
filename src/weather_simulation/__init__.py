"""
Weather simulation package for WeatherGrid.

This package contains modules for the climate baseline, weather regimes,
band stepping, biome and diurnal adjustment, spatial smoothing, and the
grid that ties them together.
"""

from .constants import (
    Sky,
    Temperature,
    WindDirection,
    WindForce,
    Precipitation,
    WeatherRegime,
    Season,
    Biome,
    WeatherChannel,
)
from .models import WeatherState, BiomeWeatherProfile, WeatherContext
from .exceptions import WeatherSimulationError, ConfigurationError, GridIndexError
from .config import Configuration
from .random_source import RandomSource
from .climate import baseline_temp_band, create_base_from_climate, season_from_day_of_year
from .regime import step_regime, step_base_weather
from .stepping import step_band, drift_component
from .biome import DEFAULT_BIOME_WEATHER_PROFILES, adjust_base_for_biome, BiomeMapGenerator
from .planetary import (
    PlanetaryClock,
    compute_sunrise_sunset_hours,
    compute_diurnal_temp_offset,
)
from .smoothing import smooth_scalar_field, smooth_wind_field
from .grid import WeatherGrid

__all__ = [
    'Sky', 'Temperature', 'WindDirection', 'WindForce', 'Precipitation',
    'WeatherRegime', 'Season', 'Biome', 'WeatherChannel',
    'WeatherState', 'BiomeWeatherProfile', 'WeatherContext',
    'WeatherSimulationError', 'ConfigurationError', 'GridIndexError',
    'Configuration', 'RandomSource',
    'baseline_temp_band', 'create_base_from_climate', 'season_from_day_of_year',
    'step_regime', 'step_base_weather', 'step_band', 'drift_component',
    'DEFAULT_BIOME_WEATHER_PROFILES', 'adjust_base_for_biome', 'BiomeMapGenerator',
    'PlanetaryClock', 'compute_sunrise_sunset_hours', 'compute_diurnal_temp_offset',
    'smooth_scalar_field', 'smooth_wind_field',
    'WeatherGrid',
]
