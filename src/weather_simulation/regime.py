"""Regime model and evolution of the global base weather.

The regime is a Markov chain over macro weather modes (fair, unsettled,
stormy, heatwave, cold snap). Once per tick it transitions on a single draw,
and the active regime then sets the targets the base weather walks toward.
"""

from typing import Optional, Union

from .climate import baseline_temp_band
from .config import Configuration, DEFAULT_CONFIGURATION
from .constants import (
    Season,
    Sky,
    Temperature,
    WindForce,
    Precipitation,
    WeatherRegime,
    REGIME_TRANSITIONS,
    REGIME_SKY_TARGETS,
    REGIME_PRECIP_TARGETS,
    REGIME_WIND_FORCE_TARGETS,
    REGIME_TEMPERATURE_NUDGE,
    DEFAULT_SKY_TARGET,
    DEFAULT_PRECIP_TARGET,
    DEFAULT_WIND_FORCE_TARGET,
)
from .exceptions import ConfigurationError
from .models import WeatherState, clamp
from .random_source import RNG
from .stepping import step_band, step_wind_direction


def coerce_regime(regime: Union[WeatherRegime, int, str]) -> WeatherRegime:
    """Accept a WeatherRegime, its integer value or its name."""
    try:
        if isinstance(regime, str):
            return WeatherRegime[regime.upper()]
        return WeatherRegime(regime)
    except (KeyError, ValueError):
        raise ConfigurationError(f"Unknown weather regime {regime!r}") from None


def step_regime(prev: WeatherRegime, rng: RNG) -> WeatherRegime:
    """Transition the regime using exactly one draw from ``rng``."""
    thresholds, fallback = REGIME_TRANSITIONS[WeatherRegime(prev)]
    r = rng()
    for threshold, regime in thresholds:
        if r < threshold:
            return regime
    return fallback


def regime_temperature_target(lat_deg: float, season: Season, regime: WeatherRegime) -> int:
    """Baseline temperature band nudged by the regime (heatwave +1, cold snap -1)."""
    target = int(baseline_temp_band(lat_deg, season))
    target += REGIME_TEMPERATURE_NUDGE.get(regime, 0)
    return clamp(target, Temperature.FRIGID, Temperature.FURNACE)


def regime_targets(regime: WeatherRegime):
    """Return the (sky, precip, wind force) targets for a regime."""
    return (
        REGIME_SKY_TARGETS.get(regime, DEFAULT_SKY_TARGET),
        REGIME_PRECIP_TARGETS.get(regime, DEFAULT_PRECIP_TARGET),
        REGIME_WIND_FORCE_TARGETS.get(regime, DEFAULT_WIND_FORCE_TARGET),
    )


def step_base_weather(
        prev: WeatherState,
        lat_deg: float,
        season: Season,
        regime: WeatherRegime,
        rng: RNG,
        config: Optional[Configuration] = None
) -> WeatherState:
    """Evolve the global base weather by one tick.

    Temperature, sky, precipitation and wind force each take one biased walk
    step toward their regime targets, in that order; the wind direction then
    takes an independent slow walk. ``prev`` is not modified.

    Args:
        prev: Base weather of the previous tick
        lat_deg: Latitude of the grid in degrees
        season: Current season
        regime: Active regime (already stepped for this tick)
        rng: Zero-argument callable returning floats in [0, 1)
        config: Simulation parameters

    Returns:
        The new base weather
    """
    config = config or DEFAULT_CONFIGURATION

    temp_target = regime_temperature_target(lat_deg, season, regime)
    temp = step_band(
        prev.temp, Temperature.FRIGID, Temperature.FURNACE,
        temp_target, config.temp_volatility, rng
    )

    sky_target, precip_target, wind_force_target = regime_targets(regime)
    sky = step_band(
        prev.sky, Sky.CLEAR, Sky.OBSCURED,
        sky_target, config.sky_volatility, rng
    )
    precip = step_band(
        prev.precip, Precipitation.NONE, Precipitation.EXTREME,
        precip_target, config.precip_volatility, rng
    )
    wind_force = step_band(
        prev.wind_force, WindForce.CALM, WindForce.HURRICANE,
        wind_force_target, config.wind_force_volatility, rng
    )

    wind_dir = step_wind_direction(prev.wind_dir, rng, config.wind_turn_probability)

    return WeatherState(
        sky=int(sky),
        temp=int(temp),
        wind_dir=int(wind_dir),
        wind_force=int(wind_force),
        precip=int(precip),
    )
