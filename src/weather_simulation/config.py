"""Tunable constants of the weather simulation."""

from dataclasses import dataclass, asdict, fields, replace
from typing import Any, Dict

from .constants import EARTHLIKE_OBLIQUITY_DEGREES, DEFAULT_YEAR_LENGTH_DAYS
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class Configuration:
    """Simulation parameters.

    Attributes:
        temp_volatility: Chance per tick of an unbiased wobble in base temperature
        sky_volatility: Same, for base cloud cover
        precip_volatility: Same, for base precipitation
        wind_force_volatility: Same, for base wind force
        wind_turn_probability: Chance of the base wind veering one point each way
        drift_toward_base_probability: Chance a cell steps one band toward its base
        drift_jump_probability: Draws at or above this value make a random ±1 jump
        smoothing_self_weight: Weight of a cell's own value in the smoothing kernel
        smoothing_neighbor_weight: Weight of each orthogonal neighbour
        solar_noon_hour: Local hour of solar noon
        thermal_lag_hours: Hours after solar noon of the daily temperature peak
        pre_dawn_window_hours: Length of the extra-cooling window before sunrise
        axial_tilt_degrees: Planetary obliquity used for solar declination
        year_length_days: Days in a year for the declination cycle
    """
    temp_volatility: float = 0.3
    sky_volatility: float = 0.4
    precip_volatility: float = 0.4
    wind_force_volatility: float = 0.3
    wind_turn_probability: float = 0.2
    drift_toward_base_probability: float = 0.7
    drift_jump_probability: float = 0.9
    smoothing_self_weight: float = 2.0
    smoothing_neighbor_weight: float = 1.0
    solar_noon_hour: float = 12.0
    thermal_lag_hours: float = 2.0
    pre_dawn_window_hours: float = 4.0
    axial_tilt_degrees: float = EARTHLIKE_OBLIQUITY_DEGREES
    year_length_days: int = DEFAULT_YEAR_LENGTH_DAYS

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise ConfigurationError if any parameter is out of range."""
        probabilities = (
            "temp_volatility",
            "sky_volatility",
            "precip_volatility",
            "wind_force_volatility",
            "wind_turn_probability",
            "drift_toward_base_probability",
            "drift_jump_probability",
        )
        for name in probabilities:
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be within [0, 1], got {value}")

        if self.wind_turn_probability > 0.5:
            raise ConfigurationError("wind_turn_probability cannot exceed 0.5")
        if self.drift_jump_probability < self.drift_toward_base_probability:
            raise ConfigurationError(
                "drift_jump_probability must not be below drift_toward_base_probability"
            )
        if self.smoothing_self_weight <= 0:
            raise ConfigurationError("smoothing_self_weight must be positive")
        if self.smoothing_neighbor_weight < 0:
            raise ConfigurationError("smoothing_neighbor_weight cannot be negative")
        if self.pre_dawn_window_hours <= 0:
            raise ConfigurationError("pre_dawn_window_hours must be positive")
        if self.year_length_days <= 0:
            raise ConfigurationError("year_length_days must be positive")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Configuration":
        """Build a configuration from a dictionary, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update(self, **kwargs) -> "Configuration":
        """Return a new configuration with the given fields replaced."""
        unknown = set(kwargs) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return replace(self, **kwargs)


DEFAULT_CONFIGURATION = Configuration()
