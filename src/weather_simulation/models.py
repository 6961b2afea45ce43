"""Value types shared by the weather simulation modules."""

from dataclasses import dataclass, asdict, fields, replace
from typing import Dict, Optional, Union

from .constants import (
    Sky,
    Temperature,
    WindDirection,
    WindForce,
    Precipitation,
    Season,
    WeatherChannel,
)
from .exceptions import ConfigurationError


def clamp(value: int, minimum: int, maximum: int) -> int:
    """Clamp an integer band value into [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


@dataclass
class WeatherState:
    """Discretized weather of a single cell (or of the global base).

    All fields are band indices; wind_dir is an eight-way compass index.
    """
    sky: int
    temp: int
    wind_dir: int
    wind_force: int
    precip: int

    def clamped(self) -> "WeatherState":
        """Return a copy with every field forced into its band range."""
        values = {}
        for channel in WeatherChannel:
            value = int(getattr(self, channel.value))
            if channel is WeatherChannel.WIND_DIR:
                values[channel.value] = value % len(WindDirection)
            else:
                low, high = channel.bounds
                values[channel.value] = clamp(value, low, high)
        return WeatherState(**values)

    def copy(self) -> "WeatherState":
        return replace(self)

    def to_dict(self) -> Dict[str, int]:
        return {key: int(value) for key, value in asdict(self).items()}

    def describe(self) -> Dict[str, str]:
        """Return the band names of each field, e.g. {'sky': 'OVERCAST', ...}."""
        return {
            "sky": Sky(self.sky).name,
            "temp": Temperature(self.temp).name,
            "wind_dir": WindDirection(self.wind_dir).name,
            "wind_force": WindForce(self.wind_force).name,
            "precip": Precipitation(self.precip).name,
        }


@dataclass(frozen=True)
class BiomeWeatherProfile:
    """Static per-biome offsets applied to the base weather.

    Offsets are in bands. diurnal_temp_amplitude is the peak-to-mean daily
    temperature swing in bands (2-3 for a sandy desert, 0.5-1 for a humid
    jungle); diurnal_night_bias is extra pre-dawn cooling in bands.
    A field left as None is treated as undefined.
    """
    temp_offset: Optional[int] = None
    precip_offset: Optional[int] = None
    cloudiness_offset: Optional[int] = None
    storminess_offset: Optional[int] = None
    diurnal_temp_amplitude: Optional[float] = None
    diurnal_night_bias: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "BiomeWeatherProfile":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown biome profile keys: {sorted(unknown)}"
            )
        return cls(**data)


@dataclass(frozen=True)
class WeatherContext:
    """Climatic context of a grid: latitude in degrees and current season."""
    lat_deg: float
    season: Season

    def __post_init__(self):
        object.__setattr__(self, "season", coerce_season(self.season))


def coerce_season(season: Union[Season, str]) -> Season:
    """Accept a Season or its string value ('winter', 'spring', ...)."""
    if isinstance(season, Season):
        return season
    try:
        return Season(str(season).lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown season {season!r}; expected one of "
            f"{[s.value for s in Season]}"
        ) from None
