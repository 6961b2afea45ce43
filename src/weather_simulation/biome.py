"""Biome module for the weather simulation.

Holds the default weather profile of every biome, applies a biome's static
offsets to the base weather, and generates noise-based biome maps that can
be fed to a WeatherGrid.
"""

from typing import Dict, Mapping, Optional, Union

import numpy as np
from opensimplex import OpenSimplex

from .climate import latitude_zone
from .constants import Biome, Sky, Temperature, WindForce, Precipitation
from .exceptions import ConfigurationError
from .models import BiomeWeatherProfile, WeatherState, clamp

BiomeProfiles = Mapping[int, BiomeWeatherProfile]


DEFAULT_BIOME_WEATHER_PROFILES: Dict[int, BiomeWeatherProfile] = {
    # arctic / polar
    Biome.ARCTIC_ICEFIELD: BiomeWeatherProfile(
        temp_offset=-2, cloudiness_offset=0, precip_offset=-1,
        diurnal_temp_amplitude=0.8, diurnal_night_bias=0.5,
    ),
    Biome.ARCTIC_TUNDRA: BiomeWeatherProfile(
        temp_offset=-2, cloudiness_offset=0,
        diurnal_temp_amplitude=1.5, diurnal_night_bias=0.7,
    ),
    # subarctic / taiga
    Biome.SUBARCTIC_TAIGA: BiomeWeatherProfile(
        temp_offset=-1, cloudiness_offset=1, precip_offset=1,
        diurnal_temp_amplitude=1.0, diurnal_night_bias=0.5,
    ),
    # mountains & alpine
    Biome.MOUNTAIN_ALPINE: BiomeWeatherProfile(
        temp_offset=-1, storminess_offset=1,
        diurnal_temp_amplitude=1.5, diurnal_night_bias=0.8,
    ),
    # hot deserts: big day/night spread, cold pre-dawn
    Biome.DESERT_DUNES: BiomeWeatherProfile(
        temp_offset=1, precip_offset=-3, cloudiness_offset=-2,
        diurnal_temp_amplitude=3.0, diurnal_night_bias=1.5,
    ),
    Biome.DESERT_ROCK: BiomeWeatherProfile(
        temp_offset=1, precip_offset=-2, cloudiness_offset=-1,
        diurnal_temp_amplitude=2.5, diurnal_night_bias=1.0,
    ),
    Biome.DESERT_SALT_FLAT: BiomeWeatherProfile(
        temp_offset=1, precip_offset=-2, cloudiness_offset=-1,
        diurnal_temp_amplitude=3.0, diurnal_night_bias=1.5,
    ),
    Biome.DESERT_SCRUB: BiomeWeatherProfile(
        temp_offset=1, precip_offset=-1,
        diurnal_temp_amplitude=2.0, diurnal_night_bias=1.0,
    ),
    # grasslands / steppe / savanna
    Biome.STEPPE: BiomeWeatherProfile(
        temp_offset=0, precip_offset=-1,
        diurnal_temp_amplitude=2.0, diurnal_night_bias=0.7,
    ),
    Biome.SAVANNA: BiomeWeatherProfile(
        temp_offset=1, precip_offset=0,
        diurnal_temp_amplitude=2.5, diurnal_night_bias=0.8,
    ),
    # wet / tropical: small swings, warm nights
    Biome.TROPICAL_RAINFOREST: BiomeWeatherProfile(
        temp_offset=0, precip_offset=2, cloudiness_offset=2, storminess_offset=1,
        diurnal_temp_amplitude=1.0, diurnal_night_bias=0.2,
    ),
    Biome.TROPICAL_SEASONAL_FOREST: BiomeWeatherProfile(
        temp_offset=0, precip_offset=1, cloudiness_offset=1,
        diurnal_temp_amplitude=1.5, diurnal_night_bias=0.4,
    ),
    # coastal: water moderates the swing
    Biome.COASTAL_BEACH: BiomeWeatherProfile(
        storminess_offset=1,
        diurnal_temp_amplitude=1.0, diurnal_night_bias=0.3,
    ),
    Biome.COASTAL_ROCKY_SHORE: BiomeWeatherProfile(
        storminess_offset=1, cloudiness_offset=1,
        diurnal_temp_amplitude=1.0, diurnal_night_bias=0.3,
    ),
    Biome.COASTAL_WETLAND: BiomeWeatherProfile(
        precip_offset=1, cloudiness_offset=1,
        diurnal_temp_amplitude=1.0, diurnal_night_bias=0.3,
    ),
    # open sea / islands
    Biome.CORAL_ISLAND: BiomeWeatherProfile(
        precip_offset=1, storminess_offset=1,
        diurnal_temp_amplitude=1.2, diurnal_night_bias=0.4,
    ),
    Biome.OPEN_SEA: BiomeWeatherProfile(
        precip_offset=1, storminess_offset=2,
        diurnal_temp_amplitude=0.5, diurnal_night_bias=0.2,
    ),
}


def normalize_biome_profiles(
        profiles: Mapping[int, Union[BiomeWeatherProfile, Dict[str, float]]]
) -> Dict[int, BiomeWeatherProfile]:
    """Convert a mapping of biome id -> profile or plain dict into profiles."""
    normalized = {}
    for biome_id, profile in profiles.items():
        if isinstance(profile, BiomeWeatherProfile):
            normalized[int(biome_id)] = profile
        elif isinstance(profile, Mapping):
            normalized[int(biome_id)] = BiomeWeatherProfile.from_dict(dict(profile))
        else:
            raise ConfigurationError(
                f"Biome profile for id {biome_id} must be a BiomeWeatherProfile or dict"
            )
    return normalized


def adjust_base_for_biome(
        base: WeatherState,
        biome_id: Optional[int],
        profiles: BiomeProfiles = DEFAULT_BIOME_WEATHER_PROFILES
) -> WeatherState:
    """Apply a biome's static offsets to the base weather.

    Each defined offset is added to its field and clamped to the field's band
    range. Returns ``base`` itself when the biome is absent or has no profile,
    otherwise a modified copy. Wind direction is never touched.
    """
    if biome_id is None:
        return base
    profile = profiles.get(int(biome_id))
    if profile is None:
        return base

    sky = base.sky
    temp = base.temp
    wind_force = base.wind_force
    precip = base.precip

    if profile.temp_offset is not None:
        temp = clamp(temp + profile.temp_offset, Temperature.FRIGID, Temperature.FURNACE)
    if profile.precip_offset is not None:
        precip = clamp(precip + profile.precip_offset, Precipitation.NONE, Precipitation.EXTREME)
    if profile.cloudiness_offset is not None:
        sky = clamp(sky + profile.cloudiness_offset, Sky.CLEAR, Sky.OBSCURED)
    if profile.storminess_offset is not None:
        wind_force = clamp(wind_force + profile.storminess_offset, WindForce.CALM, WindForce.HURRICANE)

    return WeatherState(
        sky=int(sky),
        temp=int(temp),
        wind_dir=base.wind_dir,
        wind_force=int(wind_force),
        precip=int(precip),
    )


# Land biomes per latitude zone, ordered from driest to wettest
ZONE_LAND_BIOMES = {
    "equatorial": (
        Biome.TROPICAL_SAVANNA,
        Biome.TROPICAL_SEASONAL_FOREST,
        Biome.TROPICAL_RAINFOREST,
        Biome.TROPICAL_MANGROVE,
    ),
    "tropical": (
        Biome.DESERT_DUNES,
        Biome.DESERT_ROCK,
        Biome.DESERT_SCRUB,
        Biome.STEPPE,
        Biome.SAVANNA,
        Biome.TROPICAL_SEASONAL_FOREST,
    ),
    "temperate": (
        Biome.STEPPE,
        Biome.TEMPERATE_GRASSLAND,
        Biome.TEMPERATE_HEATH_MOOR,
        Biome.TEMPERATE_MIXED_WOODLAND,
        Biome.TEMPERATE_FOREST,
        Biome.TEMPERATE_WETLANDS,
    ),
    "subpolar": (
        Biome.PERMAFROST_SCRUB,
        Biome.SUBARCTIC_TAIGA,
        Biome.SUBARCTIC_TAIGA,
        Biome.TEMPERATE_MARSH,
    ),
    "polar": (
        Biome.ARCTIC_TUNDRA,
        Biome.ARCTIC_TUNDRA,
        Biome.ARCTIC_ICEFIELD,
    ),
}

ZONE_HIGHLAND_BIOMES = {
    "equatorial": Biome.TEMPERATE_HILLS,
    "tropical": Biome.MOUNTAIN_ALPINE,
    "temperate": Biome.TEMPERATE_MOUNTAINS,
    "subpolar": Biome.MOUNTAIN_ALPINE,
    "polar": Biome.ARCTIC_ICEFIELD,
}

ZONE_COAST_BIOMES = {
    "equatorial": Biome.CORAL_ISLAND,
    "tropical": Biome.COASTAL_BEACH,
    "temperate": Biome.COASTAL_ROCKY_SHORE,
    "subpolar": Biome.COASTAL_WETLAND,
    "polar": Biome.COASTAL_ROCKY_SHORE,
}


class BiomeMapGenerator:
    """Generates biome id maps for a weather grid from coherent noise.

    Relief noise decides sea, coast, lowland and highland; moisture noise picks
    a lowland biome from those of the grid's latitude zone.
    """

    def __init__(self, width: int, height: int, lat_deg: float,
                 seed: Optional[int] = None, sea_level: float = 0.3,
                 coast_band: float = 0.05, highland_level: float = 0.8,
                 scale: float = 8.0):
        """Initialize the BiomeMapGenerator.

        Args:
            width: Grid width in cells
            height: Grid height in cells
            lat_deg: Latitude of the grid in degrees
            seed: Noise seed for reproducible maps
            sea_level: Relief (0-1) below which a cell is open sea
            coast_band: Relief width above sea level that counts as coast
            highland_level: Relief (0-1) above which a cell is highland
            scale: Feature size of the noise in cells
        """
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"Grid dimensions must be positive, got {width}x{height}")
        if not 0.0 <= sea_level < sea_level + coast_band <= highland_level <= 1.0:
            raise ConfigurationError("Relief levels must satisfy 0 <= sea < coast <= highland <= 1")

        self.width = width
        self.height = height
        self.lat_deg = lat_deg
        self.seed = seed if seed is not None else 0
        self.sea_level = sea_level
        self.coast_band = coast_band
        self.highland_level = highland_level
        self.scale = scale
        self.zone = latitude_zone(lat_deg)

    def _noise_field(self, noise_gen: OpenSimplex, octaves: int = 3) -> np.ndarray:
        """Fractal noise normalized to the 0-1 range."""
        field = np.zeros((self.height, self.width))
        for y in range(self.height):
            for x in range(self.width):
                value = 0.0
                amplitude = 1.0
                frequency = 1.0
                max_value = 0.0
                for _ in range(octaves):
                    value += noise_gen.noise2(
                        x * frequency / self.scale, y * frequency / self.scale
                    ) * amplitude
                    max_value += amplitude
                    amplitude *= 0.5
                    frequency *= 2.0
                field[y, x] = value / max_value

        min_val = np.min(field)
        max_val = np.max(field)
        if max_val - min_val < 1e-12:
            return np.full_like(field, 0.5)
        return (field - min_val) / (max_val - min_val)

    def generate_relief(self) -> np.ndarray:
        """Generate the relief field (0-1) of shape (height, width)."""
        return self._noise_field(OpenSimplex(seed=self.seed))

    def generate_moisture(self) -> np.ndarray:
        """Generate the moisture field (0-1) of shape (height, width)."""
        return self._noise_field(OpenSimplex(seed=self.seed + 1))

    def generate(self) -> np.ndarray:
        """Generate a row-major biome id array of length width * height."""
        relief = self.generate_relief()
        moisture = self.generate_moisture()

        land_biomes = ZONE_LAND_BIOMES[self.zone]
        biomes = np.zeros((self.height, self.width), dtype=np.uint8)

        for y in range(self.height):
            for x in range(self.width):
                h = relief[y, x]
                if h < self.sea_level:
                    biome = Biome.OPEN_SEA
                elif h < self.sea_level + self.coast_band:
                    biome = ZONE_COAST_BIOMES[self.zone]
                elif h >= self.highland_level:
                    biome = ZONE_HIGHLAND_BIOMES[self.zone]
                else:
                    index = min(int(moisture[y, x] * len(land_biomes)), len(land_biomes) - 1)
                    biome = land_biomes[index]
                biomes[y, x] = biome

        counts = np.bincount(biomes.ravel(), minlength=len(Biome))
        present = [Biome(i).name.lower() for i in np.nonzero(counts)[0]]
        print(f"Generated {self.width}x{self.height} {self.zone} biome map "
              f"with {len(present)} biomes: {', '.join(present)}")

        return biomes.ravel()
