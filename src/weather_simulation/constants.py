"""Band enumerations and static tables for the weather simulation.

Every weather quantity is stored as a small integer "band" indexing one of
the ordered enumerations below. The enumerations are IntEnums so they compare
equal to the raw integers held in the grid arrays.
"""

from enum import Enum, IntEnum
from typing import Dict, Tuple


class Sky(IntEnum):
    """Cloud cover / visibility bands."""
    CLEAR = 0
    MOSTLY_CLEAR = 1
    PARTLY_CLOUDY = 2
    MOSTLY_CLOUDY = 3
    OVERCAST = 4
    FOGGY = 5
    HAZY = 6
    OBSCURED = 7


class Temperature(IntEnum):
    """Temperature bands."""
    FRIGID = 0  # <= -15 °C
    FREEZING = 1  # <= 0 °C
    COLD = 2  # <= 10 °C
    COOL = 3  # <= 20 °C
    WARM = 4  # <= 30 °C
    HOT = 5  # <= 45 °C
    FURNACE = 6  # > 45 °C


class WindDirection(IntEnum):
    """Eight-way compass index."""
    NORTH = 0
    NORTHEAST = 1
    EAST = 2
    SOUTHEAST = 3
    SOUTH = 4
    SOUTHWEST = 5
    WEST = 6
    NORTHWEST = 7


class WindForce(IntEnum):
    """Wind force on the Beaufort scale."""
    CALM = 0
    LIGHT_AIR = 1
    LIGHT_BREEZE = 2
    GENTLE_BREEZE = 3
    MODERATE_BREEZE = 4
    FRESH_BREEZE = 5
    STRONG_BREEZE = 6
    NEAR_GALE = 7
    GALE = 8
    SEVERE_GALE = 9
    STORM = 10
    VIOLENT_STORM = 11
    HURRICANE = 12


class Precipitation(IntEnum):
    """Precipitation intensity bands."""
    NONE = 0  # dry
    MIST = 1  # <= 0.25 mm/h
    LIGHT = 2  # <= 2.5 mm/h
    MODERATE = 3  # <= 7.5 mm/h
    HEAVY = 4  # <= 15 mm/h
    TORRENTIAL = 5  # <= 30 mm/h
    EXTREME = 6  # > 30 mm/h


class WeatherRegime(IntEnum):
    """Macro climate mode biasing the per-tick targets of the base weather."""
    FAIR = 0
    UNSETTLED = 1
    STORMY = 2
    HEATWAVE = 3
    COLD_SNAP = 4


class Season(str, Enum):
    """Season of the year."""
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


class Biome(IntEnum):
    """Biome ids used in a biome grid."""
    ARCTIC_ICEFIELD = 0
    ARCTIC_TUNDRA = 1
    SUBARCTIC_TAIGA = 2
    MOUNTAIN_ALPINE = 3
    PERMAFROST_SCRUB = 4
    TEMPERATE_GRASSLAND = 5
    TEMPERATE_FOREST = 6
    TEMPERATE_MIXED_WOODLAND = 7
    TEMPERATE_HEATH_MOOR = 8
    TEMPERATE_WETLANDS = 9
    TEMPERATE_MARSH = 10
    TEMPERATE_HILLS = 11
    TEMPERATE_MOUNTAINS = 12
    DESERT_DUNES = 13
    DESERT_ROCK = 14
    DESERT_SALT_FLAT = 15
    DESERT_SCRUB = 16
    STEPPE = 17
    SAVANNA = 18
    TROPICAL_RAINFOREST = 19
    TROPICAL_SEASONAL_FOREST = 20
    TROPICAL_SAVANNA = 21
    TROPICAL_MANGROVE = 22
    COASTAL_BEACH = 23
    COASTAL_ROCKY_SHORE = 24
    COASTAL_WETLAND = 25
    CORAL_ISLAND = 26
    OPEN_SEA = 27


class WeatherChannel(Enum):
    """Named scalar channels of a cell, with the band enumeration of each.

    The value is the attribute name on WeatherState and the variable name in
    the grid dataset.
    """
    SKY = "sky"
    TEMP = "temp"
    WIND_DIR = "wind_dir"
    WIND_FORCE = "wind_force"
    PRECIP = "precip"

    @property
    def band(self):
        return CHANNEL_BANDS[self]

    @property
    def bounds(self) -> Tuple[int, int]:
        band = CHANNEL_BANDS[self]
        return int(min(band)), int(max(band))


CHANNEL_BANDS = {
    WeatherChannel.SKY: Sky,
    WeatherChannel.TEMP: Temperature,
    WeatherChannel.WIND_DIR: WindDirection,
    WeatherChannel.WIND_FORCE: WindForce,
    WeatherChannel.PRECIP: Precipitation,
}

# Channels smoothed as plain scalars, in the order the passes run.
# Wind direction is smoothed together with wind force in vector space.
SCALAR_SMOOTHING_ORDER = (
    WeatherChannel.SKY,
    WeatherChannel.TEMP,
    WeatherChannel.PRECIP,
    WeatherChannel.WIND_FORCE,
)

# Earth-like axial tilt in degrees
EARTHLIKE_OBLIQUITY_DEGREES = 23.44

DEFAULT_YEAR_LENGTH_DAYS = 360

# Baseline temperature band by latitudinal zone and season.
# Zones are checked in order against |latitude| with strict upper bounds.
LATITUDE_ZONES: Tuple[Tuple[str, float], ...] = (
    ("equatorial", 15.0),
    ("tropical", 30.0),
    ("temperate", 50.0),
    ("subpolar", 66.0),
    ("polar", float("inf")),
)

BASELINE_TEMPERATURE_TABLE: Dict[str, Dict[Season, Temperature]] = {
    "equatorial": {
        Season.WINTER: Temperature.WARM,
        Season.SPRING: Temperature.WARM,
        Season.SUMMER: Temperature.HOT,
        Season.AUTUMN: Temperature.WARM,
    },
    "tropical": {
        Season.WINTER: Temperature.COOL,
        Season.SPRING: Temperature.WARM,
        Season.SUMMER: Temperature.HOT,
        Season.AUTUMN: Temperature.WARM,
    },
    "temperate": {
        Season.WINTER: Temperature.COLD,
        Season.SPRING: Temperature.COOL,
        Season.SUMMER: Temperature.WARM,
        Season.AUTUMN: Temperature.COOL,
    },
    "subpolar": {
        Season.WINTER: Temperature.FRIGID,
        Season.SPRING: Temperature.COLD,
        Season.SUMMER: Temperature.COOL,
        Season.AUTUMN: Temperature.COLD,
    },
    "polar": {
        Season.WINTER: Temperature.FRIGID,
        Season.SPRING: Temperature.FRIGID,
        Season.SUMMER: Temperature.COLD,
        Season.AUTUMN: Temperature.FRIGID,
    },
}

# Regime -> target bands for the base weather
REGIME_SKY_TARGETS: Dict[WeatherRegime, Sky] = {
    WeatherRegime.FAIR: Sky.MOSTLY_CLEAR,
    WeatherRegime.UNSETTLED: Sky.MOSTLY_CLOUDY,
    WeatherRegime.STORMY: Sky.OVERCAST,
    WeatherRegime.HEATWAVE: Sky.CLEAR,
    WeatherRegime.COLD_SNAP: Sky.OVERCAST,
}
DEFAULT_SKY_TARGET = Sky.PARTLY_CLOUDY

REGIME_PRECIP_TARGETS: Dict[WeatherRegime, Precipitation] = {
    WeatherRegime.FAIR: Precipitation.NONE,
    WeatherRegime.UNSETTLED: Precipitation.LIGHT,
    WeatherRegime.STORMY: Precipitation.HEAVY,
    WeatherRegime.HEATWAVE: Precipitation.NONE,
    WeatherRegime.COLD_SNAP: Precipitation.LIGHT,
}
DEFAULT_PRECIP_TARGET = Precipitation.NONE

REGIME_WIND_FORCE_TARGETS: Dict[WeatherRegime, WindForce] = {
    WeatherRegime.FAIR: WindForce.LIGHT_BREEZE,
    WeatherRegime.UNSETTLED: WindForce.MODERATE_BREEZE,
    WeatherRegime.STORMY: WindForce.GALE,
    WeatherRegime.HEATWAVE: WindForce.LIGHT_AIR,
    WeatherRegime.COLD_SNAP: WindForce.FRESH_BREEZE,
}
DEFAULT_WIND_FORCE_TARGET = WindForce.LIGHT_BREEZE

REGIME_TEMPERATURE_NUDGE: Dict[WeatherRegime, int] = {
    WeatherRegime.HEATWAVE: +1,
    WeatherRegime.COLD_SNAP: -1,
}

# Regime transitions as cumulative thresholds on a single draw r in [0, 1).
# The first entry whose threshold exceeds r wins; the fallback is used otherwise.
REGIME_TRANSITIONS: Dict[WeatherRegime, Tuple[Tuple[Tuple[float, WeatherRegime], ...], WeatherRegime]] = {
    WeatherRegime.FAIR: (
        (
            (0.90, WeatherRegime.FAIR),
            (0.93, WeatherRegime.UNSETTLED),
            (0.96, WeatherRegime.HEATWAVE),
            (0.99, WeatherRegime.COLD_SNAP),
        ),
        WeatherRegime.STORMY,
    ),
    WeatherRegime.UNSETTLED: (
        (
            (0.90, WeatherRegime.UNSETTLED),
            (0.95, WeatherRegime.FAIR),
        ),
        WeatherRegime.STORMY,
    ),
    WeatherRegime.STORMY: (
        (
            (0.90, WeatherRegime.STORMY),
            (0.98, WeatherRegime.UNSETTLED),
        ),
        WeatherRegime.FAIR,
    ),
    WeatherRegime.HEATWAVE: (
        ((0.98, WeatherRegime.HEATWAVE),),
        WeatherRegime.FAIR,
    ),
    WeatherRegime.COLD_SNAP: (
        ((0.98, WeatherRegime.COLD_SNAP),),
        WeatherRegime.FAIR,
    ),
}
