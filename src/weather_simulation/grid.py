"""Weather grid module for the weather simulation.

Simulates tick-driven weather over a rectangular grid of cells. The grid keeps
a global base weather and a regime that bias its stochastic evolution; every
tick the regime and base advance, each cell drifts toward its biome-adjusted
base with a diurnal temperature offset, and the scalar bands and wind vectors
are spatially smoothed.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Union

import numpy as np
import xarray as xr

from .biome import (
    DEFAULT_BIOME_WEATHER_PROFILES,
    adjust_base_for_biome,
    normalize_biome_profiles,
)
from .climate import create_base_from_climate
from .config import Configuration
from .constants import (
    Season,
    WeatherChannel,
    WeatherRegime,
    SCALAR_SMOOTHING_ORDER,
)
from .exceptions import ConfigurationError, GridIndexError
from .models import BiomeWeatherProfile, WeatherContext, WeatherState, clamp
from .planetary import compute_diurnal_temp_offset
from .random_source import RNG, RandomSource
from .regime import coerce_regime, step_base_weather, step_regime
from .smoothing import smooth_scalar_field, smooth_wind_field
from .stepping import drift_component

# Per-cell channels that drift toward the base, in draw order
DRIFT_ORDER = (
    WeatherChannel.SKY,
    WeatherChannel.TEMP,
    WeatherChannel.WIND_FORCE,
    WeatherChannel.PRECIP,
)


class WeatherGrid:
    """Grid of per-cell weather evolving over discrete ticks.

    Cells are addressed by (x, y) and stored row-major (index = y * width + x).
    The simulation is fully deterministic for a given random source.
    """

    def __init__(
            self,
            width: int,
            height: int,
            context: Union[WeatherContext, Mapping[str, object]],
            rng: Optional[RNG] = None,
            random_seed: Optional[int] = None,
            initial_regime: Optional[Union[WeatherRegime, int, str]] = None,
            initial_base: Optional[WeatherState] = None,
            biome_grid: Optional[Union[Sequence[int], np.ndarray]] = None,
            biome_profiles: Optional[Mapping[int, Union[BiomeWeatherProfile, Dict[str, float]]]] = None,
            clock: Optional[object] = None,
            config: Optional[Configuration] = None
    ):
        """Initialize the WeatherGrid.

        Args:
            width: Number of columns (positive integer)
            height: Number of rows (positive integer)
            context: WeatherContext, or a mapping with 'lat_deg' and 'season'
            rng: Zero-argument callable returning floats in [0, 1). Takes
                precedence over random_seed.
            random_seed: Seed for a private RandomSource when no rng is given
            initial_regime: Starting regime (defaults to FAIR)
            initial_base: Starting base weather (defaults to the climate baseline)
            biome_grid: Biome id per cell, row-major or shaped (height, width)
            biome_profiles: Biome id -> profile; defaults to the built-in profiles
            clock: Time provider with get_current_date() -> (day_of_year, hour);
                without one no diurnal offset is applied. Its axial_tilt_degrees,
                year_length_days and day_length_hours, when present, override
                config for the day/night cycle
            config: Simulation parameters
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
                raise ConfigurationError(f"Grid {name} must be a positive integer, got {value!r}")

        if not isinstance(context, WeatherContext):
            try:
                lat_deg, season = context["lat_deg"], context["season"]
            except KeyError as e:
                raise ConfigurationError(f"Weather context is missing {e.args[0]!r}") from None
            try:
                lat_deg = float(lat_deg)
            except (TypeError, ValueError):
                raise ConfigurationError(f"Latitude must be a number, got {lat_deg!r}") from None
            context = WeatherContext(lat_deg=lat_deg, season=season)
        if not -90.0 <= context.lat_deg <= 90.0:
            raise ConfigurationError(f"Latitude must be within [-90, 90], got {context.lat_deg}")

        self._width = int(width)
        self._height = int(height)
        self._lat_deg = context.lat_deg
        self._season = context.season
        self.config = config or Configuration()
        self.clock = clock
        if clock is not None:
            # Day/night geometry follows the clock's planet
            self._diurnal_config = self.config.update(
                axial_tilt_degrees=getattr(clock, "axial_tilt_degrees", self.config.axial_tilt_degrees),
                year_length_days=getattr(clock, "year_length_days", self.config.year_length_days),
            )
            self._clock_day_hours = getattr(clock, "day_length_hours", 24.0)
        else:
            self._diurnal_config = self.config
            self._clock_day_hours = 24.0

        if rng is None:
            rng = RandomSource(random_seed)
        self._rng = rng
        self.seed = getattr(rng, "seed", None)

        self._regime = coerce_regime(initial_regime) if initial_regime is not None else WeatherRegime.FAIR
        if initial_base is not None:
            self._base = initial_base.clamped()
        else:
            self._base = create_base_from_climate(self._lat_deg, self._season)

        self._biome_grid = self._validate_biome_grid(biome_grid)
        if biome_profiles is None:
            self._biome_profiles = dict(DEFAULT_BIOME_WEATHER_PROFILES)
        else:
            self._biome_profiles = normalize_biome_profiles(biome_profiles)

        # Set up the cell channels, every cell starting from the base weather
        shape = (self._height, self._width)
        self.weather_data = xr.Dataset(
            data_vars={
                channel.value: (
                    ["y", "x"],
                    np.full(shape, int(getattr(self._base, channel.value)), dtype=np.int64),
                )
                for channel in WeatherChannel
            },
            coords={
                "y": np.arange(self._height),
                "x": np.arange(self._width),
            },
        )
        for channel in WeatherChannel:
            low, high = channel.bounds
            self.weather_data[channel.value].attrs["units"] = "band"
            self.weather_data[channel.value].attrs["band"] = channel.band.__name__
            self.weather_data[channel.value].attrs["valid_range"] = (low, high)

        self.ticks = 0
        self._biome_base_cache: Dict[tuple, WeatherState] = {}
        self._diurnal_cache: Dict[tuple, int] = {}

        print(f"Initialized weather grid with {self._width}x{self._height} cells")
        print(f"Latitude: {self._lat_deg:.1f}°, season: {self._season.value}, "
              f"regime: {self._regime.name}")
        if self.seed is not None:
            print(f"Random seed: {self.seed}")

    def _validate_biome_grid(self, biome_grid) -> Optional[np.ndarray]:
        if biome_grid is None:
            return None
        biomes = np.asarray(biome_grid)
        if biomes.size != self._width * self._height:
            raise ConfigurationError(
                f"Biome grid has {biomes.size} cells, expected "
                f"{self._width * self._height} for a {self._width}x{self._height} grid"
            )
        if biomes.ndim == 2 and biomes.shape != (self._height, self._width):
            raise ConfigurationError(
                f"Biome grid shape {biomes.shape} does not match (height, width) "
                f"{(self._height, self._width)}"
            )
        return biomes.reshape(-1).astype(np.int64)

    # --- Read-only properties ------------------------------------------- #

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def lat_deg(self) -> float:
        return self._lat_deg

    @property
    def season(self) -> Season:
        return self._season

    @property
    def regime(self) -> WeatherRegime:
        return self._regime

    @property
    def base(self) -> WeatherState:
        """Copy of the global base weather."""
        return self._base.copy()

    @property
    def grid(self) -> List[WeatherState]:
        """Snapshot of every cell in row-major order."""
        arrays = [self.weather_data[channel.value].values.ravel() for channel in WeatherChannel]
        return [
            WeatherState(**{
                channel.value: int(values[i])
                for channel, values in zip(WeatherChannel, arrays)
            })
            for i in range(self._width * self._height)
        ]

    @property
    def biome_grid(self) -> Optional[np.ndarray]:
        return None if self._biome_grid is None else self._biome_grid.copy()

    # --- Public API ------------------------------------------------------ #

    def index(self, x: int, y: int) -> int:
        """Row-major index of cell (x, y)."""
        self._check_bounds(x, y)
        return y * self._width + x

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise GridIndexError(x, y, self._width, self._height)

    def get_weather_at(self, x: int, y: int) -> WeatherState:
        """Get the weather of cell (x, y).

        Raises:
            GridIndexError: If (x, y) lies outside the grid
        """
        self._check_bounds(x, y)
        return WeatherState(**{
            channel.value: int(self.weather_data[channel.value].values[y, x])
            for channel in WeatherChannel
        })

    def set_weather_at(self, x: int, y: int, state: WeatherState) -> None:
        """Overwrite the weather of cell (x, y), clamping it into band range.

        Raises:
            GridIndexError: If (x, y) lies outside the grid
        """
        self._check_bounds(x, y)
        state = state.clamped()
        for channel in WeatherChannel:
            self.weather_data[channel.value].values[y, x] = getattr(state, channel.value)

    def step(self) -> None:
        """Advance the simulation by one tick.

        Order: regime, base weather, per-cell drift, scalar smoothing of sky,
        temperature, precipitation and wind force, then wind vector smoothing.
        """
        self._biome_base_cache.clear()
        self._diurnal_cache.clear()

        # 1. evolve regime & base
        previous_regime = self._regime
        self._regime = step_regime(self._regime, self._rng)
        self._base = step_base_weather(
            self._base, self._lat_deg, self._season, self._regime, self._rng, self.config
        )
        if self._regime != previous_regime:
            print(f"Weather regime changed from {previous_regime.name} "
                  f"to {self._regime.name} at tick {self.ticks + 1}")

        # 2. drift local cells toward the base
        self._drift_cells()

        # 3. spatial smoothing of the scalar bands
        for channel in SCALAR_SMOOTHING_ORDER:
            low, high = channel.bounds
            self.weather_data[channel.value].values = smooth_scalar_field(
                self.weather_data[channel.value].values, low, high,
                self.config.smoothing_self_weight,
                self.config.smoothing_neighbor_weight,
            )

        # 4. wind smoothing in vector space
        wind_dir, wind_force = smooth_wind_field(
            self.weather_data[WeatherChannel.WIND_DIR.value].values,
            self.weather_data[WeatherChannel.WIND_FORCE.value].values,
            self.config.smoothing_self_weight,
            self.config.smoothing_neighbor_weight,
        )
        self.weather_data[WeatherChannel.WIND_DIR.value].values = wind_dir
        self.weather_data[WeatherChannel.WIND_FORCE.value].values = wind_force

        self.ticks += 1

    def run(self, steps: int, hours_per_step: Optional[float] = None) -> None:
        """Run several ticks, advancing the clock before each one.

        Args:
            steps: Number of ticks to run
            hours_per_step: Hours to advance the clock per tick; requires a
                clock with advance_time()
        """
        if steps < 0:
            raise ValueError(f"steps cannot be negative, got {steps}")
        if hours_per_step is not None and self.clock is None:
            raise ConfigurationError("hours_per_step requires a clock")

        for _ in range(steps):
            if hours_per_step is not None:
                self.clock.advance_time(hours_per_step)
            self.step()

    # --- Per-cell drift -------------------------------------------------- #

    def _drift_cells(self) -> None:
        """Replace every cell with its drifted state, in row-major order."""
        arrays = {
            channel: self.weather_data[channel.value].values.ravel().copy()
            for channel in WeatherChannel
        }
        for i in range(self._width * self._height):
            state = WeatherState(**{
                channel.value: int(values[i]) for channel, values in arrays.items()
            })
            drifted = self.step_local_weather_cell(state, self._base, i)
            for channel, values in arrays.items():
                values[i] = getattr(drifted, channel.value)

        shape = (self._height, self._width)
        for channel, values in arrays.items():
            self.weather_data[channel.value].values = values.reshape(shape)

    def _biome_base(self, base: WeatherState, biome_id: Optional[int]) -> WeatherState:
        key = (biome_id, tuple(base.to_dict().values()))
        if key not in self._biome_base_cache:
            self._biome_base_cache[key] = adjust_base_for_biome(base, biome_id, self._biome_profiles)
        return self._biome_base_cache[key]

    def _diurnal_offset(self, biome_id: Optional[int]) -> int:
        """Diurnal temperature delta for a biome at the clock's current time."""
        if self.clock is None:
            return 0
        # Day 0 is the spring equinox, so the clock's day is used without offset
        day_of_year, clock_hour = self.clock.get_current_date()
        hour_of_day = clock_hour * 24.0 / self._clock_day_hours
        key = (biome_id, day_of_year, hour_of_day)
        if key not in self._diurnal_cache:
            profile = self._biome_profiles.get(biome_id) if biome_id is not None else None
            self._diurnal_cache[key] = compute_diurnal_temp_offset(
                self._lat_deg, day_of_year, hour_of_day, profile, self._diurnal_config
            )
        return self._diurnal_cache[key]

    def step_local_weather_cell(self, state: WeatherState, base: WeatherState,
                                index: int) -> WeatherState:
        """Drift a single cell's weather toward the biome-adjusted base.

        Sky, temperature, wind force and precipitation each drift toward the
        base adjusted for the cell's biome; the diurnal offset is then added to
        the temperature. Wind direction is left as is since it is settled
        during wind smoothing. Does not modify ``state`` or the grid.
        """
        if not 0 <= index < self._width * self._height:
            raise IndexError(f"Cell index {index} is out of range for a "
                             f"{self._width}x{self._height} grid")
        biome_id = int(self._biome_grid[index]) if self._biome_grid is not None else None
        biome_base = self._biome_base(base, biome_id)

        values = {"wind_dir": state.wind_dir}
        for channel in DRIFT_ORDER:
            low, high = channel.bounds
            values[channel.value] = drift_component(
                getattr(state, channel.value),
                getattr(biome_base, channel.value),
                low, high, self._rng,
                self.config.drift_toward_base_probability,
                self.config.drift_jump_probability,
            )

        temp_low, temp_high = WeatherChannel.TEMP.bounds
        values["temp"] = clamp(values["temp"] + self._diurnal_offset(biome_id),
                               temp_low, temp_high)
        return WeatherState(**values)
