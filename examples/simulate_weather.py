"""Minimal example demonstrating a day of weather over a generated biome map.

This script builds a biome map for a temperate grid, attaches a planetary
clock and runs the weather grid hour by hour, printing a summary of the
weather at a few cells.
"""

from collections import Counter

from src.weather_simulation import (
    BiomeMapGenerator,
    PlanetaryClock,
    Temperature,
    WeatherContext,
    WeatherGrid,
)


def main():
    """Simulate one day of weather."""
    # Set parameters
    width, height = 24, 16
    lat_deg = 48.0
    seed = 42

    # 1. Create the biome map
    print("Generating biome map...")
    biomes = BiomeMapGenerator(width, height, lat_deg=lat_deg, seed=seed).generate()

    # 2. Setup the clock, starting at midnight on the first day of summer
    clock = PlanetaryClock(start_day=90)
    season = clock.get_season()
    print(f"Day length at {lat_deg:.0f}°: {clock.get_day_length(lat_deg):.1f} h")

    # 3. Create the grid
    grid = WeatherGrid(
        width, height,
        WeatherContext(lat_deg=lat_deg, season=season),
        random_seed=seed,
        biome_grid=biomes,
        clock=clock,
    )

    # 4. Run hour by hour
    probes = [(0, 0), (width // 2, height // 2), (width - 1, height - 1)]
    for _ in range(24):
        grid.run(1, hours_per_step=1)
        temps = Counter(Temperature(cell.temp).name for cell in grid.grid)
        print(f"{clock.get_formatted_date()} regime={grid.regime.name} "
              f"base={grid.base.describe()['temp']} cells={dict(temps)}")

    print("Final weather at probe cells:")
    for x, y in probes:
        print(f"  ({x}, {y}) biome {int(biomes[grid.index(x, y)])}: "
              f"{grid.get_weather_at(x, y).describe()}")


if __name__ == "__main__":
    main()
