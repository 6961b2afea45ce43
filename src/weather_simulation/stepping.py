"""Biased random-walk primitives that move a band by at most one step."""

from .constants import WindDirection
from .models import clamp
from .random_source import RNG


def step_band(
        current: int,
        minimum: int,
        maximum: int,
        target: int,
        volatility: float,
        rng: RNG
) -> int:
    """Advance a band one tick along a sticky, target-biased random walk.

    One draw decides the mode. Above ``volatility`` the band mostly holds and
    only a draw above 0.9 moves it one step toward ``target``. Inside the
    volatility window a second draw wobbles it by -1, 0 or +1 regardless of
    the target.

    Args:
        current: Current band value
        minimum: Lowest band of the enumeration
        maximum: Highest band of the enumeration
        target: Band the walk is biased toward
        volatility: Probability (0-1) of an unbiased wobble
        rng: Zero-argument callable returning floats in [0, 1)

    Returns:
        The new band value, clamped to [minimum, maximum]
    """
    r = rng()
    direction = 0
    if current < target:
        direction = 1
    elif current > target:
        direction = -1

    if r > volatility:
        if r > 0.9 and direction != 0:
            current += direction
    else:
        r2 = rng()
        if r2 < 0.33:
            current -= 1
        elif r2 > 0.66:
            current += 1

    return clamp(current, minimum, maximum)


def drift_component(
        value: int,
        base: int,
        minimum: int,
        maximum: int,
        rng: RNG,
        toward_probability: float = 0.7,
        jump_probability: float = 0.9
) -> int:
    """Drift a cell's band toward its (biome-adjusted) base value.

    Draws below ``toward_probability`` step one band toward ``base``; draws at or
    above ``jump_probability`` jump one band either way (50/50 on a second draw);
    anything in between holds.
    """
    r = rng()
    if r < toward_probability:
        if value < base:
            value += 1
        elif value > base:
            value -= 1
    elif r >= jump_probability:
        if rng() < 0.5:
            value -= 1
        else:
            value += 1

    return clamp(value, minimum, maximum)


def step_wind_direction(wind_dir: int, rng: RNG, turn_probability: float = 0.2) -> int:
    """Slowly veer or back the wind by one compass point, wrapping mod 8."""
    points = len(WindDirection)
    r = rng()
    if r < turn_probability:
        return (wind_dir - 1) % points
    if r > 1.0 - turn_probability:
        return (wind_dir + 1) % points
    return wind_dir
