"""Spatial smoothing of the weather grid channels.

Scalar bands are averaged with their orthogonal neighbours through a
4-neighbour weighted kernel. Wind is smoothed as a vector field so that
directions either side of north average to north instead of south.
"""

from typing import Tuple

import numpy as np
import scipy.ndimage as ndimage

from .constants import WindDirection, WindForce
from .exceptions import ConfigurationError

DIRECTION_COUNT = len(WindDirection)


def _kernel(self_weight: float, neighbor_weight: float) -> np.ndarray:
    if self_weight <= 0:
        raise ConfigurationError(f"self_weight must be positive, got {self_weight}")
    if neighbor_weight < 0:
        raise ConfigurationError(f"neighbor_weight cannot be negative, got {neighbor_weight}")
    return np.array([
        [0.0, neighbor_weight, 0.0],
        [neighbor_weight, self_weight, neighbor_weight],
        [0.0, neighbor_weight, 0.0],
    ])


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer with halves going up."""
    return np.floor(values + 0.5)


def smooth_array(field: np.ndarray, self_weight: float = 2.0,
                 neighbor_weight: float = 1.0) -> np.ndarray:
    """Weighted average of every cell with its in-bounds N/S/E/W neighbours.

    Neighbours outside the grid contribute neither value nor weight. The whole
    pass reads from the input array, so results never feed into other cells of
    the same pass.

    Args:
        field: 2D array of shape (height, width)
        self_weight: Weight of the cell's own value (must be positive)
        neighbor_weight: Weight of each neighbour

    Returns:
        New float array of the same shape
    """
    kernel = _kernel(self_weight, neighbor_weight)
    field = np.asarray(field, dtype=float)
    weighted_sum = ndimage.convolve(field, kernel, mode="constant", cval=0.0)
    weight_sum = ndimage.convolve(np.ones_like(field), kernel, mode="constant", cval=0.0)
    return weighted_sum / weight_sum


def smooth_scalar_field(field: np.ndarray, minimum: int, maximum: int,
                        self_weight: float = 2.0,
                        neighbor_weight: float = 1.0) -> np.ndarray:
    """Smooth a band field, rounding back to whole bands within [minimum, maximum]."""
    smoothed = smooth_array(field, self_weight, neighbor_weight)
    return np.clip(round_half_up(smoothed), minimum, maximum).astype(np.int64)


def dir_index_to_angle(direction):
    """Convert a 0..7 compass index into radians (0..2π)."""
    return np.asarray(direction, dtype=float) / DIRECTION_COUNT * 2 * np.pi


def angle_to_dir_index(angle):
    """Convert an angle in radians to the nearest 0..7 compass index."""
    two_pi = 2 * np.pi
    angle = np.mod(np.asarray(angle, dtype=float), two_pi)
    return np.mod(round_half_up(angle / two_pi * DIRECTION_COUNT), DIRECTION_COUNT).astype(np.int64)


def force_to_magnitude(force):
    """Map wind force bands to vector magnitudes (identity on the band scale)."""
    return np.asarray(force, dtype=float)


def magnitude_to_force(magnitude):
    """Map vector magnitudes back to whole wind force bands."""
    return np.clip(
        round_half_up(np.asarray(magnitude, dtype=float)),
        WindForce.CALM, WindForce.HURRICANE
    ).astype(np.int64)


def smooth_wind_field(wind_dir: np.ndarray, wind_force: np.ndarray,
                      self_weight: float = 2.0,
                      neighbor_weight: float = 1.0) -> Tuple[np.ndarray, np.ndarray]:
    """Smooth wind direction and force together in Cartesian space.

    Each cell's (direction, force) becomes a (u, v) vector; u and v are smoothed
    independently with the same kernel as the scalar bands and then converted
    back to the nearest compass point and a clamped force band.

    Args:
        wind_dir: 2D array of compass indices
        wind_force: 2D array of wind force bands
        self_weight: Weight of the cell's own vector
        neighbor_weight: Weight of each neighbour's vector

    Returns:
        Tuple of (wind_dir, wind_force) integer arrays
    """
    angle = dir_index_to_angle(wind_dir)
    magnitude = force_to_magnitude(wind_force)
    u = np.cos(angle) * magnitude
    v = np.sin(angle) * magnitude

    u_smoothed = smooth_array(u, self_weight, neighbor_weight)
    v_smoothed = smooth_array(v, self_weight, neighbor_weight)

    new_magnitude = np.sqrt(u_smoothed ** 2 + v_smoothed ** 2)
    new_angle = np.arctan2(v_smoothed, u_smoothed)

    return angle_to_dir_index(new_angle), magnitude_to_force(new_magnitude)
