"""
Pytest fixtures for the weather simulation test suite.

Provides scripted random sources for exact control over draws, and seeded
grids for end-to-end tests.
"""

import pytest

from src.weather_simulation import RandomSource, WeatherContext, WeatherGrid


class ScriptedRNG:
    """Random source that returns a fixed sequence of draws and counts calls."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        if self.calls >= len(self.values):
            raise AssertionError(f"ScriptedRNG exhausted after {self.calls} draws")
        value = self.values[self.calls]
        self.calls += 1
        return value


class ConstantRNG:
    """Random source that always returns the same draw and counts calls."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


class RecordingRNG:
    """Seeded random source that remembers every draw it hands out."""

    def __init__(self, seed):
        self._source = RandomSource(seed)
        self.seed = seed
        self.draws = []

    def __call__(self):
        value = self._source()
        self.draws.append(value)
        return value


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRNG instances."""
    return ScriptedRNG


@pytest.fixture
def constant_rng():
    """Factory for ConstantRNG instances."""
    return ConstantRNG


@pytest.fixture
def recording_rng():
    """Factory for RecordingRNG instances."""
    return RecordingRNG


@pytest.fixture
def temperate_winter():
    """Context for a temperate grid in winter."""
    return WeatherContext(lat_deg=45.0, season="winter")


@pytest.fixture
def seeded_grid(temperate_winter):
    """A 10x10 temperate winter grid with a fixed seed."""
    return WeatherGrid(10, 10, temperate_winter, random_seed=2024)
