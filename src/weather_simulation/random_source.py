"""Injectable random number source for the weather simulation."""

from typing import Callable, Optional

import numpy as np

# Anything returning a float in [0, 1) when called with no arguments
RNG = Callable[[], float]


class RandomSource:
    """Seeded uniform generator backed by a private numpy RandomState.

    Instances are callable, so they can be passed anywhere an RNG function is
    expected.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the generator.

        Args:
            seed: Seed for reproducible sequences. When omitted a seed is drawn
                from system entropy and kept in ``self.seed`` so the run can be
                replayed.
        """
        self.seed = seed if seed is not None else int(np.random.SeedSequence().entropy % 1000000)
        self._state = np.random.RandomState(self.seed)

    def next(self) -> float:
        """Return the next float in [0, 1)."""
        return float(self._state.random_sample())

    def __call__(self) -> float:
        return self.next()
