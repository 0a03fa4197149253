"""Seedable RNG wrapper for deterministic gameplay."""

import random


class GameRNG:
    """Wrapper around Python's random.Random for deterministic game behavior.

    All randomness in the simulation (spawn edges, spawn offsets, enemy
    heading jitter) goes through this class so that two games created with
    the same seed and fed the same commands evolve identically.
    """

    def __init__(self, seed: int):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive."""
        return self.rng.randint(a, b)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self.rng.random()
