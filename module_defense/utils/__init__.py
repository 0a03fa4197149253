"""Utility functions and constants for Module Defense."""

from .constants import (
    CONNECTION_COST,
    MAX_DROIDS,
    MAX_LEVEL,
    MAX_WAVES,
    MODULE_COSTS,
    PLAY_HEIGHT,
    PLAY_WIDTH,
    RNG_SEED_DEFAULT,
    STARTING_RESOURCES,
)
from .distance import euclidean_distance, nearest
from .rng import GameRNG

__all__ = [
    "CONNECTION_COST",
    "MAX_DROIDS",
    "MAX_LEVEL",
    "MAX_WAVES",
    "MODULE_COSTS",
    "PLAY_HEIGHT",
    "PLAY_WIDTH",
    "RNG_SEED_DEFAULT",
    "STARTING_RESOURCES",
    "euclidean_distance",
    "nearest",
    "GameRNG",
]
