"""Simulation engine components."""

from .game_setup import new_game
from .tick_executor import TickExecutor, TickResults

__all__ = [
    "new_game",
    "TickExecutor",
    "TickResults",
]
