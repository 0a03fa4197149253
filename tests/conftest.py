"""Shared fixtures for simulation tests."""

import pytest
from builders import add_module, chain

from module_defense.engine.energy import allocate_energy
from module_defense.models import Game


@pytest.fixture
def empty_game():
    """A game with no modules and plenty of resources."""
    return Game(seed=42, resources=10000)


@pytest.fixture
def powered_line(empty_game):
    """Energy -> production(3) -> recruitment(1) -> defense(0), all powered."""
    game = empty_game
    energy = add_module(game, "energy", 100, 100)
    production = add_module(game, "production", 200, 100, droids=3)
    recruitment = add_module(game, "recruitment", 300, 100, droids=1)
    defense = add_module(game, "defense", 400, 100)
    chain(game, energy, production, recruitment, defense)
    allocate_energy(game)
    return game
