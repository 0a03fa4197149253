"""New game creation."""

import logging

from ..models.connection import Connection
from ..models.game import Game
from ..models.module import Module
from ..utils.constants import PLAY_HEIGHT, PLAY_WIDTH, RNG_SEED_DEFAULT, STARTING_RESOURCES
from .energy import allocate_energy

logger = logging.getLogger(__name__)

STARTING_SPACING = 50  # Offset of each starting module from the centre


def new_game(
    seed: int = RNG_SEED_DEFAULT,
    width: float = PLAY_WIDTH,
    height: float = PLAY_HEIGHT,
    resources: float = STARTING_RESOURCES,
) -> Game:
    """Create a game with the starting base.

    The base is a level 1 energy module and a production module either
    side of the centre, joined by one connection. The production module
    holds the single starting droid, so the ledger starts at 1.

    Args:
        seed: RNG seed for deterministic waves
        width: Play area width in pixels
        height: Play area height in pixels
        resources: Starting resources

    Returns:
        Initialized Game with energy allocated
    """
    game = Game(seed=seed, width=width, height=height, resources=resources)
    centre_x, centre_y = width / 2, height / 2

    energy = Module(
        id=game.next_id("module"), kind="energy", x=centre_x - STARTING_SPACING, y=centre_y
    )
    production = Module(
        id=game.next_id("module"),
        kind="production",
        x=centre_x + STARTING_SPACING,
        y=centre_y,
        droids=1,
    )
    game.modules[energy.id] = energy
    game.modules[production.id] = production
    connection = Connection(id=game.next_id("connection"), a=energy.id, b=production.id)
    game.connections[connection.id] = connection
    game.total_droids = 1

    allocate_energy(game)
    logger.info(f"New game: seed={seed}, area={width}x{height}, resources={resources}")
    return game
