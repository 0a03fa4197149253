"""Player commands.

These are the only entry points the presentation layer uses to change the
simulation, apart from advancing the clock. Commands identify modules and
connections by stable id.

A command that cannot be carried out (not enough resources, overlapping or
out-of-bounds placement, full target, max level, duplicate connection,
finished game) is declined silently: it changes nothing, logs at DEBUG and
returns a falsy value. Nothing here raises for player mistakes.
"""

import logging

from ..models.connection import Connection
from ..models.game import Game
from ..models.module import MODULE_KINDS, Module
from ..utils.constants import (
    CAMERA_ZOOM_RANGE,
    CONNECTION_COST,
    MIN_MODULE_SPACING,
    MODULE_COSTS,
    PLACEMENT_MARGIN,
    SPEED_CYCLE,
)
from ..utils.distance import euclidean_distance, nearest
from . import droids
from .behavior import upgrade
from .energy import allocate_energy
from .waves import spawn_wave

logger = logging.getLogger(__name__)


def _declined(command: str, reason: str) -> None:
    logger.debug(f"{command} declined: {reason}")


def _connected_pairs(game: Game) -> set[frozenset]:
    return {connection.key for connection in game.connections.values()}


def _connect(game: Game, a: int, b: int) -> Connection:
    connection = Connection(id=game.next_id("connection"), a=a, b=b)
    game.connections[connection.id] = connection
    return connection


def placement_cost(game: Game, kind: str) -> int:
    """Module cost plus the automatic connection, which the first module skips."""
    return MODULE_COSTS[kind] + (CONNECTION_COST if game.modules else 0)


def place_module(game: Game, x: float, y: float, kind: str) -> Module | None:
    """Build a module at (x, y) and wire it to the nearest existing module.

    Args:
        game: Current game state
        x: X position
        y: Y position
        kind: "energy", "recruitment", "production" or "defense"

    Returns:
        The new module, or None if the placement was declined
    """
    if not game.running:
        _declined("place_module", "game over")
        return None
    if kind not in MODULE_KINDS:
        _declined("place_module", f"unknown kind {kind!r}")
        return None

    cost = placement_cost(game, kind)
    if game.resources < cost:
        _declined("place_module", f"needs {cost}, have {game.resources}")
        return None
    if not (
        PLACEMENT_MARGIN <= x <= game.width - PLACEMENT_MARGIN
        and PLACEMENT_MARGIN <= y <= game.height - PLACEMENT_MARGIN
    ):
        _declined("place_module", f"({x}, {y}) out of bounds")
        return None
    for other in game.modules.values():
        if euclidean_distance(x, y, other.x, other.y) < MIN_MODULE_SPACING:
            _declined("place_module", f"overlaps module {other.id}")
            return None

    neighbour = nearest(x, y, game.modules.values())
    module = Module(
        id=game.next_id("module"),
        kind=kind,
        x=x,
        y=y,
        last_production=game.clock,
        last_recruitment=game.clock,
        last_attack=game.clock,
    )
    game.modules[module.id] = module
    if neighbour is not None:
        _connect(game, neighbour.id, module.id)
    game.resources -= cost

    allocate_energy(game)
    logger.debug(f"Placed {kind} module {module.id} at ({x}, {y}) for {cost}")
    return module


def create_connection(game: Game, source_id: int) -> Connection | None:
    """Connect a module to the nearest module it is not yet connected to.

    Returns:
        The new connection, or None if declined
    """
    if not game.running:
        _declined("create_connection", "game over")
        return None
    source = game.modules.get(source_id)
    if source is None:
        _declined("create_connection", f"no module {source_id}")
        return None
    if game.resources < CONNECTION_COST:
        _declined("create_connection", f"needs {CONNECTION_COST}, have {game.resources}")
        return None

    pairs = _connected_pairs(game)
    candidates = [
        module
        for module in game.modules.values()
        if module.id != source_id and frozenset((source_id, module.id)) not in pairs
    ]
    target = nearest(source.x, source.y, candidates)
    if target is None:
        _declined("create_connection", f"module {source_id} already connected to everything")
        return None

    connection = _connect(game, source_id, target.id)
    game.resources -= CONNECTION_COST
    allocate_energy(game)
    return connection


def destroy_module(game: Game, module_id: int) -> bool:
    """Demolish a module. Its droids are lost and it is not refunded."""
    if not game.running:
        _declined("destroy_module", "game over")
        return False
    if module_id not in game.modules:
        _declined("destroy_module", f"no module {module_id}")
        return False
    droids.remove_module(game, module_id)
    allocate_energy(game)
    return True


def upgrade_module(game: Game, module_id: int) -> bool:
    """Raise a module one level if affordable and below the maximum."""
    if not game.running:
        _declined("upgrade_module", "game over")
        return False
    module = game.modules.get(module_id)
    if module is None or not upgrade(game, module):
        _declined("upgrade_module", f"module {module_id} cannot be upgraded")
        return False
    allocate_energy(game)
    return True


def transfer_droid(game: Game, target_id: int, connection_id: int | None = None) -> bool:
    """Move one droid into a module.

    If no connection is given but the selected connection touches the
    target, the droid comes across that connection.
    """
    if not game.running:
        _declined("transfer_droid", "game over")
        return False
    if connection_id is None and game.selected_connection is not None:
        selected = game.connections.get(game.selected_connection)
        if selected is not None and selected.touches(target_id):
            connection_id = selected.id
    return droids.transfer_droid(game, target_id, connection_id)


def select_connection(game: Game, connection_id: int | None) -> bool:
    """Select a connection for connection-specific transfers, or clear with None."""
    if connection_id is not None and connection_id not in game.connections:
        _declined("select_connection", f"no connection {connection_id}")
        return False
    game.selected_connection = connection_id
    return True


def toggle_pause(game: Game) -> bool:
    """Pause or resume the clock. Returns the new paused state."""
    game.paused = not game.paused
    logger.debug(f"{'Paused' if game.paused else 'Resumed'} at clock {game.clock}")
    return game.paused


def cycle_speed(game: Game) -> int:
    """Step the clock multiplier through 1x, 2x, 4x. Returns the new speed."""
    position = SPEED_CYCLE.index(game.speed)
    game.speed = SPEED_CYCLE[(position + 1) % len(SPEED_CYCLE)]
    return game.speed


def pan_camera(game: Game, dx: float, dy: float) -> None:
    game.camera.x += dx
    game.camera.y += dy


def zoom_camera(game: Game, factor: float) -> float:
    """Multiply the zoom level, clamped to CAMERA_ZOOM_RANGE. Returns the new zoom."""
    low, high = CAMERA_ZOOM_RANGE
    if factor > 0:
        game.camera.zoom = max(low, min(high, game.camera.zoom * factor))
    return game.camera.zoom


def force_wave(game: Game) -> bool:
    """Spawn the next wave immediately, if any remain."""
    if not game.running:
        _declined("force_wave", "game over")
        return False
    return bool(spawn_wave(game))
