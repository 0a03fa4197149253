"""Droid population ledger.

``game.total_droids`` is a conserved count. Only three operations touch it:

- produce_and_assign: +1, and only when the new droid has somewhere to go
- transfer_droid: moves one droid between modules, ledger unchanged
- remove_module: drops every droid the module held (destruction is lossy)

After each of them the ledger equals the sum of droids held by non-energy
modules.
"""

import logging

from ..models.game import Game
from ..models.module import Module
from .graph import bfs_distances, build_adjacency

logger = logging.getLogger(__name__)


def assigned_droids(game: Game) -> int:
    """Sum of droids held by all non-energy modules."""
    return sum(module.droids for module in game.modules.values() if not module.is_energy)


def ledger_balanced(game: Game) -> bool:
    """True if the droid ledger matches the droids actually assigned."""
    return game.total_droids == assigned_droids(game)


def check_ledger(game: Game) -> bool:
    """Like ledger_balanced, but log a warning on mismatch."""
    if ledger_balanced(game):
        return True
    logger.warning(
        f"Droid ledger out of balance at clock {game.clock}: "
        f"ledger={game.total_droids}, assigned={assigned_droids(game)}"
    )
    return False


def produce_and_assign(game: Game, recruiter: Module) -> Module | None:
    """Create one droid and place it in the recruiter's component.

    The droid goes to the non-energy module with the fewest droids among
    those in the recruiter's connected component that still have space
    (the recruiter included). Ties go to the module met first in a
    breadth-first walk from the recruiter. If nothing has space, no droid
    is created.

    Args:
        game: Current game state
        recruiter: The recruitment module producing the droid

    Returns:
        The module that received the droid, or None if none could
    """
    adjacency = build_adjacency(game)
    candidates = [
        game.modules[module_id]
        for module_id in bfs_distances(adjacency, recruiter.id)
        if not game.modules[module_id].is_energy and game.modules[module_id].has_space
    ]
    if not candidates:
        logger.debug(f"Recruiter {recruiter.id}: no space in component, droid not produced")
        return None

    receiver = min(candidates, key=lambda module: module.droids)
    receiver.droids += 1
    game.total_droids += 1
    return receiver


def find_transfer_source(game: Game, target: Module) -> Module | None:
    """Find the hop-nearest non-energy module with a droid to spare.

    Ties at equal hop distance go to BFS encounter order. Modules outside the
    target's component are never considered.
    """
    adjacency = build_adjacency(game)
    for module_id in bfs_distances(adjacency, target.id):
        if module_id == target.id:
            continue
        module = game.modules[module_id]
        if not module.is_energy and module.droids >= 1:
            return module
    return None


def transfer_droid(game: Game, target_id: int, connection_id: int | None = None) -> bool:
    """Move one droid into ``target_id``.

    Without a connection, the source is the nearest module by hop distance
    holding at least one droid. With a connection, the source is strictly
    the module at the other end of that connection.

    The ledger is unchanged. Declined transfers leave every count untouched.
    The target does not have to be powered: droids can be staged on a module
    before an energy source reaches it, unlike the browser game, which
    refused transfers into unpowered modules.

    Args:
        game: Current game state
        target_id: Module receiving the droid
        connection_id: Optional connection whose far end supplies the droid

    Returns:
        True if a droid moved, False otherwise
    """
    target = game.modules.get(target_id)
    if target is None or target.is_energy or not target.has_space:
        logger.debug(f"Transfer to {target_id} declined: invalid or full target")
        return False

    if connection_id is not None:
        connection = game.connections.get(connection_id)
        if connection is None or not connection.touches(target_id):
            logger.debug(f"Transfer to {target_id} declined: connection {connection_id} not usable")
            return False
        source = game.modules[connection.other(target_id)]
        if source.is_energy or source.droids < 1:
            logger.debug(f"Transfer to {target_id} declined: module {source.id} has no droids")
            return False
    else:
        source = find_transfer_source(game, target)
        if source is None:
            logger.debug(f"Transfer to {target_id} declined: no reachable droids")
            return False

    source.droids -= 1
    target.droids += 1
    return True


def remove_module(game: Game, module_id: int) -> Module:
    """Remove a module, its droids and every connection touching it.

    Droids held by the module leave the ledger. Other modules and
    connections keep their ids. Energy allocation is not recomputed here;
    callers do that once after all removals.

    Args:
        game: Current game state
        module_id: Module to remove

    Returns:
        The removed module

    Raises:
        KeyError: If the module does not exist
    """
    module = game.modules.pop(module_id)
    if not module.is_energy:
        game.total_droids -= module.droids

    pruned = [cid for cid, connection in game.connections.items() if connection.touches(module_id)]
    for connection_id in pruned:
        del game.connections[connection_id]
    if game.selected_connection in pruned:
        game.selected_connection = None

    logger.info(
        f"Module {module_id} ({module.kind}) removed with {module.droids} droids, "
        f"{len(pruned)} connections pruned"
    )
    return module
