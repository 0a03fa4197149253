"""Energy allocation.

Every energy module powers itself. Each energy source then grants a slot to
up to ``module_capacity(level)`` consumer modules it can reach, nearest
first. Sources are processed strongest first, and a consumer claimed by one
source is never counted against another, so capacity is never double spent.

Allocation is a full, non-incremental pass. It is deterministic and
idempotent, and is re-run after any topology or level change.
"""

import logging

from ..models.game import Game
from ..models.module import Module
from ..utils.constants import ENERGY_MODULE_CAPACITY, TYPE_PRIORITY
from .graph import bfs_distances, build_adjacency

logger = logging.getLogger(__name__)


def module_capacity(level: int) -> int:
    """Number of consumer modules an energy source of ``level`` can power."""
    return ENERGY_MODULE_CAPACITY[level]


def source_order(game: Game) -> list[Module]:
    """Energy sources in allocation order: higher level first, then oldest first."""
    sources = [module for module in game.modules.values() if module.is_energy]
    return sorted(sources, key=lambda module: (-module.level, module.id))


def _candidate_key(module: Module, distances: dict[int, int]) -> tuple:
    return (
        distances[module.id],
        -TYPE_PRIORITY[module.kind],
        -module.level,
        module.id,
    )


def allocate_energy(game: Game) -> dict[int, int]:
    """Recompute the ``connected`` flag of every module.

    Algorithm:
    1. Energy modules are connected; every other module is reset.
    2. Sources are visited in source_order().
    3. Each source collects reachable, still-disconnected consumers and
       sorts them by (hop distance asc, type priority desc, level desc,
       id asc), then connects them until its capacity is used up.

    Args:
        game: Current game state (modified in place)

    Returns:
        Mapping of consumer module id to the id of the source powering it
    """
    for module in game.modules.values():
        module.connected = module.is_energy

    adjacency = build_adjacency(game)
    claims: dict[int, int] = {}

    for source in source_order(game):
        distances = bfs_distances(adjacency, source.id)
        candidates = [
            game.modules[module_id]
            for module_id in distances
            if not game.modules[module_id].is_energy and module_id not in claims
        ]
        candidates.sort(key=lambda module: _candidate_key(module, distances))

        remaining = module_capacity(source.level)
        for candidate in candidates[:remaining]:
            candidate.connected = True
            claims[candidate.id] = source.id

        logger.debug(
            f"Energy source {source.id} (L{source.level}) powers "
            f"{min(remaining, len(candidates))}/{len(candidates)} reachable modules"
        )

    return claims
