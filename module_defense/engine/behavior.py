"""Per-module behaviour: capacity, timers and upgrades.

Each module has independent timers measured on the game clock:

- production: +capacity resources every PRODUCTION_INTERVAL
- recruitment: one produce-and-assign attempt every recruitment_interval()
- defense: one volley every DEFENSE_INTERVAL

Modules only act while connected. A timer fires when at least its interval
has elapsed since the last firing. Firings stay on the timer's own interval
grid, so the number of firings over a stretch of game time does not depend
on how the stretch was cut into ticks. A timer that fell more than one
interval behind (for example while unpowered) restarts from the current
clock instead of firing a burst.
"""

import logging
import math

from ..models.game import Game
from ..models.module import Module
from ..models.projectile import Projectile
from ..utils.constants import (
    BASE_CAPACITY,
    DEFENSE_INTERVAL,
    DEFENSE_RANGE,
    LEVEL_MULTIPLIER_STEP,
    MAX_LEVEL,
    PRODUCTION_INTERVAL,
    RECRUITMENT_INTERVALS,
    UPGRADE_COSTS,
)
from ..utils.distance import euclidean_distance
from .droids import produce_and_assign
from .energy import module_capacity

logger = logging.getLogger(__name__)


def next_timer(now: float, last: float, interval: float) -> float:
    """Timestamp to store as the last firing of a timer that fired at ``now``."""
    last += interval
    return now if now - last >= interval else last


def level_multiplier(level: int) -> float:
    return 1 + (level - 1) * LEVEL_MULTIPLIER_STEP


def capacity(module: Module) -> float:
    """Throughput of a module.

    - energy: number of modules it can power (3/7/12 by level)
    - recruitment: always 1, upgrades do not raise droid output
    - production: resources per second, 5 x droids x level multiplier
    - defense: shots per volley, 1 x droids x level multiplier
    """
    if module.is_energy:
        return module_capacity(module.level)
    if module.kind == "recruitment":
        return BASE_CAPACITY["recruitment"]
    return BASE_CAPACITY[module.kind] * module.droids * level_multiplier(module.level)


def recruitment_interval(droids: int) -> int:
    """Milliseconds between recruitment attempts for a given crew size.

    Zero means the module never recruits. Crews above the table size use the
    last entry.
    """
    if droids <= 0:
        return 0
    return RECRUITMENT_INTERVALS[min(droids, len(RECRUITMENT_INTERVALS) - 1)]


def upgrade_cost(module: Module) -> int | None:
    """Cost of the next level, or None if the module is already at max level."""
    if module.level >= MAX_LEVEL:
        return None
    return UPGRADE_COSTS[module.kind][module.level]


def can_upgrade(game: Game, module: Module) -> bool:
    cost = upgrade_cost(module)
    return cost is not None and game.resources >= cost


def upgrade(game: Game, module: Module) -> bool:
    """Raise a module one level if affordable.

    Energy allocation is not recomputed here; see commands.upgrade_module.

    Returns:
        True if the module was upgraded
    """
    if not can_upgrade(game, module):
        return False
    game.resources -= upgrade_cost(module)
    module.level += 1
    return True


def fire_volley(game: Game, module: Module) -> list[Projectile]:
    """Launch one projectile at each of the nearest enemies in range.

    The number of shots is floor(capacity). Enemies further than
    DEFENSE_RANGE are ignored.

    Returns:
        The projectiles added to the game
    """
    shots = math.floor(capacity(module))
    in_range = []
    for enemy in game.enemies:
        distance = euclidean_distance(module.x, module.y, enemy.x, enemy.y)
        if distance <= DEFENSE_RANGE:
            in_range.append((distance, enemy))
    in_range.sort(key=lambda pair: pair[0])

    volley = [
        Projectile.aimed(module.x, module.y, enemy.x, enemy.y, hostile=False)
        for _, enemy in in_range[:shots]
    ]
    game.projectiles.extend(volley)
    return volley


def update_module(game: Game, module: Module) -> None:
    """Run one tick of a module's behaviour timers."""
    if not module.connected:
        return

    now = game.clock

    if module.kind == "production":
        if now - module.last_production >= PRODUCTION_INTERVAL:
            game.resources += capacity(module)
            module.last_production = next_timer(now, module.last_production, PRODUCTION_INTERVAL)

    elif module.kind == "recruitment":
        interval = recruitment_interval(module.droids)
        if interval > 0 and now - module.last_recruitment >= interval:
            # Timer restarts even if nothing had room for the droid
            receiver = produce_and_assign(game, module)
            module.last_recruitment = next_timer(now, module.last_recruitment, interval)
            if receiver is not None:
                game.record("recruit", recruiter=module.id, receiver=receiver.id)

    elif module.kind == "defense":
        if module.droids > 0 and now - module.last_attack >= DEFENSE_INTERVAL:
            volley = fire_volley(game, module)
            module.last_attack = next_timer(now, module.last_attack, DEFENSE_INTERVAL)
            if volley:
                game.record("volley", module=module.id, shots=len(volley))
