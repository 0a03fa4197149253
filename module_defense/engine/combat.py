"""Enemy movement and projectile resolution.

This module handles:
1. Enemy steering toward the nearest module, with random heading jitter
2. Enemy fire at modules in range
3. Projectile travel, expiry and collision

Damage is applied at the moment of collision to a single module or enemy.
Dead enemies are removed immediately; destroyed modules are removed later
in the tick by the tick executor.
"""

import math

from ..models.enemy import Enemy
from ..models.game import Game
from ..models.projectile import Projectile
from ..utils.constants import (
    ENEMY_ATTACK_INTERVAL,
    ENEMY_EDGE_CLAMP,
    ENEMY_HEADING_WEIGHT,
    ENEMY_HIT_RADIUS,
    ENEMY_JITTER_MIN_MS,
    ENEMY_JITTER_SPREAD_MS,
    ENEMY_RANGE,
    MODULE_HIT_RADIUS,
)
from ..utils.distance import euclidean_distance, nearest


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def update_enemy(game: Game, enemy: Enemy, delta: float) -> Projectile | None:
    """Advance one enemy by ``delta`` ms of game time.

    The heading drifts randomly every 1-3 seconds. If a module is within
    ENEMY_RANGE the enemy shoots at it once per ENEMY_ATTACK_INTERVAL;
    otherwise it blends its heading 70/30 with the bearing to the nearest
    module. It then moves and is kept inside the play area.

    Returns:
        The projectile fired this tick, if any
    """
    enemy.direction_timer += delta
    if enemy.direction_timer > ENEMY_JITTER_MIN_MS + game.rng.random() * ENEMY_JITTER_SPREAD_MS:
        enemy.direction += (game.rng.random() - 0.5) * math.pi
        enemy.direction_timer = 0

    shot = None
    target = nearest(enemy.x, enemy.y, game.modules.values())
    if target is not None:
        distance = euclidean_distance(enemy.x, enemy.y, target.x, target.y)
        if distance < ENEMY_RANGE:
            if game.clock - enemy.last_attack >= ENEMY_ATTACK_INTERVAL:
                shot = Projectile.aimed(enemy.x, enemy.y, target.x, target.y, hostile=True)
                game.projectiles.append(shot)
                enemy.last_attack = game.clock
        else:
            bearing = math.atan2(target.y - enemy.y, target.x - enemy.x)
            enemy.direction = (
                enemy.direction * ENEMY_HEADING_WEIGHT + bearing * (1 - ENEMY_HEADING_WEIGHT)
            )

    enemy.x += math.cos(enemy.direction) * enemy.speed * delta / 1000
    enemy.y += math.sin(enemy.direction) * enemy.speed * delta / 1000
    enemy.x = _clamp(enemy.x, ENEMY_EDGE_CLAMP, game.width - ENEMY_EDGE_CLAMP)
    enemy.y = _clamp(enemy.y, ENEMY_EDGE_CLAMP, game.height - ENEMY_EDGE_CLAMP)
    return shot


def damage_enemy(game: Game, enemy: Enemy, damage: float) -> bool:
    """Apply damage to an enemy, removing it at zero health.

    Returns:
        True if the enemy died
    """
    enemy.health -= damage
    if enemy.dead:
        if enemy in game.enemies:
            game.enemies.remove(enemy)
        game.record("enemy_killed", enemy=enemy.id)
        return True
    return False


def update_projectile(game: Game, projectile: Projectile, delta: float) -> None:
    """Advance one projectile and resolve its collision.

    Hostile projectiles damage the first module within MODULE_HIT_RADIUS;
    defense projectiles damage the first enemy within ENEMY_HIT_RADIUS.
    Expired, colliding and out-of-bounds projectiles are marked spent.
    """
    if projectile.spent:
        return

    projectile.life -= delta
    if projectile.life <= 0:
        projectile.spent = True
        return

    projectile.x += projectile.vx * delta / 1000
    projectile.y += projectile.vy * delta / 1000

    if projectile.hostile:
        for module in game.modules.values():
            distance = euclidean_distance(projectile.x, projectile.y, module.x, module.y)
            if distance <= MODULE_HIT_RADIUS:
                module.health -= projectile.damage
                projectile.spent = True
                game.record("module_hit", module=module.id, damage=projectile.damage)
                break
    else:
        for enemy in list(game.enemies):
            distance = euclidean_distance(projectile.x, projectile.y, enemy.x, enemy.y)
            if distance <= ENEMY_HIT_RADIUS:
                damage_enemy(game, enemy, projectile.damage)
                projectile.spent = True
                break

    if not (0 <= projectile.x <= game.width and 0 <= projectile.y <= game.height):
        projectile.spent = True


def process_enemies(game: Game, delta: float) -> int:
    """Update every enemy. Returns the number of shots fired."""
    shots = 0
    for enemy in list(game.enemies):
        if update_enemy(game, enemy, delta) is not None:
            shots += 1
    return shots


def process_projectiles(game: Game, delta: float) -> int:
    """Update every projectile and drop the spent ones.

    Returns:
        Number of projectiles removed
    """
    for projectile in list(game.projectiles):
        update_projectile(game, projectile, delta)
    before = len(game.projectiles)
    game.projectiles = [p for p in game.projectiles if not p.spent]
    return before - len(game.projectiles)
