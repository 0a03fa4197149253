"""Enemy wave spawning.

Wave N brings 3 + 2(N-1) enemies whose health and speed scale by 1.1^N.
The first wave arrives at FIRST_WAVE_TIME; each later wave follows
WAVE_INTERVAL after the previous one. At most MAX_WAVES waves spawn.
"""

import logging
import math

from ..models.enemy import Enemy
from ..models.game import Game
from ..utils.constants import (
    ENEMY_BASE_HEALTH,
    ENEMY_BASE_SPEED,
    ENEMY_SCALING,
    ENEMY_SPAWN_OFFSET,
    MAX_WAVES,
    WAVE_BASE_ENEMIES,
    WAVE_ENEMY_INCREMENT,
    WAVE_INTERVAL,
)

logger = logging.getLogger(__name__)


def wave_size(wave_number: int) -> int:
    """Number of enemies in wave ``wave_number`` (1-based)."""
    return WAVE_BASE_ENEMIES + (wave_number - 1) * WAVE_ENEMY_INCREMENT


def enemy_health(wave_number: int) -> float:
    return ENEMY_BASE_HEALTH * ENEMY_SCALING**wave_number


def enemy_speed(wave_number: int) -> float:
    return ENEMY_BASE_SPEED * ENEMY_SCALING**wave_number


def spawn_position(game: Game) -> tuple[float, float]:
    """Pick a random point just outside one of the four play-area edges."""
    edge = game.rng.randint(0, 3)
    if edge == 0:  # Top
        return game.rng.random() * game.width, -ENEMY_SPAWN_OFFSET
    if edge == 1:  # Right
        return game.width + ENEMY_SPAWN_OFFSET, game.rng.random() * game.height
    if edge == 2:  # Bottom
        return game.rng.random() * game.width, game.height + ENEMY_SPAWN_OFFSET
    return -ENEMY_SPAWN_OFFSET, game.rng.random() * game.height  # Left


def spawn_enemy(game: Game) -> Enemy:
    """Create one enemy for the current wave number and add it to the game."""
    x, y = spawn_position(game)
    health = enemy_health(game.wave_number)
    enemy = Enemy(
        id=game.next_id("enemy"),
        x=x,
        y=y,
        health=health,
        max_health=health,
        speed=enemy_speed(game.wave_number),
        direction=game.rng.random() * math.pi * 2,
    )
    game.enemies.append(enemy)
    return enemy


def wave_due(game: Game) -> bool:
    return game.wave_number < MAX_WAVES and game.clock >= game.next_wave_time


def spawn_wave(game: Game) -> list[Enemy]:
    """Spawn the next wave and schedule the one after it.

    Returns:
        The enemies spawned (empty if every wave has already spawned)
    """
    if game.wave_number >= MAX_WAVES:
        return []

    game.wave_number += 1
    enemies = [spawn_enemy(game) for _ in range(wave_size(game.wave_number))]
    game.next_wave_time = game.clock + WAVE_INTERVAL

    logger.info(f"Wave {game.wave_number} spawned: {len(enemies)} enemies at clock {game.clock}")
    game.record("wave", wave=game.wave_number, enemies=len(enemies))
    return enemies
