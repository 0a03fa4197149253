"""Projectile data model."""

import math
from dataclasses import dataclass

from ..utils.constants import (
    DEFENSE_PROJECTILE_DAMAGE,
    ENEMY_PROJECTILE_DAMAGE,
    PROJECTILE_LIFE,
    PROJECTILE_SPEED,
)


@dataclass
class Projectile:
    """A shot travelling in a straight line.

    Hostile projectiles are fired by enemies and hit modules; the rest are
    fired by defense modules and hit enemies. Velocity is fixed at creation.
    """

    x: float
    y: float
    vx: float  # Pixels per second
    vy: float
    hostile: bool
    damage: float
    life: float = PROJECTILE_LIFE  # Remaining ms
    spent: bool = False  # Hit something, expired or left the play area

    def __post_init__(self):
        """Validate projectile data after initialization."""
        if self.damage < 0:
            raise ValueError(f"Invalid damage: {self.damage} (must be >= 0)")

    @classmethod
    def aimed(cls, x: float, y: float, target_x: float, target_y: float, hostile: bool):
        """Create a projectile at (x, y) heading for (target_x, target_y).

        A target at the origin itself yields a stationary projectile, which
        still collides on its first update.
        """
        distance = math.hypot(target_x - x, target_y - y)
        if distance == 0:
            vx = vy = 0.0
        else:
            vx = (target_x - x) / distance * PROJECTILE_SPEED
            vy = (target_y - y) / distance * PROJECTILE_SPEED
        damage = ENEMY_PROJECTILE_DAMAGE if hostile else DEFENSE_PROJECTILE_DAMAGE
        return cls(x=x, y=y, vx=vx, vy=vy, hostile=hostile, damage=damage)
