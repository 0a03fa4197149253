"""Enemy data model for hostile drones."""

from dataclasses import dataclass


@dataclass
class Enemy:
    """A hostile drone that hunts the nearest module.

    ``direction`` is the heading in radians. ``direction_timer`` accumulates
    game time since the last random heading change.
    """

    id: int
    x: float
    y: float
    health: float
    max_health: float
    speed: float  # Pixels per second
    direction: float = 0.0
    last_attack: float = 0
    direction_timer: float = 0

    def __post_init__(self):
        """Validate enemy data after initialization."""
        if self.max_health <= 0:
            raise ValueError(f"Invalid max_health: {self.max_health} (must be > 0)")
        if self.speed < 0:
            raise ValueError(f"Invalid speed: {self.speed} (must be >= 0)")

    @property
    def dead(self) -> bool:
        return self.health <= 0
