"""Game state container."""

from dataclasses import dataclass, field

from ..utils import GameRNG
from ..utils.constants import (
    FIRST_WAVE_TIME,
    PLAY_HEIGHT,
    PLAY_WIDTH,
    SPEED_CYCLE,
    STARTING_RESOURCES,
)
from .connection import Connection
from .enemy import Enemy
from .module import Module
from .projectile import Projectile

GAME_STATUSES = ("running", "victory", "defeat")


@dataclass
class Camera:
    """View state owned by the presentation layer; the simulation never reads it."""

    x: float = 0.0
    y: float = 0.0
    zoom: float = 1.0


@dataclass
class Game:
    """Main simulation context.

    The Game class holds all simulation state: modules, connections, enemies,
    projectiles, the droid ledger, the game clock and the RNG. Every engine
    operation receives the Game explicitly; nothing is stored globally.

    Modules and connections are keyed by stable id. Dict insertion order is
    creation order, which is also the order modules are updated in.
    """

    seed: int  # RNG seed
    width: float = PLAY_WIDTH
    height: float = PLAY_HEIGHT
    resources: float = STARTING_RESOURCES
    total_droids: int = 0  # Droid ledger
    modules: dict[int, Module] = field(default_factory=dict)
    connections: dict[int, Connection] = field(default_factory=dict)
    enemies: list[Enemy] = field(default_factory=list)
    projectiles: list[Projectile] = field(default_factory=list)
    wave_number: int = 0  # Waves spawned so far
    next_wave_time: float = FIRST_WAVE_TIME
    clock: float = 0  # Game-clock ms, advances only while unpaused
    paused: bool = False
    speed: int = 1  # Clock multiplier
    selected_connection: int | None = None  # Connection id
    camera: Camera = field(default_factory=Camera)
    status: str = "running"  # "running", "victory" or "defeat"
    rng: GameRNG | None = None  # Seeded RNG instance
    id_counters: dict[str, int] = field(
        default_factory=lambda: {"module": 0, "connection": 0, "enemy": 0}
    )  # Next id per entity type
    events_last_tick: list[dict] = field(default_factory=list)  # Event log of the latest tick

    def __post_init__(self):
        """Initialize RNG if not provided."""
        if self.rng is None:
            self.rng = GameRNG(self.seed)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid play area: {self.width}x{self.height}")
        if self.speed not in SPEED_CYCLE:
            raise ValueError(f"Invalid speed: {self.speed} (must be one of {SPEED_CYCLE})")
        if self.status not in GAME_STATUSES:
            raise ValueError(f"Invalid status: {self.status} (must be one of {GAME_STATUSES})")

    @property
    def running(self) -> bool:
        return self.status == "running"

    def next_id(self, entity: str) -> int:
        """Allocate the next stable id for ``entity`` ("module", "connection", "enemy")."""
        value = self.id_counters[entity]
        self.id_counters[entity] = value + 1
        return value

    def module_index(self, module_id: int) -> int:
        """Position of a module in creation order, as shown to the presentation layer."""
        for index, key in enumerate(self.modules):
            if key == module_id:
                return index
        raise KeyError(module_id)

    def module_at_index(self, index: int) -> Module | None:
        """Module at a creation-order position, or None if out of range."""
        if 0 <= index < len(self.modules):
            return list(self.modules.values())[index]
        return None

    def record(self, event_type: str, **details):
        """Append an event to the current tick's log."""
        self.events_last_tick.append({"type": event_type, "clock": self.clock, **details})
