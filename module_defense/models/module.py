"""Module data model for placed structures."""

from dataclasses import dataclass

from ..utils.constants import MAX_DROIDS, MAX_HEALTH, MAX_LEVEL

MODULE_KINDS = ("energy", "recruitment", "production", "defense")


@dataclass
class Module:
    """A structure placed on the play area.

    Energy modules power the network and never hold droids. Every other kind
    holds up to ten droids and only acts while an energy source has allocated
    it a slot (``connected``). The ``last_*`` fields are game-clock
    timestamps of the most recent production, recruitment and volley.
    """

    id: int  # Stable identifier, never reused within a game
    kind: str  # One of MODULE_KINDS
    x: float
    y: float
    level: int = 1  # 1-3
    droids: int = 0  # Droids currently assigned here
    health: float = MAX_HEALTH
    connected: bool = False  # Derived by energy allocation
    last_production: float = 0
    last_recruitment: float = 0
    last_attack: float = 0

    def __post_init__(self):
        """Validate module data after initialization."""
        if self.kind not in MODULE_KINDS:
            raise ValueError(f"Invalid kind: {self.kind} (must be one of {MODULE_KINDS})")
        if not (1 <= self.level <= MAX_LEVEL):
            raise ValueError(f"Invalid level: {self.level} (must be 1-{MAX_LEVEL})")
        if not (0 <= self.droids <= self.max_droids):
            raise ValueError(
                f"Invalid droids: {self.droids} (must be 0-{self.max_droids} for {self.kind})"
            )

    @property
    def is_energy(self) -> bool:
        return self.kind == "energy"

    @property
    def max_droids(self) -> int:
        return 0 if self.is_energy else MAX_DROIDS

    @property
    def max_health(self) -> float:
        return MAX_HEALTH

    @property
    def has_space(self) -> bool:
        """True if this module can accept another droid."""
        return self.droids < self.max_droids

    @property
    def destroyed(self) -> bool:
        return self.health <= 0
