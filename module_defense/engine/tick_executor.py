"""Main tick execution orchestrator.

A tick covers ``delta_ms x speed`` milliseconds of game time. That span is
cut into equal sub-steps of at most MAX_STEP_MS, and each sub-step runs the
phases in a fixed order:
1. Clock advance
2. Wave spawning, if due
3. Module behaviour timers (creation order)
4. Enemy movement and fire
5. Projectile travel, collision and culling
6. Removal of destroyed modules, then energy reallocation
7. End-of-game check

Cutting the tick up keeps timers and projectile collisions independent of
frame length and speed setting: 4x speed simulates the same game as four
ticks at 1x. Everything happens synchronously inside advance(). A paused
game skips the update entirely; a finished game is never updated again.

Architecture:
Each phase is an independent method so it can be tested on its own.
step() composes them in order and advance() repeats step().
"""

import logging
import math
from dataclasses import dataclass, field

from ..models.game import Game
from ..utils.constants import MAX_STEP_MS
from .behavior import update_module
from .combat import process_enemies, process_projectiles
from .droids import check_ledger, remove_module
from .energy import allocate_energy
from .victory import check_game_end
from .waves import spawn_wave, wave_due

logger = logging.getLogger(__name__)


@dataclass
class TickResults:
    """Summary of one tick, for callers that want more than the snapshot."""

    delta: float  # Game-clock ms simulated
    wave_spawned: bool = False
    enemy_shots: int = 0
    projectiles_removed: int = 0
    destroyed_modules: list[int] = field(default_factory=list)
    game_over: bool = False


def split_delta(delta_ms: float, speed: int) -> list[float]:
    """Cut ``delta_ms x speed`` into equal sub-steps no longer than MAX_STEP_MS."""
    total = delta_ms * speed
    count = max(1, math.ceil(total / MAX_STEP_MS))
    return [total / count] * count


class TickExecutor:
    """Orchestrates the tick phases in the correct order."""

    # =========================================================================
    # INDEPENDENT PHASE METHODS
    # =========================================================================

    def execute_phase_clock(self, game: Game, step_ms: float) -> float:
        """Advance the game clock by one sub-step."""
        game.clock += step_ms
        return step_ms

    def execute_phase_waves(self, game: Game) -> bool:
        """Spawn the next wave if its time has come."""
        if wave_due(game):
            spawn_wave(game)
            return True
        return False

    def execute_phase_modules(self, game: Game) -> None:
        """Run behaviour timers for every module in creation order."""
        for module in list(game.modules.values()):
            update_module(game, module)

    def execute_phase_enemies(self, game: Game, delta: float) -> int:
        """Move enemies and let them fire. Returns shots fired."""
        return process_enemies(game, delta)

    def execute_phase_projectiles(self, game: Game, delta: float) -> int:
        """Move projectiles, resolve hits and drop spent ones."""
        return process_projectiles(game, delta)

    def execute_phase_destruction(self, game: Game) -> list[int]:
        """Remove modules at zero health and reallocate energy once.

        Returns:
            Ids of removed modules
        """
        destroyed = [module.id for module in game.modules.values() if module.destroyed]
        for module_id in destroyed:
            remove_module(game, module_id)
            game.record("module_destroyed", module=module_id)
        if destroyed:
            allocate_energy(game)
        return destroyed

    def execute_phase_end_check(self, game: Game) -> bool:
        return check_game_end(game)

    # =========================================================================
    # ORCHESTRATION
    # =========================================================================

    def step(self, game: Game, step_ms: float, results: TickResults) -> None:
        """Run every phase once over ``step_ms`` of game time.

        Args:
            game: Current game state (modified in place)
            step_ms: Game-clock milliseconds to simulate
            results: Tick summary to accumulate into
        """
        results.delta += self.execute_phase_clock(game, step_ms)
        if self.execute_phase_waves(game):
            results.wave_spawned = True
        self.execute_phase_modules(game)
        results.enemy_shots += self.execute_phase_enemies(game, step_ms)
        results.projectiles_removed += self.execute_phase_projectiles(game, step_ms)
        results.destroyed_modules.extend(self.execute_phase_destruction(game))
        results.game_over = self.execute_phase_end_check(game)

    def advance(self, game: Game, delta_ms: float) -> TickResults:
        """Run one tick.

        Args:
            game: Current game state (modified in place)
            delta_ms: Real milliseconds since the previous tick

        Returns:
            TickResults describing what happened
        """
        if not game.running or game.paused:
            return TickResults(delta=0, game_over=not game.running)

        game.events_last_tick = []
        results = TickResults(delta=0)
        for step_ms in split_delta(delta_ms, game.speed):
            self.step(game, step_ms, results)
            if results.game_over:
                break

        if logger.isEnabledFor(logging.DEBUG):
            check_ledger(game)
        return results

    def run(self, game: Game, delta_ms: float, ticks: int) -> Game:
        """Advance ``ticks`` fixed steps, stopping early if the game ends."""
        for _ in range(ticks):
            if self.advance(game, delta_ms).game_over:
                break
        return game
