"""End-of-game condition checking.

This module handles:
1. Defeat when every module has been destroyed
2. Victory once the final wave has spawned and no enemies remain
"""

import logging

from ..models.game import Game
from ..utils.constants import MAX_WAVES

logger = logging.getLogger(__name__)


def check_game_end(game: Game) -> bool:
    """Assess end conditions and update ``game.status``.

    Defeat is checked first: losing the last module on the same tick as
    the last enemy dies is still a defeat.

    Args:
        game: Current game state

    Returns:
        True if the game is over (victory or defeat), False otherwise
    """
    if not game.running:
        return True

    if not game.modules:
        game.status = "defeat"
        logger.info(
            f"Defeat at clock {game.clock}: all modules destroyed (wave {game.wave_number})"
        )
        game.record("game_over", status="defeat")
        return True

    if game.wave_number >= MAX_WAVES and not game.enemies:
        game.status = "victory"
        logger.info(f"Victory at clock {game.clock}: survived {MAX_WAVES} waves")
        game.record("game_over", status="victory")
        return True

    return False
