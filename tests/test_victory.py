"""Tests for end-of-game conditions."""

from builders import add_module

from module_defense.engine.tick_executor import TickExecutor
from module_defense.engine.victory import check_game_end
from module_defense.models import Enemy, Game
from module_defense.utils.constants import MAX_WAVES


def test_running_game_continues(empty_game):
    add_module(empty_game, "energy", 0, 0)
    assert not check_game_end(empty_game)
    assert empty_game.status == "running"


def test_defeat_when_no_modules(empty_game):
    assert check_game_end(empty_game)
    assert empty_game.status == "defeat"


def test_victory_after_last_wave_cleared(empty_game):
    add_module(empty_game, "energy", 0, 0)
    empty_game.wave_number = MAX_WAVES

    assert check_game_end(empty_game)
    assert empty_game.status == "victory"


def test_no_victory_while_enemies_remain(empty_game):
    add_module(empty_game, "energy", 0, 0)
    empty_game.wave_number = MAX_WAVES
    empty_game.enemies.append(Enemy(id=0, x=0, y=0, health=1, max_health=1, speed=0))

    assert not check_game_end(empty_game)


def test_defeat_takes_precedence():
    game = Game(seed=1)
    game.wave_number = MAX_WAVES
    check_game_end(game)
    assert game.status == "defeat"


def test_game_over_halts_ticking(empty_game):
    """After defeat the clock no longer advances."""
    executor = TickExecutor()
    results = executor.advance(empty_game, 16)
    assert results.game_over
    clock = empty_game.clock

    executor.advance(empty_game, 16)

    assert empty_game.clock == clock
