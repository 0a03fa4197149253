"""Tests for tick orchestration."""

import math

from builders import add_module, chain

from module_defense.engine.droids import ledger_balanced
from module_defense.engine.energy import allocate_energy
from module_defense.engine.game_setup import new_game
from module_defense.engine.behavior import fire_volley
from module_defense.engine.tick_executor import TickExecutor, split_delta
from module_defense.models import Enemy, Game, Projectile
from module_defense.utils.constants import FIRST_WAVE_TIME, MAX_STEP_MS


def test_clock_scaled_by_speed():
    game = new_game(seed=1)
    game.speed = 4

    results = TickExecutor().advance(game, 16)

    assert results.delta == 64
    assert game.clock == 64


def test_paused_game_does_not_advance():
    game = new_game(seed=1)
    game.paused = True
    start = game.resources

    results = TickExecutor().advance(game, 5000)

    assert results.delta == 0
    assert game.clock == 0
    assert game.resources == start


def test_finished_game_does_not_advance():
    game = new_game(seed=1)
    game.status = "victory"

    results = TickExecutor().advance(game, 16)

    assert results.game_over
    assert game.clock == 0


def test_production_accumulates_over_ticks():
    """One droid at level 1 yields 5 resources per simulated second."""
    game = new_game(seed=1)
    start = game.resources

    TickExecutor().run(game, 100, 100)  # 10 seconds

    assert math.isclose(game.resources, start + 50)


def test_wave_spawns_during_tick():
    game = new_game(seed=1)
    game.clock = FIRST_WAVE_TIME - 10

    results = TickExecutor().advance(game, 16)

    assert results.wave_spawned
    assert game.wave_number == 1
    assert any(event["type"] == "wave" for event in game.events_last_tick)


def test_destroyed_modules_removed_and_energy_reallocated():
    game = new_game(seed=1)
    energy = game.modules[0]
    energy.health = 5
    shot = Projectile.aimed(energy.x - 5, energy.y, energy.x, energy.y, hostile=True)
    game.projectiles.append(shot)

    results = TickExecutor().advance(game, 16)

    assert results.destroyed_modules == [0]
    assert 0 not in game.modules
    assert not game.modules[1].connected
    assert game.connections == {}
    assert ledger_balanced(game)


def test_destroying_module_with_droids_reduces_ledger(empty_game):
    """A module holding 4 droids is shot down: the ledger drops by exactly 4."""
    game = empty_game
    energy = add_module(game, "energy", 100, 400)
    victim = add_module(game, "defense", 200, 400, droids=4)
    keeper = add_module(game, "production", 300, 400, droids=3)
    chain(game, energy, victim, keeper)
    allocate_energy(game)
    victim.health = 10
    shot = Projectile.aimed(victim.x, victim.y, victim.x + 1, victim.y, hostile=True)
    game.projectiles.append(shot)

    TickExecutor().advance(game, 16)

    assert victim.id not in game.modules
    assert game.total_droids == 3
    assert ledger_balanced(game)
    assert not keeper.connected  # Its only path to energy went through the victim


def test_enemy_fire_reaches_module():
    """An enemy in range shoots; the projectile lands on a later tick."""
    game = new_game(seed=1)
    production = game.modules[1]
    game.enemies.append(
        Enemy(id=0, x=production.x + 60, y=production.y, health=50, max_health=50, speed=0)
    )
    game.clock = 1000
    executor = TickExecutor()

    executor.run(game, 16, 20)

    assert production.health < 100


def test_defense_kills_enemy_over_time(empty_game):
    game = empty_game
    energy = add_module(game, "energy", 100, 400)
    defense = add_module(game, "defense", 200, 400, droids=2)
    chain(game, energy, defense)
    allocate_energy(game)
    enemy = Enemy(id=0, x=300, y=400, health=50, max_health=50, speed=0)
    game.enemies.append(enemy)
    game.clock = 2000

    TickExecutor().run(game, 16, 30)

    assert enemy not in game.enemies


def test_recruitment_scenario_full_component():
    """Recruiter and sibling at 10/10: after the interval, nothing changes."""
    game = new_game(seed=1)
    production = game.modules[1]
    production.droids = 10
    recruiter = add_module(game, "recruitment", production.x + 70, production.y, droids=10)
    chain(game, production, recruiter)
    game.total_droids = 20
    allocate_energy(game)
    assert recruiter.connected

    TickExecutor().run(game, 100, 60)  # 6 s, interval for 10 droids is 5 s

    assert game.total_droids == 20
    assert production.droids == 10
    assert recruiter.droids == 10
    assert recruiter.last_recruitment >= 5000


def test_long_run_keeps_ledger_balanced():
    """Several minutes with waves and recruitment keep the ledger exact."""
    game = new_game(seed=3, resources=5000)
    production = game.modules[1]
    recruiter = add_module(game, "recruitment", production.x + 70, production.y, droids=1)
    defense = add_module(game, "defense", production.x, production.y + 70, droids=1)
    chain(game, production, recruiter)
    chain(game, production, defense)
    allocate_energy(game)
    game.clock = FIRST_WAVE_TIME - 1000
    executor = TickExecutor()

    for _ in range(2000):
        executor.advance(game, 50)
        assert ledger_balanced(game)
        if not game.running:
            break


def test_split_delta_caps_sub_steps():
    assert split_delta(16, 1) == [16]
    assert split_delta(16, 4) == [16, 16, 16, 16]
    assert split_delta(1000, 4) == [MAX_STEP_MS] * 200
    assert sum(split_delta(50, 1)) == 50


def test_income_independent_of_speed_and_tick_length():
    """20 s of game time pays 20 production firings however it is sliced."""
    cases = [
        (1, 16, 1250),
        (2, 16, 625),
        (4, 16, 313),
        (4, 500, 10),
        (1, 1000, 20),
        (4, 1000, 5),
    ]
    for speed, delta_ms, ticks in cases:
        game = new_game(seed=1)
        game.speed = speed
        start = game.resources

        TickExecutor().run(game, delta_ms, ticks)

        assert game.clock >= 20000
        assert game.resources == start + 100, (speed, delta_ms)


def test_volleys_independent_of_tick_length():
    """A defense module fires every 2 s even when one tick spans several intervals."""
    for delta_ms in (25, 1000):
        game = Game(seed=42, resources=0)
        energy = add_module(game, "energy", 100, 400)
        defense = add_module(game, "defense", 200, 400, droids=1)
        chain(game, energy, defense)
        allocate_energy(game)
        game.enemies.append(Enemy(id=0, x=330, y=400, health=1e6, max_health=1e6, speed=0))
        game.speed = 4
        volleys = 0

        for _ in range(int(12000 / (delta_ms * 4))):
            TickExecutor().advance(game, delta_ms)
            volleys += sum(1 for event in game.events_last_tick if event["type"] == "volley")

        assert volleys == 6, delta_ms


def test_same_volley_resolves_alike_at_every_speed():
    """A shot at a stationary enemy kills it at 1x, 2x and 4x."""
    outcomes = {}
    for speed in (1, 2, 4):
        game = Game(seed=42, resources=0)
        defense = add_module(game, "defense", 100, 400, droids=1)
        game.enemies.append(Enemy(id=0, x=215, y=400, health=25, max_health=25, speed=0))
        fire_volley(game, defense)
        game.speed = speed

        TickExecutor().run(game, 16, 20)

        outcomes[speed] = game.enemies == []
    assert outcomes == {1: True, 2: True, 4: True}


def test_long_tick_does_not_expire_projectiles_in_flight():
    """One 1000 ms tick at 4x still lets the shot travel and hit."""
    game = Game(seed=42, resources=0)
    defense = add_module(game, "defense", 100, 400, droids=1)
    game.enemies.append(Enemy(id=0, x=215, y=400, health=25, max_health=25, speed=0))
    fire_volley(game, defense)
    game.speed = 4

    TickExecutor().advance(game, 1000)

    assert game.enemies == []
    assert game.projectiles == []
