"""Tests for data models."""

import math

import pytest

from module_defense.models import Connection, Enemy, Game, Module, Projectile
from module_defense.utils import GameRNG
from module_defense.utils.constants import (
    DEFENSE_PROJECTILE_DAMAGE,
    ENEMY_PROJECTILE_DAMAGE,
    PROJECTILE_SPEED,
)


class TestModule:
    """Test Module dataclass."""

    def test_create_module(self):
        """Test basic module creation defaults."""
        module = Module(id=0, kind="production", x=10, y=20)
        assert module.level == 1
        assert module.droids == 0
        assert module.max_droids == 10
        assert module.health == 100
        assert module.connected is False

    def test_energy_module_holds_no_droids(self):
        """Energy modules have zero droid capacity."""
        module = Module(id=0, kind="energy", x=0, y=0)
        assert module.max_droids == 0
        assert module.has_space is False

    def test_energy_module_rejects_droids(self):
        with pytest.raises(ValueError, match="droids"):
            Module(id=0, kind="energy", x=0, y=0, droids=1)

    def test_invalid_kind(self):
        with pytest.raises(ValueError, match="kind"):
            Module(id=0, kind="farm", x=0, y=0)

    @pytest.mark.parametrize("level", [0, 4])
    def test_invalid_level(self, level):
        with pytest.raises(ValueError, match="level"):
            Module(id=0, kind="defense", x=0, y=0, level=level)

    def test_droids_above_max(self):
        with pytest.raises(ValueError, match="droids"):
            Module(id=0, kind="defense", x=0, y=0, droids=11)

    def test_destroyed(self):
        module = Module(id=0, kind="defense", x=0, y=0)
        module.health = 0
        assert module.destroyed


class TestConnection:
    """Test Connection dataclass."""

    def test_other_endpoint(self):
        connection = Connection(id=0, a=1, b=2)
        assert connection.other(1) == 2
        assert connection.other(2) == 1

    def test_other_rejects_non_endpoint(self):
        connection = Connection(id=0, a=1, b=2)
        with pytest.raises(ValueError):
            connection.other(3)

    def test_key_is_unordered(self):
        assert Connection(id=0, a=1, b=2).key == Connection(id=1, a=2, b=1).key

    def test_self_loop_rejected(self):
        with pytest.raises(ValueError, match="itself"):
            Connection(id=0, a=1, b=1)


class TestProjectile:
    """Test Projectile construction."""

    def test_aimed_velocity(self):
        """Velocity points at the target with fixed speed."""
        projectile = Projectile.aimed(0, 0, 30, 40, hostile=False)
        assert math.isclose(math.hypot(projectile.vx, projectile.vy), PROJECTILE_SPEED)
        assert math.isclose(projectile.vx / projectile.vy, 30 / 40)

    def test_damage_by_owner(self):
        assert Projectile.aimed(0, 0, 1, 0, hostile=True).damage == ENEMY_PROJECTILE_DAMAGE
        assert Projectile.aimed(0, 0, 1, 0, hostile=False).damage == DEFENSE_PROJECTILE_DAMAGE

    def test_zero_distance_is_stationary(self):
        projectile = Projectile.aimed(5, 5, 5, 5, hostile=True)
        assert projectile.vx == 0 and projectile.vy == 0


class TestEnemy:
    def test_invalid_max_health(self):
        with pytest.raises(ValueError):
            Enemy(id=0, x=0, y=0, health=0, max_health=0, speed=10)


class TestGame:
    """Test Game container."""

    def test_rng_created_from_seed(self):
        game = Game(seed=7)
        assert isinstance(game.rng, GameRNG)
        assert game.rng.seed == 7

    def test_ids_are_monotonic_per_entity(self):
        game = Game(seed=1)
        assert [game.next_id("module") for _ in range(3)] == [0, 1, 2]
        assert game.next_id("connection") == 0

    def test_invalid_speed(self):
        with pytest.raises(ValueError, match="speed"):
            Game(seed=1, speed=3)

    def test_invalid_status(self):
        with pytest.raises(ValueError, match="status"):
            Game(seed=1, status="paused")

    def test_module_index_follows_creation_order(self):
        game = Game(seed=1)
        for module_id in (4, 9, 2):
            game.modules[module_id] = Module(id=module_id, kind="defense", x=0, y=0)
        assert game.module_index(9) == 1
        assert game.module_at_index(2).id == 2
        assert game.module_at_index(3) is None
