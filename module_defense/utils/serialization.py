"""Game state snapshots for the presentation layer.

The snapshot is a plain JSON-compatible dict using camelCase keys. Module
positions in ``modules`` are creation order; connections report both the
current list indices of their endpoints (``from``/``to``), which shift down
when an earlier module is removed, and the stable ids (``fromId``/``toId``),
which never change.
"""

from typing import Any

from ..engine.behavior import capacity, recruitment_interval, upgrade_cost
from ..models.enemy import Enemy
from ..models.game import Game
from ..models.module import Module
from ..models.projectile import Projectile


def _serialize_module(module: Module, index: int) -> dict[str, Any]:
    return {
        "id": module.id,
        "index": index,
        "kind": module.kind,
        "x": module.x,
        "y": module.y,
        "level": module.level,
        "droids": module.droids,
        "maxDroids": module.max_droids,
        "health": module.health,
        "maxHealth": module.max_health,
        "connected": module.connected,
        "capacity": capacity(module),
        "upgradeCost": upgrade_cost(module),
        "recruitmentInterval": (
            recruitment_interval(module.droids) if module.kind == "recruitment" else None
        ),
    }


def _serialize_enemy(enemy: Enemy) -> dict[str, Any]:
    return {
        "id": enemy.id,
        "x": enemy.x,
        "y": enemy.y,
        "health": enemy.health,
        "maxHealth": enemy.max_health,
        "direction": enemy.direction,
    }


def _serialize_projectile(projectile: Projectile) -> dict[str, Any]:
    return {
        "x": projectile.x,
        "y": projectile.y,
        "vx": projectile.vx,
        "vy": projectile.vy,
        "hostile": projectile.hostile,
        "life": projectile.life,
    }


def snapshot(game: Game) -> dict[str, Any]:
    """Convert the game to a read-only, JSON-compatible dictionary.

    Args:
        game: Game to serialize

    Returns:
        Dictionary with the full observable state
    """
    indices = {module_id: index for index, module_id in enumerate(game.modules)}
    return {
        "seed": game.seed,
        "width": game.width,
        "height": game.height,
        "status": game.status,
        "clock": game.clock,
        "paused": game.paused,
        "speed": game.speed,
        "resources": game.resources,
        "totalDroids": game.total_droids,
        "wave": game.wave_number,
        "nextWaveTime": game.next_wave_time,
        "selectedConnection": game.selected_connection,
        "camera": {"x": game.camera.x, "y": game.camera.y, "zoom": game.camera.zoom},
        "modules": [
            _serialize_module(module, indices[module.id]) for module in game.modules.values()
        ],
        "connections": [
            {
                "id": connection.id,
                "from": indices[connection.a],
                "to": indices[connection.b],
                "fromId": connection.a,
                "toId": connection.b,
            }
            for connection in game.connections.values()
        ],
        "enemies": [_serialize_enemy(enemy) for enemy in game.enemies],
        "projectiles": [_serialize_projectile(p) for p in game.projectiles],
        "events": list(game.events_last_tick),
    }
