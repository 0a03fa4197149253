"""Game session management for browser clients."""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field

from fastapi import WebSocket

from ..engine import commands
from ..engine.game_setup import new_game
from ..engine.tick_executor import TickExecutor
from ..models.game import Game
from ..utils.serialization import snapshot
from .schemas.requests import CommandRequest

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Manages one running game.

    Owns the Game, the tick executor and the WebSocket connections watching
    it. All mutation goes through the session lock so that commands and
    ticks from different clients never interleave.
    """

    id: str
    game: Game
    executor: TickExecutor = field(default_factory=TickExecutor)
    connections: list[WebSocket] = field(default_factory=list)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def get_state(self) -> dict:
        return snapshot(self.game)

    def apply_command(self, request: CommandRequest) -> tuple[bool, int | float | bool | None]:
        """Run one player command against the game.

        Args:
            request: Validated command

        Returns:
            Tuple of (applied, result). Result is the new entity id, speed,
            zoom or pause state where the command has one.
        """
        game = self.game
        name = request.command

        if name == "place_module":
            if request.x is None or request.y is None or request.kind is None:
                return False, None
            module = commands.place_module(game, request.x, request.y, request.kind)
            return module is not None, module.id if module else None
        if name == "create_connection":
            if request.moduleId is None:
                return False, None
            connection = commands.create_connection(game, request.moduleId)
            return connection is not None, connection.id if connection else None
        if name == "destroy_module":
            return commands.destroy_module(game, request.moduleId), None
        if name == "upgrade_module":
            return commands.upgrade_module(game, request.moduleId), None
        if name == "transfer_droid":
            return commands.transfer_droid(game, request.moduleId, request.connectionId), None
        if name == "select_connection":
            return commands.select_connection(game, request.connectionId), None
        if name == "toggle_pause":
            return True, commands.toggle_pause(game)
        if name == "cycle_speed":
            return True, commands.cycle_speed(game)
        if name == "pan_camera":
            commands.pan_camera(game, request.dx, request.dy)
            return True, None
        if name == "zoom_camera":
            return True, commands.zoom_camera(game, request.factor)
        if name == "force_wave":
            return commands.force_wave(game), None

        raise ValueError(f"Unknown command: {name}")

    def advance(self, delta_ms: float, ticks: int = 1) -> int:
        """Run up to ``ticks`` steps. Returns the number of steps run."""
        ran = 0
        for _ in range(ticks):
            ran += 1
            if self.executor.advance(self.game, delta_ms).game_over:
                logger.info(f"Game {self.id} ended: {self.game.status}")
                break
        return ran

    async def broadcast(self, message: dict):
        """Send message to all connected WebSocket clients.

        Args:
            message: Dictionary to send as JSON
        """
        disconnected = []
        for ws in self.connections:
            try:
                await ws.send_json(message)
            except Exception as e:
                logger.warning(f"Failed to send to WebSocket: {e}")
                disconnected.append(ws)

        for ws in disconnected:
            self.connections.remove(ws)

    def add_connection(self, websocket: WebSocket):
        """Add a WebSocket connection to this session."""
        self.connections.append(websocket)
        logger.info(f"WebSocket connected to game {self.id}, total: {len(self.connections)}")

    def remove_connection(self, websocket: WebSocket):
        """Remove a WebSocket connection from this session."""
        if websocket in self.connections:
            self.connections.remove(websocket)
            logger.info(
                f"WebSocket disconnected from game {self.id}, remaining: {len(self.connections)}"
            )


class GameSessionManager:
    """Manages all active game sessions.

    In-memory only; sessions disappear when the server stops.
    """

    def __init__(self):
        self.sessions: dict[str, GameSession] = {}

    def create_session(
        self,
        seed: int | None = None,
        width: float | None = None,
        height: float | None = None,
    ) -> GameSession:
        """Create a new game session.

        Args:
            seed: Optional RNG seed for determinism
            width: Optional play area width
            height: Optional play area height

        Returns:
            Newly created GameSession
        """
        game_id = f"game-{uuid.uuid4().hex[:8]}"
        if seed is None:
            seed = uuid.uuid4().int % (2**32)

        area = {}
        if width is not None:
            area["width"] = width
        if height is not None:
            area["height"] = height
        session = GameSession(id=game_id, game=new_game(seed=seed, **area))
        self.sessions[game_id] = session

        logger.info(f"Created game {game_id}: seed={seed}")
        return session

    def get(self, game_id: str) -> GameSession | None:
        return self.sessions.get(game_id)

    def delete(self, game_id: str) -> bool:
        """Delete a game session.

        Returns:
            True if deleted, False if not found
        """
        if game_id in self.sessions:
            del self.sessions[game_id]
            logger.info(f"Deleted game {game_id}")
            return True
        return False

    async def cleanup_all(self):
        """Close every WebSocket and drop all sessions (called on shutdown)."""
        for session in list(self.sessions.values()):
            for ws in list(session.connections):
                try:
                    await ws.close()
                except Exception as e:
                    logger.warning(f"Failed to close WebSocket for {session.id}: {e}")
        self.sessions.clear()
