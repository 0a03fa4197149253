"""FastAPI server for Module Defense.

Provides the HTTP/WebSocket API a browser front end uses to drive the
simulation: create a game, send commands, advance ticks and read snapshots.
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from .schemas.requests import CommandRequest, CreateGameRequest, TickRequest
from .schemas.responses import (
    CommandResponse,
    CreateGameResponse,
    GameStateResponse,
    TickResponse,
)
from .session import GameSession, GameSessionManager

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global session manager
sessions = GameSessionManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Module Defense server starting...")
    yield
    logger.info("Module Defense server shutting down...")
    await sessions.cleanup_all()


app = FastAPI(
    title="Module Defense API",
    description="Command and snapshot API for the Module Defense simulation",
    version="1.0.0",
    lifespan=lifespan,
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_session(game_id: str) -> GameSession:
    session = sessions.get(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")
    return session


def _error_message(error: ValidationError) -> dict:
    return {"type": "ERROR", "detail": error.errors(include_url=False, include_context=False)}


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Module Defense",
        "status": "operational",
        "activeGames": len(sessions.sessions),
    }


@app.post("/api/games", response_model=CreateGameResponse)
async def create_game(request: CreateGameRequest):
    """Create a new game.

    Example:
        POST /api/games
        {"seed": 42, "width": 1200, "height": 800}
    """
    try:
        session = sessions.create_session(
            seed=request.seed, width=request.width, height=request.height
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CreateGameResponse(
        gameId=session.id,
        seed=session.game.seed,
        state=session.get_state(),
    )


@app.get("/api/games/{game_id}/state", response_model=GameStateResponse)
async def get_game_state(game_id: str):
    """Get the current snapshot of a game."""
    session = _get_session(game_id)
    async with session.lock:
        state = session.get_state()
    return GameStateResponse(gameId=game_id, status=session.game.status, state=state)


@app.post("/api/games/{game_id}/commands", response_model=CommandResponse)
async def submit_command(game_id: str, request: CommandRequest):
    """Apply one player command.

    Commands the game declines (too expensive, overlapping, full target...)
    return ``applied: false`` with the unchanged state, not an error.

    Example:
        POST /api/games/game-abc123/commands
        {"command": "place_module", "x": 300, "y": 200, "kind": "defense"}
    """
    session = _get_session(game_id)
    async with session.lock:
        applied, result = session.apply_command(request)
        state = session.get_state()

    if applied:
        await session.broadcast({"type": "STATE", "state": state})
    return CommandResponse(applied=applied, result=result, state=state)


@app.post("/api/games/{game_id}/tick", response_model=TickResponse)
async def advance_tick(game_id: str, request: TickRequest):
    """Advance the simulation by one or more fixed steps.

    Ticks run in a worker thread so a long batch does not block the event
    loop; the session lock keeps other requests out meanwhile.

    Example:
        POST /api/games/game-abc123/tick
        {"deltaMs": 16, "ticks": 60}
    """
    session = _get_session(game_id)
    if not session.game.running:
        raise HTTPException(
            status_code=400,
            detail=f"Game already ended: {session.game.status}",
        )

    async with session.lock:
        ran = await asyncio.to_thread(session.advance, request.deltaMs, request.ticks)
        state = session.get_state()

    await session.broadcast({"type": "TICK", "state": state})
    if not session.game.running:
        await session.broadcast({"type": "GAME_OVER", "status": session.game.status})
    return TickResponse(ticks=ran, status=session.game.status, state=state)


@app.delete("/api/games/{game_id}")
async def delete_game(game_id: str):
    """Delete a game session."""
    if sessions.delete(game_id):
        return {"message": f"Game {game_id} deleted"}
    raise HTTPException(status_code=404, detail="Game not found")


# ============================================
# WEBSOCKET ENDPOINT
# ============================================


@app.websocket("/ws/games/{game_id}")
async def websocket_endpoint(websocket: WebSocket, game_id: str):
    """WebSocket connection for real-time play.

    Clients send:
    - {"type": "PING"}
    - {"type": "COMMAND", "command": {...CommandRequest...}}
    - {"type": "TICK", "deltaMs": 16}

    Clients receive:
    - CONNECTED: Initial state
    - STATE: State after a command (with "applied")
    - TICK: State after a tick
    - GAME_OVER: Game ended
    - ERROR: Malformed message
    """
    session = sessions.get(game_id)
    if not session:
        await websocket.close(code=1008, reason="Game not found")
        return

    await websocket.accept()
    session.add_connection(websocket)

    try:
        await websocket.send_json(
            {"type": "CONNECTED", "gameId": game_id, "state": session.get_state()}
        )

        while True:
            data = await websocket.receive_json()
            message_type = data.get("type")

            if message_type == "PING":
                await websocket.send_json({"type": "PONG"})

            elif message_type == "COMMAND":
                try:
                    request = CommandRequest.model_validate(data.get("command") or {})
                except ValidationError as e:
                    await websocket.send_json(_error_message(e))
                    continue
                async with session.lock:
                    applied, result = session.apply_command(request)
                    state = session.get_state()
                await websocket.send_json(
                    {"type": "STATE", "applied": applied, "result": result, "state": state}
                )

            elif message_type == "TICK":
                try:
                    request = TickRequest.model_validate({"deltaMs": data.get("deltaMs")})
                except ValidationError as e:
                    await websocket.send_json(_error_message(e))
                    continue
                if not session.game.running:
                    await websocket.send_json({"type": "GAME_OVER", "status": session.game.status})
                    continue
                async with session.lock:
                    await asyncio.to_thread(session.advance, request.deltaMs)
                    state = session.get_state()
                await websocket.send_json({"type": "TICK", "state": state})
                if not session.game.running:
                    await websocket.send_json({"type": "GAME_OVER", "status": session.game.status})

            else:
                await websocket.send_json(
                    {"type": "ERROR", "detail": f"Unknown message type: {message_type}"}
                )

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected from game {game_id}")
    except Exception as e:
        logger.error(f"WebSocket error in game {game_id}: {e}", exc_info=True)
    finally:
        session.remove_connection(websocket)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
