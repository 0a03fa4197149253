"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel


class GameStateResponse(BaseModel):
    """Response containing current game state."""

    gameId: str  # noqa: N815
    status: str
    state: dict


class CreateGameResponse(BaseModel):
    """Response after creating a new game."""

    gameId: str  # noqa: N815
    seed: int
    state: dict


class CommandResponse(BaseModel):
    """Response after a command. Declined commands report applied=False."""

    applied: bool
    result: int | float | bool | None = None  # Id, speed, zoom or pause state
    state: dict


class TickResponse(BaseModel):
    """Response after advancing the simulation."""

    ticks: int
    status: str
    state: dict
