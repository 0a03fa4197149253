"""Pydantic request schemas for API endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

COMMAND_NAMES = (
    "place_module",
    "create_connection",
    "destroy_module",
    "upgrade_module",
    "transfer_droid",
    "select_connection",
    "toggle_pause",
    "cycle_speed",
    "pan_camera",
    "zoom_camera",
    "force_wave",
)


class CreateGameRequest(BaseModel):
    """Request to create a new game."""

    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")
    width: float | None = Field(default=None, gt=0, description="Play area width in pixels")
    height: float | None = Field(default=None, gt=0, description="Play area height in pixels")


class CommandRequest(BaseModel):
    """A single player command.

    Only the fields the command needs are read; the rest are ignored.
    """

    command: Literal[COMMAND_NAMES] = Field(description="Command name")
    x: float | None = Field(default=None, description="Placement X (place_module)")
    y: float | None = Field(default=None, description="Placement Y (place_module)")
    kind: str | None = Field(default=None, description="Module kind (place_module)")
    moduleId: int | None = Field(  # noqa: N815
        default=None, description="Target module id"
    )
    connectionId: int | None = Field(  # noqa: N815
        default=None, description="Connection id (transfer_droid, select_connection)"
    )
    dx: float = Field(default=0, description="Camera pan X (pan_camera)")
    dy: float = Field(default=0, description="Camera pan Y (pan_camera)")
    factor: float = Field(default=1, gt=0, description="Zoom multiplier (zoom_camera)")


class TickRequest(BaseModel):
    """Request to advance the simulation."""

    deltaMs: float = Field(  # noqa: N815
        gt=0, le=1000, description="Real milliseconds since the previous tick"
    )
    ticks: int = Field(default=1, ge=1, le=1000, description="Number of fixed steps to run")
