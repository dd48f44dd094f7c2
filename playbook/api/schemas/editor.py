"""Pydantic schemas for the play editor API."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from playbook.exchange.schemas import ZoneRecord


class Point2DSchema(BaseModel):
    """A point in field coordinates."""

    x: float = 0.0
    y: float = 0.0


class FieldOptionsSchema(BaseModel):
    """Per-session overrides of the field configuration."""

    grid_size: Optional[float] = Field(default=None, gt=0)
    field_width: Optional[float] = Field(default=None, gt=0)
    field_height: Optional[float] = Field(default=None, gt=0)
    route_width: Optional[float] = Field(default=None, gt=0)
    colors: Optional[dict[str, str]] = None
    route_opacity: Optional[dict[str, float]] = None


class CreateSessionRequest(BaseModel):
    """Request to open a new editor session."""

    mode: Literal["move", "design"] = "move"
    options: Optional[FieldOptionsSchema] = None
    populate: bool = True  # Place the default 22 players


class ChangeModeRequest(BaseModel):
    mode: Literal["move", "design"]


class AddPlayerRequest(BaseModel):
    x: float
    y: float
    side: Literal["offense", "defense"]


class DragMoveSchema(BaseModel):
    """One pointer move: cumulative delta plus absolute position."""

    dx: float
    dy: float
    x: float = 0.0
    y: float = 0.0


class GestureRequest(BaseModel):
    """
    A complete drag gesture, replayed start -> moves -> end.

    target 'player' drags the token; target 'route' drags that player's
    route stroke.
    """

    target: Literal["player", "route"] = "player"
    player_id: str
    start: Optional[Point2DSchema] = None  # Defaults to the player's position
    moves: list[DragMoveSchema] = Field(default_factory=list)
    finish: bool = True


class PlayerStateSchema(BaseModel):
    """A player as seen by API clients."""

    id: str
    side: Literal["offense", "defense"]
    x: float
    y: float
    fill: str
    route: Optional[str] = None
    zone: Optional[ZoneRecord] = None


class SessionResponse(BaseModel):
    """Full state of an editor session."""

    session_id: str
    mode: Literal["move", "design"]
    field_width: float
    field_height: float
    grid_size: float
    players: list[PlayerStateSchema]
    stack: list[str]  # Shape ids, bottom first
    last_action: Optional[str] = None


class ImportResponse(BaseModel):
    imported: int
    session: SessionResponse
