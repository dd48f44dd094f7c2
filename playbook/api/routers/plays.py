"""REST API router for play editor sessions."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from playbook.api.schemas.editor import (
    AddPlayerRequest,
    ChangeModeRequest,
    CreateSessionRequest,
    GestureRequest,
    ImportResponse,
    PlayerStateSchema,
    Point2DSchema,
    SessionResponse,
)
from playbook.api.services import get_session_manager
from playbook.config import FieldOptions
from playbook.core.models import Player
from playbook.editor import EditorSession
from playbook.exchange import PlayData, ZoneRecord, export_play, import_play

router = APIRouter(prefix="/plays", tags=["plays"])


def _player_to_schema(player: Player) -> PlayerStateSchema:
    """Convert a Player to its schema."""
    route = None
    zone = None
    if player.has_route:
        route = player.route.path_string
        if player.route.has_zone:
            rect = player.route.zone.rect
            zone = ZoneRecord(x=rect.x, y=rect.y, width=rect.width, height=rect.height)
    return PlayerStateSchema(
        id=str(player.id),
        side=player.side.value,
        x=player.x,
        y=player.y,
        fill=player.fill,
        route=route,
        zone=zone,
    )


def _session_to_response(session: EditorSession) -> SessionResponse:
    """Convert an EditorSession to its response schema."""
    last = session.edit_log.last_entry
    return SessionResponse(
        session_id=str(session.id),
        mode=session.mode.value,
        field_width=session.options.field_width,
        field_height=session.options.field_height,
        grid_size=session.options.grid_size,
        players=[_player_to_schema(player) for player in session.players],
        stack=[str(shape.id) for shape in session.canvas.stack],
        last_action=last.description if last else None,
    )


async def _require_session(session_id: UUID) -> EditorSession:
    session = await get_session_manager().get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return session


def _require_player(session: EditorSession, player_id: str) -> Player:
    try:
        player = session.player_by_id(UUID(player_id))
    except ValueError:
        player = None
    if player is None:
        raise HTTPException(status_code=404, detail=f"Player {player_id} not found")
    return player


@router.post("/sessions", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(request: Optional[CreateSessionRequest] = None) -> SessionResponse:
    """Open a new editor session."""
    if request is None:
        request = CreateSessionRequest()

    options = None
    if request.options:
        options = FieldOptions.from_dict(request.options.model_dump(exclude_none=True))

    try:
        session = await get_session_manager().create_session(
            options=options,
            mode=request.mode,
            populate=request.populate,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _session_to_response(session)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(session_id: UUID) -> SessionResponse:
    """Get the current state of a session."""
    session = await _require_session(session_id)
    return _session_to_response(session)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: UUID) -> None:
    """Close a session."""
    if not await get_session_manager().delete_session(session_id):
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")


@router.put("/sessions/{session_id}/mode", response_model=SessionResponse)
async def change_mode(session_id: UUID, request: ChangeModeRequest) -> SessionResponse:
    """Switch between move and design mode."""
    session = await _require_session(session_id)
    session.change_mode(request.mode)
    return _session_to_response(session)


@router.post(
    "/sessions/{session_id}/players",
    response_model=PlayerStateSchema,
    status_code=status.HTTP_201_CREATED,
)
async def add_player(session_id: UUID, request: AddPlayerRequest) -> PlayerStateSchema:
    """Place a player token."""
    session = await _require_session(session_id)
    player = session.add_player(request.x, request.y, request.side)
    return _player_to_schema(player)


@router.delete("/sessions/{session_id}/players/{player_id}", response_model=SessionResponse)
async def remove_player(session_id: UUID, player_id: str) -> SessionResponse:
    """Remove a token with its route and zone."""
    session = await _require_session(session_id)
    player = _require_player(session, player_id)
    session.remove_player(player)
    return _session_to_response(session)


@router.post("/sessions/{session_id}/gestures", response_model=SessionResponse)
async def apply_gesture(session_id: UUID, request: GestureRequest) -> SessionResponse:
    """Replay one drag gesture on a player or its route."""
    session = await _require_session(session_id)
    player = _require_player(session, request.player_id)

    if request.target == "route":
        if not player.has_route:
            raise HTTPException(status_code=409, detail=f"Player {request.player_id} has no route")
        gesture = session.drag_route(player.route)
        start = request.start or _route_end(player)
    else:
        gesture = session.drag_player(player)
        start = request.start
    start_x, start_y = (start.x, start.y) if start else player.position

    gesture.play(
        start_x,
        start_y,
        [(move.dx, move.dy, move.x, move.y) for move in request.moves],
        finish=request.finish,
    )
    return _session_to_response(session)


def _route_end(player: Player) -> Point2DSchema:
    """Route drags default to pressing on the last drawn point."""
    last = player.route.last_segment
    return Point2DSchema(x=last.x, y=last.y)


@router.get("/sessions/{session_id}/play", response_model=PlayData)
async def get_play(session_id: UUID) -> PlayData:
    """Export the session's play."""
    session = await _require_session(session_id)
    return export_play(session)


@router.put("/sessions/{session_id}/play", response_model=ImportResponse)
async def put_play(session_id: UUID, play: dict) -> ImportResponse:
    """Load a play, replacing each side it lists."""
    session = await _require_session(session_id)
    try:
        imported = import_play(session, play)
    except TypeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ImportResponse(imported=imported, session=_session_to_response(session))
