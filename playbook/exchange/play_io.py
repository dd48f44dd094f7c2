"""Export a session's play to plain data and load one back in."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Optional, Union

from pydantic import ValidationError

from playbook.core.builders import build_route, build_zone
from playbook.core.enums import Side
from playbook.events.types import PlayImportedEvent
from playbook.exchange.schemas import PlayData, PlayerRecord, ZoneRecord

if TYPE_CHECKING:
    from playbook.core.models import Player, Route
    from playbook.editor.session import EditorSession

logger = logging.getLogger(__name__)


def _player_record(player: Player) -> PlayerRecord:
    route: Union[str, list] = ""
    zone: Union[ZoneRecord, str] = ""
    if player.has_route:
        route = player.route.path_string
        if player.route.has_zone:
            zone_shape = player.route.zone
            zone = ZoneRecord(
                x=zone_shape.x,
                y=zone_shape.y,
                width=zone_shape.width,
                height=zone_shape.height,
            )
    return PlayerRecord(cx=player.x, cy=player.y, side=player.side.value, route=route, zone=zone)


def export_play(session: EditorSession) -> PlayData:
    """Snapshot every player, route and zone in the session."""
    play = PlayData()
    for player in session.players:
        record = _player_record(player)
        if player.side == Side.OFFENSE:
            play.offense.append(record)
        else:
            play.defense.append(record)
    return play


def _parse_entry(entry: Any, side: Side) -> Optional[PlayerRecord]:
    """Validate one raw entry; None when it lacks required fields."""
    if isinstance(entry, PlayerRecord):
        record = entry
    else:
        try:
            record = PlayerRecord.model_validate(entry)
        except ValidationError as e:
            logger.warning("Skipping %s entry %r: %s", side.value, entry, e.errors()[0]["msg"])
            return None
    if record.side is not None and record.side != side.value:
        logger.debug("Entry listed under %s claims side %s; using %s", side.value, record.side, side.value)
    return record


def _prepare_route(session: EditorSession, record: PlayerRecord, side: Side) -> Union[Route, None, bool]:
    """
    Build the route (and zone) a record describes.

    Returns None for a record without a route and False when the route is
    unusable. Nothing is placed on the canvas yet.
    """
    if not record.has_route:
        return None
    options = session.options
    zone = None
    zone_record = record.zone_record
    if zone_record is not None:
        zone = build_zone(options, zone_record.x, zone_record.y, zone_record.width, zone_record.height, side)
    try:
        return build_route(options, record.route, side, options.color_for(side.value), zone=zone)
    except ValueError as e:
        logger.warning("Skipping %s player with bad route %r: %s", side.value, record.route, e)
        return False


def _coerce_play(data: Union[PlayData, dict, str, bytes]) -> dict:
    if isinstance(data, PlayData):
        return {"offense": list(data.offense), "defense": list(data.defense)}
    if isinstance(data, (str, bytes)):
        data = json.loads(data)
    if not isinstance(data, dict):
        raise TypeError(f"Play data must be a mapping, got {type(data).__name__}")
    return data


def import_play(session: EditorSession, data: Union[PlayData, dict, str, bytes]) -> int:
    """
    Replace the players of each side present in a play.

    A side is only touched when its list is non-empty: its current players
    (with their routes and zones) are removed and the listed ones built.
    Entries without coordinates or with an unreadable route are skipped;
    the rest of the side still imports.

    Args:
        session: Session to load into
        data: PlayData, a dict of the same shape, or its JSON text

    Returns:
        Number of players placed

    Raises:
        TypeError: If data is not a mapping
        json.JSONDecodeError: If given text that is not JSON
    """
    raw = _coerce_play(data)
    counts = {Side.OFFENSE: 0, Side.DEFENSE: 0}
    skipped = 0

    for side in Side:
        entries = raw.get(side.value) or []
        if not isinstance(entries, list):
            logger.warning("Ignoring %s: expected a list, got %s", side.value, type(entries).__name__)
            continue
        if not entries:
            continue

        # Validate the whole side before touching the session
        ready: list[tuple[PlayerRecord, Optional[Route]]] = []
        for entry in entries:
            record = _parse_entry(entry, side)
            route = _prepare_route(session, record, side) if record is not None else False
            if route is False:
                skipped += 1
                continue
            ready.append((record, route))

        session.remove_side(side)
        fill = session.options.color_for(side.value)
        for record, route in ready:
            session.add_player(record.cx, record.cy, side, fill=fill, route=route)
            counts[side] += 1

    imported = counts[Side.OFFENSE] + counts[Side.DEFENSE]
    if imported or skipped:
        session.players_to_front()
        session.emit(
            PlayImportedEvent(
                offense_count=counts[Side.OFFENSE],
                defense_count=counts[Side.DEFENSE],
                skipped=skipped,
            )
        )
    logger.info("Imported %d players (%d skipped) into session %s", imported, skipped, session.id)
    return imported
