"""Construction and cascade removal of players, routes and zones."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence, Union

from playbook.config import FieldOptions
from playbook.core.enums import Side
from playbook.core.models.player import Player
from playbook.core.models.route import PathSegment, Route, parse_path
from playbook.core.models.zone import Zone
from playbook.events.types import PlayerRemovedEvent, RouteRemovedEvent, ZoneRemovedEvent

if TYPE_CHECKING:
    from playbook.editor.session import EditorSession

logger = logging.getLogger(__name__)

PathLike = Union[str, Sequence[PathSegment], Sequence[Sequence]]


def _coerce_segments(path: PathLike) -> list[PathSegment]:
    """Accept a path string, PathSegments, or [command, x, y] triples."""
    if isinstance(path, str):
        return parse_path(path)
    segments = []
    for item in path:
        if isinstance(item, PathSegment):
            segments.append(item)
        else:
            segments.append(PathSegment.from_list(item))
    return segments


def build_player(
    options: FieldOptions,
    x: float,
    y: float,
    side: Side,
    fill: Optional[str] = None,
    route: Optional[Route] = None,
) -> Player:
    """Build a player token, optionally already owning a route."""
    return Player(
        x=x,
        y=y,
        side=side,
        fill=fill or options.color_for(side.value),
        route=route,
    )


def build_route(
    options: FieldOptions,
    path: PathLike,
    side: Side,
    fill: str,
    zone: Optional[Zone] = None,
) -> Route:
    """
    Build a route stroke styled for its side.

    Raises:
        ValueError: If the path does not parse or does not start with MoveTo
    """
    return Route(
        segments=_coerce_segments(path),
        side=side,
        stroke=fill,
        stroke_width=options.route_width,
        stroke_opacity=options.opacity_for(side.value),
        zone=zone,
    )


def build_zone(
    options: FieldOptions,
    x: float,
    y: float,
    width: float,
    height: float,
    side: Side,
) -> Zone:
    """Build a coverage zone. Zones always use the defense colour."""
    return Zone(
        x=x,
        y=y,
        width=width,
        height=height,
        fill=options.color_for(Side.DEFENSE.value),
        fill_opacity=options.opacity_for(side.value),
    )


def remove_zone(session: EditorSession, route: Route) -> None:
    """Destroy a route's zone if it has one."""
    zone = route.zone
    route.zone = None
    if zone is not None and session.canvas.remove(zone):
        session.emit(ZoneRemovedEvent(route_id=route.id, zone_id=zone.id))


def remove_route(session: EditorSession, route: Route) -> None:
    """Destroy a route, its zone first. Already-removed routes are ignored."""
    if route.removed:
        return
    remove_zone(session, route)
    session.canvas.remove(route)
    logger.debug("Route %s removed", route.id)
    session.emit(RouteRemovedEvent(route_id=route.id))


def remove_player(session: EditorSession, player: Player) -> None:
    """Destroy a player, cascading to its route and zone."""
    if player.removed:
        return
    if player.route is not None:
        remove_route(session, player.route)
        player.route = None
    session.canvas.remove(player)
    session.emit(PlayerRemovedEvent(player_id=player.id, side=player.side.value))
