"""
Drag state machines for player tokens and route paths.

The host delivers one gesture at a time as on_start -> on_move* -> on_end.
Each gesture object carries its own state (origin, captured mode, which
segment is being edited), so nothing leaks between gestures or sessions.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from playbook.core.builders import build_zone, remove_zone
from playbook.core.enums import Mode, Side
from playbook.core.geometry import nearest_segment_index, zone_from_drag
from playbook.events.types import PlayerMovedEvent, RouteChangedEvent, ZoneChangedEvent

if TYPE_CHECKING:
    from playbook.core.models.player import Player
    from playbook.core.models.route import Route
    from playbook.core.models.zone import Zone
    from playbook.editor.session import EditorSession

logger = logging.getLogger(__name__)

# (dx, dy, x, y): cumulative delta from the gesture start plus the pointer
DragMove = tuple[float, float, float, float]


class DragGesture(ABC):
    """The three callbacks a host drives for one pointer drag."""

    @abstractmethod
    def on_start(self, x: float, y: float) -> None:
        """Pointer pressed at absolute (x, y)."""

    @abstractmethod
    def on_move(self, dx: float, dy: float, x: float, y: float) -> None:
        """Pointer moved; (dx, dy) is cumulative from the start."""

    def on_end(self) -> None:
        """Pointer released."""

    def play(self, x: float, y: float, moves: Iterable[DragMove] = (), finish: bool = True) -> None:
        """Run a whole gesture in one go (API replays, scripted hosts)."""
        self.on_start(x, y)
        for dx, dy, mx, my in moves:
            self.on_move(dx, dy, mx, my)
        if finish:
            self.on_end()


@dataclass
class PlayerDrag(DragGesture):
    """
    Dragging a player token.

    move mode: the token follows the pointer and snaps to the grid on
    release; its route anchor follows along.
    design mode: the token stays put and a fresh route is drawn out of it,
    always as a single segment that tracks the pointer.
    """

    session: EditorSession
    player: Player
    mode: Optional[Mode] = None
    origin_x: float = 0.0
    origin_y: float = 0.0

    def on_start(self, x: float, y: float) -> None:
        self.mode = self.session.mode
        self.origin_x = self.player.x
        self.origin_y = self.player.y
        if self.player.removed:
            return
        if self.mode == Mode.DESIGN:
            self.player.create_route(self.session)

    def on_move(self, dx: float, dy: float, x: float, y: float) -> None:
        if self.mode is None or self.player.removed:
            return
        new_x = self.origin_x + dx
        new_y = self.origin_y + dy

        if self.mode == Mode.MOVE:
            self.player.move_to(new_x, new_y)
            self.session.emit(PlayerMovedEvent(player_id=self.player.id, x=new_x, y=new_y))
        elif self.mode == Mode.DESIGN and self.player.has_route:
            self.player.path_first_segment(new_x, new_y)
            route = self.player.route
            self.session.emit(RouteChangedEvent(route_id=route.id, path=route.path_string, segment_index=1))

    def on_end(self) -> None:
        if self.mode == Mode.MOVE:
            self.player.snap_to_grid(self.session)
        self.mode = None


@dataclass
class PathDrag(DragGesture):
    """
    Dragging on a route stroke.

    Which branch runs is decided at drag start from the route's side and the
    session mode:

    - offense + design: a new trailing segment follows the pointer
    - move (either side): the LineTo point nearest the press is relocated
    - defense + design: the zone at the route's end is rebuilt and sized
      by the drag
    """

    session: EditorSession
    route: Route
    mode: Optional[Mode] = None
    side: Optional[Side] = None
    segment_to_move: Optional[int] = None
    origin_x: float = 0.0
    origin_y: float = 0.0

    def on_start(self, x: float, y: float) -> None:
        self.mode = self.session.mode
        self.side = self.route.side
        self.origin_x = x
        self.origin_y = y
        self.segment_to_move = None
        if self.route.removed:
            return

        segments = self.route.segments
        if self.side == Side.OFFENSE and self.mode == Mode.DESIGN:
            self.segment_to_move = len(segments)
        if self.mode == Mode.MOVE:
            self.segment_to_move = nearest_segment_index(segments, x, y)
        if self.side == Side.DEFENSE and self.mode == Mode.DESIGN:
            self._start_zone()

    def on_move(self, dx: float, dy: float, x: float, y: float) -> None:
        if self.mode is None or self.route.removed:
            return

        if self.side == Side.OFFENSE or self.mode == Mode.MOVE:
            index = self.segment_to_move
            # Index 0 is the anchor and is never rewritten
            if index and index > 0:
                if self.route.set_segment(index, self.origin_x + dx, self.origin_y + dy):
                    self.session.emit(
                        RouteChangedEvent(
                            route_id=self.route.id,
                            path=self.route.path_string,
                            segment_index=index,
                        )
                    )

        if self.side == Side.DEFENSE:
            zone = self.route.zone
            if zone is not None and not zone.removed:
                last = self.route.last_segment
                zone.reshape(zone_from_drag(last.x, last.y, dx, dy))
                self._emit_zone(zone)

    def _start_zone(self) -> Zone:
        """Replace the route's zone with an empty one at its last point."""
        remove_zone(self.session, self.route)
        last = self.route.last_segment
        zone = build_zone(self.session.options, last.x, last.y, 0, 0, self.side)
        self.session.canvas.add(zone)
        self.route.zone = zone
        logger.debug("Zone %s anchored at (%s, %s) on route %s", zone.id, last.x, last.y, self.route.id)
        self._emit_zone(zone)
        return zone

    def _emit_zone(self, zone: Zone) -> None:
        self.session.emit(
            ZoneChangedEvent(
                route_id=self.route.id,
                zone_id=zone.id,
                x=zone.x,
                y=zone.y,
                width=zone.width,
                height=zone.height,
            )
        )
