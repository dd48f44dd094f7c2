"""Player tokens."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Optional

from playbook.core.enums import Side
from playbook.core.geometry import Rect, clamp, snap_to
from playbook.core.models.route import PathSegment, Route
from playbook.core.models.shape import Shape
from playbook.events.types import PlayerSnappedEvent, RouteCreatedEvent

if TYPE_CHECKING:
    from playbook.editor.drag import PlayerDrag
    from playbook.editor.session import EditorSession

logger = logging.getLogger(__name__)

PLAYER_RADIUS = 18

# Distance from a grid line within which a released token snaps to it
SNAP_THRESHOLD = 10

# Duration of the snap transition handed to the renderer
SNAP_ANIMATION_MS = 100


@dataclass(eq=False)
class Player(Shape):
    """
    A circular token on the field.

    A player owns at most one route; the route's anchor follows the token.
    """

    x: float
    y: float
    side: Side
    fill: str
    radius: float = PLAYER_RADIUS
    route: Optional[Route] = None

    kind: ClassVar[str] = "circle"
    draggable: ClassVar[bool] = True

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def has_route(self) -> bool:
        return self.route is not None and not self.route.removed

    def bounds(self) -> Rect:
        return Rect(self.x - self.radius, self.y - self.radius, self.radius * 2, self.radius * 2)

    def contains(self, px: float, py: float, tolerance: float = 0.0) -> bool:
        """Check if a point is on the token (optionally with some slack)."""
        reach = self.radius + tolerance
        return (px - self.x) ** 2 + (py - self.y) ** 2 <= reach ** 2

    def move_to(self, x: float, y: float) -> None:
        """Reposition the token and keep the route anchored to it."""
        if self.removed:
            return
        self.x = x
        self.y = y
        if self.has_route:
            self.route.move_path_start(x, y)

    def path_first_segment(self, x: float, y: float) -> None:
        """Reduce the route to its anchor plus a single drawn point."""
        if not self.has_route:
            return
        self.route.set_path([self.route.first_segment, PathSegment.line_to(x, y)])

    def create_route(self, session: EditorSession) -> Route:
        """
        Start a fresh route at the token's position.

        Any existing route (and its zone) is destroyed first. Players are
        brought back above the new stroke afterwards.
        """
        from playbook.core.builders import build_route, remove_route

        if self.route is not None:
            remove_route(session, self.route)
            self.route = None

        route = build_route(
            session.options,
            [PathSegment.move_to(self.x, self.y)],
            side=self.side,
            fill=self.fill,
        )
        session.canvas.add(route)
        self.route = route
        session.players_to_front()

        logger.debug("Route %s started for player %s at (%s, %s)", route.id, self.id, self.x, self.y)
        session.emit(RouteCreatedEvent(player_id=self.id, route_id=route.id, path=route.path_string))
        return route

    def snap_to_grid(self, session: EditorSession) -> tuple[float, float]:
        """
        Settle the token onto the session grid.

        Each axis snaps independently, then the result is clamped into the
        field. The model takes the final coordinates at once; the canvas
        records a short transition for renderers that animate.

        Returns:
            The resting (x, y)
        """
        if self.removed:
            return self.position

        options = session.options
        old_x, old_y = self.x, self.y
        new_x = snap_to(options.grid_size, old_x, SNAP_THRESHOLD)
        new_y = snap_to(options.grid_size, old_y, SNAP_THRESHOLD)
        new_x = clamp(new_x, 0, options.field_width)
        new_y = clamp(new_y, 0, options.field_height)

        session.canvas.animate(self, {"cx": new_x, "cy": new_y}, SNAP_ANIMATION_MS)
        self.move_to(new_x, new_y)

        session.emit(
            PlayerSnappedEvent(
                player_id=self.id,
                from_x=old_x,
                from_y=old_y,
                x=new_x,
                y=new_y,
                duration_ms=SNAP_ANIMATION_MS,
            )
        )
        return new_x, new_y

    def drag(self, session: EditorSession) -> PlayerDrag:
        from playbook.editor.drag import PlayerDrag

        return PlayerDrag(session=session, player=self)
