"""Editor session: the mode flag, the live players and their canvas."""

from __future__ import annotations

import logging
from typing import Optional, Union
from uuid import UUID, uuid4

from playbook.config import FieldOptions, get_config
from playbook.core.builders import build_player, remove_player
from playbook.core.canvas import Canvas
from playbook.core.enums import Mode, Side
from playbook.core.models import Player, Route
from playbook.editor.drag import PathDrag, PlayerDrag
from playbook.events import EventBus
from playbook.events.types import EditorEvent, ModeChangedEvent, PlayerAddedEvent
from playbook.logging import EditLog

logger = logging.getLogger(__name__)

PLAYERS_PER_SIDE = 11

# Tokens line up this far off the line of scrimmage
FORMATION_DEPTH = 25


class EditorSession:
    """
    One independent play editor.

    Owns the interaction mode and the player collection. Hosts change the
    mode and add/remove players; gestures read the mode and mutate players
    and their routes through the session's canvas.
    """

    def __init__(
        self,
        options: Optional[FieldOptions] = None,
        mode: Union[Mode, str, None] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        """
        Initialize an empty session.

        Args:
            options: Field configuration (defaults to the global config)
            mode: Starting mode (defaults to options.mode)
            event_bus: Bus to publish editor events on (a new one if omitted)

        Raises:
            ValueError: If the options fail validation or the mode is unknown
        """
        self.options = options or get_config()
        errors = self.options.validate()
        if errors:
            raise ValueError(f"Invalid field options: {'; '.join(errors)}")

        self.id: UUID = uuid4()
        self.mode: Mode = Mode.parse(mode if mode is not None else self.options.mode)
        self.canvas = Canvas()
        self.players: list[Player] = []
        self.event_bus = event_bus or EventBus()
        self.edit_log = EditLog()
        self.edit_log.connect_to_event_bus(self.event_bus)

    # =========================================================================
    # Setup
    # =========================================================================

    def build(self) -> "EditorSession":
        """Place the default 22 players on either side of the line of scrimmage."""
        los = self.options.line_of_scrimmage
        for i in range(PLAYERS_PER_SIDE * 2):
            if i >= PLAYERS_PER_SIDE:
                self.add_player((i - 10) * 100, los - FORMATION_DEPTH, Side.DEFENSE)
            else:
                self.add_player((i + 1) * 100, los + FORMATION_DEPTH, Side.OFFENSE)
        logger.info("Session %s built with %d players", self.id, len(self.players))
        return self

    # =========================================================================
    # Mode
    # =========================================================================

    def change_mode(self, mode: Union[Mode, str]) -> "EditorSession":
        """
        Switch the interaction mode for subsequent gestures.

        Raises:
            ValueError: For anything other than 'move' or 'design'
        """
        new_mode = Mode.parse(mode)
        previous = self.mode
        self.mode = new_mode
        if new_mode != previous:
            logger.debug("Session %s mode %s -> %s", self.id, previous.value, new_mode.value)
        self.emit(ModeChangedEvent(mode=new_mode.value, previous_mode=previous.value))
        return self

    # =========================================================================
    # Players
    # =========================================================================

    def add_player(
        self,
        x: float,
        y: float,
        side: Union[Side, str],
        fill: Optional[str] = None,
        route: Optional[Route] = None,
    ) -> Player:
        """Place a token (with an optional prebuilt route) on the field."""
        side = Side(side)
        player = build_player(self.options, x, y, side, fill=fill, route=route)
        if route is not None:
            if route.zone is not None:
                self.canvas.add(route.zone)
            self.canvas.add(route)
        self.canvas.add(player)
        self.players.append(player)
        self.emit(PlayerAddedEvent(player_id=player.id, side=side.value, x=x, y=y))
        return player

    def remove_player(self, player: Player) -> None:
        """Remove a token and everything it owns."""
        remove_player(self, player)
        if player in self.players:
            self.players.remove(player)

    def remove_side(self, side: Union[Side, str]) -> int:
        """Remove every token of one side. Returns how many were removed."""
        side = Side(side)
        doomed = [player for player in self.players if player.side == side]
        for player in doomed:
            self.remove_player(player)
        return len(doomed)

    def players_on(self, side: Union[Side, str]) -> list[Player]:
        side = Side(side)
        return [player for player in self.players if player.side == side]

    def player_by_id(self, player_id: UUID) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def players_to_front(self) -> "EditorSession":
        """Keep every token above route strokes and zones."""
        for player in self.players:
            self.canvas.to_front(player)
        return self

    # =========================================================================
    # Hit testing and gestures
    # =========================================================================

    def player_at(self, x: float, y: float, tolerance: float = 0.0) -> Optional[Player]:
        """Topmost token under a point."""
        for player in reversed(self.canvas.of_type(Player)):
            if player.contains(x, y, tolerance):
                return player
        return None

    def route_at(self, x: float, y: float, tolerance: float = 0.0) -> Optional[Route]:
        """Topmost route whose stroke passes under a point."""
        for route in reversed(self.canvas.of_type(Route)):
            if route.distance_to(x, y) <= route.stroke_width / 2 + tolerance:
                return route
        return None

    def drag_player(self, player: Player) -> PlayerDrag:
        return player.drag(self)

    def drag_route(self, route: Route) -> PathDrag:
        return route.drag(self)

    # =========================================================================
    # Events
    # =========================================================================

    def emit(self, event: EditorEvent) -> None:
        """Stamp an event with this session and publish it."""
        event.session_id = self.id
        self.event_bus.emit(event)

    def clear(self) -> None:
        """Remove every player, route and zone."""
        for player in list(self.players):
            self.remove_player(player)
        self.canvas.clear()

    def __repr__(self) -> str:
        return f"EditorSession(id={self.id}, mode={self.mode.value}, players={len(self.players)})"
