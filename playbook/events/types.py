"""Event types emitted by an editor session."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class EditorEvent:
    """Base class for all editor events."""

    timestamp: datetime = field(default_factory=datetime.now)
    session_id: UUID = None


@dataclass
class ModeChangedEvent(EditorEvent):
    """Fired when the host switches the interaction mode."""

    mode: str = "move"
    previous_mode: str = "move"


@dataclass
class PlayerAddedEvent(EditorEvent):
    """Fired when a player token is placed on the field."""

    player_id: UUID = None
    side: str = ""
    x: float = 0.0
    y: float = 0.0


@dataclass
class PlayerRemovedEvent(EditorEvent):
    """Fired when a player token (and anything it owns) is destroyed."""

    player_id: UUID = None
    side: str = ""


@dataclass
class PlayerMovedEvent(EditorEvent):
    """Fired on every drag tick that moves a token."""

    player_id: UUID = None
    x: float = 0.0
    y: float = 0.0


@dataclass
class PlayerSnappedEvent(EditorEvent):
    """Fired when a released token settles onto the grid."""

    player_id: UUID = None
    from_x: float = 0.0
    from_y: float = 0.0
    x: float = 0.0
    y: float = 0.0
    duration_ms: int = 0


@dataclass
class RouteCreatedEvent(EditorEvent):
    """Fired when a fresh route is started from a player."""

    player_id: UUID = None
    route_id: UUID = None
    path: str = ""


@dataclass
class RouteChangedEvent(EditorEvent):
    """Fired when a route's drawn segments change during a drag."""

    route_id: UUID = None
    path: str = ""
    segment_index: int = 0


@dataclass
class RouteRemovedEvent(EditorEvent):
    """Fired when a route is destroyed."""

    route_id: UUID = None


@dataclass
class ZoneChangedEvent(EditorEvent):
    """Fired when a zone is created or reshaped."""

    route_id: UUID = None
    zone_id: UUID = None
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class ZoneRemovedEvent(EditorEvent):
    """Fired when a zone is destroyed."""

    route_id: UUID = None
    zone_id: UUID = None


@dataclass
class PlayImportedEvent(EditorEvent):
    """Fired after a play has been loaded into the session."""

    offense_count: int = 0
    defense_count: int = 0
    skipped: int = 0
