"""Event system for the play editor."""

from playbook.events.bus import EventBus
from playbook.events.types import (
    EditorEvent,
    ModeChangedEvent,
    PlayerAddedEvent,
    PlayerMovedEvent,
    PlayerRemovedEvent,
    PlayerSnappedEvent,
    PlayImportedEvent,
    RouteChangedEvent,
    RouteCreatedEvent,
    RouteRemovedEvent,
    ZoneChangedEvent,
    ZoneRemovedEvent,
)

__all__ = [
    "EditorEvent",
    "EventBus",
    "ModeChangedEvent",
    "PlayImportedEvent",
    "PlayerAddedEvent",
    "PlayerMovedEvent",
    "PlayerRemovedEvent",
    "PlayerSnappedEvent",
    "RouteChangedEvent",
    "RouteCreatedEvent",
    "RouteRemovedEvent",
    "ZoneChangedEvent",
    "ZoneRemovedEvent",
]
