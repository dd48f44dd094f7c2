"""In-memory edit log accumulating what happened to a play."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from playbook.events import (
    EventBus,
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

# Keep the log bounded for long editing sessions
DEFAULT_MAX_ENTRIES = 500


@dataclass
class LogEntry:
    """Single entry in the edit log."""

    timestamp: datetime
    event_type: str  # "MODE", "ADD", "REMOVE", "SNAP", "ROUTE", "ROUTE_REMOVED", "ZONE_REMOVED", "IMPORT"
    description: str
    player_id: Optional[UUID] = None
    route_id: Optional[UUID] = None


@dataclass
class EditSummary:
    """Counters over a session's lifetime."""

    mode_changes: int = 0
    players_added: int = 0
    players_removed: int = 0
    snaps: int = 0
    routes_created: int = 0
    routes_removed: int = 0
    zones_removed: int = 0
    imports: int = 0

    # Per-tick drag updates are counted, not logged
    move_ticks: int = 0
    route_ticks: int = 0
    zone_ticks: int = 0


class EditLog:
    """
    Accumulates discrete editing actions from a session's event bus.

    Drag ticks arrive many times per gesture; they only bump counters so
    the entry list stays readable.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        self.max_entries = max_entries
        self.entries: list[LogEntry] = []
        self.summary = EditSummary()

    def connect_to_event_bus(self, event_bus: EventBus) -> None:
        """Subscribe to events from an event bus."""
        event_bus.subscribe(ModeChangedEvent, self._handle_mode_changed)
        event_bus.subscribe(PlayerAddedEvent, self._handle_player_added)
        event_bus.subscribe(PlayerRemovedEvent, self._handle_player_removed)
        event_bus.subscribe(PlayerMovedEvent, self._handle_player_moved)
        event_bus.subscribe(PlayerSnappedEvent, self._handle_player_snapped)
        event_bus.subscribe(RouteCreatedEvent, self._handle_route_created)
        event_bus.subscribe(RouteChangedEvent, self._handle_route_changed)
        event_bus.subscribe(RouteRemovedEvent, self._handle_route_removed)
        event_bus.subscribe(ZoneChangedEvent, self._handle_zone_changed)
        event_bus.subscribe(ZoneRemovedEvent, self._handle_zone_removed)
        event_bus.subscribe(PlayImportedEvent, self._handle_play_imported)

    def add_entry(
        self,
        timestamp: datetime,
        event_type: str,
        description: str,
        player_id: Optional[UUID] = None,
        route_id: Optional[UUID] = None,
    ) -> LogEntry:
        """Append an entry, dropping the oldest past max_entries."""
        entry = LogEntry(
            timestamp=timestamp,
            event_type=event_type,
            description=description,
            player_id=player_id,
            route_id=route_id,
        )
        self.entries.append(entry)
        if len(self.entries) > self.max_entries:
            del self.entries[: len(self.entries) - self.max_entries]
        return entry

    def _handle_mode_changed(self, event: ModeChangedEvent) -> None:
        self.summary.mode_changes += 1
        self.add_entry(event.timestamp, "MODE", f"Mode set to {event.mode}")

    def _handle_player_added(self, event: PlayerAddedEvent) -> None:
        self.summary.players_added += 1
        self.add_entry(
            event.timestamp,
            "ADD",
            f"Added {event.side} player at ({event.x:g}, {event.y:g})",
            player_id=event.player_id,
        )

    def _handle_player_removed(self, event: PlayerRemovedEvent) -> None:
        self.summary.players_removed += 1
        self.add_entry(event.timestamp, "REMOVE", f"Removed {event.side} player", player_id=event.player_id)

    def _handle_player_moved(self, event: PlayerMovedEvent) -> None:
        self.summary.move_ticks += 1

    def _handle_player_snapped(self, event: PlayerSnappedEvent) -> None:
        self.summary.snaps += 1
        self.add_entry(
            event.timestamp,
            "SNAP",
            f"Player settled at ({event.x:g}, {event.y:g})",
            player_id=event.player_id,
        )

    def _handle_route_created(self, event: RouteCreatedEvent) -> None:
        self.summary.routes_created += 1
        self.add_entry(
            event.timestamp,
            "ROUTE",
            f"Route started at {event.path}",
            player_id=event.player_id,
            route_id=event.route_id,
        )

    def _handle_route_changed(self, event: RouteChangedEvent) -> None:
        self.summary.route_ticks += 1

    def _handle_route_removed(self, event: RouteRemovedEvent) -> None:
        self.summary.routes_removed += 1
        self.add_entry(event.timestamp, "ROUTE_REMOVED", "Route removed", route_id=event.route_id)

    def _handle_zone_changed(self, event: ZoneChangedEvent) -> None:
        self.summary.zone_ticks += 1

    def _handle_zone_removed(self, event: ZoneRemovedEvent) -> None:
        self.summary.zones_removed += 1
        self.add_entry(event.timestamp, "ZONE_REMOVED", "Zone removed", route_id=event.route_id)

    def _handle_play_imported(self, event: PlayImportedEvent) -> None:
        self.summary.imports += 1
        description = f"Imported {event.offense_count} offense, {event.defense_count} defense"
        if event.skipped:
            description += f" ({event.skipped} skipped)"
        self.add_entry(event.timestamp, "IMPORT", description)

    @property
    def last_entry(self) -> Optional[LogEntry]:
        return self.entries[-1] if self.entries else None

    def recent(self, count: int = 10) -> list[LogEntry]:
        """Most recent entries, oldest first."""
        return self.entries[-count:] if count > 0 else []

    def entries_of(self, event_type: str) -> list[LogEntry]:
        return [entry for entry in self.entries if entry.event_type == event_type]

    def clear(self) -> None:
        self.entries.clear()
        self.summary = EditSummary()
