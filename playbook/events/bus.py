"""Event bus for pub/sub communication."""

from collections import defaultdict
from typing import Callable, TypeVar

from playbook.events.types import EditorEvent

T = TypeVar("T", bound=EditorEvent)
EventHandler = Callable[[EditorEvent], None]


class EventBus:
    """
    Publishes editor events to whoever listens.

    The drag state machine emits as it mutates the play; the edit log, the
    terminal UI and API clients subscribe without the core knowing them.

    A handler registered for an event class also receives its subclasses,
    so subscribing to EditorEvent is the same as subscribe_all except for
    ordering: class handlers run most specific first, catch-all handlers
    last.

    Example:
        bus = EventBus()
        bus.subscribe(RouteCreatedEvent, lambda e: print(e.path))
        bus.emit(RouteCreatedEvent(path="M100,625"))
    """

    def __init__(self) -> None:
        self._handlers: dict[type[EditorEvent], list[EventHandler]] = defaultdict(list)
        self._catch_all: list[EventHandler] = []

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Register a handler for an event class and its subclasses."""
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register a handler for every event."""
        self._catch_all.append(handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        """Remove a catch-all handler; unknown handlers are ignored."""
        if handler in self._catch_all:
            self._catch_all.remove(handler)

    def _handlers_for(self, event: EditorEvent) -> list[EventHandler]:
        handlers: list[EventHandler] = []
        for cls in type(event).__mro__:
            if cls in self._handlers:
                handlers.extend(self._handlers[cls])
            if cls is EditorEvent:
                break
        return handlers + self._catch_all

    def emit(self, event: EditorEvent) -> None:
        """Deliver an event; handlers added while it is delivered wait for the next one."""
        for handler in self._handlers_for(event):
            handler(event)

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
        self._catch_all.clear()
