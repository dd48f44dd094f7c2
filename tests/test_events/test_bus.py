"""Tests for the event bus."""

from playbook.events import EditorEvent, EventBus, ModeChangedEvent, PlayerAddedEvent


class TestEventBus:
    """Tests for EventBus."""

    def test_typed_subscription(self):
        bus = EventBus()
        received = []
        bus.subscribe(ModeChangedEvent, received.append)
        bus.emit(ModeChangedEvent(mode="design", previous_mode="move"))
        bus.emit(PlayerAddedEvent(side="offense", x=1, y=2))
        assert len(received) == 1
        assert received[0].mode == "design"

    def test_base_class_subscription_sees_every_event(self):
        """Handlers on EditorEvent receive all subclasses."""
        bus = EventBus()
        received = []
        bus.subscribe(EditorEvent, received.append)
        bus.emit(ModeChangedEvent())
        bus.emit(PlayerAddedEvent())
        assert [type(e) for e in received] == [ModeChangedEvent, PlayerAddedEvent]

    def test_dispatch_order(self):
        """Most specific class first, base class next, catch-all last."""
        bus = EventBus()
        order = []
        bus.subscribe_all(lambda e: order.append("all"))
        bus.subscribe(EditorEvent, lambda e: order.append("base"))
        bus.subscribe(ModeChangedEvent, lambda e: order.append("mode"))
        bus.emit(ModeChangedEvent())
        assert order == ["mode", "base", "all"]

    def test_handler_added_during_emit_waits(self):
        bus = EventBus()
        late = []

        def add_late(event):
            bus.subscribe_all(late.append)

        bus.subscribe(ModeChangedEvent, add_late)
        bus.emit(ModeChangedEvent())
        assert late == []
        bus.emit(PlayerAddedEvent())
        assert len(late) == 1

    def test_unsubscribe_all(self):
        bus = EventBus()
        received = []
        bus.subscribe_all(received.append)
        bus.unsubscribe_all(received.append)
        bus.unsubscribe_all(received.append)
        bus.emit(ModeChangedEvent())
        assert received == []

    def test_clear(self):
        bus = EventBus()
        received = []
        bus.subscribe(ModeChangedEvent, received.append)
        bus.subscribe_all(received.append)
        bus.clear()
        bus.emit(ModeChangedEvent())
        assert received == []
