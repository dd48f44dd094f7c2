"""Tests for the edit log."""

from playbook.events import EventBus, PlayerMovedEvent, RouteCreatedEvent
from playbook.logging import EditLog


class TestEditLog:
    """Tests for EditLog fed from a session."""

    def test_records_build(self, built_session):
        log = built_session.edit_log
        assert log.summary.players_added == 22
        assert log.last_entry.description == "Added defense player at (1100, 575)"

    def test_records_design_drag(self, session, offense_player):
        session.change_mode("design")
        session.drag_player(offense_player).play(200, 625, [(10, 0, 210, 625), (20, 0, 220, 625)])
        log = session.edit_log
        assert log.summary.mode_changes == 1
        assert log.summary.routes_created == 1
        assert log.summary.route_ticks == 2
        assert log.last_entry.description == "Route started at M200,625"
        assert log.last_entry.route_id == offense_player.route.id

    def test_ticks_are_counted_not_logged(self, session, offense_player):
        session.drag_player(offense_player).play(200, 625, [(1, 0, 0, 0), (30, 0, 0, 0)])
        log = session.edit_log
        assert log.summary.move_ticks == 2
        assert log.summary.snaps == 1
        assert [entry.event_type for entry in log.entries] == ["ADD", "SNAP"]
        assert log.last_entry.description == "Player settled at (225, 625)"

    def test_cascade_entries(self, session, offense_with_route):
        session.remove_player(offense_with_route)
        assert [e.event_type for e in session.edit_log.recent(2)] == ["ROUTE_REMOVED", "REMOVE"]

    def test_bounded(self):
        bus = EventBus()
        log = EditLog(max_entries=3)
        log.connect_to_event_bus(bus)
        for i in range(5):
            bus.emit(RouteCreatedEvent(path=f"M{i},0"))
        assert len(log.entries) == 3
        assert log.entries[0].description == "Route started at M2,0"
        assert log.summary.routes_created == 5

    def test_entries_of_and_clear(self):
        bus = EventBus()
        log = EditLog()
        log.connect_to_event_bus(bus)
        bus.emit(RouteCreatedEvent(path="M0,0"))
        bus.emit(PlayerMovedEvent())
        assert len(log.entries_of("ROUTE")) == 1
        log.clear()
        assert log.entries == []
        assert log.summary.move_ticks == 0
        assert log.recent(0) == []
