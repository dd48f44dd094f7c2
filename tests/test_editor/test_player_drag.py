"""Tests for dragging player tokens."""

from playbook.core.enums import Mode
from playbook.core.models import PathSegment
from playbook.editor import PlayerDrag
from playbook.events import PlayerMovedEvent, RouteChangedEvent, RouteCreatedEvent


class TestMoveMode:
    """Dragging a token in move mode."""

    def test_token_follows_pointer(self, session, offense_player):
        drag = session.drag_player(offense_player)
        drag.on_start(200, 625)
        drag.on_move(30, -40, 230, 585)
        assert offense_player.position == (230, 585)

    def test_snaps_on_release(self, session, offense_player):
        session.drag_player(offense_player).play(200, 625, [(30, -40, 230, 585)])
        assert offense_player.position == (225, 575)

    def test_deltas_are_cumulative_from_start(self, session, offense_player):
        drag = session.drag_player(offense_player)
        drag.on_start(205, 630)
        drag.on_move(10, 0, 215, 630)
        drag.on_move(20, 0, 225, 630)
        assert offense_player.position == (220, 625)

    def test_never_creates_route(self, session, offense_player, recorded_events):
        session.drag_player(offense_player).play(200, 625, [(50, 50, 250, 675)])
        assert offense_player.route is None
        assert not any(isinstance(e, RouteCreatedEvent) for e in recorded_events)

    def test_route_anchor_tracks_token(self, session, offense_with_route):
        route = offense_with_route.route
        drag = session.drag_player(offense_with_route)
        drag.on_start(200, 625)
        for step in range(1, 6):
            drag.on_move(step * 3, step, 200 + step * 3, 625 + step)
            assert route.first_segment == PathSegment.move_to(offense_with_route.x, offense_with_route.y)
        drag.on_end()
        assert route.first_segment == PathSegment.move_to(offense_with_route.x, offense_with_route.y)
        assert route.segments[1:] == [PathSegment.line_to(200, 525), PathSegment.line_to(300, 525)]

    def test_off_grid_axis_survives_snap(self, session, offense_with_route):
        session.drag_player(offense_with_route).play(200, 625, [(13, 2, 213, 627)])
        assert offense_with_route.position == (213, 625)
        assert offense_with_route.route.first_segment == PathSegment.move_to(213, 625)

    def test_emits_move_ticks(self, session, offense_player, recorded_events):
        session.drag_player(offense_player).play(200, 625, [(1, 1, 0, 0), (2, 2, 0, 0)], finish=False)
        moved = [e for e in recorded_events if isinstance(e, PlayerMovedEvent)]
        assert [(e.x, e.y) for e in moved] == [(201, 626), (202, 627)]
        assert all(e.session_id == session.id for e in moved)


class TestDesignMode:
    """Dragging a token in design mode."""

    def test_press_starts_fresh_route(self, session, offense_player):
        session.change_mode("design")
        drag = session.drag_player(offense_player)
        drag.on_start(200, 625)
        assert offense_player.route.segments == [PathSegment.move_to(200, 625)]

    def test_route_is_single_segment_to_pointer(self, session, offense_player):
        session.change_mode("design")
        drag = session.drag_player(offense_player)
        drag.on_start(200, 625)
        drag.on_move(0, -50, 200, 575)
        drag.on_move(40, -100, 240, 525)
        drag.on_move(60, -120, 260, 505)
        assert offense_player.route.segments == [
            PathSegment.move_to(200, 625),
            PathSegment.line_to(260, 505),
        ]

    def test_token_does_not_move_or_snap(self, session):
        player = session.add_player(203, 627, "offense")
        session.change_mode("design")
        session.drag_player(player).play(203, 627, [(40, -40, 243, 587)])
        assert player.position == (203, 627)

    def test_replaces_previous_route(self, session, offense_with_route):
        old_route = offense_with_route.route
        session.change_mode("design")
        session.drag_player(offense_with_route).play(200, 625, [(0, -80, 200, 545)])
        assert old_route.removed
        assert old_route not in session.canvas
        assert offense_with_route.route.path_string == "M200,625L200,545"

    def test_route_changed_events_name_segment_one(self, session, offense_player, recorded_events):
        session.change_mode("design")
        session.drag_player(offense_player).play(200, 625, [(10, 10, 210, 635)])
        changed = [e for e in recorded_events if isinstance(e, RouteChangedEvent)]
        assert changed[-1].segment_index == 1
        assert changed[-1].path == "M200,625L210,635"


class TestGestureState:
    """Mode capture and gesture isolation."""

    def test_mode_captured_at_start(self, session, offense_player):
        drag = session.drag_player(offense_player)
        drag.on_start(200, 625)
        session.change_mode("design")
        drag.on_move(10, 0, 210, 625)
        assert offense_player.position == (210, 625)
        assert offense_player.route is None

    def test_move_before_start_is_ignored(self, session, offense_player):
        drag = PlayerDrag(session=session, player=offense_player)
        drag.on_move(50, 50, 250, 675)
        assert offense_player.position == (200, 625)

    def test_mode_cleared_on_end(self, session, offense_player):
        drag = session.drag_player(offense_player)
        drag.play(200, 625, [])
        assert drag.mode is None

    def test_removed_token_ignores_moves(self, session, offense_player):
        drag = session.drag_player(offense_player)
        drag.on_start(200, 625)
        session.remove_player(offense_player)
        drag.on_move(50, 50, 250, 675)
        assert offense_player.position == (200, 625)

    def test_gestures_do_not_share_origin(self, session, offense_player, defense_player):
        first = session.drag_player(offense_player)
        second = session.drag_player(defense_player)
        first.on_start(200, 625)
        second.on_start(300, 575)
        first.on_move(5, 5, 205, 630)
        assert (first.origin_x, second.origin_x) == (200, 300)
        assert first.mode == Mode.MOVE

    def test_removed_token_grows_no_route(self, session, offense_player):
        session.remove_player(offense_player)
        session.change_mode("design")
        drag = session.drag_player(offense_player)
        drag.play(200, 625, [(0, -50, 200, 575)])
        assert offense_player.route is None
        assert len(session.canvas) == 0
