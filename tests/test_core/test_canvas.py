"""Tests for the in-memory canvas."""

from playbook.core.canvas import Canvas
from playbook.core.enums import Side
from playbook.core.models import Player, Zone


def token(x: float = 0) -> Player:
    return Player(x=x, y=0, side=Side.OFFENSE, fill="#e33232")


class TestCanvas:
    """Tests for Canvas stacking and removal."""

    def test_add_stacks_on_top(self):
        canvas = Canvas()
        a, b = token(1), token(2)
        canvas.add(a)
        canvas.add(b)
        assert canvas.stack == [a, b]

    def test_add_is_idempotent(self):
        canvas = Canvas()
        a = token()
        canvas.add(a)
        canvas.add(a)
        assert len(canvas) == 1

    def test_to_front(self):
        canvas = Canvas()
        a, b, c = token(1), token(2), token(3)
        for shape in (a, b, c):
            canvas.add(shape)
        canvas.to_front(a)
        assert canvas.stack == [b, c, a]
        assert canvas.index_of(a) == 2

    def test_to_front_ignores_unknown_shape(self):
        canvas = Canvas()
        canvas.to_front(token())
        assert len(canvas) == 0

    def test_remove_marks_shape(self):
        canvas = Canvas()
        a = token()
        canvas.add(a)
        assert canvas.remove(a)
        assert a.removed
        assert a not in canvas
        assert canvas.index_of(a) == -1

    def test_remove_twice_reports_false(self):
        canvas = Canvas()
        a = token()
        canvas.add(a)
        canvas.remove(a)
        assert not canvas.remove(a)

    def test_of_type(self):
        canvas = Canvas()
        zone = Zone(x=0, y=0, width=1, height=1, fill="#323ae3")
        player = token()
        canvas.add(zone)
        canvas.add(player)
        assert canvas.of_type(Player) == [player]
        assert canvas.of_type(Zone) == [zone]
        assert canvas.get(zone.id) is zone

    def test_transitions_drain_once(self):
        canvas = Canvas()
        a = token()
        canvas.animate(a, {"cx": 100}, 100)
        assert len(canvas.drain_transitions()) == 1
        assert canvas.drain_transitions() == []

    def test_clear(self):
        canvas = Canvas()
        a = token()
        canvas.add(a)
        canvas.clear()
        assert len(canvas) == 0
        assert a.removed
