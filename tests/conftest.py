"""Shared pytest fixtures for Playbook tests."""

import pytest

from playbook.config import FieldOptions
from playbook.core.builders import build_route
from playbook.core.enums import Side
from playbook.core.models import Player
from playbook.editor import EditorSession


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def options() -> FieldOptions:
    """Default field options, independent of the environment."""
    return FieldOptions(
        grid_size=25,
        field_width=1200,
        field_height=900,
        route_width=20,
        mode="move",
    )


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def session(options) -> EditorSession:
    """An empty session in move mode."""
    return EditorSession(options=options, mode="move")


@pytest.fixture
def built_session(options) -> EditorSession:
    """A session with the default 22 players."""
    return EditorSession(options=options, mode="move").build()


@pytest.fixture
def recorded_events(session) -> list:
    """Every event the session emits, in order."""
    events = []
    session.event_bus.subscribe_all(events.append)
    return events


# =============================================================================
# Player Fixtures
# =============================================================================


@pytest.fixture
def offense_player(session) -> Player:
    """An offensive player with no route."""
    return session.add_player(200, 625, Side.OFFENSE)


@pytest.fixture
def defense_player(session) -> Player:
    """A defensive player with no route."""
    return session.add_player(300, 575, Side.DEFENSE)


@pytest.fixture
def offense_with_route(session, options) -> Player:
    """An offensive player running up then across: M200,625 L200,525 L300,525."""
    route = build_route(options, "M200,625L200,525L300,525", Side.OFFENSE, options.colors["offense"])
    return session.add_player(200, 625, Side.OFFENSE, route=route)


@pytest.fixture
def defense_with_route(session, options) -> Player:
    """A defensive player dropping straight back: M300,575 L300,400."""
    route = build_route(options, "M300,575L300,400", Side.DEFENSE, options.colors["defense"])
    return session.add_player(300, 575, Side.DEFENSE, route=route)
