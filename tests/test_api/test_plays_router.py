"""Tests for the plays API router."""

import pytest
from fastapi.testclient import TestClient

from playbook.api.main import app

BASE = "/api/v1/plays/sessions"


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def session_state(client):
    """A populated session in move mode."""
    response = client.post(BASE, json={"mode": "move"})
    assert response.status_code == 201
    return response.json()


def offense(state: dict, index: int = 0) -> dict:
    return [p for p in state["players"] if p["side"] == "offense"][index]


class TestSessions:
    """Tests for session lifecycle endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_populated(self, session_state):
        assert len(session_state["players"]) == 22
        assert session_state["mode"] == "move"
        assert session_state["grid_size"] == 25
        assert len(session_state["stack"]) == 22

    def test_create_empty_with_options(self, client):
        response = client.post(
            BASE,
            json={"mode": "design", "populate": False, "options": {"grid_size": 10, "field_width": 600}},
        )
        state = response.json()
        assert response.status_code == 201
        assert state["players"] == []
        assert state["grid_size"] == 10
        assert state["field_width"] == 600
        assert state["mode"] == "design"

    def test_invalid_options_rejected(self, client):
        response = client.post(BASE, json={"options": {"grid_size": -1}})
        assert response.status_code == 422

    def test_get_and_delete(self, client, session_state):
        url = f"{BASE}/{session_state['session_id']}"
        assert client.get(url).status_code == 200
        assert client.delete(url).status_code == 204
        assert client.get(url).status_code == 404
        assert client.delete(url).status_code == 404

    def test_unknown_session(self, client):
        response = client.get(f"{BASE}/00000000-0000-0000-0000-000000000000")
        assert response.status_code == 404


class TestModeAndPlayers:
    """Tests for mode switching and player endpoints."""

    def test_change_mode(self, client, session_state):
        url = f"{BASE}/{session_state['session_id']}/mode"
        response = client.put(url, json={"mode": "design"})
        assert response.status_code == 200
        assert response.json()["mode"] == "design"
        assert response.json()["last_action"] == "Mode set to design"

    def test_bad_mode(self, client, session_state):
        url = f"{BASE}/{session_state['session_id']}/mode"
        assert client.put(url, json={"mode": "draw"}).status_code == 422

    def test_add_and_remove_player(self, client, session_state):
        url = f"{BASE}/{session_state['session_id']}/players"
        response = client.post(url, json={"x": 600, "y": 700, "side": "offense"})
        assert response.status_code == 201
        player = response.json()
        assert player["fill"] == "#e33232"
        assert player["route"] is None

        response = client.delete(f"{url}/{player['id']}")
        assert response.status_code == 200
        assert len(response.json()["players"]) == 22

    def test_remove_unknown_player(self, client, session_state):
        url = f"{BASE}/{session_state['session_id']}/players/not-a-uuid"
        assert client.delete(url).status_code == 404


class TestGestures:
    """Tests for replaying drag gestures."""

    def test_move_and_snap(self, client, session_state):
        player = offense(session_state)
        url = f"{BASE}/{session_state['session_id']}/gestures"
        response = client.post(url, json={"player_id": player["id"], "moves": [{"dx": 30, "dy": -40}]})
        moved = offense(response.json())
        assert (moved["x"], moved["y"]) == (125, 575)

    def test_design_route_then_extend(self, client, session_state):
        session_id = session_state["session_id"]
        player = offense(session_state)
        client.put(f"{BASE}/{session_id}/mode", json={"mode": "design"})

        url = f"{BASE}/{session_id}/gestures"
        response = client.post(url, json={"player_id": player["id"], "moves": [{"dx": 0, "dy": -100}]})
        assert offense(response.json())["route"] == "M100,625L100,525"

        response = client.post(
            url,
            json={"target": "route", "player_id": player["id"], "moves": [{"dx": 100, "dy": 0}]},
        )
        assert offense(response.json())["route"] == "M100,625L100,525L200,525"

    def test_defense_zone(self, client, session_state):
        session_id = session_state["session_id"]
        defender = [p for p in session_state["players"] if p["side"] == "defense"][0]
        client.put(f"{BASE}/{session_id}/mode", json={"mode": "design"})

        url = f"{BASE}/{session_id}/gestures"
        client.post(url, json={"player_id": defender["id"], "moves": [{"dx": 0, "dy": -175}]})
        response = client.post(
            url,
            json={"target": "route", "player_id": defender["id"], "moves": [{"dx": 40, "dy": -20}]},
        )
        state = [p for p in response.json()["players"] if p["id"] == defender["id"]][0]
        assert state["zone"]["width"] == 40
        assert state["zone"]["x"] == 80

    def test_route_gesture_without_route(self, client, session_state):
        player = offense(session_state)
        url = f"{BASE}/{session_state['session_id']}/gestures"
        response = client.post(url, json={"target": "route", "player_id": player["id"]})
        assert response.status_code == 409


class TestPlayExchange:
    """Tests for exporting and importing plays over HTTP."""

    def test_export(self, client, session_state):
        response = client.get(f"{BASE}/{session_state['session_id']}/play")
        assert response.status_code == 200
        play = response.json()
        assert len(play["offense"]) == 11
        assert play["offense"][0]["route"] == ""

    def test_import_replaces_side(self, client, session_state):
        url = f"{BASE}/{session_state['session_id']}/play"
        play = {"offense": [{"cx": 300, "cy": 650, "route": "M300,650L300,500"}, {"cy": 1}]}
        response = client.put(url, json=play)
        assert response.status_code == 200
        body = response.json()
        assert body["imported"] == 1
        assert len(body["session"]["players"]) == 12
        assert body["session"]["last_action"] == "Imported 1 offense, 0 defense (1 skipped)"

    def test_import_rejects_non_object(self, client, session_state):
        url = f"{BASE}/{session_state['session_id']}/play"
        assert client.put(url, json=[1, 2]).status_code == 422
