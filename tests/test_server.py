"""Tests for the HTTP/WebSocket API."""

import pytest
from fastapi.testclient import TestClient

from module_defense.server.main import app, sessions


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    sessions.sessions.clear()


@pytest.fixture
def game_id(client):
    response = client.post("/api/games", json={"seed": 42})
    assert response.status_code == 200
    return response.json()["gameId"]


def test_health(client):
    response = client.get("/api")
    assert response.status_code == 200
    assert response.json()["service"] == "Module Defense"


def test_create_game(client):
    response = client.post("/api/games", json={"seed": 7, "width": 1000, "height": 600})

    body = response.json()
    assert body["seed"] == 7
    assert body["state"]["width"] == 1000
    assert body["state"]["totalDroids"] == 1


def test_create_game_rejects_bad_area(client):
    response = client.post("/api/games", json={"width": -5})
    assert response.status_code == 422


def test_get_state(client, game_id):
    response = client.get(f"/api/games/{game_id}/state")

    assert response.status_code == 200
    assert response.json()["status"] == "running"
    assert len(response.json()["state"]["modules"]) == 2


def test_unknown_game(client):
    assert client.get("/api/games/game-nope/state").status_code == 404
    assert client.delete("/api/games/game-nope").status_code == 404


def test_place_module_command(client, game_id):
    response = client.post(
        f"/api/games/{game_id}/commands",
        json={"command": "place_module", "x": 720, "y": 400, "kind": "defense"},
    )

    body = response.json()
    assert body["applied"] is True
    assert body["result"] == 2
    assert len(body["state"]["modules"]) == 3


def test_declined_command_is_not_an_error(client, game_id):
    """Overlapping placement reports applied=False with unchanged state."""
    response = client.post(
        f"/api/games/{game_id}/commands",
        json={"command": "place_module", "x": 660, "y": 400, "kind": "defense"},
    )

    assert response.status_code == 200
    assert response.json()["applied"] is False
    assert len(response.json()["state"]["modules"]) == 2


def test_unknown_command_rejected(client, game_id):
    response = client.post(f"/api/games/{game_id}/commands", json={"command": "launch_nukes"})
    assert response.status_code == 422


def test_speed_and_pause_commands(client, game_id):
    url = f"/api/games/{game_id}/commands"
    assert client.post(url, json={"command": "cycle_speed"}).json()["result"] == 2
    assert client.post(url, json={"command": "toggle_pause"}).json()["result"] is True


def test_tick(client, game_id):
    response = client.post(f"/api/games/{game_id}/tick", json={"deltaMs": 100, "ticks": 10})

    body = response.json()
    assert body["ticks"] == 10
    assert body["state"]["clock"] == 1000
    assert body["state"]["resources"] == 1005


def test_tick_batch_size_is_capped(client, game_id):
    response = client.post(f"/api/games/{game_id}/tick", json={"deltaMs": 16, "ticks": 1001})
    assert response.status_code == 422


def test_tick_rejected_after_game_over(client, game_id):
    url = f"/api/games/{game_id}/commands"
    client.post(url, json={"command": "destroy_module", "moduleId": 0})
    client.post(url, json={"command": "destroy_module", "moduleId": 1})
    response = client.post(f"/api/games/{game_id}/tick", json={"deltaMs": 16})
    assert response.json()["status"] == "defeat"

    response = client.post(f"/api/games/{game_id}/tick", json={"deltaMs": 16})

    assert response.status_code == 400


def test_delete_game(client, game_id):
    assert client.delete(f"/api/games/{game_id}").status_code == 200
    assert client.get(f"/api/games/{game_id}/state").status_code == 404


def test_websocket_commands_and_ticks(client, game_id):
    with client.websocket_connect(f"/ws/games/{game_id}") as ws:
        connected = ws.receive_json()
        assert connected["type"] == "CONNECTED"

        ws.send_json({"type": "PING"})
        assert ws.receive_json() == {"type": "PONG"}

        ws.send_json({"type": "COMMAND", "command": {"command": "transfer_droid", "moduleId": 0}})
        reply = ws.receive_json()
        assert reply["type"] == "STATE"
        assert reply["applied"] is False

        ws.send_json({"type": "TICK", "deltaMs": 16})
        reply = ws.receive_json()
        assert reply["type"] == "TICK"
        assert reply["state"]["clock"] == 16

        ws.send_json({"type": "COMMAND", "command": {"command": "bogus"}})
        assert ws.receive_json()["type"] == "ERROR"
