from fastapi.testclient import TestClient
import pytest


pytestmark = pytest.mark.anyio

ROOM = {
    "room_name": "サークル飲み会",
    "description": "駅前に集合",
    "date": "2024-1-5",
    "time": "18:30",
    "datetime": "2024-1-5T18:30",
}
USER = {
    "username": "alice",
    "display_name": "Alice",
    "date_of_birth": "2000-12-31",
    "gender": "FEMALE",
}


def _register(client: TestClient) -> int:
    response = client.post("/api/user", json=USER)
    assert response.status_code == 200
    return response.json()["id"]


def test_create_room_requires_session(client: TestClient):
    response = client.post("/api/room/create", json={**ROOM, "hosts": [1]})

    assert response.status_code == 401


def test_register_user_and_read_profile(client: TestClient, login):
    login(client)

    user_id = _register(client)
    response = client.get("/api/user/me")

    assert response.status_code == 200
    assert response.json() == {
        "id": user_id,
        "username": "alice",
        "display_name": "Alice",
        "email": "alice@example.com",
        "date_of_birth": "2000-12-31",
        "gender": "FEMALE",
    }
    assert client.get("/api/auth/me").json()["registered"] is True


def test_register_twice_conflicts(client: TestClient, login):
    login(client)
    _register(client)

    response = client.post("/api/user", json=USER)

    assert response.status_code == 409


def test_profile_missing_before_registration(client: TestClient, login):
    login(client)

    assert client.get("/api/user/me").status_code == 404
    assert client.get("/api/auth/me").json()["registered"] is False


def test_create_and_get_room(client: TestClient, login):
    login(client)
    user_id = _register(client)

    response = client.post("/api/room/create", json={**ROOM, "hosts": [user_id]})

    assert response.status_code == 200
    room = response.json()
    assert room["hosts"] == [user_id]
    assert client.get(f"/api/room/{room['id']}").json() == room


def test_create_room_rejects_empty_hosts(client: TestClient, login):
    login(client)
    _register(client)

    response = client.post("/api/room/create", json={**ROOM, "hosts": []})

    assert response.status_code == 422


def test_create_room_requires_creator_among_hosts(client: TestClient, login):
    login(client)
    user_id = _register(client)

    response = client.post("/api/room/create", json={**ROOM, "hosts": [user_id + 100]})

    assert response.status_code == 403


def test_create_room_rejects_mismatched_datetime(client: TestClient, login):
    login(client)
    user_id = _register(client)

    response = client.post(
        "/api/room/create",
        json={**ROOM, "datetime": "2024-1-6T18:30", "hosts": [user_id]},
    )

    assert response.status_code == 422


def test_get_missing_room(client: TestClient):
    assert client.get("/api/room/999").status_code == 404
