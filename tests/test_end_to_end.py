import re

from fastapi.testclient import TestClient


def test_sign_up_then_create_room(client: TestClient, login):
    login(client, name="Alice", email="alice@example.com")

    first_visit = client.get("/room/create", follow_redirects=False)
    assert first_visit.headers["location"] == "/signup"

    signup = client.post(
        "/signup",
        data={
            "username": "alice",
            "display_name": "ignored",
            "date_of_birth": "2000-01-02",
            "gender": "FEMALE",
        },
    )
    assert signup.status_code == 200

    profile = client.get("/api/user/me").json()
    assert profile["display_name"] == "Alice"
    assert profile["date_of_birth"] == "2000-1-2"

    created = client.post(
        "/room/create",
        data={
            "room_name": "サークル飲み会",
            "description": "駅前に集合",
            "date": "2024-01-05",
            "time": "18:30",
        },
        follow_redirects=False,
    )
    assert created.status_code == 303
    location = created.headers["location"]
    assert re.fullmatch(r"/room/\d+", location)

    room_id = int(location.rsplit("/", 1)[1])
    room = client.get(f"/api/room/{room_id}").json()
    assert room["hosts"] == [profile["id"]]
    assert room["datetime"] == "2024-1-5T18:30"

    detail = client.get(location)
    assert detail.status_code == 200
    assert "サークル飲み会" in detail.text
