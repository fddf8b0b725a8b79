import json
from typing import Any

import httpx
import pytest
import redis
from fastapi.testclient import TestClient

from eshoku.main import app_factory
from testcontainers.redis import RedisContainer

# Never contacted: page tests answer backend calls with a mock transport.
UNUSED_REDIS_URL = "redis://localhost:6399/0"


@pytest.fixture(scope="session")
def redis_url():
    with RedisContainer("redis:7-alpine") as c:
        host = c.get_container_host_ip()
        port = c.get_exposed_port(6379)
        yield f"redis://{host}:{port}/0"


@pytest.fixture
def app(redis_url):
    sync_client = redis.Redis.from_url(redis_url)
    try:
        sync_client.flushdb()
    finally:
        sync_client.close()
    return app_factory(redis_url)


@pytest.fixture
def client(app):
    with TestClient(app) as tc:
        yield tc


class FakeBackend:
    """Answers the JSON endpoints the pages call."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.current_user: dict[str, Any] | None = {
            "id": 7,
            "username": "alice",
            "display_name": "Alice",
            "email": "alice@example.com",
            "date_of_birth": "2000-12-31",
            "gender": "FEMALE",
        }
        self.room_status = 200
        self.room_body: dict[str, Any] = {"id": 42}
        self.user_status = 200
        self.rooms: dict[int, dict[str, Any]] = {}

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == "/api/user/me":
            if self.current_user is None:
                return httpx.Response(404, json={"detail": "not registered"})
            return httpx.Response(200, json=self.current_user)
        if path == "/api/room/create":
            return httpx.Response(self.room_status, json=self.room_body)
        if path == "/api/user":
            body = json.loads(request.content)
            return httpx.Response(self.user_status, json={"id": 7, **body})
        if path.startswith("/api/room/"):
            room = self.rooms.get(int(path.rsplit("/", 1)[1]))
            if room is None:
                return httpx.Response(404, json={"detail": "missing"})
            return httpx.Response(200, json=room)
        return httpx.Response(404)

    def posted(self, path: str) -> list[dict[str, Any]]:
        return [
            json.loads(r.content)
            for r in self.requests
            if r.method == "POST" and r.url.path == path
        ]


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def page_client(fake_backend):
    app = app_factory(
        UNUSED_REDIS_URL, api_transport=httpx.MockTransport(fake_backend.handle)
    )
    with TestClient(app) as tc:
        yield tc


@pytest.fixture
def login():
    def _login(tc: TestClient, name: str = "Alice", email: str = "alice@example.com"):
        response = tc.post(
            "/api/auth/login",
            data={"name": name, "email": email, "returnTo": "/"},
            follow_redirects=False,
        )
        assert response.status_code == 303
        return response

    return _login
