from typing import Any

import httpx

ROOM_CREATE_PATH = "/api/room/create"
USER_PATH = "/api/user"
CURRENT_USER_PATH = "/api/user/me"


def _cookie_header(cookies: dict[str, str] | None) -> dict[str, str]:
    if not cookies:
        return {}
    return {"cookie": "; ".join(f"{name}={value}" for name, value in cookies.items())}


class ApiClient:
    """HTTP client the pages use to reach the JSON endpoints.

    The caller's cookies are forwarded so the backend sees the same session.
    """

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def create_room(
        self, payload: dict[str, Any], cookies: dict[str, str] | None = None
    ) -> dict[str, Any]:
        response = await self._client.post(
            ROOM_CREATE_PATH, json=payload, headers=_cookie_header(cookies)
        )
        response.raise_for_status()
        return response.json()

    async def register_user(
        self, payload: dict[str, Any], cookies: dict[str, str] | None = None
    ) -> dict[str, Any]:
        response = await self._client.post(
            USER_PATH, json=payload, headers=_cookie_header(cookies)
        )
        response.raise_for_status()
        return response.json()

    async def get_current_user(
        self, cookies: dict[str, str] | None = None
    ) -> dict[str, Any] | None:
        response = await self._client.get(
            CURRENT_USER_PATH, headers=_cookie_header(cookies)
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        response.raise_for_status()
        return response.json()

    async def get_room(
        self, room_id: int, cookies: dict[str, str] | None = None
    ) -> dict[str, Any] | None:
        response = await self._client.get(
            f"/api/room/{room_id}", headers=_cookie_header(cookies)
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        response.raise_for_status()
        return response.json()
