from typing import Any, Protocol

from eshoku.domain.models import Room, UserProfile


class RoomStore(Protocol):
    async def next_room_id(self) -> int: ...

    async def save_room(self, room: Room) -> None: ...

    async def get_room(self, room_id: int) -> Room | None: ...


class UserStore(Protocol):
    async def next_user_id(self) -> int: ...

    async def claim_sub(self, sub: str, user_id: int) -> bool: ...

    async def release_sub(self, sub: str, user_id: int) -> None: ...

    async def save_user(self, user: UserProfile) -> None: ...

    async def get_user_id_by_sub(self, sub: str) -> int | None: ...

    async def get_user(self, user_id: int) -> UserProfile | None: ...


class BackendApi(Protocol):
    async def create_room(
        self, payload: dict[str, Any], cookies: dict[str, str] | None = None
    ) -> dict[str, Any]: ...

    async def register_user(
        self, payload: dict[str, Any], cookies: dict[str, str] | None = None
    ) -> dict[str, Any]: ...

    async def get_current_user(
        self, cookies: dict[str, str] | None = None
    ) -> dict[str, Any] | None: ...

    async def get_room(
        self, room_id: int, cookies: dict[str, str] | None = None
    ) -> dict[str, Any] | None: ...
