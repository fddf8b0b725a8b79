from redis.asyncio.client import Redis

from eshoku.domain.models import Gender, UserProfile
from eshoku.infrastructure.redis_room_store import _await


class RedisUserStore:
    def __init__(self, r: Redis):
        self._r = r

    def _next_id_key(self) -> str:
        return "user:next_id"

    def _user_key(self, user_id: int) -> str:
        return f"user:{user_id}"

    def _sub_key(self, sub: str) -> str:
        return f"user:sub:{sub}"

    async def next_user_id(self) -> int:
        return int(await _await(self._r.incr(self._next_id_key())))

    async def claim_sub(self, sub: str, user_id: int) -> bool:
        return bool(await _await(self._r.setnx(self._sub_key(sub), user_id)))

    async def release_sub(self, sub: str, user_id: int) -> None:
        # only drop the index if it still points at this claim
        key = self._sub_key(sub)
        if await _await(self._r.get(key)) == str(user_id):
            await _await(self._r.delete(key))

    async def save_user(self, user: UserProfile) -> None:
        await _await(
            self._r.hset(
                self._user_key(user.id),
                mapping={
                    "sub": user.sub,
                    "username": user.username,
                    "display_name": user.display_name,
                    "email": user.email,
                    "date_of_birth": user.date_of_birth,
                    "gender": user.gender.value,
                },
            )
        )

    async def get_user_id_by_sub(self, sub: str) -> int | None:
        value = await _await(self._r.get(self._sub_key(sub)))
        if value is None:
            return None
        return int(value)

    async def get_user(self, user_id: int) -> UserProfile | None:
        data = await _await(self._r.hgetall(self._user_key(user_id)))
        if not data:
            return None
        return UserProfile(
            id=user_id,
            sub=data["sub"],
            username=data["username"],
            display_name=data["display_name"],
            email=data["email"],
            date_of_birth=data["date_of_birth"],
            gender=Gender(data["gender"]),
        )
