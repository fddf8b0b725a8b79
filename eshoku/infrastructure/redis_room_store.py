import inspect
from typing import Awaitable, TypeVar, cast

from redis.asyncio.client import Redis

from eshoku.domain.models import Room

T = TypeVar("T")

ROOM_FIELDS = ("room_name", "description", "date", "time", "datetime")


async def _await(x: T | Awaitable[T]) -> T:
    if inspect.isawaitable(x):
        return await cast(Awaitable[T], x)
    return x


class RedisRoomStore:
    def __init__(self, r: Redis):
        self._r = r

    def _next_id_key(self) -> str:
        return "room:next_id"

    def _room_key(self, room_id: int) -> str:
        return f"room:{room_id}"

    def _room_hosts_key(self, room_id: int) -> str:
        return f"room:{room_id}:hosts"

    async def next_room_id(self) -> int:
        return int(await _await(self._r.incr(self._next_id_key())))

    async def save_room(self, room: Room) -> None:
        mapping = {name: getattr(room, name) for name in ROOM_FIELDS}
        hosts_key = self._room_hosts_key(room.id)
        async with self._r.pipeline(transaction=True) as pipe:
            pipe.hset(self._room_key(room.id), mapping=mapping)
            pipe.delete(hosts_key)
            if room.hosts:
                pipe.rpush(hosts_key, *(str(host) for host in room.hosts))
            await pipe.execute()

    async def get_hosts(self, room_id: int) -> list[int]:
        raw = await _await(self._r.lrange(self._room_hosts_key(room_id), 0, -1))
        return [int(host) for host in raw]

    async def get_room(self, room_id: int) -> Room | None:
        data = await _await(self._r.hgetall(self._room_key(room_id)))
        if not data:
            return None
        hosts = await self.get_hosts(room_id)
        return Room(
            id=room_id,
            room_name=data["room_name"],
            description=data["description"],
            date=data["date"],
            time=data["time"],
            datetime=data["datetime"],
            hosts=hosts,
        )
