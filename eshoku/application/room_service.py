import logging

from eshoku.application.errors import RoomNotFoundError
from eshoku.application.ports import RoomStore
from eshoku.domain.models import Room

logger = logging.getLogger(__name__)


class RoomService:
    def __init__(self, store: RoomStore):
        self._store = store

    async def create_room(
        self,
        room_name: str,
        description: str,
        date: str,
        time: str,
        datetime: str,
        hosts: list[int],
    ) -> Room:
        if not hosts:
            raise ValueError("a room needs at least one host")
        room_id = await self._store.next_room_id()
        room = Room(
            id=room_id,
            room_name=room_name,
            description=description,
            date=date,
            time=time,
            datetime=datetime,
            hosts=list(hosts),
        )
        await self._store.save_room(room)
        logger.info("created room %s hosted by %s", room_id, hosts)
        return room

    async def get_room(self, room_id: int) -> Room:
        room = await self._store.get_room(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room
