from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field, model_validator

from eshoku.api.deps import IdentityDep, RoomServiceDep, UserServiceDep
from eshoku.application.errors import RoomNotFoundError, UserNotFoundError
from eshoku.domain import dates
from eshoku.domain.models import Room

rooms_router = APIRouter(prefix="/api/room")


class RoomIn(BaseModel):
    room_name: str = Field(min_length=1, max_length=64)
    description: str = Field(min_length=1, max_length=256)
    date: str
    time: str
    datetime: str
    hosts: list[int] = Field(min_length=1)

    @model_validator(mode="after")
    def check_schedule(self) -> "RoomIn":
        dates.parse_room_date(self.date)
        dates.parse_room_datetime(self.datetime)
        if self.datetime != dates.combine_datetime(self.date, self.time):
            raise ValueError("datetime must combine date and time")
        return self


class RoomOut(BaseModel):
    id: int
    room_name: str
    description: str
    date: str
    time: str
    datetime: str
    hosts: list[int]

    @classmethod
    def from_room(cls, room: Room) -> "RoomOut":
        return cls(**room.as_dict())


@rooms_router.post("/create", response_model=RoomOut)
async def create_room(
    room_in: RoomIn,
    identity: IdentityDep,
    room_service: RoomServiceDep,
    user_service: UserServiceDep,
):
    try:
        creator = await user_service.get_by_sub(identity.sub)
    except UserNotFoundError as exc:
        raise HTTPException(status.HTTP_403_FORBIDDEN, str(exc)) from exc
    if creator.id not in room_in.hosts:
        raise HTTPException(
            status.HTTP_403_FORBIDDEN, "the creating user must be one of the hosts"
        )

    room = await room_service.create_room(
        room_name=room_in.room_name,
        description=room_in.description,
        date=room_in.date,
        time=room_in.time,
        datetime=room_in.datetime,
        hosts=room_in.hosts,
    )
    return RoomOut.from_room(room)


@rooms_router.get("/{room_id}", response_model=RoomOut)
async def get_room(room_id: int, room_service: RoomServiceDep):
    try:
        room = await room_service.get_room(room_id)
    except RoomNotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(exc)) from exc
    return RoomOut.from_room(room)
