from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    PNTS = "PNTS"
    OTHERS = "OTHERS"

    @property
    def label(self) -> str:
        return GENDER_LABELS[self]


GENDER_LABELS = {
    Gender.MALE: "男性",
    Gender.FEMALE: "女性",
    Gender.PNTS: "答えない",
    Gender.OTHERS: "その他",
}


@dataclass(frozen=True)
class Identity:
    sub: str
    name: str
    email: str

    def as_dict(self) -> dict[str, str]:
        return {"sub": self.sub, "name": self.name, "email": self.email}


@dataclass(frozen=True)
class Room:
    id: int
    room_name: str
    description: str
    date: str
    time: str
    datetime: str
    hosts: list[int] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "room_name": self.room_name,
            "description": self.description,
            "date": self.date,
            "time": self.time,
            "datetime": self.datetime,
            "hosts": list(self.hosts),
        }


@dataclass(frozen=True)
class UserProfile:
    id: int
    sub: str
    username: str
    display_name: str
    email: str
    date_of_birth: str
    gender: Gender

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "display_name": self.display_name,
            "email": self.email,
            "date_of_birth": self.date_of_birth,
            "gender": self.gender.value,
        }
