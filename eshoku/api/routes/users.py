from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field, field_validator

from eshoku.api.deps import IdentityDep, UserServiceDep
from eshoku.application.errors import UserAlreadyExistsError, UserNotFoundError
from eshoku.domain import dates
from eshoku.domain.models import Gender, UserProfile

users_router = APIRouter(prefix="/api/user")


class UserIn(BaseModel):
    username: str = Field(min_length=2, max_length=128)
    display_name: str = Field(min_length=1)
    date_of_birth: str
    gender: Gender

    @field_validator("date_of_birth")
    @classmethod
    def check_date_of_birth(cls, value: str) -> str:
        dates.parse_room_date(value)
        return value


class UserOut(BaseModel):
    id: int
    username: str
    display_name: str
    email: str
    date_of_birth: str
    gender: Gender

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "UserOut":
        return cls(**profile.as_dict())


@users_router.post("", response_model=UserOut)
async def register_user(
    user_in: UserIn, identity: IdentityDep, user_service: UserServiceDep
):
    try:
        profile = await user_service.register(
            identity,
            username=user_in.username,
            display_name=user_in.display_name,
            date_of_birth=user_in.date_of_birth,
            gender=user_in.gender,
        )
    except UserAlreadyExistsError as exc:
        raise HTTPException(status.HTTP_409_CONFLICT, str(exc)) from exc
    return UserOut.from_profile(profile)


@users_router.get("/me", response_model=UserOut)
async def current_user(identity: IdentityDep, user_service: UserServiceDep):
    try:
        profile = await user_service.get_by_sub(identity.sub)
    except UserNotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(exc)) from exc
    return UserOut.from_profile(profile)
