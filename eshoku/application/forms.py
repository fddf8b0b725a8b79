from datetime import date
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from eshoku.domain.models import Gender

INVALID_FIELD_MESSAGE = "正しく入力してください"

ROOM_NAME_MAX_LENGTH = 64
DESCRIPTION_MAX_LENGTH = 256
USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 128

FormT = TypeVar("FormT", bound=BaseModel)


def _check_date_input(value: str) -> str:
    date.fromisoformat(value)
    return value


class RoomForm(BaseModel):
    room_name: str = Field(min_length=1, max_length=ROOM_NAME_MAX_LENGTH)
    description: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    date: str = Field(min_length=1)
    time: str = Field(pattern=r"^\d{2}:\d{2}(:\d{2})?$")

    validate_date = field_validator("date")(_check_date_input)


class SignUpForm(BaseModel):
    username: str = Field(
        min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH
    )
    date_of_birth: str = Field(min_length=1)
    gender: Gender
    # Always replaced with the session name before submission.
    display_name: str | None = None

    validate_date_of_birth = field_validator("date_of_birth")(_check_date_input)


def validate_form(
    model: type[FormT], data: Mapping[str, Any]
) -> tuple[FormT | None, dict[str, str]]:
    """Validate submitted form fields.

    Returns the parsed form and an empty error mapping, or None and a mapping
    of field name to the generic message for each field that failed.
    """
    try:
        return model.model_validate(dict(data)), {}
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            if error["loc"]:
                errors[str(error["loc"][0])] = INVALID_FIELD_MESSAGE
        return None, errors
