import pytest

from eshoku.application.forms import (
    INVALID_FIELD_MESSAGE,
    RoomForm,
    SignUpForm,
    validate_form,
)
from eshoku.domain.models import Gender

VALID_ROOM = {
    "room_name": "サークル飲み会",
    "description": "駅前に集合",
    "date": "2024-01-05",
    "time": "18:30",
}


def test_valid_room_form_parses():
    form, errors = validate_form(RoomForm, VALID_ROOM)

    assert errors == {}
    assert form is not None
    assert form.room_name == "サークル飲み会"


@pytest.mark.parametrize("room_name", ["", "x" * 65])
def test_room_name_empty_or_too_long_is_rejected(room_name):
    form, errors = validate_form(RoomForm, {**VALID_ROOM, "room_name": room_name})

    assert form is None
    assert errors == {"room_name": INVALID_FIELD_MESSAGE}


def test_room_name_at_limit_is_accepted():
    form, errors = validate_form(RoomForm, {**VALID_ROOM, "room_name": "x" * 64})

    assert form is not None
    assert errors == {}


def test_every_failing_room_field_gets_the_same_message():
    form, errors = validate_form(
        RoomForm,
        {"room_name": "ok", "description": "d" * 257, "date": "", "time": "late"},
    )

    assert form is None
    assert errors == {
        "description": INVALID_FIELD_MESSAGE,
        "date": INVALID_FIELD_MESSAGE,
        "time": INVALID_FIELD_MESSAGE,
    }


def test_missing_fields_are_reported():
    form, errors = validate_form(RoomForm, {})

    assert form is None
    assert set(errors) == {"room_name", "description", "date", "time"}


def test_signup_form_parses_gender():
    form, errors = validate_form(
        SignUpForm,
        {"username": "alice", "date_of_birth": "2000-12-31", "gender": "PNTS"},
    )

    assert errors == {}
    assert form.gender is Gender.PNTS
    assert form.gender.label == "答えない"


def test_signup_form_rejects_short_username_and_placeholder_gender():
    form, errors = validate_form(
        SignUpForm,
        {"username": "a", "date_of_birth": "2000-12-31", "gender": "選択してください…"},
    )

    assert form is None
    assert errors == {
        "username": INVALID_FIELD_MESSAGE,
        "gender": INVALID_FIELD_MESSAGE,
    }
