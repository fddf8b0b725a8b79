from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PageState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    FORM = "form"
    FAILED = "failed"
    LOGIN = "login"


@dataclass
class SubmissionState:
    loading: bool = False
    alert: str | None = None


def select_room_page_state(
    *,
    auth_loading: bool,
    data_loading: bool,
    auth_error: str | None,
    authenticated: bool,
) -> PageState:
    if auth_error is not None:
        return PageState.ERROR
    if auth_loading or data_loading:
        return PageState.LOADING
    if authenticated:
        return PageState.FORM
    return PageState.FAILED


def select_signup_page_state(
    *, auth_loading: bool, auth_error: str | None, authenticated: bool
) -> PageState:
    if auth_error is not None:
        return PageState.ERROR
    if auth_loading:
        return PageState.LOADING
    if authenticated:
        return PageState.FORM
    return PageState.LOGIN


@dataclass
class PageView:
    state: PageState
    values: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    submission: SubmissionState = field(default_factory=SubmissionState)
    error_message: str | None = None
    redirect_to: str | None = None

    @property
    def loading(self) -> bool:
        return self.submission.loading

    @property
    def alert(self) -> str | None:
        return self.submission.alert
