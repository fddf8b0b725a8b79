from dataclasses import dataclass
from typing import Any, Callable, Union
from urllib.parse import urlencode

from eshoku.application.errors import SessionError
from eshoku.domain.models import Identity

LOGIN_PATH = "/api/auth/login"
SIGNUP_PATH = "/signup"


@dataclass(frozen=True)
class Authenticated:
    identity: Identity


@dataclass(frozen=True)
class Redirect:
    location: str


@dataclass(frozen=True)
class AuthError:
    message: str


AuthResult = Union[Authenticated, Redirect, AuthError]


def login_url(return_to: str | None = None) -> str:
    if not return_to:
        return LOGIN_PATH
    return f"{LOGIN_PATH}?{urlencode({'returnTo': return_to})}"


def check_authentication(
    lookup: Callable[[], Identity | None],
) -> Authenticated | AuthError | None:
    """Presence check: None means the visitor is anonymous."""
    try:
        identity = lookup()
    except SessionError as exc:
        return AuthError(str(exc))
    if identity is None:
        return None
    return Authenticated(identity)


def require_authentication(
    lookup: Callable[[], Identity | None], return_to: str
) -> AuthResult:
    result = check_authentication(lookup)
    if result is None:
        return Redirect(login_url(return_to))
    return result


def require_profile(profile: dict[str, Any] | None) -> Redirect | None:
    if profile is None:
        return Redirect(SIGNUP_PATH)
    return None
