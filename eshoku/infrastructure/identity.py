from starlette.requests import HTTPConnection

from eshoku.application.errors import SessionError
from eshoku.domain.models import Identity

SESSION_KEY = "identity"


class SessionIdentityProvider:
    """Keeps the signed-in identity in the Starlette session cookie."""

    def current_identity(self, conn: HTTPConnection) -> Identity | None:
        raw = conn.session.get(SESSION_KEY)
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise SessionError("session identity is malformed")
        try:
            return Identity(sub=raw["sub"], name=raw["name"], email=raw["email"])
        except KeyError as exc:
            raise SessionError(f"session identity is missing {exc.args[0]}") from exc

    def login(self, conn: HTTPConnection, identity: Identity) -> None:
        conn.session[SESSION_KEY] = identity.as_dict()

    def logout(self, conn: HTTPConnection) -> None:
        conn.session.pop(SESSION_KEY, None)
