from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.requests import HTTPConnection
from fastapi.templating import Jinja2Templates

from eshoku.application.errors import SessionError
from eshoku.application.room_page import RoomPageController
from eshoku.application.room_service import RoomService
from eshoku.application.signup_page import SignUpPageController
from eshoku.application.user_service import UserService
from eshoku.config import Config
from eshoku.domain.models import Identity
from eshoku.infrastructure.api_client import ApiClient
from eshoku.infrastructure.identity import SessionIdentityProvider


def get_config(conn: HTTPConnection) -> Config:
    return conn.app.state.config


def get_room_service(conn: HTTPConnection) -> RoomService:
    return conn.app.state.room_service


def get_user_service(conn: HTTPConnection) -> UserService:
    return conn.app.state.user_service


def get_api_client(conn: HTTPConnection) -> ApiClient:
    return conn.app.state.api_client


def get_identity_provider(conn: HTTPConnection) -> SessionIdentityProvider:
    return conn.app.state.identity_provider


def get_templates(conn: HTTPConnection) -> Jinja2Templates:
    return conn.app.state.templates


def get_room_page(
    api: Annotated[ApiClient, Depends(get_api_client)],
    config: Annotated[Config, Depends(get_config)],
) -> RoomPageController:
    return RoomPageController(api, zero_pad_dates=config.forms.zero_pad_dates)


def get_signup_page(
    api: Annotated[ApiClient, Depends(get_api_client)],
    config: Annotated[Config, Depends(get_config)],
) -> SignUpPageController:
    return SignUpPageController(api, zero_pad_dates=config.forms.zero_pad_dates)


def require_identity(
    conn: HTTPConnection,
    provider: Annotated[SessionIdentityProvider, Depends(get_identity_provider)],
) -> Identity:
    try:
        identity = provider.current_identity(conn)
    except SessionError as exc:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, str(exc)) from exc
    if identity is None:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "not authenticated")
    return identity


RoomServiceDep = Annotated[RoomService, Depends(get_room_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ApiClientDep = Annotated[ApiClient, Depends(get_api_client)]
IdentityProviderDep = Annotated[SessionIdentityProvider, Depends(get_identity_provider)]
TemplatesDep = Annotated[Jinja2Templates, Depends(get_templates)]
RoomPageDep = Annotated[RoomPageController, Depends(get_room_page)]
SignUpPageDep = Annotated[SignUpPageController, Depends(get_signup_page)]
IdentityDep = Annotated[Identity, Depends(require_identity)]
