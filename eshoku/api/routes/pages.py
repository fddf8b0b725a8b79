import logging
from functools import partial
from typing import Any

import httpx
from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from eshoku.api.deps import (
    ApiClientDep,
    IdentityProviderDep,
    RoomPageDep,
    SignUpPageDep,
    TemplatesDep,
)
from eshoku.application.guards import (
    AuthError,
    Authenticated,
    Redirect,
    check_authentication,
    login_url,
    require_authentication,
    require_profile,
)
from eshoku.application.room_page import RoomPageController
from eshoku.application.views import PageView
from eshoku.domain.models import Gender, Identity
from eshoku.infrastructure.api_client import ApiClient
from eshoku.infrastructure.identity import SessionIdentityProvider

logger = logging.getLogger(__name__)

pages_router = APIRouter()


def _redirect(location: str) -> RedirectResponse:
    return RedirectResponse(location, status_code=status.HTTP_303_SEE_OTHER)


def _render_room_create(
    templates: Jinja2Templates, request: Request, view: PageView
) -> HTMLResponse:
    return templates.TemplateResponse(request, "room_create.html", {"view": view})


def _render_signup(
    templates: Jinja2Templates,
    request: Request,
    view: PageView,
    identity: Identity | None,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "signup.html",
        {
            "view": view,
            "identity": identity,
            "genders": list(Gender),
            "login_url": login_url(),
        },
    )


async def _gate_room_page(
    request: Request,
    provider: SessionIdentityProvider,
    api: ApiClient,
    page: RoomPageController,
    templates: Jinja2Templates,
) -> Response | dict[str, Any]:
    """Return the registered profile, or the response to send instead."""
    outcome = require_authentication(
        partial(provider.current_identity, request), request.url.path
    )
    if isinstance(outcome, Redirect):
        return _redirect(outcome.location)
    if isinstance(outcome, AuthError):
        return _render_room_create(
            templates, request, page.show(auth_error=outcome.message)
        )
    try:
        profile = await api.get_current_user(cookies=request.cookies)
    except httpx.HTTPError as exc:
        logger.warning("could not load current user: %s", exc)
        return _render_room_create(templates, request, page.show(authenticated=False))
    redirect = require_profile(profile)
    if redirect is not None:
        return _redirect(redirect.location)
    return profile


@pages_router.get("/", response_class=HTMLResponse)
async def home(
    request: Request, provider: IdentityProviderDep, templates: TemplatesDep
):
    outcome = check_authentication(partial(provider.current_identity, request))
    identity = outcome.identity if isinstance(outcome, Authenticated) else None
    return templates.TemplateResponse(request, "home.html", {"identity": identity})


@pages_router.get("/room/create", response_class=HTMLResponse)
async def room_create_page(
    request: Request,
    provider: IdentityProviderDep,
    api: ApiClientDep,
    page: RoomPageDep,
    templates: TemplatesDep,
):
    gate = await _gate_room_page(request, provider, api, page, templates)
    if isinstance(gate, Response):
        return gate
    return _render_room_create(templates, request, page.show())


@pages_router.post("/room/create", response_class=HTMLResponse)
async def room_create_submit(
    request: Request,
    provider: IdentityProviderDep,
    api: ApiClientDep,
    page: RoomPageDep,
    templates: TemplatesDep,
):
    gate = await _gate_room_page(request, provider, api, page, templates)
    if isinstance(gate, Response):
        return gate
    form = await request.form()
    view = await page.submit(form, gate, cookies=request.cookies)
    if view.redirect_to is not None:
        return _redirect(view.redirect_to)
    return _render_room_create(templates, request, view)


@pages_router.get("/room/{room_id}", response_class=HTMLResponse)
async def room_detail_page(
    request: Request, room_id: int, api: ApiClientDep, templates: TemplatesDep
):
    room = await api.get_room(room_id, cookies=request.cookies)
    if room is None:
        return templates.TemplateResponse(
            request,
            "room_detail.html",
            {"room": None, "room_id": room_id},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return templates.TemplateResponse(
        request, "room_detail.html", {"room": room, "room_id": room_id}
    )


@pages_router.get("/signup", response_class=HTMLResponse)
async def signup_page(
    request: Request,
    provider: IdentityProviderDep,
    page: SignUpPageDep,
    templates: TemplatesDep,
):
    outcome = check_authentication(partial(provider.current_identity, request))
    if isinstance(outcome, AuthError):
        return _render_signup(
            templates, request, page.show(None, auth_error=outcome.message), None
        )
    identity = outcome.identity if outcome is not None else None
    return _render_signup(templates, request, page.show(identity), identity)


@pages_router.post("/signup", response_class=HTMLResponse)
async def signup_submit(
    request: Request,
    provider: IdentityProviderDep,
    page: SignUpPageDep,
    templates: TemplatesDep,
):
    outcome = check_authentication(partial(provider.current_identity, request))
    if isinstance(outcome, AuthError):
        return _render_signup(
            templates, request, page.show(None, auth_error=outcome.message), None
        )
    if outcome is None:
        return _render_signup(templates, request, page.show(None), None)
    form = await request.form()
    view = await page.submit(form, outcome.identity, cookies=request.cookies)
    return _render_signup(templates, request, view, outcome.identity)
