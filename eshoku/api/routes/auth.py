from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from eshoku.api.deps import (
    IdentityDep,
    IdentityProviderDep,
    TemplatesDep,
    UserServiceDep,
)
from eshoku.domain.models import Identity

auth_router = APIRouter(prefix="/api/auth")


def safe_return_to(value: str | None) -> str:
    # Only same-site paths are allowed as redirect targets.
    if not value or not value.startswith("/") or value.startswith("//"):
        return "/"
    return value


@auth_router.get("/login", response_class=HTMLResponse)
async def login_form(
    request: Request, templates: TemplatesDep, returnTo: str | None = None
):
    return templates.TemplateResponse(
        request,
        "login.html",
        {"return_to": safe_return_to(returnTo), "error": None},
    )


@auth_router.post("/login")
async def login(
    request: Request,
    provider: IdentityProviderDep,
    templates: TemplatesDep,
    name: str = Form(""),
    email: str = Form(""),
    returnTo: str = Form("/"),
):
    name = name.strip()
    email = email.strip().lower()
    return_to = safe_return_to(returnTo)
    if not name or "@" not in email:
        return templates.TemplateResponse(
            request,
            "login.html",
            {"return_to": return_to, "error": "名前とメールアドレスを入力してください"},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    provider.login(request, Identity(sub=f"local|{email}", name=name, email=email))
    return RedirectResponse(return_to, status_code=status.HTTP_303_SEE_OTHER)


@auth_router.get("/logout")
async def logout(request: Request, provider: IdentityProviderDep):
    provider.logout(request)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@auth_router.get("/me")
async def me(identity: IdentityDep, user_service: UserServiceDep):
    return {
        **identity.as_dict(),
        "registered": await user_service.exists(identity.sub),
    }
