import logging
from typing import Any, Mapping

from eshoku.application.forms import SignUpForm, validate_form
from eshoku.application.ports import BackendApi
from eshoku.application.views import PageState, PageView, select_signup_page_state
from eshoku.domain.dates import format_form_date
from eshoku.domain.models import Identity

logger = logging.getLogger(__name__)

SIGNUP_FIELDS = ("username", "date_of_birth", "gender")


def build_signup_payload(
    form: SignUpForm, identity: Identity, zero_pad: bool = False
) -> dict[str, Any]:
    return {
        "username": form.username,
        "display_name": identity.name,
        "date_of_birth": format_form_date(form.date_of_birth, zero_pad=zero_pad),
        "gender": form.gender.value,
    }


class SignUpPageController:
    def __init__(self, api: BackendApi, zero_pad_dates: bool = False):
        self._api = api
        self._zero_pad_dates = zero_pad_dates

    def show(
        self, identity: Identity | None, auth_error: str | None = None
    ) -> PageView:
        state = select_signup_page_state(
            auth_loading=False,
            auth_error=auth_error,
            authenticated=identity is not None,
        )
        return PageView(state=state, error_message=auth_error)

    async def submit(
        self,
        data: Mapping[str, Any],
        identity: Identity,
        cookies: dict[str, str] | None = None,
    ) -> PageView:
        """Post the registration; the response is only logged.

        Request failures are not caught here.
        """
        values = {name: data.get(name, "") for name in SIGNUP_FIELDS}
        form, errors = validate_form(SignUpForm, values)
        if form is None:
            return PageView(state=PageState.FORM, values=values, errors=errors)

        payload = build_signup_payload(form, identity, zero_pad=self._zero_pad_dates)
        body = await self._api.register_user(payload, cookies=cookies)
        logger.info("user registration response: %s", body)
        return PageView(state=PageState.FORM, values=values)
