import logging
from typing import Any, Mapping

import httpx

from eshoku.application.forms import RoomForm, validate_form
from eshoku.application.ports import BackendApi
from eshoku.application.views import (
    PageState,
    PageView,
    SubmissionState,
    select_room_page_state,
)
from eshoku.domain.dates import combine_datetime, format_form_date

logger = logging.getLogger(__name__)

SUBMIT_FAILED_MESSAGE = "データの送信に失敗しました"
LOAD_FAILED_MESSAGE = "データの取得に失敗しました"

ROOM_FIELDS = ("room_name", "description", "date", "time")


def build_room_payload(
    form: RoomForm, host_id: int, zero_pad: bool = False
) -> dict[str, Any]:
    date_value = format_form_date(form.date, zero_pad=zero_pad)
    return {
        "room_name": form.room_name,
        "description": form.description,
        "date": date_value,
        "time": form.time,
        "datetime": combine_datetime(date_value, form.time),
        "hosts": [host_id],
    }


def room_detail_path(room_id: Any) -> str:
    return f"/room/{room_id}"


class RoomPageController:
    def __init__(self, api: BackendApi, zero_pad_dates: bool = False):
        self._api = api
        self._zero_pad_dates = zero_pad_dates

    def show(
        self, authenticated: bool = True, auth_error: str | None = None
    ) -> PageView:
        state = select_room_page_state(
            auth_loading=False,
            data_loading=False,
            auth_error=auth_error,
            authenticated=authenticated,
        )
        if state is PageState.FAILED:
            return PageView(state=state, error_message=LOAD_FAILED_MESSAGE)
        return PageView(state=state, error_message=auth_error)

    async def submit(
        self,
        data: Mapping[str, Any],
        current_user: Mapping[str, Any] | None,
        cookies: dict[str, str] | None = None,
    ) -> PageView:
        values = {name: data.get(name, "") for name in ROOM_FIELDS}
        form, errors = validate_form(RoomForm, values)
        if form is None:
            return PageView(state=PageState.FORM, values=values, errors=errors)

        submission = SubmissionState(loading=True)
        view = PageView(state=PageState.LOADING, values=values, submission=submission)
        try:
            if current_user is None:
                logger.warning("room submission without a registered profile")
                return view

            payload = build_room_payload(
                form, current_user["id"], zero_pad=self._zero_pad_dates
            )
            try:
                created = await self._api.create_room(payload, cookies=cookies)
                room_id = created["id"]
            except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
                logger.warning("room creation failed: %s", exc)
                submission.alert = SUBMIT_FAILED_MESSAGE
                return view

            logger.info("room %s created by user %s", room_id, current_user["id"])
            view.redirect_to = room_detail_path(room_id)
            return view
        finally:
            submission.loading = False
            view.state = select_room_page_state(
                auth_loading=False,
                data_loading=submission.loading,
                auth_error=None,
                authenticated=True,
            )
