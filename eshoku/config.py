from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


def _default_config_path() -> Path:
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _require_int(value: Any, default: int, name: str) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer") from exc


def _require_float(value: Any, default: float, name: str) -> float:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number") from exc


def _require_str(value: Any, default: str | None, name: str) -> str | None:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    return value


def _require_bool(value: Any, default: bool, name: str) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean")
    return value


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be a mapping")
    return value


DEFAULT_SECRET_KEY = "dev-secret-change-me"


@dataclass(frozen=True)
class SessionSettings:
    secret_key: str = DEFAULT_SECRET_KEY
    cookie_name: str = "eshoku_session"
    max_age: int = 14 * 24 * 60 * 60


@dataclass(frozen=True)
class ApiSettings:
    # None means the pages call this same application in-process.
    base_url: str | None = None
    timeout: float = 10.0


@dataclass(frozen=True)
class FormSettings:
    zero_pad_dates: bool = False


@dataclass(frozen=True)
class Config:
    log_level: str = "INFO"
    session: SessionSettings = field(default_factory=SessionSettings)
    api: ApiSettings = field(default_factory=ApiSettings)
    forms: FormSettings = field(default_factory=FormSettings)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        config_path = Path(path) if path else _default_config_path()
        if not config_path.exists():
            return cls()
        raw = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(raw, dict):
            raise ValueError("config.yaml must contain a mapping")
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        defaults = cls()
        session_data = _section(data, "session")
        api_data = _section(data, "api")
        forms_data = _section(data, "forms")

        session = SessionSettings(
            secret_key=_require_str(
                session_data.get("secret_key"),
                defaults.session.secret_key,
                "session.secret_key",
            ),
            cookie_name=_require_str(
                session_data.get("cookie_name"),
                defaults.session.cookie_name,
                "session.cookie_name",
            ),
            max_age=_require_int(
                session_data.get("max_age"),
                defaults.session.max_age,
                "session.max_age",
            ),
        )
        api = ApiSettings(
            base_url=_require_str(
                api_data.get("base_url"), defaults.api.base_url, "api.base_url"
            ),
            timeout=_require_float(
                api_data.get("timeout"), defaults.api.timeout, "api.timeout"
            ),
        )
        if api.timeout <= 0:
            raise ValueError("api.timeout must be positive")
        forms = FormSettings(
            zero_pad_dates=_require_bool(
                forms_data.get("zero_pad_dates"),
                defaults.forms.zero_pad_dates,
                "forms.zero_pad_dates",
            ),
        )
        return cls(
            log_level=_require_str(
                data.get("log_level"), defaults.log_level, "log_level"
            ),
            session=session,
            api=api,
            forms=forms,
        )

    def with_secret_key(self, secret_key: str | None) -> "Config":
        if not secret_key:
            return self
        session = SessionSettings(
            secret_key=secret_key,
            cookie_name=self.session.cookie_name,
            max_age=self.session.max_age,
        )
        return Config(
            log_level=self.log_level, session=session, api=self.api, forms=self.forms
        )
