import logging

import pytest

from eshoku.config import Config
from eshoku.main import app_factory


def test_missing_file_uses_defaults(tmp_path):
    config = Config.load(tmp_path / "absent.yaml")

    assert config == Config()
    assert config.api.base_url is None
    assert config.forms.zero_pad_dates is False


def test_load_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "\n".join(
            [
                "log_level: DEBUG",
                "session:",
                "  secret_key: abc",
                "  max_age: '60'",
                "api:",
                "  base_url: http://backend:8000",
                "  timeout: 2.5",
                "forms:",
                "  zero_pad_dates: true",
            ]
        )
    )

    config = Config.load(path)

    assert config.log_level == "DEBUG"
    assert config.session.secret_key == "abc"
    assert config.session.max_age == 60
    assert config.session.cookie_name == "eshoku_session"
    assert config.api.base_url == "http://backend:8000"
    assert config.api.timeout == 2.5
    assert config.forms.zero_pad_dates is True


@pytest.mark.parametrize(
    "data",
    [
        {"session": {"max_age": True}},
        {"session": "nope"},
        {"api": {"timeout": 0}},
        {"forms": {"zero_pad_dates": "yes"}},
        {"log_level": 10},
    ],
)
def test_invalid_values_raise(data):
    with pytest.raises(ValueError):
        Config.from_dict(data)


def test_non_mapping_file_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ValueError):
        Config.load(path)


def test_secret_key_override():
    config = Config().with_secret_key("from-env")

    assert config.session.secret_key == "from-env"
    assert Config().with_secret_key(None) == Config()


def test_default_secret_key_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="eshoku.main"):
        app_factory("redis://localhost:6399/0", config=Config())

    assert any(
        record.levelno == logging.WARNING and "secret_key" in record.getMessage()
        for record in caplog.records
    )


def test_configured_secret_key_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="eshoku.main"):
        app_factory("redis://localhost:6399/0", config=Config().with_secret_key("x"))

    assert not [r for r in caplog.records if "secret_key" in r.getMessage()]
