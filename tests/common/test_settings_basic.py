import pytest

from mediameta.common import settings as s
from mediameta.common.localization import FormatContext
from mediameta.common.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()


def test_defaults(monkeypatch):
    for var in ("APP_NAME", "APP_ENV", "TZ"):
        monkeypatch.delenv(var, raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.app_name == "mediameta"
    assert cfg.tz == "UTC"
    assert cfg.display.thousands_sep == ","
    assert cfg.display.date_parse_format == "%Y-%m-%dT%H:%M:%S.%f%z"
    assert cfg.api.prefix == "/api"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("TZ", "Europe/Paris")
    monkeypatch.setenv("DISPLAY__DECIMAL_SEP", ",")
    monkeypatch.setenv("DISPLAY__THOUSANDS_SEP", ".")

    cfg = get_settings()
    assert cfg.app_env == "test"
    assert cfg.tz == "Europe/Paris"
    assert cfg.display.decimal_sep == ","

    ctx = FormatContext.from_settings(cfg)
    assert ctx.format_number(1234.5) == "1.234,5"
    assert str(ctx.tz) == "Europe/Paris"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_cors_lists_accept_csv():
    cfg = Settings(_env_file=None, api={"cors_allow_origins": "http://a, http://b"})
    assert cfg.api.cors_allow_origins == ["http://a", "http://b"]
