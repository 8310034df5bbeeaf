from typing import Iterator

import pytest
from pydantic import ValidationError
from ticket_service.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_TITLE", "LOG_LEVEL", "AUDIT_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    assert get_settings() == Settings()


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_TITLE", "Box Office")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("AUDIT_ENABLED", "0")
    settings = get_settings()
    assert settings.app_title == "Box Office"
    assert settings.log_level == "DEBUG"
    assert settings.audit_enabled is False


def test_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        get_settings()
