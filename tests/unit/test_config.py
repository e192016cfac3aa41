"""Unit tests for environment-driven settings."""

from __future__ import annotations

import pytest

from items_api.core.config import get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ITEMS_API_LOG_LEVEL",
        "ITEMS_API_DEFAULT_LIMIT",
        "ITEMS_API_MAX_LIMIT",
        "ITEMS_API_EXPOSE_INTERNAL_ERRORS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.log_level == "INFO"
    assert settings.default_list_limit == 10
    assert settings.max_list_limit == 100
    assert settings.expose_internal_errors is True


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ITEMS_API_LOG_LEVEL", "debug")
    monkeypatch.setenv("ITEMS_API_DEFAULT_LIMIT", "2")
    monkeypatch.setenv("ITEMS_API_EXPOSE_INTERNAL_ERRORS", "no")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.default_list_limit == 2
    assert settings.expose_internal_errors is False
    assert settings.safe_for_logging()["default_list_limit"] == 2


def test_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ITEMS_API_EXPOSE_INTERNAL_ERRORS", "maybe")
    with pytest.raises(ValueError, match="ITEMS_API_EXPOSE_INTERNAL_ERRORS"):
        get_settings()

    monkeypatch.setenv("ITEMS_API_EXPOSE_INTERNAL_ERRORS", "true")
    monkeypatch.setenv("ITEMS_API_DEFAULT_LIMIT", "500")
    get_settings.cache_clear()
    with pytest.raises(ValueError, match="ITEMS_API_DEFAULT_LIMIT"):
        get_settings()
