"""Tests for settings module behavior."""

from __future__ import annotations

import importlib
from pathlib import Path
from types import ModuleType

import pytest


def _reload_settings() -> ModuleType:
    import cantus.config.config as config_module
    import cantus.config.settings as settings

    config_module.config = config_module.Config.load()
    return importlib.reload(settings)


def test_defaults_without_config(config_runtime_env: Path) -> None:
    _ = config_runtime_env

    settings = _reload_settings()

    assert settings.CANTUS_SERVER_URL is None
    assert settings.APP_NAME == "cantus-client"
    assert settings.REQUEST_TIMEOUT == 15.0


def test_settings_follow_config(config_runtime_env: Path) -> None:
    _ = config_runtime_env.write_text(
        'server_url = "https://cantus.example/"\n'
        'app_name = "custom-app"\n'
        'app_version = "9.9.9"\n'
        'contact = "mailto:config@example.com"\n'
        "request_timeout = -1\n",
        encoding="utf-8",
    )

    settings = _reload_settings()

    assert settings.CANTUS_SERVER_URL == "https://cantus.example/"
    assert settings.APP_NAME == "custom-app"
    assert settings.APP_VERSION == "9.9.9"
    assert settings.CONTACT == "mailto:config@example.com"
    assert settings.REQUEST_TIMEOUT == 15.0


def test_environment_server_url_wins(
    config_runtime_env: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _ = config_runtime_env.write_text('server_url = "https://cantus.example/"\n', encoding="utf-8")
    monkeypatch.setenv("CANTUS_SERVER_URL", "https://env.example/")

    settings = _reload_settings()

    assert settings.CANTUS_SERVER_URL == "https://env.example/"
