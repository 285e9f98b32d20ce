"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``CANTUS_CONFIG`` at a file inside a temporary directory."""

    target = tmp_path / "config" / "config.toml"
    target.parent.mkdir(parents=True)
    monkeypatch.setenv("CANTUS_CONFIG", str(target))
    monkeypatch.delenv("CANTUS_SERVER_URL", raising=False)
    return target


@pytest.fixture
def config_runtime_env(config_file: Path) -> Iterator[Path]:
    """Reset configuration singletons around a test run."""

    import cantus.config.config as config_module

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = config_module.Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    original_config = config_module.config

    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]

    try:
        yield config_file
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
        config_module.config = original_config
