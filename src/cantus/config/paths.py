"""Shared path utilities for configuration and log locations.

Policy (opt-in only):
- Config: the file named by ``CANTUS_CONFIG``; without it no file is read
  and built-in defaults apply.
- Log file: none unless ``CANTUS_LOG_FILE`` is set.

Nothing is discovered relative to the working directory or the installed
package, so importing the library never reads a host project's files.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

_ENV_CONFIG_FILE: Final[str] = "CANTUS_CONFIG"
_ENV_LOG_FILE: Final[str] = "CANTUS_LOG_FILE"


def _path_from_env(env: Mapping[str, str] | None, env_var: str) -> Path | None:
    mapping = env if env is not None else os.environ
    candidate = (mapping.get(env_var) or "").strip()
    if not candidate:
        return None
    return Path(candidate).expanduser().resolve()


def default_config_path(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the TOML config file requested through ``CANTUS_CONFIG``, if any."""

    return _path_from_env(env, _ENV_CONFIG_FILE)


def default_log_file(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the log file requested through ``CANTUS_LOG_FILE``, if any."""

    return _path_from_env(env, _ENV_LOG_FILE)


__all__ = [
    "default_config_path",
    "default_log_file",
]
