"""Configuration management for the Cantus client."""

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, ClassVar

from cantus.config.paths import default_config_path
from cantus.platform.logging import logger

DEFAULT_REQUEST_TIMEOUT: float = 15.0


@dataclass
class Config:
    """Client configuration."""

    # Root URL of the Cantus API server (serves the discovery directory)
    server_url: str | None = None

    # Identity reported in the User-Agent header
    app_name: str | None = None
    app_version: str | None = None
    contact: str | None = None

    # Seconds before an outbound request gives up
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> "Config":
        """Build a config from parsed TOML, ignoring unknown keys."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        kwargs = {key: value for key, value in values.items() if key in known}
        # Empty strings in TOML mean "not set"
        for key, value in list(kwargs.items()):
            if isinstance(value, str) and not value.strip():
                kwargs[key] = None
        if kwargs.get("request_timeout") is None:
            kwargs.pop("request_timeout", None)
        return cls(**kwargs)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit TOML file; defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, or defaults when no file is
            configured or the file is missing.
        """
        if cls._instance is not None and config_file is None:
            return cls._instance

        target = config_file if config_file is not None else default_config_path()

        try:
            if target is None:
                instance = cls()
                logger.debug("CANTUS_CONFIG not set; using defaults")
            elif target.exists():
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
                instance = cls.from_mapping(config_dict)
                logger.debug("Configuration loaded from %s", target)
            else:
                instance = cls()
                logger.debug("No configuration at %s; using defaults", target)
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = target
        return instance


# Global configuration instance
config = Config.load()
