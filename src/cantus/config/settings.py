"""Where: src/cantus/config/settings.py
What: Derived runtime settings sourced from configuration and environment.
Why: Expose validated constants to the client and transport without file I/O.
"""

from __future__ import annotations

import os

from cantus.config.config import DEFAULT_REQUEST_TIMEOUT, config as app_config

# Server -----------------------------------------------------------------------

# Environment wins so one config file can serve several deployments.
CANTUS_SERVER_URL: str | None = (
    os.getenv("CANTUS_SERVER_URL", "").strip() or app_config.server_url or None
)


# Application identity ------------------------------------------------------------

# User-Agent form: "AppName/AppVersion (contact-url-or-email)"
APP_NAME: str = app_config.app_name or "cantus-client"
APP_VERSION: str = app_config.app_version or "0.1.0"
CONTACT: str = app_config.contact or ""


# Transport -----------------------------------------------------------------------

_timeout = app_config.request_timeout
REQUEST_TIMEOUT: float = (
    float(_timeout)
    if isinstance(_timeout, (int, float)) and not isinstance(_timeout, bool) and _timeout > 0
    else DEFAULT_REQUEST_TIMEOUT
)


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "CANTUS_SERVER_URL",
    "CONTACT",
    "REQUEST_TIMEOUT",
]
