"""HTTP transport package.

Provides the ``Transport`` protocol consumed by ``CantusClient`` and a
default implementation built on ``requests``.
"""

from .requests_transport import RequestsTransport
from .transport import (
    SupportsClose,
    Transport,
    TransportAborted,
    TransportError,
    TransportResponse,
)
from .user_agent import format_user_agent, resolve_user_agent

__all__ = [
    "RequestsTransport",
    "SupportsClose",
    "Transport",
    "TransportAborted",
    "TransportError",
    "TransportResponse",
    "format_user_agent",
    "resolve_user_agent",
]
