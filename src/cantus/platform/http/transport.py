"""Where: src/cantus/platform/http/transport.py
What: Transport protocol and the response shape the client consumes.
Why: Keep the client independent from any concrete HTTP library.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


class TransportError(Exception):
    """The request failed before a status line was received."""


class TransportAborted(TransportError):
    """The request was aborted before it completed."""


@dataclass(slots=True, frozen=True)
class TransportResponse:
    """A completed HTTP exchange, whatever its status code."""

    status: int
    status_text: str
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def header(self, name: str) -> str | None:
        """Look up a response header case-insensitively; ``None`` when absent."""

        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


class Transport(Protocol):
    """Asynchronous HTTP capability used by ``CantusClient``.

    Transports holding resources may also implement ``SupportsClose``;
    ``CantusClient.close`` calls it when present.
    """

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: str | None,
    ) -> TransportResponse:
        """Send one request.

        Raises:
            TransportAborted: The request was aborted.
            TransportError: The request failed without a response.
        """

        ...


@runtime_checkable
class SupportsClose(Protocol):
    """Optional capability of a transport that holds connections."""

    def close(self) -> None: ...


__all__ = [
    "SupportsClose",
    "Transport",
    "TransportAborted",
    "TransportError",
    "TransportResponse",
]
