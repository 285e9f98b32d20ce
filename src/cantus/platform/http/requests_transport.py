"""Where: src/cantus/platform/http/requests_transport.py
What: Default ``Transport`` backed by a ``requests`` session.
Why: Offer a working transport out of the box without blocking the event loop.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping
from functools import partial
from typing import cast

import requests

from cantus.config.settings import REQUEST_TIMEOUT
from cantus.platform.logging import logger

from .transport import TransportError, TransportResponse
from .user_agent import resolve_user_agent


class RequestsTransport:
    """Send requests with ``requests`` in the event loop's default executor."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float = REQUEST_TIMEOUT,
        user_agent: str | None = None,
    ) -> None:
        self.session: requests.Session = session or requests.Session()
        self._owns_session: bool = session is None
        self.timeout: float = timeout
        self.user_agent: str = user_agent or resolve_user_agent()

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: str | None,
    ) -> TransportResponse:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, partial(self.send, method, url, headers=headers, body=body)
        )

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: str | None,
    ) -> TransportResponse:
        """Perform the request synchronously."""

        request_headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if body is not None:
            request_headers["Content-Type"] = "application/json"
        request_headers.update(headers)

        try:
            response = self.session.request(
                method,
                url,
                headers=request_headers,
                data=body.encode("utf-8") if body is not None else None,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Cantus request error (%s %s): %s", method, url, exc)
            raise TransportError(str(exc)) from exc

        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        return TransportResponse(
            status=int(response.status_code),
            status_text=response.reason or "",
            body=response.text,
            headers={str(key): str(value) for key, value in header_items},
        )

    def close(self) -> None:
        """Close the session if this transport created it."""

        if self._owns_session:
            self.session.close()


__all__ = ["RequestsTransport"]
