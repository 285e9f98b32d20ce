"""Recording transport whose responses tests control."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from cantus.platform.http.transport import TransportAborted, TransportError, TransportResponse


@dataclass
class RecordedCall:
    """One request seen by ``FakeTransport``; settle it to complete the request."""

    method: str
    url: str
    headers: dict[str, str]
    body: str | None
    outcome: asyncio.Future[TransportResponse] = field(repr=False)

    def respond(
        self,
        status: int = 200,
        body: Any = "",
        *,
        status_text: str = "OK",
        headers: Mapping[str, str] | None = None,
    ) -> None:
        text = body if isinstance(body, str) else json.dumps(body)
        self.outcome.set_result(
            TransportResponse(
                status=status,
                status_text=status_text,
                body=text,
                headers=dict(headers or {}),
            )
        )

    def error(self) -> None:
        self.outcome.set_exception(TransportError("connection refused"))

    def abort(self) -> None:
        self.outcome.set_exception(TransportAborted("aborted"))

    def fail(self, exc: Exception) -> None:
        self.outcome.set_exception(exc)


class FakeTransport:
    """Transport that parks every request until the test settles it."""

    def __init__(self) -> None:
        self.calls: list[RecordedCall] = []

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: str | None,
    ) -> TransportResponse:
        call = RecordedCall(
            method=method,
            url=url,
            headers=dict(headers),
            body=body,
            outcome=asyncio.get_running_loop().create_future(),
        )
        self.calls.append(call)
        return await call.outcome


class ClosingTransport(FakeTransport):
    """``FakeTransport`` that also supports ``close``."""

    def __init__(self) -> None:
        super().__init__()
        self.closed: int = 0

    def close(self) -> None:
        self.closed += 1


async def drain() -> None:
    """Let every runnable task advance until it blocks again."""

    for _ in range(20):
        await asyncio.sleep(0)
