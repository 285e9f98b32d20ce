"""Where: src/cantus/client.py
What: ``CantusClient`` facade gating ``get`` and ``search`` on URL discovery.
Why: Every request URL comes from the server's root directory, so no call may
     be dispatched before that directory has loaded.

Setting the server URL fetches the root document and replaces ``ready`` with
a fresh future. Each ``get``/``search`` call returns its own future at once,
waits for ``ready``, resolves its URL and settles with the normalized result.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Coroutine
from typing import Any, Final

from cantus.config.settings import CANTUS_SERVER_URL
from cantus.errors import (
    UNRECOVERABLE_MESSAGE,
    CantusError,
    DiscoveryError,
    HateoasError,
    QueryError,
    RequestFailed,
)
from cantus.features.hateoas import DiscoveryDirectory, find_url_from_type
from cantus.features.query import build_request_headers, prepare_search_request_body
from cantus.features.response import (
    Envelope,
    abort_failure,
    error_failure,
    normalize_response,
)
from cantus.features.response.normalizer import LIBRARY_NAME, SUCCESS_STATUS
from cantus.platform.http import (
    RequestsTransport,
    SupportsClose,
    Transport,
    TransportAborted,
    TransportError,
)
from cantus.platform.logging import logger

ROOT_URL_FAILURE: Final[str] = f"{LIBRARY_NAME}: Root URL request failed with code "
ROOT_URL_SYNTAX_ERROR: Final[str] = (
    f"{LIBRARY_NAME}: SyntaxError while parsing response from the root URL."
)
DISCOVERY_CANCELLED: Final[str] = f"{LIBRARY_NAME}: Discovery of the root URL was cancelled."


def _resolve(future: asyncio.Future[Any], value: Any) -> None:
    if not future.done():
        future.set_result(value)


def _reject(future: asyncio.Future[Any], error: BaseException) -> None:
    if not future.done():
        future.set_exception(error)


def _log_discovery_outcome(ready: asyncio.Future[None]) -> None:
    # Marks the exception as retrieved even when no call is waiting on it.
    if ready.cancelled():
        return
    error = ready.exception()
    if error is not None:
        logger.warning("Cantus discovery failed: %s", error)


class CantusClient:
    """Client for a Cantus API server.

    Must be created while an event loop is running::

        client = CantusClient("https://cantus.example/")
        chants = await client.search(type="chant", incipit="Et quoniam")

    Call futures are rejected with ``HateoasError`` or ``QueryError`` for bad
    arguments, ``DiscoveryError`` when the root URL failed, ``RequestFailed``
    when the request itself failed, and ``CantusError`` for anything else.
    """

    def __init__(self, server_url: str | None = None, transport: Transport | None = None) -> None:
        self._loop: asyncio.AbstractEventLoop = asyncio.get_running_loop()
        self._transport: Transport = transport if transport is not None else RequestsTransport()
        self._tasks: set[asyncio.Task[None]] = set()
        self._directory: DiscoveryDirectory | None = None
        self.server_url: str | None = None
        self.ready: asyncio.Future[None]
        self.set_server_url(server_url or CANTUS_SERVER_URL or "")

    def set_server_url(self, url: str) -> None:
        """Point the client at ``url`` and start loading its discovery directory.

        ``ready`` is replaced immediately; the previous future is left as is.
        """

        if not url:
            raise ValueError("A Cantus server URL is required.")
        self.server_url = url
        self._directory = None
        ready: asyncio.Future[None] = self._loop.create_future()
        ready.add_done_callback(_log_discovery_outcome)
        self.ready = ready
        self._spawn(self._discover(url, ready))

    def get(self, **args: Any) -> asyncio.Future[Envelope]:
        """Submit a GET request.

        Args:
            **args: ``type`` and/or ``id`` select the resource(s); ``page``,
                ``per_page``, ``fields`` and ``sort`` set X-Cantus headers.

        Returns:
            A future resolved with the response envelope.
        """

        future: asyncio.Future[Envelope] = self._loop.create_future()
        self._spawn(self._run_get(dict(args), future))
        return future

    def search(self, **args: Any) -> asyncio.Future[Envelope]:
        """Submit a SEARCH request.

        Accepts the arguments of ``get`` except ``id``, plus any Cantus field
        name as a search term. Fields are not checked against ``type``.
        """

        future: asyncio.Future[Envelope] = self._loop.create_future()
        self._spawn(self._run_search(dict(args), future))
        return future

    def close(self) -> None:
        """Release the transport's resources when it implements ``SupportsClose``."""

        if isinstance(self._transport, SupportsClose):
            self._transport.close()

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = self._loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _discover(self, url: str, ready: asyncio.Future[None]) -> None:
        logger.debug("Loading discovery directory from %s", url)
        try:
            response = await self._transport.request("GET", url, headers={}, body=None)
        except TransportAborted:
            _reject(ready, DiscoveryError(abort_failure().response))
            return
        except TransportError:
            _reject(ready, DiscoveryError(error_failure().response))
            return
        except Exception:
            logger.exception("Transport failed while loading %s", url)
            _reject(ready, DiscoveryError(error_failure().response))
            return

        if response.status != SUCCESS_STATUS:
            _reject(ready, DiscoveryError(f"{ROOT_URL_FAILURE}{response.status}"))
            return
        try:
            directory = DiscoveryDirectory.from_payload(json.loads(response.body))
        except json.JSONDecodeError:
            _reject(ready, DiscoveryError(ROOT_URL_SYNTAX_ERROR))
            return
        except Exception as exc:
            _reject(ready, DiscoveryError(f"{type(exc).__name__}: {exc}"))
            return

        # A superseded discovery must not replace the current directory.
        if ready is self.ready:
            self._directory = directory
        _resolve(ready, None)

    async def _wait_until_ready(self) -> DiscoveryDirectory:
        """Wait for the current discovery, following any server URL change."""

        ready = self.ready
        while True:
            if ready.cancelled():
                if ready is self.ready:
                    raise DiscoveryError(DISCOVERY_CANCELLED)
                ready = self.ready
                continue
            try:
                await asyncio.shield(ready)
            except DiscoveryError:
                if ready is self.ready:
                    raise
            except asyncio.CancelledError:
                # Only a cancelled readiness future is handled; a cancelled task propagates.
                if not ready.cancelled():
                    raise
                continue
            else:
                if ready is self.ready and self._directory is not None:
                    return self._directory
            ready = self.ready

    async def _run_get(self, args: dict[str, Any], future: asyncio.Future[Envelope]) -> None:
        try:
            directory = await self._wait_until_ready()
        except DiscoveryError as exc:
            _reject(future, DiscoveryError(str(exc)))
            return

        try:
            url = find_url_from_type(args.get("type"), directory, True, args.get("id"))
        except HateoasError as exc:
            _reject(future, exc)
            return
        except Exception:
            logger.exception("Unexpected error resolving GET URL for %r", args)
            _reject(future, CantusError(UNRECOVERABLE_MESSAGE))
            return

        await self._dispatch("GET", url, args, None, future)

    async def _run_search(self, args: dict[str, Any], future: asyncio.Future[Envelope]) -> None:
        try:
            directory = await self._wait_until_ready()
        except DiscoveryError as exc:
            _reject(future, DiscoveryError(str(exc)))
            return

        try:
            body = prepare_search_request_body(args)
            url = find_url_from_type(args.get("type"), directory, True)
        except (QueryError, HateoasError) as exc:
            _reject(future, exc)
            return
        except Exception:
            logger.exception("Unexpected error preparing SEARCH for %r", args)
            _reject(future, CantusError(UNRECOVERABLE_MESSAGE))
            return

        await self._dispatch("SEARCH", url, args, body, future)

    async def _dispatch(
        self,
        method: str,
        url: str,
        args: dict[str, Any],
        body: str | None,
        future: asyncio.Future[Envelope],
    ) -> None:
        headers = build_request_headers(args)
        logger.debug("%s %s headers=%s", method, url, headers)
        try:
            response = await self._transport.request(method, url, headers=headers, body=body)
        except TransportAborted:
            _reject(future, RequestFailed(abort_failure()))
            return
        except TransportError:
            _reject(future, RequestFailed(error_failure()))
            return
        except Exception:
            logger.exception("Transport failed during %s %s", method, url)
            _reject(future, RequestFailed(error_failure()))
            return

        try:
            envelope = normalize_response(response)
        except RequestFailed as exc:
            _reject(future, exc)
            return
        _resolve(future, envelope)


__all__ = [
    "CantusClient",
    "DISCOVERY_CANCELLED",
    "ROOT_URL_FAILURE",
    "ROOT_URL_SYNTAX_ERROR",
]
