"""Where: src/cantus/errors.py
What: Exception taxonomy shared by the resolver, encoder, normalizer and client.
Why: Let callers tell validation problems from failed requests with ``except``.
"""

from __future__ import annotations

from dataclasses import dataclass

UNRECOVERABLE_MESSAGE: str = "Unrecoverable error while parsing query"


@dataclass(slots=True, frozen=True)
class Failure:
    """Normalized description of a request that did not succeed."""

    code: int
    reason: str
    response: str


class CantusError(Exception):
    """Base class for every error a Cantus call future can be rejected with."""


class HateoasError(CantusError):
    """No URL for the requested resource type or id in the discovery directory."""

    def __init__(self, message: str = "HATEOAS-related error") -> None:
        super().__init__(message)


class QueryError(CantusError):
    """A search query names a field the server does not know."""

    def __init__(self, message: str = "query-related error") -> None:
        super().__init__(message)


class DiscoveryError(CantusError):
    """The root URL could not be loaded as a discovery directory."""


class RequestFailed(CantusError):
    """A dispatched request did not produce a usable response.

    ``failure.code`` is the HTTP status, or ``0`` when the request never
    reached a status line.
    """

    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.response)
        self.failure: Failure = failure

    @property
    def code(self) -> int:
        return self.failure.code

    @property
    def reason(self) -> str:
        return self.failure.reason


__all__ = [
    "CantusError",
    "DiscoveryError",
    "Failure",
    "HateoasError",
    "QueryError",
    "RequestFailed",
    "UNRECOVERABLE_MESSAGE",
]
