"""Where: src/cantus/features/response/normalizer.py
What: Turn completed transport responses into envelopes or ``Failure`` values.
Why: Give ``get`` and ``search`` callers one result shape for every outcome.

Envelope layout::

    {
        "123": {"type": "chant", "id": "123", "incipit": "Et quoniam..."},
        "resources": {"123": {"self": "https://cantus.example/123"}},
        "sort_order": ["123"],
        "headers": {"version": "2.1.0", "total_results": "1", ...},
    }
"""

from __future__ import annotations

import json
from typing import Any, Final, cast

from cantus.errors import Failure, RequestFailed
from cantus.platform.http.transport import TransportResponse
from cantus.platform.logging import logger

LIBRARY_NAME: Final[str] = "cantus"
SUCCESS_STATUS: Final[int] = 200
INTERNAL_ERROR_REASON: Final[str] = "internal error"

RESPONSE_HEADERS: Final[tuple[tuple[str, str], ...]] = (
    ("version", "X-Cantus-Version"),
    ("include_resources", "X-Cantus-Include-Resources"),
    ("fields", "X-Cantus-Fields"),
    ("extra_fields", "X-Cantus-Extra-Fields"),
    ("total_results", "X-Cantus-Total-Results"),
    ("page", "X-Cantus-Page"),
    ("per_page", "X-Cantus-Per-Page"),
    ("sort", "X-Cantus-Sort"),
)

Envelope = dict[str, Any]


def status_failure(response: TransportResponse) -> Failure:
    """Describe a response whose status is not 200."""

    return Failure(
        code=response.status,
        reason=response.status_text,
        response=f"{response.status}: {response.status_text}",
    )


def abort_failure() -> Failure:
    """Describe a request aborted before completion."""

    return Failure(code=0, reason="Request aborted", response="The request was aborted.")


def error_failure() -> Failure:
    """Describe a request that errored before a status line arrived."""

    return Failure(code=0, reason="Request errored", response="Error during the request.")


def _parse_failure(kind: str) -> Failure:
    return Failure(
        code=0,
        reason=INTERNAL_ERROR_REASON,
        response=f"{LIBRARY_NAME}: {kind} while parsing response.",
    )


def extract_headers(response: TransportResponse) -> dict[str, str | None]:
    """Collect the known X-Cantus response headers, ``None`` for missing ones."""

    return {key: response.header(name) for key, name in RESPONSE_HEADERS}


def build_envelope(data: Any, response: TransportResponse) -> Envelope:
    """Add ``sort_order`` (when missing) and ``headers`` to a decoded body.

    Raises:
        TypeError: The body is not a JSON object.
    """

    if not isinstance(data, dict):
        raise TypeError(f"response body is a JSON {type(data).__name__}, not an object")
    envelope = cast(Envelope, data)
    if "sort_order" not in envelope:
        envelope["sort_order"] = [key for key in envelope if key != "resources"]
    envelope["headers"] = extract_headers(response)
    return envelope


def normalize_response(response: TransportResponse) -> Envelope:
    """Decode a completed response into an envelope.

    Raises:
        RequestFailed: The status is not 200 or the body cannot be used.
    """

    if response.status != SUCCESS_STATUS:
        raise RequestFailed(status_failure(response))

    try:
        data = json.loads(response.body)
    except json.JSONDecodeError as exc:
        logger.debug("Invalid JSON in response: %s", exc)
        raise RequestFailed(_parse_failure("SyntaxError")) from exc

    try:
        return build_envelope(data, response)
    except Exception as exc:
        logger.exception("Unexpected %s while parsing response", type(exc).__name__)
        raise RequestFailed(_parse_failure(type(exc).__name__)) from exc


__all__ = [
    "Envelope",
    "LIBRARY_NAME",
    "RESPONSE_HEADERS",
    "abort_failure",
    "build_envelope",
    "error_failure",
    "extract_headers",
    "normalize_response",
    "status_failure",
]
