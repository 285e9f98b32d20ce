"""Where: src/cantus/features/query/request_headers.py
What: Translate paging, sorting and field-selection arguments into X-Cantus headers.
Why: The Cantus API reads these options from headers rather than the body.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

REQUEST_HEADERS: Final[tuple[tuple[str, str], ...]] = (
    ("page", "X-Cantus-Page"),
    ("per_page", "X-Cantus-Per-Page"),
    ("sort", "X-Cantus-Sort"),
    ("fields", "X-Cantus-Fields"),
)


def build_request_headers(args: Mapping[str, Any]) -> dict[str, str]:
    """Return the X-Cantus headers requested by ``args``; other members are ignored.

    Falsy values (``None``, ``""``, ``0``, ``False``) are omitted; others are
    sent as ``str(value)`` without validation.
    """

    headers: dict[str, str] = {}
    for arg_name, header_name in REQUEST_HEADERS:
        value = args.get(arg_name)
        if not value:
            continue
        headers[header_name] = str(value)
    return headers


__all__ = ["REQUEST_HEADERS", "build_request_headers"]
