"""Where: src/cantus/features/query/encoder.py
What: Build the JSON body of a SEARCH request from caller-supplied fields.
Why: Reject unknown fields before the request leaves the client.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from cantus.errors import QueryError

from .fields import ANY_FIELD, HEADER_FIELDS, TYPE_FIELD, VALID_FIELDS

_QUOTE_PAIRS: tuple[str, ...] = ('"', "'")


def quote_if_needed(value: str) -> str:
    """Wrap ``value`` in double quotes when it has a space and no enclosing quotes."""

    if " " not in value:
        return value
    if len(value) >= 2 and any(value[0] == q and value[-1] == q for q in _QUOTE_PAIRS):
        return value
    return f'"{value}"'


def prepare_search_request_body(query: Mapping[str, Any]) -> str:
    """Serialize ``query`` as ``{"query": "<field:value ...>"}``.

    Fields are written in the mapping's iteration order. ``any`` is written
    verbatim, an empty value becomes ``field:*``, and header fields and
    ``type`` are skipped.

    Raises:
        QueryError: ``query`` contains a field the server does not know.
    """

    query_str = ""
    for field_name, raw_value in query.items():
        if field_name in VALID_FIELDS:
            value = "" if raw_value is None else str(raw_value)
            if field_name == ANY_FIELD:
                query_str = f"{query_str} {value}"
            elif field_name == TYPE_FIELD:
                continue
            elif value == "":
                query_str = f"{query_str} {field_name}:*"
            else:
                query_str = f"{query_str} {field_name}:{quote_if_needed(value)}"
        elif field_name not in HEADER_FIELDS:
            raise QueryError(f'Invalid field in query: "{field_name}"')

    if len(query_str) > 1:
        query_str = query_str[1:]

    return json.dumps({"query": query_str}, separators=(",", ":"), ensure_ascii=False)


__all__ = ["prepare_search_request_body", "quote_if_needed"]
