"""Where: src/cantus/features/query/__init__.py
What: Export search body encoding and request header helpers.
Why: Provide a stable import surface for the client and tests.
"""

from .encoder import prepare_search_request_body, quote_if_needed
from .fields import HEADER_FIELDS, VALID_FIELDS
from .request_headers import REQUEST_HEADERS, build_request_headers

__all__ = [
    "HEADER_FIELDS",
    "REQUEST_HEADERS",
    "VALID_FIELDS",
    "build_request_headers",
    "prepare_search_request_body",
    "quote_if_needed",
]
