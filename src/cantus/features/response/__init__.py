"""Where: src/cantus/features/response/__init__.py
What: Export response normalization helpers.
Why: Provide a stable import surface for the client and tests.
"""

from .normalizer import (
    RESPONSE_HEADERS,
    Envelope,
    abort_failure,
    error_failure,
    normalize_response,
)

__all__ = [
    "Envelope",
    "RESPONSE_HEADERS",
    "abort_failure",
    "error_failure",
    "normalize_response",
]
