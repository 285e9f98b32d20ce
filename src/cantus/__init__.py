"""Client library for Cantus API servers.

URLs are discovered from the server's root document; ``CantusClient.get``
and ``CantusClient.search`` return ``asyncio`` futures.
"""

from cantus.client import CantusClient
from cantus.errors import (
    CantusError,
    DiscoveryError,
    Failure,
    HateoasError,
    QueryError,
    RequestFailed,
)
from cantus.features.hateoas import convert_type_number
from cantus.features.query import VALID_FIELDS, quote_if_needed

__all__ = [
    "CantusClient",
    "CantusError",
    "DiscoveryError",
    "Failure",
    "HateoasError",
    "QueryError",
    "RequestFailed",
    "VALID_FIELDS",
    "convert_type_number",
    "quote_if_needed",
]
