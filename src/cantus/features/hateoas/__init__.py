"""Where: src/cantus/features/hateoas/__init__.py
What: Export discovery directory and URL lookup helpers.
Why: Provide a stable import surface for the client and tests.
"""

from .directory import ALL_RESOURCES_KEY, ID_PLACEHOLDER, DiscoveryDirectory
from .resource_types import (
    TYPE_PLURAL_TO_SINGULAR,
    TYPE_SINGULAR_TO_PLURAL,
    convert_type_number,
)
from .url_resolver import find_url_from_type

__all__ = [
    "ALL_RESOURCES_KEY",
    "DiscoveryDirectory",
    "ID_PLACEHOLDER",
    "TYPE_PLURAL_TO_SINGULAR",
    "TYPE_SINGULAR_TO_PLURAL",
    "convert_type_number",
    "find_url_from_type",
]
