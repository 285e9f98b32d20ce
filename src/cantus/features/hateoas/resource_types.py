"""Where: src/cantus/features/hateoas/resource_types.py
What: Convert Cantus resource type names between singular and plural.
Why: Callers may name types either way while the directory is keyed by plurals.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

TYPE_SINGULAR_TO_PLURAL: Final[Mapping[str, str]] = MappingProxyType(
    {
        "siglum": "sigla",
        "office": "offices",
        "indexer": "indexers",
        "century": "centuries",
        "source_status": "source_statii",
        "chant": "chants",
        "source": "sources",
        "portfolio": "portfolia",
        "segment": "segments",
        "feast": "feasts",
        "notation": "notations",
        "genre": "genres",
        "provenance": "provenances",
    }
)

TYPE_PLURAL_TO_SINGULAR: Final[Mapping[str, str]] = MappingProxyType(
    {plural: singular for singular, plural in TYPE_SINGULAR_TO_PLURAL.items()}
)


def convert_type_number(resource_type: str | None, to: str) -> str | None:
    """Return ``resource_type`` in the requested grammatical number.

    A type already in the requested number is returned unchanged, so
    converting ``"feasts"`` to plural yields ``"feasts"``.

    Args:
        resource_type: Singular or plural resource type name.
        to: ``"singular"`` or ``"plural"``.

    Returns:
        The converted name, or ``None`` when either argument is not recognised.
    """

    if resource_type is None:
        return None
    if to == "singular":
        if resource_type in TYPE_PLURAL_TO_SINGULAR:
            return TYPE_PLURAL_TO_SINGULAR[resource_type]
        if resource_type in TYPE_SINGULAR_TO_PLURAL:
            return resource_type
    elif to == "plural":
        if resource_type in TYPE_SINGULAR_TO_PLURAL:
            return TYPE_SINGULAR_TO_PLURAL[resource_type]
        if resource_type in TYPE_PLURAL_TO_SINGULAR:
            return resource_type
    return None


__all__ = [
    "TYPE_PLURAL_TO_SINGULAR",
    "TYPE_SINGULAR_TO_PLURAL",
    "convert_type_number",
]
