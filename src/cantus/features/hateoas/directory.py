"""Where: src/cantus/features/hateoas/directory.py
What: Immutable view of the ``resources`` object served at the API root.
Why: Keep the client's URL lookups independent from the raw JSON payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, cast

ALL_RESOURCES_KEY: str = "all"
ID_PLACEHOLDER: str = "id?"


def _freeze(section: object, name: str) -> Mapping[str, str]:
    if section is None:
        return MappingProxyType({})
    if not isinstance(section, Mapping):
        raise TypeError(f'"{name}" section of the discovery directory must be an object')
    items = cast(Mapping[object, object], section)
    return MappingProxyType({str(key): str(value) for key, value in items.items()})


@dataclass(slots=True, frozen=True)
class DiscoveryDirectory:
    """URLs for browsing (``browse``) and viewing (``view``) each resource type.

    ``view`` URLs contain the ``id?`` placeholder.
    """

    browse: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    view: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_payload(cls, payload: Any) -> "DiscoveryDirectory":
        """Build a directory from a decoded root response body.

        Raises:
            TypeError: The body is not an object or has no ``resources`` object.
        """

        if not isinstance(payload, Mapping):
            raise TypeError("root response body must be a JSON object")
        resources = cast(Mapping[str, Any], payload).get("resources")
        if not isinstance(resources, Mapping):
            raise TypeError('root response body has no "resources" object')
        resources = cast(Mapping[str, Any], resources)
        return cls(
            browse=_freeze(resources.get("browse"), "browse"),
            view=_freeze(resources.get("view"), "view"),
        )


__all__ = ["ALL_RESOURCES_KEY", "DiscoveryDirectory", "ID_PLACEHOLDER"]
