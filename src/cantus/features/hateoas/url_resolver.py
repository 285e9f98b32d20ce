"""Where: src/cantus/features/hateoas/url_resolver.py
What: Find the request URL for a resource type, optionally for one resource id.
Why: The server publishes its URLs; the client never hard-codes them.
"""

from __future__ import annotations

from cantus.errors import HateoasError

from .directory import ALL_RESOURCES_KEY, ID_PLACEHOLDER, DiscoveryDirectory
from .resource_types import convert_type_number


def find_url_from_type(
    resource_type: str | None,
    directory: DiscoveryDirectory,
    default_to_all: bool = True,
    resource_id: str | int | None = None,
) -> str:
    """Return the URL serving ``resource_type`` resources.

    With ``resource_id`` the ``view`` URL is used and its ``id?`` placeholder
    is filled in; the "all" fallback never applies to single resources.
    Without an id the ``browse`` URL is used, falling back to the ``all``
    URL when ``default_to_all`` is true.

    Raises:
        HateoasError: No URL can be found.
    """

    plural = convert_type_number(resource_type, "plural")
    lookup = plural if plural is not None else resource_type

    request_url: str | None
    if resource_id is not None and resource_id != "":
        request_url = directory.view.get(lookup) if lookup is not None else None
        if request_url is not None:
            request_url = request_url.replace(ID_PLACEHOLDER, str(resource_id), 1)
    else:
        request_url = directory.browse.get(lookup) if lookup is not None else None
        if request_url is None and default_to_all:
            request_url = directory.browse.get(ALL_RESOURCES_KEY)

    if request_url is None:
        raise HateoasError(f'Could not find a URL for "{lookup}" resources.')
    return request_url


__all__ = ["find_url_from_type"]
