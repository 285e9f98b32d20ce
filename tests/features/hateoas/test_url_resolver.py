"""Tests for discovery directory parsing and URL lookup."""

from __future__ import annotations

import pytest

from cantus.errors import HateoasError
from cantus.features.hateoas import DiscoveryDirectory, find_url_from_type


def _directory() -> DiscoveryDirectory:
    return DiscoveryDirectory.from_payload(
        {
            "resources": {
                "browse": {"chants": "U1", "all": "U2"},
                "view": {"chants": "http://x/id?/chants/", "feasts": "http://x/feasts/id?/"},
            }
        }
    )


def test_browse_url_for_singular_or_plural_type() -> None:
    directory = _directory()
    assert find_url_from_type("chant", directory) == "U1"
    assert find_url_from_type("chants", directory) == "U1"


def test_falls_back_to_all_when_allowed() -> None:
    directory = _directory()
    assert find_url_from_type("feast", directory, True) == "U2"
    assert find_url_from_type(None, directory) == "U2"


def test_missing_type_without_fallback_raises() -> None:
    with pytest.raises(HateoasError, match='Could not find a URL for "feasts" resources.'):
        find_url_from_type("feast", _directory(), False)


def test_unknown_type_is_named_as_given() -> None:
    directory = DiscoveryDirectory.from_payload({"resources": {"browse": {}}})
    with pytest.raises(HateoasError, match='"backhoe"'):
        find_url_from_type("backhoe", directory)


def test_id_is_substituted_into_view_url() -> None:
    directory = _directory()
    assert find_url_from_type("chants", directory, False, 666) == "http://x/666/chants/"
    assert find_url_from_type("feast", directory, True, "12") == "http://x/feasts/12/"


def test_id_never_falls_back_to_all() -> None:
    with pytest.raises(HateoasError):
        find_url_from_type("source", _directory(), True, "123")


def test_lookup_has_no_hidden_state() -> None:
    directory = _directory()
    first = find_url_from_type("chant", directory, False, "7")
    second = find_url_from_type("chant", directory, False, "7")
    assert first == second == "http://x/7/chants/"
    assert directory.view["chants"] == "http://x/id?/chants/"


def test_directory_requires_resources_object() -> None:
    with pytest.raises(TypeError):
        DiscoveryDirectory.from_payload({"browse": {}})
    with pytest.raises(TypeError):
        DiscoveryDirectory.from_payload(["resources"])


def test_directory_sections_are_read_only() -> None:
    directory = _directory()
    with pytest.raises(TypeError):
        directory.browse["chants"] = "elsewhere"  # type: ignore[index]
