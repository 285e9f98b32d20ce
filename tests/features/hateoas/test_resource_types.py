"""Tests for singular/plural resource type conversion."""

from __future__ import annotations

import pytest

from cantus.features.hateoas import (
    TYPE_PLURAL_TO_SINGULAR,
    TYPE_SINGULAR_TO_PLURAL,
    convert_type_number,
)


@pytest.mark.parametrize(("singular", "plural"), sorted(TYPE_SINGULAR_TO_PLURAL.items()))
def test_conversion_is_total_and_idempotent(singular: str, plural: str) -> None:
    assert convert_type_number(singular, "plural") == plural
    assert convert_type_number(plural, "plural") == plural
    assert convert_type_number(plural, "singular") == singular
    assert convert_type_number(singular, "singular") == singular


def test_tables_are_inverse() -> None:
    assert {v: k for k, v in TYPE_SINGULAR_TO_PLURAL.items()} == dict(TYPE_PLURAL_TO_SINGULAR)
    assert TYPE_SINGULAR_TO_PLURAL["source_status"] == "source_statii"
    assert TYPE_SINGULAR_TO_PLURAL["portfolio"] == "portfolia"


@pytest.mark.parametrize("to", ["singular", "plural"])
def test_unknown_type_returns_none(to: str) -> None:
    assert convert_type_number("backhoe", to) is None
    assert convert_type_number(None, to) is None


def test_unknown_target_returns_none() -> None:
    assert convert_type_number("chant", "dual") is None
