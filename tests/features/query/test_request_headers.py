"""Tests for X-Cantus request header injection."""

from __future__ import annotations

from cantus.features.query import build_request_headers


def test_no_headers() -> None:
    assert build_request_headers({"type": "chant", "incipit": "Et"}) == {}


def test_one_header() -> None:
    assert build_request_headers({"sort": "functionality"}) == {"X-Cantus-Sort": "functionality"}


def test_four_headers() -> None:
    args = {"page": "Wolfram", "per_page": "Bee Gees", "sort": "functionality", "fields": "A ZedHang"}
    assert build_request_headers(args) == {
        "X-Cantus-Page": "Wolfram",
        "X-Cantus-Per-Page": "Bee Gees",
        "X-Cantus-Sort": "functionality",
        "X-Cantus-Fields": "A ZedHang",
    }


def test_empty_values_are_skipped_and_numbers_stringified() -> None:
    assert build_request_headers({"page": 2, "per_page": "", "sort": None}) == {"X-Cantus-Page": "2"}


def test_falsy_values_are_not_sent() -> None:
    args = {"page": 0, "per_page": False, "fields": "", "sort": "incipit"}
    assert build_request_headers(args) == {"X-Cantus-Sort": "incipit"}
