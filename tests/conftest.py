"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from tests.fakes import FakeTransport


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Provide a transport that parks requests until the test settles them."""

    return FakeTransport()
