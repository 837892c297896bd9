from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from accrual_mock.server import create_app
from accrual_mock.settings import Settings


# Short delay for tests that only check routing.
FAST = Settings(delay_ms=50)


@pytest.fixture
def fast_app():
    return create_app(FAST)


@pytest.fixture
def client(fast_app):
    return TestClient(fast_app)


@pytest.fixture
def default_client():
    """Client with the real 1000 ms delay."""
    return TestClient(create_app(Settings()))
