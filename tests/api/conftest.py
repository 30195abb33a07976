"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from roleguard.interfaces.api.app import create_app


@pytest.fixture
def app(uow_factory):
    """Falcon ASGI app wired to the in-memory UoW."""
    return create_app(uow_factory)


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
