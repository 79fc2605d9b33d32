"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from reqtrace.api.main import create_app


@pytest.fixture()
def app_factory():
    """
    Factory fixture that creates a fresh app (and worker pool) per test.
    Pools created here are shut down after the test.
    """
    created = []

    def _make():
        app = create_app()
        created.append(app)
        return app

    yield _make

    for app in created:
        app.state.worker_pool.shutdown(wait=True, cancel_futures=True)


@pytest.fixture()
def client_factory(app_factory):
    """
    Factory fixture that creates a fresh TestClient.

    IMPORTANT:
        Used when tests need to add routes or set env vars before app creation.
    """

    def _make(*, raise_server_exceptions: bool = True, app=None) -> TestClient:
        return TestClient(app or app_factory(), raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    """
    Simple alias fixture for tests that only need a default client.
    """
    return client_factory()
