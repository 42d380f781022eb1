"""Shared fixtures: backend configuration and a mocked backend API."""
from unittest.mock import MagicMock

import pytest

from invoice_dashboard.adapters.backend import BackendAPI
from invoice_dashboard.auth.session import AuthSession
from invoice_dashboard.settings import AuthSettings

TEST_API_URL = "http://backend.test"
TEST_SECRET = "test-secret"


@pytest.fixture(autouse=True)
def backend_env(monkeypatch):
    """Point every test at a fake backend URL with a fixed session secret."""
    monkeypatch.setenv("API_URL", TEST_API_URL)
    monkeypatch.setenv("AUTH_SECRET", TEST_SECRET)


@pytest.fixture
def backend():
    """BackendAPI double; configure return values / side effects per test."""
    return MagicMock(spec=BackendAPI)


@pytest.fixture
def auth_session(backend):
    """AuthSession wired to the mocked backend."""
    return AuthSession(settings=AuthSettings(secret=TEST_SECRET), backend_factory=lambda: backend)
