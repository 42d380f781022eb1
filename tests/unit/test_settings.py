"""Unit tests for environment-driven settings."""
import pytest
from pydantic import ValidationError

from invoice_dashboard.settings import get_settings


class TestAuthSecret:

    def test_dev_allows_default_secret(self, monkeypatch):
        monkeypatch.delenv("AUTH_SECRET")
        assert get_settings().env == "dev"

    def test_prod_rejects_default_secret(self, monkeypatch):
        """A production app must not sign session cookies with the dev key."""
        monkeypatch.setenv("APP_ENV", "prod")
        monkeypatch.delenv("AUTH_SECRET")
        with pytest.raises(ValidationError, match="AUTH_SECRET must be set"):
            get_settings()

    def test_prod_with_secret(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "prod")
        settings = get_settings()
        assert settings.auth.secret.get_secret_value() == "test-secret"
