"""
Tests for fixedfloat/config.py

Covers defaults and FIXEDFLOAT_-prefixed environment overrides.
"""

from unittest.mock import patch

from fixedfloat import FixedFloatClient
from fixedfloat.config import Settings


class TestSettings:
    """Tests for Settings"""

    def test_defaults(self, monkeypatch):
        """Happy path: v2 base URL and a 30 second timeout."""
        monkeypatch.delenv("FIXEDFLOAT_BASE_URL", raising=False)
        monkeypatch.delenv("FIXEDFLOAT_REQUEST_TIMEOUT", raising=False)
        s = Settings(_env_file=None)
        assert s.base_url == "https://ff.io/api/v2/"
        assert s.request_timeout == 30.0

    def test_env_overrides(self, monkeypatch):
        """Happy path: prefixed environment variables override defaults."""
        monkeypatch.setenv("FIXEDFLOAT_BASE_URL", "http://localhost:8000/api/v2/")
        monkeypatch.setenv("FIXEDFLOAT_REQUEST_TIMEOUT", "5")
        s = Settings(_env_file=None)
        assert s.base_url == "http://localhost:8000/api/v2/"
        assert s.request_timeout == 5.0

    def test_credentials_not_read_from_env(self, monkeypatch):
        """Edge case: API credentials are never taken from the environment."""
        monkeypatch.setenv("FIXEDFLOAT_API_KEY", "env-key")
        monkeypatch.setenv("FIXEDFLOAT_API_SECRET", "env-secret")
        s = Settings(_env_file=None)
        assert not hasattr(s, "api_key")
        assert not hasattr(s, "api_secret")


class TestClientUsesSettings:
    """FixedFloatClient falls back to the module settings"""

    def test_base_url_and_timeout_from_settings(self):
        """Happy path: unset constructor options come from settings."""
        fake = Settings(_env_file=None, base_url="http://mock/", request_timeout=3.0)
        with patch("fixedfloat.client.settings", fake):
            client = FixedFloatClient("k", "s")
        assert client.base_url == "http://mock/"
        assert client._timeout == 3.0

    def test_explicit_options_win(self):
        """Happy path: constructor arguments override settings."""
        fake = Settings(_env_file=None, base_url="http://mock/", request_timeout=3.0)
        with patch("fixedfloat.client.settings", fake):
            client = FixedFloatClient("k", "s", base_url="http://other/", timeout=1.0)
        assert client.base_url == "http://other/"
        assert client._timeout == 1.0
