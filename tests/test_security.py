"""
Tests for the security service - Bearer token check.
"""
import pytest

from badge_proxy.config import AppConfig, get_config
from badge_proxy.services.security import authorize, get_secret


class TestAuthorize:
    """Tests for authorize function."""

    def test_open_mode_accepts_anything(self):
        """Without a configured password every credential is accepted."""
        assert authorize(None, None) is True
        assert authorize(None, "Bearer whatever") is True
        assert authorize(None, "garbage") is True

    def test_valid_token(self):
        """Exact Bearer token should return True."""
        assert authorize("secret123", "Bearer secret123") is True

    def test_wrong_token(self):
        """Different token should return False."""
        assert authorize("secret123", "Bearer wrong") is False

    def test_missing_header(self):
        """Missing header should return False when a password is set."""
        assert authorize("secret123", None) is False

    def test_scheme_is_case_sensitive(self):
        """Only the exact `Bearer ` prefix is accepted."""
        assert authorize("secret123", "bearer secret123") is False
        assert authorize("secret123", "BEARER secret123") is False

    def test_wrong_scheme(self):
        """Other schemes should return False."""
        assert authorize("secret123", "Basic secret123") is False
        assert authorize("secret123", "secret123") is False

    def test_missing_token(self):
        """Scheme without a token should return False."""
        assert authorize("secret123", "Bearer") is False
        assert authorize("secret123", "Bearer ") is False

    def test_extra_whitespace_rejected(self):
        """Token must match exactly, without extra spaces."""
        assert authorize("secret123", "Bearer  secret123") is False
        assert authorize("secret123", "Bearer secret123 ") is False

    def test_token_is_case_sensitive(self):
        """Token comparison is case-sensitive."""
        assert authorize("secret123", "Bearer SECRET123") is False

    def test_prefix_of_password_rejected(self):
        """A partial token should not match."""
        assert authorize("secret123", "Bearer secret") is False

    def test_non_text_header(self):
        """Non-string header values should return False (not raise exception)."""
        assert authorize("secret123", b"Bearer secret123") is False

    def test_unicode_password(self):
        """Non-ASCII passwords compare correctly."""
        assert authorize("pässwörd", "Bearer pässwörd") is True
        assert authorize("pässwörd", "Bearer passwort") is False


class TestGetSecret:
    """Tests for get_secret function."""

    @pytest.fixture(autouse=True)
    def clear_config_cache(self):
        get_config.cache_clear()
        yield
        get_config.cache_clear()

    def test_secret_from_environment(self, monkeypatch):
        """Should read URL_UPDATE_PASSWORD."""
        monkeypatch.setenv("URL_UPDATE_PASSWORD", "secret123")
        assert get_secret() == "secret123"

    def test_unset_secret(self, monkeypatch):
        """Unset password means open mode."""
        monkeypatch.delenv("URL_UPDATE_PASSWORD", raising=False)
        monkeypatch.chdir("/")  # keep a local .env out of the way
        assert get_secret() is None

    def test_secret_from_given_config(self, monkeypatch):
        """An explicit config wins over the environment."""
        monkeypatch.setenv("URL_UPDATE_PASSWORD", "from-env")
        config = AppConfig(_env_file=None, url_update_password="from-config")

        assert get_secret(config) == "from-config"

    def test_empty_config_secret_is_unset(self):
        """An empty password in the config means open mode."""
        assert get_secret(AppConfig(_env_file=None, url_update_password="")) is None
