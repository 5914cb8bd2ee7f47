"""Tests for observability and settings."""
from unittest.mock import patch

import pytest

from src.config.settings import Settings
from src.core.observability import _before_send, init_observability


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.API_V1_PREFIX == "/api/v1"
        assert settings.is_development is True
        assert settings.is_production is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("PORT", "9000")

        settings = Settings(_env_file=None)

        assert settings.is_production is True
        assert settings.PORT == 9000


class TestInitObservability:
    """Tests for init_observability."""

    def test_disabled_without_dsn(self):
        with patch("src.core.observability.settings.GLITCHTIP_DSN", ""), \
             patch("src.core.observability.sentry_sdk.init") as mock_init:
            assert init_observability() is False

        mock_init.assert_not_called()

    def test_enabled_with_dsn(self):
        with patch("src.core.observability.settings.GLITCHTIP_DSN", "https://key@glitchtip.example/1"), \
             patch("src.core.observability.sentry_sdk.init") as mock_init:
            assert init_observability() is True

        kwargs = mock_init.call_args.kwargs
        assert kwargs["dsn"] == "https://key@glitchtip.example/1"
        assert kwargs["send_default_pii"] is False
        assert kwargs["before_send"] is _before_send


class TestBeforeSend:
    """Tests for _before_send filtering."""

    def test_drops_transient_connection_errors(self):
        error = ConnectionResetError("Connection reset by peer")
        hint = {"exc_info": (type(error), error, None)}

        assert _before_send({"event_id": "1"}, hint) is None

    def test_keeps_other_errors(self):
        error = ValueError("unexpected")
        event = {"event_id": "2"}

        assert _before_send(event, {"exc_info": (type(error), error, None)}) is event

    def test_keeps_events_without_exception(self):
        event = {"message": "hello"}

        assert _before_send(event, {}) is event
