"""Unit tests for logging and Logfire configuration helpers."""

import logging

from threadly.config import ObservabilitySettings, Settings
from threadly.util.logging import log_level
from threadly.util.observability import should_send_to_logfire


class TestShouldSendToLogfire:
    def test_no_token(self):
        """Should stay local without a token."""
        settings = Settings(observability=ObservabilitySettings())

        assert should_send_to_logfire(settings) is False

    def test_token_present(self):
        """Should send when a token is configured."""
        settings = Settings(observability=ObservabilitySettings(logfire_token="tok"))

        assert should_send_to_logfire(settings) is True

    def test_explicit_setting_wins(self):
        """Should honor an explicit opt-out even with a token."""
        settings = Settings(
            observability=ObservabilitySettings(
                logfire_token="tok", send_to_logfire=False
            )
        )

        assert should_send_to_logfire(settings) is False


class TestLogLevel:
    def test_debug_overrides_environment(self):
        assert log_level(Settings(environment="production", debug=True)) == logging.DEBUG

    def test_production(self):
        assert log_level(Settings(environment="production")) == logging.WARNING

    def test_development(self):
        assert log_level(Settings(environment="development")) == logging.INFO
