"""Tests for the outbound payload logger."""

from unittest.mock import MagicMock, patch

import pytest

from transit_trail.adapters.payload_logger import (
    REDACTED,
    log_api_request,
    redact_params,
    should_log_payloads,
)


class TestShouldLogPayloads:
    """Tests for should_log_payloads function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given TRANSIT_TRAIL_LOG_PAYLOADS not set, when checking, then returns False."""
        monkeypatch.delenv("TRANSIT_TRAIL_LOG_PAYLOADS", raising=False)

        assert should_log_payloads() is False

    @pytest.mark.parametrize(("value", "expected"), [("true", True), ("True", True), ("1", False)])
    def test_when_env_set_then_only_true_enables(
        self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
    ) -> None:
        """Given TRANSIT_TRAIL_LOG_PAYLOADS set, when checking, then only "true" in any case enables logging."""
        monkeypatch.setenv("TRANSIT_TRAIL_LOG_PAYLOADS", value)

        assert should_log_payloads() is expected


def test_redact_params_hides_api_key() -> None:
    """Given an api-key parameter, when redacting, then its value is replaced and the rest kept."""
    params = [("api-key", "secret"), ("origin", "addresses/42")]

    assert redact_params(params) == [("api-key", REDACTED), ("origin", "addresses/42")]


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("transit_trail.adapters.payload_logger.should_log_payloads")
    @patch("transit_trail.adapters.payload_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("trip-planner.json", [("api-key", "secret")])

        mock_logger.info.assert_not_called()

    @patch("transit_trail.adapters.payload_logger.should_log_payloads")
    @patch("transit_trail.adapters.payload_logger.logger")
    def test_when_logging_enabled_then_logs_redacted_url_and_payload(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled, when calling with params and payload, then logs them without the key."""
        mock_should_log.return_value = True

        log_api_request(
            "trip-planner.json",
            [("api-key", "secret"), ("origin", "stops/10064")],
            {"origin": {"Stop": 10064}},
        )

        mock_logger.info.assert_called_once()
        message = mock_logger.info.call_args[0][0]
        assert "GET trip-planner.json?api-key=***REDACTED***&origin=stops/10064" in message
        assert '"Stop": 10064' in message
        assert "secret" not in message
