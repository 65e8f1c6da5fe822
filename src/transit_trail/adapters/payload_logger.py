"""Logging of outbound transit API requests when TRANSIT_TRAIL_LOG_PAYLOADS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
_SENSITIVE_PARAMS = frozenset({"api-key", "api_key"})


def should_log_payloads() -> bool:
    """Check if payload logging is enabled via the TRANSIT_TRAIL_LOG_PAYLOADS environment variable."""
    return os.getenv("TRANSIT_TRAIL_LOG_PAYLOADS", "").lower() == "true"


def redact_params(params: list[tuple[str, str]]) -> list[tuple[str, str]]:
    """Replace the values of credential parameters."""
    return [
        (name, REDACTED if name.lower() in _SENSITIVE_PARAMS else value) for name, value in params
    ]


def _build_url_with_params(url: str, params: list[tuple[str, str]]) -> str:
    if not params:
        return url
    param_str = "&".join(f"{name}={value}" for name, value in params)
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def _format_payload(payload: Any) -> str:
    try:
        return json.dumps(payload, indent=2) if isinstance(payload, (dict, list)) else str(payload)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    resource: str,
    params: list[tuple[str, str]] | None = None,
    payload: Any = None,
) -> None:
    """Log an outbound request if TRANSIT_TRAIL_LOG_PAYLOADS is enabled.

    Args:
        resource: API resource, e.g. ``trip-planner.json``.
        params: Query parameters in send order. The API key is redacted.
        payload: JSON body or encoded filters (optional).
    """
    if not should_log_payloads():
        return

    log_parts = [f"GET {_build_url_with_params(resource, redact_params(params or []))}"]
    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(payload)}")

    logger.info("Transit API request:\n" + "\n".join(log_parts))
