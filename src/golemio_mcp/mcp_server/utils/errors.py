"""Error handling utilities for MCP tools.

Keeps tool parameters safe to log and turns tool-level faults into the
same failure envelope the services produce.
"""

from typing import Any

# Parameter name fragments whose values must never reach the logs
SENSITIVE_KEYS = {
    "password",
    "token",
    "access_token",
    "api_key",
    "apikey",
    "secret",
    "authorization",
}


def sanitize_parameters(params: dict[str, Any]) -> dict[str, Any]:
    """Sanitize parameters to redact sensitive values.

    Recursively sanitizes dictionaries, redacting values whose key looks
    sensitive and truncating very long strings.

    Example:
        >>> sanitize_parameters({"x-access-token": "abc", "limit": 10})
        {'x-access-token': '<REDACTED>', 'limit': 10}
    """
    sanitized: dict[str, Any] = {}

    for key, value in params.items():
        key_lower = key.lower()

        if any(sensitive in key_lower for sensitive in SENSITIVE_KEYS):
            sanitized[key] = "<REDACTED>"
        elif isinstance(value, dict):
            sanitized[key] = sanitize_parameters(value)
        elif isinstance(value, list):
            sanitized[key] = [sanitize_parameters(item) if isinstance(item, dict) else item for item in value]
        elif isinstance(value, str) and len(value) > 100:
            # Truncate very long strings (potential keys/tokens)
            sanitized[key] = value[:20] + "...<truncated>"
        else:
            sanitized[key] = value

    return sanitized


def failure_envelope(message: str) -> dict[str, Any]:
    """Build a failure envelope for faults raised outside a service."""
    return {"success": False, "errorMessage": message}
