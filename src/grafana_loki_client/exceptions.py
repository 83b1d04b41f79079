"""
Custom exceptions for grafana-loki-client.
"""

from typing import Optional


class LokiError(Exception):
    """Base exception for all Loki-related errors."""
    pass


class MissingCredentialError(LokiError):
    """Raised when no API token is given and none is found in the environment."""
    pass


class InvalidBaseURLError(LokiError, ValueError):
    """Raised when the remote API URL is not an absolute http(s) URL."""
    pass


class InvalidDurationFormatError(LokiError, ValueError):
    """Raised when a start/end value is neither a timestamp nor a duration."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Invalid duration format: {value!r} "
            "(expected a nanosecond timestamp or a duration such as '15m', '2h', '7d')"
        )


class LokiHTTPError(LokiError):
    """Raised when Loki answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str, message: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(
            message or f"Loki request failed with status {status_code}: {body}"
        )


class LokiAuthError(LokiHTTPError):
    """Raised when authentication to Loki fails (401/403)."""
    pass


class LokiDecodeError(LokiError):
    """Raised when a Loki response is not JSON or not in the documented shape."""
    pass
