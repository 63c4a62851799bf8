"""Custom exception classes for the Cognito utilities.

Every error raised by this package inherits from AppError and carries a
status code and optional debug detail, so callers running behind an API
can turn it straight into a response body.
"""

from __future__ import annotations

from typing import Any
from typing import Optional


class AppError(Exception):
    """Base exception for Cognito utility errors.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code (default 500).
        detail: Optional additional context.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response body."""
        result: dict[str, Any] = {"error": self.message}
        if self.detail:
            result["detail"] = self.detail
        return result


class ConfigurationError(AppError):
    """Raised when required configuration is missing.

    Use when environment variables or settings are not properly configured.
    """

    def __init__(self, config_name: str):
        super().__init__(
            f"Missing required configuration: {config_name}",
            status_code=500,
        )
        self.config_name = config_name


class CognitoConnectionError(AppError):
    """Raised when a call to Cognito fails.

    Covers both transport failures and errors returned by the service.
    The underlying error's description is kept in ``detail``.
    """

    def __init__(self, detail: Optional[str] = None):
        super().__init__("Cognito error.", status_code=502, detail=detail)


class CriticalError(AppError):
    """Raised when Cognito returns data that should be impossible.

    Use for provider contract violations, e.g. a matched user record
    without a username. These are bugs, not transient conditions.
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message, status_code=500, detail=detail)
