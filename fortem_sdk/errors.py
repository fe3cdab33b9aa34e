"""
ForTem SDK Error Classes

Every error raised by the SDK derives from FortemError, so callers can catch
a single type and inspect ``status_code`` / ``code`` for details.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class FortemError(Exception):
    """Base error class, raised as-is for non-2xx API responses."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.timestamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "name": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "code": self.code,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r}, code={self.code!r})"
        )


class FortemAuthError(FortemError):
    """Authentication error (401, or an auth request that cannot be made)."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, 401, "AUTH_ERROR")


class FortemTokenExpiredError(FortemError):
    """Access token was consumed or expired (403)."""

    def __init__(self, message: str = "Token expired", code: Optional[str] = None):
        super().__init__(message, 403, code or "TOKEN_EXPIRED")


class ConfigurationError(FortemError):
    """Invalid client configuration."""

    def __init__(self, message: str):
        super().__init__(message, 0, "CONFIGURATION_ERROR")


class NetworkError(FortemError):
    """Transport failure (connection issues, timeouts)."""

    def __init__(self, message: str):
        super().__init__(message, 0, "NETWORK_ERROR")


def is_fortem_error(error: Any) -> bool:
    """Check if error is a FortemError."""
    return isinstance(error, FortemError)
