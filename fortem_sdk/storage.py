"""
ForTem SDK Token Storage

In-memory cache for the developer access token. Tokens are never persisted.
"""

from typing import Optional


class TokenCache:
    """
    Holds an access token together with its expiry timestamp.

    The token and its expiry are always set and cleared together, so the
    cache is either fully populated or empty.
    """

    def __init__(self) -> None:
        self._access_token: Optional[str] = None
        self._expires_at: Optional[float] = None

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def expires_at(self) -> Optional[float]:
        return self._expires_at

    def is_empty(self) -> bool:
        return self._access_token is None or self._expires_at is None

    def is_expired(self, now: float, margin: float = 0) -> bool:
        """Return True if the cache is empty or ``now`` is within ``margin`` of expiry."""
        if self.is_empty():
            return True
        return now >= self._expires_at - margin  # type: ignore[operator]

    def set_token(self, access_token: str, expires_at: float) -> None:
        """Store a token with its absolute expiry (epoch seconds)."""
        self._access_token = access_token
        self._expires_at = expires_at

    def clear(self) -> None:
        """Clear the stored token."""
        self._access_token = None
        self._expires_at = None
