"""
ForTem SDK Authentication

Developer authentication is a two-step challenge: request a nonce, then
exchange it for a short-lived access token. FortemAuth runs both steps and
caches the resulting token.
"""

import asyncio
import json
import logging
import time
from typing import Callable, Optional

from .constants import API_PREFIX, TOKEN_EXPIRY_MARGIN, TOKEN_TTL
from .errors import FortemAuthError
from .fetch import Fetch, parse_response
from .storage import TokenCache
from .types import AccessTokenResponse, NonceResponse


logger = logging.getLogger("fortem_sdk")


class FortemAuth:
    """
    Access token manager.

    ``fetch`` must carry the API key (see ``create_fetch_with_api_key``); the
    auth endpoints do not take a bearer token.
    """

    def __init__(
        self,
        api_base_url: str,
        fetch: Fetch,
        cache: Optional[TokenCache] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._api_base_url = api_base_url
        self._fetch = fetch
        self._cache = cache if cache is not None else TokenCache()
        self._clock = clock
        self._refresh_lock: Optional[asyncio.Lock] = None
        self._refresh_loop: Optional[asyncio.AbstractEventLoop] = None

    async def get_nonce(self) -> NonceResponse:
        """
        Step 1: request an authentication nonce.

        Raises:
            FortemAuthError: if the API key is rejected
        """
        response = await self._fetch("POST", f"{self._api_base_url}{API_PREFIX}/auth/nonce")
        result = parse_response(response, NonceResponse.from_dict)
        if result.data is None:
            raise FortemAuthError("nonce missing from response")
        return result.data

    async def get_access_token(self, nonce: str) -> AccessTokenResponse:
        """
        Step 2: exchange a nonce for an access token.

        The token is cached and reused until it is about to expire.

        Args:
            nonce: The nonce obtained from get_nonce()
        """
        if not nonce:
            raise FortemAuthError("nonce is required")

        response = await self._fetch(
            "POST",
            f"{self._api_base_url}{API_PREFIX}/auth/access-token",
            content=json.dumps({"nonce": nonce}),
        )
        result = parse_response(response, AccessTokenResponse.from_dict)
        if result.data is None or not result.data.access_token:
            raise FortemAuthError("access token missing from response")

        self._cache.set_token(result.data.access_token, self._clock() + TOKEN_TTL)
        return result.data

    def get_token(self) -> Optional[str]:
        """
        Return the cached access token, or None.

        A token within TOKEN_EXPIRY_MARGIN of its expiry counts as expired
        and is evicted from the cache by this call.
        """
        if self._cache.is_empty():
            return None

        if self._cache.is_expired(self._clock(), TOKEN_EXPIRY_MARGIN):
            self._cache.clear()
            return None

        return self._cache.access_token

    async def get_valid_token(self) -> str:
        """
        Return a usable access token, running the nonce exchange if needed.

        Concurrent callers share a single exchange.
        """
        cached = self.get_token()
        if cached:
            return cached

        async with self._get_refresh_lock():
            # Another caller may have refreshed while we waited
            cached = self.get_token()
            if cached:
                return cached

            logger.debug("Refreshing access token")
            nonce = await self.get_nonce()
            token = await self.get_access_token(nonce.nonce)
            return token.access_token

    def _get_refresh_lock(self) -> asyncio.Lock:
        """Get the refresh lock for the running event loop."""
        loop = asyncio.get_running_loop()
        if self._refresh_lock is None or self._refresh_loop is not loop:
            self._refresh_lock = asyncio.Lock()
            self._refresh_loop = loop
        return self._refresh_lock

    def clear_token(self) -> None:
        """Clear the cached token."""
        self._cache.clear()
