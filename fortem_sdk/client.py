"""
ForTem SDK Client

Async client for the ForTem developer API. All sub-modules share one
authenticated fetch, and therefore one access token cache.
"""

import logging
from typing import Any, Optional

from .auth import FortemAuth
from .collections import FortemCollections
from .constants import DEFAULT_NETWORK, NETWORK_CONFIGS
from .errors import ConfigurationError
from .fetch import Fetch, HttpxFetch, create_auth_fetch, create_fetch_with_api_key
from .items import FortemItems
from .storage import TokenCache
from .types import FortemConfig, FortemNetwork, NetworkConfig
from .users import FortemUsers


logger = logging.getLogger("fortem_sdk")


class FortemClient:
    """
    ForTem Client - SDK entry point.

    Usage::

        async with FortemClient(FortemConfig(api_key="developer_...")) as client:
            collections = await client.collections.list()
    """

    def __init__(self, config: FortemConfig) -> None:
        """Initialize the ForTem client."""
        self._validate_config(config)

        self._debug = config.debug
        self._network: FortemNetwork = config.network or DEFAULT_NETWORK
        self._network_config: NetworkConfig = NETWORK_CONFIGS[self._network]

        # Only a transport we created is ours to close
        self._owned_fetch: Optional[HttpxFetch] = None
        base_fetch: Fetch
        if config.fetch is not None:
            base_fetch = config.fetch
        else:
            self._owned_fetch = HttpxFetch(timeout=config.timeout)
            base_fetch = self._owned_fetch

        self._fetch = create_fetch_with_api_key(config.api_key, base_fetch, config.headers)
        self._token_cache = TokenCache()

        # Sub-modules
        api_base_url = self._network_config.api_base_url
        self.auth = FortemAuth(api_base_url, self._fetch, self._token_cache)
        self._auth_fetch = create_auth_fetch(self._fetch, self.auth)
        self.users = FortemUsers(api_base_url, self._auth_fetch)
        self.collections = FortemCollections(api_base_url, self._auth_fetch, self.auth)
        self.items = FortemItems(api_base_url, self._auth_fetch, self.auth)

        self._log(f"FortemClient initialized (network={self._network})")

    def _validate_config(self, config: FortemConfig) -> None:
        """Validate configuration."""
        if not config.api_key or not isinstance(config.api_key, str):
            raise ConfigurationError("api_key is required")
        if not config.api_key.strip():
            raise ConfigurationError("api_key cannot be empty")
        if config.network and config.network not in NETWORK_CONFIGS:
            raise ConfigurationError(
                f"Unknown network {config.network!r}. "
                f"Expected one of: {', '.join(NETWORK_CONFIGS)}"
            )

    def _log(self, message: str, *args: Any) -> None:
        """Log debug message."""
        if self._debug:
            logger.debug(f"[ForTem] {message}", *args)

    @property
    def network(self) -> FortemNetwork:
        """Network this client talks to."""
        return self._network

    @property
    def api_base_url(self) -> str:
        """API base URL for the current network."""
        return self._network_config.api_base_url

    @property
    def service_url(self) -> str:
        """Service URL for the current network."""
        return self._network_config.service_url

    async def close(self) -> None:
        """Close the HTTP client, if the client created one."""
        if self._owned_fetch is not None:
            await self._owned_fetch.close()
            self._log("FortemClient closed")

    async def __aenter__(self) -> "FortemClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


def create_fortem_client(config: FortemConfig) -> FortemClient:
    """Create a new ForTem client."""
    return FortemClient(config)
