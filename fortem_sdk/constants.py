"""
ForTem SDK Constants

Network endpoints and token lifetime settings.
"""

from types import MappingProxyType
from typing import Mapping

from .types import FortemNetwork, NetworkConfig


NETWORK_CONFIGS: Mapping[str, NetworkConfig] = MappingProxyType({
    "testnet": NetworkConfig(
        api_base_url="https://testnet-api.fortem.gg",
        service_url="https://testnet.fortem.gg",
    ),
    "mainnet": NetworkConfig(
        api_base_url="https://api.fortem.gg",
        service_url="https://fortem.gg",
    ),
})

DEFAULT_NETWORK: FortemNetwork = "mainnet"

# Developer API path prefix, appended to the network's api_base_url
API_PREFIX = "/api/v1/developers"

# Access token lifetime in seconds (5 minutes)
TOKEN_TTL = 5 * 60.0
# Treat tokens as expired this many seconds before the real expiry
TOKEN_EXPIRY_MARGIN = 30.0

# Status returned when an access token was consumed or has expired
TOKEN_EXPIRED_STATUS = 403
