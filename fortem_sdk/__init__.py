"""
ForTem Python SDK

Async client for the ForTem developer API: nonce-based authentication,
wallet lookups, collection management and item minting, with access token
caching and automatic refresh.
"""

from .client import FortemClient, create_fortem_client
from .auth import FortemAuth
from .collections import FortemCollections
from .items import FortemItems
from .users import FortemUsers
from .fetch import (
    Fetch,
    HttpxFetch,
    create_auth_fetch,
    create_fetch_with_api_key,
    parse_response,
)
from .storage import TokenCache
from .types import (
    FortemConfig,
    FortemNetwork,
    FortemResponse,
    NetworkConfig,
    NonceResponse,
    AccessTokenResponse,
    UserResponse,
    Collection,
    CollectionLink,
    CreateCollectionParams,
    Item,
    ItemAttribute,
    ItemOwner,
    CreateItemParams,
    ImageUploadResponse,
)
from .errors import (
    FortemError,
    FortemAuthError,
    FortemTokenExpiredError,
    ConfigurationError,
    NetworkError,
    is_fortem_error,
)
from .constants import NETWORK_CONFIGS, DEFAULT_NETWORK

__version__ = "0.1.0"
__all__ = [
    # Client
    "FortemClient",
    "create_fortem_client",
    # Sub-modules
    "FortemAuth",
    "FortemCollections",
    "FortemItems",
    "FortemUsers",
    # Request pipeline
    "Fetch",
    "HttpxFetch",
    "create_auth_fetch",
    "create_fetch_with_api_key",
    "parse_response",
    "TokenCache",
    # Types
    "FortemConfig",
    "FortemNetwork",
    "FortemResponse",
    "NetworkConfig",
    "NonceResponse",
    "AccessTokenResponse",
    "UserResponse",
    "Collection",
    "CollectionLink",
    "CreateCollectionParams",
    "Item",
    "ItemAttribute",
    "ItemOwner",
    "CreateItemParams",
    "ImageUploadResponse",
    # Errors
    "FortemError",
    "FortemAuthError",
    "FortemTokenExpiredError",
    "ConfigurationError",
    "NetworkError",
    "is_fortem_error",
    # Constants
    "NETWORK_CONFIGS",
    "DEFAULT_NETWORK",
]
