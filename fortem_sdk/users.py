"""
Users API - wallet address lookups.
"""

from urllib.parse import quote

from .constants import API_PREFIX
from .fetch import Fetch, parse_response
from .types import FortemResponse, UserResponse


class FortemUsers:
    """User operations. ``fetch`` must be an authenticated fetch."""

    def __init__(self, api_base_url: str, fetch: Fetch) -> None:
        self._api_base_url = api_base_url
        self._fetch = fetch

    async def verify(self, wallet_address: str) -> FortemResponse[UserResponse]:
        """
        Check whether a wallet address belongs to a registered ForTem user.

        Args:
            wallet_address: The wallet address to verify

        Raises:
            FortemError: 404 if the address is unknown
        """
        response = await self._fetch(
            "GET",
            f"{self._api_base_url}{API_PREFIX}/users/{quote(wallet_address, safe='')}",
        )
        return parse_response(response, UserResponse.from_dict)
