"""
Collections API - listing and creating NFT collections.
"""

import json
import logging
from typing import List

from .auth import FortemAuth
from .constants import API_PREFIX
from .fetch import Fetch, parse_response
from .types import Collection, CreateCollectionParams, FortemResponse


logger = logging.getLogger("fortem_sdk")


class FortemCollections:
    """Collection operations. ``fetch`` must be an authenticated fetch."""

    def __init__(self, api_base_url: str, fetch: Fetch, auth: FortemAuth) -> None:
        self._api_base_url = api_base_url
        self._fetch = fetch
        self._auth = auth

    async def list(self) -> FortemResponse[List[Collection]]:
        """List all collections."""
        response = await self._fetch("GET", f"{self._api_base_url}{API_PREFIX}/collections")
        return parse_response(
            response, lambda data: [Collection.from_dict(c) for c in data or []]
        )

    async def create(self, params: CreateCollectionParams) -> FortemResponse[Collection]:
        """
        Create a new collection.

        Minting consumes the current access token, so the cached token is
        dropped once the collection is created.
        """
        response = await self._fetch(
            "POST",
            f"{self._api_base_url}{API_PREFIX}/collections",
            content=json.dumps(params.to_dict()),
        )
        result = parse_response(response, Collection.from_dict)

        logger.debug("Collection created, clearing access token")
        self._auth.clear_token()

        return result
