"""
Items API - redeem lookups, minting and image uploads.
"""

import json
import logging
from typing import BinaryIO, Union
from urllib.parse import quote

from .auth import FortemAuth
from .constants import API_PREFIX
from .fetch import Fetch, parse_response
from .types import CreateItemParams, FortemResponse, ImageUploadResponse, Item


logger = logging.getLogger("fortem_sdk")

FileContent = Union[bytes, BinaryIO]


class FortemItems:
    """Item operations. ``fetch`` must be an authenticated fetch."""

    def __init__(self, api_base_url: str, fetch: Fetch, auth: FortemAuth) -> None:
        self._api_base_url = api_base_url
        self._fetch = fetch
        self._auth = auth

    def _items_url(self, collection_id: int) -> str:
        return f"{self._api_base_url}{API_PREFIX}/collections/{collection_id}/items"

    async def get(self, collection_id: int, code: str) -> FortemResponse[Item]:
        """
        Get an item by its redeem code.

        Args:
            collection_id: The collection ID
            code: The redeem code
        """
        response = await self._fetch(
            "GET", f"{self._items_url(collection_id)}/{quote(code, safe='')}"
        )
        return parse_response(response, Item.from_dict)

    async def create(
        self, collection_id: int, params: CreateItemParams
    ) -> FortemResponse[Item]:
        """
        Mint a new item in a collection.

        Minting consumes the current access token, so the cached token is
        dropped once the item is created.
        """
        response = await self._fetch(
            "POST",
            self._items_url(collection_id),
            content=json.dumps(params.to_dict()),
        )
        result = parse_response(response, Item.from_dict)

        logger.debug("Item created in collection %s, clearing access token", collection_id)
        self._auth.clear_token()

        return result

    async def upload_image(
        self,
        collection_id: int,
        file: FileContent,
        filename: str = "image",
        content_type: str = "application/octet-stream",
    ) -> FortemResponse[ImageUploadResponse]:
        """
        Upload an item image as multipart form data (field ``file``).

        Args:
            collection_id: The collection ID
            file: Image bytes or a binary file object
            filename: File name reported in the multipart part
            content_type: MIME type of the image, e.g. ``image/png``
        """
        # Read streams up front so the request can be replayed on a token retry
        data = file if isinstance(file, bytes) else file.read()

        response = await self._fetch(
            "PUT",
            f"{self._items_url(collection_id)}/image-upload",
            files={"file": (filename, data, content_type)},
        )
        return parse_response(response, ImageUploadResponse.from_dict)
