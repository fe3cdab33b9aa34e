"""
ForTem SDK Request Pipeline

A *fetch* is any async callable with the signature::

    await fetch(method, url, *, headers=None, content=None, files=None)

returning an ``httpx.Response``. The SDK composes fetches as decorators:

    HttpxFetch                  -> raw transport (httpx.AsyncClient)
    create_fetch_with_api_key   -> adds x-api-key and default Content-Type
    create_auth_fetch           -> adds the bearer token, retries once on 403

and ``parse_response`` turns the final response into a FortemResponse or
raises a typed error.
"""

import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    Dict,
    Mapping,
    Optional,
    Protocol,
    TypeVar,
    Union,
)

import httpx

from .constants import TOKEN_EXPIRED_STATUS
from .errors import FortemAuthError, FortemError, FortemTokenExpiredError, NetworkError
from .types import FortemResponse

if TYPE_CHECKING:
    from .auth import FortemAuth


logger = logging.getLogger("fortem_sdk")

T = TypeVar("T")

HeaderTypes = Union[httpx.Headers, Mapping[str, str]]
RequestContent = Union[str, bytes]
RequestFiles = Mapping[str, Any]

# Retries allowed after a token-expired response, per logical request
MAX_TOKEN_RETRIES = 1


class Fetch(Protocol):
    """Async request function used by every layer of the SDK."""

    def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[HeaderTypes] = None,
        content: Optional[RequestContent] = None,
        files: Optional[RequestFiles] = None,
    ) -> Awaitable[httpx.Response]:
        ...


def merge_headers(*sources: Optional[HeaderTypes]) -> httpx.Headers:
    """
    Merge header sets into a new ``httpx.Headers``.

    Later sources override earlier ones key by key (case-insensitive).
    None of the sources are modified.
    """
    merged = httpx.Headers()
    for source in sources:
        if source:
            merged.update(source)
    return merged


class HttpxFetch:
    """Default transport backed by a lazily created ``httpx.AsyncClient``."""

    def __init__(self, timeout: float = 30.0) -> None:
        self._timeout = timeout
        self._http_client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[HeaderTypes] = None,
        content: Optional[RequestContent] = None,
        files: Optional[RequestFiles] = None,
    ) -> httpx.Response:
        try:
            return await self._get_client().request(
                method,
                url,
                headers=headers,
                content=content,
                files=files,
            )
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request timeout after {self._timeout}s") from e
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None


def create_fetch_with_api_key(
    api_key: str,
    fetch: Optional[Fetch] = None,
    default_headers: Optional[HeaderTypes] = None,
) -> Fetch:
    """
    Wrap ``fetch`` so every request carries the developer API key.

    Content-Type defaults to ``application/json`` unless the caller set one.
    Multipart uploads never carry a caller or default Content-Type; the
    transport writes the multipart boundary itself.
    """
    fetch_fn: Fetch = fetch if fetch is not None else HttpxFetch()

    async def fetch_with_api_key(
        method: str,
        url: str,
        *,
        headers: Optional[HeaderTypes] = None,
        content: Optional[RequestContent] = None,
        files: Optional[RequestFiles] = None,
    ) -> httpx.Response:
        merged = merge_headers(default_headers, headers)
        merged["x-api-key"] = api_key

        if files:
            # httpx writes the multipart Content-Type with its boundary
            merged.pop("content-type", None)
        elif "content-type" not in merged:
            merged["Content-Type"] = "application/json"

        return await fetch_fn(method, url, headers=merged, content=content, files=files)

    return fetch_with_api_key


def create_auth_fetch(fetch: Fetch, auth: "FortemAuth") -> Fetch:
    """
    Wrap ``fetch`` with bearer-token authentication.

    A 403 response means the token was consumed or expired: the cached token
    is dropped and the identical request is sent once more with a fresh
    token. Whatever the second attempt returns goes back to the caller.
    """

    async def auth_fetch(
        method: str,
        url: str,
        *,
        headers: Optional[HeaderTypes] = None,
        content: Optional[RequestContent] = None,
        files: Optional[RequestFiles] = None,
    ) -> httpx.Response:
        attempt = 0
        while True:
            token = await auth.get_valid_token()
            response = await fetch(
                method,
                url,
                headers=merge_headers(headers, {"Authorization": f"Bearer {token}"}),
                content=content,
                files=files,
            )

            if response.status_code != TOKEN_EXPIRED_STATUS or attempt >= MAX_TOKEN_RETRIES:
                return response

            attempt += 1
            logger.debug("Token rejected for %s %s, retrying with a fresh token", method, url)
            auth.clear_token()

    return auth_fetch


def parse_response(
    response: httpx.Response,
    parser: Optional[Callable[[Any], T]] = None,
) -> FortemResponse[T]:
    """
    Parse a JSON response into a FortemResponse.

    Raises:
        FortemAuthError: on 401
        FortemTokenExpiredError: on 403
        FortemError: on any other non-2xx status
        json.JSONDecodeError: if the body is not JSON
    """
    body = response.json()

    if response.is_success:
        if not isinstance(body, dict):
            return FortemResponse(status_code=response.status_code, data=body)
        return FortemResponse.from_dict(body, parser)

    error_data: Dict[str, Any] = body if isinstance(body, dict) else {}
    message = error_data.get("message")
    if message is None:
        message = error_data.get("error")
    if message is None:
        message = f"Request failed with status {response.status_code}"
    code = error_data.get("code")

    logger.debug("Request failed: %s %s", response.status_code, message)

    if response.status_code == 401:
        raise FortemAuthError(str(message))
    if response.status_code == TOKEN_EXPIRED_STATUS:
        raise FortemTokenExpiredError(str(message), code)
    raise FortemError(str(message), response.status_code, code)
