"""
Shared fixtures for ForTem SDK tests.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx
import pytest

from fortem_sdk import FortemClient, FortemConfig


TEST_API_KEY = "developer_test_dummy_key"
TESTNET_API_URL = "https://testnet-api.fortem.gg/api/v1/developers"


@dataclass
class FetchCall:
    """A request recorded by MockFetch."""

    method: str
    url: str
    headers: httpx.Headers
    content: Optional[Any] = None
    files: Optional[Any] = None


class MockFetch:
    """
    Fetch stand-in that replays canned responses in order.

    Each response is ``{"status": int, "body": Any}``. Every call yields to
    the event loop once, like a real transport would.
    """

    def __init__(self, responses: List[Dict[str, Any]]) -> None:
        self._responses = list(responses)
        self.calls: List[FetchCall] = []

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Any = None,
        content: Any = None,
        files: Any = None,
    ) -> httpx.Response:
        self.calls.append(FetchCall(method, url, httpx.Headers(headers or {}), content, files))
        await asyncio.sleep(0)
        res = self._responses[len(self.calls) - 1]
        return httpx.Response(res["status"], json=res["body"])

    @property
    def call_count(self) -> int:
        return len(self.calls)


class FakeClock:
    """Manually advanced clock (epoch seconds)."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def ok(data: Any, status: int = 200) -> Dict[str, Any]:
    """Canned success response with the standard envelope."""
    return {"status": status, "body": {"statusCode": status, "data": data}}


def fail(status: int, message: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    """Canned error response."""
    body: Dict[str, Any] = {"statusCode": status, **extra}
    if message is not None:
        body["message"] = message
    return {"status": status, "body": body}


# Nonce + access token responses consumed by a cold-cache get_valid_token()
def auth_responses(token: str = "token-1", nonce: str = "nonce-1") -> List[Dict[str, Any]]:
    return [ok({"nonce": nonce}), ok({"accessToken": token})]


@pytest.fixture
def make_client():
    """Factory for testnet clients backed by a MockFetch."""

    def _make(responses: List[Dict[str, Any]]):
        mock_fetch = MockFetch(responses)
        client = FortemClient(FortemConfig(
            api_key=TEST_API_KEY,
            network="testnet",
            fetch=mock_fetch,
        ))
        return client, mock_fetch

    return _make


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
