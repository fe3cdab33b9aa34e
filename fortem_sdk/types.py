"""
ForTem SDK Type Definitions

Python attributes are snake_case; the API speaks camelCase, so every record
converts at the boundary with ``from_dict`` / ``to_dict``.
"""

import os
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Generic,
    List,
    Literal,
    Optional,
    TypeVar,
)

if TYPE_CHECKING:
    from .fetch import Fetch


T = TypeVar("T")

FortemNetwork = Literal["testnet", "mainnet"]


@dataclass(frozen=True)
class NetworkConfig:
    """Per-network endpoints."""

    api_base_url: str
    service_url: str


@dataclass
class FortemConfig:
    """SDK configuration options."""

    # ForTem developer API key
    api_key: str
    # Network environment (default: mainnet)
    network: FortemNetwork = "mainnet"
    # Custom fetch callable (default: httpx-based transport)
    fetch: Optional["Fetch"] = None
    # Request timeout in seconds for the default transport
    timeout: float = 30.0
    # Enable debug logging (default: False)
    debug: bool = False
    # Extra headers sent with every request
    headers: Optional[Dict[str, str]] = None

    @classmethod
    def from_env(cls, prefix: str = "FORTEM_") -> "FortemConfig":
        """
        Build a configuration from environment variables.

        Reads ``FORTEM_API_KEY``, ``FORTEM_NETWORK`` and ``FORTEM_DEBUG``.
        The key is not validated here; FortemClient does that.
        """
        debug = os.environ.get(f"{prefix}DEBUG", "").strip().lower()
        return cls(
            api_key=os.environ.get(f"{prefix}API_KEY", ""),
            network=os.environ.get(f"{prefix}NETWORK", "mainnet"),  # type: ignore[arg-type]
            debug=debug in ("1", "true", "yes", "on"),
        )


@dataclass
class FortemResponse(Generic[T]):
    """Common API response envelope."""

    status_code: int
    data: T

    @classmethod
    def from_dict(
        cls,
        body: Dict[str, Any],
        parser: Optional[Callable[[Any], T]] = None,
    ) -> "FortemResponse[T]":
        """
        Create from a response body, mapping ``data`` with ``parser``.

        A null or missing ``data`` is passed through as None.
        """
        data = body.get("data")
        return cls(
            status_code=body.get("statusCode", 0),
            data=parser(data) if parser and data is not None else data,
        )


@dataclass
class NonceResponse:
    nonce: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NonceResponse":
        return cls(nonce=data.get("nonce", ""))


@dataclass
class AccessTokenResponse:
    access_token: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccessTokenResponse":
        return cls(access_token=data.get("accessToken", ""))


@dataclass
class UserResponse:
    """Result of a wallet address lookup."""

    is_user: bool
    nickname: str = ""
    profile_image: str = ""
    wallet_address: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserResponse":
        """Create from dictionary."""
        return cls(
            is_user=data.get("isUser", False),
            nickname=data.get("nickname", ""),
            profile_image=data.get("profileImage", ""),
            wallet_address=data.get("walletAddress", ""),
        )


@dataclass
class Collection:
    """NFT collection owned by the developer."""

    id: int
    object_id: str
    name: str
    description: str = ""
    trade_volume: float = 0
    item_count: int = 0
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Collection":
        """Create from dictionary."""
        return cls(
            id=data.get("id", 0),
            object_id=data.get("objectId", ""),
            name=data.get("name", ""),
            description=data.get("description", ""),
            trade_volume=data.get("tradeVolume", 0),
            item_count=data.get("itemCount", 0),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )


@dataclass
class ItemAttribute:
    name: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ItemAttribute":
        return cls(name=data.get("name", ""), value=data.get("value", ""))


@dataclass
class ItemOwner:
    nickname: str
    wallet_address: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ItemOwner":
        return cls(
            nickname=data.get("nickname", ""),
            wallet_address=data.get("walletAddress", ""),
        )


@dataclass
class Item:
    """Minted (or minting) item within a collection."""

    id: int
    object_id: str
    name: str
    description: str = ""
    nft_number: int = 0
    item_image: str = ""
    quantity: int = 0
    attributes: List[ItemAttribute] = field(default_factory=list)
    owner: Optional[ItemOwner] = None
    status: str = "PROCESSING"
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Item":
        """Create from dictionary."""
        owner_data = data.get("owner")
        return cls(
            id=data.get("id", 0),
            object_id=data.get("objectId", ""),
            name=data.get("name", ""),
            description=data.get("description", ""),
            nft_number=data.get("nftNumber", 0),
            item_image=data.get("itemImage", ""),
            quantity=data.get("quantity", 0),
            attributes=[ItemAttribute.from_dict(a) for a in data.get("attributes") or []],
            owner=ItemOwner.from_dict(owner_data) if owner_data else None,
            status=data.get("status", "PROCESSING"),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )


@dataclass
class ImageUploadResponse:
    item_image: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImageUploadResponse":
        return cls(item_image=data.get("itemImage", ""))


@dataclass
class CollectionLink:
    """External links shown on a collection page."""

    website: Optional[str] = None
    x: Optional[str] = None
    discord: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API requests."""
        result: Dict[str, Any] = {}
        if self.website is not None:
            result["website"] = self.website
        if self.x is not None:
            result["x"] = self.x
        if self.discord is not None:
            result["discord"] = self.discord
        return result


@dataclass
class CreateCollectionParams:
    """Collection creation data."""

    name: str
    description: str
    link: Optional[CollectionLink] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API requests."""
        result: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
        }
        if self.link:
            result["link"] = self.link.to_dict()
        return result


@dataclass
class CreateItemParams:
    """Item creation (mint) data."""

    name: str
    quantity: int
    redeem_code: str
    description: str
    recipient_address: str
    item_image: Optional[str] = None
    attributes: Optional[List[ItemAttribute]] = None
    redeem_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API requests."""
        result: Dict[str, Any] = {
            "name": self.name,
            "quantity": self.quantity,
            "redeemCode": self.redeem_code,
            "description": self.description,
            "recipientAddress": self.recipient_address,
        }
        if self.item_image is not None:
            result["itemImage"] = self.item_image
        if self.attributes is not None:
            result["attributes"] = [a.to_dict() for a in self.attributes]
        if self.redeem_url is not None:
            result["redeemUrl"] = self.redeem_url
        return result
