"""Item models for the offer and consideration sides of a swap.

This module contains the value objects the asset picker hands to the
item set manager: the protocol item types, the currency mode flag and
the immutable ``Item`` itself.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Optional


class ItemType(IntEnum):
    """Protocol item types.

    The numeric values match the exchange protocol's item type
    numbering, so they can be written into order descriptors as-is.

    Attributes
    ----------
    NATIVE : int
        Native chain currency (e.g. ETH)
    ERC20 : int
        Fungible token (e.g. WETH)
    ERC721 : int
        Non-fungible token
    ERC1155 : int
        Semi-fungible token
    ERC721_WITH_CRITERIA : int
        Any ERC721 from a collection matching a criteria root
    ERC1155_WITH_CRITERIA : int
        Any ERC1155 from a collection matching a criteria root
    """

    NATIVE = 0
    ERC20 = 1
    ERC721 = 2
    ERC1155 = 3
    ERC721_WITH_CRITERIA = 4
    ERC1155_WITH_CRITERIA = 5


class CurrencyMode(str, Enum):
    """Whether an order is priced in native currency or its wrapped token.

    Attributes
    ----------
    NATIVE : str
        Native currency; fungible token items are not allowed
    WRAPPED : str
        Wrapped fungible currency; native currency items are not allowed

    Notes
    -----
    The two modes are mutually exclusive within one order. Switching
    mode drops every item of the now-forbidden kind from both sides.
    """

    NATIVE = "native"
    WRAPPED = "wrapped"

    @property
    def excluded_item_type(self) -> ItemType:
        """Item type that may not appear in an order of this mode."""
        if self is CurrencyMode.WRAPPED:
            return ItemType.NATIVE
        return ItemType.ERC20


class ItemSide(str, Enum):
    """Which side of the order an item belongs to."""

    OFFER = "offer"
    CONSIDERATION = "consideration"


@dataclass(frozen=True, eq=False)
class Item:
    """One exchanged asset.

    Items are immutable and compare by identity, so two items with the
    same token are still distinct selections.

    Attributes
    ----------
    item_type : ItemType
        Kind of asset
    input_item : Dict[str, Any]
        Protocol-ready descriptor, passed verbatim to the order builder
    token : Optional[str]
        Token contract address, None for native currency
    identifier : Optional[str]
        Token id for non-fungible and semi-fungible tokens
    amount : Optional[str]
        Amount in base units, as a decimal string
    end_amount : Optional[str]
        End of the amount range when the amount changes over the order's
        lifetime
    name : Optional[str]
        Display name
    symbol : Optional[str]
        Display ticker symbol
    image_url : Optional[str]
        Display image

    Examples
    --------
    >>> eth = Item(
    ...     item_type=ItemType.NATIVE,
    ...     amount="1000000000000000000",
    ...     input_item={"amount": "1000000000000000000"},
    ... )
    >>> eth.is_currency
    True
    """

    item_type: ItemType
    input_item: Dict[str, Any]
    token: Optional[str] = None
    identifier: Optional[str] = None
    amount: Optional[str] = None
    end_amount: Optional[str] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    image_url: Optional[str] = None

    def __post_init__(self):
        if self.item_type != ItemType.NATIVE and not self.token:
            raise ValueError(
                f"Token address required for {self.item_type.name} items"
            )

    @property
    def is_currency(self) -> bool:
        """Whether this item is native currency or a fungible token."""
        return self.item_type in (ItemType.NATIVE, ItemType.ERC20)

    def to_dict(self) -> Dict[str, Any]:
        """Render the item in the record's JSON shape."""
        data: Dict[str, Any] = {
            "type": int(self.item_type),
            "inputItem": self.input_item,
        }
        optional = {
            "token": self.token,
            "identifier": self.identifier,
            "amount": self.amount,
            "endAmount": self.end_amount,
            "name": self.name,
            "symbol": self.symbol,
            "imageUrl": self.image_url,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data
