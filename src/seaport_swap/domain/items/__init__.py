"""Item selection domain: asset value objects and the item set manager."""

from .item_set_manager import (
    ItemSetManager,
    OrderDraft,
    filter_for_currency_mode,
)
from .models import CurrencyMode, Item, ItemSide, ItemType

__all__ = [
    "CurrencyMode",
    "Item",
    "ItemSetManager",
    "ItemSide",
    "ItemType",
    "OrderDraft",
    "filter_for_currency_mode",
]
