"""Offer and consideration selection state.

This module owns the mutable selection state of one order-building
session and enforces the currency mode invariant on every mutation.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import List, Union

from ..exceptions import CurrencyModeConflictError
from .models import CurrencyMode, Item, ItemSide

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderDraft:
    """Selections of one order-building session.

    Attributes
    ----------
    offer : List[Item]
        Items the user gives up, in display order
    consideration : List[Item]
        Items the user asks for, in display order
    currency_mode : CurrencyMode
        Currency mode all currency items must agree with
    """

    offer: List[Item] = field(default_factory=list)
    consideration: List[Item] = field(default_factory=list)
    currency_mode: CurrencyMode = CurrencyMode.NATIVE


def filter_for_currency_mode(
    draft: OrderDraft, mode: CurrencyMode
) -> OrderDraft:
    """Drop every item conflicting with ``mode`` from both sides.

    Parameters
    ----------
    draft : OrderDraft
        Current selections
    mode : CurrencyMode
        Mode to switch to

    Returns
    -------
    OrderDraft
        New draft in ``mode`` with native items removed when switching
        to wrapped, and fungible token items removed when switching to
        native. Relative order of the surviving items is unchanged.

    Notes
    -----
    The filter pass always runs, even if ``draft`` is already in
    ``mode``, so a draft that somehow holds conflicting items is
    repaired rather than trusted.

    Examples
    --------
    >>> draft = OrderDraft(offer=[eth_item], consideration=[nft_item])
    >>> switched = filter_for_currency_mode(draft, CurrencyMode.WRAPPED)
    >>> switched.offer
    []
    """
    excluded = mode.excluded_item_type
    return replace(
        draft,
        offer=[item for item in draft.offer if item.item_type != excluded],
        consideration=[
            item for item in draft.consideration if item.item_type != excluded
        ],
        currency_mode=mode,
    )


class ItemSetManager:
    """Holds the offer and consideration sets of one session.

    The manager owns an ``OrderDraft`` context object and replaces it on
    every mutation. The builder and orchestrator only ever read the
    lists it hands out.

    Parameters
    ----------
    currency_mode : CurrencyMode
        Initial currency mode, native by default

    Attributes
    ----------
    draft : OrderDraft
        Current selections

    Notes
    -----
    Invariant: after every mutation no item whose type equals
    ``currency_mode.excluded_item_type`` remains on either side.

    Examples
    --------
    >>> manager = ItemSetManager()
    >>> manager.add_item("offer", eth_item)
    >>> manager.switch_currency_mode(CurrencyMode.WRAPPED)
    >>> manager.offer_items
    []
    """

    def __init__(self, currency_mode: CurrencyMode = CurrencyMode.NATIVE):
        self.draft = OrderDraft(currency_mode=currency_mode)

    @property
    def offer_items(self) -> List[Item]:
        """Copy of the offer side in display order."""
        return list(self.draft.offer)

    @property
    def consideration_items(self) -> List[Item]:
        """Copy of the consideration side in display order."""
        return list(self.draft.consideration)

    @property
    def currency_mode(self) -> CurrencyMode:
        return self.draft.currency_mode

    def add_item(self, side: Union[ItemSide, str], item: Item) -> None:
        """Append an item to one side.

        Parameters
        ----------
        side : Union[ItemSide, str]
            "offer" or "consideration"
        item : Item
            Item supplied by the asset picker

        Raises
        ------
        ValueError
            If ``side`` is not a valid side
        CurrencyModeConflictError
            If the item's type is forbidden by the current currency mode
        """
        side = ItemSide(side)
        if item.item_type == self.currency_mode.excluded_item_type:
            raise CurrencyModeConflictError(
                f"Cannot add {item.item_type.name} item while in "
                f"{self.currency_mode.value} currency mode"
            )

        items = self._items_for(side) + [item]
        self.draft = replace(self.draft, **{side.value: items})
        logger.debug(f"Added {item.item_type.name} item to {side.value}")

    def remove_item(self, side: Union[ItemSide, str], item: Item) -> None:
        """Remove an item from one side by identity.

        Removing an item that is not present is a no-op.

        Raises
        ------
        ValueError
            If ``side`` is not a valid side
        """
        side = ItemSide(side)
        items = [
            existing
            for existing in self._items_for(side)
            if existing is not item
        ]
        self.draft = replace(self.draft, **{side.value: items})

    def switch_currency_mode(self, new_mode: Union[CurrencyMode, str]) -> None:
        """Switch currency mode, discarding conflicting selections.

        The user re-adds assets of the new kind afterwards.
        """
        new_mode = CurrencyMode(new_mode)
        before = len(self.draft.offer) + len(self.draft.consideration)
        self.draft = filter_for_currency_mode(self.draft, new_mode)
        after = len(self.draft.offer) + len(self.draft.consideration)
        dropped = before - after

        logger.info(
            f"Currency mode set to {new_mode.value}, dropped {dropped} items"
        )

    def clear(self) -> None:
        """Remove all selections, keeping the currency mode."""
        self.draft = OrderDraft(currency_mode=self.currency_mode)

    def _items_for(self, side: ItemSide) -> List[Item]:
        if side is ItemSide.OFFER:
            return list(self.draft.offer)
        return list(self.draft.consideration)
