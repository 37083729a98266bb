"""Listing session: the caller side of one order-building flow.

The session ties together the item set manager, the duration selector
and the orchestrator, and owns the busy and success flags the order
form observes. It is the single place that gates the submit trigger.
"""

import logging
import time
from typing import Optional, Union

from ..exceptions import SubmissionInProgressError
from ..items.item_set_manager import ItemSetManager
from ..items.models import CurrencyMode, Item, ItemSide
from ..lifecycle.orchestrator import OrderLifecycleOrchestrator
from ..orders.builder import build_order_parameters
from ..orders.models import ExpiryOption, OrderRecord

logger = logging.getLogger(__name__)


class ListingSession:
    """One user's order-building session.

    Parameters
    ----------
    orchestrator : OrderLifecycleOrchestrator
        Orchestrator submissions are sent through
    account_address : Optional[str]
        Connected account, None until a wallet is connected
    expiry : ExpiryOption
        Initially selected duration, no expiry by default
    currency_mode : CurrencyMode
        Initial currency mode, native by default

    Attributes
    ----------
    items : ItemSetManager
        Offer and consideration selections
    expiry : ExpiryOption
        Selected duration
    loading : bool
        True while a submission is in flight
    transaction_success : bool
        True once the latest submission completed
    last_record : Optional[OrderRecord]
        Record produced by the latest successful submission

    Notes
    -----
    Only one submission runs at a time. A second ``confirm_listing``
    while ``loading`` is set raises ``SubmissionInProgressError`` without
    touching the orchestrator.

    On failure the session clears ``loading`` so the trigger is enabled
    again, leaves ``transaction_success`` unset, and re-raises for the
    caller to surface.

    Examples
    --------
    >>> session = ListingSession(orchestrator, account_address="0xAb...")
    >>> session.add_item("offer", eth_item)
    >>> session.add_item("consideration", nft_item)
    >>> session.select_expiry(86400)
    >>> record = await session.confirm_listing()
    >>> session.transaction_success
    True
    """

    def __init__(
        self,
        orchestrator: OrderLifecycleOrchestrator,
        account_address: Optional[str] = None,
        expiry: ExpiryOption = ExpiryOption.NONE,
        currency_mode: CurrencyMode = CurrencyMode.NATIVE,
    ):
        self.orchestrator = orchestrator
        self.account_address = account_address
        self.items = ItemSetManager(currency_mode)
        self.expiry = ExpiryOption(expiry)
        self.loading = False
        self.transaction_success = False
        self.last_record: Optional[OrderRecord] = None

    @property
    def can_submit(self) -> bool:
        """Whether the submit trigger is enabled."""
        return (
            bool(self.account_address)
            and bool(self.items.draft.offer)
            and bool(self.items.draft.consideration)
            and not self.loading
        )

    def connect(self, account_address: Optional[str]) -> None:
        self.account_address = account_address

    def add_item(self, side: Union[ItemSide, str], item: Item) -> None:
        self.items.add_item(side, item)

    def remove_item(self, side: Union[ItemSide, str], item: Item) -> None:
        self.items.remove_item(side, item)

    def set_currency_mode(self, mode: Union[CurrencyMode, str]) -> None:
        self.items.switch_currency_mode(mode)

    def select_expiry(self, seconds: int) -> None:
        """Select one of the offered durations.

        Raises
        ------
        ValueError
            If ``seconds`` is not an ``ExpiryOption`` value
        """
        self.expiry = ExpiryOption(int(seconds))

    async def confirm_listing(
        self, now: Optional[float] = None
    ) -> OrderRecord:
        """Build the order from the current selections and submit it.

        Parameters
        ----------
        now : Optional[float]
            Current unix time; defaults to ``time.time()``

        Returns
        -------
        OrderRecord
            Record of the created and fulfilled order

        Raises
        ------
        SubmissionInProgressError
            If a submission is already running
        NoAccountError, UserRejectedActionError, NetworkOrProtocolError
            Propagated from the orchestrator
        """
        if self.loading:
            raise SubmissionInProgressError(
                "A listing is already being submitted"
            )

        self.loading = True
        self.transaction_success = False
        try:
            offers = self.items.offer_items
            considerations = self.items.consideration_items
            params = build_order_parameters(
                offers,
                considerations,
                int(self.expiry),
                time.time() if now is None else now,
            )
            record = await self.orchestrator.submit(
                params,
                self.account_address,
                offers=offers,
                considerations=considerations,
            )
        finally:
            self.loading = False

        self.last_record = record
        self.transaction_success = True
        logger.info(f"Listing {record.id} submitted")
        return record
