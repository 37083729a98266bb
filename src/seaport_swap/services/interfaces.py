"""Abstract interfaces for the external collaborators of the swap flow.

This module defines the contracts this system relies on without owning
their implementation: the exchange protocol SDK with its multi-step
pending actions, and the order record store.

The interfaces are designed to:
- Keep wallet signing and contract calls out of the domain logic
- Enable unit testing with fakes instead of a live chain
- Support dependency injection for flexible implementations
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..domain.orders.models import OrderRecord, SignedOrder


class PendingAction(ABC):
    """One externally confirmed step of a protocol operation.

    Typical steps are token approvals, the order signature and the
    fulfillment transaction. Each may prompt the wallet and may be
    rejected by the user.

    Attributes
    ----------
    action_type : str
        Kind of step: "approval", "create" or "exchange"

    Notes
    -----
    ``perform`` raises whatever the wallet or transport raises. Wallet
    rejections are recognised by a ``code`` attribute of 4001 or
    "ACTION_REJECTED", matching EIP-1193 providers.
    """

    action_type: str = "action"

    @abstractmethod
    async def perform(self) -> Any:
        """Execute the step and return its result.

        Returns
        -------
        Any
            For the final creation step, the ``SignedOrder``. For the
            final fulfillment step, the dispatched transaction handle.
        """
        pass


@dataclass
class ActionSequence:
    """Ordered pending actions returned by a protocol operation.

    Attributes
    ----------
    actions : List[PendingAction]
        Steps to execute in order; the last one yields the operation's
        result
    """

    actions: List[PendingAction] = field(default_factory=list)


class ExchangeProtocolInterface(ABC):
    """Abstract exchange protocol SDK.

    Only the two call shapes below are relied upon. Order hashing,
    signing and contract calls stay inside the implementation.

    Examples
    --------
    >>> sequence = await protocol.create_order(create_input, account)
    >>> for action in sequence.actions:
    ...     result = await action.perform()
    """

    @abstractmethod
    async def create_order(
        self, create_input: Dict[str, Any], account_address: str
    ) -> ActionSequence:
        """Prepare the actions that create and sign an order.

        Parameters
        ----------
        create_input : Dict[str, Any]
            ``{"offer", "consideration", "endTime"?, "fees"}``
        account_address : str
            Offerer address

        Returns
        -------
        ActionSequence
            Approval actions followed by the signature action
        """
        pass

    @abstractmethod
    async def fulfill_order(
        self, order: SignedOrder, account_address: str
    ) -> ActionSequence:
        """Prepare the actions that fulfill a signed order.

        Parameters
        ----------
        order : SignedOrder
            Order produced by the creation actions
        account_address : str
            Fulfiller address

        Returns
        -------
        ActionSequence
            Approval actions followed by the exchange transaction action
        """
        pass


class OrderRecordStoreInterface(ABC):
    """Abstract destination for finished order records."""

    @abstractmethod
    async def save(self, record: OrderRecord) -> None:
        """Store a record. Must not raise."""
        pass
