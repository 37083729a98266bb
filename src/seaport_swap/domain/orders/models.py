"""Order data structures passed between builder, orchestrator and storage.

``OrderParameters`` is what the builder produces, ``SignedOrder`` is what
the exchange protocol hands back after creation, and ``OrderRecord`` is
the flat unit that gets persisted.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple

from ..items.models import Item


class ExpiryOption(IntEnum):
    """Order lifetimes offered by the duration selector, in seconds.

    Attributes
    ----------
    NONE : int
        The order never expires
    ONE_DAY : int
        86400 seconds
    THREE_DAYS : int
        259200 seconds
    SEVEN_DAYS : int
        604800 seconds
    THIRTY_DAYS : int
        2592000 seconds, shown as "1 month"
    """

    NONE = 0
    ONE_DAY = 86400
    THREE_DAYS = 259200
    SEVEN_DAYS = 604800
    THIRTY_DAYS = 2592000


@dataclass(frozen=True)
class Fee:
    """A fee line item attached to an order.

    Attributes
    ----------
    recipient : str
        Address receiving the fee
    basis_points : int
        Fee rate in hundredths of a percent of each consideration amount
    """

    recipient: str
    basis_points: int

    def to_dict(self) -> Dict[str, Any]:
        return {"recipient": self.recipient, "basisPoints": self.basis_points}


@dataclass(frozen=True)
class OrderParameters:
    """Protocol input for one order creation.

    Built fresh for every submission and never mutated afterwards.

    Attributes
    ----------
    offer : Tuple[Dict[str, Any], ...]
        Offer descriptors, in selection order
    consideration : Tuple[Dict[str, Any], ...]
        Consideration descriptors, in selection order
    fees : Tuple[Fee, ...]
        Fee line items; the builder always supplies exactly one
    end_time : Optional[int]
        Absolute expiry as a unix timestamp, None for no expiry
    """

    offer: Tuple[Dict[str, Any], ...]
    consideration: Tuple[Dict[str, Any], ...]
    fees: Tuple[Fee, ...]
    end_time: Optional[int] = None

    def to_create_order_input(self) -> Dict[str, Any]:
        """Render the create-order call shape.

        Returns
        -------
        Dict[str, Any]
            ``{"offer", "consideration", "fees"}`` plus ``"endTime"`` as a
            decimal string when the order expires. The key is left out
            entirely for orders without expiry.
        """
        create_input: Dict[str, Any] = {
            "offer": list(self.offer),
            "consideration": list(self.consideration),
            "fees": [fee.to_dict() for fee in self.fees],
        }
        if self.end_time is not None:
            create_input["endTime"] = str(self.end_time)
        return create_input


@dataclass(frozen=True)
class SignedOrder:
    """Fully signed order returned by the protocol's creation actions.

    Attributes
    ----------
    parameters : Dict[str, Any]
        Protocol order parameters as echoed by the protocol. Opaque to
        this system.
    signature : str
        Offerer signature over the order
    """

    parameters: Dict[str, Any]
    signature: str

    def to_dict(self) -> Dict[str, Any]:
        return {"parameters": self.parameters, "signature": self.signature}


@dataclass(frozen=True)
class OrderRecord:
    """Persisted result of one successful submission.

    The selected items are kept next to the signed order for display;
    the signed order holds only protocol-shaped descriptors.

    Attributes
    ----------
    id : str
        Identifier derived from the order signature
    order : SignedOrder
        The signed order that was fulfilled
    offers : List[Item]
        Offer items as selected
    considerations : List[Item]
        Consideration items as selected
    """

    id: str
    order: SignedOrder
    offers: List[Item] = field(default_factory=list)
    considerations: List[Item] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Render the record as the storage endpoint's JSON body."""
        return {
            "id": self.id,
            "order": self.order.to_dict(),
            "offers": [item.to_dict() for item in self.offers],
            "considerations": [
                item.to_dict() for item in self.considerations
            ],
        }
