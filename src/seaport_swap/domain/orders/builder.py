"""Order parameter construction.

Turns the current selections and chosen duration into the input of the
exchange protocol's create-order call.
"""

import math
from typing import Sequence

from ..items.models import Item
from .models import Fee, OrderParameters

# Platform fee charged on every order
PLATFORM_FEE_RECIPIENT = "0x0c0d274060766d0F8DcDebc8c4B305a3e8a676C0"
PLATFORM_FEE_BASIS_POINTS = 2

PLATFORM_FEE = Fee(
    recipient=PLATFORM_FEE_RECIPIENT,
    basis_points=PLATFORM_FEE_BASIS_POINTS,
)


def build_order_parameters(
    offer: Sequence[Item],
    consideration: Sequence[Item],
    duration_seconds: int,
    current_time_seconds: float,
) -> OrderParameters:
    """Build protocol order parameters from the current selections.

    Parameters
    ----------
    offer : Sequence[Item]
        Offer items in display order
    consideration : Sequence[Item]
        Consideration items in display order
    duration_seconds : int
        Order lifetime in seconds; 0 means the order never expires
    current_time_seconds : float
        Current unix time, fractional seconds allowed

    Returns
    -------
    OrderParameters
        Each item's ``input_item`` mapped through unchanged and in order,
        the platform fee as the only fee entry, and an absolute
        ``end_time`` of ``floor(current_time_seconds) + duration_seconds``
        when a duration is set.

    Raises
    ------
    ValueError
        If ``duration_seconds`` is negative

    Notes
    -----
    Empty offer or consideration sides are accepted here; callers gate
    submission on both sides being non-empty.

    Examples
    --------
    >>> params = build_order_parameters([eth], [nft], 86400, 1700000000.7)
    >>> params.end_time
    1700086400
    >>> params.fees[0].basis_points
    2
    """
    if duration_seconds < 0:
        raise ValueError(
            f"Duration must be non-negative, got {duration_seconds}"
        )

    end_time = None
    if duration_seconds > 0:
        end_time = math.floor(current_time_seconds) + int(duration_seconds)

    return OrderParameters(
        offer=tuple(item.input_item for item in offer),
        consideration=tuple(item.input_item for item in consideration),
        fees=(PLATFORM_FEE,),
        end_time=end_time,
    )
