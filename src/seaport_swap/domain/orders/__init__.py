"""Order construction domain: order data structures and the builder."""

from .builder import PLATFORM_FEE, build_order_parameters
from .models import (
    ExpiryOption,
    Fee,
    OrderParameters,
    OrderRecord,
    SignedOrder,
)

__all__ = [
    "ExpiryOption",
    "Fee",
    "OrderParameters",
    "OrderRecord",
    "PLATFORM_FEE",
    "SignedOrder",
    "build_order_parameters",
]
