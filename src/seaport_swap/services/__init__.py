"""Service layer: collaborator interfaces and the record persistence client."""

from .interfaces import (
    ActionSequence,
    ExchangeProtocolInterface,
    OrderRecordStoreInterface,
    PendingAction,
)
from .persistence import OrderRecordClient

__all__ = [
    "ActionSequence",
    "ExchangeProtocolInterface",
    "OrderRecordClient",
    "OrderRecordStoreInterface",
    "PendingAction",
]
