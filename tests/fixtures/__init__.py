"""Test fixtures for Seaport Swap.

This module provides reusable test data creators for items, signed
orders and a fake exchange protocol. All fixtures follow a consistent
pattern:
- Sensible defaults that can be overridden
- Fakes that record the calls made to them
- Test data constants for typical values

Example usage:
    >>> from tests.fixtures import create_native_item, FakeExchangeProtocol
    >>>
    >>> eth = create_native_item()
    >>> protocol = FakeExchangeProtocol(create_error=WalletRejection())
"""

from .swap_data import (
    ONE_ETH,
    TEST_ACCOUNT,
    TEST_NFT_CONTRACT,
    TEST_NOW,
    TEST_SIGNATURE,
    TEST_WETH_CONTRACT,
    FakeAction,
    FakeExchangeProtocol,
    FakeTransaction,
    RecordingStore,
    WalletRejection,
    create_native_item,
    create_nft_item,
    create_signed_order,
    create_weth_item,
)

__all__ = [
    "ONE_ETH",
    "TEST_ACCOUNT",
    "TEST_NFT_CONTRACT",
    "TEST_NOW",
    "TEST_SIGNATURE",
    "TEST_WETH_CONTRACT",
    "FakeAction",
    "FakeExchangeProtocol",
    "FakeTransaction",
    "RecordingStore",
    "WalletRejection",
    "create_native_item",
    "create_nft_item",
    "create_signed_order",
    "create_weth_item",
]
