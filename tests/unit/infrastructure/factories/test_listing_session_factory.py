"""Tests for building listing sessions from configuration."""

import tempfile
from pathlib import Path

import httpx
import pytest
import yaml

from seaport_swap.domain.items import CurrencyMode
from seaport_swap.domain.listing import ListingSession
from seaport_swap.domain.orders import ExpiryOption
from seaport_swap.infrastructure.config import ConfigLoader
from seaport_swap.infrastructure.factories import ListingSessionFactory
from seaport_swap.services import OrderRecordClient
from tests.fixtures import (
    TEST_ACCOUNT,
    TEST_NOW,
    FakeExchangeProtocol,
    create_nft_item,
    create_weth_item,
)

ENDPOINT = "https://swap.example/api/orders"


@pytest.fixture
def config_path():
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".yaml", delete=False
    ) as f:
        yaml.dump(
            {
                "persistence": {
                    "endpoint_url": ENDPOINT,
                    "timeout_seconds": 2,
                },
                "listing": {
                    "default_expiry": "three_days",
                    "currency_mode": "wrapped",
                },
            },
            f,
        )
        path = Path(f.name)

    yield path

    path.unlink()


class TestListingSessionFactory:
    """Test wiring sessions from the listing and persistence sections."""

    def test_session_uses_listing_defaults(self, config_path):
        """Test the session starts from the configured selections.

        Given - Config selecting three days and the wrapped currency
        When - Factory creates a session
        Then - The session's expiry and currency mode match the config
        """
        # Given - Loader over the config
        loader = ConfigLoader(config_path)

        # When - Create session
        session = ListingSessionFactory.create_from_config(
            loader, FakeExchangeProtocol(), account_address=TEST_ACCOUNT
        )

        # Then - Configured defaults applied
        assert isinstance(session, ListingSession)
        assert session.expiry == ExpiryOption.THREE_DAYS
        assert session.items.currency_mode == CurrencyMode.WRAPPED
        assert session.account_address == TEST_ACCOUNT

    def test_record_client_uses_persistence_config(self, config_path):
        """Test the record client targets the configured endpoint."""
        loader = ConfigLoader(config_path)

        session = ListingSessionFactory.create_from_config(
            loader, FakeExchangeProtocol()
        )

        record_client = session.orchestrator.record_store
        assert isinstance(record_client, OrderRecordClient)
        assert record_client.config.endpoint_url == ENDPOINT
        assert record_client.config.timeout_seconds == 2.0

    @pytest.mark.asyncio
    async def test_confirmed_listing_posts_to_configured_endpoint(
        self, config_path
    ):
        """Test a confirmed listing is saved to the configured URL."""
        urls = []

        def handler(request):
            urls.append(str(request.url))
            return httpx.Response(200, json={"success": True})

        protocol = FakeExchangeProtocol()

        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler)
        ) as http_client:
            session = ListingSessionFactory.create_from_config(
                ConfigLoader(config_path),
                protocol,
                account_address=TEST_ACCOUNT,
                client=http_client,
            )
            session.add_item("offer", create_weth_item())
            session.add_item("consideration", create_nft_item())

            record = await session.confirm_listing(now=TEST_NOW)

        assert urls == [ENDPOINT]
        assert session.last_record is record
        expected_end = str(TEST_NOW + ExpiryOption.THREE_DAYS)
        assert protocol.create_inputs[0]["endTime"] == expected_end

    def test_invalid_listing_section(self):
        """Test an invalid listing section is reported by the factory."""
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".yaml", delete=False
        ) as f:
            yaml.dump({"listing": {"currency_mode": "usdc"}}, f)
            path = Path(f.name)

        try:
            with pytest.raises(ValueError, match="Invalid currency mode"):
                ListingSessionFactory.create_from_config(
                    ConfigLoader(path), FakeExchangeProtocol()
                )
        finally:
            path.unlink()
