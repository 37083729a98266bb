"""Factory for creating configured listing sessions.

This module builds the record client, orchestrator and listing session
for one wallet from the persistence and listing configuration sections.
"""

import logging
from typing import Optional

import httpx

from ...domain.lifecycle import OrderLifecycleOrchestrator
from ...domain.listing import ListingSession
from ...services.interfaces import ExchangeProtocolInterface
from ...services.persistence import OrderRecordClient
from ..config.loader import ConfigLoader

logger = logging.getLogger(__name__)


class ListingSessionFactory:
    """Factory for creating listing sessions from configuration."""

    @staticmethod
    def create_record_client(
        config_loader: ConfigLoader,
        client: Optional[httpx.AsyncClient] = None,
    ) -> OrderRecordClient:
        """Create the record client for the configured endpoint.

        Parameters
        ----------
        config_loader : ConfigLoader
            Loader with access to the ``persistence`` section
        client : Optional[httpx.AsyncClient]
            Shared HTTP client, opened per save when omitted

        Returns
        -------
        OrderRecordClient
            Client posting to ``persistence.endpoint_url``
        """
        persistence_config = config_loader.get_persistence_config()
        logger.debug(
            f"Order records go to {persistence_config.endpoint_url}"
        )
        return OrderRecordClient(persistence_config, client=client)

    @staticmethod
    def create_from_config(
        config_loader: ConfigLoader,
        protocol: ExchangeProtocolInterface,
        account_address: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> ListingSession:
        """Create a listing session with configured defaults.

        The session starts with ``listing.default_expiry`` selected and
        in ``listing.currency_mode``, and stores its records through an
        ``OrderRecordClient`` built from the ``persistence`` section.

        Parameters
        ----------
        config_loader : ConfigLoader
            Configuration loader instance
        protocol : ExchangeProtocolInterface
            Exchange protocol SDK bound to the user's wallet
        account_address : Optional[str]
            Connected account, if any
        client : Optional[httpx.AsyncClient]
            Shared HTTP client for the record client

        Returns
        -------
        ListingSession
            New session; sessions are never cached or reused

        Raises
        ------
        ValueError
            If either configuration section is invalid

        Examples
        --------
        >>> session = ListingSessionFactory.create_from_config(
        ...     ConfigLoader(), protocol, account_address="0xAb..."
        ... )
        >>> session.expiry
        <ExpiryOption.NONE: 0>
        """
        listing_config = config_loader.get_listing_config()
        record_client = ListingSessionFactory.create_record_client(
            config_loader, client=client
        )
        orchestrator = OrderLifecycleOrchestrator(protocol, record_client)

        logger.info(
            "Listing session ready: expiry "
            f"{listing_config.default_expiry.name}, currency "
            f"{listing_config.currency_mode.value}"
        )
        return ListingSession(
            orchestrator,
            account_address=account_address,
            expiry=listing_config.default_expiry,
            currency_mode=listing_config.currency_mode,
        )
