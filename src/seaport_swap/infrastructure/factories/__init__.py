"""Factories wiring configured services together."""

from .listing_factory import ListingSessionFactory

__all__ = ["ListingSessionFactory"]
