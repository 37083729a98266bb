"""Listing session domain."""

from .session import ListingSession

__all__ = ["ListingSession"]
