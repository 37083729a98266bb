"""Infrastructure configuration module."""

from .loader import ConfigLoader, configure_logging
from .models import ApiConfig, ListingConfig, LoggingConfig, PersistenceConfig

__all__ = [
    "ApiConfig",
    "ConfigLoader",
    "ListingConfig",
    "LoggingConfig",
    "PersistenceConfig",
    "configure_logging",
]
