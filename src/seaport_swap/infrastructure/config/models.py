"""Configuration data models.

This module defines the data structures for application configuration,
using dataclasses for type safety and clarity.
"""

from dataclasses import dataclass

from ...domain.items.models import CurrencyMode
from ...domain.orders.models import ExpiryOption


@dataclass
class PersistenceConfig:
    """Order record endpoint configuration.

    Attributes
    ----------
    endpoint_url : str
        URL of the "create order record" endpoint. Default:
        http://localhost:8000/api/orders
    timeout_seconds : float
        Request timeout in seconds. A slow endpoint only delays the
        success signal, it never fails a submission. Default: 10.0
    """

    endpoint_url: str = "http://localhost:8000/api/orders"
    timeout_seconds: float = 10.0


@dataclass
class ListingConfig:
    """Defaults for a new listing session.

    Attributes
    ----------
    default_expiry : ExpiryOption
        Duration preselected in the duration selector. Default: NONE
    currency_mode : CurrencyMode
        Currency mode a session starts in. Default: native
    """

    default_expiry: ExpiryOption = ExpiryOption.NONE
    currency_mode: CurrencyMode = CurrencyMode.NATIVE


@dataclass
class ApiConfig:
    """Order records API server configuration.

    Attributes
    ----------
    host : str
        Interface to bind. Default: 127.0.0.1
    port : int
        Port to listen on. Default: 8000
    """

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class LoggingConfig:
    """Logging configuration.

    Attributes
    ----------
    level : str
        Root log level name (e.g. "INFO", "DEBUG"). Default: INFO
    format : str
        Format string passed to ``logging.basicConfig``
    """

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
