"""Configuration loading utilities.

Reads the YAML application config and validates each section into the
dataclasses in ``models``.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

from ...domain.items.models import CurrencyMode
from ...domain.orders.models import ExpiryOption
from .models import ApiConfig, ListingConfig, LoggingConfig, PersistenceConfig


class ConfigLoader:
    """Loads and manages application configuration from YAML files.

    Reads one YAML file, caches the parsed data, and turns each section
    into a typed config object. Missing sections fall back to the
    dataclass defaults.

    Parameters
    ----------
    config_path : Optional[Path]
        Path to the configuration file, "config/default.yaml" if None

    Attributes
    ----------
    config_path : Path
        The path to the configuration file
    _config_data : Optional[Dict]
        Cached configuration data

    Notes
    -----
    Expected configuration structure:
    ```yaml
    persistence:
      endpoint_url: http://localhost:8000/api/orders
      timeout_seconds: 10
    listing:
      default_expiry: ONE_DAY
      currency_mode: native
    api:
      host: 127.0.0.1
      port: 8000
    logging:
      level: INFO
    ```
    """

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the config loader with a path."""
        self.config_path = config_path or Path("config/default.yaml")
        self._config_data: Optional[Dict] = None

    def load(self) -> Dict:
        """Load raw configuration data from YAML file.

        Loads the YAML file and caches the result. Subsequent calls
        return the cached data.

        Returns
        -------
        Dict
            The parsed YAML configuration as a dictionary

        Raises
        ------
        FileNotFoundError
            If the configuration file doesn't exist
        yaml.YAMLError
            If the YAML file is malformed
        """
        if self._config_data is None:
            if not self.config_path.exists():
                raise FileNotFoundError(
                    f"Configuration file not found: {self.config_path}"
                )

            with open(self.config_path) as f:
                try:
                    self._config_data = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise yaml.YAMLError(
                        f"Failed to parse config file {self.config_path}: {e}"
                    )

        return self._config_data

    def get_persistence_config(self) -> PersistenceConfig:
        """Get the order record endpoint configuration.

        Returns
        -------
        PersistenceConfig
            Endpoint settings with defaults applied

        Raises
        ------
        ValueError
            If timeout_seconds is not a positive number
        """
        data = self.load().get("persistence", {}) or {}
        defaults = PersistenceConfig()

        timeout = data.get("timeout_seconds", defaults.timeout_seconds)
        try:
            timeout = float(timeout)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid persistence timeout: {timeout!r}")
        if timeout <= 0:
            raise ValueError(
                f"Persistence timeout must be positive, got {timeout}"
            )

        return PersistenceConfig(
            endpoint_url=str(data.get("endpoint_url", defaults.endpoint_url)),
            timeout_seconds=timeout,
        )

    def get_listing_config(self) -> ListingConfig:
        """Get the defaults for new listing sessions.

        Returns
        -------
        ListingConfig
            Preselected expiry and starting currency mode

        Raises
        ------
        ValueError
            If default_expiry is not an ExpiryOption name or
            currency_mode is not a CurrencyMode value

        Examples
        --------
        >>> loader = ConfigLoader()
        >>> loader.get_listing_config().default_expiry
        <ExpiryOption.NONE: 0>
        """
        data = self.load().get("listing", {}) or {}

        expiry_name = str(data.get("default_expiry", "NONE")).upper()
        try:
            default_expiry = ExpiryOption[expiry_name]
        except KeyError:
            valid = [option.name for option in ExpiryOption]
            raise ValueError(
                f"Invalid default expiry: {expiry_name}. "
                f"Valid options are: {valid}"
            )

        mode_value = str(data.get("currency_mode", "native")).lower()
        try:
            currency_mode = CurrencyMode(mode_value)
        except ValueError:
            valid = [mode.value for mode in CurrencyMode]
            raise ValueError(
                f"Invalid currency mode: {mode_value}. "
                f"Valid modes are: {valid}"
            )

        return ListingConfig(
            default_expiry=default_expiry, currency_mode=currency_mode
        )

    def get_api_config(self) -> ApiConfig:
        """Get the records API server configuration."""
        data = self.load().get("api", {}) or {}
        defaults = ApiConfig()
        return ApiConfig(
            host=str(data.get("host", defaults.host)),
            port=int(data.get("port", defaults.port)),
        )

    def get_logging_config(self) -> LoggingConfig:
        """Get the logging configuration.

        Raises
        ------
        ValueError
            If level is not a standard logging level name
        """
        data = self.load().get("logging", {}) or {}
        defaults = LoggingConfig()

        level = str(data.get("level", defaults.level)).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {level}")

        return LoggingConfig(
            level=level, format=str(data.get("format", defaults.format))
        )


def configure_logging(config: LoggingConfig) -> None:
    """Apply the logging configuration to the root logger."""
    logging.basicConfig(level=config.level, format=config.format)
