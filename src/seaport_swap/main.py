"""
Seaport Swap - Main Module

Entry point that serves the order records API with the settings from
the YAML configuration file.
"""

import argparse
import logging
import sys
from pathlib import Path

import uvicorn

from .api.main import create_app
from .infrastructure.config import ConfigLoader, configure_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    """Load configuration and run the records API server."""
    parser = argparse.ArgumentParser(description="Seaport Swap records API")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config/default.yaml"),
        help="Path to the YAML configuration file",
    )
    args = parser.parse_args(argv)

    loader = ConfigLoader(args.config)
    configure_logging(loader.get_logging_config())
    api_config = loader.get_api_config()

    logger.info(
        f"Serving order records on {api_config.host}:{api_config.port}"
    )
    uvicorn.run(create_app(), host=api_config.host, port=api_config.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
