"""Logging setup for command-line entry points."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging for scripts.

    Args:
        level: Root log level (default: INFO)
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
