"""Process-wide logging setup for CLI and API runtimes."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def config_configure_logging(level: str = "INFO") -> None:
    """Install the root handler once and apply the requested level.

    Args:
        level: Logging level name.

    Returns:
        None: Configures logging as side effect.

    Raises:
        ValueError: Raised when the level name is unknown.
    """

    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"unknown log level: {level}")

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=numeric_level, format=_LOG_FORMAT)
    root_logger.setLevel(numeric_level)
