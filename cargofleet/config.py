"""
Runtime settings.

Values are read from the environment with sensible defaults:
- CARGOFLEET_ID_PREFIX: prefix used in container ids (default "KON")
- CARGOFLEET_LOG_LEVEL: log level used by configure_logging (default "INFO")
"""

import logging
import os

DEFAULT_ID_PREFIX = "KON"
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def get_id_prefix() -> str:
    """Get the container id prefix from environment or use the default."""
    prefix = os.getenv("CARGOFLEET_ID_PREFIX", "").strip()
    return prefix.upper() if prefix else DEFAULT_ID_PREFIX


def get_log_level() -> int:
    """Get the configured log level, falling back to INFO on unknown names."""
    name = os.getenv("CARGOFLEET_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: int | None = None) -> None:
    """Configure root logging for console scripts."""
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format=LOG_FORMAT,
    )
