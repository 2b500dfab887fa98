"""Logging setup for obscurestring."""

from .config import LoggingConfig, get_config, set_config
from .logging import configure_logging, get_logger

__all__ = [
    "LoggingConfig",
    "get_config",
    "set_config",
    "configure_logging",
    "get_logger",
]
