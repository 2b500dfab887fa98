"""Structured logging.

Log events from the engine carry lengths, strategy names and error codes.
They never carry the text being masked.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional

import structlog

from .config import LoggingConfig, get_config


def add_timestamp(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add timestamp to log events."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_level(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add log level to event dict."""
    event_dict["level"] = method_name.upper()
    return event_dict


def _configure_structlog(config: LoggingConfig) -> None:
    processors_list = [
        structlog.stdlib.filter_by_level,
        add_timestamp,
        add_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.format == "json":
        processors_list.append(structlog.processors.JSONRenderer())
    else:
        processors_list.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors_list,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure structlog and the standard library root logger.

    Applications and the CLI call this; importing the library configures
    nothing.
    """
    if config is None:
        config = get_config()

    _configure_structlog(config)

    level = getattr(logging, config.level.upper(), logging.WARNING)
    # stdout is reserved for masked output
    if config.output == "file" and config.file_path:
        logging.basicConfig(
            format="%(message)s", filename=config.file_path, level=level, force=True
        )
    else:
        logging.basicConfig(
            format="%(message)s", stream=sys.stderr, level=level, force=True
        )


def get_logger(name: str) -> Any:
    """Get a logger instance.

    The logger writes through the standard library logger ``name`` and picks
    up processors from ``configure_logging`` (or the host application's
    structlog setup) when it emits. Getting a logger never configures
    structlog.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
