# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Structured logging configuration using structlog.

The bootstrap logs lifecycle events through structlog; the data-access
services log through standard library loggers under the ``univadmin``
namespace. Both end up on stdout at the configured level.

Example:
    >>> from univadmin.utils.logging import setup_logging, get_logger
    >>> from univadmin.core.config import get_settings
    >>> setup_logging(get_settings())
    >>> get_logger("univadmin.bootstrap").info("Application started")
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from univadmin.core.config.settings import Settings

APP_LOGGER = "univadmin"

# Driver and pool chatter; per-call procedure logging happens at DEBUG in
# univadmin.infrastructure.database.procedures instead.
NOISY_LOGGERS = ("sqlalchemy", "sqlalchemy.engine", "asyncpg", "asyncio")


def resolve_level(settings: "Settings") -> int:
    """Map the configured level name to a logging level, INFO if unknown."""
    level = logging.getLevelName(settings.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def build_processors(settings: "Settings") -> list[Processor]:
    """Processor chain: readable console output in development, JSON elsewhere."""
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.is_development or settings.debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    return processors


def setup_logging(settings: "Settings") -> None:
    """Configure structlog and the standard library loggers.

    Args:
        settings: Application settings; ``log_level``, ``environment`` and
            ``debug`` are used.
    """
    log_level = resolve_level(settings)

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
