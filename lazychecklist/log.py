"""Logging setup shared by the CLI and runtime.

The interactive session owns the terminal, so records only go to a file
when one is configured; otherwise they are dropped by a ``NullHandler``.
"""

from __future__ import annotations

import logging
import os

import structlog

LOG_FILE_ENV = "LAZYCHECKLIST_LOG_FILE"
LOG_LEVEL_ENV = "LAZYCHECKLIST_LOG_LEVEL"


def _resolve_level(value: str | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if not value:
        return logging.INFO
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, log_file: str | None = None, debug: bool = False) -> None:
    """Route structlog through stdlib logging into ``log_file`` (or nowhere)."""
    resolved_log_file = log_file if log_file is not None else os.environ.get(LOG_FILE_ENV)
    resolved_level = _resolve_level(os.environ.get(LOG_LEVEL_ENV), debug)

    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    handler: logging.Handler
    if resolved_log_file:
        handler = logging.FileHandler(resolved_log_file, encoding="utf-8")
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.dev.ConsoleRenderer(colors=False),
                foreign_pre_chain=pre_chain,
            )
        )
    else:
        handler = logging.NullHandler()

    package_logger = logging.getLogger("lazychecklist")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(resolved_level)
    package_logger.propagate = False

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
