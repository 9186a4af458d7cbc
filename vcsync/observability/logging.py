"""Structured logging configuration using structlog.

The reconciler itself only emits debug events; the hosting control loop
calls ``setup_logging`` once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog


def _renderer(fmt: str) -> structlog.typing.Processor:
    if fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer(sort_keys=True)


def setup_logging(level: str = "info", fmt: str = "json") -> None:
    """Configure structlog for ``json`` or ``console`` output on stderr."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            _renderer(fmt),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a vcsync component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
