"""
Structured logging for fixedlist.

The container emits DEBUG events through structlog when it is created and
whenever a named operation raises; applications decide where those events
go by calling :func:`configure_logging` (or
:func:`configure_from_settings`) once at startup. Loggers wrap the standard
library logger of the same name, so until then the root logger's WARNING
default drops the DEBUG events and nothing is written to stdout.

Architecture:
    ::

        configure_logging(level="INFO", json_format=True, service="fixedlist")
            ↓
        structlog processor chain (stdlib-backed, written to stderr):
          1. filter_by_level
          2. TimeStamper (iso, UTC)
          3. merge_contextvars
          4. add_log_level / add_logger_name
          5. add_service_metadata
          6. JSONRenderer (or ConsoleRenderer for a tty)

Examples:
    >>> from fixedlist.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=True)
    >>> logger = get_logger(__name__)
    >>> logger.debug("fixed_list.created", capacity=10)

Tags:
    logging, structlog, observability, fixedlist

Doc-Types:
    - API Reference
    - Observability Guide
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from fixedlist.settings import LogFormat

if TYPE_CHECKING:
    from fixedlist.settings import FixedListSettings


_SERVICE_NAME = "fixedlist"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "fixedlist",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    log_level = getattr(logging, level.upper())

    if json_format is None:
        json_format = not sys.stderr.isatty()

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        processors.insert(1, structlog.processors.TimeStamper(fmt="iso", utc=True))

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )
    logging.getLogger("fixedlist").setLevel(log_level)


def configure_from_settings(settings: FixedListSettings | None = None) -> None:
    """Apply ``log_level`` and ``log_format`` from settings."""
    if settings is None:
        from fixedlist.settings import get_settings

        settings = get_settings()

    json_format: bool | None
    if settings.log_format is LogFormat.AUTO:
        json_format = None
    else:
        json_format = settings.log_format is LogFormat.JSON

    configure_logging(level=settings.log_level, json_format=json_format)


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger backed by the stdlib logger ``name``.

    Processors come from the active structlog configuration; output goes
    through :mod:`logging` whether or not :func:`configure_logging` ran.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Context manager for scoped logging context.

    Example:
        with LogContext(batch="orders"):
            buffer.push_back(order)  # errors logged with batch="orders"
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> "LogContext":
        bind_context(**self._context)
        return self

    def __exit__(self, *args) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]
