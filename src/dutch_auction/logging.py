"""Structured logging for the auction service.

Every event carries ``service`` and, once configured, the gateway ``network``
through structlog contextvars. Request handlers add ``auction_id`` for the
duration of a call with auction_context().
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

SERVICE_NAME = "dutch-auction"


def _renderer(log_format: str) -> structlog.types.Processor:
    """JSON lines for LOG_FORMAT=json, colored console output otherwise."""
    if log_format == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer()


def setup_logging(log_level: str = "INFO", network: str | None = None) -> None:
    """Route structlog and stdlib logging through one ProcessorFormatter.

    Args:
        log_level: Root level name, e.g. "DEBUG". Unknown names fall back to INFO.
        network: Gateway network name bound to every event, e.g. "sepolia".
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(os.environ.get("LOG_FORMAT", "console").lower()),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    structlog.contextvars.clear_contextvars()
    if network:
        structlog.contextvars.bind_contextvars(service=SERVICE_NAME, network=network)
    else:
        structlog.contextvars.bind_contextvars(service=SERVICE_NAME)


@contextmanager
def auction_context(auction_id: str) -> Iterator[None]:
    """Tag every event logged inside the block with ``auction_id``."""
    with structlog.contextvars.bound_contextvars(auction_id=auction_id or "<unnamed>"):
        yield


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)
