"""Structured logging configuration using structlog.

- JSON output in production mode (filterable, parseable)
- Colored console output in development mode (human-readable)
- Session IDs for tracing every recomputation of one calculator form

Usage:
    from bonus_conversion.monitoring import configure_logging, get_logger

    # Configure once at startup
    configure_logging("production")  # or "development"

    log = get_logger(__name__)
    log.info("recomputed", promotion="free_bet", hedge_stake=4.76)
    log.warning("stage_a_failed", reason="invalid_odds", odds=50)
"""

import logging
import sys

import structlog

from bonus_conversion.config import get_settings

# Reconfiguration updates this list in place so loggers cached on first use
# pick up the new renderer.
_PROCESSORS: list = []


def configure_logging(mode: str | None = None) -> None:
    """Configure structlog for the package.

    Args:
        mode: Either "production" (JSON output) or "development" (colored console).
            Defaults to the BONUS_LOG_MODE setting.
    """
    if mode is None:
        mode = get_settings().log_mode

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if mode == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    _PROCESSORS[:] = [*shared_processors, renderer]

    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.INFO,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (usually the calling module's ``__name__``)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)



def session_context(session_id: str):
    """Bind a calculator session ID for the duration of a ``with`` block.

    Every event logged inside the block carries ``session_id``, which ties
    the stage failures of one form together. Any binding the caller had
    before the block is restored on exit.

    Args:
        session_id: Identifier of the calculator form (e.g. a UUID hex)

    Usage:
        with session_context("3f2a9c"):
            log.info("stage_a_failed", reason="invalid_odds")
    """
    return structlog.contextvars.bound_contextvars(session_id=session_id)
