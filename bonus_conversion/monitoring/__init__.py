"""Monitoring module for structured logging and recomputation metrics.

- structlog configuration (JSON for production, console for development)
- Session IDs bound through structlog contextvars
- Counters for recomputations and sentinel fallbacks
"""

from bonus_conversion.monitoring.logging import (
    configure_logging,
    get_logger,
    session_context,
)
from bonus_conversion.monitoring.metrics import RecomputeMetrics

__all__ = [
    "configure_logging",
    "get_logger",
    "session_context",
    "RecomputeMetrics",
]
