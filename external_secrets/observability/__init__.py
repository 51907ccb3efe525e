"""Logging utilities shared by secret store providers."""

from .logging import (
    CorrelationIdFilter,
    JsonLogFormatter,
    configure_logging,
    correlation_context,
    get_correlation_id,
)

__all__ = [
    "CorrelationIdFilter",
    "JsonLogFormatter",
    "configure_logging",
    "correlation_context",
    "get_correlation_id",
]
