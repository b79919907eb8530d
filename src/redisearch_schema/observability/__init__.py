"""Observability module for structured logging."""

from redisearch_schema.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "configure_logging",
]
