"""
Observability Infrastructure

Structured logging for the graph engine, exporters and CLI.
"""

from .logging import (
    add_context,
    clear_context,
    get_logger,
    log_performance,
    setup_logging,
)

__all__ = [
    "add_context",
    "clear_context",
    "get_logger",
    "log_performance",
    "setup_logging",
]
