"""
Common observability utilities.

Re-exports logging helpers from the infra layer so that graph and query
modules can log without importing infra directly.
"""

from wordgraph.infra.observability import (
    add_context,
    clear_context,
    get_logger,
    log_performance,
)

__all__ = [
    "add_context",
    "clear_context",
    "get_logger",
    "log_performance",
]
