"""Shared helpers: exceptions and observability."""

from .exceptions import (
    CorpusError,
    CorpusNotFoundError,
    CorpusReadError,
    ExportError,
    InvalidOutputPathError,
    RenderError,
    WordGraphError,
)

__all__ = [
    "WordGraphError",
    "CorpusError",
    "CorpusNotFoundError",
    "CorpusReadError",
    "ExportError",
    "InvalidOutputPathError",
    "RenderError",
]
