"""
WordGraph Exception Hierarchy

The graph engine itself never raises for missing words, missing paths or an
empty graph; those are result values. Exceptions are reserved for the edges
of the system: reading a corpus and exporting/rendering files.

Usage:
    try:
        tokens = load_tokens(path)
    except OSError as e:
        raise CorpusReadError("Cannot read corpus", {"path": str(path)}) from e
"""

from typing import Any


class WordGraphError(Exception):
    """Base exception for all wordgraph errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize wordgraph error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# ============================================================
# Corpus Errors
# ============================================================


class CorpusError(WordGraphError):
    """Failures while producing tokens from a corpus file."""

    pass


class CorpusNotFoundError(CorpusError):
    """Corpus path does not exist or is not a regular file."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Corpus file not found: {path}", {"path": path})


class CorpusReadError(CorpusError):
    """Corpus file exists but could not be read or decoded."""

    pass


# ============================================================
# Export Errors
# ============================================================


class ExportError(WordGraphError):
    """Failures while writing graph or walk output."""

    pass


class InvalidOutputPathError(ExportError):
    """Output path is empty or has the wrong suffix."""

    def __init__(self, path: str, expected_suffix: str):
        self.path = path
        self.expected_suffix = expected_suffix
        super().__init__(
            f"Invalid output path {path!r}: expected a file ending in {expected_suffix}",
            {"path": path, "expected_suffix": expected_suffix},
        )


class RenderError(ExportError):
    """The external Graphviz renderer is missing or failed."""

    pass
