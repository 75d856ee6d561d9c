"""
WordGraph Configuration

Centralized configuration management using pydantic-settings.
All environment variables should use the WORDGRAPH_ prefix.

Usage:
    from wordgraph.config import settings

    damping = settings.pagerank.damping
"""

from wordgraph.infra.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
