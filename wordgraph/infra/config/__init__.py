"""Configuration: grouped pydantic models assembled by pydantic-settings."""

from .groups import ImageFormat, PageRankConfig, RenderConfig, WalkConfig
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    "PageRankConfig",
    "WalkConfig",
    "RenderConfig",
    "ImageFormat",
]
