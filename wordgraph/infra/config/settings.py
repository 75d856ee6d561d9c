from functools import cached_property
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from wordgraph.infra.config.groups import ImageFormat, PageRankConfig, RenderConfig, WalkConfig


class Settings(BaseSettings):
    """
    WordGraph Application Settings

    Environment variables use the WORDGRAPH_ prefix.
    Example: WORDGRAPH_PAGERANK_DAMPING=0.9, WORDGRAPH_LOG_LEVEL=DEBUG

    Grouped access:
        settings.pagerank    # PageRankConfig
        settings.walk        # WalkConfig
        settings.render      # RenderConfig
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WORDGRAPH_",
        extra="ignore",
    )

    # ========================================================================
    # Grouped Config Accessors
    # ========================================================================

    @cached_property
    def pagerank(self) -> PageRankConfig:
        """PageRank group."""
        return PageRankConfig(
            damping=self.pagerank_damping,
            tolerance=self.pagerank_tolerance,
            max_iterations=self.pagerank_max_iterations,
        )

    @cached_property
    def walk(self) -> WalkConfig:
        """Random walk group."""
        return WalkConfig(
            max_steps=self.walk_max_steps,
            output_path=self.walk_output_path,
        )

    @cached_property
    def render(self) -> RenderConfig:
        """Rendering group."""
        return RenderConfig(
            dot_executable=self.render_dot_executable,
            image_format=self.render_image_format,
            rankdir=self.render_rankdir,
            node_shape=self.render_node_shape,
            font_name=self.render_font_name,
            timeout_seconds=self.render_timeout_seconds,
        )

    # ========================================================================
    # PageRank
    # ========================================================================

    pagerank_damping: float = 0.85
    pagerank_tolerance: float = 1e-6
    pagerank_max_iterations: int = 500

    # ========================================================================
    # Random walk
    # ========================================================================

    walk_max_steps: int | None = None
    walk_output_path: str = "random_walk.txt"

    # ========================================================================
    # Rendering
    # ========================================================================

    render_dot_executable: str = "dot"
    render_image_format: ImageFormat = ImageFormat.PNG
    render_rankdir: Literal["TB", "LR", "BT", "RL"] = "TB"
    render_node_shape: str = "ellipse"
    render_font_name: str = "Helvetica"
    render_timeout_seconds: float = 60.0

    # ========================================================================
    # Application
    # ========================================================================

    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"
    seed: int | None = None


settings = Settings()
