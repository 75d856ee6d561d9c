"""
Configuration groups.

Settings are split into logical groups. Each group can be used on its own
(the engines accept them directly) and is assembled by Settings.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ImageFormat(str, Enum):
    """Graphviz output formats."""

    PNG = "png"
    SVG = "svg"
    PDF = "pdf"


class PageRankConfig(BaseModel):
    """PageRank iteration parameters."""

    damping: float = Field(default=0.85, gt=0.0, lt=1.0, description="Damping factor")
    tolerance: float = Field(default=1e-6, gt=0.0, description="L1 convergence threshold")
    max_iterations: int = Field(default=500, ge=1, description="Iteration cap")


class WalkConfig(BaseModel):
    """Random walk settings."""

    max_steps: int | None = Field(default=None, ge=0, description="Edge cap per walk (None = until stuck)")
    output_path: str = Field(default="random_walk.txt", description="Default walk output file")


class RenderConfig(BaseModel):
    """DOT export and Graphviz rendering settings."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    dot_executable: str = Field(default="dot", description="Graphviz dot executable")
    image_format: ImageFormat = Field(default=ImageFormat.PNG, description="Rendered image format")
    rankdir: Literal["TB", "LR", "BT", "RL"] = Field(default="TB", description="Graph layout direction")
    node_shape: str = Field(default="ellipse", description="Node shape")
    font_name: str = Field(default="Helvetica", description="Node font")
    timeout_seconds: float = Field(default=60.0, gt=0.0, description="Renderer timeout")
