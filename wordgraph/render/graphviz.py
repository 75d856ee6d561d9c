"""
Graphviz Renderer

Writes the DOT form of a WordGraph and shells out to the Graphviz `dot`
executable to turn it into an image. The engine never depends on this
module; it only consumes the DOT text produced by graph.export.
"""

import subprocess
from pathlib import Path

from wordgraph.common.exceptions import ExportError, InvalidOutputPathError, RenderError
from wordgraph.common.observability import get_logger
from wordgraph.graph.export import to_dot
from wordgraph.graph.models import WordGraph
from wordgraph.infra.config import RenderConfig

logger = get_logger(__name__)


def _check_suffix(path: str | Path, suffix: str) -> Path:
    text = str(path).strip()
    if not text or not text.lower().endswith(suffix):
        raise InvalidOutputPathError(text, suffix)
    return Path(text)


class GraphvizRenderer:
    """DOT file writer plus `dot -T<format>` invocation."""

    def __init__(self, config: RenderConfig | None = None):
        self.config = config or RenderConfig()

    @property
    def image_suffix(self) -> str:
        return f".{self.config.image_format}"

    def write_dot(self, graph: WordGraph, dot_path: str | Path) -> Path:
        """
        Write the DOT description of graph.

        Raises:
            InvalidOutputPathError: If dot_path does not end in .dot
            ExportError: If the file cannot be written
        """
        output = _check_suffix(dot_path, ".dot")
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(to_dot(graph, self.config), encoding="utf-8")
        except OSError as e:
            raise ExportError(f"Cannot write DOT file {output}", {"path": str(output), "error": str(e)}) from e

        logger.info("dot_file_written", path=str(output), nodes=len(graph), edges=graph.edge_count)
        return output

    def render(self, graph: WordGraph, dot_path: str | Path, image_path: str | Path) -> Path:
        """
        Write the DOT file and render it to image_path.

        Both paths are validated before anything is written.

        Returns:
            Path of the generated image

        Raises:
            InvalidOutputPathError: Wrong suffix on either path
            RenderError: dot is missing, times out or exits non-zero
        """
        _check_suffix(dot_path, ".dot")
        image = _check_suffix(image_path, self.image_suffix)
        dot_file = self.write_dot(graph, dot_path)
        image.parent.mkdir(parents=True, exist_ok=True)

        command = [
            self.config.dot_executable,
            f"-T{self.config.image_format}",
            str(dot_file),
            "-o",
            str(image),
        ]
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.config.timeout_seconds,
            )
        except FileNotFoundError as e:
            raise RenderError(
                f"Graphviz executable not found: {self.config.dot_executable}",
                {"command": command},
            ) from e
        except subprocess.TimeoutExpired as e:
            raise RenderError(
                f"Graphviz timed out after {self.config.timeout_seconds}s",
                {"command": command},
            ) from e

        if result.returncode != 0:
            logger.error("graphviz_failed", returncode=result.returncode, stderr=result.stderr.strip())
            raise RenderError(
                f"Graphviz failed with exit code {result.returncode}",
                {"command": command, "stderr": result.stderr.strip()},
            )

        logger.info("graph_image_rendered", path=str(image), format=self.config.image_format)
        return image
