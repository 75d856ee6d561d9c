"""
WordGraph CLI

Command-line interface over a word graph built from a text corpus.

Examples:
    wordgraph -f story.txt show
    wordgraph -f story.txt bridge the sat
    wordgraph -f story.txt --seed 7 generate "Seek to explore new worlds"
    wordgraph -f story.txt path the mat
    wordgraph -f story.txt pagerank --top 10
    wordgraph -f story.txt walk --output walk.txt
    wordgraph -f story.txt render graph.dot graph.png
    wordgraph -f story.txt repl
"""

import random
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from wordgraph.common.exceptions import WordGraphError
from wordgraph.common.observability import add_context, get_logger
from wordgraph.config import settings
from wordgraph.graph import GraphBuilder, WordGraph
from wordgraph.infra.config import ImageFormat
from wordgraph.infra.observability import setup_logging
from wordgraph.pagerank import PageRankEngine
from wordgraph.query import (
    BridgeWordFinder,
    RandomWalker,
    ShortestPathFinder,
    TextSynthesizer,
    format_walk,
    write_walk,
)
from wordgraph.render import GraphvizRenderer

from .presenters import format_bridge_result, format_pagerank_result, format_path_result

app = typer.Typer(
    name="wordgraph",
    help="WordGraph - bridge words, shortest paths, PageRank and random walks over text",
    add_completion=False,
)
console = Console(soft_wrap=True)
logger = get_logger(__name__)


class CliState:
    """Per-invocation state: the corpus, the graph built from it and the PageRank cache."""

    def __init__(self, corpus: Path | None, seed: int | None):
        self.corpus = corpus
        self.seed = seed
        self._graph: WordGraph | None = None
        self._pagerank: PageRankEngine | None = None

    @property
    def graph(self) -> WordGraph:
        if self._graph is None:
            if self.corpus is None:
                raise typer.BadParameter("a corpus file is required", param_hint="--file")
            self._graph = GraphBuilder().build_from_file(self.corpus)
        return self._graph

    @property
    def pagerank(self) -> PageRankEngine:
        if self._pagerank is None:
            self._pagerank = PageRankEngine(self.graph, settings.pagerank)
        return self._pagerank

    def rng(self) -> random.Random:
        return random.Random(self.seed)


@contextmanager
def _user_errors() -> Iterator[None]:
    """Print wordgraph errors and exit with status 1."""
    try:
        yield
    except WordGraphError as e:
        logger.debug("command_failed", error_type=type(e).__name__, details=e.details)
        console.print(f"❌ {e.message}", style="red", markup=False)
        raise typer.Exit(1)


def _print(text: str) -> None:
    console.print(text, markup=False, highlight=False)


@app.callback()
def main(
    ctx: typer.Context,
    corpus: Path | None = typer.Option(None, "--file", "-f", help="Text corpus to build the graph from"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for random choices (generate, walk)"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level (default from settings)"),
):
    """Build a word graph from --file and query it."""
    setup_logging(level=log_level or settings.log_level, format=settings.log_format)
    if corpus is not None:
        add_context(corpus=str(corpus))
    ctx.obj = CliState(corpus, seed if seed is not None else settings.seed)


# ============================================================
# Actions (shared by commands and the interactive menu)
# ============================================================


def _show(state: CliState) -> None:
    _print("Directed Graph:")
    _print(state.graph.to_edge_list() or "(empty graph)")


def _bridge(state: CliState, word1: str, word2: str) -> None:
    result = BridgeWordFinder(state.graph).find(word1.lower(), word2.lower())
    _print(format_bridge_result(result))


def _generate(state: CliState, text: str, rng: random.Random) -> None:
    _print(TextSynthesizer(state.graph).rewrite_text(text, rng=rng))


def _path(state: CliState, start: str, end: str | None) -> None:
    finder = ShortestPathFinder(state.graph)
    start = start.lower()
    if end:
        _print(format_path_result(finder.shortest_path(start, end.lower())))
        return

    paths = finder.shortest_paths_from(start)
    if not paths:
        _print(f"No {start} in the graph!")
        return

    table = Table(title=f'Shortest paths from "{start}"')
    table.add_column("Target", style="cyan")
    table.add_column("Weight", justify="right")
    table.add_column("Path", style="green")
    for target, found in paths.items():
        if target != start:
            table.add_row(target, str(found.total_weight), format_walk(found.nodes))
    console.print(table)


def _pagerank(state: CliState, word: str | None, top_n: int) -> None:
    engine = state.pagerank
    if word:
        _print(format_pagerank_result(engine.score(word.lower())))
        return

    table = Table(title="PageRank")
    table.add_column("Rank", justify="right")
    table.add_column("Word", style="cyan")
    table.add_column("Score", justify="right", style="green")
    for rank, (node, value) in enumerate(engine.top(top_n), start=1):
        table.add_row(str(rank), node, f"{value:.4f}")
    console.print(table)


def _walk(state: CliState, rng: random.Random, output: Path | None, max_steps: int | None) -> None:
    nodes = RandomWalker(state.graph, max_steps=max_steps).walk(rng=rng)
    _print(format_walk(nodes) if nodes else "(empty graph)")
    if output is not None:
        saved = write_walk(nodes, output)
        _print(f"Random walk saved to: {saved}")


def _render(state: CliState, dot_path: Path, image_path: Path, image_format: str) -> None:
    config = settings.render.model_copy(update={"image_format": image_format})
    image = GraphvizRenderer(config).render(state.graph, dot_path, image_path)
    _print(f"DOT file saved as: {dot_path}")
    _print(f"Graph image generated successfully: {image}")


# ============================================================
# Commands
# ============================================================


@app.command()
def show(ctx: typer.Context):
    """Print every node with its outgoing edges and weights."""
    with _user_errors():
        _show(ctx.obj)


@app.command()
def bridge(
    ctx: typer.Context,
    word1: str = typer.Argument(..., help="First word"),
    word2: str = typer.Argument(..., help="Second word"),
):
    """Query the bridge words from WORD1 to WORD2."""
    with _user_errors():
        _bridge(ctx.obj, word1, word2)


@app.command()
def generate(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to enrich with bridge words"),
):
    """Insert a random bridge word between each adjacent pair of TEXT."""
    with _user_errors():
        _generate(ctx.obj, text, ctx.obj.rng())


@app.command()
def path(
    ctx: typer.Context,
    start: str = typer.Argument(..., help="Start word"),
    end: str | None = typer.Argument(None, help="End word (omit for paths to every reachable word)"),
):
    """Shortest weighted path from START to END."""
    with _user_errors():
        _path(ctx.obj, start, end)


@app.command()
def pagerank(
    ctx: typer.Context,
    word: str | None = typer.Argument(None, help="Word to score (omit for a ranking)"),
    top_n: int = typer.Option(10, "--top", "-n", min=1, help="Ranking size"),
):
    """PageRank score of WORD, or the top-ranked words."""
    with _user_errors():
        _pagerank(ctx.obj, word, top_n)


@app.command()
def walk(
    ctx: typer.Context,
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the walk to this file"),
    max_steps: int | None = typer.Option(None, "--max-steps", min=0, help="Cap on traversed edges"),
):
    """Random walk that stops at a dead end or a repeated edge."""
    with _user_errors():
        steps = max_steps if max_steps is not None else settings.walk.max_steps
        _walk(ctx.obj, ctx.obj.rng(), output, steps)


@app.command()
def render(
    ctx: typer.Context,
    dot_path: Path = typer.Argument(..., help="DOT output file (e.g. graph.dot)"),
    image_path: Path = typer.Argument(..., help="Image output file (e.g. graph.png)"),
    image_format: ImageFormat = typer.Option(ImageFormat(settings.render.image_format), "--format", help="Image format"),
):
    """Save the graph as DOT and render it with Graphviz."""
    with _user_errors():
        _render(ctx.obj, dot_path, image_path, image_format.value)


# ============================================================
# Interactive menu
# ============================================================

MENU = """
Choose an action:
1. Show directed graph
2. Query bridge words
3. Generate new text from bridge words
4. Shortest path between two words
5. PageRank of a word
6. Random walk
7. Save graph as image
0. Exit"""


@app.command()
def repl(ctx: typer.Context):
    """Interactive menu over the loaded graph."""
    state: CliState = ctx.obj
    rng = state.rng()
    with _user_errors():
        graph = state.graph
    _print(f"Graph built: {len(graph)} nodes, {graph.edge_count} edges")

    while True:
        _print(MENU)
        choice = typer.prompt("Option", default="0", show_default=False).strip()
        if choice == "0":
            _print("Bye.")
            return

        try:
            if choice == "1":
                _show(state)
            elif choice == "2":
                _bridge(state, typer.prompt("First word"), typer.prompt("Second word"))
            elif choice == "3":
                _generate(state, typer.prompt("Text"), rng)
            elif choice == "4":
                start = typer.prompt("Start word")
                end = typer.prompt("End word (blank for all)", default="", show_default=False)
                _path(state, start, end.strip() or None)
            elif choice == "5":
                _pagerank(state, typer.prompt("Word"), 10)
            elif choice == "6":
                output = typer.prompt("Save to", default=settings.walk.output_path)
                _walk(state, rng, Path(output) if output else None, settings.walk.max_steps)
            elif choice == "7":
                dot_path = typer.prompt("DOT file path", default="graph.dot")
                image_path = typer.prompt("Image file path", default=f"graph.{settings.render.image_format}")
                _render(state, Path(dot_path), Path(image_path), settings.render.image_format)
            else:
                _print("Invalid option, try again.")
        except WordGraphError as e:
            console.print(f"❌ {e.message}", style="red", markup=False)


if __name__ == "__main__":
    app()
