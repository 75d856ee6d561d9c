"""
Presenter message tests.
"""

import pytest

from wordgraph.cli.presenters import (
    format_bridge_result,
    format_pagerank_result,
    format_path,
    format_path_result,
)
from wordgraph.query import (
    BothMissing,
    Bridges,
    NoBridge,
    NodeMissing,
    NoPath,
    Path,
    Score,
    Word1Missing,
    Word2Missing,
)


class TestFormatBridgeResult:
    @pytest.mark.parametrize(
        "result, expected",
        [
            (BothMissing("a", "b"), 'No "a" or "b" in the graph!'),
            (Word1Missing("a"), 'No "a" in the graph!'),
            (Word2Missing("b"), 'No "b" in the graph!'),
            (NoBridge("a", "b"), 'No bridge words from "a" to "b"!'),
            (Bridges("a", "b", ("x",)), 'The bridge words from "a" to "b" are: "x".'),
            (Bridges("a", "b", ("x", "y")), 'The bridge words from "a" to "b" are: "x", "y".'),
        ],
    )
    def test_messages(self, result, expected):
        assert format_bridge_result(result) == expected

    def test_unexpected_value(self):
        with pytest.raises(TypeError):
            format_bridge_result("nope")  # type: ignore[arg-type]


class TestFormatPathResult:
    def test_path(self):
        assert format_path(Path(("a", "b", "c"), 4)) == (
            'Shortest path from "a" to "c" is: a -> b -> c\nTotal weight: 4'
        )

    def test_missing_nodes(self):
        assert format_path_result(NodeMissing(("x", "y"))) == "No x or y in the graph!"
        assert format_path_result(NodeMissing(("x",))) == "No x in the graph!"

    def test_no_path(self):
        assert format_path_result(NoPath("d", "a")) == "There is no path from d to a."

    def test_delegates_to_format_path(self):
        path = Path(("a",), 0)

        assert format_path_result(path) == format_path(path)


class TestFormatPageRankResult:
    def test_score(self):
        assert format_pagerank_result(Score("the", 0.123456)) == 'PageRank of "the": 0.1235'

    def test_precision(self):
        assert format_pagerank_result(Score("the", 0.5), precision=2) == 'PageRank of "the": 0.50'

    def test_missing(self):
        assert format_pagerank_result(NodeMissing(("dog",))) == 'Word "dog" not found in the graph.'

    def test_unexpected_value(self):
        with pytest.raises(TypeError):
            format_pagerank_result(NoPath("a", "b"))  # type: ignore[arg-type]
