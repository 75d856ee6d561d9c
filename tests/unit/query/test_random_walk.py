"""
Random walk tests.
"""

import random

import pytest

from wordgraph.common.exceptions import ExportError
from wordgraph.graph import WordGraph
from wordgraph.query import RandomWalker, format_walk, write_walk


def walk_edges(nodes):
    return list(zip(nodes, nodes[1:]))


class TestRandomWalker:
    def test_empty_graph(self, empty_graph):
        assert RandomWalker(empty_graph).walk(rng=random.Random(1)) == []

    @pytest.mark.parametrize("seed", range(20))
    def test_walk_is_a_valid_path_without_repeated_edges(self, cat_graph, seed):
        nodes = RandomWalker(cat_graph).walk(rng=random.Random(seed))
        edges = walk_edges(nodes)

        assert nodes
        assert all(cat_graph.weight(a, b) is not None for a, b in edges)
        assert len(edges) == len(set(edges))
        assert len(edges) <= cat_graph.edge_count

    @pytest.mark.parametrize("seed", range(20))
    def test_walk_ends_when_stuck(self, cat_graph, seed):
        nodes = RandomWalker(cat_graph).walk(rng=random.Random(seed))
        used = set(walk_edges(nodes))
        last = nodes[-1]

        assert all((last, target) in used for target in cat_graph.outgoing(last))

    def test_fixed_start(self, cat_graph):
        nodes = RandomWalker(cat_graph).walk(rng=random.Random(3), start="sat")

        assert nodes[:3] == ["sat", "on", "the"]

    def test_unknown_start(self, cat_graph):
        assert RandomWalker(cat_graph).walk(start="dog") == []

    def test_leaf_start_is_single_node(self, cat_graph):
        assert RandomWalker(cat_graph).walk(start="mat") == ["mat"]

    def test_self_loop_used_once(self):
        graph = WordGraph({"a": {"a": 5}})

        assert RandomWalker(graph).walk(rng=random.Random(0), start="a") == ["a", "a"]

    def test_cycle_stops_at_repeated_edge(self):
        graph = WordGraph({"a": {"b": 1}, "b": {"c": 1}, "c": {"a": 1}})

        assert RandomWalker(graph).walk(start="a") == ["a", "b", "c", "a"]

    @pytest.mark.parametrize("max_steps, expected", [(0, ["a"]), (1, ["a", "b"]), (2, ["a", "b", "c"])])
    def test_max_steps(self, max_steps, expected):
        graph = WordGraph({"a": {"b": 1}, "b": {"c": 1}, "c": {"a": 1}})

        assert RandomWalker(graph, max_steps=max_steps).walk(start="a") == expected

    def test_seeded_walks_reproduce(self, cat_graph):
        walker = RandomWalker(cat_graph)

        assert walker.walk(rng=random.Random(11)) == walker.walk(rng=random.Random(11))


class TestWalkOutput:
    def test_format_walk(self):
        assert format_walk(["a", "b", "c"]) == "a -> b -> c"
        assert format_walk([]) == ""

    def test_write_walk(self, tmp_path):
        target = tmp_path / "out" / "walk.txt"

        saved = write_walk(["the", "cat", "sat"], target)

        assert saved == target
        assert target.read_text(encoding="utf-8") == "the -> cat -> sat"

    def test_write_walk_failure(self, tmp_path):
        # a directory cannot be opened as a file
        with pytest.raises(ExportError):
            write_walk(["a"], tmp_path)
