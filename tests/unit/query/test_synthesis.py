"""
Bridge-aware text synthesis tests.
"""

import random

import pytest

from wordgraph.graph import GraphBuilder, WordGraph
from wordgraph.query import TextSynthesizer


class ScriptedRandom(random.Random):
    """Random whose choice() always returns the last candidate."""

    def __init__(self):
        super().__init__(0)
        self.calls: list[list[str]] = []

    def choice(self, seq):
        self.calls.append(list(seq))
        return seq[-1]


@pytest.fixture
def story_graph():
    return GraphBuilder().build_from_text(
        "To explore strange new worlds, to seek out new life and new civilizations"
    )


class TestTextSynthesizer:
    def test_inserts_bridge(self, story_graph):
        result = TextSynthesizer(story_graph).rewrite_text("Seek to explore new and exciting synergies")

        assert result == "Seek to explore strange new life and exciting synergies"

    def test_preserves_original_casing(self, cat_graph):
        result = TextSynthesizer(cat_graph).rewrite(["The", "Sat"])

        assert result == ["The", "cat", "Sat"]

    def test_no_bridges_returns_copy(self, cat_graph):
        tokens = ["hello", "world"]
        result = TextSynthesizer(cat_graph).rewrite(tokens)

        assert result == tokens
        assert result is not tokens

    @pytest.mark.parametrize("tokens", [[], ["single"]])
    def test_short_input(self, cat_graph, tokens):
        assert TextSynthesizer(cat_graph).rewrite(tokens) == tokens

    def test_empty_text(self, cat_graph):
        assert TextSynthesizer(cat_graph).rewrite_text("   ") == ""

    def test_choice_among_candidates(self):
        graph = WordGraph({"a": {"x": 1, "y": 1}, "x": {"b": 1}, "y": {"b": 1}})
        rng = ScriptedRandom()

        result = TextSynthesizer(graph).rewrite(["a", "b"], rng=rng)

        assert rng.calls == [["x", "y"]]
        assert result == ["a", "y", "b"]

    def test_seeded_rng_is_reproducible(self):
        graph = WordGraph({"a": {"x": 1, "y": 1, "z": 1}, "x": {"b": 1}, "y": {"b": 1}, "z": {"b": 1}})
        synthesizer = TextSynthesizer(graph)
        tokens = ["a", "b", "a", "b"]

        first = synthesizer.rewrite(tokens, rng=random.Random(42))
        second = synthesizer.rewrite(tokens, rng=random.Random(42))

        assert first == second
        # one bridge per a->b pair, none for b->a
        assert len(first) == 6
        assert [word for word in first if word not in {"x", "y", "z"}] == tokens
        assert first[1] in {"x", "y", "z"} and first[4] in {"x", "y", "z"}

    def test_output_length_bounds(self, story_graph):
        tokens = "seek to explore new and exciting synergies".split()
        result = TextSynthesizer(story_graph).rewrite(tokens, rng=random.Random(1))

        assert len(tokens) <= len(result) <= 2 * len(tokens) - 1
