"""
Tokenizer and corpus loader tests.
"""

import pytest

from wordgraph.common.exceptions import CorpusNotFoundError, CorpusReadError, WordGraphError
from wordgraph.text import load_tokens, normalize, read_corpus, tokenize


class TestNormalize:
    def test_replaces_non_letters_and_lowercases(self):
        assert normalize("Hello, World-42!") == "hello  world    "

    def test_keeps_whitespace(self):
        assert normalize("a\tb\nc") == "a\tb\nc"

    def test_non_ascii_letters_become_spaces(self):
        assert normalize("café") == "caf "

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            normalize(None)  # type: ignore[arg-type]


class TestTokenize:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("The cat sat.", ["the", "cat", "sat"]),
            ("don't stop", ["don", "t", "stop"]),
            ("  spaced   out  ", ["spaced", "out"]),
            ("123 !!!", []),
            ("", []),
        ],
    )
    def test_tokenize(self, text, expected):
        assert tokenize(text) == expected


class TestLoader:
    def test_read_corpus_joins_lines_with_space(self, tmp_path):
        path = tmp_path / "two.txt"
        path.write_text("end\r\nstart\n", encoding="utf-8")

        assert read_corpus(path) == "end start"
        assert tokenize(read_corpus(path)) == ["end", "start"]

    def test_load_tokens(self, corpus_file):
        assert load_tokens(corpus_file) == ["the", "cat", "sat", "on", "the", "mat", "the", "cat", "ran"]

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.txt"

        with pytest.raises(CorpusNotFoundError) as exc_info:
            read_corpus(missing)

        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value, WordGraphError)

    def test_directory_is_not_a_corpus(self, tmp_path):
        with pytest.raises(CorpusNotFoundError):
            read_corpus(tmp_path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa bad")

        with pytest.raises(CorpusReadError) as exc_info:
            read_corpus(path)

        assert exc_info.value.details["path"] == str(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")

        assert load_tokens(path) == []
