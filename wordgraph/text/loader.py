"""
Corpus loader.

Reads a text file and produces the token stream the graph is built from.
Lines are joined with a space, so a word at the end of one line is adjacent
to the first word of the next.
"""

from pathlib import Path

from wordgraph.common.exceptions import CorpusNotFoundError, CorpusReadError
from wordgraph.common.observability import get_logger

from .tokenizer import tokenize

logger = get_logger(__name__)


def read_corpus(path: str | Path, encoding: str = "utf-8") -> str:
    """
    Read a corpus file as one line of text.

    Raises:
        CorpusNotFoundError: If path is missing or not a regular file
        CorpusReadError: If the file cannot be read or decoded
    """
    corpus_path = Path(path)
    if not corpus_path.is_file():
        raise CorpusNotFoundError(str(corpus_path))

    try:
        with corpus_path.open("r", encoding=encoding) as f:
            return " ".join(line.rstrip("\r\n") for line in f)
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusReadError(
            f"Cannot read corpus file: {corpus_path}",
            {"path": str(corpus_path), "error": str(e)},
        ) from e


def load_tokens(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read and tokenize a corpus file."""
    tokens = tokenize(read_corpus(path, encoding=encoding))
    logger.info("corpus_loaded", path=str(path), tokens=len(tokens))
    return tokens
