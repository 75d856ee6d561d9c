"""
Text Layer

Turns raw text into the normalized token stream consumed by GraphBuilder.
"""

from .loader import load_tokens, read_corpus
from .tokenizer import normalize, tokenize

__all__ = [
    "normalize",
    "tokenize",
    "read_corpus",
    "load_tokens",
]
