"""
Word tokenizer.

Every character that is not an ASCII letter or whitespace becomes a space,
the text is lower-cased and split on whitespace runs.
"""

import re

_NON_LETTER = re.compile(r"[^a-zA-Z\s]")


def normalize(text: str) -> str:
    """Replace non-letters with spaces and case-fold."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    return _NON_LETTER.sub(" ", text).lower()


def tokenize(text: str) -> list[str]:
    """Return the normalized words of text; [] for blank input."""
    return normalize(text).split()
