"""
Text Synthesizer

Rewrites a token sequence by inserting one bridge word between each adjacent
pair that has any. Original tokens keep their casing and order; bridges are
looked up with case-folded tokens and inserted as stored in the graph.
"""

import random
from collections.abc import Sequence

from wordgraph.common.observability import get_logger
from wordgraph.graph.models import WordGraph

from .bridge import bridge_candidates

logger = get_logger(__name__)


class TextSynthesizer:
    """Bridge-aware text rewriting."""

    def __init__(self, graph: WordGraph):
        self.graph = graph

    def rewrite(self, tokens: Sequence[str], rng: random.Random | None = None) -> list[str]:
        """
        Insert bridge words between adjacent tokens.

        Args:
            tokens: Original tokens, in any casing
            rng: Random source for picking among several bridges

        Returns:
            New token list; a copy of tokens when nothing was inserted
        """
        if not tokens:
            return list(tokens)

        rng = rng or random.Random()
        result = [tokens[0]]
        inserted = 0

        for current, following in zip(tokens, tokens[1:]):
            candidates = bridge_candidates(self.graph, current.lower(), following.lower())
            if candidates:
                result.append(rng.choice(candidates))
                inserted += 1
            result.append(following)

        logger.debug("text_rewritten", tokens=len(tokens), inserted=inserted)
        return result

    def rewrite_text(self, text: str, rng: random.Random | None = None) -> str:
        """Whitespace-split text, rewrite it and join with single spaces."""
        return " ".join(self.rewrite(text.split(), rng=rng))
