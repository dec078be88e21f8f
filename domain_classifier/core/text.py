"""Tokenization and term-frequency vectors for the similarity layer."""

from __future__ import annotations

import re
from collections import Counter

STOP_WORDS: frozenset[str] = frozenset({
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "from", "up", "about", "into", "through", "during", "before",
    "after", "above", "below", "between", "among", "this", "that", "these",
    "those", "i", "you", "he", "she", "it", "we", "they", "me", "him", "her",
    "us", "them", "my", "your", "his", "its", "our", "their", "a", "an",
})

_PUNCTUATION_RE = re.compile(r"[^\w\s]")
MIN_TOKEN_LENGTH = 3


def tokenize(text: str) -> list[str]:
    """Lower-case, strip punctuation, drop short tokens and stop words."""
    words = _PUNCTUATION_RE.sub(" ", text.lower()).split()
    return [w for w in words if len(w) >= MIN_TOKEN_LENGTH and w not in STOP_WORDS]


def term_frequencies(text: str) -> dict[str, float]:
    """Raw term counts divided by token count. Empty dict for no tokens."""
    tokens = tokenize(text)
    if not tokens:
        return {}
    total = len(tokens)
    return {term: count / total for term, count in Counter(tokens).items()}
