"""Shared math utilities."""

from __future__ import annotations

from collections.abc import Mapping


def sparse_cosine_similarity(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """Compute cosine similarity between two term -> weight vectors.

    Terms missing from one side count as weight 0.
    """
    dot = sum(weight * b.get(term, 0.0) for term, weight in a.items())
    norm_a = sum(x * x for x in a.values()) ** 0.5
    norm_b = sum(x * x for x in b.values()) ** 0.5
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (norm_a * norm_b)
