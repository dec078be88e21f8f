"""SimilarityLayer: term-frequency cosine similarity against domain vectors."""

from __future__ import annotations

from ..core.math_utils import sparse_cosine_similarity
from ..core.text import term_frequencies
from ..types import DomainScore
from .base import ClassificationLayer

# Similarities at or below this are noise and emit no score.
SIMILARITY_THRESHOLD = 0.1


def calibrate_similarity(similarity: float) -> float:
    """Bucket a cosine similarity into a layer score in [0, 0.8]."""
    if similarity >= 0.5:
        return 0.8
    if similarity >= 0.4:
        return 0.7
    if similarity >= 0.3:
        return 0.6
    if similarity >= 0.2:
        return 0.5
    return min(0.4, similarity + 0.1)


class SimilarityLayer(ClassificationLayer):
    """Lightweight semantic scoring without learned embeddings.

    The prompt vector is length-normalized term frequency only; the static
    per-domain weights stand in for the inverse-document-frequency half of
    TF-IDF.
    """

    @property
    def name(self) -> str:
        return "similarity"

    def classify(self, prompt: str) -> list[DomainScore]:
        prompt_vector = term_frequencies(prompt)
        if not prompt_vector:
            return []

        scores: list[DomainScore] = []
        for vocabulary in self.vocabularies:
            similarity = sparse_cosine_similarity(prompt_vector, vocabulary.vector.weights)
            if similarity <= SIMILARITY_THRESHOLD:
                continue
            scores.append(
                DomainScore(
                    domain=vocabulary.domain,
                    score=calibrate_similarity(similarity),
                    method=self.name,
                    indicators=(f"semantic similarity: {similarity * 100:.1f}%",),
                )
            )
        return scores
