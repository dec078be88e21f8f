"""PatternLayer: curated regex templates, strongest match per domain."""

from __future__ import annotations

from ..types import DomainScore
from .base import ClassificationLayer


def calibrate_pattern_score(raw_score: float, match_count: int) -> float:
    """Map the best template score and distinct-match count onto a layer score."""
    if match_count >= 1:
        if raw_score >= 0.9:
            return 0.95
        if raw_score >= 0.85:
            return 0.90
        if raw_score >= 0.8:
            return 0.85
    if match_count >= 2:
        return min(0.90, raw_score + 0.10)
    if match_count == 1:
        return min(0.85, raw_score + 0.05)
    return raw_score


class PatternLayer(ClassificationLayer):
    """Classify by regex templates describing grammatical task structure.

    Domains with no matching template emit nothing, so they contribute no
    weight at aggregation time.
    """

    @property
    def name(self) -> str:
        return "pattern"

    def classify(self, prompt: str) -> list[DomainScore]:
        scores: list[DomainScore] = []
        text_lower = prompt.lower()

        for vocabulary in self.vocabularies:
            max_score = 0.0
            matched: list[str] = []

            for template in vocabulary.patterns:
                if template.search(text_lower):
                    max_score = max(max_score, template.score)
                    matched.append(template.description)

            if matched:
                scores.append(
                    DomainScore(
                        domain=vocabulary.domain,
                        score=calibrate_pattern_score(max_score, len(matched)),
                        method=self.name,
                        indicators=tuple(matched),
                    )
                )

        return scores
