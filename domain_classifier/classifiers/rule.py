"""RuleLayer: keyword rules with exclusions and high-confidence bonus phrases."""

from __future__ import annotations

from ..types import DomainScore, RuleSet
from .base import ClassificationLayer

BONUS_SCORE = 0.9
NON_BONUS_CAP = 0.8
MIN_RULE_SCORE = 0.3

PRIMARY_WEIGHT = 0.3
SECONDARY_WEIGHT = 0.2
CONTEXT_WEIGHT = 0.1


def calibrate_rule_score(score: float, primary: int, secondary: int, context: int) -> float:
    """Boost rule scores backed by several independent keyword hits."""
    if score >= BONUS_SCORE:
        return 0.95

    total = primary + secondary + context
    if total >= 3:
        return min(0.9, score + 0.15)
    if total >= 2:
        return min(0.85, score + 0.1)
    if primary >= 2:
        return min(0.8, score + 0.1)
    if primary == 1 and secondary >= 1:
        return min(0.75, score + 0.05)
    return score


class RuleLayer(ClassificationLayer):
    """Classify by primary/secondary/context keywords.

    Exclusion phrases veto a domain outright: "analyze data" earns no CODE rule
    score however many code keywords surround it.
    Indicators carry the matched term with its rule kind
    ("bonus: ...", "primary: ...", "secondary: ...", "context: ...").
    """

    @property
    def name(self) -> str:
        return "rule"

    def classify(self, prompt: str) -> list[DomainScore]:
        scores: list[DomainScore] = []
        text_lower = prompt.lower()

        for vocabulary in self.vocabularies:
            rules = vocabulary.rules
            if any(exclusion in text_lower for exclusion in rules.exclusions):
                continue

            score, indicators = self._score(text_lower, rules)
            if score >= MIN_RULE_SCORE:
                scores.append(
                    DomainScore(
                        domain=vocabulary.domain,
                        score=score,
                        method=self.name,
                        indicators=tuple(indicators),
                    )
                )

        return scores

    @staticmethod
    def _score(text: str, rules: RuleSet) -> tuple[float, list[str]]:
        indicators: list[str] = []
        score = 0.0

        for phrase in rules.bonus_patterns:
            if phrase in text:
                score = BONUS_SCORE
                indicators.append(f"bonus: {phrase}")

        primary = [kw for kw in rules.primary_keywords if kw in text]
        secondary = [kw for kw in rules.secondary_keywords if kw in text]
        context = [kw for kw in rules.context_requirements if kw in text]
        indicators.extend(f"primary: {kw}" for kw in primary)
        indicators.extend(f"secondary: {kw}" for kw in secondary)
        indicators.extend(f"context: {kw}" for kw in context)

        if score == 0.0:
            score = (
                len(primary) * PRIMARY_WEIGHT
                + len(secondary) * SECONDARY_WEIGHT
                + len(context) * CONTEXT_WEIGHT
            )
            score = min(score, NON_BONUS_CAP)

        return calibrate_rule_score(score, len(primary), len(secondary), len(context)), indicators
