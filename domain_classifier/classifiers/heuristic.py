"""HeuristicLayer: hand-tuned keyword co-occurrence scoring per domain.

Catches structural and contextual cases the regex templates miss. Every
weight below is a hand-tuned constant, not derived from a model; treat them
as the tuning surface when recalibrating against new golden prompts.
"""

from __future__ import annotations

from collections.abc import Callable

from ..types import DomainScore, DomainType, HeuristicVocabulary
from .base import ClassificationLayer

HEURISTIC_CAP = 0.8
PHRASE_WEIGHT = 0.2

# ANALYSIS vs RESEARCH disambiguation. "evaluate" next to one of these terms
# reads as a comparison of tools or options, which is research work.
COMPARATIVE_EVALUATION_VERB = "evaluate"
COMPARATIVE_EVALUATION_TERMS: tuple[str, ...] = ("different", "platforms", "tools", "options")
COMPARATIVE_EVALUATION_PENALTY = 0.15  # subtracted from ANALYSIS
COMPARATIVE_EVALUATION_BOOST = 0.35  # added to RESEARCH
TOOL_COMPARISON_BOOST = 0.2  # RESEARCH: "compare" + tools/platforms/solutions
PLANNING_GOALS_BOOST = 0.4  # RESEARCH: "outline" + goals/objectives

INDICATOR_LABELS: dict[DomainType, str] = {
    DomainType.CODE: "code-specific patterns",
    DomainType.WRITING: "writing-specific patterns",
    DomainType.ANALYSIS: "analysis-specific patterns",
    DomainType.RESEARCH: "research-specific patterns",
}


def _count(text: str, terms: tuple[str, ...]) -> int:
    return sum(1 for term in terms if term in text)


def _any(text: str, terms: tuple[str, ...]) -> bool:
    return any(term in text for term in terms)


def _is_comparative_evaluation(text: str) -> bool:
    return COMPARATIVE_EVALUATION_VERB in text and _any(text, COMPARATIVE_EVALUATION_TERMS)


def score_code(text: str, vocab: HeuristicVocabulary) -> float:
    score = 0.0
    if _any(text, vocab.terms("languages")):
        score += 0.3
    score += _count(text, vocab.terms("terms")) * 0.1
    score += _count(text, vocab.terms("contexts")) * 0.05
    score += _count(text, vocab.terms("phrases")) * PHRASE_WEIGHT
    if _any(text, vocab.terms("action_verbs")) and _any(text, vocab.terms("action_objects")):
        score += 0.2
    return min(score, HEURISTIC_CAP)


def score_analysis(text: str, vocab: HeuristicVocabulary) -> float:
    score = 0.0
    score += _count(text, vocab.terms("quantitative")) * 0.1
    if _any(text, vocab.terms("comparison")):
        score += 0.2
    score += _count(text, vocab.terms("phrases")) * PHRASE_WEIGHT

    # One bonus per verb that appears alongside any quantitative object
    objects = vocab.terms("action_objects")
    for verb in vocab.terms("action_verbs"):
        if verb in text and _any(text, objects):
            score += 0.15

    if _is_comparative_evaluation(text):
        score -= COMPARATIVE_EVALUATION_PENALTY

    score += _count(text, vocab.terms("business")) * 0.05
    return min(score, HEURISTIC_CAP)


def score_writing(text: str, vocab: HeuristicVocabulary) -> float:
    score = 0.0
    score += _count(text, vocab.terms("content_types")) * 0.15
    score += _count(text, vocab.terms("actions")) * 0.1
    score += _count(text, vocab.terms("communication")) * 0.05
    score += _count(text, vocab.terms("phrases")) * PHRASE_WEIGHT
    if _any(text, vocab.terms("audience")):
        score += 0.1
    if _any(text, vocab.terms("creative")):
        score += 0.15
    return min(score, HEURISTIC_CAP)


def score_research(text: str, vocab: HeuristicVocabulary) -> float:
    score = 0.0
    score += _count(text, vocab.terms("actions")) * 0.1

    if "outline" in text and _any(text, vocab.terms("planning_objects")):
        score += PLANNING_GOALS_BOOST
    else:
        score += _count(text, vocab.terms("planning")) * 0.08

    score += _count(text, vocab.terms("methodology")) * 0.15
    score += _count(text, vocab.terms("solutions")) * 0.1
    score += _count(text, vocab.terms("tech_domains")) * 0.1
    score += _count(text, vocab.terms("phrases")) * PHRASE_WEIGHT

    if _any(text, vocab.terms("questions")):
        score += 0.05
    if "compare" in text and _any(text, vocab.terms("comparison_objects")):
        score += TOOL_COMPARISON_BOOST
    if _is_comparative_evaluation(text):
        score += COMPARATIVE_EVALUATION_BOOST

    return min(score, HEURISTIC_CAP)


SCORERS: dict[DomainType, Callable[[str, HeuristicVocabulary], float]] = {
    DomainType.CODE: score_code,
    DomainType.ANALYSIS: score_analysis,
    DomainType.WRITING: score_writing,
    DomainType.RESEARCH: score_research,
}


class HeuristicLayer(ClassificationLayer):
    """Classify by domain-specific keyword heuristics.

    Indicators are coarse layer-level labels, not the matched terms.
    """

    @property
    def name(self) -> str:
        return "heuristic"

    def classify(self, prompt: str) -> list[DomainScore]:
        scores: list[DomainScore] = []
        text_lower = prompt.lower()

        for vocabulary in self.vocabularies:
            scorer = SCORERS.get(vocabulary.domain)
            if scorer is None:
                continue
            score = scorer(text_lower, vocabulary.heuristics)
            if score <= 0:
                continue
            scores.append(
                DomainScore(
                    domain=vocabulary.domain,
                    score=score,
                    method=self.name,
                    indicators=(INDICATOR_LABELS[vocabulary.domain],),
                )
            )
        return scores
