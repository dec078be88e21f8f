"""HybridClassifier: weighted aggregation of independent classification layers."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from ..classifiers import (
    ClassificationLayer,
    HeuristicLayer,
    PatternLayer,
    RuleLayer,
    SimilarityLayer,
)
from ..types import (
    DEFAULT_DOMAIN_PRIORITY,
    DEFAULT_LAYER_WEIGHTS,
    DomainScore,
    DomainType,
    DomainVocabulary,
    HybridResult,
    LayerInfo,
)

logger = logging.getLogger(__name__)

# Layers run in this order; indicator order and tie-breaking depend on it.
LAYER_ORDER: tuple[str, ...] = ("similarity", "pattern", "rule", "heuristic")

_LAYER_CLASSES: dict[str, type[ClassificationLayer]] = {
    "similarity": SimilarityLayer,
    "pattern": PatternLayer,
    "rule": RuleLayer,
    "heuristic": HeuristicLayer,
}

# ---------------------------------------------------------------------------
# Confidence calibration
# ---------------------------------------------------------------------------

STRONG_INDICATOR_MARKERS: tuple[str, ...] = (
    "pattern:",
    "bonus:",
    "programming language",
    "content creation",
    "data analysis",
    "methodology research",
)
MODERATE_INDICATOR_MARKERS: tuple[str, ...] = ("primary:", "secondary:", "context:")

# Per domain: (indicator substrings, boost). Each group applies at most once.
DOMAIN_EVIDENCE_BOOSTS: dict[DomainType, tuple[tuple[tuple[str, ...], float], ...]] = {
    DomainType.CODE: (
        (("programming language", "implementation task"), 0.15),
        (("primary: implement", "primary: debug"), 0.10),
    ),
    DomainType.ANALYSIS: (
        (("data analysis", "comparative analysis"), 0.12),
        (("primary: analyze", "primary: evaluate"), 0.08),
    ),
    DomainType.WRITING: (
        (("content creation", "communication writing"), 0.10),
        (("primary: write", "primary: create"), 0.08),
    ),
    DomainType.RESEARCH: (
        (("methodology research", "methodology exploration"), 0.12),
        (("primary: research", "primary: investigate"), 0.08),
    ),
}


def _count_marked(indicators: Sequence[str], markers: tuple[str, ...]) -> int:
    return sum(1 for ind in indicators if any(m in ind for m in markers))


def calibrate_distribution(aggregate: float, indicators: Sequence[str]) -> float:
    """Place the aggregate into a confidence band chosen by evidence strength."""
    strong = _count_marked(indicators, STRONG_INDICATOR_MARKERS)
    moderate = _count_marked(indicators, MODERATE_INDICATOR_MARKERS)

    if strong >= 2:
        return min(0.95, aggregate + 0.15)
    if strong >= 1 or moderate >= 3:
        return min(0.79, aggregate + 0.10)
    if moderate >= 1:
        return min(0.59, aggregate + 0.05)
    return min(0.39, aggregate)


def apply_evidence_boosts(domain: DomainType, aggregate: float, indicators: Sequence[str]) -> float:
    """Add the domain's fixed boosts for each evidence group that is present."""
    boosted = aggregate
    for needles, boost in DOMAIN_EVIDENCE_BOOSTS.get(domain, ()):
        if any(n in ind for ind in indicators for n in needles):
            boosted += boost
    return boosted


def calibrate_confidence(domain: DomainType, aggregate: float, indicators: Sequence[str]) -> int:
    """Convert a winning aggregate to an integer 0-100 confidence.

    With no indicators this is simply ``round(aggregate * 100)``.
    """
    calibrated = max(
        calibrate_distribution(aggregate, indicators),
        apply_evidence_boosts(domain, aggregate, indicators),
    )
    calibrated = min(1.0, max(0.0, calibrated))
    return int(round(calibrated * 100))


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------

def build_default_layers(
    weights: dict[str, float] | None = None,
    vocabularies: list[DomainVocabulary] | None = None,
) -> list[tuple[ClassificationLayer, float]]:
    """Instantiate the four standard layers in LAYER_ORDER with their weights."""
    weights = weights if weights is not None else DEFAULT_LAYER_WEIGHTS
    layers: list[tuple[ClassificationLayer, float]] = []
    for name in LAYER_ORDER:
        if name not in weights:
            continue
        layers.append((_LAYER_CLASSES[name](vocabularies), weights[name]))
    return layers


class HybridClassifier:
    """Run every layer and pick the domain with the highest weighted score.

    Per domain the aggregate is ``sum(weight * score)`` over the layers that
    emitted a score for it. Ties resolve by ``domain_priority`` order.
    """

    def __init__(
        self,
        layers: list[tuple[ClassificationLayer, float]] | None = None,
        domain_priority: Sequence[DomainType] | None = None,
    ) -> None:
        self.layers = layers if layers is not None else build_default_layers()
        self.domain_priority: tuple[DomainType, ...] = tuple(
            domain_priority if domain_priority is not None else DEFAULT_DOMAIN_PRIORITY
        )
        self._weights = {layer.name: weight for layer, weight in self.layers}

    def reconfigure(
        self,
        weights: dict[str, float],
        domain_priority: Sequence[DomainType],
    ) -> list[ClassificationLayer]:
        """Rebuild the layer list from ``weights`` in LAYER_ORDER and swap the tie-break order.

        Existing layer instances are reused. Standard layers missing from
        ``weights`` are dropped. Returns the newly built layers, which still
        need ``initialize``.
        """
        current = {layer.name: layer for layer, _ in self.layers}
        layers: list[tuple[ClassificationLayer, float]] = []
        added: list[ClassificationLayer] = []
        for name in LAYER_ORDER:
            if name not in weights:
                continue
            layer = current.get(name)
            if layer is None:
                layer = _LAYER_CLASSES[name]()
                added.append(layer)
            layers.append((layer, weights[name]))
        # Custom layers keep running at whatever weight the mapping gives them
        for name, layer in current.items():
            if name not in _LAYER_CLASSES:
                layers.append((layer, weights.get(name, 0.0)))

        self.layers = layers
        self.domain_priority = tuple(domain_priority)
        self._weights = {layer.name: weight for layer, weight in self.layers}
        return added

    async def initialize(self) -> None:
        for layer, _ in self.layers:
            await layer.initialize()

    def layer_info(self) -> list[LayerInfo]:
        return [LayerInfo(name=layer.name, weight=weight) for layer, weight in self.layers]

    def collect_scores(self, prompt: str) -> list[DomainScore]:
        """Run all layers in order. A failing layer is logged and skipped."""
        scores: list[DomainScore] = []
        for layer, _ in self.layers:
            try:
                scores.extend(layer.classify(prompt))
            except Exception as e:
                logger.warning("Layer %s failed, skipping: %s", layer.name, e)
        return scores

    def aggregate(self, scores: Sequence[DomainScore]) -> dict[DomainType, float]:
        totals = {domain: 0.0 for domain in self.domain_priority}
        for s in scores:
            totals[s.domain] = totals.get(s.domain, 0.0) + self._weights.get(s.method, 0.0) * s.score
        return totals

    def select_domain(self, totals: dict[DomainType, float]) -> DomainType:
        """Highest aggregate wins; equal aggregates keep the earlier priority."""
        best = self.domain_priority[0]
        for domain in self.domain_priority[1:]:
            if totals.get(domain, 0.0) > totals.get(best, 0.0):
                best = domain
        return best

    def classify(self, prompt: str) -> HybridResult:
        start = time.perf_counter()

        scores = self.collect_scores(prompt)
        totals = self.aggregate(scores)
        domain = self.select_domain(totals)
        aggregate = totals.get(domain, 0.0)
        indicators = tuple(ind for s in scores if s.domain == domain for ind in s.indicators)
        confidence = calibrate_confidence(domain, aggregate, indicators)

        processing_time = round((time.perf_counter() - start) * 1000, 2)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Aggregates %s -> %s (%d) in %.2fms",
                {d.value: round(v, 3) for d, v in totals.items()},
                domain.value, confidence, processing_time,
            )

        return HybridResult(
            domain=domain,
            confidence=confidence,
            indicators=indicators,
            processing_time=processing_time,
            aggregate=aggregate,
            layer_scores=tuple(scores),
        )
