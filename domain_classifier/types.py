"""All dataclasses, enums, and type aliases for domain-classifier."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Domains
# ---------------------------------------------------------------------------

class DomainType(str, Enum):
    """The four task domains a prompt can be classified into."""
    CODE = "code"
    WRITING = "writing"
    ANALYSIS = "analysis"
    RESEARCH = "research"


# CODE doubles as the neutral domain for every fallback result.
DEFAULT_DOMAIN = DomainType.CODE

DEFAULT_DOMAIN_PRIORITY: tuple[DomainType, ...] = (
    DomainType.CODE,
    DomainType.WRITING,
    DomainType.ANALYSIS,
    DomainType.RESEARCH,
)


# ---------------------------------------------------------------------------
# Scores & Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DomainScore:
    """One layer's opinion about one domain."""
    domain: DomainType
    score: float  # 0-1, already calibrated by the layer
    method: str  # layer name: "similarity", "pattern", "rule", "heuristic"
    indicators: tuple[str, ...] = ()


@dataclass(frozen=True)
class ClassificationResult:
    domain: DomainType
    confidence: int  # 0-100
    indicators: tuple[str, ...] = ()
    processing_time: float = 0.0  # milliseconds

    def to_dict(self) -> dict:
        return {
            "domain": self.domain.value,
            "confidence": self.confidence,
            "indicators": list(self.indicators),
            "processing_time": self.processing_time,
        }


@dataclass(frozen=True)
class HybridResult:
    """Aggregator output: the final label plus the evidence that produced it."""
    domain: DomainType
    confidence: int
    indicators: tuple[str, ...] = ()
    processing_time: float = 0.0
    aggregate: float = 0.0  # raw weighted sum for the winning domain
    layer_scores: tuple[DomainScore, ...] = ()
    method: str = "hybrid"

    def to_result(self) -> ClassificationResult:
        return ClassificationResult(
            domain=self.domain,
            confidence=self.confidence,
            indicators=self.indicators,
            processing_time=self.processing_time,
        )

    def to_dict(self) -> dict:
        data = self.to_result().to_dict()
        data["aggregate"] = round(self.aggregate, 4)
        data["layer_scores"] = [
            {
                "domain": s.domain.value,
                "score": s.score,
                "method": s.method,
                "indicators": list(s.indicators),
            }
            for s in self.layer_scores
        ]
        return data


@dataclass(frozen=True)
class LayerInfo:
    name: str
    weight: float


# ---------------------------------------------------------------------------
# Domain Vocabulary
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PatternTemplate:
    """A curated regex with the raw score it contributes when it matches."""
    regex: str
    score: float  # (0, 1]
    description: str
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to cache the compiled pattern
        object.__setattr__(self, "pattern", re.compile(self.regex, re.IGNORECASE))

    def search(self, text: str) -> bool:
        return self.pattern.search(text) is not None


@dataclass(frozen=True)
class DomainVector:
    """Precomputed term -> weight mapping standing in for a domain embedding."""
    domain: DomainType
    weights: dict[str, float]
    description: str = ""


@dataclass(frozen=True)
class HeuristicVocabulary:
    """Term lists consumed by one domain's heuristic scoring function.

    ``groups`` maps a group name (e.g. "languages", "quantitative") to its
    terms; the scoring function decides how each group is weighted.
    """
    groups: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def terms(self, group: str) -> tuple[str, ...]:
        return self.groups.get(group, ())


@dataclass(frozen=True)
class RuleSet:
    """Keyword rules with exclusions, used by the rule layer."""
    primary_keywords: tuple[str, ...] = ()
    secondary_keywords: tuple[str, ...] = ()
    context_requirements: tuple[str, ...] = ()
    exclusions: tuple[str, ...] = ()  # phrases that veto the domain outright
    bonus_patterns: tuple[str, ...] = ()  # high-confidence phrases


@dataclass(frozen=True)
class DomainVocabulary:
    """Everything the layers know about one domain."""
    domain: DomainType
    description: str
    patterns: tuple[PatternTemplate, ...]
    vector: DomainVector
    heuristics: HeuristicVocabulary
    rules: RuleSet
    sample_prompts: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_LAYER_WEIGHTS: dict[str, float] = {
    "similarity": 0.4,
    "pattern": 0.3,
    "rule": 0.2,
    "heuristic": 0.1,
}


@dataclass
class ClassifierConfig:
    min_confidence: int = 20  # advisory; the enforced floor is CONFIDENCE_FLOOR
    max_processing_time: int = 20  # ms; exceeding it logs a warning
    enable_performance_logging: bool = False
    layer_weights: dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_LAYER_WEIGHTS)
    )
    domain_priority: list[DomainType] = field(
        default_factory=lambda: list(DEFAULT_DOMAIN_PRIORITY)
    )
