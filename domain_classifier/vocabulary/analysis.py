"""Analysis domain: data analysis, evaluation, metrics, comparisons."""

from __future__ import annotations

from ..types import (
    DomainType,
    DomainVector,
    DomainVocabulary,
    HeuristicVocabulary,
    PatternTemplate,
    RuleSet,
)
from .base import register_vocabulary

ANALYSIS_PATTERNS: tuple[PatternTemplate, ...] = (
    # Analysis actions
    PatternTemplate(
        r"\b(analyze|evaluate|assess|examine|review)\s+\w*\s*(data|trends|performance|metrics|results)\b",
        0.9, "data analysis",
    ),
    PatternTemplate(
        r"\b(compare|contrast|benchmark)\s+(approaches|methods|solutions|options|strategies)\b",
        0.9, "comparative analysis",
    ),
    PatternTemplate(
        r"\b(compare|contrast|benchmark)\s+.*?\s*(approaches|methods|solutions|options|strategies)\b",
        0.85, "complex comparative analysis",
    ),
    PatternTemplate(
        r"\b(study|investigate|explore)\s+\w*\s*(patterns|behavior|correlations|relationships)\b",
        0.8, "pattern investigation",
    ),
    PatternTemplate(
        r"\b(calculate|measure|compute|assess)\s+\w*\s*(roi|metrics|statistics|performance|efficiency|scores|satisfaction)\b",
        0.8, "quantitative analysis",
    ),
    PatternTemplate(
        r"\b(assess|evaluate|measure)\s+\w*\s*(customer|user|client)\s+(satisfaction|experience|feedback|scores)\b",
        0.85, "customer analysis",
    ),
    PatternTemplate(
        r"\b(examine|assess|evaluate)\s+\w*\s*(impact|effectiveness|outcomes|results)\b",
        0.8, "impact evaluation",
    ),
    # Data analysis context
    PatternTemplate(
        r"\b(market|business|financial|customer|sales)\s+(analysis|evaluation|assessment)\b",
        0.85, "business analysis",
    ),
    PatternTemplate(
        r"\b(statistical|performance|quality|efficiency)\s+(analysis|evaluation|metrics)\b",
        0.8, "performance analysis",
    ),
)

ANALYSIS_VECTOR = DomainVector(
    domain=DomainType.ANALYSIS,
    weights={
        "analyze": 0.14, "data": 0.12, "evaluate": 0.11, "assess": 0.10,
        "examine": 0.09, "study": 0.08, "investigate": 0.07, "trends": 0.07,
        "patterns": 0.06, "metrics": 0.06, "performance": 0.05, "results": 0.05,
        "compare": 0.05, "contrast": 0.04, "benchmark": 0.04, "statistics": 0.04,
        "findings": 0.03, "correlation": 0.03, "measurement": 0.03, "outcomes": 0.03,
    },
    description="Data analysis and evaluation",
)

ANALYSIS_HEURISTICS = HeuristicVocabulary(groups={
    "quantitative": ("data", "metrics", "statistics", "numbers", "figures", "results", "trends"),
    "comparison": ("compare", "contrast", "versus", "vs", "against", "between"),
    "action_verbs": ("analyze", "evaluate", "assess", "examine", "study"),
    "action_objects": ("data", "performance", "results", "trends", "patterns"),
    "business": ("market", "business", "financial", "customer", "sales", "roi", "growth"),
    "phrases": (
        "market trends", "data analysis", "statistical analysis",
        "trend analysis", "performance metrics", "cost-benefit",
        "customer satisfaction", "sales data", "quality metrics",
        "impact assessment", "competitive analysis", "correlation between",
    ),
})

ANALYSIS_RULES = RuleSet(
    primary_keywords=(
        "analyze", "evaluate", "assess", "examine", "study", "investigate",
        "measure", "calculate", "track", "monitor",
    ),
    secondary_keywords=(
        "data", "trends", "patterns", "metrics", "performance", "results",
        "findings", "statistics", "traffic", "scores", "benchmark",
    ),
    context_requirements=(
        "data analysis", "performance evaluation", "comparative study",
        "statistical analysis", "measurement analysis",
    ),
    exclusions=(
        "debug code", "implement algorithm", "write function", "create program",
        "write article", "compose essay", "research best practices",
    ),
    bonus_patterns=(
        "analyze data", "evaluate performance", "assess results", "examine trends",
        "compare approaches", "benchmark performance", "statistical analysis",
    ),
)

register_vocabulary(DomainVocabulary(
    domain=DomainType.ANALYSIS,
    description="Data analysis, evaluation, and quantitative assessment",
    patterns=ANALYSIS_PATTERNS,
    vector=ANALYSIS_VECTOR,
    heuristics=ANALYSIS_HEURISTICS,
    rules=ANALYSIS_RULES,
    sample_prompts=(
        "analyze market trends data",
        "evaluate system performance metrics",
        "assess customer satisfaction scores",
        "examine sales data patterns",
        "calculate ROI for investment",
        "measure website traffic statistics",
        "benchmark application performance",
        "analyze user behavior patterns",
    ),
))
