"""Research domain: best practices, methodologies, tool and solution discovery."""

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

RESEARCH_PATTERNS: tuple[PatternTemplate, ...] = (
    # Research actions
    PatternTemplate(
        r"\b(research|investigate|explore|study)\s+\w*\s*(best practices|methodologies|approaches|techniques)\b",
        0.9, "methodology research",
    ),
    PatternTemplate(
        r"\b(find|discover|identify)\s+\w*\s*(solutions|methods|techniques|tools|approaches)\b",
        0.8, "solution discovery",
    ),
    PatternTemplate(
        r"\b(explore|investigate|examine)\s+\w*\s*(trends|technologies|frameworks|standards|methodology|methodologies)\b",
        0.8, "technology exploration",
    ),
    PatternTemplate(
        r"\b(explore|study|investigate)\s+\w*\s*(agile|scrum|devops|methodology|framework|approach)\b",
        0.85, "methodology exploration",
    ),
    PatternTemplate(
        r"\b(compare|evaluate|assess)\s+\w*\s*(tools|platforms|solutions|options)\b",
        0.75, "tool comparison",
    ),
    # Research context
    PatternTemplate(
        r"\b(agile|devops|security|ux|ui|machine learning|ai)\s+(best practices|methodologies|approaches)\b",
        0.85, "domain research",
    ),
    PatternTemplate(
        r"\b(industry|market|competitive)\s+(research|analysis|investigation)\b",
        0.8, "market research",
    ),
)

RESEARCH_VECTOR = DomainVector(
    domain=DomainType.RESEARCH,
    weights={
        "research": 0.15, "investigate": 0.12, "explore": 0.11, "study": 0.10,
        "best": 0.09, "practices": 0.09, "methodologies": 0.08, "approaches": 0.07,
        "techniques": 0.06, "find": 0.06, "discover": 0.05, "solutions": 0.05,
        "methods": 0.05, "frameworks": 0.04, "tools": 0.04, "platforms": 0.04,
        "standards": 0.03, "guidelines": 0.03, "recommendations": 0.03, "strategies": 0.03,
    },
    description="Research and methodology exploration",
)

RESEARCH_HEURISTICS = HeuristicVocabulary(groups={
    "actions": ("research", "investigate", "explore", "study", "find", "discover"),
    "planning": ("outline", "plan", "strategy", "roadmap", "goals", "objectives", "requirements"),
    "planning_objects": ("goals", "objectives"),
    "methodology": (
        "best practices", "methodologies", "approaches", "techniques",
        "methods", "frameworks",
    ),
    "solutions": ("solutions", "tools", "platforms", "options", "alternatives", "recommendations"),
    "tech_domains": (
        "agile", "devops", "security", "ux", "ui", "machine learning", "ai",
        "blockchain",
    ),
    "questions": ("?", "how", "what", "which"),
    "comparison_objects": ("tools", "platforms", "solutions"),
    "phrases": (
        "research best practices", "investigate approaches", "explore methods",
        "review literature", "find solutions", "discover techniques",
        "what are the best", "how to choose", "which approach",
        "recommendations for", "guidelines for", "industry standard",
    ),
})

RESEARCH_RULES = RuleSet(
    primary_keywords=("research", "investigate", "explore", "study", "find", "discover"),
    secondary_keywords=(
        "best practices", "methodologies", "approaches", "techniques",
        "solutions", "tools", "frameworks", "strategies",
    ),
    context_requirements=(
        "methodology exploration", "best practices research",
        "solution discovery", "framework research",
    ),
    exclusions=(
        "debug code", "implement algorithm", "write article", "analyze data",
        "evaluate performance", "compose essay", "create content",
    ),
    bonus_patterns=(
        "research best practices", "investigate approaches", "explore methodologies",
        "find solutions", "discover techniques", "study methods",
    ),
)

register_vocabulary(DomainVocabulary(
    domain=DomainType.RESEARCH,
    description="Research, investigation, and methodology exploration",
    patterns=RESEARCH_PATTERNS,
    vector=RESEARCH_VECTOR,
    heuristics=RESEARCH_HEURISTICS,
    rules=RESEARCH_RULES,
    sample_prompts=(
        "research best practices for security",
        "investigate machine learning approaches",
        "explore agile methodology",
        "study project management techniques",
        "investigate cloud computing solutions",
        "explore data science methodologies",
        "study cybersecurity frameworks",
        "research mobile app development",
    ),
))
