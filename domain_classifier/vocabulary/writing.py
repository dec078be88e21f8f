"""Writing domain: articles, blog posts, creative writing, documentation."""

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

WRITING_PATTERNS: tuple[PatternTemplate, ...] = (
    # Content creation
    PatternTemplate(
        r"\b(write|create|draft|compose)\s+(article|blog|post|essay|story|content|document|email|letter)\b",
        0.9, "content creation",
    ),
    PatternTemplate(
        r"\b(compose|write|draft)\s+(email|letter|memo|message)\s+(to|for)\s+\w+\b",
        0.85, "communication writing",
    ),
    PatternTemplate(
        r"\b(author|publish|post|share)\s+\w*\s*(article|blog|content|story|essay)\b",
        0.85, "publishing task",
    ),
    PatternTemplate(
        r"\b(document|explain|describe|outline)\s+\w*\s*(process|procedure|method|approach|concept)\b",
        0.8, "documentation",
    ),
    PatternTemplate(
        r"\b(review|critique|evaluate)\s+\w*\s*(book|article|product|service|work)\b",
        0.8, "review writing",
    ),
    PatternTemplate(
        r"\b(summarize|summarise|condense)\s+\w*\s*(information|content|findings|report)\b",
        0.75, "summarization",
    ),
    # Writing context
    PatternTemplate(
        r"\b(newsletter|email|letter|memo|report)\s+(writing|creation|drafting)\b",
        0.85, "business writing",
    ),
    PatternTemplate(
        r"\b(creative|fictional|narrative|storytelling)\s+(writing|content|story)\b",
        0.8, "creative writing",
    ),
)

WRITING_VECTOR = DomainVector(
    domain=DomainType.WRITING,
    weights={
        "write": 0.15, "article": 0.12, "create": 0.11, "content": 0.10,
        "blog": 0.09, "post": 0.08, "essay": 0.08, "story": 0.07,
        "compose": 0.06, "draft": 0.06, "author": 0.05, "publish": 0.05,
        "document": 0.05, "report": 0.04, "explain": 0.04, "describe": 0.04,
        "outline": 0.03, "summarize": 0.03, "review": 0.03, "communication": 0.03,
    },
    description="Content creation and writing",
)

WRITING_HEURISTICS = HeuristicVocabulary(groups={
    "content_types": (
        "article", "blog", "post", "essay", "story", "document", "report",
        "newsletter",
    ),
    "actions": ("write", "create", "compose", "draft", "author", "publish"),
    "communication": ("explain", "describe", "document", "outline", "summarize", "present"),
    "audience": ("readers", "audience", "stakeholders", "customers", "users"),
    "creative": ("creative", "fictional", "narrative", "storytelling", "imaginative"),
    "phrases": (
        "blog post", "write a story", "write documentation", "compose essay",
        "draft report", "press release", "marketing copy", "social media",
        "cover letter", "user manual", "white paper", "meeting minutes",
    ),
})

WRITING_RULES = RuleSet(
    primary_keywords=("write", "create", "compose", "draft", "author", "publish"),
    secondary_keywords=(
        "article", "blog", "post", "essay", "story", "content", "document",
        "report",
    ),
    context_requirements=("content creation", "documentation", "publishing", "communication"),
    exclusions=(
        "debug code", "implement algorithm", "analyze data", "research methods",
        "evaluate performance", "study trends", "investigate approaches",
    ),
    bonus_patterns=(
        "write article", "create blog", "compose essay", "draft report",
        "publish content", "author story", "document process",
    ),
)

register_vocabulary(DomainVocabulary(
    domain=DomainType.WRITING,
    description="Blog posts, articles, creative writing, documentation",
    patterns=WRITING_PATTERNS,
    vector=WRITING_VECTOR,
    heuristics=WRITING_HEURISTICS,
    rules=WRITING_RULES,
    sample_prompts=(
        "write blog post about productivity",
        "create article on climate change",
        "compose essay about technology",
        "write story about adventure",
        "draft report on market analysis",
        "create newsletter content",
        "compose email to stakeholders",
        "write press release",
    ),
))
