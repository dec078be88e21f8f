"""Code domain: programming, algorithms, development, debugging."""

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

CODE_PATTERNS: tuple[PatternTemplate, ...] = (
    # Implementation
    PatternTemplate(
        r"\b(implement|build|create|develop)\s+(algorithm|function|method|class|program|application)\b",
        0.9, "implementation task",
    ),
    PatternTemplate(
        r"\b(implement|build|create|develop)\s+.*?\s*(algorithm|function|method|class|program|application)\b",
        0.85, "complex implementation task",
    ),
    PatternTemplate(
        r"\b(write|code|program)\s+(in\s+)?(python|javascript|java|typescript|c\+\+|react|node)\b",
        0.95, "programming language",
    ),
    PatternTemplate(
        r"\b(debug|fix|troubleshoot|repair)\s+\w*\s*(code|bug|error|issue|problem)\b",
        0.85, "debugging task",
    ),
    PatternTemplate(
        r"\b(optimize|refactor|improve)\s+\w*\s*(code|algorithm|performance|function|database|queries)\b",
        0.8, "code optimization",
    ),
    PatternTemplate(
        r"\b(fix|resolve|repair)\s+\w*\s*(memory leak|performance issue|bug|error)\b",
        0.85, "issue resolution",
    ),
    PatternTemplate(
        r"\b(create|build|design)\s+(api|database|schema|component|module|system|application)\b",
        0.85, "system component",
    ),
    PatternTemplate(
        r"\b(create|build|design)\s+.*?\s*(authentication|security|user|system|application)\b",
        0.8, "complex system component",
    ),
    PatternTemplate(
        r"\b(test|validate|verify)\s+\w*\s*(function|method|code|application)\b",
        0.8, "testing task",
    ),
    # Technical context
    PatternTemplate(
        r"\b(software|application|system|program)\s+(development|engineering|architecture)\b",
        0.8, "software development",
    ),
    PatternTemplate(
        r"\b(authentication|security|encryption|database)\s+(implementation|setup|configuration)\b",
        0.85, "technical implementation",
    ),
)

CODE_VECTOR = DomainVector(
    domain=DomainType.CODE,
    weights={
        "implement": 0.15, "algorithm": 0.12, "function": 0.11, "debug": 0.10,
        "code": 0.10, "program": 0.09, "develop": 0.08, "build": 0.08,
        "optimize": 0.07, "refactor": 0.06, "class": 0.06, "method": 0.05,
        "variable": 0.05, "array": 0.04, "loop": 0.04, "api": 0.04,
        "database": 0.04, "software": 0.03, "application": 0.03, "system": 0.03,
    },
    description="Programming and software development",
)

CODE_HEURISTICS = HeuristicVocabulary(groups={
    "languages": (
        "python", "javascript", "java", "typescript", "c++", "react", "node",
        "html", "css",
    ),
    "terms": (
        "function", "class", "method", "variable", "array", "loop",
        "condition", "api", "database",
    ),
    "contexts": ("software", "application", "system", "program", "code", "algorithm"),
    "phrases": (
        "write a function", "implement algorithm", "create a class",
        "debug code", "fix bug", "refactor code", "run tests", "unit tests",
        "memory leak", "rest api", "code review", "software development",
    ),
    "action_verbs": ("implement",),
    "action_objects": ("algorithm", "function"),
})

CODE_RULES = RuleSet(
    primary_keywords=(
        "implement", "debug", "optimize", "refactor", "code", "program",
        "develop", "build",
    ),
    secondary_keywords=(
        "algorithm", "function", "method", "class", "variable", "array",
        "loop", "api", "database",
    ),
    context_requirements=("programming", "development", "software", "application", "system"),
    exclusions=(
        "analyze data", "write about", "research methods", "study trends",
        "evaluate performance", "assess results", "compare approaches",
        "research mobile app", "research best practices", "investigate approaches",
    ),
    bonus_patterns=(
        "in python", "in javascript", "in java", "in typescript", "in c++",
        "write a function", "implement algorithm", "debug code", "create api",
        "optimize database", "build rest api", "fix memory leak", "create database",
    ),
)

register_vocabulary(DomainVocabulary(
    domain=DomainType.CODE,
    description="Programming, algorithms, development, debugging tasks",
    patterns=CODE_PATTERNS,
    vector=CODE_VECTOR,
    heuristics=CODE_HEURISTICS,
    rules=CODE_RULES,
    sample_prompts=(
        "implement binary search algorithm",
        "debug authentication system",
        "optimize database queries",
        "create a function to sort arrays",
        "build a REST API",
        "write Python code for data processing",
        "fix memory leak in application",
        "refactor legacy code",
    ),
))
