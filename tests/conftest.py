"""Shared fixtures for domain-classifier tests."""

from __future__ import annotations

import asyncio

import pytest

from domain_classifier.classifiers import ClassificationLayer
from domain_classifier.engine import DomainClassifier
from domain_classifier.types import DomainScore, DomainType


@pytest.fixture
def classifier() -> DomainClassifier:
    c = DomainClassifier()
    asyncio.run(c.initialize())
    return c


GOLDEN_PROMPTS: list[tuple[str, DomainType]] = [
    ("implement binary search algorithm", DomainType.CODE),
    ("write blog post about productivity", DomainType.WRITING),
    ("analyze market trends data", DomainType.ANALYSIS),
    ("research best practices for security", DomainType.RESEARCH),
]


class FakeLayer(ClassificationLayer):
    """Layer that returns canned scores (no vocabulary lookups)."""

    def __init__(self, layer_name: str, scores: dict[DomainType, float] | None = None):
        super().__init__(vocabularies=[])
        self._name = layer_name
        self._scores = scores or {}
        self.initialized = False
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    async def initialize(self) -> None:
        self.initialized = True

    def classify(self, prompt: str) -> list[DomainScore]:
        self.calls.append(prompt)
        return [
            DomainScore(domain=d, score=s, method=self._name)
            for d, s in self._scores.items()
        ]


class FailingLayer(FakeLayer):
    """Layer whose classify always raises."""

    def classify(self, prompt: str) -> list[DomainScore]:
        raise RuntimeError("layer exploded")
