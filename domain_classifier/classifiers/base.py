"""ClassificationLayer ABC: one independent scoring strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..types import DomainScore, DomainVocabulary
from ..vocabulary import list_vocabularies


class ClassificationLayer(ABC):
    """Base class for classification layers.

    A layer reads the prompt and its static vocabulary only; ``classify`` must
    not mutate instance state so one layer can serve concurrent callers.
    """

    def __init__(self, vocabularies: list[DomainVocabulary] | None = None) -> None:
        self.vocabularies = list(vocabularies) if vocabularies is not None else list_vocabularies()

    @abstractmethod
    def classify(self, prompt: str) -> list[DomainScore]:
        """Return one score per domain with evidence. Empty = no opinion."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Layer identifier (e.g. 'pattern', 'similarity'); used as DomainScore.method."""

    async def initialize(self) -> None:
        """Optional: pre-compute anything the layer needs before classifying."""
        pass
