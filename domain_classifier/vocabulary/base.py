"""Vocabulary registry: register, lookup, and list per-domain vocabularies."""

from __future__ import annotations

from ..types import DomainType, DomainVocabulary

_VOCABULARIES: dict[DomainType, DomainVocabulary] = {}


def register_vocabulary(vocabulary: DomainVocabulary) -> None:
    """Register a vocabulary under its domain."""
    _VOCABULARIES[vocabulary.domain] = vocabulary


def get_vocabulary(domain: DomainType) -> DomainVocabulary | None:
    """Return the vocabulary for a domain, or None if not registered."""
    return _VOCABULARIES.get(domain)


def list_vocabularies() -> list[DomainVocabulary]:
    """Return all registered vocabularies in DomainType declaration order."""
    return [_VOCABULARIES[d] for d in DomainType if d in _VOCABULARIES]
