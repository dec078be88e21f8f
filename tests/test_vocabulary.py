"""Tests for the vocabulary registry and built-in domain vocabularies."""

import pytest

from domain_classifier.vocabulary import get_vocabulary, list_vocabularies
from domain_classifier.types import DomainType


def test_all_domains_registered():
    domains = [v.domain for v in list_vocabularies()]
    assert domains == [
        DomainType.CODE, DomainType.WRITING, DomainType.ANALYSIS, DomainType.RESEARCH,
    ]


def test_get_vocabulary():
    vocab = get_vocabulary(DomainType.WRITING)
    assert vocab is not None
    assert vocab.vector.domain == DomainType.WRITING


@pytest.mark.parametrize("vocab", list_vocabularies(), ids=lambda v: v.domain.value)
class TestVocabularyContents:
    def test_pattern_scores_in_range(self, vocab):
        assert vocab.patterns
        for template in vocab.patterns:
            assert 0 < template.score <= 1
            assert template.description

    def test_vector_weights_positive(self, vocab):
        assert vocab.vector.weights
        assert all(w > 0 for w in vocab.vector.weights.values())

    def test_rules_present(self, vocab):
        assert vocab.rules.primary_keywords
        assert vocab.rules.bonus_patterns

    def test_sample_prompts(self, vocab):
        assert len(vocab.sample_prompts) >= 5


def test_patterns_precompiled():
    template = get_vocabulary(DomainType.CODE).patterns[0]
    assert template.search("IMPLEMENT ALGORITHM")
    assert not template.search("write a poem")
