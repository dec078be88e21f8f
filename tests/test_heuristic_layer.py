"""Tests for HeuristicLayer keyword scoring."""

import pytest

from domain_classifier.classifiers.heuristic import (
    COMPARATIVE_EVALUATION_PENALTY,
    HEURISTIC_CAP,
    PLANNING_GOALS_BOOST,
    TOOL_COMPARISON_BOOST,
    HeuristicLayer,
    score_analysis,
    score_code,
    score_research,
    score_writing,
)
from domain_classifier.types import DomainType, HeuristicVocabulary
from domain_classifier.vocabulary import get_vocabulary


@pytest.fixture
def layer():
    return HeuristicLayer()


def _by_domain(scores):
    return {s.domain: s for s in scores}


def test_name(layer):
    assert layer.name == "heuristic"


def test_score_capped(layer):
    prompt = "python function class method variable array loop api database"
    code = _by_domain(layer.classify(prompt))[DomainType.CODE]
    assert code.score == HEURISTIC_CAP


def test_indicator_is_layer_label(layer):
    code = _by_domain(layer.classify("write a python function"))[DomainType.CODE]
    assert code.indicators == ("code-specific patterns",)


def test_comparative_evaluation_favors_research(layer):
    scores = _by_domain(layer.classify("evaluate different tools"))
    assert scores[DomainType.RESEARCH].score == pytest.approx(0.45)
    assert DomainType.ANALYSIS not in scores


def test_no_terms_emits_nothing(layer):
    assert layer.classify("purple elephant banana umbrella") == []


class TestScoreCode:
    def test_action_pair_bonus(self):
        vocab = HeuristicVocabulary(groups={
            "action_verbs": ("implement",),
            "action_objects": ("algorithm",),
        })
        assert score_code("implement algorithm", vocab) == pytest.approx(0.2)

    def test_verb_without_object(self):
        vocab = HeuristicVocabulary(groups={
            "action_verbs": ("implement",),
            "action_objects": ("algorithm",),
        })
        assert score_code("implement it", vocab) == 0.0

    def test_language_counts_once(self):
        vocab = HeuristicVocabulary(groups={"languages": ("python", "rust")})
        assert score_code("python and rust", vocab) == pytest.approx(0.3)


class TestScoreResearch:
    @pytest.fixture
    def vocab(self):
        return get_vocabulary(DomainType.RESEARCH).heuristics

    def test_outline_goals_boost(self, vocab):
        assert score_research("outline project goals", vocab) == pytest.approx(PLANNING_GOALS_BOOST)
        assert PLANNING_GOALS_BOOST == 0.4

    def test_planning_terms_without_outline(self, vocab):
        assert score_research("plan the roadmap", vocab) == pytest.approx(0.16)

    def test_tool_comparison_boost(self, vocab):
        # "tools" as a solution term plus the comparison boost
        assert score_research("compare tools", vocab) == pytest.approx(0.1 + TOOL_COMPARISON_BOOST)

    def test_comparative_evaluation_boost(self, vocab):
        assert score_research("evaluate different options", vocab) == pytest.approx(0.1 + 0.35)


class TestScoreAnalysis:
    @pytest.fixture
    def vocab(self):
        return get_vocabulary(DomainType.ANALYSIS).heuristics

    def test_verb_object_bonus(self, vocab):
        assert score_analysis("analyze performance", vocab) == pytest.approx(0.15)

    def test_bonus_per_verb(self, vocab):
        assert score_analysis("analyze and assess performance", vocab) == pytest.approx(0.3)

    def test_verb_without_object(self, vocab):
        assert score_analysis("analyze it", vocab) == 0.0

    def test_comparative_evaluation_penalty(self, vocab):
        assert score_analysis("evaluate different options", vocab) == pytest.approx(
            -COMPARATIVE_EVALUATION_PENALTY
        )


class TestScoreWriting:
    @pytest.fixture
    def vocab(self):
        return get_vocabulary(DomainType.WRITING).heuristics

    def test_content_action_phrase_audience(self, vocab):
        # blog + post, write, "blog post", readers
        assert score_writing("write a blog post for readers", vocab) == pytest.approx(0.7)

    def test_creative_bonus(self, vocab):
        assert score_writing("imaginative story", vocab) == pytest.approx(0.3)
