"""Tests for HybridClassifier aggregation, tie-breaking, and confidence calibration."""

import logging

import pytest

from conftest import FailingLayer, FakeLayer
from domain_classifier.classifiers import RuleLayer
from domain_classifier.core.hybrid import (
    HybridClassifier,
    apply_evidence_boosts,
    build_default_layers,
    calibrate_confidence,
    calibrate_distribution,
)
from domain_classifier.types import DEFAULT_DOMAIN_PRIORITY, DomainType


class TestAggregation:
    def test_weighted_sum_picks_highest(self):
        hybrid = HybridClassifier(layers=[
            (FakeLayer("pattern", {DomainType.CODE: 0.5, DomainType.WRITING: 1.0}), 0.3),
            (FakeLayer("heuristic", {DomainType.CODE: 1.0}), 0.1),
        ])
        result = hybrid.classify("anything")
        assert result.domain == DomainType.WRITING
        assert result.aggregate == pytest.approx(0.3)
        assert result.confidence == 30

    def test_silent_domains_contribute_nothing(self):
        hybrid = HybridClassifier(layers=[
            (FakeLayer("pattern", {DomainType.ANALYSIS: 0.4}), 0.5),
        ])
        totals = hybrid.aggregate(hybrid.collect_scores("x"))
        assert totals[DomainType.ANALYSIS] == pytest.approx(0.2)
        assert totals[DomainType.CODE] == 0.0

    def test_tie_resolves_by_priority(self):
        layer = FakeLayer("pattern", {DomainType.RESEARCH: 0.5, DomainType.ANALYSIS: 0.5})
        hybrid = HybridClassifier(layers=[(layer, 1.0)])
        assert hybrid.classify("x").domain == DomainType.ANALYSIS

    def test_custom_priority(self):
        layer = FakeLayer("pattern", {DomainType.RESEARCH: 0.5, DomainType.ANALYSIS: 0.5})
        hybrid = HybridClassifier(
            layers=[(layer, 1.0)],
            domain_priority=[
                DomainType.RESEARCH, DomainType.ANALYSIS,
                DomainType.WRITING, DomainType.CODE,
            ],
        )
        assert hybrid.classify("x").domain == DomainType.RESEARCH

    def test_no_scores_defaults_to_code(self):
        hybrid = HybridClassifier(layers=[(FakeLayer("pattern"), 1.0)])
        result = hybrid.classify("x")
        assert result.domain == DomainType.CODE
        assert result.aggregate == 0.0
        assert result.confidence == 0

    def test_failing_layer_is_skipped(self, caplog):
        hybrid = HybridClassifier(layers=[
            (FailingLayer("similarity"), 0.4),
            (FakeLayer("pattern", {DomainType.WRITING: 1.0}), 0.6),
        ])
        with caplog.at_level(logging.WARNING, logger="domain_classifier.core.hybrid"):
            result = hybrid.classify("x")
        assert result.domain == DomainType.WRITING
        assert result.aggregate == pytest.approx(0.6)
        assert "similarity failed" in caplog.text

    def test_layer_scores_recorded(self):
        hybrid = HybridClassifier(layers=[
            (FakeLayer("pattern", {DomainType.CODE: 0.9}), 0.3),
            (FakeLayer("rule", {DomainType.CODE: 0.5}), 0.2),
        ])
        result = hybrid.classify("x")
        assert [s.method for s in result.layer_scores] == ["pattern", "rule"]
        assert result.method == "hybrid"
        assert result.processing_time >= 0


class TestDefaultLayers:
    def test_four_layers_in_order(self):
        names = [info.name for info in HybridClassifier().layer_info()]
        assert names == ["similarity", "pattern", "rule", "heuristic"]

    def test_weights_sum_to_one(self):
        total = sum(info.weight for info in HybridClassifier().layer_info())
        assert total == pytest.approx(1.0)

    def test_reconfigure(self):
        hybrid = HybridClassifier()
        pattern = hybrid.layers[1][0]
        added = hybrid.reconfigure({"pattern": 1.0}, list(reversed(hybrid.domain_priority)))
        assert added == []
        assert hybrid.layers == [(pattern, 1.0)]
        assert hybrid.domain_priority[0] == DomainType.RESEARCH

    def test_reconfigure_builds_missing_layers(self):
        hybrid = HybridClassifier(layers=build_default_layers({"pattern": 1.0}))
        added = hybrid.reconfigure({"rule": 0.5, "pattern": 0.5}, DEFAULT_DOMAIN_PRIORITY)
        assert [type(layer) for layer in added] == [RuleLayer]
        assert [(info.name, info.weight) for info in hybrid.layer_info()] == [
            ("pattern", 0.5), ("rule", 0.5),
        ]
        result = hybrid.classify("write a function in python")
        assert "rule" in {s.method for s in result.layer_scores}

    @pytest.mark.asyncio
    async def test_initialize_reaches_every_layer(self):
        layers = [FakeLayer("pattern"), FakeLayer("rule")]
        hybrid = HybridClassifier(layers=[(layer, 0.5) for layer in layers])
        await hybrid.initialize()
        assert all(layer.initialized for layer in layers)


class TestConfidence:
    def test_no_indicators_is_scaled_aggregate(self):
        assert calibrate_confidence(DomainType.CODE, 0.3, ()) == 30
        assert calibrate_confidence(DomainType.ANALYSIS, 0.82, ()) == 82

    def test_distribution_strong(self):
        indicators = ("bonus: in python", "programming language")
        assert calibrate_distribution(0.5, indicators) == pytest.approx(0.65)

    def test_distribution_moderate(self):
        assert calibrate_distribution(0.5, ("primary: study",)) == pytest.approx(0.55)

    def test_distribution_capped_without_evidence(self):
        assert calibrate_distribution(0.5, ("semantic similarity: 20.0%",)) == 0.39

    def test_evidence_boosts(self):
        indicators = ("programming language", "primary: implement")
        assert apply_evidence_boosts(DomainType.CODE, 0.5, indicators) == pytest.approx(0.75)

    def test_boosts_only_for_winning_domain(self):
        indicators = ("programming language",)
        assert apply_evidence_boosts(DomainType.WRITING, 0.5, indicators) == 0.5

    def test_clamped_to_100(self):
        indicators = ("programming language", "primary: implement", "bonus: in python")
        assert calibrate_confidence(DomainType.CODE, 0.9, indicators) == 100
