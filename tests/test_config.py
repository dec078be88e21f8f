"""Tests for configuration loading and validation."""

import json

import pytest
import yaml

from domain_classifier.config import load_config, validate_config
from domain_classifier.types import ClassifierConfig, DomainType


class TestLoadConfig:
    def test_load_defaults(self):
        config = load_config(config_dict={})
        assert config.min_confidence == 20
        assert config.max_processing_time == 20
        assert config.enable_performance_logging is False
        assert config.domain_priority == [
            DomainType.CODE, DomainType.WRITING, DomainType.ANALYSIS, DomainType.RESEARCH,
        ]

    def test_load_from_dict(self):
        config = load_config(config_dict={
            "maxProcessingTime": 10,
            "layer_weights": {"pattern": 0.6, "similarity": 0.4},
        })
        assert config.max_processing_time == 10
        assert config.layer_weights == {"pattern": 0.6, "similarity": 0.4}

    def test_classifier_section(self):
        config = load_config(config_dict={"classifier": {"min_confidence": 35}})
        assert config.min_confidence == 35

    def test_load_from_yaml_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.dump({
            "classifier": {
                "max_processing_time": 30,
                "domain_priority": ["research", "analysis", "writing", "code"],
            },
        }))
        config = load_config(config_path=path)
        assert config.max_processing_time == 30
        assert config.domain_priority[0] == DomainType.RESEARCH

    def test_load_from_json_file(self, tmp_path):
        path = tmp_path / "domain-classifier.json"
        path.write_text(json.dumps({"enablePerformanceLogging": True}))
        config = load_config(config_path=path)
        assert config.enable_performance_logging is True

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(config_path=path) == ClassifierConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(config_path=tmp_path / "nope.yaml")

    def test_discovery(self, tmp_path, monkeypatch):
        (tmp_path / "domain-classifier.yaml").write_text("max_processing_time: 77\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert load_config().max_processing_time == 77

    @pytest.mark.parametrize("raw, expected", [
        ("false", False), ("False", False), ("no", False), ("true", True), ("on", True),
    ])
    def test_boolean_strings(self, raw, expected):
        config = load_config(config_dict={"enablePerformanceLogging": raw})
        assert config.enable_performance_logging is expected

    @pytest.mark.parametrize("raw", ["maybe", 1, None])
    def test_non_boolean_rejected(self, raw):
        with pytest.raises(ValueError, match="must be a boolean"):
            load_config(config_dict={"enable_performance_logging": raw})

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown classifier option"):
            load_config(config_dict={"context_window": 1000})

    def test_unknown_domain(self):
        with pytest.raises(ValueError, match="Unknown domain"):
            load_config(config_dict={"domain_priority": ["code", "poetry"]})


class TestValidateConfig:
    def test_valid_default(self):
        assert validate_config(ClassifierConfig()) == []

    def test_min_confidence_range(self):
        errors = validate_config(ClassifierConfig(min_confidence=150))
        assert any("min_confidence" in e for e in errors)

    def test_processing_time_positive(self):
        errors = validate_config(ClassifierConfig(max_processing_time=0))
        assert any("max_processing_time" in e for e in errors)

    def test_no_weights(self):
        errors = validate_config(ClassifierConfig(layer_weights={}))
        assert any("At least one layer" in e for e in errors)

    def test_unknown_layer(self):
        errors = validate_config(ClassifierConfig(layer_weights={"neural": 1.0}))
        assert any("Unknown layer 'neural'" in e for e in errors)

    def test_negative_weight(self):
        errors = validate_config(ClassifierConfig(layer_weights={"pattern": -0.1}))
        assert any(">= 0" in e for e in errors)

    def test_priority_must_be_permutation(self):
        config = ClassifierConfig(domain_priority=[DomainType.CODE, DomainType.CODE])
        errors = validate_config(config)
        assert any("domain_priority" in e for e in errors)
