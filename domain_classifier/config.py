"""Configuration loading, validation, and defaults."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from .types import (
    DEFAULT_DOMAIN_PRIORITY,
    DEFAULT_LAYER_WEIGHTS,
    ClassifierConfig,
    DomainType,
)

CONFIG_FILENAMES = [
    "domain-classifier.yaml",
    "domain-classifier.yml",
    "domain-classifier.json",
]

KNOWN_LAYERS = frozenset(DEFAULT_LAYER_WEIGHTS)

# Accepted spellings -> ClassifierConfig field
_OPTION_ALIASES: dict[str, str] = {
    "min_confidence": "min_confidence",
    "minConfidence": "min_confidence",
    "max_processing_time": "max_processing_time",
    "maxProcessingTime": "max_processing_time",
    "enable_performance_logging": "enable_performance_logging",
    "enablePerformanceLogging": "enable_performance_logging",
    "layer_weights": "layer_weights",
    "layerWeights": "layer_weights",
    "domain_priority": "domain_priority",
    "domainPriority": "domain_priority",
}


def _discover_config() -> Path | None:
    """Search CWD then parent dirs up to home for a config file."""
    cwd = Path.cwd()
    home = Path.home()
    search = cwd
    while True:
        for name in CONFIG_FILENAMES:
            candidate = search / name
            if candidate.is_file():
                return candidate
        if search == home or search == search.parent:
            break
        search = search.parent
    return None


def _parse_priority(raw: list[Any]) -> list[DomainType]:
    try:
        return [DomainType(str(d).lower()) for d in raw]
    except ValueError as e:
        raise ValueError(f"Unknown domain in domain_priority: {e}") from e


_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"Option {key} must be a boolean, got {value!r}")


def normalize_overrides(overrides: dict[str, Any]) -> dict[str, Any]:
    """Map camelCase/snake_case option names onto ClassifierConfig fields.

    Raises ValueError for unrecognized options.
    """
    normalized: dict[str, Any] = {}
    for key, value in overrides.items():
        field_name = _OPTION_ALIASES.get(key)
        if field_name is None:
            raise ValueError(f"Unknown classifier option: {key}")
        if field_name == "domain_priority":
            value = _parse_priority(value)
        elif field_name == "layer_weights":
            value = {str(k): float(v) for k, v in dict(value).items()}
        elif field_name in ("min_confidence", "max_processing_time"):
            value = int(value)
        elif field_name == "enable_performance_logging":
            value = _parse_bool(key, value)
        normalized[field_name] = value
    return normalized


def apply_overrides(config: ClassifierConfig, overrides: dict[str, Any]) -> ClassifierConfig:
    """Return a copy of ``config`` with overrides applied. Never mutates ``config``."""
    updated = replace(
        config,
        layer_weights=dict(config.layer_weights),
        domain_priority=list(config.domain_priority),
    )
    for field_name, value in normalize_overrides(overrides).items():
        setattr(updated, field_name, value)
    return updated


def _build_config(raw: dict[str, Any]) -> ClassifierConfig:
    """Build a ClassifierConfig from a raw dict (top level or under 'classifier')."""
    section = raw.get("classifier", raw)
    return apply_overrides(ClassifierConfig(), section if isinstance(section, dict) else {})


def validate_config(config: ClassifierConfig) -> list[str]:
    """Validate a config. Returns list of error strings (empty = valid)."""
    errors: list[str] = []

    if not 0 <= config.min_confidence <= 100:
        errors.append(f"min_confidence ({config.min_confidence}) must be between 0 and 100")

    if config.max_processing_time <= 0:
        errors.append(f"max_processing_time ({config.max_processing_time}) must be > 0")

    if not config.layer_weights:
        errors.append("At least one layer weight must be configured")

    for name, weight in config.layer_weights.items():
        if name not in KNOWN_LAYERS:
            errors.append(f"Unknown layer '{name}' in layer_weights")
        if weight < 0:
            errors.append(f"Layer weight for '{name}' must be >= 0")

    if sorted(config.domain_priority) != sorted(DEFAULT_DOMAIN_PRIORITY):
        errors.append("domain_priority must list each domain exactly once")

    return errors


def load_config(
    config_path: str | Path | None = None,
    config_dict: dict | None = None,
) -> ClassifierConfig:
    """Load config from dict, explicit path, or auto-discover."""
    if config_dict is not None:
        return _build_config(config_dict)

    if config_path is not None:
        path = Path(config_path)
    else:
        path = _discover_config()

    if path is None:
        # Return defaults
        return _build_config({})

    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    text = path.read_text()
    if path.suffix == ".json":
        raw = json.loads(text)
    else:
        raw = yaml.safe_load(text) or {}

    return _build_config(raw)
