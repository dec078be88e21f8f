"""domain-classifier: hybrid multi-layer prompt domain classification."""

from .config import load_config, validate_config
from .core.hybrid import HybridClassifier
from .engine import DomainClassifier
from .types import (
    ClassificationResult,
    ClassifierConfig,
    DomainScore,
    DomainType,
    HybridResult,
    LayerInfo,
)

__version__ = "0.1.0"

__all__ = [
    "DomainClassifier",
    "HybridClassifier",
    "load_config",
    "validate_config",
    "ClassificationResult",
    "ClassifierConfig",
    "DomainScore",
    "DomainType",
    "HybridResult",
    "LayerInfo",
]
