from .base import ClassificationLayer
from .heuristic import HeuristicLayer
from .pattern import PatternLayer
from .rule import RuleLayer
from .similarity import SimilarityLayer

__all__ = [
    "ClassificationLayer",
    "HeuristicLayer",
    "PatternLayer",
    "RuleLayer",
    "SimilarityLayer",
]
