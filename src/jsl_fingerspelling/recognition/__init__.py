"""
Rule-based fingerspelling recognition from contour densities.
"""

from .labels import FINGERSPELLING_LABELS, ROW_LABELS, ROMAJI, romanize
from .features import HandFeatures, derive_features
from .rules import (
    DEFAULT_RULES, FingerspellingRule, ShapeRule,
    reachable_labels, rules_for_shape, shadowed_labels,
)
from .classifier import ClassificationResult, FingerspellingClassifier, classify

__all__ = [
    'FINGERSPELLING_LABELS',
    'ROW_LABELS',
    'ROMAJI',
    'romanize',
    'HandFeatures',
    'derive_features',
    'DEFAULT_RULES',
    'FingerspellingRule',
    'ShapeRule',
    'reachable_labels',
    'rules_for_shape',
    'shadowed_labels',
    'ClassificationResult',
    'FingerspellingClassifier',
    'classify',
]
