"""
Ordered first-best classification over the fingerspelling rule table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import logging

from ..classical.contour_tracking import HandContour
from ..config import RECOGNITION_CONFIG
from ..utils.exceptions import ConfigurationError
from .features import HandFeatures, derive_features
from .rules import DEFAULT_RULES, FingerspellingRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationResult:
    """Recognized label and its confidence; empty label means no match."""

    label: str = ""
    confidence: float = 0.0

    @classmethod
    def empty(cls) -> "ClassificationResult":
        return cls("", 0.0)

    @property
    def matched(self) -> bool:
        return self.label != ""


class FingerspellingClassifier:
    """
    Picks the highest-confidence rule whose predicate holds.

    Rules are evaluated in table order and the running best is replaced
    only by a strictly greater confidence, so among tied rules the one
    declared first wins. A winner at or below ``acceptance_floor`` is
    reported as no match.
    """

    def __init__(self, rules: Sequence[FingerspellingRule] = DEFAULT_RULES,
                 acceptance_floor: float = RECOGNITION_CONFIG["acceptance_floor"]):
        """
        Initialize the classifier.

        Args:
            rules: Ordered rule table
            acceptance_floor: Confidence the winner must strictly exceed

        Raises:
            ConfigurationError: If the table is empty or the floor is
                outside [0, 1]
        """
        rules = tuple(rules)
        if not rules:
            raise ConfigurationError("Rule table must not be empty", config_key="rules")
        if not 0.0 <= acceptance_floor <= 1.0:
            raise ConfigurationError(
                f"Acceptance floor must lie in [0, 1], got {acceptance_floor}",
                config_key="acceptance_floor")

        self.rules: Tuple[FingerspellingRule, ...] = rules
        self.acceptance_floor = acceptance_floor

    def best_match(self, features: HandFeatures) -> Tuple[str, float]:
        """
        Run the table without applying the acceptance floor.

        Returns:
            (label, confidence) of the running best; ("", 0.0) when no
            predicate holds
        """
        best_label = ""
        best_confidence = 0.0

        for rule in self.rules:
            if not rule.matches(features):
                continue
            confidence = rule.confidence(features)
            if confidence > best_confidence:
                best_label = rule.label
                best_confidence = confidence

        return best_label, best_confidence

    def classify_features(self, features: Optional[HandFeatures]) -> ClassificationResult:
        """
        Classify already derived features.

        Args:
            features: Features of the current frame, or None for a
                degenerate contour

        Returns:
            ClassificationResult (empty when nothing clears the floor)
        """
        if features is None:
            return ClassificationResult.empty()

        label, confidence = self.best_match(features)
        if not label or confidence <= self.acceptance_floor:
            logger.debug(f"Low confidence: best={label or '-'} ({confidence:.3f})")
            return ClassificationResult.empty()

        return ClassificationResult(label, confidence)

    def classify(self, contour: Optional[HandContour]) -> ClassificationResult:
        """
        Classify a hand contour.

        Args:
            contour: Contour of the current frame, None when no hand

        Returns:
            ClassificationResult
        """
        if contour is None:
            return ClassificationResult.empty()
        return self.classify_features(derive_features(contour))


_default_classifier = FingerspellingClassifier()


def classify(contour: Optional[HandContour]) -> ClassificationResult:
    """Classify a contour with the default rule table."""
    return _default_classifier.classify(contour)
