"""
Per-frame recognition pipeline.

Runs skin segmentation, contour extraction, feature derivation and rule
classification for one frame. The caller owns scheduling: invoke
:meth:`FramePipeline.classify_frame` once per captured frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional
import logging

import numpy as np

from .classical.contour_tracking import ContourExtractor, HandContour
from .classical.skin_detection import PixelBuffer, SkinDetector, SkinPixel
from .recognition.classifier import ClassificationResult, FingerspellingClassifier
from .recognition.features import HandFeatures, derive_features
from .utils.logging_utils import log_execution_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class FrameResult:
    """
    Output of one pipeline run.

    Attributes:
        result: Recognized label and confidence
        contour: Hand geometry for overlays, None when no hand was found
        features: Derived features, None when no hand or degenerate contour
        skin_mask: Boolean (height, width) mask of skin pixels
    """

    result: ClassificationResult
    contour: Optional[HandContour]
    features: Optional[HandFeatures]
    skin_mask: np.ndarray

    @property
    def hand_detected(self) -> bool:
        return self.contour is not None

    @property
    def skin_pixels(self) -> List[SkinPixel]:
        """Skin pixels in row-major scan order."""
        ys, xs = np.nonzero(self.skin_mask)
        return [SkinPixel(int(x), int(y)) for x, y in zip(xs, ys)]


class FramePipeline:
    """
    Segmenter -> contour extractor -> feature deriver -> classifier.

    Components are injected so alternative thresholds or rule tables can
    be used; the defaults reproduce the standard configuration. The
    pipeline holds no per-frame state.
    """

    def __init__(self, skin_detector: SkinDetector = None,
                 contour_extractor: ContourExtractor = None,
                 classifier: FingerspellingClassifier = None):
        self.skin_detector = skin_detector or SkinDetector()
        self.contour_extractor = contour_extractor or ContourExtractor()
        self.classifier = classifier or FingerspellingClassifier()

    @log_execution_time()
    def classify_frame(self, buffer: PixelBuffer) -> FrameResult:
        """
        Recognize the hand shape in one frame.

        Args:
            buffer: Current frame

        Returns:
            FrameResult; ``contour`` is None and ``result`` empty when no
            hand was detected
        """
        mask = self.skin_detector.detect_skin_mask(buffer)
        ys, xs = np.nonzero(mask)

        contour = self.contour_extractor.extract_arrays(xs, ys)
        if contour is None:
            return FrameResult(ClassificationResult.empty(), None, None, mask)

        features = derive_features(contour)
        if features is None:
            # Zero-height hand: no usable ratios, report as no hand
            return FrameResult(ClassificationResult.empty(), None, None, mask)

        result = self.classifier.classify_features(features)

        if result.matched:
            logger.debug(f"Recognized {result.label} ({result.confidence:.2f})")

        return FrameResult(result, contour, features, mask)

    def process_bgr(self, frame: np.ndarray) -> FrameResult:
        """Convenience wrapper for OpenCV BGR frames."""
        return self.classify_frame(PixelBuffer.from_bgr_frame(frame))


def classify_frame(buffer: PixelBuffer) -> ClassificationResult:
    """Classify one frame with the default pipeline."""
    return FramePipeline().classify_frame(buffer).result
