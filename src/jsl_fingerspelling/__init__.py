"""Rule-based Japanese Sign Language fingerspelling recognition from video frames."""

from .classical import (
    ContourExtractor, HandContour, PixelBuffer, SkinDetector, SkinPixel,
    extract_contour, segment,
)
from .recognition import (
    FINGERSPELLING_LABELS, ClassificationResult, FingerspellingClassifier,
    HandFeatures, classify, derive_features,
)
from .pipeline import FramePipeline, FrameResult, classify_frame

__version__ = "0.1.0"

__all__ = [
    # Core stages
    "segment",
    "extract_contour",
    "derive_features",
    "classify",
    "classify_frame",
    "FramePipeline",
    "FrameResult",
    # Components
    "SkinDetector",
    "ContourExtractor",
    "FingerspellingClassifier",
    # Data types
    "PixelBuffer",
    "SkinPixel",
    "HandContour",
    "HandFeatures",
    "ClassificationResult",
    "FINGERSPELLING_LABELS",
]
