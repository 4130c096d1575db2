"""
Classical computer vision stages of the recognizer.

Skin segmentation by HSV thresholding and reduction of the skin pixels to
a bounding box with overlapping region counts.
"""

from .skin_detection import PixelBuffer, SkinColorRange, SkinDetector, SkinPixel, rgb_to_hsv, segment
from .contour_tracking import REGION_NAMES, Bounds, ContourExtractor, HandContour, Point, extract_contour

__all__ = [
    'PixelBuffer',
    'SkinPixel',
    'SkinColorRange',
    'SkinDetector',
    'rgb_to_hsv',
    'segment',
    'REGION_NAMES',
    'Bounds',
    'Point',
    'HandContour',
    'ContourExtractor',
    'extract_contour',
]
