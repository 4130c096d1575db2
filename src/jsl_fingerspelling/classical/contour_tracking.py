"""
Hand contour extraction from skin pixels.

Reduces the skin pixels of one frame to an axis-aligned bounding box and
pixel counts for ten named sub-regions. The regions are simple coordinate
bands relative to the box and its center and they overlap: a pixel may be
counted in several regions. The recognition thresholds were tuned against
these overlapping counts, so they are not a partition of the hand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Sequence, Tuple
import logging

import numpy as np

from ..config import CONTOUR_CONFIG
from ..utils.exceptions import ConfigurationError, InvalidDataError
from .skin_detection import SkinPixel

logger = logging.getLogger(__name__)

REGION_NAMES: Tuple[str, ...] = (
    "top",
    "bottom",
    "left",
    "right",
    "top_top",
    "top_middle",
    "finger_tips",
    "palm",
    "thumb_left",
    "thumb_right",
)


class Bounds(NamedTuple):
    min_x: int
    max_x: int
    min_y: int
    max_y: int


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class HandContour:
    """
    Geometry of the skin pixels in one frame.

    Attributes:
        bounds: Integer pixel extents of the skin pixels
        center: Midpoint of the bounds (may be fractional)
        width: max_x - min_x
        height: max_y - min_y
        regions: Pixel count per region name (see REGION_NAMES)
        total_pixels: Number of skin pixels in the frame
    """

    bounds: Bounds
    center: Point
    width: int
    height: int
    regions: Mapping[str, int] = field(default_factory=dict)
    total_pixels: int = 0

    def __post_init__(self):
        object.__setattr__(self, "regions", MappingProxyType(dict(self.regions)))

    @property
    def bounding_rect(self) -> Tuple[int, int, int, int]:
        """(x, y, w, h) in OpenCV ``boundingRect`` convention."""
        return self.bounds.min_x, self.bounds.min_y, self.width, self.height


class ContourExtractor:
    """
    Builds a :class:`HandContour` from the skin pixels of a frame.

    Frames with fewer than ``min_skin_pixels`` skin pixels are reported as
    "no hand" by returning None.
    """

    def __init__(self, min_skin_pixels: int = CONTOUR_CONFIG["min_skin_pixels"]):
        """
        Initialize the contour extractor.

        Args:
            min_skin_pixels: Minimum number of skin pixels for a hand

        Raises:
            ConfigurationError: If min_skin_pixels is below 1
        """
        if min_skin_pixels < 1:
            raise ConfigurationError(
                f"min_skin_pixels must be at least 1, got {min_skin_pixels}",
                config_key="min_skin_pixels")
        self.min_skin_pixels = min_skin_pixels

        # Region geometry, fractions of the bounding box
        self.vertical_split = CONTOUR_CONFIG["vertical_split"]
        self.horizontal_split = CONTOUR_CONFIG["horizontal_split"]
        self.finger_tips_fraction = CONTOUR_CONFIG["finger_tips_fraction"]
        self.palm_half_width = CONTOUR_CONFIG["palm_half_width"]
        self.palm_vertical_band = CONTOUR_CONFIG["palm_vertical_band"]
        self.thumb_offset = CONTOUR_CONFIG["thumb_offset"]
        self.thumb_vertical_band = CONTOUR_CONFIG["thumb_vertical_band"]

    def count_regions(self, xs: np.ndarray, ys: np.ndarray,
                      bounds: Bounds, center: Point) -> dict:
        """
        Count skin pixels inside each named region.

        Each region is an independent pass over all pixels.

        Args:
            xs: X coordinates of skin pixels
            ys: Y coordinates of skin pixels
            bounds: Bounding box of the pixels
            center: Center of the bounding box

        Returns:
            Dictionary mapping region name to pixel count
        """
        width = bounds.max_x - bounds.min_x
        height = bounds.max_y - bounds.min_y
        cx, cy = center
        third_height = height / 3

        # Sub-bands of the upper third, used for finger detection
        top_top = ys < bounds.min_y + third_height * 0.5
        top_middle = (ys >= bounds.min_y + third_height * 0.5) & (ys < bounds.min_y + third_height)

        top = ys < cy - height * self.vertical_split
        bottom = ys > cy + height * self.vertical_split
        left = xs < cx - width * self.horizontal_split
        right = xs > cx + width * self.horizontal_split

        finger_tips = ys < bounds.min_y + height * self.finger_tips_fraction

        palm_low, palm_high = self.palm_vertical_band
        palm = ((xs >= cx - width * self.palm_half_width)
                & (xs <= cx + width * self.palm_half_width)
                & (ys >= cy + height * palm_low)
                & (ys <= cy + height * palm_high))

        thumb_low, thumb_high = self.thumb_vertical_band
        thumb_band = (ys >= cy + height * thumb_low) & (ys <= cy + height * thumb_high)
        thumb_left = (xs < cx - width * self.thumb_offset) & thumb_band
        thumb_right = (xs > cx + width * self.thumb_offset) & thumb_band

        masks = {
            "top": top,
            "bottom": bottom,
            "left": left,
            "right": right,
            "top_top": top_top,
            "top_middle": top_middle,
            "finger_tips": finger_tips,
            "palm": palm,
            "thumb_left": thumb_left,
            "thumb_right": thumb_right,
        }
        return {name: int(np.count_nonzero(masks[name])) for name in REGION_NAMES}

    def extract_arrays(self, xs: np.ndarray, ys: np.ndarray) -> Optional[HandContour]:
        """
        Build a contour from coordinate arrays.

        Args:
            xs: X coordinates of skin pixels
            ys: Y coordinates of skin pixels

        Returns:
            HandContour, or None when there are too few skin pixels
        """
        xs = np.asarray(xs)
        ys = np.asarray(ys)
        if xs.shape != ys.shape or xs.ndim != 1:
            raise InvalidDataError(
                "Coordinate arrays must be one-dimensional and of equal length",
                expected=xs.shape, actual=ys.shape)

        total = int(xs.size)
        if total < self.min_skin_pixels:
            logger.debug(f"No hand: {total} skin pixels < {self.min_skin_pixels}")
            return None

        bounds = Bounds(int(xs.min()), int(xs.max()), int(ys.min()), int(ys.max()))
        center = Point((bounds.min_x + bounds.max_x) / 2, (bounds.min_y + bounds.max_y) / 2)
        width = bounds.max_x - bounds.min_x
        height = bounds.max_y - bounds.min_y

        regions = self.count_regions(xs, ys, bounds, center)

        return HandContour(
            bounds=bounds,
            center=center,
            width=width,
            height=height,
            regions=regions,
            total_pixels=total,
        )

    def extract(self, pixels: Sequence[SkinPixel], width: int = None,
                height: int = None) -> Optional[HandContour]:
        """
        Build a contour from a sequence of skin pixels.

        ``width`` and ``height`` are the frame dimensions; they are accepted
        for callers that pass them but do not influence the contour.
        """
        if len(pixels) < self.min_skin_pixels:
            logger.debug(f"No hand: {len(pixels)} skin pixels < {self.min_skin_pixels}")
            return None

        coords = np.asarray(pixels, dtype=np.int64).reshape(-1, 2)
        return self.extract_arrays(coords[:, 0], coords[:, 1])


_default_extractor = ContourExtractor()


def extract_contour(pixels: Sequence[SkinPixel], width: int = None,
                    height: int = None) -> Optional[HandContour]:
    """Extract a contour with the default 100-pixel threshold."""
    return _default_extractor.extract(pixels, width, height)
