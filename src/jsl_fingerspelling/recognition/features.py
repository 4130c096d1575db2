"""
Density features derived from a hand contour.

A region's density is its pixel count divided by the total number of skin
pixels in the frame. Contours with zero height or zero pixels have no
defined ratios and produce no features.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional
import logging

from ..classical.contour_tracking import REGION_NAMES, HandContour

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandFeatures:
    """
    Shape descriptors consumed by the recognition rules.

    ``densities`` holds one entry per region in REGION_NAMES; missing
    regions read as 0.0.
    """

    aspect_ratio: float
    densities: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "densities", MappingProxyType(dict(self.densities)))

    def density(self, region: str) -> float:
        return self.densities.get(region, 0.0)

    @property
    def top_density(self) -> float:
        return self.density("top")

    @property
    def bottom_density(self) -> float:
        return self.density("bottom")

    @property
    def left_density(self) -> float:
        return self.density("left")

    @property
    def right_density(self) -> float:
        return self.density("right")

    @property
    def top_top_density(self) -> float:
        return self.density("top_top")

    @property
    def top_middle_density(self) -> float:
        return self.density("top_middle")

    @property
    def finger_tips_density(self) -> float:
        return self.density("finger_tips")

    @property
    def palm_density(self) -> float:
        return self.density("palm")

    @property
    def thumb_density(self) -> float:
        """Density of whichever thumb region is fuller."""
        return max(self.density("thumb_left"), self.density("thumb_right"))

    @property
    def is_thumb_left(self) -> bool:
        return self.density("thumb_left") > self.density("thumb_right")

    @property
    def center_density(self) -> float:
        """Share of pixels outside the four directional regions."""
        return (1.0 - self.top_density - self.bottom_density
                - self.left_density - self.right_density)


def derive_features(contour: HandContour) -> Optional[HandFeatures]:
    """
    Compute aspect ratio and region densities.

    Args:
        contour: Hand contour of the current frame

    Returns:
        HandFeatures, or None for a degenerate contour (zero height or
        zero pixels)
    """
    if contour.height == 0 or contour.total_pixels == 0:
        logger.debug(f"Degenerate contour: height={contour.height}, "
                     f"pixels={contour.total_pixels}")
        return None

    total = contour.total_pixels
    densities = {name: contour.regions.get(name, 0) / total for name in REGION_NAMES}

    return HandFeatures(
        aspect_ratio=contour.width / contour.height,
        densities=densities,
    )
