"""
OpenCV overlay helpers for recognition results.

All drawing happens in place on BGR images and the image is returned for
chaining.
"""

from typing import Optional, Tuple

import cv2
import numpy as np

from ..classical.contour_tracking import HandContour
from ..config import VISUALIZATION_CONFIG
from ..recognition.classifier import ClassificationResult
from ..recognition.labels import romanize

COLORS = VISUALIZATION_CONFIG["colors"]
OVERLAY = VISUALIZATION_CONFIG["overlay"]


def draw_skin_pixels(
    image: np.ndarray,
    skin_mask: np.ndarray,
    color: Tuple[int, int, int] = COLORS["skin"],
    alpha: float = OVERLAY["skin_alpha"],
    marker_size: int = OVERLAY["skin_marker_size"]
) -> np.ndarray:
    """
    Tint skin pixels with a translucent marker.

    Args:
        image: BGR image (H, W, 3)
        skin_mask: Boolean mask (H, W)
        color: Marker color (B, G, R)
        alpha: Marker opacity
        marker_size: Side of the square marker drawn per pixel

    Returns:
        Image with overlay
    """
    mask = skin_mask.astype(np.uint8)
    if marker_size > 1:
        # Grow each pixel into a square extending right and down from it
        kernel = np.ones((marker_size, marker_size), dtype=np.uint8)
        anchor = (marker_size - 1, marker_size - 1)
        mask = cv2.dilate(mask, kernel, anchor=anchor)

    colored = np.zeros_like(image)
    colored[mask > 0] = color

    blended = cv2.addWeighted(image, 1 - alpha, colored, alpha, 0)
    image[mask > 0] = blended[mask > 0]
    return image


def draw_hand_contour(
    image: np.ndarray,
    contour: Optional[HandContour],
    color: Tuple[int, int, int] = COLORS["bounds"],
    center_color: Tuple[int, int, int] = COLORS["center"],
    thickness: int = OVERLAY["bbox_thickness"],
    center_radius: int = OVERLAY["center_radius"]
) -> np.ndarray:
    """
    Draw the hand bounding box and its center point.

    Args:
        image: BGR image
        contour: Hand contour, or None (image returned unchanged)

    Returns:
        Image with overlay
    """
    if contour is None:
        return image

    b = contour.bounds
    cv2.rectangle(image, (b.min_x, b.min_y), (b.max_x, b.max_y), color, thickness)

    center = (int(round(contour.center.x)), int(round(contour.center.y)))
    cv2.circle(image, center, center_radius, center_color, -1)
    return image


def draw_prediction(
    image: np.ndarray,
    result: ClassificationResult,
    hand_detected: bool = True,
    origin: Tuple[int, int] = (10, 30),
    color: Tuple[int, int, int] = COLORS["text"]
) -> np.ndarray:
    """
    Write the recognized label (romanized) and confidence percentage.
    """
    if not hand_detected:
        text = "no hand"
        color = COLORS["no_hand"]
    elif result.matched:
        text = f"{romanize(result.label)}  {round(result.confidence * 100)}%"
    else:
        text = "-"

    cv2.putText(image, text, origin, cv2.FONT_HERSHEY_SIMPLEX, 0.9, color, 2)
    return image
