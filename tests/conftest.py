"""Synthetic frame builders shared by the test modules."""

import numpy as np
import pytest

from jsl_fingerspelling import PixelBuffer
from jsl_fingerspelling.recognition import HandFeatures

SKIN_RGB = (220, 180, 140)


def blank_frame(width, height):
    """Black RGBA frame; black is never skin (value 0)."""
    frame = np.zeros((height, width, 4), dtype=np.uint8)
    frame[:, :, 3] = 255
    return frame


def paint(frame, points, rgb=SKIN_RGB):
    for x, y in points:
        frame[y, x, :3] = rgb
    return frame


def paint_rect(frame, x0, x1, y0, y1, rgb=SKIN_RGB):
    """Fill the inclusive rectangle [x0, x1] x [y0, y1]."""
    frame[y0:y1 + 1, x0:x1 + 1, :3] = rgb
    return frame


def fist_frame():
    """
    200x200 frame with a closed-fist silhouette.

    Bounding box [50, 150] in both axes (aspect 1.0). A solid 51x76 block
    below the finger-tip band contains the full 31x31 palm region; three
    anchor pixels stretch the box. 3879 skin pixels, palm density ~0.248,
    one finger-tip pixel, no thumb pixels.
    """
    frame = blank_frame(200, 200)
    paint_rect(frame, 75, 125, 75, 150)
    paint(frame, [(50, 150), (150, 150), (100, 50)])
    return frame


def make_features(aspect_ratio=1.0, finger_tips=0.0, palm=0.0,
                  thumb_left=0.0, thumb_right=0.0, **others):
    densities = {
        "finger_tips": finger_tips,
        "palm": palm,
        "thumb_left": thumb_left,
        "thumb_right": thumb_right,
    }
    densities.update(others)
    return HandFeatures(aspect_ratio=aspect_ratio, densities=densities)


@pytest.fixture
def fist_buffer():
    return PixelBuffer.from_array(fist_frame())
