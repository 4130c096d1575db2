"""
Skin detection by fixed HSV thresholding.

Every pixel of an RGB(A) frame is converted to HSV (hue in degrees,
saturation and value rescaled to [0, 255]) and accepted as skin when all
three components fall inside an inclusive acceptance region. The ranges
are deliberately crude and lighting sensitive; they are kept exactly as
tuned so classification thresholds downstream stay meaningful.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, NamedTuple, Sequence, Tuple, Union
import logging

import cv2
import numpy as np

from ..config import SKIN_DETECTION_CONFIG
from ..utils.exceptions import ConfigurationError, InvalidDataError

logger = logging.getLogger(__name__)


class SkinPixel(NamedTuple):
    """Integer image coordinate of a pixel classified as skin."""

    x: int
    y: int


@dataclass(frozen=True)
class PixelBuffer:
    """
    Immutable RGBA frame in row-major order.

    ``pixels`` has shape (height, width, channels) with 3 or 4 uint8
    channels in RGB(A) order. Alpha, when present, is ignored.
    """

    pixels: np.ndarray

    def __post_init__(self):
        array = self.pixels
        if not isinstance(array, np.ndarray):
            raise InvalidDataError(
                "Pixel buffer must be a numpy array",
                expected="np.ndarray", actual=type(array).__name__)
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise InvalidDataError(
                "Pixel buffer must have shape (height, width, 3|4)",
                expected="(H, W, 3|4)", actual=array.shape)
        if array.dtype != np.uint8:
            raise InvalidDataError(
                "Pixel buffer samples must be uint8",
                expected="uint8", actual=str(array.dtype))
        # Private read-only copy; later writes to the caller's array do not leak in
        frozen = array.copy()
        frozen.flags.writeable = False
        object.__setattr__(self, "pixels", frozen)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def rgb(self) -> np.ndarray:
        return self.pixels[:, :, :3]

    @classmethod
    def from_rgba_bytes(cls, data: Union[bytes, bytearray, Sequence[int]],
                        width: int, height: int) -> "PixelBuffer":
        """
        Build a buffer from flat RGBA samples, as delivered by canvas-style
        capture APIs.

        Raises:
            InvalidDataError: If the dimensions are negative or the sample
                count does not equal ``width * height * 4``.
        """
        if width < 0 or height < 0:
            raise InvalidDataError(
                "Frame dimensions must be non-negative",
                expected=">= 0", actual=(width, height))

        if isinstance(data, (bytes, bytearray, memoryview)):
            samples = np.frombuffer(data, dtype=np.uint8)
        else:
            samples = np.asarray(data)
            if samples.size and not np.issubdtype(samples.dtype, np.integer):
                raise InvalidDataError(
                    "RGBA samples must be integers",
                    expected="integer samples", actual=str(samples.dtype))
            if samples.size and (samples.min() < 0 or samples.max() > 255):
                raise InvalidDataError(
                    "RGBA samples must lie in [0, 255]",
                    expected="[0, 255]", actual=(samples.min(), samples.max()))
            samples = samples.astype(np.uint8)

        expected = width * height * 4
        if samples.size != expected:
            raise InvalidDataError(
                f"Declared size {width}x{height} does not match sample count",
                expected=expected, actual=samples.size)

        return cls(samples.reshape(height, width, 4))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelBuffer":
        """Wrap an (H, W, 3|4) RGB(A) uint8 array."""
        return cls(np.asarray(array))

    @classmethod
    def from_bgr_frame(cls, frame: np.ndarray) -> "PixelBuffer":
        """
        Convert an OpenCV BGR frame (as returned by ``VideoCapture.read``).

        Args:
            frame: BGR image of shape (H, W, 3)
        """
        if not isinstance(frame, np.ndarray) or frame.ndim != 3 or frame.shape[2] != 3:
            raise InvalidDataError(
                "Expected a BGR frame of shape (H, W, 3)",
                expected="(H, W, 3)", actual=getattr(frame, "shape", None))
        return cls(cv2.cvtColor(frame, cv2.COLOR_BGR2RGBA))


@dataclass(frozen=True)
class SkinColorRange:
    """Inclusive HSV acceptance region."""

    hue: Tuple[float, float] = SKIN_DETECTION_CONFIG["hue"]
    saturation: Tuple[float, float] = SKIN_DETECTION_CONFIG["saturation"]
    value: Tuple[float, float] = SKIN_DETECTION_CONFIG["value"]

    def __post_init__(self):
        for name in ("hue", "saturation", "value"):
            lower, upper = getattr(self, name)
            if lower > upper:
                raise ConfigurationError(
                    f"Lower {name} bound exceeds upper bound ({lower} > {upper})",
                    config_key=name)

    def contains(self, h: float, s: float, v: float) -> bool:
        return (self.hue[0] <= h <= self.hue[1]
                and self.saturation[0] <= s <= self.saturation[1]
                and self.value[0] <= v <= self.value[1])


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """
    Convert one RGB triple to (hue degrees, saturation 0-255, value 0-255).

    The red-max branch uses a truncated remainder, so negative hues are
    wrapped by adding 360 afterwards.
    """
    r /= 255
    g /= 255
    b /= 255

    c_max = max(r, g, b)
    c_min = min(r, g, b)
    diff = c_max - c_min

    h = 0.0
    if diff != 0:
        if c_max == r:
            h = 60 * math.fmod((g - b) / diff, 6)
        elif c_max == g:
            h = 60 * ((b - r) / diff + 2)
        else:
            h = 60 * ((r - g) / diff + 4)
    if h < 0:
        h += 360

    s = 0.0 if c_max == 0 else (diff / c_max) * 255
    v = c_max * 255

    return h, s, v


class SkinDetector:
    """
    Classifies every pixel of a frame as skin or background.

    Works on whole frames with numpy; the arithmetic is the same float64
    sequence as :func:`rgb_to_hsv`, so both paths agree bit for bit.
    """

    def __init__(self, color_range: SkinColorRange = None):
        """
        Initialize the skin detector.

        Args:
            color_range: HSV acceptance region (default: SKIN_DETECTION_CONFIG)
        """
        self.color_range = color_range or SkinColorRange()

    def rgb_to_hsv_array(self, rgb: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Vectorized HSV conversion.

        Args:
            rgb: Array of shape (..., 3) with RGB samples in [0, 255]

        Returns:
            Tuple of (hue, saturation, value) float64 arrays
        """
        rgb = rgb.astype(np.float64) / 255
        r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

        c_max = np.maximum(np.maximum(r, g), b)
        c_min = np.minimum(np.minimum(r, g), b)
        diff = c_max - c_min

        chromatic = diff != 0
        safe_diff = np.where(chromatic, diff, 1.0)

        h_red = 60 * np.fmod((g - b) / safe_diff, 6)
        h_green = 60 * ((b - r) / safe_diff + 2)
        h_blue = 60 * ((r - g) / safe_diff + 4)

        h = np.where(c_max == r, h_red, np.where(c_max == g, h_green, h_blue))
        h = np.where(chromatic, h, 0.0)
        h = np.where(h < 0, h + 360, h)

        safe_max = np.where(c_max == 0, 1.0, c_max)
        s = np.where(c_max == 0, 0.0, (diff / safe_max) * 255)
        v = c_max * 255

        return h, s, v

    def detect_skin_mask(self, buffer: PixelBuffer) -> np.ndarray:
        """
        Boolean mask of skin pixels.

        Args:
            buffer: Input frame

        Returns:
            Array of shape (height, width), True where the pixel is skin
        """
        return self.accept(*self.rgb_to_hsv_array(buffer.rgb))

    def accept(self, h: np.ndarray, s: np.ndarray, v: np.ndarray) -> np.ndarray:
        """Elementwise inclusive range test over HSV arrays."""
        hue, sat, val = self.color_range.hue, self.color_range.saturation, self.color_range.value

        return ((h >= hue[0]) & (h <= hue[1])
                & (s >= sat[0]) & (s <= sat[1])
                & (v >= val[0]) & (v <= val[1]))

    def skin_coordinates(self, buffer: PixelBuffer) -> Tuple[np.ndarray, np.ndarray]:
        """
        Skin pixel coordinates as (xs, ys) arrays in row-major scan order.
        """
        ys, xs = np.nonzero(self.detect_skin_mask(buffer))
        return xs, ys

    def segment(self, buffer: PixelBuffer) -> List[SkinPixel]:
        """
        Skin pixels of the frame in row-major scan order.

        Args:
            buffer: Input frame

        Returns:
            List of SkinPixel coordinates
        """
        xs, ys = self.skin_coordinates(buffer)
        pixels = [SkinPixel(int(x), int(y)) for x, y in zip(xs, ys)]
        logger.debug(f"Segmented {len(pixels)} skin pixels from "
                     f"{buffer.width}x{buffer.height} frame")
        return pixels

    def is_skin(self, r: int, g: int, b: int) -> bool:
        """Classify a single RGB triple."""
        return self.color_range.contains(*rgb_to_hsv(r, g, b))


_default_detector = SkinDetector()


def segment(buffer: PixelBuffer) -> List[SkinPixel]:
    """Segment a frame with the default skin color range."""
    return _default_detector.segment(buffer)
