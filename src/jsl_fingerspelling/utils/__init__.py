"""
Shared utilities: exceptions, logging setup and frame-rate measurement.

Overlay drawing lives in :mod:`jsl_fingerspelling.utils.visualization` and
is imported explicitly by the entry points that render frames.
"""

import time
from collections import deque

from .exceptions import (
    FingerspellingBaseError, DataError, InvalidDataError, ImageProcessingError,
    DeviceError, CameraError, ConfigurationError,
)
from .logging_utils import ColoredFormatter, log_execution_time, parse_log_level, setup_logging


class FPSCounter:
    """FPS counter for real-time applications"""
    def __init__(self, window_size: int = 30):
        self.window_size = window_size
        self.frame_times = deque(maxlen=window_size)
        self.last_time = time.perf_counter()

    def update(self) -> float:
        """Register a frame and return the FPS over the window"""
        current_time = time.perf_counter()
        self.frame_times.append(current_time - self.last_time)
        self.last_time = current_time

        avg_frame_time = sum(self.frame_times) / len(self.frame_times)
        return 1.0 / avg_frame_time if avg_frame_time > 0 else 0.0

    def reset(self):
        self.frame_times.clear()
        self.last_time = time.perf_counter()


__all__ = [
    'FingerspellingBaseError', 'DataError', 'InvalidDataError',
    'ImageProcessingError', 'DeviceError', 'CameraError', 'ConfigurationError',
    'ColoredFormatter', 'setup_logging', 'log_execution_time', 'parse_log_level',
    'FPSCounter',
]
