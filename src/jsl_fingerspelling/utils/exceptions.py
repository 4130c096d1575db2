"""
Exception hierarchy for the fingerspelling recognition pipeline.

Only genuinely malformed input or configuration raises. "No hand" and
"low confidence" are ordinary results and never surface as exceptions.
"""

from __future__ import annotations

from typing import Any, Optional


class FingerspellingBaseError(Exception):
    """
    Base exception for all recognition pipeline errors.

    Formats the message with optional context and the original cause
    so a single log line is enough to diagnose the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        context: Optional[dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """
        Initialize the exception with message and optional context.

        Args:
            message: Human-readable error description
            context: Additional context information
            cause: Original exception that caused this error
        """
        self.message = message
        self.context = context or {}
        self.cause = cause

        full_message = message
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            full_message = f"{message} [{context_str}]"

        if cause:
            full_message = f"{full_message} (caused by: {cause})"

        super().__init__(full_message)


class DataError(FingerspellingBaseError):
    """Errors related to frame data handed to the pipeline."""
    pass


class InvalidDataError(DataError):
    """Pixel buffer or coordinate data failed validation."""

    def __init__(
        self,
        message: str,
        expected: Optional[Any] = None,
        actual: Optional[Any] = None
    ):
        super().__init__(
            message,
            context={"expected": expected, "actual": actual}
        )
        self.expected = expected
        self.actual = actual


class ImageProcessingError(FingerspellingBaseError):
    """Errors while loading or converting images outside the core."""

    def __init__(
        self,
        operation: str,
        image_shape: Optional[tuple] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(
            f"Image processing failed during '{operation}'",
            context={"operation": operation, "shape": image_shape},
            cause=cause
        )
        self.operation = operation


class DeviceError(FingerspellingBaseError):
    """Errors related to capture devices."""
    pass


class CameraError(DeviceError):
    """Camera could not be opened or read."""

    def __init__(
        self,
        camera_id: int,
        operation: str = "access",
        cause: Optional[Exception] = None
    ):
        super().__init__(
            f"Camera error: failed to {operation} camera {camera_id}",
            context={"camera_id": camera_id, "operation": operation},
            cause=cause
        )
        self.camera_id = camera_id


class ConfigurationError(FingerspellingBaseError):
    """Invalid thresholds, rule tables or other configuration values."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(
            message,
            context={"config_key": config_key},
            cause=cause
        )
        self.config_key = config_key
