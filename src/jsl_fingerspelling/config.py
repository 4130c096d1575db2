"""
Configuration for rule-based JSL fingerspelling recognition.

All thresholds are fixed constants; nothing here is adapted at runtime.
"""

# Skin color acceptance region in HSV. Hue in degrees [0, 360),
# saturation and value rescaled to [0, 255]. Bounds are inclusive.
SKIN_DETECTION_CONFIG = {
    "hue": (0.0, 50.0),
    "saturation": (30.0, 170.0),
    "value": (60.0, 255.0),
}

# Contour extraction: fractions of the bounding box width/height
CONTOUR_CONFIG = {
    "min_skin_pixels": 100,
    "vertical_split": 0.2,       # top / bottom
    "horizontal_split": 0.2,     # left / right
    "finger_tips_fraction": 0.25,
    "palm_half_width": 0.15,
    "palm_vertical_band": (-0.1, 0.2),
    "thumb_offset": 0.25,
    "thumb_vertical_band": (-0.3, 0.1),
}

# Classification
RECOGNITION_CONFIG = {
    "acceptance_floor": 0.4,     # winning confidence must be strictly above
    "history_min_confidence": 0.6,
    "history_length": 20,
}

# Real-time processing configurations
REALTIME_CONFIG = {
    "camera": {
        "device_id": 0,
        "width": 640,
        "height": 480,
    },
    "fps_window": 30,
}

# Visualization settings (BGR, OpenCV order)
VISUALIZATION_CONFIG = {
    "colors": {
        "skin": (0, 255, 0),
        "bounds": (0, 255, 0),
        "center": (0, 0, 255),
        "text": (255, 255, 255),
        "no_hand": (0, 165, 255),
    },
    "overlay": {
        "skin_alpha": 0.3,
        "skin_marker_size": 2,
        "bbox_thickness": 2,
        "center_radius": 5,
    },
    "window_name": "JSL Fingerspelling",
}

# Logging configuration
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s",
}

__all__ = [
    "SKIN_DETECTION_CONFIG", "CONTOUR_CONFIG", "RECOGNITION_CONFIG",
    "REALTIME_CONFIG", "VISUALIZATION_CONFIG", "LOGGING_CONFIG",
]
