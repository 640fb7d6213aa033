"""
Data models and schemas.
"""

from .coordinates import (
    MAX_ACCURACY,
    BoundingSquare,
    LatLong,
    UtmCoord,
    clamp_accuracy,
    normalize_latitude,
    normalize_longitude,
)

__all__ = [
    "MAX_ACCURACY",
    "BoundingSquare",
    "LatLong",
    "UtmCoord",
    "clamp_accuracy",
    "normalize_latitude",
    "normalize_longitude",
]
