"""
Data models for geodetic and grid coordinates.

This module defines the value types passed through the conversion
pipeline: geodetic positions, UTM coordinates and the lat/long square
covered by a grid reference at a given accuracy.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple

from gridref.core.errors import ValidationError

MAX_ACCURACY = 5

UTM_TEMPLATE = "{zone}{letter} {easting} {northing}"


def _check_finite(value: float, field: str) -> None:
    if not math.isfinite(value):
        raise ValidationError(
            f"{field.capitalize()} must be a finite number, got {value}",
            field=field,
        )


def normalize_latitude(latitude: float) -> float:
    """
    Clamp a latitude into [-90, 90].

    Raises:
        ValidationError: If latitude is NaN or infinite
    """
    _check_finite(latitude, "latitude")
    return float(max(-90.0, min(90.0, latitude)))


def normalize_longitude(longitude: float) -> float:
    """
    Normalize a longitude into (-180, 180].

    Any value congruent to 180 modulo 360 maps to exactly +180.0.

    Args:
        longitude: Longitude in decimal degrees, any real value

    Returns:
        Longitude in (-180, 180]

    Raises:
        ValidationError: If longitude is NaN or infinite
    """
    _check_finite(longitude, "longitude")
    mod = math.fmod(longitude, 360.0)
    if mod == 180.0 or mod == -180.0:
        return 180.0
    if mod < -180.0:
        mod += 360.0
    elif mod > 180.0:
        mod -= 360.0
    return float(mod)


def clamp_accuracy(accuracy: int) -> int:
    """
    Pull an MGRS accuracy (digit count) into the range 0 to 5.

    Raises:
        ValidationError: If accuracy is not an integer
    """
    if isinstance(accuracy, bool) or not isinstance(accuracy, int):
        raise ValidationError(
            f"Accuracy must be an integer; {type(accuracy).__name__} passed in",
            field="accuracy",
        )
    return max(0, min(MAX_ACCURACY, accuracy))


def _format_metres(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class LatLong:
    """
    A geodetic position on the WGS84 ellipsoid.

    Attributes:
        latitude: Latitude in decimal degrees, clamped to [-90, 90]
        longitude: Longitude in decimal degrees, normalized to (-180, 180]
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Normalize the latitude and longitude."""
        object.__setattr__(self, "latitude", normalize_latitude(self.latitude))
        object.__setattr__(self, "longitude", normalize_longitude(self.longitude))

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple (latitude, longitude)."""
        return (self.latitude, self.longitude)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary representation."""
        return {"latitude": self.latitude, "longitude": self.longitude}

    def __str__(self) -> str:
        """String representation."""
        return f"({self.latitude:.6f}, {self.longitude:.6f})"


@dataclass(frozen=True)
class UtmCoord:
    """
    A Universal Transverse Mercator coordinate.

    The northing includes the 10,000,000 m false northing for southern
    bands and the easting includes the 500,000 m false easting.

    Attributes:
        easting: Easting in meters
        northing: Northing in meters
        zone_number: UTM zone number (1-60)
        zone_letter: Latitude band letter (C-X, or Z outside MGRS coverage)
        accuracy: MGRS digit count carried with the coordinate (0-5)
    """

    easting: float
    northing: float
    zone_number: int
    zone_letter: str
    accuracy: int = field(default=MAX_ACCURACY)

    def __post_init__(self) -> None:
        """Validate and normalize the coordinate."""
        if not isinstance(self.zone_letter, str) or len(self.zone_letter) != 1:
            raise ValidationError(
                f"Zone letter must be a single character, got {self.zone_letter!r}",
                field="zone_letter",
            )
        object.__setattr__(self, "zone_letter", self.zone_letter.upper())
        object.__setattr__(self, "accuracy", clamp_accuracy(self.accuracy))

    @property
    def is_southern(self) -> bool:
        """True when the zone letter denotes a southern hemisphere band."""
        return self.zone_letter < "N"

    @property
    def size(self) -> int:
        """Side of the grid square in meters at the current accuracy."""
        return 10 ** (MAX_ACCURACY - self.accuracy)

    def with_accuracy(self, accuracy: int) -> "UtmCoord":
        """Return a copy of this coordinate carrying another accuracy."""
        return replace(self, accuracy=accuracy)

    def to_grid_reference(self, template: str = UTM_TEMPLATE) -> str:
        """
        Format the coordinate as a UTM grid reference.

        Args:
            template: Format string using the fields zone, letter,
                easting and northing

        Returns:
            Formatted grid reference (e.g., "30U 582031 5670369")
        """
        return template.format(
            zone=self.zone_number,
            letter=self.zone_letter,
            easting=_format_metres(self.easting),
            northing=_format_metres(self.northing),
        ).strip()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "easting": self.easting,
            "northing": self.northing,
            "zone_number": self.zone_number,
            "zone_letter": self.zone_letter,
            "accuracy": self.accuracy,
        }

    def __str__(self) -> str:
        """String representation."""
        return self.to_grid_reference()


@dataclass(frozen=True)
class BoundingSquare:
    """
    The lat/long square covered by a grid reference.

    Attributes:
        bottom_left: Position of the south-west corner
        top_right: Position of the north-east corner
    """

    bottom_left: LatLong
    top_right: LatLong

    @property
    def centroid(self) -> LatLong:
        """
        Mean of the two corners, taken per axis.

        A square crossing the antimeridian has its east corner unwrapped
        past 180 before averaging.
        """
        east = self.top_right.longitude
        if east - self.bottom_left.longitude < -180.0:
            east += 360.0
        return LatLong(
            (self.bottom_left.latitude + self.top_right.latitude) / 2,
            (self.bottom_left.longitude + east) / 2,
        )

    def to_bbox(self) -> Tuple[float, float, float, float]:
        """Convert to tuple (left, bottom, right, top)."""
        return (
            self.bottom_left.longitude,
            self.bottom_left.latitude,
            self.top_right.longitude,
            self.top_right.latitude,
        )

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Convert to dictionary representation."""
        return {
            "bottom_left": self.bottom_left.to_dict(),
            "top_right": self.top_right.to_dict(),
        }

    def __str__(self) -> str:
        """String representation."""
        return f"Square({self.bottom_left}, {self.top_right})"
