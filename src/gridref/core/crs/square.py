"""
Lat/long squares covered by grid references.

A grid reference at accuracy n denotes a square 10^(5-n) meters on a side
whose south-west corner is the decoded UTM position.
"""

from typing import Optional, Tuple

from gridref.core.crs.ellipsoid import WGS84, Ellipsoid
from gridref.core.crs.mgrs import decode_mgrs
from gridref.core.crs.utm import utm_to_geodetic
from gridref.models.coordinates import BoundingSquare, LatLong, UtmCoord


def utm_to_square(
    utm: UtmCoord,
    accuracy: Optional[int] = None,
    size: Optional[float] = None,
    ellipsoid: Ellipsoid = WGS84,
) -> BoundingSquare:
    """
    Get the lat/long square whose south-west corner is a UTM coordinate.

    Args:
        utm: South-west corner of the square
        accuracy: Digits per axis used to size the square, default utm.accuracy
        size: Explicit side length in meters, overrides accuracy
        ellipsoid: Reference ellipsoid (default: WGS84)

    Returns:
        BoundingSquare with bottom-left and top-right corners

    Raises:
        InvalidZoneError: If the zone number is outside [0, 60]
    """
    if size is None:
        size = utm.size if accuracy is None else utm.with_accuracy(accuracy).size

    top_right = UtmCoord(
        easting=utm.easting + size,
        northing=utm.northing + size,
        zone_number=utm.zone_number,
        zone_letter=utm.zone_letter,
        accuracy=utm.accuracy,
    )

    return BoundingSquare(
        bottom_left=utm_to_geodetic(utm, ellipsoid),
        top_right=utm_to_geodetic(top_right, ellipsoid),
    )


def mgrs_to_square(reference: str) -> BoundingSquare:
    """
    Get the lat/long square covered by an MGRS reference.

    Raises:
        MGRSError: If the reference cannot be decoded
        InvalidZoneError: If the zone number is outside [0, 60]
    """
    return utm_to_square(decode_mgrs(reference))


def mgrs_to_bbox(reference: str) -> Tuple[float, float, float, float]:
    """
    Get the bounding box of an MGRS reference.

    Returns:
        Tuple of (left, bottom, right, top) in decimal degrees
    """
    return mgrs_to_square(reference).to_bbox()


def mgrs_to_point(reference: str) -> LatLong:
    """
    Convert an MGRS reference to the center of the square it denotes.

    The center is the mean of the square's corners, taken separately for
    latitude and longitude.

    Args:
        reference: MGRS reference string

    Returns:
        LatLong at the center of the square

    Raises:
        MGRSError: If the reference cannot be decoded
        InvalidZoneError: If the zone number is outside [0, 60]
    """
    return mgrs_to_square(reference).centroid
