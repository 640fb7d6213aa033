"""
gridref - WGS84 latitude/longitude, UTM and MGRS coordinate conversion.

This package converts between geodetic coordinates, Universal Transverse
Mercator coordinates and Military Grid Reference System references.
"""

__version__ = "0.1.0"

from gridref.core.crs import (
    decode_mgrs,
    encode_mgrs,
    format_mgrs,
    geodetic_to_utm,
    lat_long_to_mgrs,
    letter_designator,
    mgrs_to_bbox,
    mgrs_to_point,
    mgrs_to_square,
    min_northing,
    utm_to_geodetic,
    utm_to_square,
    zone_number,
)
from gridref.models.coordinates import BoundingSquare, LatLong, UtmCoord

__all__ = [
    "BoundingSquare",
    "LatLong",
    "UtmCoord",
    "decode_mgrs",
    "encode_mgrs",
    "format_mgrs",
    "geodetic_to_utm",
    "lat_long_to_mgrs",
    "letter_designator",
    "mgrs_to_bbox",
    "mgrs_to_point",
    "mgrs_to_square",
    "min_northing",
    "utm_to_geodetic",
    "utm_to_square",
    "zone_number",
]
