"""
Coordinate conversion module.

This module provides conversion between:
- WGS84 latitude/longitude and UTM (Transverse Mercator series)
- UTM and MGRS grid references
- MGRS references and the lat/long squares they denote
"""

from gridref.core.crs.ellipsoid import WGS84, Ellipsoid
from gridref.core.crs.mgrs import (
    decode_mgrs,
    encode_mgrs,
    format_mgrs,
    lat_long_to_mgrs,
    square_id,
)
from gridref.core.crs.square import (
    mgrs_to_bbox,
    mgrs_to_point,
    mgrs_to_square,
    utm_to_square,
)
from gridref.core.crs.transformer import UTMTransformer, validate_utm_accuracy
from gridref.core.crs.utm import geodetic_to_utm, utm_to_geodetic
from gridref.core.crs.zones import (
    central_meridian,
    letter_designator,
    min_northing,
    utm_epsg,
    zone_bounds,
    zone_number,
)

__all__ = [
    # Ellipsoid
    "WGS84",
    "Ellipsoid",
    # UTM
    "geodetic_to_utm",
    "utm_to_geodetic",
    # Zones and bands
    "central_meridian",
    "letter_designator",
    "min_northing",
    "utm_epsg",
    "zone_bounds",
    "zone_number",
    # MGRS
    "decode_mgrs",
    "encode_mgrs",
    "format_mgrs",
    "lat_long_to_mgrs",
    "square_id",
    # Squares
    "mgrs_to_bbox",
    "mgrs_to_point",
    "mgrs_to_square",
    "utm_to_square",
    # PROJ reference
    "UTMTransformer",
    "validate_utm_accuracy",
]
