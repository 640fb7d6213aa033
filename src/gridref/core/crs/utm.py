"""
Universal Transverse Mercator projection.

Forward and inverse Transverse Mercator series (Snyder, "Map Projections:
A Working Manual", USGS PP 1395) for converting between geodetic
coordinates and UTM easting/northing on a reference ellipsoid.
"""

import logging
import math

from gridref.core.crs.ellipsoid import WGS84, Ellipsoid
from gridref.core.crs.zones import INVALID_BAND, letter_designator, zone_number
from gridref.core.errors import InvalidZoneError, ValidationError
from gridref.models.coordinates import LatLong, UtmCoord, normalize_longitude

logger = logging.getLogger(__name__)

FALSE_EASTING = 500000.0
FALSE_NORTHING = 10000000.0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _zone_origin(number: int) -> float:
    # +3 puts the origin in the middle of the zone
    return (number - 1) * 6 - 180 + 3


def _meridional_arc(latitude_rad: float, ellipsoid: Ellipsoid) -> float:
    es = ellipsoid.es
    es2 = es * es
    es3 = es2 * es
    return ellipsoid.a * (
        (1 - es / 4 - 3 * es2 / 64 - 5 * es3 / 256) * latitude_rad
        - (3 * es / 8 + 3 * es2 / 32 + 45 * es3 / 1024) * math.sin(2 * latitude_rad)
        + (15 * es2 / 256 + 45 * es3 / 1024) * math.sin(4 * latitude_rad)
        - (35 * es3 / 3072) * math.sin(6 * latitude_rad)
    )


def geodetic_to_utm(
    latitude: float, longitude: float, ellipsoid: Ellipsoid = WGS84
) -> UtmCoord:
    """
    Project a geodetic position to UTM.

    Easting and northing are rounded to the nearest meter. Latitudes
    outside [-80, 84] are still projected but get the band letter "Z",
    which callers must treat as outside MGRS coverage.

    Args:
        latitude: Latitude in decimal degrees (-90 to 90)
        longitude: Longitude in decimal degrees, any real value
        ellipsoid: Reference ellipsoid (default: WGS84)

    Returns:
        UtmCoord for the position

    Raises:
        ValidationError: If latitude or longitude is not a finite number
    """
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise ValidationError(
            f"Coordinates must be finite numbers, got ({latitude}, {longitude})",
            details={"latitude": latitude, "longitude": longitude},
        )

    longitude = normalize_longitude(longitude)
    number = zone_number(latitude, longitude)

    lat_rad = math.radians(latitude)
    long_rad = math.radians(longitude)
    origin_rad = math.radians(_zone_origin(number))

    a = ellipsoid.a
    es = ellipsoid.es
    k0 = ellipsoid.k0
    ep2 = ellipsoid.ecc_prime_squared

    sin_lat = math.sin(lat_rad)
    cos_lat = math.cos(lat_rad)
    tan_lat = math.tan(lat_rad)

    N = a / math.sqrt(1 - es * sin_lat * sin_lat)
    T = tan_lat * tan_lat
    C = ep2 * cos_lat * cos_lat
    A = cos_lat * (long_rad - origin_rad)
    M = _meridional_arc(lat_rad, ellipsoid)

    easting = k0 * N * (
        A
        + (1 - T + C) * A**3 / 6.0
        + (5 - 18 * T + T * T + 72 * C - 58 * ep2) * A**5 / 120.0
    ) + FALSE_EASTING

    northing = k0 * (
        M
        + N
        * tan_lat
        * (
            A * A / 2
            + (5 - T + 9 * C + 4 * C * C) * A**4 / 24.0
            + (61 - 58 * T + T * T + 600 * C - 330 * ep2) * A**6 / 720.0
        )
    )

    if latitude < 0.0:
        northing += FALSE_NORTHING

    letter = letter_designator(latitude)
    if letter == INVALID_BAND:
        logger.warning(
            f"Latitude {latitude} is outside MGRS coverage; band letter set to Z",
            extra={"latitude": latitude, "zone_number": number},
        )

    return UtmCoord(
        easting=_round_half_up(easting),
        northing=_round_half_up(northing),
        zone_number=number,
        zone_letter=letter,
    )


def utm_to_geodetic(utm: UtmCoord, ellipsoid: Ellipsoid = WGS84) -> LatLong:
    """
    Convert a UTM coordinate back to latitude/longitude.

    The zone letter is only used to tell the hemisphere, so a letter that
    is off by a band still yields the right position.

    Args:
        utm: UTM coordinate
        ellipsoid: Reference ellipsoid (default: WGS84)

    Returns:
        LatLong for the coordinate

    Raises:
        InvalidZoneError: If the zone number is outside [0, 60]
    """
    if not 0 <= utm.zone_number <= 60:
        raise InvalidZoneError(
            f"UTM zone must be between 0 and 60, got {utm.zone_number}",
            zone_number=utm.zone_number,
        )

    a = ellipsoid.a
    es = ellipsoid.es
    k0 = ellipsoid.k0
    ep2 = ellipsoid.ecc_prime_squared
    e1 = ellipsoid.e1

    x = utm.easting - FALSE_EASTING
    y = utm.northing
    if utm.is_southern:
        y -= FALSE_NORTHING

    M = y / k0
    mu = M / (a * (1 - es / 4 - 3 * es * es / 64 - 5 * es**3 / 256))

    phi1 = (
        mu
        + (3 * e1 / 2 - 27 * e1**3 / 32) * math.sin(2 * mu)
        + (21 * e1 * e1 / 16 - 55 * e1**4 / 32) * math.sin(4 * mu)
        + (151 * e1**3 / 96) * math.sin(6 * mu)
    )

    sin_phi1 = math.sin(phi1)
    cos_phi1 = math.cos(phi1)
    tan_phi1 = math.tan(phi1)

    N1 = a / math.sqrt(1 - es * sin_phi1 * sin_phi1)
    T1 = tan_phi1 * tan_phi1
    C1 = ep2 * cos_phi1 * cos_phi1
    R1 = a * (1 - es) / (1 - es * sin_phi1 * sin_phi1) ** 1.5
    D = x / (N1 * k0)

    lat = phi1 - (N1 * tan_phi1 / R1) * (
        D * D / 2
        - (5 + 3 * T1 + 10 * C1 - 4 * C1 * C1 - 9 * ep2) * D**4 / 24
        + (61 + 90 * T1 + 298 * C1 + 45 * T1 * T1 - 252 * ep2 - 3 * C1 * C1) * D**6 / 720
    )

    lon = (
        D
        - (1 + 2 * T1 + C1) * D**3 / 6
        + (5 - 2 * C1 + 28 * T1 - 3 * C1 * C1 + 8 * ep2 + 24 * T1 * T1) * D**5 / 120
    ) / cos_phi1

    return LatLong(
        math.degrees(lat),
        _zone_origin(utm.zone_number) + math.degrees(lon),
    )
