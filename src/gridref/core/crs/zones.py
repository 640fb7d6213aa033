"""
UTM zone and latitude band resolution.

This module assigns UTM zone numbers (including the Norway and Svalbard
exceptions), MGRS latitude band letters, and the minimum northing of each
band used to resolve the 2,000,000 m repeat of MGRS row letters.
"""

import math
from typing import Tuple

from gridref.core.errors import InvalidZoneError, InvalidZoneLetterError
from gridref.models.coordinates import normalize_longitude

# Latitude bands from 80°S northward, 8° each (X stretches to 84°N).
BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"

# Returned for latitudes outside MGRS coverage.
INVALID_BAND = "Z"

MIN_LATITUDE = -80.0
MAX_LATITUDE = 84.0

# Minimum northing of each latitude band, from the Geotrans
# Latitude_Band_Value table.
MIN_NORTHING = {
    "C": 1100000.0,
    "D": 2000000.0,
    "E": 2800000.0,
    "F": 3700000.0,
    "G": 4600000.0,
    "H": 5500000.0,
    "J": 6400000.0,
    "K": 7300000.0,
    "L": 8200000.0,
    "M": 9100000.0,
    "N": 0.0,
    "P": 800000.0,
    "Q": 1700000.0,
    "R": 2600000.0,
    "S": 3500000.0,
    "T": 4400000.0,
    "U": 5300000.0,
    "V": 6200000.0,
    "W": 7000000.0,
    "X": 7900000.0,
}

# Svalbard: longitude ranges and the widened zone each maps to.
SVALBARD_ZONES = (
    (0.0, 9.0, 31),
    (9.0, 21.0, 33),
    (21.0, 33.0, 35),
    (33.0, 42.0, 37),
)


def zone_number(latitude: float, longitude: float) -> int:
    """
    Get the UTM zone number for a geodetic position.

    UTM zones are numbered from 1 to 60, each covering 6 degrees of
    longitude, zone 1 starting at 180°W.

    Special cases, applied in order after the base formula:
    - Longitude 180 is placed in zone 60
    - Norway: 56-64°N, 3-12°E uses zone 32
    - Svalbard: 72-84°N uses the widened zones 31, 33, 35 and 37

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees, any real value

    Returns:
        Zone number (1-60)
    """
    longitude = normalize_longitude(longitude)

    number = int(math.floor((longitude + 180) / 6)) + 1

    if longitude == 180.0:
        number = 60

    if 56.0 <= latitude < 64.0 and 3.0 <= longitude < 12.0:
        number = 32

    if 72.0 <= latitude < 84.0:
        for west, east, svalbard_zone in SVALBARD_ZONES:
            if west <= longitude < east:
                number = svalbard_zone
                break

    return number


def letter_designator(latitude: float) -> str:
    """
    Get the MGRS latitude band letter for a latitude.

    Bands are 8 degrees tall, lettered C to X (omitting I and O), with X
    covering 72°N to 84°N inclusive.

    Args:
        latitude: Latitude in decimal degrees

    Returns:
        Band letter, or "Z" when the latitude is outside [-80, 84]
    """
    if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
        return INVALID_BAND

    if latitude >= 72.0:
        return "X"

    return BAND_LETTERS[int(math.floor((latitude - MIN_LATITUDE) / 8))]


def min_northing(zone_letter: str) -> float:
    """
    Get the minimum northing of a latitude band.

    Args:
        zone_letter: Band letter (C-X, omitting I and O)

    Returns:
        Minimum northing in meters, southern bands including the false northing

    Raises:
        InvalidZoneLetterError: If the letter is not a latitude band
    """
    try:
        return MIN_NORTHING[zone_letter]
    except KeyError:
        raise InvalidZoneLetterError(
            f"Invalid zone letter: {zone_letter}", zone_letter=zone_letter
        ) from None


def _check_zone(number: int) -> None:
    if not 1 <= number <= 60:
        raise InvalidZoneError(
            f"UTM zone must be between 1 and 60, got {number}", zone_number=number
        )


def central_meridian(number: int) -> float:
    """
    Calculate the central meridian for a UTM zone.

    Args:
        number: UTM zone number (1-60)

    Returns:
        Central meridian in decimal degrees

    Raises:
        InvalidZoneError: If the zone number is out of range
    """
    _check_zone(number)
    return (number - 1) * 6 - 180 + 3


def zone_bounds(number: int) -> Tuple[float, float]:
    """
    Get the standard longitude bounds for a UTM zone.

    Norway and Svalbard exceptions are not reflected here.

    Returns:
        Tuple of (min_longitude, max_longitude)

    Raises:
        InvalidZoneError: If the zone number is out of range
    """
    _check_zone(number)
    min_lon = -180 + (number - 1) * 6
    return (min_lon, min_lon + 6)


def utm_epsg(number: int, southern: bool) -> int:
    """
    Get the WGS 84 / UTM EPSG code for a zone.

    Args:
        number: UTM zone number (1-60)
        southern: True for the southern hemisphere projection

    Returns:
        EPSG code (32601-32660 north, 32701-32760 south)

    Raises:
        InvalidZoneError: If the zone number is out of range
    """
    _check_zone(number)
    return (32700 if southern else 32600) + number
