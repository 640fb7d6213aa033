"""
Military Grid Reference System encoding and decoding.

An MGRS reference is the UTM zone number and band letter, a two-letter
100km square id, and an equal number (0-5) of easting and northing digits,
e.g. "4QFJ1234567890". The square id letters are assigned per "set" of
zones; columns cycle through 24 letters and rows through 20, both
skipping I and O.
"""

import logging
import math
from typing import Optional, Tuple

from gridref.core.config import settings
from gridref.core.crs.utm import geodetic_to_utm
from gridref.core.crs.zones import MIN_NORTHING, min_northing
from gridref.core.errors import (
    BadCharacterError,
    InvalidZoneLetterError,
    MalformedReferenceError,
    OddDigitCountError,
)
from gridref.models.coordinates import MAX_ACCURACY, UtmCoord, clamp_accuracy

logger = logging.getLogger(__name__)

# UTM zones are grouped into 6 sets, each with its own square lettering.
NUM_100K_SETS = 6

# Letters at the lower left of each set, for columns and rows.
SET_ORIGIN_COLUMN_LETTERS = "AJSAJS"
SET_ORIGIN_ROW_LETTERS = "AFAFAF"

COLUMN_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"
ROW_LETTERS = "ABCDEFGHJKLMNPQRSTUV"

SQUARE_SIZE = 100000
# The row letters repeat every 20 squares going north.
ROW_CYCLE = len(ROW_LETTERS) * SQUARE_SIZE

MGRS_TEMPLATE = "{zone}{letter}{square}{easting}{northing}"

# Zone letters an MGRS reference may not carry: A, B, Y and Z are polar,
# I and O are never used.
UNSUPPORTED_ZONE_LETTERS = frozenset("ABYZIO")

_DIGITS = frozenset("0123456789")


def set_for_zone(number: int) -> int:
    """
    Get the 100k square set (1-6) a UTM zone belongs to.
    """
    set_number = number % NUM_100K_SETS
    return set_number or NUM_100K_SETS


def square_id(easting: float, northing: float, number: int) -> str:
    """
    Get the two-letter 100km square id for a UTM position.

    Args:
        easting: Easting in meters
        northing: Northing in meters
        number: UTM zone number

    Returns:
        Column letter followed by row letter
    """
    index = set_for_zone(number) - 1
    column = int(easting // SQUARE_SIZE)
    row = int(northing // SQUARE_SIZE) % len(ROW_LETTERS)

    column_origin = COLUMN_LETTERS.index(SET_ORIGIN_COLUMN_LETTERS[index])
    row_origin = ROW_LETTERS.index(SET_ORIGIN_ROW_LETTERS[index])

    return (
        COLUMN_LETTERS[(column_origin + column - 1) % len(COLUMN_LETTERS)]
        + ROW_LETTERS[(row_origin + row) % len(ROW_LETTERS)]
    )


def easting_from_letter(letter: str, set_number: int) -> float:
    """
    Get the easting of the 100km square column named by a letter.

    Raises:
        BadCharacterError: If the letter is not a column letter
    """
    if letter not in COLUMN_LETTERS:
        raise BadCharacterError(f"Bad character: {letter}", character=letter)
    origin = COLUMN_LETTERS.index(SET_ORIGIN_COLUMN_LETTERS[set_number - 1])
    steps = (COLUMN_LETTERS.index(letter) - origin) % len(COLUMN_LETTERS)
    return float((steps + 1) * SQUARE_SIZE)


def northing_from_letter(letter: str, set_number: int) -> float:
    """
    Get the northing of the 100km square row named by a letter.

    The result is within the first 2,000,000 m cycle; callers add whole
    cycles according to the latitude band.

    Raises:
        BadCharacterError: If the letter is not a row letter
    """
    if letter not in ROW_LETTERS:
        raise BadCharacterError(f"Bad character: {letter}", character=letter)
    origin = ROW_LETTERS.index(SET_ORIGIN_ROW_LETTERS[set_number - 1])
    steps = (ROW_LETTERS.index(letter) - origin) % len(ROW_LETTERS)
    return float(steps * SQUARE_SIZE)


def _truncated_digits(value: int, accuracy: int) -> str:
    return f"{value % SQUARE_SIZE:05d}"[:accuracy]


def format_mgrs(
    utm: UtmCoord,
    template: str = MGRS_TEMPLATE,
    accuracy: Optional[int] = None,
) -> str:
    """
    Format a UTM coordinate as an MGRS reference using a template.

    The template fields are zone, letter, square, easting and northing,
    e.g. "{zone}{letter} {square} {easting} {northing}" for spaced output.

    Args:
        utm: UTM coordinate
        template: Format string
        accuracy: Digits per easting/northing (0-5), default utm.accuracy

    Returns:
        Formatted MGRS reference

    Raises:
        InvalidZoneLetterError: If the band letter is outside MGRS coverage
    """
    if utm.zone_letter not in MIN_NORTHING:
        raise InvalidZoneLetterError(
            f"Zone letter {utm.zone_letter} is outside MGRS coverage",
            zone_letter=utm.zone_letter,
        )

    accuracy = utm.accuracy if accuracy is None else clamp_accuracy(accuracy)

    easting = int(math.floor(utm.easting + 0.5))
    northing = int(math.floor(utm.northing + 0.5))

    return template.format(
        zone=utm.zone_number,
        letter=utm.zone_letter,
        square=square_id(easting, northing, utm.zone_number),
        easting=_truncated_digits(easting, accuracy),
        northing=_truncated_digits(northing, accuracy),
    ).strip()


def encode_mgrs(utm: UtmCoord, accuracy: Optional[int] = None) -> str:
    """
    Encode a UTM coordinate as an MGRS reference.

    Args:
        utm: UTM coordinate
        accuracy: Digits per easting/northing, 5 for 1 m down to 0 for
            100 km; defaults to the accuracy carried by utm

    Returns:
        MGRS reference string (e.g., "30UWB8203170369")

    Raises:
        InvalidZoneLetterError: If the band letter is outside MGRS coverage
    """
    reference = format_mgrs(utm, accuracy=accuracy)
    logger.debug(f"Encoded {utm} as {reference}")
    return reference


def _split_zone(reference: str) -> Tuple[int, int]:
    """Return the zone number and the index of the zone letter."""
    i = 0
    while i < len(reference) and not ("A" <= reference[i] <= "Z"):
        if i >= 2:
            raise MalformedReferenceError(
                f"MGRS reference has no zone letter: {reference}", reference=reference
            )
        i += 1

    if i == 0 or i + 3 > len(reference):
        # The shortest usable reference is #AAA
        raise MalformedReferenceError(
            f"MGRS reference is too short or has no zone number: {reference}",
            reference=reference,
        )

    digits = reference[:i]
    if not set(digits) <= _DIGITS:
        raise MalformedReferenceError(
            f"MGRS zone number is not numeric: {digits}", reference=reference
        )

    return int(digits), i


def decode_mgrs(reference: str) -> UtmCoord:
    """
    Decode an MGRS reference into a UTM coordinate.

    The returned coordinate is the south-west corner of the square the
    reference denotes, and carries the number of digits used per axis as
    its accuracy.

    Args:
        reference: MGRS reference; whitespace and case are ignored

    Returns:
        UtmCoord with the inferred accuracy

    Raises:
        MalformedReferenceError: If the reference structure is unusable
        InvalidZoneLetterError: If the zone letter is polar or unused
        BadCharacterError: If a 100km square letter is invalid
        OddDigitCountError: If the digits cannot be split evenly
    """
    if not isinstance(reference, str):
        raise MalformedReferenceError(
            f"MGRS reference must be a string, got {type(reference).__name__}"
        )

    reference = "".join(reference.split()).upper()
    if not reference:
        raise MalformedReferenceError("MGRS reference is empty", reference=reference)

    number, i = _split_zone(reference)

    zone_letter = reference[i]
    if zone_letter in UNSUPPORTED_ZONE_LETTERS:
        raise InvalidZoneLetterError(
            f"Zone letter {zone_letter} not handled: {reference}",
            zone_letter=zone_letter,
            reference=reference,
        )
    i += 1

    set_number = set_for_zone(number)
    column_letter, row_letter = reference[i], reference[i + 1]
    i += 2
    try:
        east_100k = easting_from_letter(column_letter, set_number)
        north_100k = northing_from_letter(row_letter, set_number)
    except BadCharacterError as e:
        e.details["reference"] = reference
        raise

    # Row letters repeat every 2,000,000 m; move up whole cycles until the
    # northing reaches the band.
    band_minimum = min_northing(zone_letter)
    while north_100k < band_minimum:
        north_100k += ROW_CYCLE

    remainder = reference[i:]
    if len(remainder) % 2 != 0:
        raise OddDigitCountError(
            "MGRS reference must have an even number of digits after the zone "
            f"letter and 100km square letters: {reference}",
            digit_count=len(remainder),
            reference=reference,
        )
    if not set(remainder) <= _DIGITS:
        raise MalformedReferenceError(
            f"MGRS easting/northing must be digits: {remainder}", reference=reference
        )

    sep = len(remainder) // 2
    if sep > MAX_ACCURACY:
        raise MalformedReferenceError(
            f"MGRS reference has more than {MAX_ACCURACY} digits per axis: {reference}",
            reference=reference,
        )

    easting = east_100k
    northing = north_100k
    if sep > 0:
        accuracy_bonus = SQUARE_SIZE / 10**sep
        easting += int(remainder[:sep], 10) * accuracy_bonus
        northing += int(remainder[sep:], 10) * accuracy_bonus

    utm = UtmCoord(
        easting=easting,
        northing=northing,
        zone_number=number,
        zone_letter=zone_letter,
        accuracy=sep,
    )
    logger.debug(
        f"Decoded {reference} as {utm}",
        extra={"reference": reference, "accuracy": sep},
    )
    return utm


def lat_long_to_mgrs(
    latitude: float, longitude: float, accuracy: Optional[int] = None
) -> str:
    """
    Convert a geodetic position to an MGRS reference.

    Args:
        latitude: Latitude in decimal degrees (-80 to 84)
        longitude: Longitude in decimal degrees
        accuracy: Digits per easting/northing (0-5), default from settings

    Returns:
        MGRS reference string

    Raises:
        InvalidZoneLetterError: If the latitude is outside MGRS coverage
    """
    if accuracy is None:
        accuracy = settings.default_accuracy
    return encode_mgrs(geodetic_to_utm(latitude, longitude), accuracy)
