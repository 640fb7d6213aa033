"""
Tests for coordinate data models.
"""

import math

import pytest

from gridref.core.errors import ValidationError
from gridref.models.coordinates import (
    MAX_ACCURACY,
    BoundingSquare,
    LatLong,
    UtmCoord,
    clamp_accuracy,
    normalize_latitude,
    normalize_longitude,
)


class TestNormalization:
    """Tests for latitude/longitude normalization helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0.0, 0.0), (45.5, 45.5), (-90.0, -90.0), (91.0, 90.0), (-123.0, -90.0)],
    )
    def test_normalize_latitude(self, value: float, expected: float) -> None:
        """Test that latitudes are clamped to [-90, 90]."""
        assert normalize_latitude(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, 0.0),
            (179.9, 179.9),
            (180.0, 180.0),
            (-180.0, 180.0),
            (540.0, 180.0),
            (-540.0, 180.0),
            (181.0, -179.0),
            (-181.0, 179.0),
            (360.0, 0.0),
            (725.0, 5.0),
            (-725.0, -5.0),
        ],
    )
    def test_normalize_longitude(self, value: float, expected: float) -> None:
        """Test that longitudes are wrapped into (-180, 180]."""
        assert normalize_longitude(value) == pytest.approx(expected)

    def test_normalize_longitude_never_returns_minus_180(self) -> None:
        """Test the half-open range at the antimeridian."""
        for value in [-180.0, 180.0, -540.0, 900.0]:
            assert normalize_longitude(value) == 180.0


class TestClampAccuracy:
    """Tests for accuracy clamping."""

    @pytest.mark.parametrize(
        "value,expected",
        [(-3, 0), (0, 0), (2, 2), (5, 5), (6, 5), (100, 5)],
    )
    def test_clamp(self, value: int, expected: int) -> None:
        """Test that accuracy is pulled into 0-5."""
        assert clamp_accuracy(value) == expected

    @pytest.mark.parametrize("value", [2.5, "3", None, True])
    def test_non_integer(self, value: object) -> None:
        """Test error handling for non-integer accuracy."""
        with pytest.raises(ValidationError) as exc_info:
            clamp_accuracy(value)  # type: ignore[arg-type]

        assert exc_info.value.details["field"] == "accuracy"


class TestLatLong:
    """Tests for LatLong model."""

    def test_create(self) -> None:
        """Test creating a LatLong."""
        position = LatLong(51.178861, -1.826412)

        assert position.latitude == 51.178861
        assert position.longitude == -1.826412

    def test_normalizes_on_creation(self) -> None:
        """Test that out-of-range values are normalized."""
        position = LatLong(95.0, -190.0)

        assert position.latitude == 90.0
        assert position.longitude == pytest.approx(170.0)

    @pytest.mark.parametrize(
        "latitude,longitude,field",
        [
            (math.nan, 0.0, "latitude"),
            (math.inf, 0.0, "latitude"),
            (-math.inf, 0.0, "latitude"),
            (0.0, math.nan, "longitude"),
            (0.0, math.inf, "longitude"),
            (0.0, -math.inf, "longitude"),
        ],
    )
    def test_non_finite_input(self, latitude: float, longitude: float, field: str) -> None:
        """Test error handling for NaN and infinite coordinates."""
        with pytest.raises(ValidationError) as exc_info:
            LatLong(latitude, longitude)

        assert exc_info.value.details["field"] == field

    def test_minus_180_becomes_180(self) -> None:
        """Test that -180 and 180 are the same position."""
        assert LatLong(0.0, -180.0) == LatLong(0.0, 180.0)

    def test_to_tuple(self) -> None:
        """Test conversion to tuple."""
        assert LatLong(10.0, 20.0).to_tuple() == (10.0, 20.0)

    def test_to_dict(self) -> None:
        """Test conversion to dictionary."""
        assert LatLong(10.0, 20.0).to_dict() == {"latitude": 10.0, "longitude": 20.0}

    def test_str(self) -> None:
        """Test string representation."""
        assert str(LatLong(51.178861, -1.826412)) == "(51.178861, -1.826412)"

    def test_immutable(self) -> None:
        """Test that positions cannot be modified."""
        position = LatLong(10.0, 20.0)

        with pytest.raises(AttributeError):
            position.latitude = 5.0  # type: ignore[misc]


class TestUtmCoord:
    """Tests for UtmCoord model."""

    def test_create(self) -> None:
        """Test creating a UtmCoord with default accuracy."""
        utm = UtmCoord(582031, 5670369, 30, "U")

        assert utm.easting == 582031
        assert utm.northing == 5670369
        assert utm.zone_number == 30
        assert utm.zone_letter == "U"
        assert utm.accuracy == MAX_ACCURACY

    def test_zone_letter_uppercased(self) -> None:
        """Test that lowercase zone letters are accepted."""
        assert UtmCoord(500000, 0, 31, "n").zone_letter == "N"

    @pytest.mark.parametrize("letter", ["", "UV", None])
    def test_invalid_zone_letter(self, letter: object) -> None:
        """Test error handling for zone letters that are not one character."""
        with pytest.raises(ValidationError) as exc_info:
            UtmCoord(500000, 0, 31, letter)  # type: ignore[arg-type]

        assert exc_info.value.details["field"] == "zone_letter"

    def test_accuracy_clamped(self) -> None:
        """Test that accuracy is clamped on creation."""
        assert UtmCoord(500000, 0, 31, "N", accuracy=9).accuracy == 5
        assert UtmCoord(500000, 0, 31, "N", accuracy=-1).accuracy == 0

    @pytest.mark.parametrize(
        "letter,southern",
        [("C", True), ("H", True), ("M", True), ("N", False), ("U", False), ("X", False)],
    )
    def test_is_southern(self, letter: str, southern: bool) -> None:
        """Test hemisphere detection from the band letter."""
        assert UtmCoord(500000, 0, 31, letter).is_southern is southern

    @pytest.mark.parametrize(
        "accuracy,size",
        [(0, 100000), (1, 10000), (2, 1000), (3, 100), (4, 10), (5, 1)],
    )
    def test_size(self, accuracy: int, size: int) -> None:
        """Test square size for each accuracy."""
        assert UtmCoord(500000, 0, 31, "N", accuracy=accuracy).size == size

    def test_with_accuracy(self) -> None:
        """Test copying with another accuracy."""
        utm = UtmCoord(582031, 5670369, 30, "U")

        coarse = utm.with_accuracy(2)

        assert coarse.accuracy == 2
        assert coarse.easting == utm.easting
        assert utm.accuracy == 5

    def test_to_grid_reference(self) -> None:
        """Test the default UTM grid reference format."""
        assert UtmCoord(582031, 5670369, 30, "U").to_grid_reference() == "30U 582031 5670369"

    def test_to_grid_reference_whole_floats(self) -> None:
        """Test that whole-number floats print without a decimal part."""
        utm = UtmCoord(612340.0, 2356780.0, 4, "Q")

        assert utm.to_grid_reference() == "4Q 612340 2356780"

    def test_to_grid_reference_fractional(self) -> None:
        """Test that fractional meters are kept."""
        utm = UtmCoord(500000.5, 100.25, 31, "N")

        assert utm.to_grid_reference() == "31N 500000.5 100.25"

    def test_to_grid_reference_template(self) -> None:
        """Test formatting with a custom template."""
        utm = UtmCoord(582031, 5670369, 30, "U")

        result = utm.to_grid_reference("{zone}{letter} E{easting} N{northing}")

        assert result == "30U E582031 N5670369"

    def test_str(self) -> None:
        """Test string representation."""
        assert str(UtmCoord(582031, 5670369, 30, "U")) == "30U 582031 5670369"

    def test_to_dict(self) -> None:
        """Test conversion to dictionary."""
        utm = UtmCoord(582031, 5670369, 30, "U", accuracy=3)

        assert utm.to_dict() == {
            "easting": 582031,
            "northing": 5670369,
            "zone_number": 30,
            "zone_letter": "U",
            "accuracy": 3,
        }


class TestBoundingSquare:
    """Tests for BoundingSquare model."""

    def test_centroid(self) -> None:
        """Test that the centroid is the per-axis mean of the corners."""
        square = BoundingSquare(LatLong(10.0, 20.0), LatLong(12.0, 24.0))

        assert square.centroid == LatLong(11.0, 22.0)

    def test_centroid_across_antimeridian(self) -> None:
        """Test the centroid of a square straddling 180 degrees."""
        square = BoundingSquare(LatLong(0.0, 179.0), LatLong(1.0, -179.0))

        assert square.centroid == LatLong(0.5, 180.0)

    def test_centroid_just_west_of_antimeridian(self) -> None:
        """Test that the unwrapped mean is normalized back into range."""
        square = BoundingSquare(LatLong(0.0, 179.5), LatLong(1.0, -178.5))

        assert square.centroid.longitude == pytest.approx(-179.5)

    def test_to_bbox(self) -> None:
        """Test bbox ordering (left, bottom, right, top)."""
        square = BoundingSquare(LatLong(10.0, 20.0), LatLong(12.0, 24.0))

        assert square.to_bbox() == (20.0, 10.0, 24.0, 12.0)

    def test_to_dict(self) -> None:
        """Test conversion to dictionary."""
        square = BoundingSquare(LatLong(10.0, 20.0), LatLong(12.0, 24.0))

        assert square.to_dict() == {
            "bottom_left": {"latitude": 10.0, "longitude": 20.0},
            "top_right": {"latitude": 12.0, "longitude": 24.0},
        }

    def test_str(self) -> None:
        """Test string representation."""
        square = BoundingSquare(LatLong(10.0, 20.0), LatLong(12.0, 24.0))

        assert str(square) == "Square((10.000000, 20.000000), (12.000000, 24.000000))"
