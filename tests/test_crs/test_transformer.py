"""
Tests for the pyproj-backed UTM transformer.
"""

import numpy as np
import pytest

from gridref.core.crs import transformer
from gridref.core.crs.utm import geodetic_to_utm, utm_to_geodetic
from gridref.core.errors import CRSError, InvalidZoneError


class TestUTMTransformer:
    """Tests for UTMTransformer class."""

    def test_epsg_codes(self) -> None:
        """Test EPSG selection by hemisphere."""
        assert transformer.UTMTransformer(31).epsg == 32631
        assert transformer.UTMTransformer(56, southern=True).epsg == 32756

    def test_forward_paris(self) -> None:
        """Test projection of Paris into zone 31N."""
        trans = transformer.UTMTransformer(31)

        # Paris (48.8566°N, 2.3522°E)
        easting, northing = trans.forward(48.8566, 2.3522)

        assert 440000 < easting < 460000
        assert 5400000 < northing < 5420000

    def test_forward_matches_series(self) -> None:
        """Test that PROJ and the series agree on Stonehenge."""
        trans = transformer.UTMTransformer(30)

        easting, northing = trans.forward(51.178861, -1.826412)
        utm = geodetic_to_utm(51.178861, -1.826412)

        assert easting == pytest.approx(utm.easting, abs=1.0)
        assert northing == pytest.approx(utm.northing, abs=1.0)

    def test_inverse_southern(self) -> None:
        """Test inverse projection in the southern hemisphere."""
        trans = transformer.UTMTransformer(56, southern=True)

        latitude, longitude = trans.inverse(334000, 6252000)

        assert -34.5 < latitude < -33.5
        assert 151.0 < longitude < 151.5

    def test_round_trip(self) -> None:
        """Test forward then inverse through PROJ."""
        trans = transformer.UTMTransformer(4)

        easting, northing = trans.forward(21.3, -157.9)
        latitude, longitude = trans.inverse(easting, northing)

        assert latitude == pytest.approx(21.3, abs=1e-9)
        assert longitude == pytest.approx(-157.9, abs=1e-9)

    def test_inverse_matches_series(self) -> None:
        """Test that PROJ and the series agree on an inverse projection."""
        utm = geodetic_to_utm(-33.8688, 151.2093)
        trans = transformer.UTMTransformer(utm.zone_number, southern=utm.is_southern)

        latitude, longitude = trans.inverse(utm.easting, utm.northing)
        position = utm_to_geodetic(utm)

        assert position.latitude == pytest.approx(latitude, abs=1e-6)
        assert position.longitude == pytest.approx(longitude, abs=1e-6)

    def test_forward_batch(self) -> None:
        """Test batch projection with numpy arrays."""
        trans = transformer.UTMTransformer(31)
        latitudes = np.array([45.0, 48.8566, 50.0])
        longitudes = np.array([3.0, 2.3522, 4.0])

        eastings, northings = trans.forward_batch(latitudes, longitudes)

        assert isinstance(eastings, np.ndarray)
        assert eastings.shape == (3,)
        assert eastings[0] == pytest.approx(500000, abs=0.01)
        for i in range(3):
            expected = trans.forward(latitudes[i], longitudes[i])
            assert eastings[i] == pytest.approx(expected[0])
            assert northings[i] == pytest.approx(expected[1])

    def test_batch_accepts_lists(self) -> None:
        """Test that plain lists are accepted and round trip."""
        trans = transformer.UTMTransformer(31)

        eastings, northings = trans.forward_batch([45.0, 46.0], [3.0, 4.0])
        latitudes, longitudes = trans.inverse_batch(eastings.tolist(), northings.tolist())

        np.testing.assert_allclose(latitudes, [45.0, 46.0], atol=1e-9)
        np.testing.assert_allclose(longitudes, [3.0, 4.0], atol=1e-9)

    def test_batch_mismatched_lengths(self) -> None:
        """Test error handling for arrays of different length."""
        trans = transformer.UTMTransformer(31)

        with pytest.raises(CRSError, match="same length"):
            trans.forward_batch([45.0, 46.0], [3.0])

        with pytest.raises(CRSError, match="same length"):
            trans.inverse_batch([500000.0], [5000000.0, 5100000.0])

    def test_empty_batch(self) -> None:
        """Test projection of empty arrays."""
        trans = transformer.UTMTransformer(31)

        eastings, northings = trans.forward_batch([], [])

        assert len(eastings) == 0
        assert len(northings) == 0

    @pytest.mark.parametrize("number", [0, 61, -1])
    def test_invalid_zone(self, number: int) -> None:
        """Test error handling for zone numbers outside 1-60."""
        with pytest.raises(InvalidZoneError):
            transformer.UTMTransformer(number)

    def test_invalid_zone_is_crs_error(self) -> None:
        """Test that invalid zones can be caught as CRSError."""
        with pytest.raises(CRSError):
            transformer.UTMTransformer(99)


class TestValidateUTMAccuracy:
    """Tests for checking the series against PROJ."""

    @pytest.mark.parametrize(
        "latitude,longitude",
        [
            (0.0, 0.0),
            (51.178861, -1.826412),
            (48.8566, 2.3522),
            (-33.8688, 151.2093),
            (21.3, -157.9),
            (-0.5, 3.0),
            (60.0, 5.0),
            (75.0, 20.0),
            (-79.5, -120.0),
            (83.5, -40.0),
        ],
    )
    def test_series_agrees_with_proj(self, latitude: float, longitude: float) -> None:
        """Test that the series is within 2 m of PROJ."""
        assert transformer.validate_utm_accuracy(latitude, longitude)

    def test_tight_tolerance_fails(self) -> None:
        """Test that meter rounding shows up under a tiny tolerance."""
        # Rounding to whole meters leaves a residual at almost any point
        results = [
            transformer.validate_utm_accuracy(lat, lon, max_error_meters=1e-6)
            for lat, lon in [(48.8566, 2.3522), (51.178861, -1.826412), (21.3, -157.9)]
        ]

        assert not all(results)
