"""
pyproj-backed UTM transformation.

This module implements the same forward/inverse contract as the series in
gridref.core.crs.utm on top of PROJ, for batch work and for checking the
series against an independent implementation.
"""

import logging
import math
from typing import List, Tuple, Union

import numpy as np
from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError

from gridref.core.crs.utm import geodetic_to_utm
from gridref.core.crs.zones import utm_epsg
from gridref.core.errors import CRSError

logger = logging.getLogger(__name__)

WGS84_EPSG = 4326

ArrayLike = Union[List[float], np.ndarray]


class UTMTransformer:
    """
    Transform between WGS84 and a single UTM zone using pyproj.

    Coordinates are passed latitude first on the geodetic side, matching
    the rest of the package; the underlying transformer is built with
    always_xy so axis order never depends on the CRS definition.
    """

    def __init__(self, zone_number: int, southern: bool = False):
        """
        Initialize transformer.

        Args:
            zone_number: UTM zone number (1-60)
            southern: True for the southern hemisphere projection

        Raises:
            InvalidZoneError: If the zone number is out of range
            CRSError: If the transformer cannot be created
        """
        self.zone_number = zone_number
        self.southern = southern
        self.epsg = utm_epsg(zone_number, southern)

        try:
            geographic = CRS.from_epsg(WGS84_EPSG)
            projected = CRS.from_epsg(self.epsg)
            self._forward = Transformer.from_crs(geographic, projected, always_xy=True)
            self._inverse = Transformer.from_crs(projected, geographic, always_xy=True)
        except ProjError as e:
            raise CRSError(
                f"Failed to create transformer: {e}", crs=f"EPSG:{self.epsg}"
            ) from e

    def forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        """
        Project a geodetic position.

        Returns:
            Tuple of (easting, northing) in meters

        Raises:
            CRSError: If transformation fails
        """
        try:
            easting, northing = self._forward.transform(longitude, latitude, errcheck=True)
        except ProjError as e:
            raise CRSError(f"Transformation failed: {e}", crs=f"EPSG:{self.epsg}") from e
        return (easting, northing)

    def inverse(self, easting: float, northing: float) -> Tuple[float, float]:
        """
        Convert a projected position back to geodetic coordinates.

        Returns:
            Tuple of (latitude, longitude) in decimal degrees

        Raises:
            CRSError: If transformation fails
        """
        try:
            longitude, latitude = self._inverse.transform(easting, northing, errcheck=True)
        except ProjError as e:
            raise CRSError(f"Transformation failed: {e}", crs=f"EPSG:{self.epsg}") from e
        return (latitude, longitude)

    def forward_batch(
        self, latitudes: ArrayLike, longitudes: ArrayLike
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Project arrays of geodetic positions.

        Returns:
            Tuple of (eastings, northings) arrays

        Raises:
            CRSError: If the arrays differ in length or transformation fails
        """
        lat_arr = np.asarray(latitudes, dtype=float)
        lon_arr = np.asarray(longitudes, dtype=float)
        if lat_arr.shape != lon_arr.shape:
            raise CRSError("latitudes and longitudes must have same length")

        try:
            eastings, northings = self._forward.transform(lon_arr, lat_arr, errcheck=True)
        except ProjError as e:
            raise CRSError(
                f"Batch transformation failed: {e}", crs=f"EPSG:{self.epsg}"
            ) from e
        return (np.asarray(eastings), np.asarray(northings))

    def inverse_batch(
        self, eastings: ArrayLike, northings: ArrayLike
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Convert arrays of projected positions to geodetic coordinates.

        Returns:
            Tuple of (latitudes, longitudes) arrays

        Raises:
            CRSError: If the arrays differ in length or transformation fails
        """
        x_arr = np.asarray(eastings, dtype=float)
        y_arr = np.asarray(northings, dtype=float)
        if x_arr.shape != y_arr.shape:
            raise CRSError("eastings and northings must have same length")

        try:
            longitudes, latitudes = self._inverse.transform(x_arr, y_arr, errcheck=True)
        except ProjError as e:
            raise CRSError(
                f"Batch transformation failed: {e}", crs=f"EPSG:{self.epsg}"
            ) from e
        return (np.asarray(latitudes), np.asarray(longitudes))


def validate_utm_accuracy(
    latitude: float,
    longitude: float,
    max_error_meters: float = 2.0,
) -> bool:
    """
    Check the series projection of a point against PROJ.

    Both results are expressed in the zone chosen by the series (including
    the Norway and Svalbard exceptions).

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        max_error_meters: Maximum acceptable distance between the two results

    Returns:
        True if the two projections agree within tolerance

    Raises:
        CRSError: If the PROJ transformation fails
    """
    utm = geodetic_to_utm(latitude, longitude)
    reference = UTMTransformer(utm.zone_number, southern=latitude < 0)
    easting, northing = reference.forward(latitude, longitude)

    error = math.hypot(utm.easting - easting, utm.northing - northing)
    logger.debug(
        f"Series vs PROJ at ({latitude}, {longitude}): {error:.3f} m",
        extra={"zone_number": utm.zone_number},
    )
    return error <= max_error_meters
