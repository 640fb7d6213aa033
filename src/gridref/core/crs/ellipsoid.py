"""
Reference ellipsoid parameters.

The Transverse Mercator series only needs the semi-major axis, the
eccentricity squared and the central meridian scale factor. Ellipsoids
other than the built-in WGS84 constant are resolved through pyproj.
"""

import math
from dataclasses import dataclass
from typing import Any

from pyproj import CRS
from pyproj.exceptions import CRSError as PyprojCRSError

from gridref.core.errors import CRSError

# UTM scale factor on the central meridian.
UTM_SCALE_FACTOR = 0.9996


@dataclass(frozen=True)
class Ellipsoid:
    """
    Ellipsoid parameters for the Transverse Mercator series.

    Attributes:
        name: Human-readable name
        a: Semi-major (equatorial) axis in meters
        es: Eccentricity squared
        k0: Scale factor along the central meridian
    """

    name: str
    a: float
    es: float
    k0: float = UTM_SCALE_FACTOR

    def __post_init__(self) -> None:
        """Validate ellipsoid parameters."""
        if not self.a > 0:
            raise CRSError(f"Semi-major axis must be positive, got {self.a}")
        if not 0 <= self.es < 1:
            raise CRSError(f"Eccentricity squared must be in [0, 1), got {self.es}")

    @property
    def ecc_prime_squared(self) -> float:
        """Second eccentricity squared."""
        return self.es / (1 - self.es)

    @property
    def e1(self) -> float:
        """Footprint latitude series parameter."""
        root = math.sqrt(1 - self.es)
        return (1 - root) / (1 + root)

    @classmethod
    def from_crs(cls, user_input: Any, k0: float = UTM_SCALE_FACTOR) -> "Ellipsoid":
        """
        Create an Ellipsoid from anything pyproj accepts as a CRS.

        Args:
            user_input: EPSG code, "EPSG:xxxx" string, PROJ string or WKT
            k0: Scale factor along the central meridian

        Returns:
            Ellipsoid instance

        Raises:
            CRSError: If the CRS cannot be parsed or has no ellipsoid
        """
        try:
            crs = CRS.from_user_input(user_input)
        except PyprojCRSError as e:
            raise CRSError(f"Failed to parse CRS: {e}", crs=str(user_input)) from e

        ellipsoid = crs.ellipsoid
        if ellipsoid is None:
            raise CRSError("CRS has no ellipsoid", crs=str(user_input))

        a = ellipsoid.semi_major_metre
        inverse_flattening = ellipsoid.inverse_flattening
        if inverse_flattening:
            f = 1 / inverse_flattening
            es = 2 * f - f * f
        else:
            b = ellipsoid.semi_minor_metre
            es = (a * a - b * b) / (a * a)

        return cls(name=ellipsoid.name, a=a, es=es, k0=k0)


# Parameters used by the MGRS reference implementations; es is rounded
# from the exact WGS84 value 0.00669437999014.
WGS84 = Ellipsoid(name="WGS 84", a=6378137.0, es=0.00669438)
