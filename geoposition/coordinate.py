"""Geographic coordinates and great-circle calculations.

``GeoCoordinate`` is an immutable latitude/longitude pair with an optional
altitude. Distance, bearing and forward projection use a spherical Earth
with the mean radius from ``geoposition.config``.

Numeric contract:
    All trigonometry runs in double precision. Distances and azimuths are
    returned rounded to single precision (about seven significant digits).

Example:
    >>> helsinki = GeoCoordinate(60.1699, 24.9384)
    >>> tallinn = GeoCoordinate(59.4370, 24.7536)
    >>> round(helsinki.distance_to(tallinn))
    82148
    >>> print(helsinki.at_distance_and_azimuth(1000, 90))
    (60.1698988°, 24.9564793°)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from math import asin, atan2, cos, degrees, isnan, radians, sin, trunc

import numpy as np

from .config import BASE_TYPE, COORDINATE_EPSILON, EARTH_MEAN_RADIUS, FULL_CIRCLE
from .errors import InvalidCoordinateError
from .unit import Angle, Length, as_degrees, as_meters
from .utility import CoordinateFieldType, valid, wrap


class GeoCoordinateType(Enum):
    """Classification of a coordinate by validity and dimensionality."""

    INVALID = auto()
    COORDINATE_2D = auto()
    COORDINATE_3D = auto()


def haversine(
    lat1: BASE_TYPE, lon1: BASE_TYPE, lat2: BASE_TYPE, lon2: BASE_TYPE
) -> BASE_TYPE:
    """Great-circle distance in meters between points given in degrees.

    Accepts scalars or NumPy arrays (broadcast together), so a whole path
    can be measured in one call.

    Args:
        lat1, lon1: Start point(s) in degrees.
        lat2, lon2: End point(s) in degrees.

    Returns:
        Distance(s) in meters, in double precision.
    """
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    d_phi = phi2 - phi1
    d_lambda = np.radians(np.asarray(lon2) - np.asarray(lon1))

    a = np.sin(d_phi / 2.0) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2.0) ** 2
    return 2.0 * EARTH_MEAN_RADIUS * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))


def _single(value: float) -> float:
    return float(np.float32(value))


def _fields_close(a: float, b: float, epsilon: float) -> bool:
    if isnan(a) or isnan(b):
        return isnan(a) and isnan(b)
    return abs(a - b) <= epsilon


@dataclass(frozen=True)
class GeoCoordinate:
    """A point on the sphere with an optional altitude.

    The default instance has NaN latitude and longitude; it is the
    canonical invalid coordinate and the zero value of an uninitialised
    ``GeoRectangle``.

    ``==`` compares fields exactly. Use ``approx_eq`` for the tolerant
    comparison that geographic code normally wants.

    Attributes:
        latitude (float): Degrees, valid in [-90, 90].
        longitude (float): Degrees, valid in [-180, 180].
        altitude (float | None): Meters, stored in single precision.
    """

    latitude: float = float("nan")
    longitude: float = float("nan")
    altitude: float | None = None

    def __post_init__(self):
        object.__setattr__(self, "latitude", float(self.latitude))
        object.__setattr__(self, "longitude", float(self.longitude))
        if self.altitude is not None:
            object.__setattr__(self, "altitude", _single(self.altitude))

    def __str__(self) -> str:
        if self.altitude is None:
            return f"({self.latitude:.7f}°, {self.longitude:.7f}°)"
        return f"({self.latitude:.7f}°, {self.longitude:.7f}°, {self.altitude:.2f}m)"

    def coordinate_type(self) -> GeoCoordinateType:
        """Classify the coordinate as invalid, 2D or 3D."""
        if valid(self.latitude, CoordinateFieldType.LATITUDE) and valid(
            self.longitude, CoordinateFieldType.LONGITUDE
        ):
            if self.altitude is not None:
                return GeoCoordinateType.COORDINATE_3D
            return GeoCoordinateType.COORDINATE_2D
        return GeoCoordinateType.INVALID

    def valid(self) -> bool:
        """Return True if latitude and longitude are inside their ranges."""
        return self.coordinate_type() is not GeoCoordinateType.INVALID

    def approx_eq(self, other: GeoCoordinate, epsilon: float = COORDINATE_EPSILON) -> bool:
        """Compare two coordinates within ``epsilon``.

        Latitude and longitude must match within ``epsilon`` degrees. The
        altitudes must both be absent, or both present and within
        ``epsilon`` of each other.
        """
        if not (
            _fields_close(self.latitude, other.latitude, epsilon)
            and _fields_close(self.longitude, other.longitude, epsilon)
        ):
            return False
        if self.altitude is None or other.altitude is None:
            return self.altitude is None and other.altitude is None
        return _fields_close(self.altitude, other.altitude, epsilon)

    def with_altitude(self, altitude: float) -> GeoCoordinate:
        """Return a copy of this coordinate at ``altitude`` meters."""
        return replace(self, altitude=altitude)

    def without_altitude(self) -> GeoCoordinate:
        """Return the 2D projection of this coordinate."""
        return replace(self, altitude=None)

    def _require_valid(self, *others: GeoCoordinate) -> None:
        for coordinate in (self, *others):
            if not coordinate.valid():
                raise InvalidCoordinateError(coordinate)

    def azimuth_to(self, other: GeoCoordinate) -> float:
        """Initial great-circle bearing from this coordinate to ``other``.

        Args:
            other: Destination coordinate.

        Returns:
            float: Degrees clockwise from north, in [0, 360).

        Raises:
            InvalidCoordinateError: If either coordinate is invalid.
        """
        self._require_valid(other)

        phi1 = radians(self.latitude)
        phi2 = radians(other.latitude)
        d_lambda = radians(other.longitude - self.longitude)

        y = sin(d_lambda) * cos(phi2)
        x = cos(phi1) * sin(phi2) - sin(phi1) * cos(phi2) * cos(d_lambda)
        azimuth = degrees(atan2(y, x)) + FULL_CIRCLE

        whole = trunc(azimuth)
        result = _single(whole % 360 + (azimuth - whole))
        if result >= FULL_CIRCLE:
            result -= FULL_CIRCLE
        return result

    def distance_to(self, other: GeoCoordinate) -> float:
        """Great-circle distance to ``other`` in meters (haversine).

        Raises:
            InvalidCoordinateError: If either coordinate is invalid.
        """
        self._require_valid(other)
        return _single(haversine(self.latitude, self.longitude, other.latitude, other.longitude))

    def at_distance_and_azimuth(
        self, distance: float | Length, azimuth: float | Angle
    ) -> GeoCoordinate:
        """Project this coordinate along a great circle.

        A negative distance travels in the opposite direction of
        ``azimuth``. The destination longitude is clamped to [-180, 180];
        the altitude is carried over unchanged.

        Args:
            distance: Meters, or any ``Length``.
            azimuth: Degrees clockwise from north, or any ``Angle``.

        Returns:
            GeoCoordinate: The destination.

        Raises:
            InvalidCoordinateError: If this coordinate is invalid.
        """
        self._require_valid()

        ratio = as_meters(distance) / EARTH_MEAN_RADIUS
        bearing = radians(as_degrees(azimuth))
        phi1 = radians(self.latitude)
        lambda1 = radians(self.longitude)

        sin_phi2 = sin(phi1) * cos(ratio) + cos(phi1) * sin(ratio) * cos(bearing)
        phi2 = asin(max(-1.0, min(1.0, sin_phi2)))
        lambda2 = lambda1 + atan2(
            sin(bearing) * sin(ratio) * cos(phi1),
            cos(ratio) - sin(phi1) * sin(phi2),
        )

        return GeoCoordinate(
            degrees(phi2),
            wrap(degrees(lambda2), CoordinateFieldType.LONGITUDE),
            self.altitude,
        )
