"""Scalar rules for latitude/longitude fields and named compass bearings.

``valid`` and ``wrap`` are the only range rules the rest of the package
applies to a single coordinate field. ``wrap`` clamps to the nearest bound
rather than folding the value around the globe; ``normalize_longitude`` is
the modular variant, used where a longitude has to keep its position on the
circle.
"""

from __future__ import annotations

from enum import Enum
from math import fmod, isfinite

from .config import (
    FULL_CIRCLE,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from .unit import Degree


class CoordinateFieldType(Enum):
    """Which field of a coordinate a scalar belongs to."""

    LATITUDE = "latitude"
    LONGITUDE = "longitude"


def _bounds(field_type: CoordinateFieldType) -> tuple[float, float]:
    if field_type is CoordinateFieldType.LATITUDE:
        return MIN_LATITUDE, MAX_LATITUDE
    return MIN_LONGITUDE, MAX_LONGITUDE


def valid(value: float, field_type: CoordinateFieldType) -> bool:
    """Return True if ``value`` lies inside the range of ``field_type``.

    Latitudes are valid in [-90, 90] and longitudes in [-180, 180]. Values
    outside the range are not normalised. NaN is never valid.
    """
    low, high = _bounds(field_type)
    return low <= value <= high


def wrap(value: float, field_type: CoordinateFieldType) -> float:
    """Clamp ``value`` to the range of ``field_type``.

    In-range values, and NaN, are returned unchanged.

    Example:
        >>> wrap(200.0, CoordinateFieldType.LONGITUDE)
        180.0
        >>> wrap(-95.0, CoordinateFieldType.LATITUDE)
        -90.0
    """
    low, high = _bounds(field_type)
    if value > high:
        return high
    if value < low:
        return low
    return value


def normalize_longitude(value: float) -> float:
    """Fold a longitude into [-180, 180] by whole turns.

    Example:
        >>> normalize_longitude(190.0)
        -170.0
    """
    if not isfinite(value) or MIN_LONGITUDE <= value <= MAX_LONGITUDE:
        return value
    value = fmod(value - MIN_LONGITUDE, FULL_CIRCLE)
    if value < 0.0:
        value += FULL_CIRCLE
    return value + MIN_LONGITUDE


class CardinalDirection(Enum):
    """The eight principal compass bearings, valued in degrees from north."""

    NORTH = 0.0
    NORTH_EAST = 45.0
    EAST = 90.0
    SOUTH_EAST = 135.0
    SOUTH = 180.0
    SOUTH_WEST = 225.0
    WEST = 270.0
    NORTH_WEST = 315.0

    def to_degrees(self) -> float:
        """Return the bearing in degrees, clockwise from north."""
        return self.value

    @property
    def angle(self) -> Degree:
        """Return the bearing as a typed ``Degree`` quantity."""
        return Degree(self.value)
