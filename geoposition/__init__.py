"""Geodesic coordinate mathematics on a spherical Earth.

This package models points, bounding rectangles and polylines over
latitude/longitude space, with great-circle distance and bearing, forward
projection, and rectangle algebra that copes with the antimeridian and the
poles.

Components:
    GeoCoordinate: Immutable point with optional altitude and geodesic operations
    GeoRectangle: Axis-aligned lat/lon box (containment, overlap, union, resizing)
    GeoPath: Ordered list of coordinates with length and bounding box
    CardinalDirection: Named compass bearings
    CoordinateFieldType, valid, wrap: Scalar latitude/longitude range rules

Errors:
    PositioningError: Base class
    InvalidCoordinateError: Out-of-range coordinate, carries the coordinate
    InvalidGeoRectangleError: Invalid rectangle, carries the rectangle
    IndexOutOfBoundsError: Path index outside the path

Logging:
    Modules log through ``logging.getLogger(__name__)``. The package logger
    only has a ``NullHandler``; configure logging in the application.

Typical Usage:
    >>> from geoposition import GeoCoordinate, GeoRectangle
    >>> from geoposition.unit import Kilometer
    >>>
    >>> depot = GeoCoordinate(60.0, 30.0)
    >>> round(depot.distance_to(GeoCoordinate(59.0, 30.0)))
    111195
    >>> area = GeoRectangle.from_center_meters(depot, Kilometer(20), Kilometer(10))
    >>> area.contains(depot)
    True
"""

import logging

from .coordinate import GeoCoordinate, GeoCoordinateType, haversine
from .errors import (
    IndexOutOfBoundsError,
    InvalidCoordinateError,
    InvalidGeoRectangleError,
    PositioningError,
)
from .georectangle import GeoRectangle
from .path import GeoPath, GeoPathLengthType
from .utility import CardinalDirection, CoordinateFieldType, normalize_longitude, valid, wrap

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GeoCoordinate",
    "GeoCoordinateType",
    "GeoRectangle",
    "GeoPath",
    "GeoPathLengthType",
    "CardinalDirection",
    "CoordinateFieldType",
    "valid",
    "wrap",
    "normalize_longitude",
    "haversine",
    "PositioningError",
    "InvalidCoordinateError",
    "InvalidGeoRectangleError",
    "IndexOutOfBoundsError",
]
