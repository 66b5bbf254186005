"""Ordered polylines of geographic coordinates.

A ``GeoPath`` only ever holds valid coordinates. Index arguments are
checked against the current size and rejected with
``IndexOutOfBoundsError`` instead of being clamped or counted from the end.

The bounding rectangle is derived data: it is rebuilt on demand after any
mutation rather than updated incrementally.

Example:
    >>> route = GeoPath([GeoCoordinate(60.0, 30.0), GeoCoordinate(60.0, 31.0)])
    >>> route.add(GeoCoordinate(59.0, 31.0))
    >>> round(route.length())
    166792
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum, auto
from math import isfinite

import numpy as np

from .config import MAX_LATITUDE, MIN_LATITUDE
from .coordinate import GeoCoordinate, haversine
from .errors import IndexOutOfBoundsError, InvalidCoordinateError
from .georectangle import GeoRectangle
from .unit import Angle, as_degrees
from .utility import CoordinateFieldType, normalize_longitude, wrap

logger = logging.getLogger(__name__)


class GeoPathLengthType(Enum):
    """Whether ``GeoPath.length`` returns to the starting point."""

    NO_LOOP = auto()
    CLOSED_LOOP = auto()


class GeoPath:
    """Mutable sequence of valid coordinates.

    Attributes:
        path (tuple[GeoCoordinate, ...]): Snapshot of the coordinates.
    """

    def __init__(self, coordinates: Iterable[GeoCoordinate] = ()):
        self._path: list[GeoCoordinate] = []
        self._bounds: GeoRectangle | None = None
        self.set_path(coordinates)

    def __len__(self) -> int:
        return len(self._path)

    def __iter__(self) -> Iterator[GeoCoordinate]:
        return iter(tuple(self._path))

    def __repr__(self) -> str:
        return f"GeoPath({self._path!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(point) for point in self._path) + "]"

    @staticmethod
    def _require_valid(coordinate: GeoCoordinate) -> None:
        if not coordinate.valid():
            raise InvalidCoordinateError(coordinate)

    def _check_index(self, index: int, upper: int) -> None:
        if not 0 <= index < upper:
            raise IndexOutOfBoundsError(index, len(self._path))

    def _mark_dirty(self) -> None:
        self._bounds = None

    # -------------------------------- Access --------------------------------
    @property
    def path(self) -> tuple[GeoCoordinate, ...]:
        return tuple(self._path)

    def size(self) -> int:
        return len(self._path)

    def at(self, index: int) -> GeoCoordinate:
        """Return the coordinate at ``index``.

        Raises:
            IndexOutOfBoundsError: If ``index`` is not in [0, size).
        """
        self._check_index(index, len(self._path))
        return self._path[index]

    def contains(self, coordinate: GeoCoordinate) -> bool:
        """Return True if an approximately equal coordinate is on the path."""
        return any(point.approx_eq(coordinate) for point in self._path)

    # -------------------------------- Mutation --------------------------------
    def set_path(self, coordinates: Iterable[GeoCoordinate]) -> None:
        """Replace every coordinate of the path.

        Raises:
            InvalidCoordinateError: If any coordinate is invalid; the path is
                left unchanged.
        """
        points = list(coordinates)
        for point in points:
            self._require_valid(point)
        self._path = points
        self._mark_dirty()

    def add(self, coordinate: GeoCoordinate) -> None:
        """Append ``coordinate``.

        Raises:
            InvalidCoordinateError: If ``coordinate`` is invalid.
        """
        self._require_valid(coordinate)
        self._path.append(coordinate)
        self._mark_dirty()

    def insert(self, index: int, coordinate: GeoCoordinate) -> None:
        """Insert ``coordinate`` before ``index``; ``index == size`` appends.

        Raises:
            InvalidCoordinateError: If ``coordinate`` is invalid.
            IndexOutOfBoundsError: If ``index`` is not in [0, size].
        """
        self._require_valid(coordinate)
        self._check_index(index, len(self._path) + 1)
        self._path.insert(index, coordinate)
        self._mark_dirty()

    def remove(self, index: int) -> None:
        """Remove the coordinate at ``index``.

        Raises:
            IndexOutOfBoundsError: If ``index`` is not in [0, size).
        """
        self._check_index(index, len(self._path))
        del self._path[index]
        self._mark_dirty()

    def replace(self, index: int, coordinate: GeoCoordinate) -> None:
        """Replace the coordinate at ``index``.

        Raises:
            InvalidCoordinateError: If ``coordinate`` is invalid.
            IndexOutOfBoundsError: If ``index`` is not in [0, size).
        """
        self._require_valid(coordinate)
        self._check_index(index, len(self._path))
        self._path[index] = coordinate
        self._mark_dirty()

    def clear(self) -> None:
        self._path.clear()
        self._mark_dirty()

    # -------------------------------- Geometry --------------------------------
    def length(
        self,
        start: int = 0,
        end: int | None = None,
        length_type: GeoPathLengthType = GeoPathLengthType.NO_LOOP,
    ) -> float:
        """Length in meters of the path between two indices.

        Segments are summed from ``start`` up to ``end`` (default: the last
        coordinate; larger values are capped to it). A closed loop also
        counts the way from the last coordinate of the path back to
        ``start``.

        Returns:
            float: Meters; 0 for an empty path.

        Raises:
            IndexOutOfBoundsError: If ``start`` is not in [0, size).
        """
        if not self._path:
            return 0.0
        self._check_index(start, len(self._path))

        last = len(self._path) - 1
        end = last if end is None else max(0, min(end, last))

        total = 0.0
        if end > start:
            points = np.array(
                [(point.latitude, point.longitude) for point in self._path[start : end + 1]]
            )
            lat, lon = points[:, 0], points[:, 1]
            total = float(np.sum(haversine(lat[:-1], lon[:-1], lat[1:], lon[1:])))

        if length_type is GeoPathLengthType.CLOSED_LOOP:
            total += self._path[-1].distance_to(self._path[start])
        return float(np.float32(total))

    def bounding_georectangle(self) -> GeoRectangle:
        """Return the smallest rectangle found to enclose the path.

        An empty path gives the invalid default rectangle. The result is a
        copy; mutating it does not affect the path.
        """
        if self._bounds is None:
            logger.debug("Rebuilding bounding rectangle of %d coordinates", len(self._path))
            self._bounds = GeoRectangle.from_list(self._path)
        return GeoRectangle(self._bounds.top_left, self._bounds.bottom_right)

    def translate(self, latitude: float | Angle, longitude: float | Angle) -> None:
        """Move every coordinate by ``latitude`` and ``longitude`` degrees.

        The latitude shift is limited so that no coordinate passes a pole.
        Longitudes move round the globe. Altitudes are kept. Non-finite
        deltas are ignored.
        """
        if not self._path:
            return
        d_lat = as_degrees(latitude)
        d_lon = as_degrees(longitude)
        if not (isfinite(d_lat) and isfinite(d_lon)):
            logger.debug("Ignoring translation by (%s, %s)", d_lat, d_lon)
            return

        bounds = self.bounding_georectangle()
        if d_lat >= 0.0:
            d_lat = min(d_lat, MAX_LATITUDE - bounds.top_left.latitude)
        else:
            d_lat = max(d_lat, MIN_LATITUDE - bounds.bottom_right.latitude)

        self._path = [
            GeoCoordinate(
                wrap(point.latitude + d_lat, CoordinateFieldType.LATITUDE),
                normalize_longitude(point.longitude + d_lon),
                point.altitude,
            )
            for point in self._path
        ]
        self._mark_dirty()

    def translated(self, latitude: float | Angle, longitude: float | Angle) -> GeoPath:
        """Return a copy moved by the given deltas (see ``translate``)."""
        result = GeoPath(self._path)
        result.translate(latitude, longitude)
        return result
