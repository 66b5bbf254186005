"""Axis-aligned latitude/longitude rectangles.

A ``GeoRectangle`` stores its top-left (north-west) and bottom-right
(south-east) corners. Latitudes are ordered, top >= bottom. Longitudes
may wrap: a left edge numerically greater than the right edge means the
rectangle crosses the antimeridian and covers ``[left, 180] + [-180, right]``.

A rectangle is in one of three states:
    - invalid: a corner is out of range or top < bottom (the default value)
    - empty: valid, both corners equal
    - populated: everything else

Queries that need a valid rectangle raise ``InvalidGeoRectangleError``;
``width()`` and ``height()`` report 0 instead, and ``set_width()`` /
``set_height()`` leave an invalid rectangle untouched.

Example:
    >>> box = GeoRectangle.from_center_degrees(GeoCoordinate(5, 5), 10, 10)
    >>> print(box)
    [(10.0000000°, 0.0000000°), (0.0000000°, 10.0000000°)]
    >>> box.contains(GeoCoordinate(2, 8))
    True
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from math import degrees, isfinite

from .config import (
    EARTH_MEAN_RADIUS,
    FULL_CIRCLE,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from .coordinate import GeoCoordinate
from .errors import InvalidCoordinateError, InvalidGeoRectangleError
from .unit import Angle, Length, as_degrees, as_meters
from .utility import CardinalDirection, CoordinateFieldType, normalize_longitude, wrap

logger = logging.getLogger(__name__)

Arc = tuple[float, float]
"""A longitude span as (start, extent), extent in degrees eastwards."""


def _latitude_band(center: float, height: float) -> tuple[float, float]:
    """Return (top, bottom) of a band of ``height`` around ``center``.

    A band poking past a pole is folded back so that it touches the pole
    and keeps the edge mirrored around it.
    """
    top = center + height / 2.0
    bottom = center - height / 2.0

    if top > MAX_LATITUDE:
        bottom = 2.0 * center - MAX_LATITUDE
        top = MAX_LATITUDE
    if top < MIN_LATITUDE:
        bottom = MIN_LATITUDE
        top = MIN_LATITUDE
    if bottom > MAX_LATITUDE:
        top = MAX_LATITUDE
        bottom = MAX_LATITUDE
    if bottom < MIN_LATITUDE:
        top = 2.0 * center - MIN_LATITUDE
        bottom = MIN_LATITUDE
    return top, bottom


def _longitudes_overlap(left1: float, right1: float, left2: float, right2: float) -> bool:
    wraps1 = left1 > right1
    wraps2 = left2 > right2

    if not wraps1 and not wraps2:
        return left1 <= right2 and left2 <= right1
    if wraps1 and wraps2:
        # both contain the antimeridian
        return True
    if wraps1:
        left1, right1, left2, right2 = left2, right2, left1, right1
    # [left1, right1] is plain, the second span covers [left2, 180] + [-180, right2]
    return right1 >= left2 or left1 <= right2


def _covering_arc(first: Arc, second: Arc) -> Arc:
    """Shortest arc covering both arcs. It always starts at one of their starts."""
    start1, extent1 = first
    start2, extent2 = second
    if extent1 >= FULL_CIRCLE or extent2 >= FULL_CIRCLE:
        return MIN_LONGITUDE, FULL_CIRCLE

    from_first = max(extent1, (start2 - start1) % FULL_CIRCLE + extent2)
    from_second = max(extent2, (start1 - start2) % FULL_CIRCLE + extent1)
    if from_first <= from_second:
        return start1, min(from_first, FULL_CIRCLE)
    return start2, min(from_second, FULL_CIRCLE)


def _overlapping_arc(first: Arc, second: Arc) -> Arc | None:
    """Longest arc inside both arcs, or None when they are disjoint.

    Two arcs can overlap in two separate pieces; the wider one is returned.
    """
    start1, extent1 = first
    start2, extent2 = second
    if extent1 >= FULL_CIRCLE:
        return second
    if extent2 >= FULL_CIRCLE:
        return first

    pieces = []
    offset = (start2 - start1) % FULL_CIRCLE
    if offset <= extent1:
        pieces.append((start2, min(extent2, extent1 - offset)))
    offset = (start1 - start2) % FULL_CIRCLE
    if offset <= extent2:
        pieces.append((start1, min(extent1, extent2 - offset)))
    if not pieces:
        return None
    return max(pieces, key=lambda piece: piece[1])


def _arc_edges(arc: Arc) -> tuple[float, float]:
    start, extent = arc
    if extent >= FULL_CIRCLE:
        return MIN_LONGITUDE, MAX_LONGITUDE
    return start, normalize_longitude(start + extent)


class GeoRectangle:
    """Latitude/longitude bounding box with antimeridian support.

    Attributes:
        top_left (GeoCoordinate): North-west corner (maximum latitude).
        bottom_right (GeoCoordinate): South-east corner (minimum latitude).
        top_right (GeoCoordinate): Derived north-east corner.
        bottom_left (GeoCoordinate): Derived south-west corner.
    """

    _tl: GeoCoordinate
    _br: GeoCoordinate

    def __init__(
        self,
        top_left: GeoCoordinate | None = None,
        bottom_right: GeoCoordinate | None = None,
    ):
        """Create a rectangle from its two stored corners.

        Without arguments the rectangle is the invalid default. Altitudes
        of the corners are dropped.
        """
        self._tl = (top_left if top_left is not None else GeoCoordinate()).without_altitude()
        self._br = (bottom_right if bottom_right is not None else GeoCoordinate()).without_altitude()

    # -------------------------------- Construction --------------------------------
    @classmethod
    def from_center_degrees(
        cls, center: GeoCoordinate, width: float | Angle, height: float | Angle
    ) -> GeoRectangle:
        """Create a rectangle of angular size around ``center``.

        Args:
            center: Center of the rectangle.
            width: Longitudinal extent in degrees, or an ``Angle``.
            height: Latitudinal extent in degrees, or an ``Angle``.

        Raises:
            InvalidCoordinateError: If ``center`` is invalid.
        """
        if not center.valid():
            raise InvalidCoordinateError(center)
        rectangle = cls(center, center)
        rectangle.set_width(width)
        rectangle.set_height(height)
        return rectangle

    @classmethod
    def from_center_meters(
        cls, center: GeoCoordinate, width: float | Length, height: float | Length
    ) -> GeoRectangle:
        """Create a rectangle of physical size around ``center``.

        The edges are found by projecting ``center`` half the height north
        and south and half the width west and east. A half height that
        would cross a pole stops at the pole. Negative sizes count as zero.

        Args:
            center: Center of the rectangle.
            width: East-west size in meters, or a ``Length``.
            height: North-south size in meters, or a ``Length``.

        Raises:
            InvalidCoordinateError: If ``center`` is invalid.
        """
        if not center.valid():
            raise InvalidCoordinateError(center)

        half_width = max(0.0, as_meters(width)) / 2.0
        half_height = max(0.0, as_meters(height)) / 2.0
        half_height_degrees = degrees(half_height / EARTH_MEAN_RADIUS)

        if center.latitude + half_height_degrees >= MAX_LATITUDE:
            top = MAX_LATITUDE
        else:
            top = center.at_distance_and_azimuth(half_height, CardinalDirection.NORTH.angle).latitude
        if center.latitude - half_height_degrees <= MIN_LATITUDE:
            bottom = MIN_LATITUDE
        else:
            bottom = center.at_distance_and_azimuth(half_height, CardinalDirection.SOUTH.angle).latitude
        left = center.at_distance_and_azimuth(half_width, CardinalDirection.WEST.angle).longitude
        right = center.at_distance_and_azimuth(half_width, CardinalDirection.EAST.angle).longitude

        return cls(GeoCoordinate(top, left), GeoCoordinate(bottom, right))

    @classmethod
    def from_list(cls, coordinates: Iterable[GeoCoordinate]) -> GeoRectangle:
        """Create the bounding rectangle of ``coordinates``.

        An empty input gives the invalid default rectangle.

        Raises:
            InvalidCoordinateError: If any coordinate is invalid.
        """
        points = list(coordinates)
        if not points:
            return cls()
        for point in points:
            if not point.valid():
                raise InvalidCoordinateError(point)

        rectangle = cls(points[0], points[0])
        for point in points[1:]:
            rectangle.extend_shape(point)
        return rectangle

    # -------------------------------- Display --------------------------------
    def __str__(self) -> str:
        return f"[{self._tl}, {self._br}]"

    def __repr__(self) -> str:
        return f"GeoRectangle(top_left={self._tl!r}, bottom_right={self._br!r})"

    # -------------------------------- State --------------------------------
    def valid(self) -> bool:
        """Return True if both corners are valid and top >= bottom."""
        return (
            self._tl.valid()
            and self._br.valid()
            and self._tl.latitude >= self._br.latitude
        )

    def is_empty(self) -> bool:
        """Return True for invalid rectangles and for a single point."""
        if not self.valid():
            return True
        return self._tl.approx_eq(self._br)

    def approx_eq(self, other: GeoRectangle) -> bool:
        """Compare both stored corners with ``GeoCoordinate.approx_eq``."""
        return self._tl.approx_eq(other._tl) and self._br.approx_eq(other._br)

    def _require_valid(self) -> None:
        if not self.valid():
            raise InvalidGeoRectangleError(self)

    # -------------------------------- Corners --------------------------------
    @property
    def top_left(self) -> GeoCoordinate:
        return self._tl

    @property
    def bottom_right(self) -> GeoCoordinate:
        return self._br

    @property
    def top_right(self) -> GeoCoordinate:
        return GeoCoordinate(self._tl.latitude, self._br.longitude)

    @property
    def bottom_left(self) -> GeoCoordinate:
        return GeoCoordinate(self._br.latitude, self._tl.longitude)

    def center(self) -> GeoCoordinate:
        """Return the center point, on the antimeridian side for crossing boxes.

        Raises:
            InvalidGeoRectangleError: If the rectangle is invalid.
        """
        self._require_valid()
        latitude = (self._tl.latitude + self._br.latitude) / 2.0
        longitude = (self._tl.longitude + self._br.longitude) / 2.0
        if self._tl.longitude > self._br.longitude:
            longitude -= FULL_CIRCLE / 2.0
        return GeoCoordinate(latitude, normalize_longitude(longitude))

    # -------------------------------- Size --------------------------------
    def width(self) -> float:
        """Longitudinal extent in degrees, in [0, 360]; 0 when invalid."""
        if not self.valid():
            return 0.0
        result = self._br.longitude - self._tl.longitude
        if result < 0.0:
            result += FULL_CIRCLE
        if result > FULL_CIRCLE:
            result -= FULL_CIRCLE
        return result

    def height(self) -> float:
        """Latitudinal extent in degrees; 0 when invalid."""
        if not self.valid():
            return 0.0
        return self._tl.latitude - self._br.latitude

    def width_meters(self) -> float:
        """Great-circle length of the top edge in meters.

        Raises:
            InvalidGeoRectangleError: If the rectangle is invalid.
        """
        self._require_valid()
        return self._tl.distance_to(self.top_right)

    def height_meters(self) -> float:
        """Great-circle length of the left edge in meters.

        Raises:
            InvalidGeoRectangleError: If the rectangle is invalid.
        """
        self._require_valid()
        return self._tl.distance_to(self.bottom_left)

    def _arc(self) -> Arc:
        return self._tl.longitude, self.width()

    # -------------------------------- Predicates --------------------------------
    def contains(self, coordinate: GeoCoordinate) -> bool:
        """Return True if ``coordinate`` lies inside or on the border.

        Points on a pole are inside whenever the matching edge is on that
        pole, whatever their longitude. Longitudes -180 and 180 name the
        same meridian.

        Raises:
            InvalidGeoRectangleError: If the rectangle is invalid.
            InvalidCoordinateError: If ``coordinate`` is invalid.
        """
        self._require_valid()
        if not coordinate.valid():
            raise InvalidCoordinateError(coordinate)

        left = self._tl.longitude
        right = self._br.longitude
        top = self._tl.latitude
        bottom = self._br.latitude
        lat = coordinate.latitude
        lon = coordinate.longitude

        if lat > top or lat < bottom:
            return False
        if lat == MAX_LATITUDE and top == MAX_LATITUDE:
            return True
        if lat == MIN_LATITUDE and bottom == MIN_LATITUDE:
            return True

        if left <= right:
            if left <= lon <= right:
                return True
            return (lon == MIN_LONGITUDE and right == MAX_LONGITUDE) or (
                lon == MAX_LONGITUDE and left == MIN_LONGITUDE
            )
        return not right < lon < left

    def contains_rect(self, other: GeoRectangle) -> bool:
        """Return True if every corner of ``other`` is inside this rectangle.

        ``other`` must also be no wider than this rectangle, which rules out
        a box whose corners fit but which runs the other way round the globe.
        This is stricter than checking the four corners alone.

        Raises:
            InvalidGeoRectangleError: If either rectangle is invalid.
        """
        self._require_valid()
        other._require_valid()
        corners = (other.top_left, other.top_right, other.bottom_left, other.bottom_right)
        return all(self.contains(corner) for corner in corners) and other.width() <= self.width()

    def intersects(self, other: GeoRectangle) -> bool:
        """Return True if the two rectangles share at least one point.

        Raises:
            InvalidGeoRectangleError: If either rectangle is invalid.
        """
        self._require_valid()
        other._require_valid()

        top1, bottom1 = self._tl.latitude, self._br.latitude
        top2, bottom2 = other._tl.latitude, other._br.latitude

        if top1 < bottom2 or bottom1 > top2:
            return False
        if top1 == MAX_LATITUDE and top2 == MAX_LATITUDE:
            return True
        if bottom1 == MIN_LATITUDE and bottom2 == MIN_LATITUDE:
            return True

        return _longitudes_overlap(
            self._tl.longitude, self._br.longitude, other._tl.longitude, other._br.longitude
        )

    # -------------------------------- Set algebra --------------------------------
    def union(self, other: GeoRectangle) -> GeoRectangle:
        """Return the smallest rectangle containing both rectangles.

        Raises:
            InvalidGeoRectangleError: If either rectangle is invalid.
        """
        self._require_valid()
        other._require_valid()

        top = max(self._tl.latitude, other._tl.latitude)
        bottom = min(self._br.latitude, other._br.latitude)
        left, right = _arc_edges(_covering_arc(self._arc(), other._arc()))
        return GeoRectangle(GeoCoordinate(top, left), GeoCoordinate(bottom, right))

    def intersection(self, other: GeoRectangle) -> GeoRectangle:
        """Return the largest rectangle contained in both rectangles.

        Disjoint rectangles give the invalid default rectangle. When the
        overlap is split in two by the antimeridian, the wider part is kept.
        Rectangles that only share a pole give the pole as an empty
        rectangle.

        Raises:
            InvalidGeoRectangleError: If either rectangle is invalid.
        """
        if not self.intersects(other):
            return GeoRectangle()

        top = min(self._tl.latitude, other._tl.latitude)
        bottom = max(self._br.latitude, other._br.latitude)
        arc = _overlapping_arc(self._arc(), other._arc())
        if arc is None:
            pole = GeoCoordinate(top, self._tl.longitude)
            return GeoRectangle(pole, pole)

        left, right = _arc_edges(arc)
        return GeoRectangle(GeoCoordinate(top, left), GeoCoordinate(bottom, right))

    def translated(self, latitude: float | Angle, longitude: float | Angle) -> GeoRectangle:
        """Return a copy moved by the given deltas (see ``translate``)."""
        result = copy.copy(self)
        result.translate(latitude, longitude)
        return result

    # -------------------------------- Mutators --------------------------------
    def translate(self, latitude: float | Angle, longitude: float | Angle) -> None:
        """Move the rectangle by ``latitude`` and ``longitude`` degrees.

        The latitude shift stops when an edge reaches a pole, so the height
        is kept. Longitudes move round the globe; a full-width rectangle
        keeps spanning [-180, 180]. Non-finite deltas are ignored.

        Raises:
            InvalidGeoRectangleError: If the rectangle is invalid.
        """
        self._require_valid()
        d_lat = as_degrees(latitude)
        d_lon = as_degrees(longitude)
        if not (isfinite(d_lat) and isfinite(d_lon)):
            logger.debug("Ignoring translation by (%s, %s) for %s", d_lat, d_lon, self)
            return

        top, bottom = self._tl.latitude, self._br.latitude
        if d_lat >= 0.0:
            d_lat = min(d_lat, MAX_LATITUDE - top)
        else:
            d_lat = max(d_lat, MIN_LATITUDE - bottom)

        left, right = self._tl.longitude, self._br.longitude
        if self.width() < FULL_CIRCLE:
            left = normalize_longitude(left + d_lon)
            right = normalize_longitude(right + d_lon)

        self._tl = GeoCoordinate(wrap(top + d_lat, CoordinateFieldType.LATITUDE), left)
        self._br = GeoCoordinate(wrap(bottom + d_lat, CoordinateFieldType.LATITUDE), right)

    def extend(self, other: GeoCoordinate | GeoRectangle) -> None:
        """Grow the rectangle to cover a coordinate or another rectangle.

        Raises:
            InvalidGeoRectangleError: If a rectangle involved is invalid.
            InvalidCoordinateError: If the coordinate is invalid.
        """
        if isinstance(other, GeoRectangle):
            merged = self.union(other)
            self._tl, self._br = merged._tl, merged._br
            return
        self.extend_shape(other)

    def extend_shape(self, coordinate: GeoCoordinate) -> None:
        """Grow the rectangle just enough, edge by edge, to cover ``coordinate``.

        Latitude bounds take the min/max. On longitude the edge needing the
        smaller extension moves, accounting for the antimeridian. Nothing
        changes when the coordinate is already inside.

        Raises:
            InvalidGeoRectangleError: If the rectangle is invalid.
            InvalidCoordinateError: If ``coordinate`` is invalid.
        """
        if self.contains(coordinate):
            logger.debug("%s already inside %s, not extending", coordinate, self)
            return

        left = self._tl.longitude
        right = self._br.longitude
        top = max(self._tl.latitude, coordinate.latitude)
        bottom = min(self._br.latitude, coordinate.latitude)
        lon = coordinate.longitude

        if left > right:
            if right < lon < left:
                if abs(left - lon) < abs(right - lon):
                    left = lon
                else:
                    right = lon
        elif lon < left:
            if FULL_CIRCLE - (right - lon) < left - lon:
                right = lon
            else:
                left = lon
        elif lon > right:
            if FULL_CIRCLE - (lon - left) < lon - right:
                left = lon
            else:
                right = lon

        self._tl = GeoCoordinate(top, left)
        self._br = GeoCoordinate(bottom, right)

    def set_top_left(self, coordinate: GeoCoordinate) -> None:
        """Replace the top-left corner.

        Raises:
            InvalidCoordinateError: If ``coordinate`` is invalid.
        """
        if not coordinate.valid():
            raise InvalidCoordinateError(coordinate)
        self._tl = coordinate.without_altitude()

    def set_bottom_right(self, coordinate: GeoCoordinate) -> None:
        """Replace the bottom-right corner.

        Raises:
            InvalidCoordinateError: If ``coordinate`` is invalid.
        """
        if not coordinate.valid():
            raise InvalidCoordinateError(coordinate)
        self._br = coordinate.without_altitude()

    def set_top_right(self, coordinate: GeoCoordinate) -> None:
        """Move the top edge and the right edge through ``coordinate``.

        Raises:
            InvalidCoordinateError: If ``coordinate`` is invalid.
        """
        if not coordinate.valid():
            raise InvalidCoordinateError(coordinate)
        self._tl = GeoCoordinate(coordinate.latitude, self._tl.longitude)
        self._br = GeoCoordinate(self._br.latitude, coordinate.longitude)

    def set_bottom_left(self, coordinate: GeoCoordinate) -> None:
        """Move the bottom edge and the left edge through ``coordinate``.

        Raises:
            InvalidCoordinateError: If ``coordinate`` is invalid.
        """
        if not coordinate.valid():
            raise InvalidCoordinateError(coordinate)
        self._tl = GeoCoordinate(self._tl.latitude, coordinate.longitude)
        self._br = GeoCoordinate(coordinate.latitude, self._br.longitude)

    def set_width(self, width: float | Angle) -> None:
        """Resize the longitudinal extent around the current center.

        Ignored when the rectangle is invalid or ``width`` is negative. A
        width of 360 or more spans the whole globe. Otherwise each edge is
        clamped to [-180, 180].
        """
        width = as_degrees(width)
        if not self.valid() or not width >= 0.0:
            logger.debug("Ignoring width %s for %s", width, self)
            return

        if width >= FULL_CIRCLE:
            self._tl = GeoCoordinate(self._tl.latitude, MIN_LONGITUDE)
            self._br = GeoCoordinate(self._br.latitude, MAX_LONGITUDE)
            return

        center = self.center().longitude
        left = wrap(center - width / 2.0, CoordinateFieldType.LONGITUDE)
        right = wrap(center + width / 2.0, CoordinateFieldType.LONGITUDE)
        self._tl = GeoCoordinate(self._tl.latitude, left)
        self._br = GeoCoordinate(self._br.latitude, right)

    def set_height(self, height: float | Angle) -> None:
        """Resize the latitudinal extent around the current center.

        Ignored when the rectangle is invalid or ``height`` is outside
        [0, 180]. A band that would pass a pole is folded back to touch it.
        """
        height = as_degrees(height)
        if not self.valid() or not 0.0 <= height <= MAX_LATITUDE - MIN_LATITUDE:
            logger.debug("Ignoring height %s for %s", height, self)
            return

        top, bottom = _latitude_band(self.center().latitude, height)
        self._tl = GeoCoordinate(top, self._tl.longitude)
        self._br = GeoCoordinate(bottom, self._br.longitude)

    def set_center(self, center: GeoCoordinate) -> None:
        """Move the rectangle so that ``center`` is its center.

        Width and height are kept, except where the latitude band has to
        fold back at a pole. Longitudes move round the globe, so a box
        centred near ±180° crosses it. A full-width rectangle keeps
        spanning [-180, 180].

        Raises:
            InvalidCoordinateError: If ``center`` is invalid.
            InvalidGeoRectangleError: If the rectangle is invalid.
        """
        if not center.valid():
            raise InvalidCoordinateError(center)
        self._require_valid()

        width = self.width()
        top, bottom = _latitude_band(center.latitude, self.height())
        if width >= FULL_CIRCLE:
            left, right = MIN_LONGITUDE, MAX_LONGITUDE
        else:
            left = normalize_longitude(center.longitude - width / 2.0)
            right = normalize_longitude(center.longitude + width / 2.0)

        self._tl = GeoCoordinate(top, left)
        self._br = GeoCoordinate(bottom, right)
