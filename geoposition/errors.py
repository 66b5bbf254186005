"""Exceptions raised by the positioning modules.

All errors derive from ``PositioningError`` and also from the closest
builtin (``ValueError`` or ``IndexError``) so callers can catch either.
Each error keeps the offending value for diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .coordinate import GeoCoordinate
    from .georectangle import GeoRectangle


class PositioningError(Exception):
    """Base class for positioning failures."""


class InvalidCoordinateError(PositioningError, ValueError):
    """An operation received or was invoked on an out-of-range coordinate."""

    def __init__(self, coordinate: GeoCoordinate):
        self.coordinate = coordinate
        msg = f"Operation on invalid coordinate: {coordinate}"
        super().__init__(msg)


class InvalidGeoRectangleError(PositioningError, ValueError):
    """An operation needs a valid rectangle and got an invalid one."""

    def __init__(self, rectangle: GeoRectangle):
        self.rectangle = rectangle
        msg = f"Operation on invalid georectangle: {rectangle}"
        super().__init__(msg)


class IndexOutOfBoundsError(PositioningError, IndexError):
    """A path index is outside the current path."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        msg = f"Index {index} is out of bounds for path of length {length}"
        super().__init__(msg)
