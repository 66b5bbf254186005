"""Typed physical quantities used by the geodesic API.

Modules:
    - unit_base: ``Unit`` with automatic family (ROOT) resolution
    - unit_float: ``UnitFloat``, float quantities stored in SI units
    - unit_angle: ``Radian``, ``Degree``
    - unit_distance: ``Meter``, ``Kilometer``
    - conversion: ``as_degrees`` / ``as_meters`` for mixed number/unit input

Example:
    >>> from geoposition import GeoCoordinate
    >>> from geoposition.unit import Degree, Kilometer
    >>> helsinki = GeoCoordinate(60.1699, 24.9384)
    >>> east = helsinki.at_distance_and_azimuth(Kilometer(10), Degree(90))
"""

from .conversion import as_degrees, as_meters
from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter
from .unit_float import UnitFloat

__all__ = [
    "Unit",
    "UnitFloat",
    "Radian",
    "Degree",
    "Angle",
    "Meter",
    "Kilometer",
    "Length",
    "as_degrees",
    "as_meters",
]
