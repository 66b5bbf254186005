"""Length units for geodesic distances.

Lengths are stored in meters, which is also the unit every distance
returned by ``geoposition`` is expressed in.

Example:
    >>> hop = Kilometer(12.5)
    >>> float(hop)
    12500.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: meter (SI)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length unit: kilometer, 1000 meters."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


Length = Meter | Kilometer
