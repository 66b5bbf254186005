"""Angular units for bearings and angular extents.

Angles are stored in radians. Bearings handed to the geodesic functions
may be plain numbers (read as degrees) or any ``Angle``.

Example:
    >>> heading = Degree(90)
    >>> heading.to(Degree)
    90.0
    >>> round(float(heading), 4)
    1.5708
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: radian (SI)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: degree, 1/360 of a turn.

    Used for compass bearings (0° north, clockwise) and for rectangle
    widths and heights given in degrees.
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
