"""Helpers that read either a typed quantity or a plain number.

The geodesic API takes distances in meters and angles in degrees. Callers
may pass plain numbers in those units, or typed quantities of any unit in
the matching family.
"""

from __future__ import annotations

from .unit_angle import Degree, Radian
from .unit_base import Number, Unit
from .unit_distance import Meter


def as_degrees(value: Number | Radian) -> float:
    """Return ``value`` in degrees.

    Plain numbers are assumed to already be degrees.

    Raises:
        TypeError: If ``value`` is a quantity that is not an angle.
    """
    if isinstance(value, Unit):
        return value.to(Degree)
    return float(value)


def as_meters(value: Number | Meter) -> float:
    """Return ``value`` in meters.

    Plain numbers are assumed to already be meters.

    Raises:
        TypeError: If ``value`` is a quantity that is not a length.
    """
    if isinstance(value, Unit):
        return value.to(Meter)
    return float(value)
