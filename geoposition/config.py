"""Numeric constants and type aliases shared by the positioning modules.

Constants:
    EARTH_MEAN_RADIUS: Mean Earth radius in meters used by every spherical
        formula (haversine distance, forward projection).
    COORDINATE_EPSILON: Tolerance, in degrees, of approximate coordinate
        equality. Also applied to altitudes.
    MIN_LATITUDE, MAX_LATITUDE, MIN_LONGITUDE, MAX_LONGITUDE: Valid ranges.
    FULL_CIRCLE: Degrees in a full turn of longitude.

Type Definitions:
    Number: Scalar numeric input.
    BASE_TYPE: Scalar or NumPy array input accepted by the vectorised
        helpers (see ``geoposition.coordinate.haversine``).
"""

from numpy import ndarray

EARTH_MEAN_RADIUS = 6371007.2

COORDINATE_EPSILON = 3e-7

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

FULL_CIRCLE = 360.0

Number = int | float
BASE_TYPE = int | float | ndarray
