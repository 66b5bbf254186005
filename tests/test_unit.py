"""
Tests for typed quantities used by the geodesic API.
"""

import math
import unittest

from geoposition.unit import Degree, Kilometer, Meter, Radian, as_degrees, as_meters


class TestUnitFloat(unittest.TestCase):
    """Test SI storage and family checks."""

    def test_si_storage(self):
        """Values are stored in SI units."""
        self.assertEqual(float(Kilometer(2.5)), 2500.0)
        self.assertAlmostEqual(float(Degree(180)), math.pi)

    def test_conversion(self):
        """to() reads the value back in another unit of the family."""
        self.assertAlmostEqual(Kilometer(1.5).to(Meter), 1500.0)
        self.assertAlmostEqual(Radian(math.pi / 2).to(Degree), 90.0)

    def test_same_family_arithmetic(self):
        """Lengths add to lengths."""
        total = Meter(500) + Kilometer(1)
        self.assertAlmostEqual(float(total), 1500.0)
        self.assertAlmostEqual(float(Meter(10) * 3), 30.0)

    def test_cross_family_is_rejected(self):
        """Angles and lengths cannot be combined."""
        with self.assertRaises(TypeError):
            Meter(1) + Degree(1)
        with self.assertRaises(TypeError):
            Meter(1).to(Degree)


class TestConversionHelpers(unittest.TestCase):
    """Test number-or-unit input helpers."""

    def test_plain_numbers(self):
        """Plain numbers are taken as degrees and meters."""
        self.assertEqual(as_degrees(45), 45.0)
        self.assertEqual(as_meters(12.5), 12.5)

    def test_typed_values(self):
        """Typed values are converted."""
        self.assertAlmostEqual(as_degrees(Radian(math.pi)), 180.0)
        self.assertAlmostEqual(as_meters(Kilometer(3)), 3000.0)

    def test_wrong_family(self):
        """A length is not an angle."""
        with self.assertRaises(TypeError):
            as_degrees(Meter(5))
        with self.assertRaises(TypeError):
            as_meters(Degree(5))


if __name__ == '__main__':
    unittest.main()
