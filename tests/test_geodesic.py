"""
Tests for metric distances and bearings.
"""

import math
import unittest

from globecoord.config import EARTH_RADIUS, ReferenceSphere
from globecoord.geo import GeographicPoint, initial_bearing, linear_distance, surface_distance
from globecoord.unit import Meter, Radian

R = float(EARTH_RADIUS)


class TestSurfaceDistance(unittest.TestCase):
    """Test surface_distance."""

    def test_quarter_equator(self):
        """Test a quarter of the equator is R·π/2."""
        dist = surface_distance(GeographicPoint(0, 0), GeographicPoint(math.pi / 2, 0))
        self.assertIsInstance(dist, Meter)
        self.assertAlmostEqual(float(dist), R * math.pi / 2, delta=1e-3)

    def test_agrees_with_central_angle(self):
        """Test the arc length is R times the great-circle angle."""
        a = GeographicPoint(0.3, 0.9)
        b = GeographicPoint(-2.5, -0.1)
        self.assertAlmostEqual(float(surface_distance(a, b)), R * a.distance(b), delta=1e-3)

    def test_custom_sphere(self):
        """Test the arc length scales with the radius."""
        sphere = ReferenceSphere(Meter(1.0), "unit")
        dist = surface_distance(GeographicPoint(0, 0), GeographicPoint(0, math.pi / 4), sphere)
        self.assertAlmostEqual(float(dist), math.pi / 4, places=9)

    def test_same_point(self):
        """Test identical points are 0 m apart."""
        point = GeographicPoint(1.0, 0.5)
        self.assertAlmostEqual(float(surface_distance(point, point)), 0.0, places=6)


class TestLinearDistance(unittest.TestCase):
    """Test linear_distance."""

    def test_altitude_difference(self):
        """Test two points above one another are their altitude apart."""
        low = GeographicPoint(0.7, 0.2, 0.0)
        self.assertAlmostEqual(float(linear_distance(low, low.with_altitude(100.0))), 100.0, delta=1e-6)

    def test_chord(self):
        """Test the chord of a quarter circle is R·√2."""
        dist = linear_distance(GeographicPoint(0, 0), GeographicPoint(math.pi / 2, 0))
        self.assertAlmostEqual(float(dist), R * math.sqrt(2), delta=1e-6)


class TestInitialBearing(unittest.TestCase):
    """Test initial_bearing."""

    def test_east(self):
        """Test heading east along the equator."""
        bearing = initial_bearing(GeographicPoint(0, 0), GeographicPoint(math.pi / 2, 0))
        self.assertIsInstance(bearing, Radian)
        self.assertAlmostEqual(float(bearing), math.pi / 2, places=9)

    def test_north(self):
        """Test heading north along a meridian."""
        self.assertAlmostEqual(float(initial_bearing(GeographicPoint(0, 0), GeographicPoint(0, 0.5))), 0.0, places=9)

    def test_west(self):
        """Test heading west gives a negative bearing."""
        bearing = initial_bearing(GeographicPoint(0, 0), GeographicPoint(-0.5, 0))
        self.assertAlmostEqual(float(bearing), -math.pi / 2, places=9)


if __name__ == '__main__':
    unittest.main()
