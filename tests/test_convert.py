"""
Tests for Cartesian <-> geographic conversion.
"""

import math
import unittest

from globecoord.config import DEFAULT_SPHERE, EARTH_RADIUS, ReferenceSphere
from globecoord.geo import (
    CartesianPoint,
    GeographicPoint,
    cartesian_to_geographic,
    geographic_to_cartesian,
)
from globecoord.unit import Meter

UNIT_SPHERE = ReferenceSphere(Meter(1.0), "unit")
R = float(EARTH_RADIUS)


class TestGeographicToCartesian(unittest.TestCase):
    """Test geographic_to_cartesian."""

    def test_origin_of_map(self):
        """Test (0, 0, 0) lands on the x axis at distance R."""
        cart = geographic_to_cartesian(GeographicPoint())
        self.assertEqual(cart, CartesianPoint(R, 0.0, 0.0))

    def test_north_pole(self):
        """Test the north pole lands on the z axis."""
        cart = geographic_to_cartesian(GeographicPoint(0, math.pi / 2))
        self.assertAlmostEqual(cart.x, 0.0, delta=1e-6)
        self.assertAlmostEqual(cart.y, 0.0, delta=1e-6)
        self.assertEqual(cart.z, R)

    def test_altitude_extends_radius(self):
        """Test the radial distance is R + altitude."""
        cart = geographic_to_cartesian(GeographicPoint(0.4, -0.7, 1500.0))
        self.assertAlmostEqual(cart.norm(), R + 1500.0, delta=1e-6)

    def test_unit_sphere(self):
        """Test conversion on a custom sphere."""
        cart = geographic_to_cartesian(GeographicPoint(math.pi / 2, 0), UNIT_SPHERE)
        self.assertAlmostEqual(cart.x, 0.0, places=12)
        self.assertAlmostEqual(cart.y, 1.0, places=12)
        self.assertAlmostEqual(cart.z, 0.0, places=12)

    def test_classmethod_delegates(self):
        """Test CartesianPoint.from_geographic uses the same conversion."""
        geo = GeographicPoint(1.0, 0.3, 20.0)
        self.assertEqual(CartesianPoint.from_geographic(geo), geographic_to_cartesian(geo, DEFAULT_SPHERE))


class TestCartesianToGeographic(unittest.TestCase):
    """Test cartesian_to_geographic."""

    def test_x_axis(self):
        """Test a point on the x axis at distance R is the zero point."""
        self.assertEqual(cartesian_to_geographic(CartesianPoint(R, 0, 0)), GeographicPoint())

    def test_origin(self):
        """Test the origin has no direction and altitude -R."""
        geo = cartesian_to_geographic(CartesianPoint.origin())
        self.assertEqual((geo.longitude, geo.latitude, geo.altitude), (0.0, 0.0, -R))

    def test_negative_zero_origin(self):
        """Test signed zeros are still treated as the origin."""
        geo = cartesian_to_geographic(CartesianPoint(-0.0, -0.0, -0.0), UNIT_SPHERE)
        self.assertEqual((geo.longitude, geo.latitude, geo.altitude), (0.0, 0.0, -1.0))

    def test_antimeridian_canonicalized(self):
        """Test a point on the negative x axis gets longitude -π."""
        self.assertEqual(cartesian_to_geographic(CartesianPoint(-1, 0, 0), UNIT_SPHERE).longitude, -math.pi)
        self.assertEqual(cartesian_to_geographic(CartesianPoint(-1, -0.0, 0), UNIT_SPHERE).longitude, -math.pi)

    def test_south_pole(self):
        """Test the negative z axis is latitude -π/2."""
        geo = cartesian_to_geographic(CartesianPoint(0, 0, -2), UNIT_SPHERE)
        self.assertEqual(geo.latitude, -math.pi / 2)
        self.assertEqual(geo.altitude, 1.0)

    def test_huge_point_altitude(self):
        """Test a large but finite point keeps a finite altitude."""
        geo = cartesian_to_geographic(CartesianPoint(1e200, 1e200, 0), UNIT_SPHERE)
        self.assertAlmostEqual(geo.altitude / (math.sqrt(2) * 1e200), 1.0, places=12)
        self.assertAlmostEqual(geo.longitude, math.pi / 4, places=12)

    def test_classmethod_delegates(self):
        """Test GeographicPoint.from_cartesian uses the same conversion."""
        cart = CartesianPoint(1e6, -2e6, 3e6)
        self.assertEqual(GeographicPoint.from_cartesian(cart), cartesian_to_geographic(cart))


class TestRoundTrip(unittest.TestCase):
    """Test conversions undo each other."""

    def test_geographic_round_trip(self):
        """Test geographic -> Cartesian -> geographic for points outside the sphere interior."""
        for lon in (-3.0, -1.5, 0.0, 0.8, 2.9):
            for lat in (-1.4, -0.6, 0.0, 0.5, 1.3):
                for alt in (-1000.0, 0.0, 8848.0, 4e7):
                    original = GeographicPoint(lon, lat, alt)
                    back = GeographicPoint.from_cartesian(CartesianPoint.from_geographic(original))
                    self.assertAlmostEqual(back.longitude, lon, places=9)
                    self.assertAlmostEqual(back.latitude, lat, places=9)
                    self.assertAlmostEqual(back.altitude, alt, delta=1e-6 * max(1.0, abs(alt) / R * 10))

    def test_cartesian_round_trip(self):
        """Test Cartesian -> geographic -> Cartesian."""
        for cart in (
            CartesianPoint(1, 2, 3),
            CartesianPoint(-4e6, 5e6, -1e6),
            CartesianPoint(0, 0, 7e6),
            CartesianPoint(-6e6, 0, 0),
            CartesianPoint(1e-3, -1e-3, 0),
        ):
            back = CartesianPoint.from_geographic(GeographicPoint.from_cartesian(cart))
            self.assertAlmostEqual(back.x, cart.x, delta=1e-6)
            self.assertAlmostEqual(back.y, cart.y, delta=1e-6)
            self.assertAlmostEqual(back.z, cart.z, delta=1e-6)

    def test_round_trip_on_custom_sphere(self):
        """Test the sphere radius cancels out in a round trip."""
        sphere = ReferenceSphere(Meter(10.0), "small")
        original = GeographicPoint(2.0, -0.8, 3.5)
        back = GeographicPoint.from_cartesian(CartesianPoint.from_geographic(original, sphere), sphere)
        self.assertAlmostEqual(back.longitude, 2.0, places=12)
        self.assertAlmostEqual(back.latitude, -0.8, places=12)
        self.assertAlmostEqual(back.altitude, 3.5, places=12)


if __name__ == '__main__':
    unittest.main()
