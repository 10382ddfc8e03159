"""
Tests for reference sphere configuration.
"""

import os
import unittest
from unittest import mock

from globecoord.config import (
    DEFAULT_SPHERE,
    MOON_RADIUS,
    RADIUS_ENV_VAR,
    ReferenceSphere,
    resolve_sphere,
)
from globecoord.geo import CartesianPoint, GeographicPoint
from globecoord.unit import Kilometer, Meter


class TestReferenceSphere(unittest.TestCase):
    """Test ReferenceSphere."""

    def test_default_radius(self):
        """Test the default sphere uses the Earth radius."""
        self.assertEqual(DEFAULT_SPHERE.radius, 6_378_000)
        self.assertEqual(DEFAULT_SPHERE.name, "earth")

    def test_plain_radius_becomes_meter(self):
        """Test a bare float radius is wrapped in Meter."""
        sphere = ReferenceSphere(2.5, "tiny")
        self.assertIsInstance(sphere.radius, Meter)
        self.assertEqual(float(sphere.radius), 2.5)

    def test_kilometer_radius(self):
        """Test any length unit is accepted."""
        self.assertEqual(float(ReferenceSphere(Kilometer(2)).radius), 2000.0)

    def test_invalid_radius(self):
        """Test zero, negative and infinite radii are rejected."""
        for radius in (0.0, -1.0, float("inf"), float("nan")):
            with self.assertRaises(ValueError):
                ReferenceSphere(Meter(radius))

    def test_resolve(self):
        """Test None resolves to the default sphere."""
        sphere = ReferenceSphere(MOON_RADIUS, "moon")
        self.assertIs(resolve_sphere(None), DEFAULT_SPHERE)
        self.assertIs(resolve_sphere(sphere), sphere)

    def test_conversion_uses_sphere(self):
        """Test conversions honour the given radius."""
        moon = ReferenceSphere(MOON_RADIUS, "moon")
        self.assertEqual(CartesianPoint.from_geographic(GeographicPoint(), moon).x, 1_737_400.0)


class TestFromEnv(unittest.TestCase):
    """Test reading the radius from the environment."""

    def test_valid_value(self):
        """Test a numeric value overrides the radius."""
        with mock.patch.dict(os.environ, {RADIUS_ENV_VAR: "1000.5"}):
            sphere = ReferenceSphere.from_env()
        self.assertEqual(float(sphere.radius), 1000.5)
        self.assertEqual(sphere.name, "custom")

    def test_unset(self):
        """Test the default is used when the variable is missing."""
        with mock.patch.dict(os.environ):
            os.environ.pop(RADIUS_ENV_VAR, None)
            self.assertIs(ReferenceSphere.from_env(), DEFAULT_SPHERE)
            fallback = ReferenceSphere(Meter(1.0), "unit")
            self.assertIs(ReferenceSphere.from_env(fallback), fallback)

    def test_blank(self):
        """Test a blank value counts as unset."""
        with mock.patch.dict(os.environ, {RADIUS_ENV_VAR: "  "}):
            self.assertIs(ReferenceSphere.from_env(), DEFAULT_SPHERE)

    def test_not_a_number(self):
        """Test garbage input raises ValueError."""
        with mock.patch.dict(os.environ, {RADIUS_ENV_VAR: "six thousand"}):
            with self.assertRaises(ValueError):
                ReferenceSphere.from_env()

    def test_negative(self):
        """Test a negative radius raises ValueError."""
        with mock.patch.dict(os.environ, {RADIUS_ENV_VAR: "-5"}):
            with self.assertRaises(ValueError):
                ReferenceSphere.from_env()


if __name__ == '__main__':
    unittest.main()
