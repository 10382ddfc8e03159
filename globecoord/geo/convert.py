"""Conversions between geographic and Cartesian coordinates.

Both directions are parameterized by a ReferenceSphere of radius R: a
geographic point at altitude ``a`` sits at distance ``R + a`` from the
origin. The Cartesian frame has its x axis through (longitude 0,
latitude 0), its y axis through (π/2, 0) and its z axis through the north
pole.

Round trip:
    ``geographic_to_cartesian(cartesian_to_geographic(p))`` reproduces any
    finite Cartesian point up to rounding, and the opposite round trip
    reproduces any geographic point with altitude >= -R.
"""

from __future__ import annotations

import logging
import math

from globecoord.config import ReferenceSphere, resolve_sphere
from globecoord.geo.cartesian import CartesianPoint
from globecoord.geo.geographic import GeographicPoint

logger = logging.getLogger(__name__)


def geographic_to_cartesian(point: GeographicPoint, sphere: ReferenceSphere | None = None) -> CartesianPoint:
    """Returns the CartesianPoint equivalent to a GeographicPoint.

    Args:
        point: Geographic point (radians, altitude above the sphere).
        sphere: Reference sphere. Defaults to DEFAULT_SPHERE.

    Returns:
        CartesianPoint: ``(r·cosφ·cosλ, r·cosφ·sinλ, r·sinφ)`` with
        ``r = R + altitude``.
    """
    radius = float(resolve_sphere(sphere).radius) + point.altitude
    cos_lat = math.cos(point.latitude)
    return CartesianPoint(
        radius * cos_lat * math.cos(point.longitude),
        radius * cos_lat * math.sin(point.longitude),
        radius * math.sin(point.latitude),
    )


def cartesian_to_geographic(point: CartesianPoint, sphere: ReferenceSphere | None = None) -> GeographicPoint:
    """Returns the GeographicPoint equivalent to a CartesianPoint.

    The origin has no direction; it maps to longitude 0, latitude 0 and
    altitude -R.

    Args:
        point: Cartesian point.
        sphere: Reference sphere. Defaults to DEFAULT_SPHERE.

    Returns:
        GeographicPoint: Normalized geographic coordinates of ``point``.
    """
    radius = float(resolve_sphere(sphere).radius)
    x, y, z = point.x, point.y, point.z
    if x == 0.0 and y == 0.0 and z == 0.0:
        logger.debug("Converting the origin, direction defaults to (0, 0)")
        return GeographicPoint(0.0, 0.0, -radius)

    equatorial = math.hypot(x, y)
    longitude = math.atan2(y, x)
    latitude = math.atan2(z, equatorial)
    altitude = math.hypot(x, y, z) - radius
    # atan2 may return +π, which the constructor canonicalizes to -π
    return GeographicPoint(longitude, latitude, altitude)
