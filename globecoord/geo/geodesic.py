"""Distances in meters between geographic points.

GeographicPoint.distance returns a pure angle and ignores altitude. The
helpers here derive physical lengths from two points and a reference sphere:

    surface_distance: arc length along the sphere surface (altitude ignored)
    linear_distance: straight-line distance through space (altitude included)
    initial_bearing: forward azimuth of the surface path

Surface computations use a pyproj geodesic calculator built on a spherical
figure (flattening 0) with the sphere's radius, so they agree with
``R * a.distance(b)``.
"""

from __future__ import annotations

from functools import lru_cache

from pyproj import Geod

from globecoord.config import ReferenceSphere, resolve_sphere
from globecoord.geo.convert import geographic_to_cartesian
from globecoord.geo.geographic import GeographicPoint
from globecoord.geo.normalize import normalize_longitude
from globecoord.unit import Meter, Radian


@lru_cache(maxsize=8)
def _geod(radius: float) -> Geod:
    return Geod(a=radius, f=0.0)


def _inverse(a: GeographicPoint, b: GeographicPoint, sphere: ReferenceSphere | None):
    geod = _geod(float(resolve_sphere(sphere).radius))
    return geod.inv(a.longitude, a.latitude, b.longitude, b.latitude, radians=True)


def surface_distance(a: GeographicPoint, b: GeographicPoint, sphere: ReferenceSphere | None = None) -> Meter:
    """Calculate the geodesic distance along the reference sphere surface.

    Args:
        a: Start point.
        b: End point.
        sphere: Reference sphere. Defaults to DEFAULT_SPHERE.

    Returns:
        Meter: Length of the shortest surface path between both points.

    Example:
        >>> quarter = surface_distance(GeographicPoint(0, 0), GeographicPoint(math.pi / 2, 0))
        >>> print(quarter.to(Kilometer))  # ~10018.5
    """
    _, _, dist = _inverse(a, b, sphere)
    return Meter(dist)


def initial_bearing(a: GeographicPoint, b: GeographicPoint, sphere: ReferenceSphere | None = None) -> Radian:
    """Forward azimuth at ``a`` of the surface path towards ``b``.

    Returns:
        Radian: Bearing from north (0) clockwise through east (π/2), in
        [-π, +π).
    """
    az12, _, _ = _inverse(a, b, sphere)
    return Radian(normalize_longitude(az12))


def linear_distance(a: GeographicPoint, b: GeographicPoint, sphere: ReferenceSphere | None = None) -> Meter:
    """Straight-line distance between both points, altitude included."""
    return Meter(geographic_to_cartesian(a, sphere).distance(geographic_to_cartesian(b, sphere)))
