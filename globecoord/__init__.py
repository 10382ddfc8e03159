"""Geometry kernel for points on and above a reference sphere.

globecoord represents positions in two coordinate systems and moves between
them:

    CartesianPoint: (x, y, z) in 3D Euclidean space
    GeographicPoint: (longitude, latitude, altitude) relative to a sphere

Core Capabilities:
    • Angle normalization with longitude wraparound and pole-crossing flips
    • Euclidean distance, cross product and axis-angle rotation
    • Great-circle angular distance between geographic points
    • Cartesian <-> geographic conversion for a configurable sphere radius
    • Surface and straight-line distances in meters
    • Slippy-map tile projection for GPS positions

Package Layout:
    globecoord.unit: type-safe Radian/Degree/Meter units
    globecoord.config: ReferenceSphere and radius constants
    globecoord.geo: point types, conversions, rotation, distances
    globecoord.tile: OSM tile coordinates
    globecoord.cli: command line front end (``python -m globecoord``)

Every value type is plain and synchronous. Points are mutable (setters and
``rotate`` work in place) and offer copying builders (``with_latitude``,
``rotated``) for value-style code.

Example:
    >>> import math
    >>> from globecoord import CartesianPoint, GeographicPoint
    >>> point = GeographicPoint().with_latitude(-5 * math.pi / 4)
    >>> point.latitude, point.longitude  # (π/4, -π): crossed the south pole
    >>> cart = CartesianPoint.from_geographic(point)
    >>> GeographicPoint.from_cartesian(cart).distance(point)  # ~0.0
"""

from globecoord.config import DEFAULT_SPHERE, EARTH_RADIUS, ReferenceSphere
from globecoord.errors import DegenerateAxisError, GlobeCoordError, TileCoordinateError
from globecoord.geo import (
    CartesianPoint,
    GeographicPoint,
    cartesian_to_geographic,
    geographic_to_cartesian,
    linear_distance,
    surface_distance,
)

__all__ = [
    "CartesianPoint",
    "GeographicPoint",
    "ReferenceSphere",
    "DEFAULT_SPHERE",
    "EARTH_RADIUS",
    "cartesian_to_geographic",
    "geographic_to_cartesian",
    "surface_distance",
    "linear_distance",
    "GlobeCoordError",
    "DegenerateAxisError",
    "TileCoordinateError",
]
