"""Cartesian and geographic points on a reference sphere.

Components:
    CartesianPoint: 3D point with distance, cross product and axis rotation
    GeographicPoint: longitude/latitude/altitude point with normalized angles
    normalize_longitude, normalize_latitude: angle range reduction
    geographic_to_cartesian, cartesian_to_geographic: conversions
    rotate_vector, rotation_matrix: Rodrigues axis-angle rotation
    surface_distance, linear_distance, initial_bearing: metric distances

Typical Usage:
    >>> from globecoord.geo import CartesianPoint, GeographicPoint
    >>> north_pole = GeographicPoint(0, math.pi / 2)
    >>> cart = CartesianPoint.from_geographic(north_pole)
    >>> cart.rotate(CartesianPoint(1, 0, 0), math.pi / 2)
    >>> GeographicPoint.from_cartesian(cart).latitude  # 0.0, on the equator
"""

from .cartesian import CartesianPoint
from .convert import cartesian_to_geographic, geographic_to_cartesian
from .geodesic import initial_bearing, linear_distance, surface_distance
from .geographic import GeographicPoint
from .normalize import normalize, normalize_latitude, normalize_longitude
from .rotation import rotate_vector, rotation_matrix

__all__ = [
    "CartesianPoint",
    "GeographicPoint",
    "normalize",
    "normalize_latitude",
    "normalize_longitude",
    "geographic_to_cartesian",
    "cartesian_to_geographic",
    "rotate_vector",
    "rotation_matrix",
    "surface_distance",
    "linear_distance",
    "initial_bearing",
]
