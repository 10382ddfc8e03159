"""Cartesian points in 3D Euclidean space.

The CartesianPoint is a small mutable value type: its coordinates can be
assigned directly, and ``rotate`` turns it in place. Coordinates are never
validated; NaN and infinite components simply propagate through the
arithmetic of every operation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from globecoord.geo.rotation import rotate_vector

if TYPE_CHECKING:
    from globecoord.config import ReferenceSphere
    from globecoord.geo.geographic import GeographicPoint


@dataclass
class CartesianPoint:
    """Represents a point using the Cartesian system of coordinates.

    Attributes:
        x (float): Coordinate along the axis through longitude 0 on the equator.
        y (float): Coordinate along the axis through longitude π/2 on the equator.
        z (float): Coordinate along the polar axis (north positive).

    Example:
        >>> a = CartesianPoint(1, 0, 0)
        >>> b = CartesianPoint(0, 1, 0)
        >>> a.distance(b)
        1.4142135623730951
        >>> a.cross(b)
        CartesianPoint(x=0.0, y=0.0, z=1.0)
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    @classmethod
    def origin(cls) -> CartesianPoint:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_geographic(cls, point: GeographicPoint, sphere: ReferenceSphere | None = None) -> CartesianPoint:
        """Returns the equivalent CartesianPoint of the given GeographicPoint.

        Args:
            point: The geographic point to convert.
            sphere: Reference sphere the altitude is measured from. Defaults
                to the configured default sphere.
        """
        from globecoord.geo.convert import geographic_to_cartesian

        return geographic_to_cartesian(point, sphere)

    @classmethod
    def from_array(cls, values: ArrayLike) -> CartesianPoint:
        x, y, z = np.asarray(values, dtype=float)
        return cls(x, y, z)

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    def set_x(self, x: float) -> None:
        self.x = float(x)

    def set_y(self, y: float) -> None:
        self.y = float(y)

    def set_z(self, z: float) -> None:
        self.z = float(z)

    def norm(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y, self.z)

    def dot(self, other: CartesianPoint) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def distance(self, other: CartesianPoint) -> float:
        """Returns the Euclidean distance between self and the given point."""
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))

    def cross(self, other: CartesianPoint) -> CartesianPoint:
        """Performs the cross product between self and the given point.

        The result is anti-commutative and is the zero vector whenever both
        points are parallel, including when either of them is the origin.
        """
        return CartesianPoint(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def rotate(self, axis: CartesianPoint, theta: float) -> None:
        """Rotates self theta radians about the line through the origin and axis.

        Args:
            axis: Any point on the rotation axis other than the origin. The
                axis direction is the vector from the origin to this point.
            theta: Rotation angle in radians, right-hand rule.

        Raises:
            DegenerateAxisError: If ``axis`` is the origin. Self is left
                unchanged.
        """
        self.x, self.y, self.z = (float(c) for c in rotate_vector(self.to_array(), axis.to_array(), theta))

    def rotated(self, axis: CartesianPoint, theta: float) -> CartesianPoint:
        """Calls rotate on a copy of self and returns it."""
        point = replace(self)
        point.rotate(axis, theta)
        return point
