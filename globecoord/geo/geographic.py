"""Geographic points: longitude, latitude and altitude on a reference sphere.

A GeographicPoint keeps its angles normalized at all times. Every way of
changing them (the constructor, the ``set_*`` methods, property assignment
and the ``with_*`` builders) goes through globecoord.geo.normalize, so
longitude stays in [-π, +π) and latitude in [-π/2, +π/2]. Altitude is a
plain scalar measured from the reference sphere surface; negative values lie
below it.

Example:
    >>> point = GeographicPoint()
    >>> point.set_latitude(-5 * math.pi / 4)
    >>> point.latitude, point.longitude  # (π/4, -π)
    (0.7853981633974483, -3.141592653589793)
"""

from __future__ import annotations

import copy
import math
from typing import TYPE_CHECKING

from globecoord.geo.normalize import normalize_latitude, normalize_longitude
from globecoord.unit import Degree, Radian

if TYPE_CHECKING:
    from globecoord.config import ReferenceSphere
    from globecoord.geo.cartesian import CartesianPoint


class GeographicPoint:
    """Represents a point using the geographic system of coordinates.

    Attributes:
        longitude (float): Angle east (positive) or west (negative) of the
            zero meridian, in radians, range [-π, +π).
        latitude (float): Angle between the equatorial plane and the line
            through the point and the sphere center, in radians, range
            [-π/2, +π/2].
        altitude (float): Height above the reference sphere surface.
    """

    __slots__ = ("_longitude", "_latitude", "_altitude")

    def __init__(self, longitude: float = 0.0, latitude: float = 0.0, altitude: float = 0.0):
        self._longitude = 0.0
        self._latitude = 0.0
        self._altitude = 0.0
        self.set_longitude(longitude)
        self.set_latitude(latitude)
        self.set_altitude(altitude)

    @classmethod
    def from_cartesian(cls, point: CartesianPoint, sphere: ReferenceSphere | None = None) -> GeographicPoint:
        """Returns the equivalent GeographicPoint of the given CartesianPoint.

        Args:
            point: The Cartesian point to convert.
            sphere: Reference sphere the altitude is measured from. Defaults
                to the configured default sphere.
        """
        from globecoord.geo.convert import cartesian_to_geographic

        return cartesian_to_geographic(point, sphere)

    @classmethod
    def from_degrees(cls, longitude: float, latitude: float, altitude: float = 0.0) -> GeographicPoint:
        """Create a point from longitude and latitude in decimal degrees.

        Example:
            >>> seoul = GeographicPoint.from_degrees(126.978, 37.5665)
        """
        return cls(Degree(longitude), Degree(latitude), altitude)

    def to_degrees(self) -> tuple[float, float]:
        """Return ``(longitude, latitude)`` in decimal degrees."""
        return Radian(self._longitude).to(Degree), Radian(self._latitude).to(Degree)

    # -------------------------------- Builders --------------------------------
    def with_longitude(self, value: float) -> GeographicPoint:
        """Calls set_longitude on a copy of self and returns it."""
        point = copy.copy(self)
        point.set_longitude(value)
        return point

    def with_latitude(self, value: float) -> GeographicPoint:
        """Calls set_latitude on a copy of self and returns it."""
        point = copy.copy(self)
        point.set_latitude(value)
        return point

    def with_altitude(self, value: float) -> GeographicPoint:
        """Calls set_altitude on a copy of self and returns it."""
        point = copy.copy(self)
        point.set_altitude(value)
        return point

    # -------------------------------- Setters --------------------------------
    def set_longitude(self, value: float) -> None:
        """Sets the given longitude (in radians) to the point.

        Any value outside [-π, +π) is replaced by its equivalent inside the
        range: overflowing one boundary continues from the other one.

        Example:
            >>> point = GeographicPoint()
            >>> point.set_longitude(math.pi + 1)
            >>> point.longitude  # -π + 1
        """
        self._longitude = normalize_longitude(value)

    def set_latitude(self, value: float) -> None:
        """Sets the given latitude (in radians) to the point.

        Any value outside [-π/2, +π/2] is replaced by its equivalent inside
        the range. Overflowing a pole means moving away from it towards the
        opposite one, on the other half of the meridian circle, so the
        longitude is shifted by π as well. When the overflow completes full
        laps without crossing a pole the longitude does not change.

        Example:
            >>> point = GeographicPoint()
            >>> point.set_latitude(-5 * math.pi / 4)
            >>> point.latitude, point.longitude  # (π/4, -π)
        """
        latitude, delta = normalize_latitude(value)
        self._latitude = latitude
        if delta:
            self._longitude = normalize_longitude(self._longitude + delta)

    def set_altitude(self, value: float) -> None:
        """Sets the given altitude to the point."""
        self._altitude = float(value)

    # -------------------------------- Accessors --------------------------------
    @property
    def longitude(self) -> float:
        """Returns the longitude (in radians) of the point."""
        return self._longitude

    @longitude.setter
    def longitude(self, value: float) -> None:
        self.set_longitude(value)

    @property
    def latitude(self) -> float:
        """Returns the latitude (in radians) of the point."""
        return self._latitude

    @latitude.setter
    def latitude(self, value: float) -> None:
        self.set_latitude(value)

    @property
    def altitude(self) -> float:
        """Returns the altitude of the point."""
        return self._altitude

    @altitude.setter
    def altitude(self, value: float) -> None:
        self.set_altitude(value)

    @property
    def long_ratio(self) -> float:
        """Longitude divided by π, in the range [-1.0, 1.0)."""
        return self._longitude / math.pi

    @property
    def lat_ratio(self) -> float:
        """Latitude divided by π/2, in the range [-1.0, 1.0]."""
        return self._latitude / (math.pi / 2)

    # -------------------------------- Metrics --------------------------------
    def distance(self, other: GeographicPoint) -> float:
        """Returns the great-circle angular distance (in radians) to other.

        Altitude is ignored: the result is the central angle between both
        points projected on the unit sphere, in the range [0, π]. Uses the
        haversine formula in its atan2 form, which stays accurate for both
        nearby and antipodal points.
        """
        d_lat = other._latitude - self._latitude
        d_lon = other._longitude - self._longitude
        a = (
            math.sin(d_lat / 2) ** 2
            + math.cos(self._latitude) * math.cos(other._latitude) * math.sin(d_lon / 2) ** 2
        )
        a = min(max(a, 0.0), 1.0)
        return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    # -------------------------------- Dunder --------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeographicPoint):
            return NotImplemented
        return (self._longitude, self._latitude, self._altitude) == (
            other._longitude,
            other._latitude,
            other._altitude,
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"GeographicPoint(longitude={self._longitude!r}, "
            f"latitude={self._latitude!r}, altitude={self._altitude!r})"
        )
