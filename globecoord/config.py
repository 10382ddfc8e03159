"""Global configuration for globecoord.

Every Cartesian <-> geographic conversion is parameterized by the radius of a
reference sphere: a GeographicPoint at altitude ``a`` lies ``R + a`` away from
the coordinate origin. The radius is exposed here as an explicit
configuration value rather than a hidden constant, so conversions can target
other bodies (or a unit sphere) by passing a different ReferenceSphere.

Constants:
    EARTH_RADIUS: Radius used by the map application this kernel serves.
    MOON_RADIUS: Mean lunar radius.
    MOON_ORBIT: Mean Earth-Moon distance.
    DEFAULT_SPHERE: ReferenceSphere used when no sphere is passed explicitly.

Example:
    >>> from globecoord import CartesianPoint, GeographicPoint
    >>> from globecoord.config import ReferenceSphere, MOON_RADIUS
    >>> moon = ReferenceSphere(MOON_RADIUS, "moon")
    >>> CartesianPoint.from_geographic(GeographicPoint(), sphere=moon).x
    1737400.0
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
import os

from globecoord.unit import Meter

logger = logging.getLogger(__name__)

RADIUS_ENV_VAR = "GLOBECOORD_RADIUS"

EARTH_RADIUS = Meter(6_378_000.0)
MOON_RADIUS = Meter(1_737_400.0)
MOON_ORBIT = Meter(384_400_000.0)


@dataclass(frozen=True)
class ReferenceSphere:
    """The sphere geographic coordinates are measured against.

    Attributes:
        radius (Meter): Distance from the origin to the zero-altitude surface.
        name (str): Label used in logs and CLI output.
    """

    radius: Meter = EARTH_RADIUS
    name: str = "earth"

    def __post_init__(self):
        radius = float(self.radius)
        if not (radius > 0 and math.isfinite(radius)):
            msg = f"Reference sphere radius must be positive and finite, got {radius}"
            raise ValueError(msg)
        if not isinstance(self.radius, Meter):
            object.__setattr__(self, "radius", Meter(radius))

    @classmethod
    def from_env(cls, default: ReferenceSphere | None = None) -> ReferenceSphere:
        """Build a sphere from the ``GLOBECOORD_RADIUS`` environment variable.

        Args:
            default: Sphere returned when the variable is unset. Defaults to
                DEFAULT_SPHERE.

        Returns:
            ReferenceSphere: Sphere with the configured radius in meters.

        Raises:
            ValueError: If the variable is set but is not a positive number.
        """
        raw = os.environ.get(RADIUS_ENV_VAR)
        if raw is None or not raw.strip():
            return default if default is not None else DEFAULT_SPHERE
        try:
            radius = float(raw)
        except ValueError:
            msg = f"{RADIUS_ENV_VAR} must be a number of meters, got {raw!r}"
            raise ValueError(msg) from None
        logger.debug("Reference sphere radius overridden from environment: %s m", radius)
        return cls(Meter(radius), "custom")


DEFAULT_SPHERE = ReferenceSphere(EARTH_RADIUS, "earth")


def resolve_sphere(sphere: ReferenceSphere | None) -> ReferenceSphere:
    """Return ``sphere`` or the default reference sphere when it is None."""
    return DEFAULT_SPHERE if sphere is None else sphere
