"""Exception types raised by globecoord.

Numeric problems (division by zero lengths, non-finite inputs) are not
reported through exceptions: they propagate as NaN or infinity through the
float arithmetic. The exceptions below cover the few conditions that have no
meaningful numeric answer.
"""


class GlobeCoordError(Exception):
    """Base class for all globecoord errors."""


class DegenerateAxisError(GlobeCoordError, ValueError):
    """A rotation was requested about an axis point equal to the origin.

    The line through the origin and the axis point is undefined, so there is
    no rotation direction. The point that was asked to rotate is left
    unchanged.
    """


class TileCoordinateError(GlobeCoordError, ValueError):
    """A geographic coordinate projected outside the slippy-map tile grid."""
