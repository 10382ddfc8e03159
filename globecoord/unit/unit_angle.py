"""Angular unit definitions for longitudes, latitudes and rotations.

All angular measurements are stored in radians (the SI unit) for
mathematical consistency, while supporting input and display in both radians
and degrees. Every point operation in globecoord that takes an angle accepts
either a plain float in radians or one of these units.

Classes:
    Radian: Base angular unit in radians (SI unit).
    Degree: Angular unit in degrees with automatic radian conversion.
    Latitude: Degree unit tagged as a north/south geographic coordinate.
    Longitude: Degree unit tagged as an east/west geographic coordinate.

Type Aliases:
    Angle: Union type for the generic angular units (Radian | Degree).

Example:
    >>> heading = Degree(45)
    >>> print(heading)  # "45.0 °"
    >>> print(float(heading))  # 0.7854 (radians in SI)
    >>>
    >>> half_turn = Radian(3.14159)
    >>> print(half_turn.to(Degree))  # 179.9998...
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root angular unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "rad", the standard symbol for radians.

    Example:
        >>> angle = Radian(1.5708)
        >>> print(angle)  # "1.5708 rad"
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: Degree (1/360 of a full rotation).

    Values are converted to radians for internal storage and calculations.

    Example:
        >>> bearing = Degree(90)
        >>> print(bearing)  # "90.0 °"
        >>> print(float(bearing))  # 1.5708 (π/2 radians)
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


class Latitude(Degree):
    """A degree unit representing latitude (north/south position).

    Latitude values are in the range -90 to +90 degrees once normalized.
    Shares the angle family with Radian and Degree so it can be converted
    with ``to`` and compared against other angles.

    Example:
        >>> lat = Latitude(37.5665)
        >>> str(lat)
        '37.5665 °N/S'
    """

    SYMBOL = "°N/S"


class Longitude(Degree):
    """A degree unit representing longitude (east/west position).

    Longitude values are in the range -180 (inclusive) to +180 (exclusive)
    once normalized.

    Example:
        >>> lon = Longitude(126.978)
        >>> str(lon)
        '126.978 °E/W'
    """

    SYMBOL = "°E/W"


Angle = Radian | Degree  # Type alias for any angle unit (radians or degrees)
