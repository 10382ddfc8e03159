"""Distance and length unit definitions.

Lengths are stored in meters (the SI base unit). They are used for the
reference sphere radius, altitudes, surface distances and tile sizes.

Classes:
    Meter: Base distance unit in meters (SI unit).
    Kilometer: Distance unit in kilometers with automatic meter conversion.

Type Aliases:
    Length: Union type for all distance units (Meter | Kilometer).

Example:
    >>> radius = Kilometer(6378)
    >>> print(radius)  # "6378.0 km"
    >>> print(float(radius))  # 6378000.0 (meters in SI)
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: Meter (SI base unit for length).

    Example:
        >>> altitude = Meter(150.5)
        >>> print(altitude)  # "150.5 m"
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Distance unit: Kilometer (1000 meters).

    Example:
        >>> print(Kilometer(50.2).to(Meter))  # 50200.0
    """

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


Length = Meter | Kilometer  # Type alias for any length unit
