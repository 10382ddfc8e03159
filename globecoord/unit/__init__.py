"""Type-safe unit system for angles and lengths.

The unit system is organized into small modules:

    - unit_base: Foundation Unit class with family management
    - unit_float: Float-based units with automatic SI conversion
    - unit_angle: Angular units (Radian, Degree, Latitude, Longitude)
    - unit_distance: Distance units (Meter, Kilometer)

Unit Families:
    - Angle Family: Radian (root), Degree, Latitude, Longitude
    - Distance Family: Meter (root), Kilometer

Example:
    >>> from globecoord.unit import Degree, Kilometer, Meter, Radian
    >>> altitude = Meter(150)
    >>> total = altitude + Kilometer(5.2)
    >>> print(total)  # "5350.0 m"
    >>> Degree(180).to(Radian)  # 3.14159...
    >>> # Degree(1) + Meter(1) raises TypeError
"""

from .unit_angle import Angle, Degree, Latitude, Longitude, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Latitude",
    "Longitude",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "Length",
]
