"""Float-based unit system with automatic SI conversion and type safety.

This module provides the UnitFloat class, the foundation for all numeric unit
types in globecoord. It combines Python's float type with unit safety,
automatic SI conversion, and family checking to prevent mixing incompatible
quantities.

Because a UnitFloat *is* a float holding its SI value, any unit can be handed
to code that expects plain radians or meters: ``math.cos(Degree(90))`` is the
cosine of π/2.

Example:
    >>> class Turn(Radian):
    ...     SCALE_TO_SI = 2 * math.pi
    ...     SYMBOL = "tr"
    ...
    >>> quarter = Turn(0.25)
    >>> print(quarter)  # "0.25 tr"
    >>> print(float(quarter))  # 1.5707... (radians in SI)
    >>> quarter.to(Degree)  # 90.0
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Base class for type-safe unit values stored in SI.

    Arithmetic between two units is only allowed inside one family (same
    ROOT). Scaling by plain numbers is always allowed. Comparisons accept
    either a unit of the same family or a plain number, which is taken to be
    an SI value. Equality with anything else (None, strings) is simply
    False.

    Attributes:
        ROOT (ClassVar[type[UnitFloat]]): Root class defining the unit family.
        SCALE_TO_SI (ClassVar[float]): Conversion factor to SI units.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a new instance from a value in the unit's native scale."""
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create instance directly from SI unit value.

        Args:
            si_value: Value already in SI units.

        Returns:
            UnitFloat: New instance with the SI value.
        """
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Value in the target unit's scale.

        Raises:
            TypeError: If ``unit_type`` is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Convert to another unit while preserving type information."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    def _si_of(self, other) -> float:
        # plain numbers compare as SI values
        if isinstance(other, Unit):
            self._check_same_root(type(other))
        elif not isinstance(other, Number):
            msg = f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            raise TypeError(msg)
        return float(other)

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        """Add two units of the same family.

        Raises:
            TypeError: If ``other`` is not a unit of the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        """Subtract two units of the same family."""
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Multiply unit by a scalar value.

        Raises:
            TypeError: If k is not a plain number.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        raise TypeError

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        """Divide unit by a scalar value.

        Raises:
            TypeError: If k is not a plain number.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __abs__(self) -> UnitFloat:
        return type(self).from_si(abs(float(self)))

    # -------------------------------- Comparisons --------------------------------
    def __lt__(self, other) -> bool:
        return float(self) < self._si_of(other)

    def __le__(self, other) -> bool:
        return float(self) <= self._si_of(other)

    def __gt__(self, other) -> bool:
        return float(self) > self._si_of(other)

    def __ge__(self, other) -> bool:
        return float(self) >= self._si_of(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Unit, int, float)):
            return NotImplemented
        return float(self) == self._si_of(other)

    def __ne__(self, other) -> bool:
        if not isinstance(other, (Unit, int, float)):
            return NotImplemented
        return float(self) != self._si_of(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Return the value in the unit's native scale with its symbol (e.g. "90.0 °")."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Return native and SI values (e.g. "90 ° (= 1.5708 SI)")."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
