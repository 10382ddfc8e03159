"""Unit families for globecoord's angle and length types.

Every concrete unit belongs to exactly one family, identified by the family's
root class. Angles (Radian, Degree, Latitude, Longitude) share the Radian
root and lengths (Meter, Kilometer) share the Meter root. Conversions and
arithmetic are only defined inside one family, so an altitude can never be
added to a longitude by accident.

A class opts in as a family root by setting ``IS_FAMILY_ROOT = True``; every
subclass then finds its root by walking its MRO. No registration is needed.

Example:
    >>> class Radian(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    >>> class Degree(Radian):
    ...     pass
    >>> Degree.ROOT is Radian
    True
    >>> Degree._check_same_root(Meter)  # raises TypeError
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Mixin holding the family bookkeeping of a unit type.

    Concrete units derive from UnitFloat, which combines this mixin with
    ``float``.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Family root, set on subclass creation.
        SYMBOL (ClassVar[str]): Suffix used when printing values.
        IS_FAMILY_ROOT (ClassVar[bool]): True on the class that starts a family.
    """

    __slots__ = ()
    # keep unit scalars in charge of mixed numpy expressions
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve ``ROOT``: the nearest class in the MRO flagged as a family root."""
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("ROOT") is not None:
            return
        cls.ROOT = next(
            (klass for klass in cls.mro() if klass.__dict__.get("IS_FAMILY_ROOT", False)),
            cls,
        )

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Ensure ``unit_type`` is a unit of this class's family.

        Raises:
            TypeError: If ``unit_type`` is not a unit, or is a unit of
                another family.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            msg = f"Incompatible units: {cls.ROOT.__name__} and {getattr(other_root, '__name__', unit_type.__name__)}"
            raise TypeError(msg)
