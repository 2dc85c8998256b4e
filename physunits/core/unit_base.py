"""Family foundation for type-safe units and measurements.

This module provides the family-root machinery shared by every unit class and
every measurement class in physunits, together with the ``Unit`` contract that
all unit values honour.

The system is designed around the concept of "families" where each family
represents a distinct physical quantity (mass, length, time, ...). Values of
the same family can be combined, while combining values of different families
is rejected at runtime with ``UnitFamilyError``.

Key Concepts:
- ROOT Class: Each family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the root class of a family
- Automatic Assignment: ROOT classes are determined automatically via MRO
- Unit Contract: ``coefficient_to_base`` and ``symbol`` on every unit value

Classes:
    FamilyMember: Mixin assigning ROOT classes and checking family identity.
    Unit: Base class for every unit value (metric, enumerated, temperature).
    UnitEnum: Enumeration base for families with hand-coded coefficients.

Example:
    >>> class Mass(Measurement[MassUnit]):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for mass values
    >>> class BodyMass(Mass):
    ...     pass  # Automatically gets ROOT = Mass
    >>> # Mass and BodyMass can operate together (same ROOT)
    >>> # But Mass values cannot operate with Length values (different ROOT)
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from physunits.exceptions import UnitFamilyError


class FamilyMember:
    """Mixin providing automatic ROOT assignment for family classes.

    Attributes:
        ROOT (ClassVar[type[FamilyMember]]): Root class defining the family.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root.
    """

    __slots__ = ()

    ROOT: ClassVar[type[FamilyMember]]
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Automatically set ROOT class for subclasses.

        The ROOT is the first class in the MRO carrying ``IS_FAMILY_ROOT=True``
        in its own namespace, or the class itself if no such ancestor exists.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, other_type: type) -> None:
        """Check that another class belongs to the same family.

        Args:
            other_type: The class of the other operand.

        Raises:
            UnitFamilyError: If the classes belong to different families.
        """
        other_root = getattr(other_type, "ROOT", None)
        if cls.ROOT is not other_root:
            other_name = other_root.__name__ if other_root is not None else other_type.__name__
            msg = f"incompatible families: {cls.ROOT.__name__} and {other_name}"
            raise UnitFamilyError(msg)


class Unit(FamilyMember):
    """Base class for all unit values.

    A unit value knows how many base units of its family one of itself is
    worth, and how to display itself. Subclasses are either frozen dataclasses
    (``MetricUnit`` families, time and energy) or enumerations.
    """

    @property
    def coefficient_to_base(self) -> float:
        """Multiplier converting one of this unit into the family's base unit."""
        raise NotImplementedError

    @property
    def symbol(self) -> str:
        """Display symbol, e.g. ``"kg"``."""
        raise NotImplementedError

    @classmethod
    def named_units(cls) -> dict[str, Unit]:
        """Return every named unit of the family, keyed by constant name."""
        if issubclass(cls, Enum):
            return dict(cls.__members__)
        named = {}
        for klass in reversed(cls.mro()):
            for name, value in vars(klass).items():
                if name.isupper() and isinstance(value, cls):
                    named[name] = value
        return named

    @classmethod
    def all_units(cls) -> tuple[Unit, ...]:
        """Return the distinct named units of the family."""
        return tuple(dict.fromkeys(cls.named_units().values()))

    def __str__(self) -> str:
        return self.symbol


class UnitEnum(Unit, Enum):
    """Enumerated unit family whose members are ``(coefficient, symbol)`` pairs.

    Example:
        >>> class AngleUnit(UnitEnum):
        ...     RADIANS = (1.0, "rad")
        ...     TURNS = (2.0 * math.pi, "turn")
        >>> AngleUnit.TURNS.coefficient_to_base
        6.283185307179586
    """

    @property
    def coefficient_to_base(self) -> float:
        return self.value[0]

    @property
    def symbol(self) -> str:
        return self.value[1]
