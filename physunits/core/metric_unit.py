"""Prefixed metric units built from an SI prefix and a base-unit marker.

A kilogram is the combination of "kilo" (10³) and "gram"; the two are
separate concepts, and ``MetricUnit`` keeps them separate. A base-unit marker
(``Gram``, ``Meter``, ...) is an empty class carrying only its symbol. Each
unit family is its own ``MetricUnit`` subclass bound to exactly one marker,
so ``MassUnit`` and ``LengthUnit`` never compare equal or mix even though
they share the same shape.

Classes:
    BaseUnit: Marker base; subclasses carry only ``SYMBOL``.
    Gram, Meter, Second, Ampere, Hertz, Newton, Watt, Volt, Ohm, Coulomb,
    Pascal, Liter: The base-unit markers.
    MetricUnit: Frozen (prefix) value bound to one marker per subclass.
    ScaledUnit: Frozen (scale, label) value for non-metric families.

Example:
    >>> class MassUnit(MetricUnit[Gram]):
    ...     IS_FAMILY_ROOT = True
    ...     BASE = Gram
    >>> kg = MassUnit.kilo()
    >>> kg.symbol
    'kg'
    >>> kg.coefficient_to_base
    1000.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

from .prefix import MetricPrefix
from .unit_base import Unit


class BaseUnit:
    """Marker for one unprefixed physical unit.

    Markers are never instantiated with state; they are only used as the
    ``BASE`` of a ``MetricUnit`` family.
    """

    __slots__ = ()

    SYMBOL: ClassVar[str] = ""


class Gram(BaseUnit):
    SYMBOL = "g"


class Meter(BaseUnit):
    SYMBOL = "m"


class Second(BaseUnit):
    SYMBOL = "s"


class Ampere(BaseUnit):
    SYMBOL = "A"


class Hertz(BaseUnit):
    SYMBOL = "Hz"


class Newton(BaseUnit):
    SYMBOL = "N"


class Watt(BaseUnit):
    SYMBOL = "W"


class Volt(BaseUnit):
    SYMBOL = "V"


class Ohm(BaseUnit):
    SYMBOL = "Ω"


class Coulomb(BaseUnit):
    SYMBOL = "C"


class Pascal(BaseUnit):
    SYMBOL = "Pa"


class Liter(BaseUnit):
    SYMBOL = "L"


B = TypeVar("B", bound=BaseUnit)


@dataclass(frozen=True)
class MetricUnit(Unit, Generic[B]):
    """Unit made of an SI prefix and the family's base-unit marker.

    Attributes:
        prefix (MetricPrefix): The SI prefix, ``BASE`` by default.
        BASE (ClassVar[type[BaseUnit]]): Marker fixed by each family subclass.
    """

    prefix: MetricPrefix = MetricPrefix.BASE

    BASE: ClassVar[type[BaseUnit]] = BaseUnit

    @property
    def coefficient_to_base(self) -> float:
        return self.prefix.factor

    @property
    def symbol(self) -> str:
        return self.prefix.symbol + self.BASE.SYMBOL

    # ------------------------------ Factories ------------------------------
    @classmethod
    def base(cls):
        return cls(MetricPrefix.BASE)

    @classmethod
    def kilo(cls):
        return cls(MetricPrefix.KILO)

    @classmethod
    def milli(cls):
        return cls(MetricPrefix.MILLI)

    @classmethod
    def micro(cls):
        return cls(MetricPrefix.MICRO)

    @classmethod
    def nano(cls):
        return cls(MetricPrefix.NANO)

    @classmethod
    def centi(cls):
        return cls(MetricPrefix.CENTI)

    @classmethod
    def mega(cls):
        return cls(MetricPrefix.MEGA)

    @classmethod
    def giga(cls):
        return cls(MetricPrefix.GIGA)


@dataclass(frozen=True)
class ScaledUnit(Unit):
    """Unit given by an explicit coefficient to base and a symbol.

    Used by families that mix prefixed and non-prefixed units (time, energy).
    Each family subclass marks itself ``IS_FAMILY_ROOT``; two scaled units are
    equal only within the same class.

    Attributes:
        scale (float): Coefficient to the family's base unit.
        label (str): Display symbol.
    """

    scale: float
    label: str

    @property
    def coefficient_to_base(self) -> float:
        return self.scale

    @property
    def symbol(self) -> str:
        return self.label
