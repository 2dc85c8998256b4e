"""Float-based measurements with base-unit storage and family safety.

This module provides the ``Measurement`` class, the foundation of every
family of physical quantities in physunits. It combines Python's float type
with family safety: the float value of a measurement *is* the quantity
expressed in its family's base unit, whatever unit was used to build it.

Key Features:
- Construction from ``(value, unit)`` with conversion to the base unit
- Extraction in any unit of the same family with ``value_in``
- Additive arithmetic, scalar scaling and ratios within one family
- Cross-family arithmetic resolved through the relation registry
- IEEE-754 division: zero divisors give ``inf``/``nan``, never an exception
- Human-readable string representations

Classes:
    Measurement: Base class for all families (Mass, Length, Duration, ...).

Example:
    >>> class Mass(Measurement[MassUnit]):
    ...     IS_FAMILY_ROOT = True
    ...     UNIT = MassUnit
    ...     BASE_UNIT = MassUnit.GRAMS
    ...
    >>> mass = Mass(1.5, MassUnit.KILOGRAMS)
    >>> print(mass)  # "1500 g"
    >>> mass.value_in(MassUnit.GRAMS)  # 1500.0
"""

from __future__ import annotations

import math
import operator
from typing import ClassVar, Generic, TypeVar

import numpy as np

from physunits.config import BASE_TYPE, DEFAULT_ABS_TOL, DEFAULT_REL_TOL
from physunits.exceptions import UnitFamilyError
from physunits.logger import logger

from .relations import resolve
from .unit_base import FamilyMember, Unit

U = TypeVar("U", bound=Unit)


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics.

    Python floats raise ``ZeroDivisionError``; measurements follow IEEE-754
    instead, so ``x / 0`` is ``±inf`` and ``0 / 0`` is ``nan``.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.true_divide(np.float64(numerator), np.float64(denominator)))


def is_scalar(value: object) -> bool:
    """Return True for plain numbers accepted as scale factors."""
    return isinstance(value, BASE_TYPE) and not isinstance(value, FamilyMember)


def unsupported(symbol: str, error: type[Exception] = TypeError):
    """Return an operator method that always raises ``error``."""

    def method(self, *args):
        raise error(f"unsupported operand for {type(self).__name__}: '{symbol}'")

    return method


class Measurement(float, FamilyMember, Generic[U]):
    """Base class for type-safe measurements stored in base units.

    Each family subclass binds the unit class it accepts and the base unit
    its value is stored in. Operations are only allowed between measurements
    of the same family (same ROOT), except for the cross-family relations
    registered in ``physunits.core.relations``.

    Attributes:
        UNIT (ClassVar[type[Unit]]): Unit class accepted by the family.
        BASE_UNIT (ClassVar[Unit]): Unit whose coefficient to base is 1.
        FORMAT_SCALE (ClassVar[tuple]): ``(threshold, unit, template)`` ladder
            used by ``formatted``; the first entry whose threshold (in base
            units) is reached by the magnitude wins, the last is the fallback.
            ``template`` is a ``str.format`` pattern such as ``"{:.2f} kg"``.
        zero (ClassVar[Measurement]): Additive identity of the family.
    """

    __slots__ = ()
    __array_priority__ = 1000
    __array_ufunc__ = None

    UNIT: ClassVar[type[Unit]] = Unit
    BASE_UNIT: ClassVar[Unit]
    FORMAT_SCALE: ClassVar[tuple[tuple[float, Unit, str], ...]] = ()
    zero: ClassVar[Measurement]

    families: ClassVar[dict[str, type[Measurement]]] = {}

    def __init_subclass__(cls, **kwargs):
        """Register family roots by name and build the family's zero.

        The first root registered under a name keeps it; a later root with
        the same name is logged and left out of ``families``.
        """
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            registered = Measurement.families.setdefault(cls.__name__, cls)
            if registered is not cls:
                logger.warning(
                    "family name %r already registered by %s.%s; %s.%s is not registered",
                    cls.__name__,
                    registered.__module__,
                    registered.__qualname__,
                    cls.__module__,
                    cls.__qualname__,
                )
        cls.zero = cls.from_base(0.0)

    def __new__(cls, value, unit: U):
        """Create a new measurement converted to the family's base unit.

        Args:
            value: Numeric value expressed in ``unit``.
            unit: Unit of the family the value is expressed in.

        Returns:
            Measurement: New instance storing ``value * unit.coefficient_to_base``.

        Raises:
            UnitFamilyError: If ``unit`` belongs to another family or
                ``value`` is not a plain number.
        """
        cls._check_unit(unit)
        if not is_scalar(value):
            raise UnitFamilyError(f"{cls.__name__} value must be a number, got {type(value).__name__}")
        return float.__new__(cls, float(value) * unit.coefficient_to_base)

    @classmethod
    def from_base(cls, base_value: float):
        """Create instance directly from a base-unit value.

        Args:
            base_value: Value already in the family's base unit.

        Returns:
            Measurement: New instance with the base value.
        """
        return float.__new__(cls, base_value)

    @classmethod
    def _check_unit(cls, unit: Unit) -> None:
        if not isinstance(unit, cls.UNIT):
            raise UnitFamilyError(f"{unit!r} is not a {cls.UNIT.__name__}")

    def _check_operand(self, other: object) -> None:
        if not isinstance(other, FamilyMember):
            raise UnitFamilyError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        self._check_same_root(type(other))

    @property
    def base_value(self) -> float:
        """The stored value, in the family's base unit."""
        return float(self)

    def value_in(self, unit: U) -> float:
        """Return the value expressed in another unit of the same family.

        Args:
            unit: Target unit.

        Returns:
            float: Value in the target unit's scale.

        Raises:
            UnitFamilyError: If ``unit`` belongs to another family.
        """
        self._check_unit(unit)
        return float(self) / unit.coefficient_to_base

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: Measurement) -> Measurement:
        """Add two measurements of the same family.

        Raises:
            UnitFamilyError: If ``other`` is not of the same family.
        """
        self._check_operand(other)
        return type(self).from_base(float(self) + float(other))

    def __radd__(self, other: Measurement) -> Measurement:
        return self.__add__(other)

    def __sub__(self, other: Measurement) -> Measurement:
        """Subtract two measurements of the same family."""
        self._check_operand(other)
        return type(self).from_base(float(self) - float(other))

    def __rsub__(self, other: Measurement) -> Measurement:
        self._check_operand(other)
        return type(self).from_base(float(other) - float(self))

    def __mul__(self, other):
        """Scale by a number, or apply a registered cross-family relation.

        Args:
            other: Numeric scalar, or a measurement of a family related to
                this one (e.g. ``Mass * Acceleration``).

        Returns:
            Measurement: The scaled measurement or the relation's result.

        Raises:
            UnitFamilyError: If no relation is registered for the pair.
        """
        if is_scalar(other):
            return type(self).from_base(float(self) * float(other))
        if isinstance(other, FamilyMember):
            func = resolve(operator.mul, type(self), type(other))
            if func is None:
                raise UnitFamilyError(
                    f"no relation defined for {type(self).__name__} * {type(other).__name__}"
                )
            return func(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            return type(self).from_base(float(other) * float(self))
        if isinstance(other, FamilyMember):
            func = resolve(operator.mul, type(other), type(self))
            if func is None:
                raise UnitFamilyError(
                    f"no relation defined for {type(other).__name__} * {type(self).__name__}"
                )
            return func(other, self)
        return NotImplemented

    def __truediv__(self, other):
        """Divide by a number, by the same family, or through a relation.

        Division never raises on a zero divisor; the result follows IEEE-754.

        Args:
            other: Numeric scalar, measurement of the same family, or a
                measurement of a related family (e.g. ``Length / Duration``).

        Returns:
            Measurement | float: Scaled measurement, plain ratio for the same
            family, or the relation's result.

        Raises:
            UnitFamilyError: If no relation is registered for the pair.
        """
        if is_scalar(other):
            return type(self).from_base(ieee_divide(float(self), float(other)))
        if isinstance(other, FamilyMember):
            if other.ROOT is self.ROOT:
                return ieee_divide(float(self), float(other))
            func = resolve(operator.truediv, type(self), type(other))
            if func is None:
                raise UnitFamilyError(
                    f"no relation defined for {type(self).__name__} / {type(other).__name__}"
                )
            return func(self, other)
        return NotImplemented

    def __rtruediv__(self, other):
        if is_scalar(other) or isinstance(other, FamilyMember):
            raise UnitFamilyError(
                f"cannot divide {type(other).__name__} by {type(self).__name__}"
            )
        return NotImplemented

    __floordiv__ = __rfloordiv__ = unsupported("//")
    __mod__ = __rmod__ = unsupported("%")
    __divmod__ = __rdivmod__ = unsupported("divmod")
    __pow__ = __rpow__ = unsupported("**")

    def __neg__(self) -> Measurement:
        return type(self).from_base(-float(self))

    def __pos__(self) -> Measurement:
        return self

    def __abs__(self) -> Measurement:
        return type(self).from_base(abs(float(self)))

    # -------------------------------- Comparison --------------------------------
    def __eq__(self, other: object) -> bool:
        """Bit-exact equality of base values within one family.

        A measurement never equals a bare number or a measurement of another
        family. Use ``isclose`` after lossy conversions.
        """
        if isinstance(other, FamilyMember) and getattr(other, "ROOT", None) is self.ROOT:
            return float(self) == float(other)
        return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = float.__hash__

    def __lt__(self, other: Measurement) -> bool:
        self._check_operand(other)
        return float(self) < float(other)

    def __le__(self, other: Measurement) -> bool:
        self._check_operand(other)
        return float(self) <= float(other)

    def __gt__(self, other: Measurement) -> bool:
        self._check_operand(other)
        return float(self) > float(other)

    def __ge__(self, other: Measurement) -> bool:
        self._check_operand(other)
        return float(self) >= float(other)

    def isclose(
        self,
        other: Measurement,
        *,
        rel_tol: float = DEFAULT_REL_TOL,
        abs_tol: float = DEFAULT_ABS_TOL,
    ) -> bool:
        """Tolerance-based equality of base values, see ``math.isclose``."""
        self._check_operand(other)
        return math.isclose(float(self), float(other), rel_tol=rel_tol, abs_tol=abs_tol)

    # -------------------------------- Numeric Utilities --------------------------------
    @property
    def magnitude(self) -> Measurement:
        """Absolute value, in the same family."""
        return abs(self)

    @property
    def is_zero(self) -> bool:
        return float(self) == 0.0

    @property
    def is_positive(self) -> bool:
        return float(self) > 0.0

    @property
    def is_negative(self) -> bool:
        return float(self) < 0.0

    def clamped(self, low: Measurement, high: Measurement) -> Measurement:
        """Clamp into the closed range ``[low, high]``.

        Raises:
            ValueError: If ``low`` is greater than ``high``.
        """
        self._check_operand(low)
        self._check_operand(high)
        if float(low) > float(high):
            raise ValueError(f"empty range: {low!r} > {high!r}")
        return type(self).from_base(max(float(low), min(float(self), float(high))))

    # -------------------------------- Representation --------------------------------
    def format_in(self, unit: U, spec: str = ".2f") -> str:
        """Return the value in ``unit`` formatted with ``spec`` plus its symbol."""
        return f"{self.value_in(unit):{spec}} {unit.symbol}"

    @property
    def formatted(self) -> str:
        """Auto-scaled human-readable string, e.g. ``"1.50 kg"``."""
        return self.format_scaled(self.FORMAT_SCALE)

    def format_scaled(self, ladder: tuple[tuple[float, U, str], ...]) -> str:
        """Format with the first ``(threshold, unit, template)`` rung reached.

        Args:
            ladder: Rungs in descending threshold order, thresholds in base
                units. The last rung is used when no threshold is reached
                (tiny values, NaN).

        Returns:
            str: ``template`` applied to the value in the rung's unit, or
            ``str(self)`` for an empty ladder.
        """
        if not ladder:
            return str(self)
        size = abs(float(self))
        for threshold, unit, template in ladder:
            if size >= threshold:
                return template.format(self.value_in(unit))
        _, unit, template = ladder[-1]
        return template.format(self.value_in(unit))

    def __str__(self) -> str:
        """Return the value in the base unit, e.g. ``"1500 g"``."""
        return f"{float(self):g} {self.BASE_UNIT.symbol}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {float(self):g} {self.BASE_UNIT.symbol}>"

    def __reduce__(self):
        return (type(self).from_base, (float(self),))
