"""Temperature and temperature-difference definitions.

Temperature is the one family where a unit is not a pure scale: 0 °C is
273.15 K, not 0 K. This module therefore keeps two distinct types:

- ``Temperature`` is an absolute point on the thermodynamic scale, stored in
  kelvin and converted with the affine transforms
  K = °C + 273.15 and K = (°F + 459.67) × 5/9.
- ``TemperatureDelta`` is a difference between two temperatures. It is an
  ordinary linear measurement (1 °C of difference = 1 K, 1 °F = 5/9 K).

Only physically meaningful combinations are allowed:

    Temperature - Temperature       -> TemperatureDelta
    Temperature ± TemperatureDelta  -> Temperature
    TemperatureDelta + Temperature  -> Temperature

Adding two temperatures, scaling a temperature, or mixing a temperature with
any other family raises ``UnitFamilyError``.

Example:
    >>> morning = Temperature(12, TemperatureUnit.CELSIUS)
    >>> noon = Temperature(68, TemperatureUnit.FAHRENHEIT)
    >>> rise = noon - morning
    >>> rise.kelvin  # 8.0 (approximately)
    >>> (morning + rise).celsius  # 20.0 (approximately)
"""

from __future__ import annotations

import math
from typing import ClassVar

from physunits.config import DEFAULT_ABS_TOL, DEFAULT_REL_TOL
from physunits.core.measurement import Measurement, is_scalar, unsupported
from physunits.core.unit_base import FamilyMember, UnitEnum
from physunits.exceptions import UnitFamilyError

CELSIUS_OFFSET = 273.15
FAHRENHEIT_OFFSET = 459.67
FAHRENHEIT_SCALE = 9.0 / 5.0


class TemperatureUnit(UnitEnum):
    """Temperature unit.

    ``coefficient_to_base`` is the size of one degree in kelvin; it applies to
    differences only. Absolute conversions live in ``Temperature``.
    """

    KELVIN = (1.0, "K")
    CELSIUS = (1.0, "°C")
    FAHRENHEIT = (5.0 / 9.0, "°F")


def _to_kelvin(value: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.CELSIUS:
        return value + CELSIUS_OFFSET
    if unit is TemperatureUnit.FAHRENHEIT:
        return (value + FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE
    return value


def _from_kelvin(kelvin: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.CELSIUS:
        return kelvin - CELSIUS_OFFSET
    if unit is TemperatureUnit.FAHRENHEIT:
        return kelvin * FAHRENHEIT_SCALE - FAHRENHEIT_OFFSET
    return kelvin


class TemperatureDelta(Measurement[TemperatureUnit]):
    """Difference between two temperatures, stored in kelvin.

    Example:
        >>> TemperatureDelta(18, TemperatureUnit.FAHRENHEIT).kelvin
        10.0
    """

    IS_FAMILY_ROOT = True
    UNIT = TemperatureUnit
    BASE_UNIT = TemperatureUnit.KELVIN
    FORMAT_SCALE = ((0.0, TemperatureUnit.KELVIN, "{:.2f} K"),)

    def __add__(self, other):
        if isinstance(other, Temperature):
            return other + self
        return super().__add__(other)

    @property
    def kelvin(self) -> float:
        return self.value_in(TemperatureUnit.KELVIN)

    @property
    def celsius(self) -> float:
        return self.value_in(TemperatureUnit.CELSIUS)

    @property
    def fahrenheit(self) -> float:
        return self.value_in(TemperatureUnit.FAHRENHEIT)


class Temperature(float, FamilyMember):
    """Absolute temperature, stored in kelvin.

    Attributes:
        ABSOLUTE_ZERO (Temperature): 0 K.
        WATER_FREEZING_POINT (Temperature): 0 °C.
        WATER_BOILING_POINT (Temperature): 100 °C at one atmosphere.
        BODY_TEMPERATURE (Temperature): 37 °C.
    """

    __slots__ = ()
    __array_priority__ = 1000
    __array_ufunc__ = None

    IS_FAMILY_ROOT = True
    UNIT = TemperatureUnit

    ABSOLUTE_ZERO: ClassVar[Temperature]
    WATER_FREEZING_POINT: ClassVar[Temperature]
    WATER_BOILING_POINT: ClassVar[Temperature]
    BODY_TEMPERATURE: ClassVar[Temperature]

    def __new__(cls, value, unit: TemperatureUnit):
        """Create a temperature from a reading on the given scale.

        Args:
            value: Reading on the ``unit`` scale.
            unit: ``TemperatureUnit.KELVIN``, ``CELSIUS`` or ``FAHRENHEIT``.

        Raises:
            UnitFamilyError: If ``unit`` is not a temperature unit or
                ``value`` is not a plain number.
        """
        cls._check_unit(unit)
        if not is_scalar(value):
            raise UnitFamilyError(f"Temperature value must be a number, got {type(value).__name__}")
        return float.__new__(cls, _to_kelvin(float(value), unit))

    @classmethod
    def from_kelvin(cls, kelvin: float) -> Temperature:
        return float.__new__(cls, kelvin)

    @classmethod
    def _check_unit(cls, unit) -> None:
        if not isinstance(unit, TemperatureUnit):
            raise UnitFamilyError(f"{unit!r} is not a TemperatureUnit")

    def value_in(self, unit: TemperatureUnit) -> float:
        """Return the reading on another temperature scale."""
        self._check_unit(unit)
        return _from_kelvin(float(self), unit)

    @property
    def kelvin(self) -> float:
        return float(self)

    @property
    def celsius(self) -> float:
        return self.value_in(TemperatureUnit.CELSIUS)

    @property
    def fahrenheit(self) -> float:
        return self.value_in(TemperatureUnit.FAHRENHEIT)

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: TemperatureDelta) -> Temperature:
        if not isinstance(other, TemperatureDelta):
            raise UnitFamilyError(
                f"can only add a TemperatureDelta to a Temperature, not {type(other).__name__}"
            )
        return Temperature.from_kelvin(float(self) + float(other))

    __radd__ = __add__

    def __sub__(self, other):
        """Subtract a temperature (giving a delta) or a delta (giving a temperature)."""
        if isinstance(other, Temperature):
            return TemperatureDelta.from_base(float(self) - float(other))
        if isinstance(other, TemperatureDelta):
            return Temperature.from_kelvin(float(self) - float(other))
        raise UnitFamilyError(f"cannot subtract {type(other).__name__} from Temperature")

    __rsub__ = unsupported("-", UnitFamilyError)
    __mul__ = __rmul__ = unsupported("*", UnitFamilyError)
    __truediv__ = __rtruediv__ = unsupported("/", UnitFamilyError)
    __floordiv__ = __rfloordiv__ = unsupported("//", UnitFamilyError)
    __mod__ = __rmod__ = unsupported("%", UnitFamilyError)
    __divmod__ = __rdivmod__ = unsupported("divmod", UnitFamilyError)
    __pow__ = __rpow__ = unsupported("**", UnitFamilyError)
    __neg__ = unsupported("unary -", UnitFamilyError)
    __abs__ = unsupported("abs", UnitFamilyError)

    def __pos__(self) -> Temperature:
        return self

    # -------------------------------- Comparison --------------------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Temperature):
            return float(self) == float(other)
        return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = float.__hash__

    def _check_temperature(self, other: object) -> None:
        if not isinstance(other, Temperature):
            raise UnitFamilyError(f"cannot compare Temperature with {type(other).__name__}")

    def __lt__(self, other: Temperature) -> bool:
        self._check_temperature(other)
        return float(self) < float(other)

    def __le__(self, other: Temperature) -> bool:
        self._check_temperature(other)
        return float(self) <= float(other)

    def __gt__(self, other: Temperature) -> bool:
        self._check_temperature(other)
        return float(self) > float(other)

    def __ge__(self, other: Temperature) -> bool:
        self._check_temperature(other)
        return float(self) >= float(other)

    def isclose(
        self,
        other: Temperature,
        *,
        rel_tol: float = DEFAULT_REL_TOL,
        abs_tol: float = DEFAULT_ABS_TOL,
    ) -> bool:
        self._check_temperature(other)
        return math.isclose(float(self), float(other), rel_tol=rel_tol, abs_tol=abs_tol)

    # -------------------------------- Representation --------------------------------
    @property
    def formatted_celsius(self) -> str:
        return f"{self.celsius:.1f}°C"

    @property
    def formatted_fahrenheit(self) -> str:
        return f"{self.fahrenheit:.1f}°F"

    @property
    def formatted_kelvin(self) -> str:
        return f"{self.kelvin:.2f} K"

    @property
    def formatted(self) -> str:
        return self.formatted_celsius

    def format_in(self, unit: TemperatureUnit, spec: str = ".2f") -> str:
        return f"{self.value_in(unit):{spec}} {unit.symbol}"

    def __str__(self) -> str:
        return f"{float(self):g} K"

    def __repr__(self) -> str:
        return f"<Temperature: {float(self):g} K>"

    def __reduce__(self):
        return (Temperature.from_kelvin, (float(self),))


Temperature.ABSOLUTE_ZERO = Temperature(0, TemperatureUnit.KELVIN)
Temperature.WATER_FREEZING_POINT = Temperature(0, TemperatureUnit.CELSIUS)
Temperature.WATER_BOILING_POINT = Temperature(100, TemperatureUnit.CELSIUS)
Temperature.BODY_TEMPERATURE = Temperature(37, TemperatureUnit.CELSIUS)
