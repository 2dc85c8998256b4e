"""Power unit definitions for energy consumption and generation.

This module provides power units for motors, batteries and electrical loads.
All power values are stored in watts (the SI unit), with support for metric
multiples and both metric and imperial horsepower.

These units are commonly used for:
- Motor and engine ratings
- Electrical loads (``Voltage * Current``)
- Energy budgets (``Energy / Duration``)

Classes:
    PowerUnit: Enumerated power unit.
    Power: Measurement of power, stored in watts.

Example:
    >>> motor = Power(1.5, PowerUnit.KILOWATTS)
    >>> print(motor)  # "1500 W"
    >>> motor.formatted  # "1.50 kW"
"""

from __future__ import annotations

from physunits.core.measurement import Measurement
from physunits.core.unit_base import UnitEnum


class PowerUnit(UnitEnum):
    """Power unit; ``HORSEPOWER`` is the metric horsepower (PS)."""

    WATTS = (1.0, "W")
    MILLIWATTS = (1e-3, "mW")
    KILOWATTS = (1e3, "kW")
    MEGAWATTS = (1e6, "MW")
    GIGAWATTS = (1e9, "GW")
    HORSEPOWER = (735.49875, "hp")
    HORSEPOWER_IMPERIAL = (745.69987158, "hp(I)")


class Power(Measurement[PowerUnit]):
    """Measurement of power (SI unit: watt).

    Attributes:
        IS_FAMILY_ROOT (bool): True, Power is the root of its family.
        UNIT (type): ``PowerUnit``.
        BASE_UNIT (PowerUnit): ``PowerUnit.WATTS``.

    Example:
        >>> Power(100, PowerUnit.HORSEPOWER).kilowatts
        73.549875
    """

    IS_FAMILY_ROOT = True
    UNIT = PowerUnit
    BASE_UNIT = PowerUnit.WATTS
    FORMAT_SCALE = (
        (1e9, PowerUnit.GIGAWATTS, "{:.2f} GW"),
        (1e6, PowerUnit.MEGAWATTS, "{:.2f} MW"),
        (1e3, PowerUnit.KILOWATTS, "{:.2f} kW"),
        (1.0, PowerUnit.WATTS, "{:.1f} W"),
        (0.0, PowerUnit.MILLIWATTS, "{:.2f} mW"),
    )

    @property
    def watts(self) -> float:
        return self.value_in(PowerUnit.WATTS)

    @property
    def milliwatts(self) -> float:
        return self.value_in(PowerUnit.MILLIWATTS)

    @property
    def kilowatts(self) -> float:
        return self.value_in(PowerUnit.KILOWATTS)

    @property
    def megawatts(self) -> float:
        return self.value_in(PowerUnit.MEGAWATTS)

    @property
    def gigawatts(self) -> float:
        return self.value_in(PowerUnit.GIGAWATTS)

    @property
    def horsepower(self) -> float:
        return self.value_in(PowerUnit.HORSEPOWER)

    @property
    def horsepower_imperial(self) -> float:
        return self.value_in(PowerUnit.HORSEPOWER_IMPERIAL)
