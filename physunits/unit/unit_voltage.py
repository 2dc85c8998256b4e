"""Voltage unit definitions.

Voltages are stored in volts. The module also names a few reference supply
voltages (USB bus, household mains).

Example:
    >>> Voltage(3300, VoltageUnit.MILLIVOLTS).volts
    3.3
    >>> Voltage.HOUSEHOLD_EU.formatted
    '230.00 V'
"""

from __future__ import annotations

from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.metric_unit import MetricUnit, Volt


class VoltageUnit(MetricUnit[Volt]):
    IS_FAMILY_ROOT = True
    BASE = Volt

    VOLTS: ClassVar[VoltageUnit]
    MICROVOLTS: ClassVar[VoltageUnit]
    MILLIVOLTS: ClassVar[VoltageUnit]
    KILOVOLTS: ClassVar[VoltageUnit]
    MEGAVOLTS: ClassVar[VoltageUnit]


VoltageUnit.VOLTS = VoltageUnit.base()
VoltageUnit.MICROVOLTS = VoltageUnit.micro()
VoltageUnit.MILLIVOLTS = VoltageUnit.milli()
VoltageUnit.KILOVOLTS = VoltageUnit.kilo()
VoltageUnit.MEGAVOLTS = VoltageUnit.mega()


class Voltage(Measurement[VoltageUnit]):
    IS_FAMILY_ROOT = True
    UNIT = VoltageUnit
    BASE_UNIT = VoltageUnit.VOLTS
    FORMAT_SCALE = (
        (1e6, VoltageUnit.MEGAVOLTS, "{:.2f} MV"),
        (1e3, VoltageUnit.KILOVOLTS, "{:.2f} kV"),
        (1.0, VoltageUnit.VOLTS, "{:.2f} V"),
        (1e-3, VoltageUnit.MILLIVOLTS, "{:.2f} mV"),
        (0.0, VoltageUnit.MICROVOLTS, "{:.1f} μV"),
    )

    USB: ClassVar[Voltage]
    HOUSEHOLD_JAPAN: ClassVar[Voltage]
    HOUSEHOLD_US: ClassVar[Voltage]
    HOUSEHOLD_EU: ClassVar[Voltage]

    @property
    def volts(self) -> float:
        return self.value_in(VoltageUnit.VOLTS)

    @property
    def microvolts(self) -> float:
        return self.value_in(VoltageUnit.MICROVOLTS)

    @property
    def millivolts(self) -> float:
        return self.value_in(VoltageUnit.MILLIVOLTS)

    @property
    def kilovolts(self) -> float:
        return self.value_in(VoltageUnit.KILOVOLTS)

    @property
    def megavolts(self) -> float:
        return self.value_in(VoltageUnit.MEGAVOLTS)


Voltage.USB = Voltage(5, VoltageUnit.VOLTS)
Voltage.HOUSEHOLD_JAPAN = Voltage(100, VoltageUnit.VOLTS)
Voltage.HOUSEHOLD_US = Voltage(120, VoltageUnit.VOLTS)
Voltage.HOUSEHOLD_EU = Voltage(230, VoltageUnit.VOLTS)
