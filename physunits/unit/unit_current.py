"""Electric current unit definitions (stored in amperes)."""

from __future__ import annotations

from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.metric_unit import Ampere, MetricUnit


class CurrentUnit(MetricUnit[Ampere]):
    IS_FAMILY_ROOT = True
    BASE = Ampere

    AMPERES: ClassVar[CurrentUnit]
    NANOAMPERES: ClassVar[CurrentUnit]
    MICROAMPERES: ClassVar[CurrentUnit]
    MILLIAMPERES: ClassVar[CurrentUnit]
    KILOAMPERES: ClassVar[CurrentUnit]


CurrentUnit.AMPERES = CurrentUnit.base()
CurrentUnit.NANOAMPERES = CurrentUnit.nano()
CurrentUnit.MICROAMPERES = CurrentUnit.micro()
CurrentUnit.MILLIAMPERES = CurrentUnit.milli()
CurrentUnit.KILOAMPERES = CurrentUnit.kilo()


class Current(Measurement[CurrentUnit]):
    """Measurement of electric current.

    Attributes:
        USB2_MAX (Current): 500 mA, USB 2.0 port limit.
        USB3_MAX (Current): 900 mA, USB 3.0 port limit.
        USB_PD_MAX (Current): 5 A, USB Power Delivery limit.
    """

    IS_FAMILY_ROOT = True
    UNIT = CurrentUnit
    BASE_UNIT = CurrentUnit.AMPERES
    FORMAT_SCALE = (
        (1e3, CurrentUnit.KILOAMPERES, "{:.2f} kA"),
        (1.0, CurrentUnit.AMPERES, "{:.2f} A"),
        (1e-3, CurrentUnit.MILLIAMPERES, "{:.2f} mA"),
        (1e-6, CurrentUnit.MICROAMPERES, "{:.1f} μA"),
        (0.0, CurrentUnit.NANOAMPERES, "{:.1f} nA"),
    )

    USB2_MAX: ClassVar[Current]
    USB3_MAX: ClassVar[Current]
    USB_PD_MAX: ClassVar[Current]

    @property
    def amperes(self) -> float:
        return self.value_in(CurrentUnit.AMPERES)

    @property
    def nanoamperes(self) -> float:
        return self.value_in(CurrentUnit.NANOAMPERES)

    @property
    def microamperes(self) -> float:
        return self.value_in(CurrentUnit.MICROAMPERES)

    @property
    def milliamperes(self) -> float:
        return self.value_in(CurrentUnit.MILLIAMPERES)

    @property
    def kiloamperes(self) -> float:
        return self.value_in(CurrentUnit.KILOAMPERES)


Current.USB2_MAX = Current(500, CurrentUnit.MILLIAMPERES)
Current.USB3_MAX = Current(900, CurrentUnit.MILLIAMPERES)
Current.USB_PD_MAX = Current(5, CurrentUnit.AMPERES)
