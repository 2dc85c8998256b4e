"""Volume unit definitions (stored in liters)."""

from __future__ import annotations

from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.metric_unit import Liter, MetricUnit
from physunits.core.prefix import MetricPrefix


class VolumeUnit(MetricUnit[Liter]):
    IS_FAMILY_ROOT = True
    BASE = Liter

    LITERS: ClassVar[VolumeUnit]
    MILLILITERS: ClassVar[VolumeUnit]
    MICROLITERS: ClassVar[VolumeUnit]
    CENTILITERS: ClassVar[VolumeUnit]
    DECILITERS: ClassVar[VolumeUnit]
    KILOLITERS: ClassVar[VolumeUnit]


VolumeUnit.LITERS = VolumeUnit.base()
VolumeUnit.MILLILITERS = VolumeUnit.milli()
VolumeUnit.MICROLITERS = VolumeUnit.micro()
VolumeUnit.CENTILITERS = VolumeUnit.centi()
VolumeUnit.DECILITERS = VolumeUnit(MetricPrefix.DECI)
VolumeUnit.KILOLITERS = VolumeUnit.kilo()


class Volume(Measurement[VolumeUnit]):
    """Measurement of volume.

    A kiloliter is one cubic meter, so ``cubic_meters`` reads the value in
    kiloliters.
    """

    IS_FAMILY_ROOT = True
    UNIT = VolumeUnit
    BASE_UNIT = VolumeUnit.LITERS
    FORMAT_SCALE = (
        (1e3, VolumeUnit.KILOLITERS, "{:.2f} kL"),
        (1.0, VolumeUnit.LITERS, "{:.2f} L"),
        (1e-3, VolumeUnit.MILLILITERS, "{:.1f} mL"),
        (0.0, VolumeUnit.MICROLITERS, "{:.1f} μL"),
    )

    @property
    def liters(self) -> float:
        return self.value_in(VolumeUnit.LITERS)

    @property
    def milliliters(self) -> float:
        return self.value_in(VolumeUnit.MILLILITERS)

    @property
    def microliters(self) -> float:
        return self.value_in(VolumeUnit.MICROLITERS)

    @property
    def centiliters(self) -> float:
        return self.value_in(VolumeUnit.CENTILITERS)

    @property
    def deciliters(self) -> float:
        return self.value_in(VolumeUnit.DECILITERS)

    @property
    def kiloliters(self) -> float:
        return self.value_in(VolumeUnit.KILOLITERS)

    @property
    def cubic_meters(self) -> float:
        return self.kiloliters
