"""Electrical resistance unit definitions (stored in ohms).

Classes:
    ResistanceUnit: Metric resistance unit (prefix + ohm).
    Resistance: Measurement of resistance, with common resistor values.
"""

from __future__ import annotations

from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.metric_unit import MetricUnit, Ohm


class ResistanceUnit(MetricUnit[Ohm]):
    IS_FAMILY_ROOT = True
    BASE = Ohm

    OHMS: ClassVar[ResistanceUnit]
    MILLIOHMS: ClassVar[ResistanceUnit]
    KILOHMS: ClassVar[ResistanceUnit]
    MEGAOHMS: ClassVar[ResistanceUnit]
    GIGAOHMS: ClassVar[ResistanceUnit]


ResistanceUnit.OHMS = ResistanceUnit.base()
ResistanceUnit.MILLIOHMS = ResistanceUnit.milli()
ResistanceUnit.KILOHMS = ResistanceUnit.kilo()
ResistanceUnit.MEGAOHMS = ResistanceUnit.mega()
ResistanceUnit.GIGAOHMS = ResistanceUnit.giga()


class Resistance(Measurement[ResistanceUnit]):
    """Measurement of electrical resistance.

    Attributes:
        LED_220 (Resistance): 220 Ω, a typical LED series resistor.
        PULL_UP_10K (Resistance): 10 kΩ pull-up.
        PULL_UP_4K7 (Resistance): 4.7 kΩ pull-up (I²C).
    """

    IS_FAMILY_ROOT = True
    UNIT = ResistanceUnit
    BASE_UNIT = ResistanceUnit.OHMS
    FORMAT_SCALE = (
        (1e9, ResistanceUnit.GIGAOHMS, "{:.2f} GΩ"),
        (1e6, ResistanceUnit.MEGAOHMS, "{:.2f} MΩ"),
        (1e3, ResistanceUnit.KILOHMS, "{:.2f} kΩ"),
        (1.0, ResistanceUnit.OHMS, "{:.2f} Ω"),
        (0.0, ResistanceUnit.MILLIOHMS, "{:.2f} mΩ"),
    )

    LED_220: ClassVar[Resistance]
    PULL_UP_10K: ClassVar[Resistance]
    PULL_UP_4K7: ClassVar[Resistance]

    @property
    def ohms(self) -> float:
        return self.value_in(ResistanceUnit.OHMS)

    @property
    def milliohms(self) -> float:
        return self.value_in(ResistanceUnit.MILLIOHMS)

    @property
    def kilohms(self) -> float:
        return self.value_in(ResistanceUnit.KILOHMS)

    @property
    def megaohms(self) -> float:
        return self.value_in(ResistanceUnit.MEGAOHMS)

    @property
    def gigaohms(self) -> float:
        return self.value_in(ResistanceUnit.GIGAOHMS)


Resistance.LED_220 = Resistance(220, ResistanceUnit.OHMS)
Resistance.PULL_UP_10K = Resistance(10, ResistanceUnit.KILOHMS)
Resistance.PULL_UP_4K7 = Resistance(4.7, ResistanceUnit.KILOHMS)
