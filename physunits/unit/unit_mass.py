"""Mass unit definitions.

Mass values are stored in grams, the base of the metric mass units, so that
every prefix (kilo, milli, micro, ...) is an exact power of ten away from the
stored value. Note that the SI base unit of mass is the kilogram: formulas
producing newtons or joules divide by 1000 (see ``physunits.formulas``).

Classes:
    MassUnit: Metric mass unit (prefix + gram).
    Mass: Measurement of mass, stored in grams.

Example:
    >>> payload = Mass(2.5, MassUnit.KILOGRAMS)
    >>> print(payload)  # "2500 g"
    >>> payload.kilograms  # 2.5
    >>> payload.formatted  # "2.50 kg"
"""

from __future__ import annotations

from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.metric_unit import Gram, MetricUnit


class MassUnit(MetricUnit[Gram]):
    """Metric mass unit; ``TONNES`` is an alias of ``MEGAGRAMS``."""

    IS_FAMILY_ROOT = True
    BASE = Gram

    GRAMS: ClassVar[MassUnit]
    KILOGRAMS: ClassVar[MassUnit]
    MILLIGRAMS: ClassVar[MassUnit]
    MICROGRAMS: ClassVar[MassUnit]
    NANOGRAMS: ClassVar[MassUnit]
    MEGAGRAMS: ClassVar[MassUnit]
    TONNES: ClassVar[MassUnit]


MassUnit.GRAMS = MassUnit.base()
MassUnit.KILOGRAMS = MassUnit.kilo()
MassUnit.MILLIGRAMS = MassUnit.milli()
MassUnit.MICROGRAMS = MassUnit.micro()
MassUnit.NANOGRAMS = MassUnit.nano()
MassUnit.MEGAGRAMS = MassUnit.mega()
MassUnit.TONNES = MassUnit.MEGAGRAMS


class Mass(Measurement[MassUnit]):
    """Measurement of mass.

    Commonly used for:
    - Payloads and vehicle masses
    - Inputs of ``Force = Mass * Acceleration``

    Example:
        >>> Mass(1500, MassUnit.GRAMS).kilograms
        1.5
    """

    IS_FAMILY_ROOT = True
    UNIT = MassUnit
    BASE_UNIT = MassUnit.GRAMS
    FORMAT_SCALE = (
        (1e6, MassUnit.TONNES, "{:.2f} t"),
        (1e3, MassUnit.KILOGRAMS, "{:.2f} kg"),
        (1.0, MassUnit.GRAMS, "{:.2f} g"),
        (1e-3, MassUnit.MILLIGRAMS, "{:.2f} mg"),
        (0.0, MassUnit.MICROGRAMS, "{:.2f} μg"),
    )

    @property
    def grams(self) -> float:
        return self.value_in(MassUnit.GRAMS)

    @property
    def kilograms(self) -> float:
        return self.value_in(MassUnit.KILOGRAMS)

    @property
    def milligrams(self) -> float:
        return self.value_in(MassUnit.MILLIGRAMS)

    @property
    def micrograms(self) -> float:
        return self.value_in(MassUnit.MICROGRAMS)

    @property
    def tonnes(self) -> float:
        return self.value_in(MassUnit.TONNES)
