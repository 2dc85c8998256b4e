"""Electric charge unit definitions.

Charges are stored in coulombs. Battery capacities are usually quoted in
ampere-hours, so ``Charge`` also converts from and to Ah and mAh
(1 Ah = 3600 C, 1 mAh = 3.6 C).

Example:
    >>> pack = Charge.from_milliampere_hours(5000)
    >>> pack.coulombs  # 18000.0
    >>> pack.ampere_hours  # 5.0
"""

from __future__ import annotations

from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.metric_unit import Coulomb, MetricUnit

COULOMBS_PER_AMPERE_HOUR = 3600.0
COULOMBS_PER_MILLIAMPERE_HOUR = 3.6


class ChargeUnit(MetricUnit[Coulomb]):
    IS_FAMILY_ROOT = True
    BASE = Coulomb

    COULOMBS: ClassVar[ChargeUnit]
    MILLICOULOMBS: ClassVar[ChargeUnit]
    MICROCOULOMBS: ClassVar[ChargeUnit]
    NANOCOULOMBS: ClassVar[ChargeUnit]
    KILOCOULOMBS: ClassVar[ChargeUnit]


ChargeUnit.COULOMBS = ChargeUnit.base()
ChargeUnit.MILLICOULOMBS = ChargeUnit.milli()
ChargeUnit.MICROCOULOMBS = ChargeUnit.micro()
ChargeUnit.NANOCOULOMBS = ChargeUnit.nano()
ChargeUnit.KILOCOULOMBS = ChargeUnit.kilo()


class Charge(Measurement[ChargeUnit]):
    """Measurement of electric charge.

    Attributes:
        ELEMENTARY_CHARGE (Charge): 1.602176634e-19 C, exact since 2019.
    """

    IS_FAMILY_ROOT = True
    UNIT = ChargeUnit
    BASE_UNIT = ChargeUnit.COULOMBS
    FORMAT_SCALE = (
        (1e3, ChargeUnit.KILOCOULOMBS, "{:.2f} kC"),
        (1.0, ChargeUnit.COULOMBS, "{:.2f} C"),
        (1e-3, ChargeUnit.MILLICOULOMBS, "{:.2f} mC"),
        (1e-6, ChargeUnit.MICROCOULOMBS, "{:.2f} μC"),
        (0.0, ChargeUnit.NANOCOULOMBS, "{:.2f} nC"),
    )

    ELEMENTARY_CHARGE: ClassVar[Charge]

    @classmethod
    def from_ampere_hours(cls, ampere_hours: float) -> Charge:
        """Create a charge from a capacity in ampere-hours."""
        return cls(ampere_hours * COULOMBS_PER_AMPERE_HOUR, ChargeUnit.COULOMBS)

    @classmethod
    def from_milliampere_hours(cls, milliampere_hours: float) -> Charge:
        """Create a charge from a capacity in milliampere-hours."""
        return cls(milliampere_hours * COULOMBS_PER_MILLIAMPERE_HOUR, ChargeUnit.COULOMBS)

    @property
    def coulombs(self) -> float:
        return self.value_in(ChargeUnit.COULOMBS)

    @property
    def millicoulombs(self) -> float:
        return self.value_in(ChargeUnit.MILLICOULOMBS)

    @property
    def microcoulombs(self) -> float:
        return self.value_in(ChargeUnit.MICROCOULOMBS)

    @property
    def nanocoulombs(self) -> float:
        return self.value_in(ChargeUnit.NANOCOULOMBS)

    @property
    def kilocoulombs(self) -> float:
        return self.value_in(ChargeUnit.KILOCOULOMBS)

    @property
    def ampere_hours(self) -> float:
        return self.coulombs / COULOMBS_PER_AMPERE_HOUR

    @property
    def milliampere_hours(self) -> float:
        return self.coulombs / COULOMBS_PER_MILLIAMPERE_HOUR


Charge.ELEMENTARY_CHARGE = Charge(1.602176634e-19, ChargeUnit.COULOMBS)
