"""Energy unit definitions.

Energies are stored in joules. Two prefixable scales are provided: the joule
itself and the thermochemical calorie (4.184 J), so ``EnergyUnit.calories(
MetricPrefix.KILO)`` is the food kilocalorie.

Classes:
    EnergyUnit: Scaled energy unit (coefficient to joules + symbol).
    Energy: Measurement of energy, stored in joules.

Example:
    >>> snack = Energy(250, EnergyUnit.KILOCALORIES)
    >>> snack.kilojoules  # 1046.0
    >>> snack.formatted  # "250.0 kcal"
    >>> snack.formatted_joules  # "1.05 MJ"
"""

from __future__ import annotations

from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.metric_unit import ScaledUnit
from physunits.core.prefix import MetricPrefix

JOULES_PER_CALORIE = 4.184


class EnergyUnit(ScaledUnit):
    IS_FAMILY_ROOT = True

    JOULES: ClassVar[EnergyUnit]
    KILOJOULES: ClassVar[EnergyUnit]
    MEGAJOULES: ClassVar[EnergyUnit]
    MILLIJOULES: ClassVar[EnergyUnit]
    CALORIES: ClassVar[EnergyUnit]
    KILOCALORIES: ClassVar[EnergyUnit]
    MEGACALORIES: ClassVar[EnergyUnit]

    @classmethod
    def joules(cls, prefix: MetricPrefix = MetricPrefix.BASE) -> EnergyUnit:
        return cls(prefix.factor, prefix.symbol + "J")

    @classmethod
    def calories(cls, prefix: MetricPrefix = MetricPrefix.BASE) -> EnergyUnit:
        return cls(prefix.factor * JOULES_PER_CALORIE, prefix.symbol + "cal")


EnergyUnit.JOULES = EnergyUnit.joules()
EnergyUnit.KILOJOULES = EnergyUnit.joules(MetricPrefix.KILO)
EnergyUnit.MEGAJOULES = EnergyUnit.joules(MetricPrefix.MEGA)
EnergyUnit.MILLIJOULES = EnergyUnit.joules(MetricPrefix.MILLI)
EnergyUnit.CALORIES = EnergyUnit.calories()
EnergyUnit.KILOCALORIES = EnergyUnit.calories(MetricPrefix.KILO)
EnergyUnit.MEGACALORIES = EnergyUnit.calories(MetricPrefix.MEGA)


class Energy(Measurement[EnergyUnit]):
    """Measurement of energy (SI unit: joule).

    ``formatted`` uses calories, as nutrition labels do; ``formatted_joules``
    uses the joule scale.

    Commonly used for:
    - Work done by a force over a distance
    - Battery and fuel energy budgets (``Power * Duration``)
    """

    IS_FAMILY_ROOT = True
    UNIT = EnergyUnit
    BASE_UNIT = EnergyUnit.JOULES
    FORMAT_SCALE = (
        (JOULES_PER_CALORIE * 1e6, EnergyUnit.MEGACALORIES, "{:.1f} Mcal"),
        (JOULES_PER_CALORIE * 1e3, EnergyUnit.KILOCALORIES, "{:.1f} kcal"),
        (0.0, EnergyUnit.CALORIES, "{:.1f} cal"),
    )
    JOULE_SCALE = (
        (1e6, EnergyUnit.MEGAJOULES, "{:.2f} MJ"),
        (1e3, EnergyUnit.KILOJOULES, "{:.2f} kJ"),
        (0.0, EnergyUnit.JOULES, "{:.2f} J"),
    )

    @property
    def joules(self) -> float:
        return self.value_in(EnergyUnit.JOULES)

    @property
    def kilojoules(self) -> float:
        return self.value_in(EnergyUnit.KILOJOULES)

    @property
    def megajoules(self) -> float:
        return self.value_in(EnergyUnit.MEGAJOULES)

    @property
    def millijoules(self) -> float:
        return self.value_in(EnergyUnit.MILLIJOULES)

    @property
    def calories(self) -> float:
        return self.value_in(EnergyUnit.CALORIES)

    @property
    def kilocalories(self) -> float:
        return self.value_in(EnergyUnit.KILOCALORIES)

    @property
    def formatted_joules(self) -> str:
        return self.format_scaled(self.JOULE_SCALE)
