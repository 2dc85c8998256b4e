"""Force unit definitions.

Forces are stored in newtons. Besides the metric multiples the module knows
the gravitational units kilogram-force and pound-force, and the CGS dyne.

Classes:
    ForceUnit: Enumerated force unit.
    Force: Measurement of force, stored in newtons.

Example:
    >>> thrust = Force(2, ForceUnit.KILOGRAMS_FORCE)
    >>> thrust.newtons  # 19.6133
"""

from __future__ import annotations

from physunits.core.measurement import Measurement
from physunits.core.unit_base import UnitEnum

from .unit_acceleration import STANDARD_GRAVITY_VALUE


class ForceUnit(UnitEnum):
    NEWTONS = (1.0, "N")
    MILLINEWTONS = (1e-3, "mN")
    KILONEWTONS = (1e3, "kN")
    MEGANEWTONS = (1e6, "MN")
    KILOGRAMS_FORCE = (STANDARD_GRAVITY_VALUE, "kgf")
    POUNDS_FORCE = (4.4482216152605, "lbf")
    DYNES = (1e-5, "dyn")


class Force(Measurement[ForceUnit]):
    IS_FAMILY_ROOT = True
    UNIT = ForceUnit
    BASE_UNIT = ForceUnit.NEWTONS
    FORMAT_SCALE = (
        (1e6, ForceUnit.MEGANEWTONS, "{:.2f} MN"),
        (1e3, ForceUnit.KILONEWTONS, "{:.2f} kN"),
        (1.0, ForceUnit.NEWTONS, "{:.2f} N"),
        (0.0, ForceUnit.MILLINEWTONS, "{:.2f} mN"),
    )

    @property
    def newtons(self) -> float:
        return self.value_in(ForceUnit.NEWTONS)

    @property
    def millinewtons(self) -> float:
        return self.value_in(ForceUnit.MILLINEWTONS)

    @property
    def kilonewtons(self) -> float:
        return self.value_in(ForceUnit.KILONEWTONS)

    @property
    def meganewtons(self) -> float:
        return self.value_in(ForceUnit.MEGANEWTONS)

    @property
    def kilograms_force(self) -> float:
        return self.value_in(ForceUnit.KILOGRAMS_FORCE)

    @property
    def pounds_force(self) -> float:
        return self.value_in(ForceUnit.POUNDS_FORCE)

    @property
    def dynes(self) -> float:
        return self.value_in(ForceUnit.DYNES)
