"""Pressure unit definitions.

Pressures are stored in pascals. Meteorological (hPa, mbar), engineering
(bar, psi) and physical (atm, Torr) scales are all supported.

Example:
    >>> tyre = Pressure(32, PressureUnit.PSI)
    >>> round(tyre.bars, 3)  # 2.206
    >>> Pressure.STANDARD_ATMOSPHERE.hectopascals  # 1013.25
"""

from __future__ import annotations

from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.unit_base import UnitEnum


class PressureUnit(UnitEnum):
    PASCALS = (1.0, "Pa")
    HECTOPASCALS = (1e2, "hPa")
    KILOPASCALS = (1e3, "kPa")
    MEGAPASCALS = (1e6, "MPa")
    BARS = (1e5, "bar")
    MILLIBARS = (1e2, "mbar")
    ATMOSPHERES = (101325.0, "atm")
    TORR = (133.32236842, "Torr")
    PSI = (6894.757293168, "psi")


class Pressure(Measurement[PressureUnit]):
    """Measurement of pressure (SI unit: pascal).

    Attributes:
        STANDARD_ATMOSPHERE (Pressure): 1 atm = 101 325 Pa.
        VACUUM (Pressure): 0 Pa.
    """

    IS_FAMILY_ROOT = True
    UNIT = PressureUnit
    BASE_UNIT = PressureUnit.PASCALS
    FORMAT_SCALE = (
        (1e6, PressureUnit.MEGAPASCALS, "{:.2f} MPa"),
        (1e5, PressureUnit.BARS, "{:.2f} bar"),
        (1e3, PressureUnit.KILOPASCALS, "{:.2f} kPa"),
        (1e2, PressureUnit.HECTOPASCALS, "{:.1f} hPa"),
        (0.0, PressureUnit.PASCALS, "{:.2f} Pa"),
    )

    STANDARD_ATMOSPHERE: ClassVar[Pressure]
    VACUUM: ClassVar[Pressure]

    @property
    def pascals(self) -> float:
        return self.value_in(PressureUnit.PASCALS)

    @property
    def hectopascals(self) -> float:
        return self.value_in(PressureUnit.HECTOPASCALS)

    @property
    def kilopascals(self) -> float:
        return self.value_in(PressureUnit.KILOPASCALS)

    @property
    def megapascals(self) -> float:
        return self.value_in(PressureUnit.MEGAPASCALS)

    @property
    def bars(self) -> float:
        return self.value_in(PressureUnit.BARS)

    @property
    def millibars(self) -> float:
        return self.value_in(PressureUnit.MILLIBARS)

    @property
    def atmospheres(self) -> float:
        return self.value_in(PressureUnit.ATMOSPHERES)

    @property
    def torr(self) -> float:
        return self.value_in(PressureUnit.TORR)

    @property
    def psi(self) -> float:
        return self.value_in(PressureUnit.PSI)


Pressure.STANDARD_ATMOSPHERE = Pressure(1, PressureUnit.ATMOSPHERES)
Pressure.VACUUM = Pressure(0, PressureUnit.PASCALS)
