"""Acceleration unit definitions (stored in m/s²)."""

from __future__ import annotations

from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.unit_base import UnitEnum

STANDARD_GRAVITY_VALUE = 9.80665


class AccelerationUnit(UnitEnum):
    METERS_PER_SECOND_SQUARED = (1.0, "m/s²")
    STANDARD_GRAVITY = (STANDARD_GRAVITY_VALUE, "g")
    GAL = (0.01, "Gal")
    MILLIGAL = (1e-5, "mGal")


class Acceleration(Measurement[AccelerationUnit]):
    """Measurement of acceleration.

    Attributes:
        GRAVITY (Acceleration): 1 g, standard gravity at sea level.
        MOON_GRAVITY (Acceleration): 1.62 m/s².
        MARS_GRAVITY (Acceleration): 3.72 m/s².
    """

    IS_FAMILY_ROOT = True
    UNIT = AccelerationUnit
    BASE_UNIT = AccelerationUnit.METERS_PER_SECOND_SQUARED
    FORMAT_SCALE = (
        (STANDARD_GRAVITY_VALUE, AccelerationUnit.STANDARD_GRAVITY, "{:.2f} g"),
        (0.01, AccelerationUnit.METERS_PER_SECOND_SQUARED, "{:.3f} m/s²"),
        (0.0, AccelerationUnit.MILLIGAL, "{:.1f} mGal"),
    )

    GRAVITY: ClassVar[Acceleration]
    MOON_GRAVITY: ClassVar[Acceleration]
    MARS_GRAVITY: ClassVar[Acceleration]

    @property
    def meters_per_second_squared(self) -> float:
        return self.value_in(AccelerationUnit.METERS_PER_SECOND_SQUARED)

    @property
    def standard_gravity(self) -> float:
        return self.value_in(AccelerationUnit.STANDARD_GRAVITY)

    @property
    def gal(self) -> float:
        return self.value_in(AccelerationUnit.GAL)

    @property
    def milligal(self) -> float:
        return self.value_in(AccelerationUnit.MILLIGAL)


Acceleration.GRAVITY = Acceleration(1, AccelerationUnit.STANDARD_GRAVITY)
Acceleration.MOON_GRAVITY = Acceleration(1.62, AccelerationUnit.METERS_PER_SECOND_SQUARED)
Acceleration.MARS_GRAVITY = Acceleration(3.72, AccelerationUnit.METERS_PER_SECOND_SQUARED)
