"""Velocity and speed unit definitions.

This module provides speed units for ground and air travel. All speeds are
stored in meters per second (the SI unit), while supporting input and display
in kilometers per hour, miles per hour and knots.

Classes:
    SpeedUnit: Enumerated speed unit.
    Speed: Measurement of speed, stored in m/s.

Example:
    >>> cruise = Speed(72, SpeedUnit.KILOMETERS_PER_HOUR)
    >>> print(cruise)  # "20 m/s"
    >>> cruise.knots  # 38.87...
"""

from __future__ import annotations

from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.unit_base import UnitEnum


class SpeedUnit(UnitEnum):
    METERS_PER_SECOND = (1.0, "m/s")
    KILOMETERS_PER_HOUR = (1000.0 / 3600.0, "km/h")
    MILES_PER_HOUR = (1609.344 / 3600.0, "mph")
    KNOTS = (1852.0 / 3600.0, "kn")


class Speed(Measurement[SpeedUnit]):
    """Measurement of speed (SI unit: meter per second).

    Attributes:
        SPEED_OF_LIGHT (Speed): 299 792 458 m/s in vacuum.
        SPEED_OF_SOUND (Speed): 343 m/s in dry air at 20 °C.

    Example:
        >>> Speed(10, SpeedUnit.METERS_PER_SECOND).kilometers_per_hour
        36.0
    """

    IS_FAMILY_ROOT = True
    UNIT = SpeedUnit
    BASE_UNIT = SpeedUnit.METERS_PER_SECOND
    FORMAT_SCALE = (
        (100.0, SpeedUnit.KILOMETERS_PER_HOUR, "{:.1f} km/h"),
        (1.0, SpeedUnit.METERS_PER_SECOND, "{:.2f} m/s"),
        (0.0, SpeedUnit.METERS_PER_SECOND, "{:.3f} m/s"),
    )

    SPEED_OF_LIGHT: ClassVar[Speed]
    SPEED_OF_SOUND: ClassVar[Speed]

    @property
    def meters_per_second(self) -> float:
        return self.value_in(SpeedUnit.METERS_PER_SECOND)

    @property
    def kilometers_per_hour(self) -> float:
        return self.value_in(SpeedUnit.KILOMETERS_PER_HOUR)

    @property
    def miles_per_hour(self) -> float:
        return self.value_in(SpeedUnit.MILES_PER_HOUR)

    @property
    def knots(self) -> float:
        return self.value_in(SpeedUnit.KNOTS)


Speed.SPEED_OF_LIGHT = Speed(299_792_458, SpeedUnit.METERS_PER_SECOND)
Speed.SPEED_OF_SOUND = Speed(343, SpeedUnit.METERS_PER_SECOND)
