"""Angular speed unit definitions (stored in radians per second).

Example:
    >>> motor = AngularSpeed(3000, AngularSpeedUnit.RPM)
    >>> motor.hertz  # 50.0
    >>> motor.formatted  # "3000.0 rpm"
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar

from physunits.core.measurement import Measurement
from physunits.core.unit_base import UnitEnum

if TYPE_CHECKING:
    from .unit_frequency import Frequency


class AngularSpeedUnit(UnitEnum):
    RADIANS_PER_SECOND = (1.0, "rad/s")
    DEGREES_PER_SECOND = (math.pi / 180.0, "°/s")
    RPM = (2.0 * math.pi / 60.0, "rpm")
    RPS = (2.0 * math.pi, "rps")


class AngularSpeed(Measurement[AngularSpeedUnit]):
    """Measurement of angular speed.

    Attributes:
        EARTH_ROTATION (AngularSpeed): 7.2921159e-5 rad/s (sidereal).
        CLOCK_SECOND_HAND (AngularSpeed): 1 rpm.
        CLOCK_MINUTE_HAND (AngularSpeed): 1/60 rpm.
    """

    IS_FAMILY_ROOT = True
    UNIT = AngularSpeedUnit
    BASE_UNIT = AngularSpeedUnit.RADIANS_PER_SECOND
    FORMAT_SCALE = (
        (2.0 * math.pi / 60.0, AngularSpeedUnit.RPM, "{:.1f} rpm"),
        (0.0, AngularSpeedUnit.RADIANS_PER_SECOND, "{:.3f} rad/s"),
    )

    EARTH_ROTATION: ClassVar[AngularSpeed]
    CLOCK_SECOND_HAND: ClassVar[AngularSpeed]
    CLOCK_MINUTE_HAND: ClassVar[AngularSpeed]

    @classmethod
    def from_frequency(cls, frequency: Frequency) -> AngularSpeed:
        """Angular speed of a rotation at ``frequency`` (ω = 2πf)."""
        from .unit_frequency import Frequency

        Frequency._check_same_root(type(frequency))
        return cls.from_base(float(frequency) * 2.0 * math.pi)

    @property
    def radians_per_second(self) -> float:
        return self.value_in(AngularSpeedUnit.RADIANS_PER_SECOND)

    @property
    def degrees_per_second(self) -> float:
        return self.value_in(AngularSpeedUnit.DEGREES_PER_SECOND)

    @property
    def rpm(self) -> float:
        return self.value_in(AngularSpeedUnit.RPM)

    @property
    def rps(self) -> float:
        return self.value_in(AngularSpeedUnit.RPS)

    @property
    def hertz(self) -> float:
        """Revolutions per second, numerically equal to the frequency in Hz."""
        return self.rps

    @property
    def as_frequency(self) -> Frequency:
        """Rotation frequency (f = ω / 2π)."""
        from .unit_frequency import Frequency

        return Frequency.from_angular_speed(self)


AngularSpeed.EARTH_ROTATION = AngularSpeed(7.2921159e-5, AngularSpeedUnit.RADIANS_PER_SECOND)
AngularSpeed.CLOCK_SECOND_HAND = AngularSpeed(1, AngularSpeedUnit.RPM)
AngularSpeed.CLOCK_MINUTE_HAND = AngularSpeed(1.0 / 60.0, AngularSpeedUnit.RPM)
