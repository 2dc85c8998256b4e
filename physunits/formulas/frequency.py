"""Rotational relations between frequency, angle, angular speed and length.

    Angle        = Frequency × Duration      (θ = 2πft)
    AngularSpeed = Angle / Duration
    Angle        = AngularSpeed × Duration
    Duration     = Angle / AngularSpeed
    Speed        = AngularSpeed × Length     (v = ωr)
    AngularSpeed = Speed / Length
    Length       = Speed / AngularSpeed

Radians are dimensionless, so ``rad/s × m`` is a speed in m/s. Conversions
between a frequency and its period or angular speed are properties of
``Frequency``, ``Duration`` and ``AngularSpeed``.
"""

from __future__ import annotations

import math
import operator

from physunits.core.measurement import ieee_divide
from physunits.core.relations import relation
from physunits.unit.unit_angle import Angle
from physunits.unit.unit_angular_speed import AngularSpeed
from physunits.unit.unit_frequency import Frequency
from physunits.unit.unit_length import Length
from physunits.unit.unit_speed import Speed
from physunits.unit.unit_time import Duration

TWO_PI = 2.0 * math.pi


@relation(operator.mul, Frequency, Duration, commutative=True)
def phase(frequency: Frequency, duration: Duration) -> Angle:
    return Angle.from_base(float(frequency) * float(duration) * TWO_PI)


@relation(operator.truediv, Angle, Duration)
def angular_speed(angle: Angle, duration: Duration) -> AngularSpeed:
    return AngularSpeed.from_base(ieee_divide(float(angle), float(duration)))


@relation(operator.mul, AngularSpeed, Duration, commutative=True)
def swept_angle(angular_speed: AngularSpeed, duration: Duration) -> Angle:
    return Angle.from_base(float(angular_speed) * float(duration))


@relation(operator.truediv, Angle, AngularSpeed)
def rotation_time(angle: Angle, angular_speed: AngularSpeed) -> Duration:
    return Duration.from_base(ieee_divide(float(angle), float(angular_speed)))


@relation(operator.mul, AngularSpeed, Length, commutative=True)
def tangential_speed(angular_speed: AngularSpeed, radius: Length) -> Speed:
    return Speed.from_base(float(angular_speed) * float(radius))


@relation(operator.truediv, Speed, Length)
def angular_speed_from_speed(speed: Speed, radius: Length) -> AngularSpeed:
    return AngularSpeed.from_base(ieee_divide(float(speed), float(radius)))


@relation(operator.truediv, Speed, AngularSpeed)
def radius_from_speed(speed: Speed, angular_speed: AngularSpeed) -> Length:
    return Length.from_base(ieee_divide(float(speed), float(angular_speed)))
