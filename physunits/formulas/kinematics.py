"""Kinematic relations between length, speed, acceleration and duration.

    Length       = Speed × Duration
    Speed        = Length / Duration
    Duration     = Length / Speed
    Acceleration = Speed / Duration
    Speed        = Acceleration × Duration
    Duration     = Speed / Acceleration

All families involved store SI base units (m, s, m/s, m/s²), so no
reconciliation factor is needed.
"""

from __future__ import annotations

import operator

from physunits.core.measurement import ieee_divide
from physunits.core.relations import relation
from physunits.unit.unit_acceleration import Acceleration
from physunits.unit.unit_length import Length
from physunits.unit.unit_speed import Speed
from physunits.unit.unit_time import Duration


@relation(operator.mul, Speed, Duration, commutative=True)
def distance(speed: Speed, duration: Duration) -> Length:
    return Length.from_base(float(speed) * float(duration))


@relation(operator.truediv, Length, Duration)
def average_speed(length: Length, duration: Duration) -> Speed:
    return Speed.from_base(ieee_divide(float(length), float(duration)))


@relation(operator.truediv, Length, Speed)
def travel_time(length: Length, speed: Speed) -> Duration:
    return Duration.from_base(ieee_divide(float(length), float(speed)))


@relation(operator.truediv, Speed, Duration)
def acceleration(speed: Speed, duration: Duration) -> Acceleration:
    return Acceleration.from_base(ieee_divide(float(speed), float(duration)))


@relation(operator.mul, Acceleration, Duration, commutative=True)
def speed_gain(acceleration: Acceleration, duration: Duration) -> Speed:
    return Speed.from_base(float(acceleration) * float(duration))


@relation(operator.truediv, Speed, Acceleration)
def time_to_reach(speed: Speed, acceleration: Acceleration) -> Duration:
    return Duration.from_base(ieee_divide(float(speed), float(acceleration)))
