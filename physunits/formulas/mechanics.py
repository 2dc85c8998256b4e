"""Mechanical relations: force, work, power and pressure.

    Force        = Mass × Acceleration
    Acceleration = Force / Mass
    Mass         = Force / Acceleration
    Energy       = Force × Length
    Force        = Energy / Length
    Length       = Energy / Force
    Power        = Energy / Duration
    Energy       = Power × Duration
    Duration     = Energy / Power
    Power        = Force × Speed
    Force        = Power / Speed
    Speed        = Power / Force
    Pressure     = Force / Area
    Force        = Pressure × Area
    Area         = Force / Pressure

Masses are stored in grams while the newton is defined on the kilogram, so
every relation involving ``Mass`` converts through ``GRAMS_PER_KILOGRAM``.
"""

from __future__ import annotations

import operator

from physunits.core.measurement import ieee_divide
from physunits.core.relations import relation
from physunits.unit.unit_acceleration import Acceleration
from physunits.unit.unit_area import Area
from physunits.unit.unit_energy import Energy
from physunits.unit.unit_force import Force
from physunits.unit.unit_length import Length
from physunits.unit.unit_mass import Mass
from physunits.unit.unit_power import Power
from physunits.unit.unit_pressure import Pressure
from physunits.unit.unit_speed import Speed
from physunits.unit.unit_time import Duration

GRAMS_PER_KILOGRAM = 1000.0


# F = m·a
@relation(operator.mul, Mass, Acceleration, commutative=True)
def force(mass: Mass, acceleration: Acceleration) -> Force:
    return Force.from_base(float(mass) / GRAMS_PER_KILOGRAM * float(acceleration))


@relation(operator.truediv, Force, Mass)
def acceleration_from_force(force: Force, mass: Mass) -> Acceleration:
    return Acceleration.from_base(ieee_divide(float(force), float(mass) / GRAMS_PER_KILOGRAM))


@relation(operator.truediv, Force, Acceleration)
def mass_from_force(force: Force, acceleration: Acceleration) -> Mass:
    return Mass.from_base(ieee_divide(float(force), float(acceleration)) * GRAMS_PER_KILOGRAM)


# W = F·d
@relation(operator.mul, Force, Length, commutative=True)
def work(force: Force, length: Length) -> Energy:
    return Energy.from_base(float(force) * float(length))


@relation(operator.truediv, Energy, Length)
def force_from_work(energy: Energy, length: Length) -> Force:
    return Force.from_base(ieee_divide(float(energy), float(length)))


@relation(operator.truediv, Energy, Force)
def distance_from_work(energy: Energy, force: Force) -> Length:
    return Length.from_base(ieee_divide(float(energy), float(force)))


# P = E/t
@relation(operator.truediv, Energy, Duration)
def power_from_energy(energy: Energy, duration: Duration) -> Power:
    return Power.from_base(ieee_divide(float(energy), float(duration)))


@relation(operator.mul, Power, Duration, commutative=True)
def energy_from_power(power: Power, duration: Duration) -> Energy:
    return Energy.from_base(float(power) * float(duration))


@relation(operator.truediv, Energy, Power)
def duration_from_energy(energy: Energy, power: Power) -> Duration:
    return Duration.from_base(ieee_divide(float(energy), float(power)))


# P = F·v
@relation(operator.mul, Force, Speed, commutative=True)
def power_from_force(force: Force, speed: Speed) -> Power:
    return Power.from_base(float(force) * float(speed))


@relation(operator.truediv, Power, Speed)
def force_from_power(power: Power, speed: Speed) -> Force:
    return Force.from_base(ieee_divide(float(power), float(speed)))


@relation(operator.truediv, Power, Force)
def speed_from_power(power: Power, force: Force) -> Speed:
    return Speed.from_base(ieee_divide(float(power), float(force)))


# p = F/A
@relation(operator.truediv, Force, Area)
def pressure(force: Force, area: Area) -> Pressure:
    return Pressure.from_base(ieee_divide(float(force), float(area)))


@relation(operator.mul, Pressure, Area, commutative=True)
def force_from_pressure(pressure: Pressure, area: Area) -> Force:
    return Force.from_base(float(pressure) * float(area))


@relation(operator.truediv, Force, Pressure)
def area_from_pressure(force: Force, pressure: Pressure) -> Area:
    return Area.from_base(ieee_divide(float(force), float(pressure)))
