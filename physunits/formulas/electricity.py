"""Electrical relations: Ohm's law, electrical power and charge.

    Power      = Voltage × Current
    Voltage    = Power / Current
    Current    = Power / Voltage
    Voltage    = Current × Resistance
    Current    = Voltage / Resistance
    Resistance = Voltage / Current
    Charge     = Current × Duration
    Current    = Charge / Duration
    Duration   = Charge / Current

Relations involving a squared quantity have no operator form and are plain
functions: ``power_from_current_resistance`` (P = I²R),
``power_from_voltage_resistance`` (P = V²/R), ``resistance_from_power_current``
(R = P/I²) and ``resistance_from_voltage_power`` (R = V²/P).

Example:
    >>> led = Voltage(2, VoltageUnit.VOLTS) / Resistance.LED_220
    >>> led.milliamperes  # 9.09...
    >>> power_from_current_resistance(led, Resistance.LED_220).milliwatts  # 18.18...
"""

from __future__ import annotations

import operator

from physunits.core.measurement import ieee_divide
from physunits.core.relations import relation
from physunits.unit.unit_charge import Charge
from physunits.unit.unit_current import Current
from physunits.unit.unit_power import Power
from physunits.unit.unit_resistance import Resistance
from physunits.unit.unit_time import Duration
from physunits.unit.unit_voltage import Voltage


# P = V·I
@relation(operator.mul, Voltage, Current, commutative=True)
def electrical_power(voltage: Voltage, current: Current) -> Power:
    return Power.from_base(float(voltage) * float(current))


@relation(operator.truediv, Power, Current)
def voltage_from_power(power: Power, current: Current) -> Voltage:
    return Voltage.from_base(ieee_divide(float(power), float(current)))


@relation(operator.truediv, Power, Voltage)
def current_from_power(power: Power, voltage: Voltage) -> Current:
    return Current.from_base(ieee_divide(float(power), float(voltage)))


# V = I·R
@relation(operator.mul, Current, Resistance, commutative=True)
def voltage_drop(current: Current, resistance: Resistance) -> Voltage:
    return Voltage.from_base(float(current) * float(resistance))


@relation(operator.truediv, Voltage, Resistance)
def current_through(voltage: Voltage, resistance: Resistance) -> Current:
    return Current.from_base(ieee_divide(float(voltage), float(resistance)))


@relation(operator.truediv, Voltage, Current)
def resistance(voltage: Voltage, current: Current) -> Resistance:
    return Resistance.from_base(ieee_divide(float(voltage), float(current)))


# Q = I·t
@relation(operator.mul, Current, Duration, commutative=True)
def charge(current: Current, duration: Duration) -> Charge:
    return Charge.from_base(float(current) * float(duration))


@relation(operator.truediv, Charge, Duration)
def current_from_charge(charge: Charge, duration: Duration) -> Current:
    return Current.from_base(ieee_divide(float(charge), float(duration)))


@relation(operator.truediv, Charge, Current)
def discharge_time(charge: Charge, current: Current) -> Duration:
    return Duration.from_base(ieee_divide(float(charge), float(current)))


def power_from_current_resistance(current: Current, resistance: Resistance) -> Power:
    """Dissipated power P = I²R."""
    Current._check_same_root(type(current))
    Resistance._check_same_root(type(resistance))
    return Power.from_base(float(current) * float(current) * float(resistance))


def power_from_voltage_resistance(voltage: Voltage, resistance: Resistance) -> Power:
    """Dissipated power P = V²/R."""
    Voltage._check_same_root(type(voltage))
    Resistance._check_same_root(type(resistance))
    return Power.from_base(ieee_divide(float(voltage) * float(voltage), float(resistance)))


def resistance_from_power_current(power: Power, current: Current) -> Resistance:
    """Resistance dissipating ``power`` at ``current``, R = P/I²."""
    Power._check_same_root(type(power))
    Current._check_same_root(type(current))
    return Resistance.from_base(ieee_divide(float(power), float(current) * float(current)))


def resistance_from_voltage_power(voltage: Voltage, power: Power) -> Resistance:
    """Resistance dissipating ``power`` at ``voltage``, R = V²/P."""
    Voltage._check_same_root(type(voltage))
    Power._check_same_root(type(power))
    return Resistance.from_base(ieee_divide(float(voltage) * float(voltage), float(power)))
