"""Type-safe physical measurements with unit conversion and cross-family arithmetic.

physunits represents physical quantities (mass, length, time, force, energy,
voltage, ...) as float-backed values tagged with their unit family. Values of
one family convert freely between that family's units; values of different
families never mix, except through the physical laws registered in
``physunits.formulas`` (mass × acceleration = force, voltage / resistance =
current, ...), which yield a value of the right derived family.

Framework Components:
    Core (physunits.core):
        • FamilyMember / Unit: family-root mechanism and the unit contract
        • MetricPrefix: the SI prefix table, peta to femto
        • MetricUnit: prefix + base-unit marker (kilogram = kilo + gram)
        • Measurement: generic float-backed value stored in base units
        • relations: registry behind cross-family ``*`` and ``/``

    Unit Families (physunits.unit):
        • Metric: Mass, Length, Frequency, Current, Voltage, Resistance, Charge, Volume
        • Scaled: Duration, Energy
        • Enumerated: Angle, AngularSpeed, Speed, Acceleration, Force, Pressure, Power, Area
        • Affine: Temperature and TemperatureDelta

    Physical Laws (physunits.formulas):
        • kinematics, mechanics, electricity, frequency

    Utilities:
        • serialization: dict / JSON codec
        • collection: total, average, minimum, maximum, spread
        • display: rich conversion tables

Example:
    >>> from physunits import Mass, MassUnit, Acceleration, Length, LengthUnit, Duration, TimeUnit
    >>> weight = Mass(10, MassUnit.KILOGRAMS) * Acceleration.GRAVITY
    >>> weight.newtons  # 98.0665
    >>> speed = Length(100, LengthUnit.METERS) / Duration(9.58, TimeUnit.SECONDS)
    >>> speed.formatted  # "10.44 m/s"
    >>> # Mass(1, MassUnit.GRAMS) + Length(1, LengthUnit.METERS)  # UnitFamilyError
"""

from physunits import formulas
from physunits.core import Measurement, MetricPrefix, MetricUnit, Unit
from physunits.exceptions import MeasurementDecodeError, UnitFamilyError
from physunits.formulas import (
    power_from_current_resistance,
    power_from_voltage_resistance,
    resistance_from_power_current,
    resistance_from_voltage_power,
)
from physunits.unit import *  # noqa: F403
from physunits.unit import __all__ as _unit_all

__all__ = [
    "formulas",
    "Measurement",
    "MetricPrefix",
    "MetricUnit",
    "Unit",
    "UnitFamilyError",
    "MeasurementDecodeError",
    "power_from_current_resistance",
    "power_from_voltage_resistance",
    "resistance_from_power_current",
    "resistance_from_voltage_power",
    *_unit_all,
]
