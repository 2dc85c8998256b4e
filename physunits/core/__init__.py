"""Core building blocks: family roots, prefixes, units, measurements, relations."""

from .measurement import Measurement, ieee_divide, is_scalar
from .metric_unit import (
    Ampere,
    BaseUnit,
    Coulomb,
    Gram,
    Hertz,
    Liter,
    Meter,
    MetricUnit,
    Newton,
    Ohm,
    Pascal,
    ScaledUnit,
    Second,
    Volt,
    Watt,
)
from .prefix import MetricPrefix
from .relations import register, registered, relation, resolve
from .unit_base import FamilyMember, Unit, UnitEnum

__all__ = [
    "FamilyMember",
    "Unit",
    "UnitEnum",
    "MetricPrefix",
    "BaseUnit",
    "MetricUnit",
    "ScaledUnit",
    "Gram",
    "Meter",
    "Second",
    "Ampere",
    "Hertz",
    "Newton",
    "Watt",
    "Volt",
    "Ohm",
    "Coulomb",
    "Pascal",
    "Liter",
    "Measurement",
    "ieee_divide",
    "is_scalar",
    "register",
    "registered",
    "relation",
    "resolve",
]
