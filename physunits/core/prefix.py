"""SI prefix table.

Each ``MetricPrefix`` member *is* its multiplier: the enum is mixed with
``float`` and every member value is written as an exact decimal literal, so
``MetricPrefix.MILLI.factor`` is bit-for-bit ``1e-3`` (not ``1 / 1000``) and
lookup of the factor is a plain attribute read. Symbol, name and exponent are
table lookups keyed by the member.

Example:
    >>> MetricPrefix.KILO.factor
    1000.0
    >>> MetricPrefix.MICRO.symbol
    'μ'
    >>> MetricPrefix.MILLI.exponent
    -3
    >>> MetricPrefix(1e-9) is MetricPrefix.NANO
    True
"""

from __future__ import annotations

from enum import Enum


class MetricPrefix(float, Enum):
    """SI prefix, valued by its exact multiplier.

    Equality and hashing follow the multiplier; there is exactly one member
    per multiplier.
    """

    PETA = 1e15
    TERA = 1e12
    GIGA = 1e9
    MEGA = 1e6
    KILO = 1e3
    HECTO = 1e2
    DECA = 1e1
    BASE = 1.0
    DECI = 1e-1
    CENTI = 1e-2
    MILLI = 1e-3
    MICRO = 1e-6
    NANO = 1e-9
    PICO = 1e-12
    FEMTO = 1e-15

    @property
    def factor(self) -> float:
        """Multiplier relative to the unprefixed unit."""
        return self.value

    @property
    def symbol(self) -> str:
        """Prefix symbol, e.g. ``"k"``; empty for ``BASE``."""
        return _SYMBOLS[self]

    @property
    def full_name(self) -> str:
        """Prefix name, e.g. ``"kilo"``; empty for ``BASE``."""
        return _NAMES[self]

    @property
    def exponent(self) -> int:
        """Power of ten of the multiplier."""
        return _EXPONENTS[self]

    def __str__(self) -> str:
        return self.full_name or "(base)"


_SYMBOLS = {
    MetricPrefix.PETA: "P",
    MetricPrefix.TERA: "T",
    MetricPrefix.GIGA: "G",
    MetricPrefix.MEGA: "M",
    MetricPrefix.KILO: "k",
    MetricPrefix.HECTO: "h",
    MetricPrefix.DECA: "da",
    MetricPrefix.BASE: "",
    MetricPrefix.DECI: "d",
    MetricPrefix.CENTI: "c",
    MetricPrefix.MILLI: "m",
    MetricPrefix.MICRO: "μ",
    MetricPrefix.NANO: "n",
    MetricPrefix.PICO: "p",
    MetricPrefix.FEMTO: "f",
}

_NAMES = {prefix: prefix.name.lower() for prefix in MetricPrefix}
_NAMES[MetricPrefix.BASE] = ""

_EXPONENTS = {
    MetricPrefix.PETA: 15,
    MetricPrefix.TERA: 12,
    MetricPrefix.GIGA: 9,
    MetricPrefix.MEGA: 6,
    MetricPrefix.KILO: 3,
    MetricPrefix.HECTO: 2,
    MetricPrefix.DECA: 1,
    MetricPrefix.BASE: 0,
    MetricPrefix.DECI: -1,
    MetricPrefix.CENTI: -2,
    MetricPrefix.MILLI: -3,
    MetricPrefix.MICRO: -6,
    MetricPrefix.NANO: -9,
    MetricPrefix.PICO: -12,
    MetricPrefix.FEMTO: -15,
}
