"""Frequency unit definitions.

Frequencies are stored in hertz. Besides the metric units this module holds
the conversions between a frequency, its period and the equivalent angular
speed (ω = 2πf).

Classes:
    FrequencyUnit: Metric frequency unit (prefix + hertz).
    Frequency: Measurement of frequency, stored in hertz.

Example:
    >>> clock = Frequency(2.4, FrequencyUnit.GIGAHERTZ)
    >>> clock.formatted  # "2.40 GHz"
    >>> Frequency(50, FrequencyUnit.HERTZ).as_period.milliseconds  # 20.0
"""

from __future__ import annotations

import math
from typing import ClassVar

from physunits.core.measurement import Measurement, ieee_divide
from physunits.core.metric_unit import Hertz, MetricUnit
from physunits.core.prefix import MetricPrefix

from .unit_angular_speed import AngularSpeed
from .unit_time import Duration


class FrequencyUnit(MetricUnit[Hertz]):
    IS_FAMILY_ROOT = True
    BASE = Hertz

    HERTZ: ClassVar[FrequencyUnit]
    MILLIHERTZ: ClassVar[FrequencyUnit]
    KILOHERTZ: ClassVar[FrequencyUnit]
    MEGAHERTZ: ClassVar[FrequencyUnit]
    GIGAHERTZ: ClassVar[FrequencyUnit]
    TERAHERTZ: ClassVar[FrequencyUnit]


FrequencyUnit.HERTZ = FrequencyUnit.base()
FrequencyUnit.MILLIHERTZ = FrequencyUnit.milli()
FrequencyUnit.KILOHERTZ = FrequencyUnit.kilo()
FrequencyUnit.MEGAHERTZ = FrequencyUnit.mega()
FrequencyUnit.GIGAHERTZ = FrequencyUnit.giga()
FrequencyUnit.TERAHERTZ = FrequencyUnit(MetricPrefix.TERA)


class Frequency(Measurement[FrequencyUnit]):
    """Measurement of frequency (SI unit: hertz).

    Commonly used for:
    - Clock rates and sampling rates
    - Rotation rates, via ``as_angular_speed``
    - Phase angles, via ``Frequency * Duration``
    """

    IS_FAMILY_ROOT = True
    UNIT = FrequencyUnit
    BASE_UNIT = FrequencyUnit.HERTZ
    FORMAT_SCALE = (
        (1e12, FrequencyUnit.TERAHERTZ, "{:.2f} THz"),
        (1e9, FrequencyUnit.GIGAHERTZ, "{:.2f} GHz"),
        (1e6, FrequencyUnit.MEGAHERTZ, "{:.2f} MHz"),
        (1e3, FrequencyUnit.KILOHERTZ, "{:.2f} kHz"),
        (1.0, FrequencyUnit.HERTZ, "{:.2f} Hz"),
        (0.0, FrequencyUnit.MILLIHERTZ, "{:.3f} mHz"),
    )

    @classmethod
    def from_angular_speed(cls, angular_speed: AngularSpeed) -> Frequency:
        """Frequency of a rotation at ``angular_speed`` (f = ω / 2π)."""
        AngularSpeed._check_same_root(type(angular_speed))
        return cls.from_base(float(angular_speed) / (2.0 * math.pi))

    @property
    def hertz(self) -> float:
        return self.value_in(FrequencyUnit.HERTZ)

    @property
    def millihertz(self) -> float:
        return self.value_in(FrequencyUnit.MILLIHERTZ)

    @property
    def kilohertz(self) -> float:
        return self.value_in(FrequencyUnit.KILOHERTZ)

    @property
    def megahertz(self) -> float:
        return self.value_in(FrequencyUnit.MEGAHERTZ)

    @property
    def gigahertz(self) -> float:
        return self.value_in(FrequencyUnit.GIGAHERTZ)

    @property
    def terahertz(self) -> float:
        return self.value_in(FrequencyUnit.TERAHERTZ)

    @property
    def period(self) -> float:
        """Period in seconds, as a plain float."""
        return ieee_divide(1.0, float(self))

    @property
    def as_period(self) -> Duration:
        """Period of one cycle (T = 1/f)."""
        return Duration.from_base(self.period)

    def cycles_in(self, duration: Duration) -> float:
        """Number of cycles completed during ``duration``."""
        Duration._check_same_root(type(duration))
        return float(self) * float(duration)

    @property
    def as_angular_speed(self) -> AngularSpeed:
        """Angular speed of a rotation at this frequency (ω = 2πf)."""
        return AngularSpeed.from_base(float(self) * 2.0 * math.pi)
