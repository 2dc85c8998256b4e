"""Time unit definitions.

This module provides durations stored in seconds. Sub-second units reuse the
SI prefix table (``TimeUnit.seconds(MetricPrefix.MILLI)`` is the millisecond),
while minutes, hours and days are calendar multiples of the second.

Classes:
    TimeUnit: Scaled time unit (coefficient to seconds + symbol).
    Duration: Measurement of elapsed time, stored in seconds.

Example:
    >>> flight = Duration(2.5, TimeUnit.HOURS)
    >>> print(flight)  # "9000 s"
    >>> flight.minutes  # 150.0
    >>> flight.formatted_hms  # "2:30:00"
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar

from physunits.core.measurement import Measurement, ieee_divide
from physunits.core.metric_unit import ScaledUnit
from physunits.core.prefix import MetricPrefix

if TYPE_CHECKING:
    from .unit_frequency import Frequency


class TimeUnit(ScaledUnit):
    """Time unit; the base unit is the second."""

    IS_FAMILY_ROOT = True

    SECONDS: ClassVar[TimeUnit]
    MILLISECONDS: ClassVar[TimeUnit]
    MICROSECONDS: ClassVar[TimeUnit]
    NANOSECONDS: ClassVar[TimeUnit]
    MINUTES: ClassVar[TimeUnit]
    HOURS: ClassVar[TimeUnit]
    DAYS: ClassVar[TimeUnit]

    @classmethod
    def seconds(cls, prefix: MetricPrefix = MetricPrefix.BASE) -> TimeUnit:
        """Return the prefixed second, e.g. ``seconds(MetricPrefix.MILLI)``."""
        return cls(prefix.factor, prefix.symbol + "s")


TimeUnit.SECONDS = TimeUnit.seconds()
TimeUnit.MILLISECONDS = TimeUnit.seconds(MetricPrefix.MILLI)
TimeUnit.MICROSECONDS = TimeUnit.seconds(MetricPrefix.MICRO)
TimeUnit.NANOSECONDS = TimeUnit.seconds(MetricPrefix.NANO)
TimeUnit.MINUTES = TimeUnit(60.0, "min")
TimeUnit.HOURS = TimeUnit(3600.0, "h")
TimeUnit.DAYS = TimeUnit(86400.0, "d")


class Duration(Measurement[TimeUnit]):
    """Measurement of elapsed time (SI base unit: second).

    Attributes:
        IS_FAMILY_ROOT (bool): True, Duration is the root of its family.
        UNIT (type): ``TimeUnit``.
        BASE_UNIT (TimeUnit): ``TimeUnit.SECONDS``.

    Example:
        >>> Duration(90, TimeUnit.SECONDS).formatted
        '1.50 min'
    """

    IS_FAMILY_ROOT = True
    UNIT = TimeUnit
    BASE_UNIT = TimeUnit.SECONDS
    FORMAT_SCALE = (
        (86400.0, TimeUnit.DAYS, "{:.2f} d"),
        (3600.0, TimeUnit.HOURS, "{:.2f} h"),
        (60.0, TimeUnit.MINUTES, "{:.2f} min"),
        (1.0, TimeUnit.SECONDS, "{:.2f} s"),
        (1e-3, TimeUnit.MILLISECONDS, "{:.2f} ms"),
        (0.0, TimeUnit.MICROSECONDS, "{:.2f} μs"),
    )

    @property
    def seconds(self) -> float:
        return self.value_in(TimeUnit.SECONDS)

    @property
    def milliseconds(self) -> float:
        return self.value_in(TimeUnit.MILLISECONDS)

    @property
    def microseconds(self) -> float:
        return self.value_in(TimeUnit.MICROSECONDS)

    @property
    def nanoseconds(self) -> float:
        return self.value_in(TimeUnit.NANOSECONDS)

    @property
    def minutes(self) -> float:
        return self.value_in(TimeUnit.MINUTES)

    @property
    def hours(self) -> float:
        return self.value_in(TimeUnit.HOURS)

    @property
    def days(self) -> float:
        return self.value_in(TimeUnit.DAYS)

    @property
    def as_frequency(self) -> Frequency:
        """Frequency of an event repeating once per this duration (1/t)."""
        from .unit_frequency import Frequency

        return Frequency.from_base(ieee_divide(1.0, float(self)))

    @property
    def formatted_hms(self) -> str:
        """Clock-style string: ``"h:mm:ss"``, or ``"m:ss"`` under one hour.

        Fractions of a second are truncated; non-finite durations render as
        ``"--:--"``.
        """
        if not math.isfinite(float(self)):
            return "--:--"
        total = int(float(self))
        sign = "-" if total < 0 else ""
        h, r = divmod(abs(total), 3600)
        m, s = divmod(r, 60)
        if h > 0:
            return f"{sign}{h}:{m:02d}:{s:02d}"
        return f"{sign}{m}:{s:02d}"
