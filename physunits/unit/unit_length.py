"""Distance and length unit definitions.

All lengths are stored in meters (the SI base unit), while supporting input
and display in any metric prefix.

These units are commonly used for:
- Distances travelled (``Speed * Duration``)
- Lever arms and work (``Energy = Force * Length``)
- Radii of rotating bodies (``Speed = AngularSpeed * Length``)

Classes:
    LengthUnit: Metric length unit (prefix + meter).
    Length: Measurement of length, stored in meters.

Example:
    >>> flight_range = Length(25.5, LengthUnit.KILOMETERS)
    >>> print(flight_range)  # "25500 m"
    >>> flight_range.kilometers  # 25.5
"""

from __future__ import annotations

from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.metric_unit import Meter, MetricUnit
from physunits.core.prefix import MetricPrefix


class LengthUnit(MetricUnit[Meter]):
    IS_FAMILY_ROOT = True
    BASE = Meter

    METERS: ClassVar[LengthUnit]
    CENTIMETERS: ClassVar[LengthUnit]
    MILLIMETERS: ClassVar[LengthUnit]
    KILOMETERS: ClassVar[LengthUnit]
    MICROMETERS: ClassVar[LengthUnit]
    NANOMETERS: ClassVar[LengthUnit]
    DECIMETERS: ClassVar[LengthUnit]


LengthUnit.METERS = LengthUnit.base()
LengthUnit.CENTIMETERS = LengthUnit.centi()
LengthUnit.MILLIMETERS = LengthUnit.milli()
LengthUnit.KILOMETERS = LengthUnit.kilo()
LengthUnit.MICROMETERS = LengthUnit.micro()
LengthUnit.NANOMETERS = LengthUnit.nano()
LengthUnit.DECIMETERS = LengthUnit(MetricPrefix.DECI)


class Length(Measurement[LengthUnit]):
    """Measurement of length (SI base unit: meter).

    Attributes:
        IS_FAMILY_ROOT (bool): True, Length is the root of its family.
        UNIT (type): ``LengthUnit``.
        BASE_UNIT (LengthUnit): ``LengthUnit.METERS``.

    Example:
        >>> altitude = Length(120, LengthUnit.METERS)
        >>> altitude.formatted
        '120.00 m'
    """

    IS_FAMILY_ROOT = True
    UNIT = LengthUnit
    BASE_UNIT = LengthUnit.METERS
    FORMAT_SCALE = (
        (1e3, LengthUnit.KILOMETERS, "{:.2f} km"),
        (1.0, LengthUnit.METERS, "{:.2f} m"),
        (1e-2, LengthUnit.CENTIMETERS, "{:.2f} cm"),
        (1e-3, LengthUnit.MILLIMETERS, "{:.2f} mm"),
        (0.0, LengthUnit.MICROMETERS, "{:.2f} μm"),
    )

    @property
    def meters(self) -> float:
        return self.value_in(LengthUnit.METERS)

    @property
    def centimeters(self) -> float:
        return self.value_in(LengthUnit.CENTIMETERS)

    @property
    def millimeters(self) -> float:
        return self.value_in(LengthUnit.MILLIMETERS)

    @property
    def kilometers(self) -> float:
        return self.value_in(LengthUnit.KILOMETERS)

    @property
    def micrometers(self) -> float:
        return self.value_in(LengthUnit.MICROMETERS)

    @property
    def nanometers(self) -> float:
        return self.value_in(LengthUnit.NANOMETERS)
