"""Angular unit definitions for orientation and rotation.

All angles are stored in radians (the SI unit), while supporting input and
display in degrees, gradians and turns.

These units are commonly used for:
- Headings and orientation
- Phase angles (``Frequency * Duration``)
- Trigonometry (``Angle.sin``, ``Angle.cos``, ``Angle.tan``)

Classes:
    AngleUnit: Enumerated angle unit.
    Angle: Measurement of a plane angle, stored in radians.

Example:
    >>> heading = Angle(90, AngleUnit.DEGREES)
    >>> print(heading)  # "1.5708 rad"
    >>> heading.sin  # 1.0
    >>> heading.formatted  # "90.00°"
"""

from __future__ import annotations

import math
from typing import ClassVar

from physunits.core.measurement import Measurement
from physunits.core.unit_base import UnitEnum


class AngleUnit(UnitEnum):
    """Angle unit; the base unit is the radian."""

    RADIANS = (1.0, "rad")
    DEGREES = (math.pi / 180.0, "°")
    GRADIANS = (math.pi / 200.0, "grad")
    TURNS = (2.0 * math.pi, "turn")


class Angle(Measurement[AngleUnit]):
    """Measurement of a plane angle.

    ``formatted`` renders degrees; ``formatted_radians`` renders radians.

    Attributes:
        RIGHT_ANGLE (Angle): 90°.
        STRAIGHT_ANGLE (Angle): 180°.
        FULL_ANGLE (Angle): 360°.
    """

    IS_FAMILY_ROOT = True
    UNIT = AngleUnit
    BASE_UNIT = AngleUnit.RADIANS
    FORMAT_SCALE = ((0.0, AngleUnit.DEGREES, "{:.2f}°"),)

    RIGHT_ANGLE: ClassVar[Angle]
    STRAIGHT_ANGLE: ClassVar[Angle]
    FULL_ANGLE: ClassVar[Angle]

    @property
    def radians(self) -> float:
        return self.value_in(AngleUnit.RADIANS)

    @property
    def degrees(self) -> float:
        return self.value_in(AngleUnit.DEGREES)

    @property
    def gradians(self) -> float:
        return self.value_in(AngleUnit.GRADIANS)

    @property
    def turns(self) -> float:
        return self.value_in(AngleUnit.TURNS)

    @property
    def formatted_radians(self) -> str:
        return self.format_in(AngleUnit.RADIANS, ".4f")

    @property
    def sin(self) -> float:
        return math.sin(float(self))

    @property
    def cos(self) -> float:
        return math.cos(float(self))

    @property
    def tan(self) -> float:
        return math.tan(float(self))


Angle.RIGHT_ANGLE = Angle(90, AngleUnit.DEGREES)
Angle.STRAIGHT_ANGLE = Angle(180, AngleUnit.DEGREES)
Angle.FULL_ANGLE = Angle(360, AngleUnit.DEGREES)
