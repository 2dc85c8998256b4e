"""Area unit definitions (stored in square meters)."""

from __future__ import annotations

from physunits.core.measurement import Measurement
from physunits.core.unit_base import UnitEnum


class AreaUnit(UnitEnum):
    SQUARE_METERS = (1.0, "m²")
    SQUARE_CENTIMETERS = (1e-4, "cm²")
    SQUARE_MILLIMETERS = (1e-6, "mm²")
    SQUARE_KILOMETERS = (1e6, "km²")
    ARES = (100.0, "a")
    HECTARES = (1e4, "ha")
    ACRES = (4046.8564224, "ac")


class Area(Measurement[AreaUnit]):
    """Measurement of area; land surfaces format in hectares."""

    IS_FAMILY_ROOT = True
    UNIT = AreaUnit
    BASE_UNIT = AreaUnit.SQUARE_METERS
    FORMAT_SCALE = (
        (1e6, AreaUnit.SQUARE_KILOMETERS, "{:.2f} km²"),
        (1e4, AreaUnit.HECTARES, "{:.2f} ha"),
        (1.0, AreaUnit.SQUARE_METERS, "{:.2f} m²"),
        (1e-4, AreaUnit.SQUARE_CENTIMETERS, "{:.1f} cm²"),
        (0.0, AreaUnit.SQUARE_MILLIMETERS, "{:.1f} mm²"),
    )

    @property
    def square_meters(self) -> float:
        return self.value_in(AreaUnit.SQUARE_METERS)

    @property
    def square_centimeters(self) -> float:
        return self.value_in(AreaUnit.SQUARE_CENTIMETERS)

    @property
    def square_millimeters(self) -> float:
        return self.value_in(AreaUnit.SQUARE_MILLIMETERS)

    @property
    def square_kilometers(self) -> float:
        return self.value_in(AreaUnit.SQUARE_KILOMETERS)

    @property
    def ares(self) -> float:
        return self.value_in(AreaUnit.ARES)

    @property
    def hectares(self) -> float:
        return self.value_in(AreaUnit.HECTARES)

    @property
    def acres(self) -> float:
        return self.value_in(AreaUnit.ACRES)
