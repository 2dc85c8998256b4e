"""Exception types raised by physunits."""


class UnitFamilyError(TypeError):
    """Raised when operands or units belong to different unit families.

    Also raised when a bare number is used where a measurement is required,
    e.g. ``Mass(1, MassUnit.GRAMS) + 1.0``.
    """


class MeasurementDecodeError(ValueError):
    """Raised when serialized measurement data is malformed."""
