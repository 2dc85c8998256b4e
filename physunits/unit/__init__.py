"""Unit families for physical measurements.

Each module defines one family: a unit class listing the named units of the
family, and a measurement class storing values in the family's base unit.

Unit Families:
    - Metric (prefix + base marker): Mass, Length, Frequency, Current,
      Voltage, Resistance, Charge, Volume
    - Scaled (prefixable and calendar units): Duration, Energy
    - Enumerated: Angle, AngularSpeed, Speed, Acceleration, Force, Pressure,
      Power, Area
    - Affine: Temperature, with the linear TemperatureDelta

Example:
    >>> from physunits.unit import Length, LengthUnit, Duration, TimeUnit
    >>> leg = Length(12, LengthUnit.KILOMETERS)
    >>> leg.formatted  # "12.00 km"
    >>> # leg + Duration(1, TimeUnit.HOURS)  # ERROR: incompatible families
"""

from .unit_acceleration import Acceleration, AccelerationUnit
from .unit_angle import Angle, AngleUnit
from .unit_angular_speed import AngularSpeed, AngularSpeedUnit
from .unit_area import Area, AreaUnit
from .unit_charge import Charge, ChargeUnit
from .unit_current import Current, CurrentUnit
from .unit_energy import Energy, EnergyUnit
from .unit_force import Force, ForceUnit
from .unit_frequency import Frequency, FrequencyUnit
from .unit_length import Length, LengthUnit
from .unit_mass import Mass, MassUnit
from .unit_power import Power, PowerUnit
from .unit_pressure import Pressure, PressureUnit
from .unit_resistance import Resistance, ResistanceUnit
from .unit_speed import Speed, SpeedUnit
from .unit_temperature import Temperature, TemperatureDelta, TemperatureUnit
from .unit_time import Duration, TimeUnit
from .unit_voltage import Voltage, VoltageUnit
from .unit_volume import Volume, VolumeUnit

__all__ = [
    # Metric families
    "Mass",
    "MassUnit",
    "Length",
    "LengthUnit",
    "Frequency",
    "FrequencyUnit",
    "Current",
    "CurrentUnit",
    "Voltage",
    "VoltageUnit",
    "Resistance",
    "ResistanceUnit",
    "Charge",
    "ChargeUnit",
    "Volume",
    "VolumeUnit",
    # Scaled families
    "Duration",
    "TimeUnit",
    "Energy",
    "EnergyUnit",
    # Enumerated families
    "Angle",
    "AngleUnit",
    "AngularSpeed",
    "AngularSpeedUnit",
    "Speed",
    "SpeedUnit",
    "Acceleration",
    "AccelerationUnit",
    "Force",
    "ForceUnit",
    "Pressure",
    "PressureUnit",
    "Power",
    "PowerUnit",
    "Area",
    "AreaUnit",
    # Temperature
    "Temperature",
    "TemperatureDelta",
    "TemperatureUnit",
]
