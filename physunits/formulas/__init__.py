"""Cross-family physical laws.

Importing this package registers every relation with
``physunits.core.relations``, after which ``Measurement`` arithmetic such as
``Mass * Acceleration`` or ``Length / Duration`` resolves to the right family.

Modules:
    kinematics: length, speed, acceleration and duration.
    mechanics: force, work, power and pressure.
    electricity: Ohm's law, electrical power and charge.
    frequency: rotation, phase and angular speed.
"""

from . import electricity, frequency, kinematics, mechanics
from .electricity import (
    power_from_current_resistance,
    power_from_voltage_resistance,
    resistance_from_power_current,
    resistance_from_voltage_power,
)

__all__ = [
    "electricity",
    "frequency",
    "kinematics",
    "mechanics",
    "power_from_current_resistance",
    "power_from_voltage_resistance",
    "resistance_from_power_current",
    "resistance_from_voltage_power",
]
