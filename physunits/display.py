"""Terminal display of measurements with ``rich``.

Example:
    >>> from physunits.display import print_conversions
    >>> print_conversions(Mass(1.5, MassUnit.KILOGRAMS))  # table titled "Mass: 1.50 kg"
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from physunits.core.measurement import Measurement
from physunits.unit.unit_temperature import Temperature

CONSOLE = Console()


def conversion_table(measurement: Measurement | Temperature, value_format: str = ".6g") -> Table:
    """Build a table of ``measurement`` expressed in every named unit of its family.

    Args:
        measurement: Measurement (or temperature) to convert.
        value_format: Format spec applied to each converted value.

    Returns:
        Table: One row per named unit: constant name, value and symbol.
    """
    t = Table(title=f"[b]{type(measurement).ROOT.__name__}[/b]: {measurement.formatted}")
    t.add_column("Unit")
    t.add_column("Value", justify="right")
    t.add_column("Symbol")
    for name, unit in type(measurement).UNIT.named_units().items():
        t.add_row(name, f"{measurement.value_in(unit):{value_format}}", unit.symbol)
    return t


def print_conversions(measurement: Measurement | Temperature, console: Console | None = None) -> None:
    """Print ``conversion_table(measurement)`` to ``console`` (stdout by default)."""
    (console or CONSOLE).print(conversion_table(measurement))
