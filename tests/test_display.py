"""
Tests for rich conversion tables.
"""

import io
import unittest

from rich.console import Console
from rich.table import Table

from physunits import Mass, MassUnit, Temperature, TemperatureUnit
from physunits.display import conversion_table, print_conversions


class TestConversionTable(unittest.TestCase):
    """Test conversion_table and print_conversions."""

    def setUp(self):
        self.console = Console(file=io.StringIO(), record=True, width=100)

    def test_table_rows(self):
        """Test one row per named unit of the family."""
        table = conversion_table(Mass(1.5, MassUnit.KILOGRAMS))
        self.assertIsInstance(table, Table)
        self.assertEqual(table.row_count, len(MassUnit.named_units()))
        self.assertEqual(table.title, "[b]Mass[/b]: 1.50 kg")
        self.assertEqual([c.header for c in table.columns], ["Unit", "Value", "Symbol"])

    def test_print_conversions(self):
        """Test the rendered table."""
        print_conversions(Mass(1.5, MassUnit.KILOGRAMS), console=self.console)
        text = self.console.export_text()
        self.assertIn("Mass: 1.50 kg", text)
        self.assertIn("KILOGRAMS", text)
        self.assertIn("1500", text)
        self.assertIn("TONNES", text)

    def test_temperature_table(self):
        """Test a table for an absolute temperature."""
        table = conversion_table(Temperature(20, TemperatureUnit.CELSIUS))
        self.assertEqual(table.row_count, 3)
        print_conversions(Temperature(20, TemperatureUnit.CELSIUS), console=self.console)
        text = self.console.export_text()
        self.assertIn("Temperature: 20.0°C", text)
        self.assertIn("293.15", text)
        self.assertIn("68", text)


if __name__ == "__main__":
    unittest.main()
