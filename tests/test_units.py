"""
Tests for the unit families: conversion round trips and unit tables.
"""

import math
import unittest

from physunits import (
    Acceleration,
    Angle,
    AngleUnit,
    AngularSpeed,
    Area,
    Charge,
    Current,
    Duration,
    Energy,
    EnergyUnit,
    Force,
    ForceUnit,
    Frequency,
    Length,
    LengthUnit,
    Mass,
    MassUnit,
    MetricPrefix,
    Power,
    PowerUnit,
    Pressure,
    PressureUnit,
    Resistance,
    Speed,
    SpeedUnit,
    TemperatureDelta,
    TimeUnit,
    Voltage,
    Volume,
    VolumeUnit,
)

FAMILIES = (
    Mass,
    Length,
    Duration,
    Frequency,
    Current,
    Voltage,
    Resistance,
    Charge,
    Volume,
    Energy,
    Angle,
    AngularSpeed,
    Speed,
    Acceleration,
    Force,
    Pressure,
    Power,
    Area,
    TemperatureDelta,
)

SAMPLES = (0.0, 1.0, -2.5, 123.456, 7.5e-4, 3.2e7)


class TestUnitTables(unittest.TestCase):
    """Test the named units of every family."""

    def test_every_family_has_units(self):
        """Test that each family lists at least two units and a base unit."""
        for family in FAMILIES:
            with self.subTest(family=family.__name__):
                units = family.UNIT.all_units()
                self.assertGreaterEqual(len(units), 2)
                self.assertIn(family.BASE_UNIT, units)
                self.assertEqual(family.BASE_UNIT.coefficient_to_base, 1.0)

    def test_coefficients_positive_and_symbols_set(self):
        """Test that every unit has a positive coefficient and a symbol."""
        for family in FAMILIES:
            for unit in family.UNIT.all_units():
                with self.subTest(unit=repr(unit)):
                    self.assertGreater(unit.coefficient_to_base, 0.0)
                    self.assertTrue(unit.symbol)

    def test_symbols_unique_within_family(self):
        """Test that no two distinct units of a family share a symbol."""
        for family in FAMILIES:
            with self.subTest(family=family.__name__):
                symbols = [unit.symbol for unit in family.UNIT.all_units()]
                self.assertEqual(len(symbols), len(set(symbols)))

    def test_tonne_is_megagram(self):
        """Test that TONNES is an alias of MEGAGRAMS."""
        self.assertEqual(MassUnit.TONNES, MassUnit.MEGAGRAMS)
        self.assertEqual(MassUnit.TONNES.symbol, "Mg")
        self.assertIn("TONNES", MassUnit.named_units())
        self.assertEqual(MassUnit.all_units().count(MassUnit.MEGAGRAMS), 1)

    def test_time_units(self):
        """Test that prefixed seconds reuse the prefix table."""
        self.assertEqual(TimeUnit.seconds(MetricPrefix.MILLI), TimeUnit.MILLISECONDS)
        self.assertEqual(TimeUnit.MICROSECONDS.symbol, "μs")
        self.assertEqual(TimeUnit.HOURS.coefficient_to_base, 3600.0)
        self.assertEqual(TimeUnit.DAYS.symbol, "d")

    def test_energy_units(self):
        """Test joule and calorie scales."""
        self.assertAlmostEqual(EnergyUnit.KILOCALORIES.coefficient_to_base, 4184.0)
        self.assertEqual(EnergyUnit.calories(MetricPrefix.KILO), EnergyUnit.KILOCALORIES)
        self.assertEqual(EnergyUnit.joules(MetricPrefix.MEGA).symbol, "MJ")

    def test_enumerated_units(self):
        """Test a sample of hand-coded coefficients."""
        self.assertAlmostEqual(AngleUnit.DEGREES.coefficient_to_base, math.pi / 180.0)
        self.assertEqual(AngleUnit.TURNS.symbol, "turn")
        self.assertEqual(PressureUnit.ATMOSPHERES.coefficient_to_base, 101325.0)
        self.assertEqual(ForceUnit.KILOGRAMS_FORCE.coefficient_to_base, 9.80665)
        self.assertEqual(PowerUnit.KILOWATTS.symbol, "kW")
        self.assertEqual(str(SpeedUnit.KNOTS), "kn")


class TestConversions(unittest.TestCase):
    """Test construction and extraction across units."""

    def test_round_trip_every_unit(self):
        """Test Measurement(v, U).value_in(U) == v within tolerance."""
        for family in FAMILIES:
            for unit in family.UNIT.all_units():
                for value in SAMPLES:
                    with self.subTest(unit=repr(unit), value=value):
                        m = family(value, unit)
                        self.assertTrue(math.isclose(m.value_in(unit), value, rel_tol=1e-9, abs_tol=1e-12))

    def test_cross_unit_round_trip(self):
        """Test that going A -> B -> A returns the original value."""
        for family in FAMILIES:
            units = family.UNIT.all_units()
            for a in units:
                for b in units:
                    with self.subTest(a=repr(a), b=repr(b)):
                        in_b = family(42.0, a).value_in(b)
                        back = family(in_b, b).value_in(a)
                        self.assertTrue(math.isclose(back, 42.0, rel_tol=1e-9))

    def test_base_value_storage(self):
        """Test that the stored value is expressed in the base unit."""
        self.assertEqual(Mass(1.5, MassUnit.KILOGRAMS).base_value, 1500.0)
        self.assertEqual(Length(3, LengthUnit.KILOMETERS).base_value, 3000.0)
        self.assertEqual(Duration(2, TimeUnit.MINUTES).base_value, 120.0)
        self.assertAlmostEqual(Volume(250, VolumeUnit.MILLILITERS).liters, 0.25)

    def test_accessors(self):
        """Test that named accessors delegate to value_in."""
        mass = Mass(2500, MassUnit.GRAMS)
        self.assertEqual(mass.kilograms, 2.5)
        self.assertEqual(mass.grams, 2500.0)
        self.assertAlmostEqual(mass.milligrams, 2.5e6)
        self.assertAlmostEqual(mass.tonnes, 2.5e-3)
        length = Length(1, LengthUnit.KILOMETERS)
        self.assertEqual(length.meters, 1000.0)
        self.assertAlmostEqual(length.centimeters, 1e5)
        duration = Duration(90, TimeUnit.MINUTES)
        self.assertEqual(duration.hours, 1.5)
        self.assertEqual(duration.seconds, 5400.0)
        speed = Speed(36, SpeedUnit.KILOMETERS_PER_HOUR)
        self.assertAlmostEqual(speed.meters_per_second, 10.0)

    def test_charge_capacity(self):
        """Test Ah and mAh conversions."""
        pack = Charge.from_milliampere_hours(5000)
        self.assertAlmostEqual(pack.coulombs, 18000.0)
        self.assertAlmostEqual(pack.ampere_hours, 5.0)
        self.assertAlmostEqual(Charge.from_ampere_hours(2).milliampere_hours, 2000.0)

    def test_angle_helpers(self):
        """Test angle trigonometry and constants."""
        self.assertAlmostEqual(Angle.RIGHT_ANGLE.sin, 1.0)
        self.assertAlmostEqual(Angle.STRAIGHT_ANGLE.cos, -1.0)
        self.assertAlmostEqual(Angle.FULL_ANGLE.turns, 1.0)
        self.assertAlmostEqual(Angle(200, AngleUnit.GRADIANS).degrees, 180.0)

    def test_energy_in_calories(self):
        """Test energy conversion between joules and calories."""
        snack = Energy(250, EnergyUnit.KILOCALORIES)
        self.assertAlmostEqual(snack.kilojoules, 1046.0)
        self.assertAlmostEqual(snack.kilocalories, 250.0)

    def test_special_values(self):
        """Test a sample of named special values."""
        self.assertAlmostEqual(Acceleration.GRAVITY.meters_per_second_squared, 9.80665)
        self.assertAlmostEqual(Pressure.STANDARD_ATMOSPHERE.bars, 1.01325)
        self.assertAlmostEqual(Current.USB2_MAX.milliamperes, 500.0)
        self.assertEqual(Voltage.HOUSEHOLD_EU.volts, 230.0)
        self.assertEqual(Resistance.PULL_UP_10K.kilohms, 10.0)
        self.assertAlmostEqual(Power(1, PowerUnit.HORSEPOWER).watts, 735.49875)
        self.assertAlmostEqual(Force(1, ForceUnit.KILOGRAMS_FORCE).newtons, 9.80665)
        self.assertAlmostEqual(Area(1, Area.UNIT.HECTARES).square_meters, 1e4)


if __name__ == "__main__":
    unittest.main()
