"""
Tests for the cross-family relations and end-to-end scenarios.
"""

import math
import operator
import unittest

from physunits import (
    Acceleration,
    AccelerationUnit,
    Angle,
    AngleUnit,
    AngularSpeed,
    AngularSpeedUnit,
    Area,
    AreaUnit,
    Charge,
    Current,
    CurrentUnit,
    Duration,
    Energy,
    EnergyUnit,
    Force,
    ForceUnit,
    Frequency,
    FrequencyUnit,
    Length,
    LengthUnit,
    Mass,
    MassUnit,
    Power,
    PowerUnit,
    Pressure,
    PressureUnit,
    Resistance,
    ResistanceUnit,
    Speed,
    SpeedUnit,
    TimeUnit,
    UnitFamilyError,
    Voltage,
    VoltageUnit,
    power_from_current_resistance,
    power_from_voltage_resistance,
    resistance_from_power_current,
    resistance_from_voltage_power,
)
from physunits.core import register, registered, resolve
from physunits.formulas import mechanics

# (left, right, product family); every product C also has C / right -> left
# and C / left -> right.
PRODUCTS = (
    (Speed(10, SpeedUnit.METERS_PER_SECOND), Duration(5, TimeUnit.SECONDS), Length),
    (Acceleration(2, AccelerationUnit.METERS_PER_SECOND_SQUARED), Duration(5, TimeUnit.SECONDS), Speed),
    (Mass(10, MassUnit.KILOGRAMS), Acceleration(2, AccelerationUnit.METERS_PER_SECOND_SQUARED), Force),
    (Force(20, ForceUnit.NEWTONS), Length(3, LengthUnit.METERS), Energy),
    (Power(100, PowerUnit.WATTS), Duration(60, TimeUnit.SECONDS), Energy),
    (Force(20, ForceUnit.NEWTONS), Speed(10, SpeedUnit.METERS_PER_SECOND), Power),
    (Pressure(1000, PressureUnit.PASCALS), Area(2, AreaUnit.SQUARE_METERS), Force),
    (Voltage(12, VoltageUnit.VOLTS), Current(2, CurrentUnit.AMPERES), Power),
    (Current(2, CurrentUnit.AMPERES), Resistance(6, ResistanceUnit.OHMS), Voltage),
    (Current(2, CurrentUnit.AMPERES), Duration(3600, TimeUnit.SECONDS), Charge),
    (AngularSpeed(3, AngularSpeedUnit.RADIANS_PER_SECOND), Duration(2, TimeUnit.SECONDS), Angle),
    (AngularSpeed(3, AngularSpeedUnit.RADIANS_PER_SECOND), Length(2, LengthUnit.METERS), Speed),
)


class Cargo(Mass):
    """Mass subclass used to check relation lookup through the MRO."""


class TestRelationTable(unittest.TestCase):
    """Test every registered product and its inverses."""

    def test_product_family(self):
        """Test that each product yields the declared family."""
        for a, b, family in PRODUCTS:
            with self.subTest(relation=f"{type(a).__name__} * {type(b).__name__}"):
                self.assertIsInstance(a * b, family)

    def test_commutativity(self):
        """Test a * b == b * a for every product."""
        for a, b, _ in PRODUCTS:
            with self.subTest(relation=f"{type(a).__name__} * {type(b).__name__}"):
                self.assertEqual(a * b, b * a)

    def test_inversion(self):
        """Test that dividing a product recovers both factors."""
        for a, b, _ in PRODUCTS:
            with self.subTest(relation=f"{type(a).__name__} * {type(b).__name__}"):
                c = a * b
                self.assertTrue((c / b).isclose(a))
                self.assertTrue((c / a).isclose(b))

    def test_registered_listing(self):
        """Test that the registry lists both orders of a commutative relation."""
        entries = registered()
        self.assertIn(("*", Mass, Acceleration), entries)
        self.assertIn(("*", Acceleration, Mass), entries)
        self.assertIn(("/", Force, Mass), entries)
        self.assertNotIn(("*", Mass, Length), entries)

    def test_resolve_through_subclass(self):
        """Test that subclasses of a family reach the family's relations."""
        self.assertIs(resolve(operator.mul, Cargo, Acceleration), mechanics.force)
        weight = Cargo(1, MassUnit.KILOGRAMS) * Acceleration.GRAVITY
        self.assertIsInstance(weight, Force)
        self.assertAlmostEqual(weight.newtons, 9.80665)
        self.assertIsNone(resolve(operator.mul, Mass, Length))

    def test_register_rejects_conflicts(self):
        """Test duplicate and unsupported registrations."""
        with self.assertRaises(ValueError):
            register(operator.mul, Mass, Acceleration, lambda m, a: None)
        with self.assertRaises(ValueError):
            register(operator.add, Mass, Length, lambda m, length: None)

    def test_register_same_function_again(self):
        """Test that re-registering the same function is accepted and logged."""
        with self.assertLogs("physunits", level="DEBUG") as logs:
            register(operator.mul, Mass, Acceleration, mechanics.force)
        self.assertIn("Mass * Acceleration", logs.output[0])
        self.assertIs(resolve(operator.mul, Mass, Acceleration), mechanics.force)


class TestKinematics(unittest.TestCase):
    """Test kinematic relations."""

    def test_sprint_speed(self):
        """Test average speed of a 100 m sprint."""
        speed = Length(100, LengthUnit.METERS) / Duration(9.58, TimeUnit.SECONDS)
        self.assertIsInstance(speed, Speed)
        self.assertEqual(speed.formatted, "10.44 m/s")

    def test_travel_time(self):
        """Test time to cover a distance."""
        trip = Length(120, LengthUnit.KILOMETERS) / Speed(80, SpeedUnit.KILOMETERS_PER_HOUR)
        self.assertIsInstance(trip, Duration)
        self.assertAlmostEqual(trip.hours, 1.5)

    def test_time_to_reach(self):
        """Test duration = speed / acceleration."""
        t = Speed(100, SpeedUnit.KILOMETERS_PER_HOUR) / Acceleration(1, AccelerationUnit.STANDARD_GRAVITY)
        self.assertIsInstance(t, Duration)
        self.assertAlmostEqual(t.seconds, 100 / 3.6 / 9.80665)

    def test_zero_duration(self):
        """Test that a zero divisor gives infinity, not an error."""
        speed = Length(1, LengthUnit.METERS) / Duration.zero
        self.assertIsInstance(speed, Speed)
        self.assertEqual(speed.base_value, float("inf"))


class TestMechanics(unittest.TestCase):
    """Test mechanical relations."""

    def test_weight(self):
        """Test the kilogram reconciliation of F = m·a."""
        weight = Mass(10, MassUnit.KILOGRAMS) * Acceleration.GRAVITY
        self.assertAlmostEqual(weight.newtons, 98.0665)

    def test_mass_from_force(self):
        """Test that mass = force / acceleration comes back in grams."""
        mass = Force(9.80665, ForceUnit.NEWTONS) / Acceleration.GRAVITY
        self.assertIsInstance(mass, Mass)
        self.assertAlmostEqual(mass.grams, 1000.0)

    def test_acceleration_from_force(self):
        """Test acceleration = force / mass."""
        a = Force(10, ForceUnit.NEWTONS) / Mass(500, MassUnit.GRAMS)
        self.assertIsInstance(a, Acceleration)
        self.assertAlmostEqual(a.meters_per_second_squared, 20.0)

    def test_energy_budget(self):
        """Test energy and duration from power."""
        energy = Power(1, PowerUnit.KILOWATTS) * Duration(1, TimeUnit.HOURS)
        self.assertAlmostEqual(energy.megajoules, 3.6)
        runtime = Energy(1, EnergyUnit.KILOCALORIES) / Power(4.184, PowerUnit.WATTS)
        self.assertIsInstance(runtime, Duration)
        self.assertAlmostEqual(runtime.seconds, 1000.0)

    def test_pressure(self):
        """Test pressure = force / area."""
        p = Force(100, ForceUnit.NEWTONS) / Area(1, AreaUnit.SQUARE_CENTIMETERS)
        self.assertIsInstance(p, Pressure)
        self.assertAlmostEqual(p.bars, 10.0)


class TestElectricity(unittest.TestCase):
    """Test Ohm's law, electrical power and charge."""

    def test_led_current(self):
        """Test current through an LED series resistor."""
        led = Voltage(2, VoltageUnit.VOLTS) / Resistance.LED_220
        self.assertIsInstance(led, Current)
        self.assertAlmostEqual(led.milliamperes, 2000 / 220)

    def test_square_law_power(self):
        """Test P = I²R and P = V²/R."""
        current = Current(2, CurrentUnit.AMPERES)
        voltage = Voltage(12, VoltageUnit.VOLTS)
        resistance = Resistance(6, ResistanceUnit.OHMS)
        self.assertAlmostEqual(power_from_current_resistance(current, resistance).watts, 24.0)
        self.assertAlmostEqual(power_from_voltage_resistance(voltage, resistance).watts, 24.0)

    def test_square_law_resistance(self):
        """Test R = P/I² and R = V²/P."""
        power = Power(24, PowerUnit.WATTS)
        self.assertAlmostEqual(resistance_from_power_current(power, Current(2, CurrentUnit.AMPERES)).ohms, 6.0)
        self.assertAlmostEqual(resistance_from_voltage_power(Voltage(12, VoltageUnit.VOLTS), power).ohms, 6.0)

    def test_square_law_family_checks(self):
        """Test that the square-law functions check argument families."""
        with self.assertRaises(UnitFamilyError):
            power_from_current_resistance(Voltage(1, VoltageUnit.VOLTS), Resistance(1, ResistanceUnit.OHMS))
        with self.assertRaises(UnitFamilyError):
            resistance_from_voltage_power(Voltage(1, VoltageUnit.VOLTS), Current(1, CurrentUnit.AMPERES))

    def test_square_law_zero_divisor(self):
        """Test that a zero resistance gives infinite power."""
        p = power_from_voltage_resistance(Voltage(5, VoltageUnit.VOLTS), Resistance.zero)
        self.assertEqual(p.base_value, float("inf"))


class TestRotation(unittest.TestCase):
    """Test frequency, phase and angular speed relations."""

    def test_phase(self):
        """Test angle = 2π·f·t in both orders."""
        half_cycle = Frequency(50, FrequencyUnit.HERTZ) * Duration(10, TimeUnit.MILLISECONDS)
        self.assertIsInstance(half_cycle, Angle)
        self.assertAlmostEqual(half_cycle.degrees, 180.0)
        self.assertEqual(Duration(10, TimeUnit.MILLISECONDS) * Frequency(50, FrequencyUnit.HERTZ), half_cycle)

    def test_rotation_time(self):
        """Test duration = angle / angular speed."""
        t = Angle(1, AngleUnit.TURNS) / AngularSpeed(60, AngularSpeedUnit.RPM)
        self.assertIsInstance(t, Duration)
        self.assertAlmostEqual(t.seconds, 1.0)

    def test_tangential_speed(self):
        """Test v = ω·r."""
        rim = AngularSpeed(600, AngularSpeedUnit.RPM) * Length(30, LengthUnit.CENTIMETERS)
        self.assertIsInstance(rim, Speed)
        self.assertAlmostEqual(rim.meters_per_second, 20 * math.pi * 0.3)

    def test_period(self):
        """Test period as a float and as a duration."""
        f = Frequency(50, FrequencyUnit.HERTZ)
        self.assertAlmostEqual(f.period, 0.02)
        self.assertIsInstance(f.as_period, Duration)
        self.assertEqual(Frequency.zero.period, float("inf"))

    def test_duration_as_frequency(self):
        """Test 1/t."""
        f = Duration(20, TimeUnit.MILLISECONDS).as_frequency
        self.assertIsInstance(f, Frequency)
        self.assertAlmostEqual(f.hertz, 50.0)

    def test_cycles_in(self):
        """Test the number of cycles in a duration."""
        self.assertAlmostEqual(Frequency(50, FrequencyUnit.HERTZ).cycles_in(Duration(2, TimeUnit.SECONDS)), 100.0)
        with self.assertRaises(UnitFamilyError):
            Frequency(50, FrequencyUnit.HERTZ).cycles_in(Length(2, LengthUnit.METERS))

    def test_angular_speed_conversions(self):
        """Test ω = 2πf in both directions."""
        omega = AngularSpeed.from_frequency(Frequency(1, FrequencyUnit.HERTZ))
        self.assertAlmostEqual(omega.radians_per_second, 2 * math.pi)
        self.assertAlmostEqual(AngularSpeed(60, AngularSpeedUnit.RPM).hertz, 1.0)
        self.assertAlmostEqual(Frequency.from_angular_speed(omega).hertz, 1.0)
        with self.assertRaises(UnitFamilyError):
            Frequency.from_angular_speed(Length(1, LengthUnit.METERS))
        with self.assertRaises(UnitFamilyError):
            AngularSpeed.from_frequency(Duration(1, TimeUnit.SECONDS))


class TestScenarios(unittest.TestCase):
    """End-to-end scenarios."""

    def test_mains_period(self):
        """Test that 50 Hz has a 20 ms period."""
        self.assertAlmostEqual(Frequency(50, FrequencyUnit.HERTZ).as_period.milliseconds, 20.0)

    def test_newtons_second_law(self):
        """Test 10 kg at 2 m/s² is 20 N."""
        force = Mass(10, MassUnit.KILOGRAMS) * Acceleration(2, AccelerationUnit.METERS_PER_SECOND_SQUARED)
        self.assertIsInstance(force, Force)
        self.assertAlmostEqual(force.newtons, 20.0)

    def test_ohms_law_round_trip(self):
        """Test V / R -> I, then I * R -> V."""
        resistance = Resistance(100, ResistanceUnit.OHMS)
        current = Voltage(12, VoltageUnit.VOLTS) / resistance
        self.assertIsInstance(current, Current)
        voltage = current * resistance
        self.assertIsInstance(voltage, Voltage)
        self.assertAlmostEqual(voltage.volts, 12.0)

    def test_battery_runtime(self):
        """Test 5000 mAh at 500 mA lasts 10 hours."""
        runtime = Charge.from_milliampere_hours(5000) / Current(500, CurrentUnit.MILLIAMPERES)
        self.assertIsInstance(runtime, Duration)
        self.assertAlmostEqual(runtime.hours, 10.0)

    def test_rotation_frequency(self):
        """Test 2π rad/s is 1 Hz, and back."""
        f = AngularSpeed(2 * math.pi, AngularSpeedUnit.RADIANS_PER_SECOND).as_frequency
        self.assertAlmostEqual(f.hertz, 1.0)
        self.assertAlmostEqual(f.as_angular_speed.radians_per_second, 2 * math.pi)


if __name__ == "__main__":
    unittest.main()
