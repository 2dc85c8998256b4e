"""
Tests for the SI prefix table and metric unit composition.
"""

import unittest

from physunits import LengthUnit, MassUnit, MetricPrefix, VoltageUnit
from physunits.core import Gram, Meter


class TestMetricPrefix(unittest.TestCase):
    """Test MetricPrefix enumeration."""

    def test_table_size(self):
        """Test that the table holds fifteen prefixes, peta to femto."""
        self.assertEqual(len(MetricPrefix), 15)
        self.assertIs(list(MetricPrefix)[0], MetricPrefix.PETA)
        self.assertIs(list(MetricPrefix)[-1], MetricPrefix.FEMTO)

    def test_kilo_factor_is_exact(self):
        """Test that the kilo factor is exactly 1000."""
        self.assertEqual(MetricPrefix.KILO.factor, 1000.0)
        self.assertEqual(MetricPrefix.MILLI.factor, 1e-3)

    def test_factor_matches_exponent(self):
        """Test factor == 10**exponent, bit for bit, for every prefix."""
        for prefix in MetricPrefix:
            with self.subTest(prefix=prefix.name):
                self.assertEqual(prefix.factor, float(f"1e{prefix.exponent}"))

    def test_lookup_by_multiplier(self):
        """Test that a multiplier identifies exactly one prefix."""
        self.assertIs(MetricPrefix(1e-9), MetricPrefix.NANO)
        self.assertIs(MetricPrefix(1e3), MetricPrefix.KILO)
        self.assertEqual(len({p.factor for p in MetricPrefix}), 15)

    def test_symbols(self):
        """Test prefix symbols, including the two-letter deca."""
        self.assertEqual(MetricPrefix.MICRO.symbol, "μ")
        self.assertEqual(MetricPrefix.DECA.symbol, "da")
        self.assertEqual(MetricPrefix.BASE.symbol, "")
        self.assertEqual(MetricPrefix.PETA.symbol, "P")

    def test_names(self):
        """Test prefix names and string form."""
        self.assertEqual(MetricPrefix.KILO.full_name, "kilo")
        self.assertEqual(MetricPrefix.BASE.full_name, "")
        self.assertEqual(str(MetricPrefix.MEGA), "mega")
        self.assertEqual(str(MetricPrefix.BASE), "(base)")


class TestMetricUnit(unittest.TestCase):
    """Test composition of a prefix with a base-unit marker."""

    def test_symbol_and_coefficient(self):
        """Test that symbol and coefficient come from prefix and marker."""
        kg = MassUnit.kilo()
        self.assertEqual(kg.symbol, "kg")
        self.assertEqual(kg.coefficient_to_base, 1000.0)
        self.assertEqual(str(LengthUnit.MICROMETERS), "μm")
        self.assertEqual(VoltageUnit.MEGAVOLTS.symbol, "MV")

    def test_base_markers(self):
        """Test that each family is bound to one marker."""
        self.assertIs(MassUnit.BASE, Gram)
        self.assertIs(LengthUnit.BASE, Meter)

    def test_equality_by_prefix(self):
        """Test that units of one family are equal iff prefixes are equal."""
        self.assertEqual(MassUnit.kilo(), MassUnit.KILOGRAMS)
        self.assertEqual(MassUnit(MetricPrefix.KILO), MassUnit.KILOGRAMS)
        self.assertNotEqual(MassUnit.kilo(), MassUnit.milli())
        self.assertEqual(hash(MassUnit.kilo()), hash(MassUnit.KILOGRAMS))

    def test_families_never_unify(self):
        """Test that units of different families with the same prefix differ."""
        self.assertNotEqual(MassUnit.kilo(), LengthUnit.kilo())

    def test_factories(self):
        """Test every named factory."""
        expected = {
            "base": 1.0,
            "kilo": 1e3,
            "milli": 1e-3,
            "micro": 1e-6,
            "nano": 1e-9,
            "centi": 1e-2,
            "mega": 1e6,
            "giga": 1e9,
        }
        for name, factor in expected.items():
            with self.subTest(factory=name):
                self.assertEqual(getattr(LengthUnit, name)().coefficient_to_base, factor)

    def test_frozen(self):
        """Test that units are immutable."""
        with self.assertRaises(AttributeError):
            MassUnit.GRAMS.prefix = MetricPrefix.KILO


if __name__ == "__main__":
    unittest.main()
