from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose
import pytest

from pyqm.service import MeasurementService
from pyqm.units import (LengthUnit as L, TemperatureUnit as T,
                        VolumeUnit as V, WeightUnit as W, qty)

# Written by Eric J. Whitney, March 2024.


# ======================================================================

# noinspection PyUnusedLocal
class TestMeasurementService(TestCase):
    def setUp(self):
        self.service = MeasurementService()

    def test_parse_quantity(self):
        x = self.service.parse_quantity('2', L.FEET)
        self.assertEqual(x.value, 2.0)
        self.assertIs(x.unit, L.FEET)

        x = self.service.parse_quantity(' -4.5 ', T.KELVIN)
        self.assertEqual(x.value, -4.5)

        # Bad input gives None.
        for text in (None, '', '  ', 'abc', '2 ft'):
            self.assertIsNone(self.service.parse_quantity(text, L.FEET))

        # Non-finite numbers are also bad input.
        for text in ('nan', 'inf', '-Infinity'):
            self.assertIsNone(self.service.parse_quantity(text, W.GRAM))

    def test_are_equal(self):
        s = self.service
        self.assertTrue(s.are_equal(qty(1, L.YARD), qty(3, L.FEET)))
        self.assertFalse(s.are_equal(qty(1, L.YARD), qty(3.01, L.FEET)))
        self.assertTrue(s.are_equal(qty(-40, T.CELSIUS),
                                    qty(-40, T.FAHRENHEIT)))
        self.assertFalse(s.are_equal(None, qty(3, L.FEET)))
        self.assertFalse(s.are_equal(qty(3, L.FEET), None))
        self.assertFalse(s.are_equal(None, None))

        self.assertFalse(s.are_different_categories_equal(
            qty(1, L.FEET), qty(1, W.KILOGRAM)))

    def test_convert_value(self):
        from pyqm.exception import InvalidValue

        s = self.service
        self.assertAlmostEqual(s.convert_value(1, L.FEET, L.INCH), 12.0)
        self.assertAlmostEqual(s.convert_value(2, W.KILOGRAM, W.GRAM),
                               2000.0)
        self.assertAlmostEqual(s.convert_value(1, V.GALLON, V.LITRE),
                               3.78541)
        self.assertAlmostEqual(s.convert_value(100, T.CELSIUS,
                                               T.FAHRENHEIT), 212.0)

        with self.assertRaises(InvalidValue):
            s.convert_value(float('nan'), L.FEET, L.INCH)

    def test_convert_values(self):
        from pyqm.exception import InvalidValue

        res = self.service.convert_values([1, 2, 3], L.YARD, L.FEET)
        self.assertIsInstance(res, np.ndarray)
        assert_allclose(res, [3.0, 6.0, 9.0])

        assert_allclose(self.service.convert_values(
            [0.0, 100.0], T.CELSIUS, T.KELVIN), [273.15, 373.15])

        with self.assertRaises(InvalidValue):
            self.service.convert_values([1.0, np.inf], L.YARD, L.FEET)

    def test_add(self):
        from pyqm.exception import NullArgument, UnsupportedOperation

        s = self.service
        x = s.add(qty(2, L.YARD), qty(36, L.INCH))
        self.assertIs(x.unit, L.YARD)
        self.assertAlmostEqual(x.value, 3.0)

        for target, expected in ((L.YARD, 3.0), (L.FEET, 9.0),
                                 (L.CENTIMETER, 274.32)):
            x = s.add_with_target(qty(2, L.YARD), qty(36, L.INCH), target)
            self.assertIs(x.unit, target)
            self.assertAlmostEqual(x.value, expected)

        x = s.add_with_target(qty(2, W.KILOGRAM), qty(2000, W.GRAM),
                              W.KILOGRAM)
        self.assertAlmostEqual(x.value, 4.0)
        x = s.add_with_target(qty(2, V.LITRE), qty(1000, V.MILLILITRE),
                              V.LITRE)
        self.assertAlmostEqual(x.value, 3.0)

        with self.assertRaises(NullArgument):
            s.add(None, qty(1, L.FEET))
        with self.assertRaises(NullArgument):
            s.add_with_target(qty(1, L.FEET), None, L.FEET)

        with self.assertRaises(UnsupportedOperation):
            s.add(qty(1, T.CELSIUS), qty(1, T.CELSIUS))
        with self.assertRaises(UnsupportedOperation):
            s.add_with_target(qty(1, T.CELSIUS), qty(1, T.KELVIN),
                              T.KELVIN)

    def test_subtract_divide(self):
        from pyqm.exception import (DivisionByZero, NullArgument,
                                    UnsupportedOperation)

        s = self.service
        x = s.subtract(qty(3, L.FEET), qty(12, L.INCH))
        self.assertAlmostEqual(x.value, 2.0)
        x = s.subtract(qty(3, L.FEET), qty(12, L.INCH), L.INCH)
        self.assertAlmostEqual(x.value, 24.0)
        self.assertAlmostEqual(s.divide(qty(4, W.POUND), qty(2, W.POUND)),
                               2.0)

        with self.assertRaises(NullArgument):
            s.divide(qty(1, L.FEET), None)
        with self.assertRaises(DivisionByZero):
            s.divide(qty(1, L.FEET), qty(0, L.INCH))
        with self.assertRaises(UnsupportedOperation):
            s.subtract(qty(1, T.FAHRENHEIT), qty(1, T.FAHRENHEIT))
        with self.assertRaises(UnsupportedOperation):
            s.divide(qty(1, T.KELVIN), qty(1, T.KELVIN))


# ----------------------------------------------------------------------

@pytest.mark.parametrize('text, unit, expected', [
    ('2', L.INCH, 2.0),
    ('0.5', W.POUND, 0.5),
    ('1e-3', V.LITRE, 0.001),
    ('-273.15', T.CELSIUS, -273.15),
])
def test_parse_then_convert(text, unit, expected):
    q = MeasurementService.parse_quantity(text, unit)
    assert q.value == pytest.approx(expected)
    for target in type(unit):
        assert q.convert_to(target) == q

# ======================================================================
