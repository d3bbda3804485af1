"""
Units (:mod:`pyqm.units`)
=========================

.. currentmodule:: pyqm.units

Units-aware quantities and associated functions.

Examples
--------

Units of measure are closed enumerations, one per category: length,
weight, volume and temperature.  Each unit converts to and from the
base unit of its category (feet, kilogram, litre and Celsius
respectively):

>>> LengthUnit.YARD.to_base(1.0)
3.0
>>> LengthUnit.FEET.convert(LengthUnit.INCH, 2.0)
24.0

Creation of quantities is done using the factory function ``qty()`` in
a natural way, and gives a ``Quantity`` object as a result:

>>> length = qty(1, LengthUnit.YARD)
>>> length.convert_to(LengthUnit.FEET)
qty(3.0, LengthUnit.FEET)

Quantities compare equal if their base unit values are within a small
tolerance (default 1e-6), because unit conversions introduce floating
point rounding:

>>> qty(1, LengthUnit.YARD) == qty(3, LengthUnit.FEET)
True
>>> qty(1, LengthUnit.YARD) == qty(3.01, LengthUnit.FEET)
False

Addition and subtraction give the result in the units of the LHS,
unless another target unit is given.  Division gives a plain ratio:

>>> qty(2, LengthUnit.YARD) + qty(36, LengthUnit.INCH)
qty(3.0, LengthUnit.YARD)
>>> qty(2, LengthUnit.YARD).add(qty(36, LengthUnit.INCH),
...                            LengthUnit.CENTIMETER)
qty(274.32, LengthUnit.CENTIMETER)
>>> qty(10, VolumeUnit.LITRE) / qty(5000, VolumeUnit.MILLILITRE)
2.0

Temperature values are a special case.  Because °C and °F are offset
scales, conversions are not a simple factor and adding, subtracting or
dividing two temperatures is not allowed.  Temperatures can only be
converted and compared:

>>> qty(100, TemperatureUnit.CELSIUS).convert_to(TemperatureUnit.KELVIN)
qty(373.15, TemperatureUnit.KELVIN)
>>> qty(25, TemperatureUnit.CELSIUS) + qty(5, TemperatureUnit.CELSIUS)
... # doctest: +ELLIPSIS, +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
pyqm.exception.UnsupportedOperation: Temperature units do not support
addition.

``Quantity`` objects supports any format statements that can be used
directly on their numeric value:

>>> print(f"Mass = {qty(2.5, WeightUnit.POUND):.2f}")
Mass = 2.50 lb

"""

from ._base import (Category, FormulaUnit, LinearUnit, Measurable,
                    check_value)
from ._defs import LengthUnit, TemperatureUnit, VolumeUnit, WeightUnit
from ._opts import (QuantityOptions, get_quantity_options,
                    quantity_options, set_quantity_options)
from ._qty import Quantity, qty

UNIT_TYPES = (LengthUnit, WeightUnit, VolumeUnit, TemperatureUnit)
